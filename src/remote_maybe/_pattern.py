"""Pattern resolution shared by Maybe.match and RemoteData.match.

A pattern is a mapping from case names to handlers, plus an optional fallback
keyed ``'_'``. For the active case the matching handler is called with the
variant's payload (nothing for payload-less variants); otherwise the fallback is
called with no arguments; otherwise the pattern is incomplete.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from remote_maybe._config import get_config
from remote_maybe._logging import get_logger, logging_configured
from remote_maybe.errors import IncompletePatternError, UnknownCaseError

__all__ = ['FALLBACK', 'Pattern', 'resolve']

FALLBACK = '_'

type Pattern[R] = Mapping[str, Callable[..., R] | None]
"""Case name (or ``'_'``) to handler. A None handler counts as missing."""

logger = get_logger(__name__)


def _check_pattern(pattern: object, cases: tuple[str, ...], container: str) -> None:
    if not isinstance(pattern, Mapping):
        msg = f'{container} pattern must be a mapping of case names to handlers, got {type(pattern).__name__}'
        raise TypeError(msg)
    unknown = tuple(key for key in pattern if key != FALLBACK and key not in cases)
    if unknown:
        if logging_configured():
            logger.debug('pattern.unknown_case', container=container, names=unknown)
        raise UnknownCaseError(unknown, container)


def resolve[R](
    pattern: Pattern[R],
    case: str,
    *payload: Any,
    cases: tuple[str, ...],
    container: str,
) -> R | None:
    """Run the handler ``pattern`` selects for the active ``case``.

    Args:
        pattern: Mapping of case names (and optionally ``'_'``) to handlers.
        case: Case name of the active variant.
        *payload: The variant's payload, passed to the case handler.
        cases: Every case name of the container, for validating the pattern.
        container: Container name used in errors and log events.

    Returns:
        The handler's result. None only when neither handler exists and
        strict patterns are disabled.

    Raises:
        TypeError: If ``pattern`` is not a mapping.
        UnknownCaseError: If ``pattern`` has keys that are not cases.
        IncompletePatternError: If neither the case nor ``'_'`` has a handler
            and strict patterns are enabled (the default).
    """
    _check_pattern(pattern, cases, container)

    handler = pattern.get(case)
    if handler is not None:
        return handler(*payload)

    fallback = pattern.get(FALLBACK)
    if fallback is not None:
        if logging_configured():
            logger.debug('pattern.fallback', container=container, case=case)
        return fallback()

    handled = tuple(key for key, value in pattern.items() if value is not None)
    if not get_config().strict_patterns:
        if logging_configured():
            logger.debug('pattern.unhandled', container=container, case=case, handlers=handled)
        return None

    if logging_configured():
        logger.debug('pattern.incomplete', container=container, case=case, handlers=handled)
    raise IncompletePatternError(case, handled)
