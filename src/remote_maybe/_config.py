"""Library configuration: Settings, init() and lazy environment defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from remote_maybe._logging import configure_logging

__all__ = [
    'Settings',
    'get_config',
    'init',
    'reset',
]

_TRUE = frozenset({'1', 'true', 'yes', 'on'})
_FALSE = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class Settings:
    """Configuration for remote_maybe.

    Attributes:
        strict_patterns: If True, ``match`` raises IncompletePatternError when
            neither the active case nor ``'_'`` has a handler. If False it
            returns None instead.
        log_level: Logging level (e.g., "DEBUG"). None = silent.
    """

    strict_patterns: bool = True
    log_level: str | None = None


# Global settings (set by init() or lazily by get_config())
_config: Settings | None = None


def _env_strict_patterns() -> bool | None:
    raw = os.environ.get('REMOTE_MAYBE_STRICT_PATTERNS', '').strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    if raw:
        logging.warning("Unknown REMOTE_MAYBE_STRICT_PATTERNS value '%s', ignoring", raw)
    return None


def _env_log_level() -> str | None:
    raw = os.environ.get('REMOTE_MAYBE_LOG_LEVEL', '').strip().upper()
    if not raw:
        return None
    if raw not in logging.getLevelNamesMapping():
        logging.warning("Unknown REMOTE_MAYBE_LOG_LEVEL value '%s', ignoring", raw)
        return None
    return raw


def init(
    strict_patterns: bool | None = None,
    log_level: str | None = None,
) -> Settings:
    """Initialize remote_maybe with the given settings.

    Each setting is taken from its argument, else from the environment
    (``REMOTE_MAYBE_STRICT_PATTERNS``, ``REMOTE_MAYBE_LOG_LEVEL``), else the
    default.

    Args:
        strict_patterns: Fail fast on incomplete patterns. Defaults to True.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The Settings that were set.

    Example:
        ```python
        import remote_maybe

        remote_maybe.init(log_level='DEBUG')
        remote_maybe.init(strict_patterns=False)
        ```
    """
    global _config  # noqa: PLW0603

    if strict_patterns is None:
        env_strict = _env_strict_patterns()
        strict_patterns = True if env_strict is None else env_strict
    if log_level is None:
        log_level = _env_log_level()

    _config = Settings(strict_patterns=strict_patterns, log_level=log_level)

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> Settings:
    """Get the current settings, initializing from the environment if needed.

    Example:
        ```python
        from remote_maybe import get_config

        get_config().strict_patterns  # True
        ```
    """
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Forget the current settings so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
