"""Maybe type: Present[T] | Absent for values that may not exist.

Every operation is total: nothing here raises for a well-formed Maybe, and a
transformation always returns a new Maybe instead of mutating one.

Module functions take the container last and are curried, so they can be
used directly or partially applied inside a pipeline:

Example:
    ```python
    from remote_maybe import maybe, pipe

    maybe.map(lambda x: x + 1, maybe.present(41))
    # Present(value=42)

    display = pipe(maybe.map(str.title), maybe.with_default('anonymous'))
    display(maybe.present('ada lovelace'))  # 'Ada Lovelace'
    display(maybe.absent())  # 'anonymous'

    maybe.match({'present': len, 'absent': lambda: 0}, maybe.present('abc'))
    # 3
    ```

Variants also support Python's ``match`` statement:

    ```python
    match value:
        case Present(inner):
            ...
        case AbsentType():
            ...
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

import msgspec

from remote_maybe._pattern import Pattern, resolve
from remote_maybe.compose.curry import curry

__all__ = [
    'CASES',
    'Absent',
    'AbsentType',
    'Maybe',
    'Present',
    'absent',
    'and_then',
    'from_optional',
    'is_absent',
    'is_present',
    'map',
    'match',
    'present',
    'with_default',
]

CASES = ('present', 'absent')
"""Case names accepted in a Maybe pattern (besides the ``'_'`` fallback)."""


class Present[T](msgspec.Struct, frozen=True):
    """Present variant of Maybe containing a value of type T.

    ``Present(None)`` is a present value; it is never equal to Absent.

    Examples:
        >>> Present(42).map(lambda x: x * 2)
        Present(value=84)
        >>> Present(42).with_default(0)
        42
    """

    value: T

    def is_present(self) -> TypeIs[Present[T]]:
        """Return True since this is Present."""
        return True

    def is_absent(self) -> TypeIs[AbsentType]:
        """Return False since this is Present."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Present[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            Present containing the result of applying f to the value.
        """
        return Present(f(self.value))

    def and_then[U](self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Apply a function that returns a Maybe to the contained value.

        Also known as flatmap or bind. The function may return Absent, which
        short-circuits the rest of a chain.

        Args:
            f: Function that takes T and returns Maybe[U].

        Returns:
            The Maybe returned by f.
        """
        return f(self.value)

    def with_default(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def match[R](self, pattern: Pattern[R]) -> R:
        """Call the ``'present'`` handler with the value (or the ``'_'`` fallback).

        Args:
            pattern: Mapping with ``'present'``, ``'absent'`` and/or ``'_'`` handlers.

        Returns:
            The selected handler's result.

        Raises:
            IncompletePatternError: If neither ``'present'`` nor ``'_'`` is handled.
            UnknownCaseError: If the pattern names a case Maybe does not have.
        """
        return resolve(pattern, 'present', self.value, cases=CASES, container='Maybe')  # type: ignore[return-value]


class AbsentType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Maybe representing the lack of a value.

    Use the ``Absent`` singleton instead of instantiating directly; every
    instance compares equal to it anyway.

    Examples:
        >>> Absent.map(lambda x: x * 2)
        Absent
        >>> Absent.with_default(0)
        0
    """

    def __repr__(self) -> str:
        return 'Absent'

    def is_present(self) -> TypeIs[Present[Any]]:
        """Return False since this is Absent."""
        return False

    def is_absent(self) -> TypeIs[AbsentType]:
        """Return True since this is Absent."""
        return True

    def map[T, U](self, _f: Callable[[T], U]) -> AbsentType:
        """Return Absent without calling the function."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Maybe[U]]) -> AbsentType:
        """Return Absent without calling the function."""
        return self

    def with_default[T](self, default: T) -> T:
        """Return the default since there is no value."""
        return default

    def match[R](self, pattern: Pattern[R]) -> R:
        """Call the ``'absent'`` handler (or the ``'_'`` fallback) with no arguments.

        Raises:
            IncompletePatternError: If neither ``'absent'`` nor ``'_'`` is handled.
            UnknownCaseError: If the pattern names a case Maybe does not have.
        """
        return resolve(pattern, 'absent', cases=CASES, container='Maybe')  # type: ignore[return-value]


Absent: AbsentType = AbsentType()
"""Singleton instance representing the absence of a value."""


type Maybe[T] = Present[T] | AbsentType


def _ensure_maybe(m: object, operation: str) -> Maybe[Any]:
    if isinstance(m, Present | AbsentType):
        return m
    msg = f'{operation}() expected a Maybe (Present or Absent), got {type(m).__name__}'
    raise TypeError(msg)


# ---------------------------------------------------------------------
# Constructors and predicates (not curried)
# ---------------------------------------------------------------------


def absent() -> AbsentType:
    """Return the Absent singleton."""
    return Absent


def present[T](value: T) -> Present[T]:
    """Wrap a value in Present.

    Args:
        value: The value to wrap. None is wrapped like any other value.

    Returns:
        Present containing the value.
    """
    return Present(value)


def from_optional[T](value: T | None) -> Maybe[T]:
    """Convert an optional value to Maybe.

    Args:
        value: The value that may be None.

    Returns:
        Present(value) if value is not None, otherwise Absent.
    """
    return Absent if value is None else Present(value)


def is_present(m: object) -> TypeIs[Present[Any]]:
    """Return True if ``m`` is Present."""
    return isinstance(m, Present)


def is_absent(m: object) -> TypeIs[AbsentType]:
    """Return True if ``m`` is Absent."""
    return isinstance(m, AbsentType)


# ---------------------------------------------------------------------
# Operations (curried: f(a, m) == f(a)(m))
# ---------------------------------------------------------------------


@curry
def map(fn: Callable[[Any], Any], m: Maybe[Any]) -> Maybe[Any]:  # noqa: A001
    """Transform the value of a Maybe if present.

    Args:
        fn: Function to apply to the value. Never called on Absent.
        m: The Maybe to transform.

    Returns:
        Present(fn(value)) if m is Present, otherwise Absent.
    """
    return _ensure_maybe(m, 'map').map(fn)


@curry
def and_then(fn: Callable[[Any], Maybe[Any]], m: Maybe[Any]) -> Maybe[Any]:
    """Chain a computation that may itself produce Absent.

    Args:
        fn: Function that takes the value and returns a Maybe. Never called
            on Absent.
        m: The Maybe to chain from.

    Returns:
        fn(value) if m is Present, otherwise Absent.
    """
    return _ensure_maybe(m, 'and_then').and_then(fn)


@curry
def with_default(default: Any, m: Maybe[Any]) -> Any:
    """Return the value of a Maybe, or ``default`` when it is Absent."""
    return _ensure_maybe(m, 'with_default').with_default(default)


@curry
def match(pattern: Pattern[Any], m: Maybe[Any]) -> Any:
    """Dispatch on the variant of a Maybe.

    Args:
        pattern: Mapping with ``'present'`` (called with the value),
            ``'absent'`` (called with no arguments) and/or ``'_'`` fallback.
        m: The Maybe to match.

    Returns:
        The selected handler's result.

    Raises:
        IncompletePatternError: If the active case has no handler and there
            is no ``'_'`` fallback.
        UnknownCaseError: If the pattern names a case Maybe does not have.
    """
    return _ensure_maybe(m, 'match').match(pattern)
