"""RemoteData type: NotAsked | Loading | Failed[E] | Succeeded[S].

Represents the phases of an operation performed somewhere else: not started,
in flight, finished with an error, finished with a value. The library never
runs the operation; the caller re-wraps each phase as a new RemoteData value.

Failure is data: ``Failed(error)`` carries any error value (an exception by
default) and flows through ``map`` and ``and_then`` untouched.

Example:
    ```python
    from remote_maybe import pipe, remote_data as rd

    state = rd.not_asked()
    state = rd.loading()
    state = rd.succeeded({'name': 'Ada'})

    render = pipe(
        rd.map(lambda user: user['name']),
        rd.match({
            'succeeded': lambda name: f'Hello {name}',
            'failed': lambda err: f'Error: {err}',
            '_': lambda: 'Loading...',
        }),
    )
    render(state)  # 'Hello Ada'
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
    'Failed',
    'Loading',
    'LoadingType',
    'NotAsked',
    'NotAskedType',
    'RemoteData',
    'Succeeded',
    'and_then',
    'failed',
    'from_callable',
    'is_failed',
    'is_loading',
    'is_not_asked',
    'is_settled',
    'is_succeeded',
    'loading',
    'map',
    'map_error',
    'match',
    'not_asked',
    'succeeded',
    'with_default',
]

CASES = ('not_asked', 'loading', 'failed', 'succeeded')
"""Case names accepted in a RemoteData pattern (besides the ``'_'`` fallback)."""

_CONTAINER = 'RemoteData'


class _Pending(msgspec.Struct, frozen=True, gc=False):
    """Behaviour shared by the two payload-less, unfinished variants."""

    def is_failed(self) -> bool:
        """Return False since the operation has not finished."""
        return False

    def is_succeeded(self) -> bool:
        """Return False since the operation has not finished."""
        return False

    def is_settled(self) -> bool:
        """Return False since the operation has not finished."""
        return False

    def map(self, _f: Callable[[Any], Any]) -> Any:
        """Return self without calling the function."""
        return self

    def map_error(self, _f: Callable[[Any], Any]) -> Any:
        """Return self without calling the function."""
        return self

    def and_then(self, _f: Callable[[Any], Any]) -> Any:
        """Return self without calling the function."""
        return self

    def with_default[S](self, default: S) -> S:
        """Return the default since there is no value yet."""
        return default


class NotAskedType(_Pending, frozen=True, gc=False):
    """NotAsked variant: the operation has not been started.

    Use the ``NotAsked`` singleton instead of instantiating directly.
    """

    def __repr__(self) -> str:
        return 'NotAsked'

    def is_not_asked(self) -> TypeIs[NotAskedType]:
        """Return True since this is NotAsked."""
        return True

    def is_loading(self) -> TypeIs[LoadingType]:
        """Return False since this is NotAsked."""
        return False

    def match[R](self, pattern: Pattern[R]) -> R:
        """Call the ``'not_asked'`` handler (or ``'_'``) with no arguments."""
        return resolve(pattern, 'not_asked', cases=CASES, container=_CONTAINER)  # type: ignore[return-value]


class LoadingType(_Pending, frozen=True, gc=False):
    """Loading variant: the operation is in flight.

    Use the ``Loading`` singleton instead of instantiating directly.
    """

    def __repr__(self) -> str:
        return 'Loading'

    def is_not_asked(self) -> TypeIs[NotAskedType]:
        """Return False since this is Loading."""
        return False

    def is_loading(self) -> TypeIs[LoadingType]:
        """Return True since this is Loading."""
        return True

    def match[R](self, pattern: Pattern[R]) -> R:
        """Call the ``'loading'`` handler (or ``'_'``) with no arguments."""
        return resolve(pattern, 'loading', cases=CASES, container=_CONTAINER)  # type: ignore[return-value]


class Failed[E](msgspec.Struct, frozen=True):
    """Failed variant: the operation finished with an error of type E.

    Examples:
        >>> Failed(ValueError('boom')).map(lambda x: x + 1)
        Failed(error=ValueError('boom'))
        >>> Failed('timeout').with_default(0)
        0
    """

    error: E

    def is_not_asked(self) -> TypeIs[NotAskedType]:
        return False

    def is_loading(self) -> TypeIs[LoadingType]:
        return False

    def is_failed(self) -> TypeIs[Failed[E]]:
        """Return True since this is Failed."""
        return True

    def is_succeeded(self) -> TypeIs[Succeeded[Any]]:
        return False

    def is_settled(self) -> bool:
        """Return True since the operation has finished."""
        return True

    def map(self, _f: Callable[[Any], Any]) -> Failed[E]:
        """Return self without calling the function."""
        return self

    def map_error[F](self, f: Callable[[E], F]) -> Failed[F]:
        """Transform the error.

        Args:
            f: Function to apply to the error.

        Returns:
            Failed containing the transformed error.
        """
        return Failed(f(self.error))

    def and_then(self, _f: Callable[[Any], Any]) -> Failed[E]:
        """Return self without calling the function."""
        return self

    def with_default[S](self, default: S) -> S:
        """Return the default; a failure has no value."""
        return default

    def match[R](self, pattern: Pattern[R]) -> R:
        """Call the ``'failed'`` handler with the error (or ``'_'`` with nothing)."""
        return resolve(pattern, 'failed', self.error, cases=CASES, container=_CONTAINER)  # type: ignore[return-value]


class Succeeded[S](msgspec.Struct, frozen=True):
    """Succeeded variant: the operation finished with a value of type S.

    Examples:
        >>> Succeeded(21).map(lambda x: x * 2)
        Succeeded(value=42)
        >>> Succeeded(21).with_default(0)
        21
    """

    value: S

    def is_not_asked(self) -> TypeIs[NotAskedType]:
        return False

    def is_loading(self) -> TypeIs[LoadingType]:
        return False

    def is_failed(self) -> TypeIs[Failed[Any]]:
        return False

    def is_succeeded(self) -> TypeIs[Succeeded[S]]:
        """Return True since this is Succeeded."""
        return True

    def is_settled(self) -> bool:
        """Return True since the operation has finished."""
        return True

    def map[U](self, f: Callable[[S], U]) -> Succeeded[U]:
        """Apply a function to the value.

        Args:
            f: Function to apply to the value.

        Returns:
            Succeeded containing the result of applying f to the value.
        """
        return Succeeded(f(self.value))

    def map_error(self, _f: Callable[[Any], Any]) -> Succeeded[S]:
        """Return self without calling the function."""
        return self

    def and_then[U, E](self, f: Callable[[S], RemoteData[U, E]]) -> RemoteData[U, E]:
        """Chain another RemoteData-producing step on the value.

        Args:
            f: Function that takes the value and returns any RemoteData variant.

        Returns:
            The RemoteData returned by f.
        """
        return f(self.value)

    def with_default(self, default: S) -> S:  # noqa: ARG002
        """Return the value, ignoring the default."""
        return self.value

    def match[R](self, pattern: Pattern[R]) -> R:
        """Call the ``'succeeded'`` handler with the value (or ``'_'`` with nothing)."""
        return resolve(pattern, 'succeeded', self.value, cases=CASES, container=_CONTAINER)  # type: ignore[return-value]


NotAsked: NotAskedType = NotAskedType()
"""Singleton instance for an operation that has not been started."""

Loading: LoadingType = LoadingType()
"""Singleton instance for an operation in flight."""


type RemoteData[S, E = Exception] = NotAskedType | LoadingType | Failed[E] | Succeeded[S]


def _ensure_remote_data(r: object, operation: str) -> RemoteData[Any, Any]:
    if isinstance(r, NotAskedType | LoadingType | Failed | Succeeded):
        return r
    msg = f'{operation}() expected a RemoteData (NotAsked, Loading, Failed or Succeeded), got {type(r).__name__}'
    raise TypeError(msg)


# ---------------------------------------------------------------------
# Constructors and predicates (not curried)
# ---------------------------------------------------------------------


def not_asked() -> NotAskedType:
    """Return the NotAsked singleton."""
    return NotAsked


def loading() -> LoadingType:
    """Return the Loading singleton."""
    return Loading


def succeeded[S](value: S) -> Succeeded[S]:
    """Wrap a success value in Succeeded."""
    return Succeeded(value)


def failed[E](error: E) -> Failed[E]:
    """Wrap an error value in Failed."""
    return Failed(error)


def from_callable[S](fn: Callable[..., S], /, *args: Any, **kwargs: Any) -> Failed[Exception] | Succeeded[S]:
    """Call ``fn`` now and capture how it finished.

    Args:
        fn: Synchronous callable to run.
        *args: Positional arguments for fn.
        **kwargs: Keyword arguments for fn.

    Returns:
        Succeeded(result) if fn returned, Failed(exc) if it raised an Exception.

    Example:
        ```python
        from_callable(int, '42')  # Succeeded(value=42)
        from_callable(int, 'x')  # Failed(error=ValueError(...))
        ```
    """
    try:
        return Succeeded(fn(*args, **kwargs))
    except Exception as exc:
        return Failed(exc)


def is_not_asked(r: object) -> TypeIs[NotAskedType]:
    """Return True if ``r`` is NotAsked."""
    return isinstance(r, NotAskedType)


def is_loading(r: object) -> TypeIs[LoadingType]:
    """Return True if ``r`` is Loading."""
    return isinstance(r, LoadingType)


def is_failed(r: object) -> TypeIs[Failed[Any]]:
    """Return True if ``r`` is Failed."""
    return isinstance(r, Failed)


def is_succeeded(r: object) -> TypeIs[Succeeded[Any]]:
    """Return True if ``r`` is Succeeded."""
    return isinstance(r, Succeeded)


def is_settled(r: object) -> TypeIs[Failed[Any] | Succeeded[Any]]:
    """Return True if ``r`` is Failed or Succeeded."""
    return isinstance(r, Failed | Succeeded)


# ---------------------------------------------------------------------
# Operations (curried: f(a, r) == f(a)(r))
# ---------------------------------------------------------------------


@curry
def map(fn: Callable[[Any], Any], r: RemoteData[Any, Any]) -> RemoteData[Any, Any]:  # noqa: A001
    """Transform the value of a Succeeded; pass every other variant through.

    Args:
        fn: Function to apply to the success value. Never called on
            NotAsked, Loading or Failed.
        r: The RemoteData to transform.

    Returns:
        Succeeded(fn(value)) if r is Succeeded, otherwise r unchanged.
    """
    return _ensure_remote_data(r, 'map').map(fn)


@curry
def map_error(fn: Callable[[Any], Any], r: RemoteData[Any, Any]) -> RemoteData[Any, Any]:
    """Transform the error of a Failed; pass every other variant through."""
    return _ensure_remote_data(r, 'map_error').map_error(fn)


@curry
def and_then(fn: Callable[[Any], RemoteData[Any, Any]], r: RemoteData[Any, Any]) -> RemoteData[Any, Any]:
    """Chain a RemoteData-producing step on a Succeeded value.

    Args:
        fn: Function that takes the value and returns any RemoteData variant.
            Never called on NotAsked, Loading or Failed.
        r: The RemoteData to chain from.

    Returns:
        fn(value) if r is Succeeded, otherwise r unchanged.
    """
    return _ensure_remote_data(r, 'and_then').and_then(fn)


@curry
def with_default(default: Any, r: RemoteData[Any, Any]) -> Any:
    """Return the Succeeded value, or ``default`` for NotAsked, Loading and Failed."""
    return _ensure_remote_data(r, 'with_default').with_default(default)


@curry
def match(pattern: Pattern[Any], r: RemoteData[Any, Any]) -> Any:
    """Dispatch on the variant of a RemoteData.

    Args:
        pattern: Mapping with any of ``'not_asked'``, ``'loading'`` (called
            with no arguments), ``'failed'`` (called with the error),
            ``'succeeded'`` (called with the value) and the ``'_'`` fallback.
        r: The RemoteData to match.

    Returns:
        The selected handler's result.

    Raises:
        IncompletePatternError: If the active case has no handler and there
            is no ``'_'`` fallback.
        UnknownCaseError: If the pattern names a case RemoteData does not have.
    """
    return _ensure_remote_data(r, 'match').match(pattern)
