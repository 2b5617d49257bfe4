"""pipe() and compose(): build one function out of a chain of functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

__all__ = ['compose', 'identity', 'pipe']


def identity[T](value: T, /) -> T:
    """Return the argument unchanged."""
    return value


def _check_callables(name: str, fns: tuple[Any, ...]) -> None:
    for position, fn in enumerate(fns):
        if not callable(fn):
            msg = f'{name}() argument {position} is not callable: {fn!r}'
            raise TypeError(msg)


# Overloads for type inference (up to 4 functions)
@overload
def pipe() -> Callable[[Any], Any]: ...
@overload
def pipe[**P, A](fn1: Callable[P, A], /) -> Callable[P, A]: ...
@overload
def pipe[**P, A, B](fn1: Callable[P, A], fn2: Callable[[A], B], /) -> Callable[P, B]: ...
@overload
def pipe[**P, A, B, C](
    fn1: Callable[P, A], fn2: Callable[[A], B], fn3: Callable[[B], C], /
) -> Callable[P, C]: ...
@overload
def pipe[**P, A, B, C, D](
    fn1: Callable[P, A],
    fn2: Callable[[A], B],
    fn3: Callable[[B], C],
    fn4: Callable[[C], D],
    /,
) -> Callable[P, D]: ...
@overload
def pipe(*fns: Callable[..., Any]) -> Callable[..., Any]: ...


def pipe(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions left to right.

    ``pipe(f, g, h)(x) == h(g(f(x)))``. The first function receives every
    argument the pipeline is called with; the rest are unary. With no
    functions the pipeline is the identity.

    Args:
        *fns: Functions to apply in sequence.

    Returns:
        The composed function.

    Raises:
        TypeError: If any argument is not callable.

    Example:
        ```python
        pipe(lambda x: x + 1, lambda x: x * 2)(3)
        # 8

        from remote_maybe import maybe
        pipe(maybe.map(str.upper), maybe.with_default(''))(maybe.present('hi'))
        # 'HI'
        ```
    """
    _check_callables('pipe', fns)
    if not fns:
        return identity

    first, *rest = fns

    def piped(*args: Any, **kwargs: Any) -> Any:
        value = first(*args, **kwargs)
        for fn in rest:
            value = fn(value)
        return value

    return piped


@overload
def compose() -> Callable[[Any], Any]: ...
@overload
def compose[**P, A](fn1: Callable[P, A], /) -> Callable[P, A]: ...
@overload
def compose[**P, A, B](fn1: Callable[[A], B], fn2: Callable[P, A], /) -> Callable[P, B]: ...
@overload
def compose[**P, A, B, C](
    fn1: Callable[[B], C], fn2: Callable[[A], B], fn3: Callable[P, A], /
) -> Callable[P, C]: ...
@overload
def compose[**P, A, B, C, D](
    fn1: Callable[[C], D],
    fn2: Callable[[B], C],
    fn3: Callable[[A], B],
    fn4: Callable[P, A],
    /,
) -> Callable[P, D]: ...
@overload
def compose(*fns: Callable[..., Any]) -> Callable[..., Any]: ...


def compose(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions right to left (mathematical order).

    ``compose(f, g, h)(x) == f(g(h(x)))``. The last function receives every
    argument; the rest are unary. With no functions the result is the identity.

    Args:
        *fns: Functions to compose, outermost first.

    Returns:
        The composed function.

    Raises:
        TypeError: If any argument is not callable.

    Example:
        ```python
        compose(lambda x: x * 2, lambda x: x + 1)(3)
        # 8
        ```
    """
    _check_callables('compose', fns)
    return pipe(*reversed(fns))
