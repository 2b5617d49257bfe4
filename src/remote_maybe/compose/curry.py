"""curry(): call a two-argument function all at once or one argument at a time."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, overload

import wrapt

from remote_maybe._logging import get_logger, logging_configured
from remote_maybe.errors import MissingArgumentError

__all__ = ['Curried', 'curry']

logger = get_logger(__name__)


class Curried[A, B, R](Protocol):
    """A two-argument function that also accepts its arguments one at a time."""

    @overload
    def __call__(self, first: A, /) -> Callable[[B], R]: ...
    @overload
    def __call__(self, first: A, second: B, /) -> R: ...


def _missing_argument(name: str) -> MissingArgumentError:
    if logging_configured():
        logger.debug('curry.missing_argument', function=name)
    return MissingArgumentError(name)


def _continuation[R](fn: Callable[..., R], first: Any, name: str) -> Callable[..., R]:
    def continuation(*args: Any, **kwargs: Any) -> R:
        if not args and not kwargs:
            raise _missing_argument(name)
        return fn(first, *args, **kwargs)

    continuation.__name__ = name
    continuation.__qualname__ = f'{name}.<continuation>'
    continuation.__doc__ = f'{name}() with its first argument bound to {first!r}.'
    return continuation


def curry[A, B, R](fn: Callable[[A, B], R]) -> Curried[A, B, R]:
    """Curry a function of exactly two positional parameters.

    Called with both arguments, the curried function calls ``fn`` immediately.
    Called with only the first, it returns a one-argument continuation that
    supplies the second and then calls ``fn``. Keyword arguments, or more than
    two positional arguments, are passed straight through to ``fn``.

    Name, docstring and signature of ``fn`` are preserved, so ``curry`` works
    as a decorator.

    Args:
        fn: The two-argument function to curry.

    Returns:
        The curried function.

    Raises:
        MissingArgumentError: When the curried function or its continuation is
            called with no arguments at all.

    Example:
        ```python
        @curry
        def add(a: int, b: int) -> int:
            return a + b

        add(1, 2)  # 3
        add(1)(2)  # 3
        inc = add(1)
        list(map(inc, [1, 2, 3]))  # [2, 3, 4]
        ```
    """
    if not callable(fn):
        msg = f'curry() argument is not callable: {fn!r}'
        raise TypeError(msg)

    name = getattr(fn, '__name__', type(fn).__name__)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., R],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        if len(args) == 1 and not kwargs:
            return _continuation(wrapped, args[0], name)
        if not args and not kwargs:
            raise _missing_argument(name)
        return wrapped(*args, **kwargs)

    return wrapper(fn)  # type: ignore[return-value]
