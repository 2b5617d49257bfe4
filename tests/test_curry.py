"""Tests for curry()."""

import inspect

import pytest
from hypothesis import given

from remote_maybe import MissingArgumentError, curry, pipe
from tests.strategies import integers


def subtract(a, b):
    """Subtract b from a."""
    return a - b


class TestCurry:
    """Tests for the two call shapes of a curried function."""

    @given(integers, integers)
    def test_call_shapes_agree(self, a, b):
        """curry(fn)(a, b) == curry(fn)(a)(b) == fn(a, b)."""
        curried = curry(subtract)
        assert curried(a, b) == curried(a)(b) == subtract(a, b)

    def test_partial_application_is_reusable(self):
        """A partially applied function can be called many times."""
        from_ten = curry(subtract)(10)
        assert from_ten(1) == 9
        assert from_ten(4) == 6

    def test_full_call_is_immediate(self):
        """Passing both arguments calls the function right away."""
        calls = []

        @curry
        def record(a, b):
            calls.append((a, b))
            return a + b

        assert record(1, 2) == 3
        assert calls == [(1, 2)]

    def test_partial_call_defers(self):
        """Passing one argument waits for the second."""
        calls = []

        @curry
        def record(a, b):
            calls.append((a, b))

        step = record(1)
        assert calls == []
        step(2)
        assert calls == [(1, 2)]

    def test_keyword_arguments_pass_through(self):
        """Keyword arguments go straight to the function."""
        curried = curry(subtract)
        assert curried(a=5, b=3) == 2
        assert curried(5, b=3) == 2
        assert curried(5)(b=3) == 2

    def test_too_many_arguments_reach_function(self):
        """Extra positional arguments reach the function and fail there."""
        with pytest.raises(TypeError):
            curry(subtract)(1, 2, 3)

    def test_usable_in_pipeline(self):
        """Partially applied functions work as pipeline stages."""
        minus = curry(lambda b, a: a - b)
        assert pipe(minus(1), minus(2))(10) == 7


class TestCurryErrors:
    """Tests for curried calls that are missing arguments."""

    def test_continuation_without_argument_raises(self):
        """A continuation called with nothing raises."""
        continuation = curry(subtract)(1)
        with pytest.raises(MissingArgumentError, match='subtract'):
            continuation()

    def test_curried_without_arguments_raises(self):
        """A curried function called with nothing raises."""
        with pytest.raises(MissingArgumentError):
            curry(subtract)()

    def test_missing_argument_is_type_error(self):
        """MissingArgumentError is a TypeError."""
        with pytest.raises(TypeError):
            curry(subtract)(1)()

    def test_non_callable_raises(self):
        """Non-callables are rejected."""
        with pytest.raises(TypeError, match='not callable'):
            curry(42)  # type: ignore[arg-type]


class TestCurryIntrospection:
    """Tests for metadata preserved by curry()."""

    def test_name_and_doc(self):
        """Name and docstring are preserved."""
        curried = curry(subtract)
        assert curried.__name__ == 'subtract'
        assert curried.__doc__ == 'Subtract b from a.'

    def test_signature(self):
        """The signature is preserved."""
        assert list(inspect.signature(curry(subtract)).parameters) == ['a', 'b']

    def test_continuation_name(self):
        """The continuation carries the function's name."""
        assert curry(subtract)(1).__name__ == 'subtract'
