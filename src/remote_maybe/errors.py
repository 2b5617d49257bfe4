"""Error types: dual struct+exception for Failed payloads and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'IncompletePattern',
    'IncompletePatternError',
    'MissingArgument',
    'MissingArgumentError',
    'UnknownCase',
    'UnknownCaseError',
]


# --- Pattern Errors ---


class IncompletePattern(msgspec.Struct, frozen=True, gc=False):
    """No handler for the active variant and no fallback - struct variant."""

    variant: str
    cases: tuple[str, ...] = ()

    def to_exception(self) -> IncompletePatternError:
        """Convert to exception for raise-based code."""
        return IncompletePatternError(self.variant, self.cases)


class IncompletePatternError(LookupError):
    """No handler for the active variant and no fallback - exception variant."""

    def __init__(self, variant: str, cases: tuple[str, ...] = ()) -> None:
        self.variant = variant
        self.cases = tuple(cases)
        msg = f"Incomplete pattern: no handler for '{variant}' and no '_' fallback"
        if self.cases:
            msg = f'{msg} (handlers: {", ".join(self.cases)})'
        super().__init__(msg)

    def to_struct(self) -> IncompletePattern:
        """Convert to struct for Failed-based code."""
        return IncompletePattern(self.variant, self.cases)


class UnknownCase(msgspec.Struct, frozen=True, gc=False):
    """Pattern keys that name no case of the container - struct variant."""

    names: tuple[object, ...]
    container: str

    def to_exception(self) -> UnknownCaseError:
        """Convert to exception for raise-based code."""
        return UnknownCaseError(self.names, self.container)


class UnknownCaseError(ValueError):
    """Pattern keys that name no case of the container - exception variant."""

    def __init__(self, names: tuple[object, ...], container: str) -> None:
        self.names = tuple(names)
        self.container = container
        super().__init__(f'Unknown {container} case(s) in pattern: {", ".join(map(str, self.names))}')

    def to_struct(self) -> UnknownCase:
        """Convert to struct for Failed-based code."""
        return UnknownCase(self.names, self.container)


# --- Curry Errors ---


class MissingArgument(msgspec.Struct, frozen=True, gc=False):
    """Curried function called without an argument - struct variant."""

    function: str

    def to_exception(self) -> MissingArgumentError:
        """Convert to exception for raise-based code."""
        return MissingArgumentError(self.function)


class MissingArgumentError(TypeError):
    """Curried function called without an argument - exception variant."""

    def __init__(self, function: str) -> None:
        self.function = function
        super().__init__(f"{function}() missing a required positional argument")

    def to_struct(self) -> MissingArgument:
        """Convert to struct for Failed-based code."""
        return MissingArgument(self.function)
