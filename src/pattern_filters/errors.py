"""Exceptions raised by the pattern filters."""

__all__ = [
    "PatternFilterError",
    "InvalidArgumentError",
    "NullReferenceError",
    "LengthMismatchError",
]


class PatternFilterError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(PatternFilterError, ValueError):
    """An argument is outside the range the operation accepts."""


class NullReferenceError(PatternFilterError, TypeError):
    """A required collaborator (random source, pattern, batch) is ``None``."""


class LengthMismatchError(PatternFilterError, ValueError):
    """Patterns of a batch do not share the reference vector length."""

    def __init__(self, position: int, expected: int, actual: int):
        super().__init__(
            f"Pattern at position {position} has vector length {actual}, "
            f"expected {expected} (length of the first pattern)."
        )
        self.position = position
        self.expected = expected
        self.actual = actual
