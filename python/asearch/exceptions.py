"""Exception hierarchy for asearch."""


class AsearchError(Exception):
    """Base class for every error raised by asearch."""


class ValidationError(AsearchError, ValueError):
    """An argument was outside the accepted range."""


class PatternTooLong(ValidationError):
    """The pattern has more scalar values than the automaton can hold."""

    def __init__(self, pattern: str, max_length: int):
        self.pattern = pattern
        self.length = len(pattern)
        self.max_length = max_length
        super().__init__(
            f"Pattern must be shorter than {max_length + 1} chars, "
            f"got {self.length}: {pattern!r}"
        )


class InvalidAmbiguity(ValidationError):
    """The edit budget is negative or not an integer."""

    def __init__(self, ambiguity):
        self.ambiguity = ambiguity
        super().__init__(f"ambiguity must be a non-negative int, got {ambiguity!r}")


__all__ = ["AsearchError", "ValidationError", "PatternTooLong", "InvalidAmbiguity"]
