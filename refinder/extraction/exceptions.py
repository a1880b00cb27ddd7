class PatternError(Exception):
    """Base exception for all pattern-related errors."""


class InvalidPatternError(PatternError):
    """Raised when a pattern, its flags or its capture group index are invalid."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Invalid pattern {source!r}: {reason}")
        self.source = source
        self.reason = reason
