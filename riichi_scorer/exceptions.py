"""Errors raised while scoring a hand."""


class ScoringError(Exception):
    """Base class for every recoverable scoring failure."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class InvalidInputError(ScoringError, ValueError):
    """The caller supplied contradictory context or an impossible tile set."""


class InvalidHandError(ScoringError):
    """The tiles do not form a winning hand (no shape, or no yaku)."""
