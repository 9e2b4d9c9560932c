"""
Exception classes for hard engine failures.

Expected intermediate states (incomplete groups, unresolvable ties, rejected
winner picks) are reported as result values and never raised.
"""

from typing import Iterable, Optional


class EngineError(Exception):
    """Base exception for all engine errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or "ENGINE_ERROR"

    def to_dict(self) -> dict:
        """Convert exception to dictionary for JSON responses."""
        return {
            "error": self.code,
            "message": self.message
        }


class InvalidThirdPlaceCombinationError(EngineError):
    """
    Raised when a set of qualifying third-place groups matches none of the
    495 official combinations.
    """

    def __init__(self, groups: Iterable[str]):
        self.groups = "".join(sorted(groups))
        super().__init__(
            f"No valid third-place combination for groups '{self.groups}'",
            "NO_VALID_COMBINATION"
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["groups"] = self.groups
        return result


class UnknownMatchError(EngineError):
    """Raised when a knockout match id is not part of the bracket."""

    def __init__(self, match_id: str):
        super().__init__(f"Unknown knockout match '{match_id}'", "UNKNOWN_MATCH")
        self.match_id = match_id


class InvalidTiebreakerDecisionError(EngineError):
    """Raised when a manual tiebreak order is malformed or does not match the reported tie."""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_TIEBREAKER")


class StaleGroupVersionError(EngineError):
    """Raised when group scores were changed by someone else since they were read."""

    def __init__(self, group_letter: str, expected: int, current: int):
        super().__init__(
            f"Scores for group {group_letter} changed (version {current}, expected {expected})",
            "STALE_VERSION"
        )
        self.group_letter = group_letter
        self.expected = expected
        self.current = current

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["current_version"] = self.current
        return result
