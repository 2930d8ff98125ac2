"""Match result model"""
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """Outcome of comparing the current branch against an expectation."""
    matched: bool
    current_branch: str  # "" when HEAD is detached

    def __bool__(self) -> bool:
        return self.matched
