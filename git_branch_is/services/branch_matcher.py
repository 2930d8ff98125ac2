"""Branch name matching service."""

import re

from git_branch_is.config import MatchRequest
from git_branch_is.exceptions import InvalidPatternError
from git_branch_is.models.match import MatchResult


def compile_pattern(expected: str, ignore_case: bool = False) -> "re.Pattern[str]":
    """
    Compile an expected branch pattern.

    Args:
        expected: Regular expression text
        ignore_case: Match case-insensitively

    Returns:
        Compiled pattern

    Raises:
        InvalidPatternError: If expected is not a valid regular expression
    """
    flags = re.IGNORECASE if ignore_case else 0
    try:
        return re.compile(expected, flags)
    except re.error as e:
        raise InvalidPatternError(expected, str(e)) from e


class BranchMatcher:
    """Decides whether a branch name satisfies a MatchRequest.

    Regular expressions are compiled on construction, so an invalid pattern
    is reported before any branch is resolved.
    """

    def __init__(self, request: MatchRequest):
        self.request = request
        self.pattern = None

        expected = request.expected
        if isinstance(expected, re.Pattern):
            self.pattern = expected
        elif request.use_regex and isinstance(expected, str):
            self.pattern = compile_pattern(expected, request.ignore_case)

    def _base_match(self, current_branch: str) -> bool:
        expected = self.request.expected
        if self.pattern is not None:
            return self.pattern.search(current_branch) is not None
        if callable(expected):
            return bool(expected(current_branch))
        if current_branch == expected:
            return True
        return self.request.ignore_case and current_branch.upper() == expected.upper()

    def match(self, current_branch: str) -> MatchResult:
        """
        Compare a resolved branch name against the request.

        Args:
            current_branch: Branch name ("" for detached HEAD)

        Returns:
            MatchResult with the (possibly inverted) outcome
        """
        matched = self._base_match(current_branch)
        if self.request.invert:
            matched = not matched
        return MatchResult(matched=matched, current_branch=current_branch)
