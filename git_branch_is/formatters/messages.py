"""Messages reported to the user by the git-branch-is command."""

import re
from typing import Optional

from git_branch_is.config import MatchRequest
from git_branch_is.exceptions import InvalidPatternError
from git_branch_is.models.match import MatchResult


def format_match_message(result: MatchResult) -> str:
    """
    Format the verbose message printed when the branch matches.

    Args:
        result: Successful match result

    Returns:
        Message line ending with a newline
    """
    return f'Current branch is "{result.current_branch}".\n'


def format_mismatch_message(result: MatchResult, request: MatchRequest) -> Optional[str]:
    """
    Format the error message printed when the branch does not match.

    Args:
        result: Match result
        request: The request which was matched

    Returns:
        Message line ending with a newline, or None if the branch matched

    Example:
        'Error: Current branch is "main", not "dev".\\n'
    """
    if result.matched:
        return None

    current = result.current_branch
    expected = request.expected

    if isinstance(expected, str) and not request.use_regex:
        if request.invert:
            return f'Error: Current branch is "{current}".\n'
        return f'Error: Current branch is "{current}", not "{expected}".\n'

    # Patterns and predicates are described by their source text or name
    if not isinstance(expected, str):
        if isinstance(expected, re.Pattern):
            expected = expected.pattern
        else:
            expected = getattr(expected, "__name__", repr(expected))
    if request.invert:
        return f'Error: Current branch "{current}" matches "{expected}".\n'
    return f'Error: Current branch "{current}" does not match "{expected}".\n'


def format_invalid_pattern_message(error: InvalidPatternError) -> str:
    """Format the error message for an invalid regular expression."""
    return f"Error: {error}\n"


def format_error(error: BaseException) -> str:
    """Format an unexpected error as ``Name: message``."""
    return f"{type(error).__name__}: {error}\n"
