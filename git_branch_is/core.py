"""Core functionality for git-branch-is"""

from typing import Union

from git_branch_is.config import Expected, MatchRequest, ResolveOptions
from git_branch_is.logging_config import get_logger
from git_branch_is.models.match import MatchResult
from git_branch_is.services.branch_matcher import BranchMatcher
from git_branch_is.services.branch_resolver import BranchResolver

logger = get_logger(__name__)

Options = Union[ResolveOptions, dict, None]


def get_branch(options: Options = None) -> str:
    """Get the current branch name, or "" if HEAD is detached."""
    return BranchResolver(options).get_branch()


def check_branch(
    expected: Expected,
    options: Options = None,
    *,
    ignore_case: bool = False,
    use_regex: bool = False,
    invert: bool = False,
) -> MatchResult:
    """Check whether the current branch matches ``expected``.

    The request is validated and any pattern compiled before git is run, so
    an invalid pattern raises InvalidPatternError even outside a repository.

    Args:
        expected: Branch name, regular expression text (with use_regex),
            compiled pattern, or a callable taking the branch name
        options: ResolveOptions, dict of the same fields, or None
        ignore_case: Compare case-insensitively
        use_regex: Treat a string ``expected`` as a regular expression
        invert: Negate the result

    Returns:
        MatchResult with the outcome and the resolved branch name

    Raises:
        InvalidOptionsError: If options or expected have the wrong type
        InvalidPatternError: If ``expected`` is not a valid regular expression
        ResolutionError: If git could not determine the current branch
    """
    request = MatchRequest(expected, ignore_case=ignore_case, use_regex=use_regex, invert=invert)
    matcher = BranchMatcher(request)
    resolver = BranchResolver(options)

    result = matcher.match(resolver.get_branch())
    logger.debug(f"Match result for {expected!r}: {result.matched}")
    return result


def branch_is(expected: Expected, options: Options = None, **flags) -> bool:
    """Return True if the current branch matches ``expected``.

    Accepts the same keyword flags as check_branch().
    """
    return check_branch(expected, options, **flags).matched
