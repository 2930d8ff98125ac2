"""
git-branch-is - Check that the current git branch matches a name or pattern
"""

import os

# Let a missing git on PATH surface as ResolutionError when git is run, not at import
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from .__version__ import __version__
from .config import MatchRequest, ResolveOptions
from .core import branch_is, check_branch, get_branch
from .exceptions import (
    GitBranchIsError,
    InvalidOptionsError,
    InvalidPatternError,
    ResolutionError,
    UsageError,
)
from .models.match import MatchResult
from .services import BranchMatcher, BranchResolver, compile_pattern
from .cli.main import main

__all__ = [
    "BranchMatcher",
    "BranchResolver",
    "GitBranchIsError",
    "InvalidOptionsError",
    "InvalidPatternError",
    "MatchRequest",
    "MatchResult",
    "ResolutionError",
    "ResolveOptions",
    "UsageError",
    "__version__",
    "branch_is",
    "check_branch",
    "compile_pattern",
    "get_branch",
    "main",
]
