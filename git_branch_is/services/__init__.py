"""Services for resolving and matching the current branch."""

from .branch_matcher import BranchMatcher, compile_pattern
from .branch_resolver import BranchResolver

__all__ = ["BranchMatcher", "BranchResolver", "compile_pattern"]
