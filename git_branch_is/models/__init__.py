"""Data models for git-branch-is."""

from .match import MatchResult

__all__ = ["MatchResult"]
