"""Command-line interface for git-branch-is.

This package provides the CLI entry point and argument parsing.
"""

from .main import CommandResult, main, run
from .args import parse_args

__all__ = ["CommandResult", "main", "parse_args", "run"]
