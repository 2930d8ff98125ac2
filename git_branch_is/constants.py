"""Shared constants for git-branch-is."""

from enum import IntEnum
from typing import List


class ExitCode(IntEnum):
    """Exit status reported by the git-branch-is command."""

    MATCH = 0
    NO_MATCH = 1
    INVALID_PATTERN = 2


# Exit status for errors which are not a comparison outcome (usage, git failures)
EXIT_ERROR = 1

DEFAULT_GIT_PATH = "git"

# Prints the branch name, exits 1 silently when HEAD is not a symbolic ref
SYMBOLIC_REF_ARGS: List[str] = ["symbolic-ref", "--quiet", "--short", "HEAD"]

DETACHED_HEAD_STATUS = 1
