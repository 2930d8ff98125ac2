"""Configuration handling for git-branch-is"""

import os
import re
from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Union

from git_branch_is.constants import DEFAULT_GIT_PATH
from git_branch_is.exceptions import InvalidOptionsError

PathType = Union[str, "os.PathLike[str]"]
Expected = Union[str, "re.Pattern[str]", Callable[[str], Any]]


def _optional_path(name: str, value) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, (str, os.PathLike)):
        raise InvalidOptionsError(f"{name} must be a path, got {type(value).__name__}")
    return os.fspath(value)


@dataclass
class ResolveOptions:
    """Options controlling how the current branch is read from git.

    All fields are optional. ``git_args`` are placed after ``--git-dir`` on
    the command line so that an equivalent flag in ``git_args`` wins.
    """

    cwd: Optional[PathType] = None
    git_dir: Optional[PathType] = None
    git_args: Optional[List[str]] = field(default_factory=list)
    git_path: PathType = DEFAULT_GIT_PATH

    def __post_init__(self):
        """Validate options after initialization."""
        self.cwd = _optional_path("cwd", self.cwd)
        self.git_dir = _optional_path("git_dir", self.git_dir)
        self._validate_git_args()
        self._validate_git_path()

    def _validate_git_args(self):
        """Validate git_args is a sequence of strings (None means no args)."""
        if self.git_args is None:
            self.git_args = []
            return
        if isinstance(self.git_args, (str, bytes)) or not isinstance(self.git_args, (list, tuple)):
            raise InvalidOptionsError(
                f"git_args must be a list of strings, got {type(self.git_args).__name__}"
            )
        for arg in self.git_args:
            if not isinstance(arg, str):
                raise InvalidOptionsError(f"git_args must only contain strings, got {arg!r}")
        self.git_args = list(self.git_args)

    def _validate_git_path(self):
        """Validate git_path is a non-empty path or command name."""
        if self.git_path is None:
            self.git_path = DEFAULT_GIT_PATH
            return
        git_path = _optional_path("git_path", self.git_path)
        if not git_path:
            raise InvalidOptionsError("git_path cannot be empty")
        self.git_path = git_path

    def to_dict(self) -> dict:
        """Convert options to a dictionary."""
        return {
            "cwd": self.cwd,
            "git_dir": self.git_dir,
            "git_args": list(self.git_args),
            "git_path": self.git_path,
        }

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "ResolveOptions":
        """Create ResolveOptions from a mapping, ignoring unknown keys."""
        known_fields = {"cwd", "git_dir", "git_args", "git_path"}

        filtered = {k: v for k, v in options.items() if k in known_fields}
        return cls(**filtered)

    @classmethod
    def coerce(cls, options) -> "ResolveOptions":
        """Accept None, a mapping or a ResolveOptions instance."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.from_dict(options)
        raise InvalidOptionsError(
            f"options must be a ResolveOptions or mapping, got {type(options).__name__}"
        )


@dataclass
class MatchRequest:
    """What the current branch is expected to be."""

    expected: Expected
    ignore_case: bool = False
    use_regex: bool = False
    invert: bool = False

    def __post_init__(self):
        """Validate the expected value and normalize flags."""
        if not isinstance(self.expected, (str, re.Pattern)) and not callable(self.expected):
            raise InvalidOptionsError(
                "expected must be a string, compiled pattern or callable, "
                f"got {type(self.expected).__name__}"
            )
        self.ignore_case = bool(self.ignore_case)
        self.use_regex = bool(self.use_regex)
        self.invert = bool(self.invert)
