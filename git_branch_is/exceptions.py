"""Custom exceptions for git-branch-is"""

from typing import Optional, Sequence


class GitBranchIsError(Exception):
    """Base exception for all git-branch-is errors."""
    pass


class ResolutionError(GitBranchIsError):
    """Exception raised when the current branch could not be determined."""

    def __init__(
        self,
        command: Sequence[str],
        status: Optional[int] = None,
        stderr: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.command = list(command)
        self.status = status
        self.stderr = stderr
        self.message = message

        error_msg = f"Command '{' '.join(self.command)}' failed"
        if status is not None:
            error_msg += f" with exit status {status}"
        if message:
            error_msg += f": {message}"
        elif stderr:
            error_msg += f": {stderr.strip()}"

        super().__init__(error_msg)


class InvalidPatternError(GitBranchIsError, ValueError):
    """Exception raised when an expected branch pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: Optional[str] = None):
        self.pattern = pattern
        self.reason = reason

        error_msg = f'Invalid regular expression "{pattern}"'
        if reason:
            error_msg += f": {reason}"

        super().__init__(error_msg)


class InvalidOptionsError(GitBranchIsError, TypeError):
    """Exception raised for malformed options, before any process is started."""
    pass


class UsageError(GitBranchIsError):
    """Exception raised for invalid command-line usage."""
    pass
