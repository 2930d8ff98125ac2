"""Current branch resolution service"""
import os
from typing import List, Union

import git

from git_branch_is.config import ResolveOptions
from git_branch_is.constants import DETACHED_HEAD_STATUS, SYMBOLIC_REF_ARGS
from git_branch_is.exceptions import ResolutionError
from git_branch_is.logging_config import get_logger

logger = get_logger(__name__)


class BranchResolver:
    """Service which reads the current branch name by running git."""

    def __init__(self, options: Union[ResolveOptions, dict, None] = None):
        """Initialize the service.

        Args:
            options: ResolveOptions, a dict of the same fields, or None for defaults

        Raises:
            InvalidOptionsError: If options is not a supported type or has bad fields
        """
        self.options = ResolveOptions.coerce(options)

    def build_args(self) -> List[str]:
        """Build the git arguments, without the executable.

        ``--git-dir`` comes first so that anything in ``git_args`` overrides it.
        """
        args = []
        if self.options.git_dir:
            args.append(f"--git-dir={self.options.git_dir}")
        args.extend(self.options.git_args)
        args.extend(SYMBOLIC_REF_ARGS)
        return args

    def build_command(self) -> List[str]:
        """Build the full command line including the git executable."""
        return [self.options.git_path] + self.build_args()

    def get_branch(self) -> str:
        """Get the name of the current branch.

        Returns:
            The short branch name, or "" if HEAD is detached

        Raises:
            ResolutionError: If git could not be run or reported an error
        """
        command = self.build_command()
        cwd = self.options.cwd

        # git.cmd.Git silently falls back to the process cwd for unusable directories
        if cwd is not None and not os.path.isdir(cwd):
            raise ResolutionError(command, message=f"Working directory '{cwd}' is not a directory")

        logger.debug(f"Running {command} in {cwd or os.getcwd()}")
        try:
            status, stdout, stderr = git.cmd.Git(cwd).execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
                strip_newline_in_stdout=False,
            )
        except git.exc.GitCommandNotFound as e:
            raise ResolutionError(command, message=f"Unable to run git: {e}") from e
        except OSError as e:
            raise ResolutionError(command, message=f"Unable to run git: {e}") from e

        if status == 0:
            branch = stdout.rstrip()
            logger.info(f"Current branch is '{branch}'")
            return branch

        # Exit 1 with no output is how symbolic-ref --quiet reports a non-symbolic HEAD.
        # This is inferred from observed behavior rather than a documented contract.
        if status == DETACHED_HEAD_STATUS and not stdout and not stderr:
            logger.debug("HEAD is not a symbolic ref, treating as detached")
            return ""

        raise ResolutionError(command, status=status, stderr=stderr)
