"""Command-line argument parsing for git-branch-is."""

import argparse
import sys
from typing import Iterable, List, Optional

from git_branch_is.__version__ import __version__
from git_branch_is.exceptions import UsageError


class ParserExit(Exception):
    """Raised instead of exiting when argparse finishes early (--help, --version)."""

    def __init__(self, status: int, output: str):
        self.status = status
        self.output = output
        super().__init__(f"Parser exited with status {status}")


class CommandParser(argparse.ArgumentParser):
    """ArgumentParser which collects its output and raises instead of exiting."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.output: List[str] = []

    def _print_message(self, message, file=None):
        if message:
            self.output.append(message)

    def exit(self, status=0, message=None):
        if message:
            self.output.append(message)
        raise ParserExit(status, "".join(self.output))

    def error(self, message):
        raise UsageError(f"{message}\n{self.format_usage()}")


def _join_git_args(argv: Iterable[str]) -> List[str]:
    """Attach each separate ``--git-arg`` value with ``=``.

    argparse refuses option values which look like flags (``--git-arg -C``),
    but git arguments are usually flags.
    """
    joined = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            joined.append(arg)
            joined.extend(args)
            break
        if arg == "--git-arg":
            value = next(args, None)
            joined.append(arg if value is None else f"--git-arg={value}")
        else:
            joined.append(arg)
    return joined


def build_parser() -> CommandParser:
    """Build the argument parser for the git-branch-is command."""
    parser = CommandParser(
        prog="git-branch-is",
        description="Check that the current git branch matches a name or pattern. "
        "Exits 0 if it matches, 1 if it does not, 2 for an invalid pattern.",
        allow_abbrev=False,
    )
    parser.add_argument("branch_name", nargs="*", help="expected branch name or pattern")
    parser.add_argument("-C", dest="cwd", metavar="<path>", help="run as if started in <path>")
    parser.add_argument(
        "--git-arg",
        dest="git_args",
        action="append",
        metavar="<arg>",
        help="additional argument to git (can be repeated)",
    )
    parser.add_argument("--git-dir", metavar="<dir>", help="set the path to the repository")
    parser.add_argument("--git-path", metavar="<path>", help="set the path to the git binary")
    parser.add_argument(
        "-i", "--ignore-case", action="store_true", help="compare/match branch_name case-insensitively"
    )
    parser.add_argument(
        "-I", "--invert-match", dest="invert", action="store_true", help="inverts/negates comparison"
    )
    parser.add_argument(
        "--not", dest="invert", action="store_true", help="inverts/negates comparison (same as --invert-match)"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="suppress warning message if branch differs"
    )
    parser.add_argument(
        "-r", "--regex", action="store_true", help="match branch_name as a regular expression"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="print a message if the branch matches"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-branch-is {__version__}")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Raises:
        UsageError: For unknown options or a wrong number of branch names
        ParserExit: After --help or --version output
    """
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    parsed = parser.parse_args(_join_git_args(argv))

    if len(parsed.branch_name) != 1:
        raise UsageError(f"Exactly one argument is required.\n{parser.format_usage()}")
    parsed.branch_name = parsed.branch_name[0]

    return parsed
