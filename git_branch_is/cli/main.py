"""Command-line interface for git-branch-is"""

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from rich.console import Console
from rich.text import Text

from git_branch_is.cli.args import ParserExit, parse_args
from git_branch_is.config import MatchRequest, ResolveOptions
from git_branch_is.constants import EXIT_ERROR, ExitCode
from git_branch_is.exceptions import GitBranchIsError, InvalidPatternError
from git_branch_is.formatters import (
    format_error,
    format_invalid_pattern_message,
    format_match_message,
    format_mismatch_message,
)
from git_branch_is.logging_config import get_logger, setup_logging
from git_branch_is.services.branch_matcher import BranchMatcher
from git_branch_is.services.branch_resolver import BranchResolver

logger = get_logger(__name__)


@dataclass
class CommandResult:
    """Result of running the command: exit code and text for each stream."""

    code: int
    stdout: Optional[str] = None
    stderr: Optional[str] = None


def run(argv: Optional[List[str]] = None, log_stream: Optional[TextIO] = None) -> CommandResult:
    """Run the command without writing to any stream.

    Args:
        argv: Command-line arguments, excluding the program name
        log_stream: Stream for debug logging when --debug is given

    Returns:
        CommandResult for the comparison outcome

    Raises:
        UsageError: For invalid command-line usage
        ResolutionError: If the current branch could not be determined
    """
    try:
        parsed_args = parse_args(argv)
    except ParserExit as e:
        if e.status == 0:
            return CommandResult(code=0, stdout=e.output)
        return CommandResult(code=e.status, stderr=e.output)

    if parsed_args.debug:
        setup_logging(debug=True, stream=log_stream)

    options = ResolveOptions(
        cwd=parsed_args.cwd,
        git_dir=parsed_args.git_dir,
        git_args=parsed_args.git_args,
        git_path=parsed_args.git_path,
    )
    if parsed_args.debug:
        logger.debug("Options:")
        for key, value in options.to_dict().items():
            logger.debug(f"  {key}: {value}")

    request = MatchRequest(
        parsed_args.branch_name,
        ignore_case=parsed_args.ignore_case,
        use_regex=parsed_args.regex,
        invert=parsed_args.invert,
    )

    # Invalid patterns are caller errors, reported even with --quiet
    try:
        matcher = BranchMatcher(request)
    except InvalidPatternError as e:
        return CommandResult(code=ExitCode.INVALID_PATTERN, stderr=format_invalid_pattern_message(e))

    result = matcher.match(BranchResolver(options).get_branch())
    logger.debug(f"Branch '{result.current_branch}' matched: {result.matched}")

    if result.matched:
        return CommandResult(
            code=ExitCode.MATCH,
            stdout=format_match_message(result) if parsed_args.verbose else None,
        )
    return CommandResult(
        code=ExitCode.NO_MATCH,
        stderr=None if parsed_args.quiet else format_mismatch_message(result, request),
    )


def _write(console: Console, text: str, style: str = "") -> None:
    """Write text unchanged, styling it only when the console is a terminal.

    Rendering through rich expands tabs, which only looks the same on a terminal.
    """
    if console.is_terminal:
        console.print(Text(text, style=style), end="", soft_wrap=True)
    else:
        console.file.write(text)


def main(
    argv: Optional[List[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Main entry point for the application.

    Returns:
        Exit code for the process
    """
    out_console = Console(file=stdout, highlight=False, emoji=False)
    err_console = Console(file=stderr, stderr=stderr is None, highlight=False, emoji=False)

    try:
        result = run(argv, log_stream=stderr)
    except KeyboardInterrupt:
        err_console.print("[yellow]Operation cancelled by user[/yellow]")
        return EXIT_ERROR
    except GitBranchIsError as e:
        _write(err_console, format_error(e), style="red")
        return EXIT_ERROR

    if result.stdout:
        _write(out_console, result.stdout)
    if result.stderr:
        _write(err_console, result.stderr, style="red")
    return int(result.code)


if __name__ == "__main__":
    sys.exit(main())
