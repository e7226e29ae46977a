"""Command-line interface for filelist.

This module provides the command-line interface for filelist, which prints a filtered
inventory of a directory tree for consumption by later pipeline steps. It handles argument
parsing, output formatting, and signal management for graceful interruption handling.

Signal Handling Notes:
    - SIGINT: The walk stops descending, the files found so far are written, and the
      process exits with 130
    - SIGPIPE: Handled when the output pipe is closed (e.g., when piping to `head`) on
      Unix-like systems

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error or invalid exclude patterns
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # List TypeScript files, skipping dependencies
    $ filelist -i .ts -x node_modules /path/to/dir

    # Display version information
    $ filelist --version
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from filelist.cli.argparser import create_parser, validate_args
from filelist.cli.signal_handler import setup_signal_handling, signal_handler
from filelist.exceptions import PatternCompilationError, TraversalError
from filelist.listing import list_files
from filelist.logging_utils import setup_logging
from filelist.tree_walker.error_action import ErrorAction
from filelist.types import TraversalRequest


def build_request(args: argparse.Namespace) -> TraversalRequest:
    """Map parsed arguments onto a TraversalRequest."""
    # "warn" and "ignore" both keep walking; they differ only in what is printed
    error_action = ErrorAction.RAISE if args.permission_action == "fail" else ErrorAction.IGNORE
    return TraversalRequest.from_raw(
        args.directory,
        include=args.include,
        exclude=args.exclude,
        ignore_files=tuple(str(p) for p in args.exclude_from),
        follow_symlinks=not args.no_follow_symlinks,
        error_action=error_action,
        max_workers=args.jobs,
    )


def format_paths(paths: List[str], output_format: str) -> str:
    """Render paths in the requested output format.

    Args:
        paths: Paths in output order.
        output_format: "json" for an array of ``{"path": ...}`` items, "lines" for one
            path per line.

    Returns:
        The complete output text, newline-terminated unless there is nothing to print in
        "lines" format.

    Example:
        >>> print(format_paths(["a.ts", "lib/b.ts"], "lines"), end="")
        a.ts
        lib/b.ts
        >>> format_paths(["a.ts"], "json")
        '[{"path": "a.ts"}]\\n'
    """
    if output_format == "lines":
        return "".join(f"{path}\n" for path in paths)
    return json.dumps([{"path": path} for path in paths]) + "\n"


def write_output(text: str, output: Optional[Path]) -> None:
    """Write the rendered output to a file, or to stdout when no file is given."""
    if output is not None:
        output.write_text(text, encoding="utf-8")
        return
    try:
        sys.stdout.write(text)
        sys.stdout.flush()
    except BrokenPipeError:
        signal_handler.sigpipe_received.set()


def main() -> None:
    """Main entry point for the filelist command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error or invalid exclude patterns
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        parser = create_parser()
        args = parser.parse_args()

        validate_args(args)
        setup_logging(verbose=args.verbose)

        request = build_request(args)
        result = list_files(request, cancel_event=signal_handler.sigint_received)

        if args.permission_action == "warn":
            for soft_error in result.soft_errors:
                print(f"Warning: {soft_error}", file=sys.stderr)

        paths = sorted(result.paths) if args.sort else result.paths
        write_output(format_paths(paths, args.format), args.output)

    except PatternCompilationError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(2)
    except TraversalError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126 if e.is_permission_error else 1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Handle exit codes based on received signals
    if signal_handler.sigpipe_received.is_set():
        sys.exit(141)
    elif signal_handler.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
