"""Command-line argument parsing for filelist.

This module defines the command-line interface for filelist,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from filelist import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with filelist's options.
    """
    description = """
    filelist: list the files beneath a directory, filtered by suffix and pruned by name.

    The directory is walked depth-first. Entries whose names match an exclude pattern are
    skipped along with everything below them; the remaining files are kept when their path
    ends with one of the include suffixes. Output order follows the walk: each directory's
    contents come before its next sibling, and siblings appear in the order the filesystem
    returns them.

    Exclude patterns are case-insensitive regular expression fragments searched for in
    each entry name, so "node_modules" prunes any entry whose name contains that word.
    Subdirectories that cannot be read are skipped without failing the listing.
    """

    epilog = """
    Examples:
      # All files under the current directory, skipping node_modules (the default exclude)
      filelist

      # TypeScript sources, skipping VCS metadata and dependencies
      filelist -i .ts,.tsx -x .git,node_modules /path/to/project

      # Also honor the project's .gitignore
      filelist -e /path/to/project/.gitignore /path/to/project

      # Plain path list, sorted, written to a file
      filelist -f lines --sort -o files.txt /path/to/project

      # Report unreadable subdirectories, or stop at the first one
      filelist -P warn /path/to/project
      filelist -P fail /path/to/project

      # Walk the top-level subdirectories in parallel
      filelist -j 8 /path/to/large/tree
    """

    parser = argparse.ArgumentParser(
        prog="filelist",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"filelist {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default="",
        help="The directory to list (default: the current directory). Paths are printed in the same form.",
    )
    parser.add_argument(
        "-i",
        "--include",
        metavar="SUFFIXES",
        default="",
        help="Comma-separated filename suffixes to keep, e.g. '.ts,.js' (default: keep every file).",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        metavar="PATTERNS",
        default="node_modules",
        help=(
            "Comma-separated case-insensitive name patterns; matching files and directories are "
            "skipped, directories with their whole subtree (default: node_modules). Pass '' to "
            "exclude nothing."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude-from",
        type=Path,
        metavar="FILE",
        action="append",
        default=[],
        help="Gitignore-style file whose rules also prune entries (can be specified multiple times).",
    )
    parser.add_argument(
        "-N",
        "--no-follow-symlinks",
        action="store_true",
        help="Do not descend into symlinked directories. Symlinked files are still listed.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle subdirectories that cannot be read (default: ignore).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "lines"],
        default="json",
        help="Output format: a JSON array of {\"path\": ...} items, or one path per line (default: json).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=1,
        metavar="N",
        help="Number of threads used to walk the top-level subdirectories (default: 1).",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort the output paths instead of keeping traversal order.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log traversal details to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.jobs < 1:
        raise ValueError("-j/--jobs must be at least 1")
    for rules_file in args.exclude_from:
        if not rules_file.is_file():
            raise ValueError(f"Exclusion file not found: {rules_file}")
