"""Filtered file inventories for directory trees.

This package walks a directory tree and returns the paths of the regular files
beneath it, restricted by filename suffixes and pruned by name patterns, for use
as input to later pipeline steps.
"""

from importlib.metadata import PackageNotFoundError, version

from filelist.exceptions import FileListError, PatternCompilationError, TraversalError
from filelist.listing import list_files
from filelist.types import FileEntry, SoftError, TraversalRequest, TraversalResult

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("filelist")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "FileEntry",
    "FileListError",
    "PatternCompilationError",
    "SoftError",
    "TraversalError",
    "TraversalRequest",
    "TraversalResult",
    "list_files",
]
