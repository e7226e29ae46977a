from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Iterator, List, Optional, Tuple, Union

from filelist.patterns import parse_list
from filelist.tree_walker.error_action import ErrorAction

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


@dataclass(frozen=True)
class FileEntry:
    """A regular file discovered during traversal.

    The path keeps the form of the root it was found under: relative when the root was
    given relatively, absolute when it was absolute.

    Example:
        >>> FileEntry("src/main.py").path
        'src/main.py'
    """

    path: str

    def to_item(self) -> dict:
        """Return the entry as a plain ``{"path": ...}`` mapping."""
        return {"path": self.path}


@dataclass(frozen=True)
class SoftError:
    """A local failure absorbed during traversal.

    Attributes:
        path: The entry that could not be listed or inspected.
        cause: The filesystem error raised for it.
    """

    path: str
    cause: OSError

    def __str__(self) -> str:
        return f"{self.path}: {self.cause}"


@dataclass(frozen=True)
class TraversalRequest:
    """Everything needed to produce one file inventory.

    Patterns are stored trimmed and with empty entries dropped. Use :meth:`from_raw` to
    build a request from comma-separated strings as a host configuration supplies them.

    Attributes:
        root_directory: Directory to list. An empty string means the current directory,
            and paths are then reported relative to it without a ``./`` prefix.
        include_patterns: Filename suffixes to keep. Empty keeps every file.
        exclude_patterns: Case-insensitive name patterns; matching entries are pruned.
        ignore_files: Optional gitignore-style rule files applied to relative paths.
        follow_symlinks: Whether symlinked directories are descended into.
        error_action: What to do when a subdirectory cannot be listed.
        max_workers: Number of threads used to descend the root's subdirectories.

    Example:
        >>> request = TraversalRequest.from_raw("src", include=".ts, .tsx,", exclude="node_modules")
        >>> request.include_patterns
        ('.ts', '.tsx')
        >>> request.exclude_patterns
        ('node_modules',)
    """

    root_directory: str = ""
    include_patterns: Tuple[str, ...] = ()
    exclude_patterns: Tuple[str, ...] = ()
    ignore_files: Tuple[str, ...] = ()
    follow_symlinks: bool = True
    error_action: ErrorAction = ErrorAction.IGNORE
    max_workers: int = 1

    def __post_init__(self) -> None:
        # frozen dataclass, so normalize through object.__setattr__
        object.__setattr__(self, "root_directory", str(self.root_directory))
        object.__setattr__(self, "include_patterns", _clean(self.include_patterns))
        object.__setattr__(self, "exclude_patterns", _clean(self.exclude_patterns))
        object.__setattr__(self, "ignore_files", tuple(str(p) for p in self.ignore_files))
        object.__setattr__(self, "error_action", ErrorAction(self.error_action))
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

    @classmethod
    def from_raw(
        cls,
        directory: Optional[PathType] = None,
        include: Optional[str] = None,
        exclude: Optional[str] = None,
        **kwargs: Any,
    ) -> "TraversalRequest":
        """Build a request from raw comma-separated pattern strings.

        Args:
            directory: Directory to list. None or empty means the current directory.
            include: Comma-separated filename suffixes, e.g. ``".ts,.js"``.
            exclude: Comma-separated name patterns, e.g. ``".git,node_modules"``.
            **kwargs: Any other TraversalRequest field.

        Returns:
            The normalized request.
        """
        return cls(
            root_directory="" if directory is None else str(directory),
            include_patterns=tuple(parse_list(include)),
            exclude_patterns=tuple(parse_list(exclude)),
            **kwargs,
        )


@dataclass
class TraversalResult:
    """Outcome of one traversal.

    Entries are in depth-first pre-order with siblings in the order the filesystem
    enumerated them. Iterating a result yields its FileEntry objects.

    Attributes:
        entries: Discovered files.
        soft_errors: Local failures absorbed while walking.
        cancelled: True if the walk was stopped early; entries are then the files found
            up to that point.
    """

    entries: List[FileEntry] = field(default_factory=list)
    soft_errors: List[SoftError] = field(default_factory=list)
    cancelled: bool = False

    @property
    def paths(self) -> List[str]:
        """Paths of all entries, in result order."""
        return [entry.path for entry in self.entries]

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def _clean(patterns: Any) -> Tuple[str, ...]:
    if isinstance(patterns, str):
        return tuple(parse_list(patterns))
    return tuple(p.strip() for p in patterns if p and p.strip())
