"""Compilation of include and exclude pattern strings into predicates.

Include patterns are literal filename suffixes matched case-sensitively against a
file's path. Exclude patterns are regular expression fragments joined into one
case-insensitive alternation and searched for anywhere in an entry's name, so a
plain word such as ``node_modules`` behaves as a substring match.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from filelist.exceptions import PatternCompilationError

Predicate = Callable[[str], bool]


def parse_list(raw: Optional[str]) -> List[str]:
    """Split a comma-separated pattern string into its non-empty, trimmed items.

    Args:
        raw: The raw string. None is treated as an empty string.

    Returns:
        The items in their original order.

    Example:
        >>> parse_list(" .git, node_modules ,,dist ")
        ['.git', 'node_modules', 'dist']
        >>> parse_list("")
        []
    """
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _match_all(_: str) -> bool:
    return True


def _match_none(_: str) -> bool:
    return False


def build_include_predicate(patterns: Sequence[str]) -> Predicate:
    """Build a predicate that keeps paths ending with any of the given suffixes.

    With no patterns every path is kept.

    Example:
        >>> keep = build_include_predicate([".ts", ".tsx"])
        >>> keep("src/app.ts"), keep("src/app.js"), keep("src/APP.TS")
        (True, False, False)
        >>> build_include_predicate([])("anything")
        True
    """
    if not patterns:
        return _match_all
    suffixes = tuple(patterns)

    def include(path: str) -> bool:
        return path.endswith(suffixes)

    return include


def build_exclude_predicate(patterns: Sequence[str]) -> Predicate:
    """Build a predicate that matches entry names against the exclusion patterns.

    All patterns are compiled into a single case-insensitive alternation. A name matches
    when the alternation is found anywhere in it. With no patterns nothing matches.

    Raises:
        PatternCompilationError: If the patterns do not form a valid regular expression.

    Example:
        >>> excluded = build_exclude_predicate(["node_modules", ".git"])
        >>> excluded("node_modules"), excluded("Node_Modules"), excluded("src")
        (True, True, False)
        >>> build_exclude_predicate([])("node_modules")
        False
    """
    if not patterns:
        return _match_none
    try:
        regex = re.compile("|".join(patterns), re.IGNORECASE)
    except re.error as e:
        raise PatternCompilationError(patterns, e) from e

    def exclude(name: str) -> bool:
        return regex.search(name) is not None

    return exclude


@dataclass(frozen=True)
class PatternSet:
    """Include and exclude predicates built once for a traversal.

    Attributes:
        include: Predicate over file paths; True keeps the file.
        exclude: Predicate over entry names; True prunes the entry.
    """

    include: Predicate
    exclude: Predicate

    @classmethod
    def from_patterns(cls, include_patterns: Sequence[str], exclude_patterns: Sequence[str]) -> "PatternSet":
        """Compile both pattern lists.

        Raises:
            PatternCompilationError: If the exclude patterns cannot be compiled.
        """
        return cls(
            include=build_include_predicate(include_patterns),
            exclude=build_exclude_predicate(exclude_patterns),
        )
