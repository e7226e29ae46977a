"""Single entry point turning a TraversalRequest into a TraversalResult."""

import logging
import threading
from typing import List, Optional

from filelist.exclusion_rules.base_rules import BaseExclusionRules
from filelist.exclusion_rules.composite_rules import CompositeExclusionRules
from filelist.exclusion_rules.git_rules import GitIgnoreExclusionRules
from filelist.exclusion_rules.name_rules import NamePatternExclusionRules
from filelist.patterns import PatternSet
from filelist.tree_walker.tree_walker import TreeWalker
from filelist.types import TraversalRequest, TraversalResult

log = logging.getLogger(__name__)


def build_exclusion_rules(request: TraversalRequest) -> BaseExclusionRules:
    """Combine the request's name patterns and ignore files into one rule object.

    Raises:
        PatternCompilationError: If the exclude patterns cannot be compiled.
        FileNotFoundError: If an ignore file does not exist.
    """
    rules: List[BaseExclusionRules] = [NamePatternExclusionRules(request.exclude_patterns)]
    if request.ignore_files:
        rules.append(GitIgnoreExclusionRules(request.ignore_files))
    if len(rules) == 1:
        return rules[0]
    return CompositeExclusionRules(rules)


def list_files(request: TraversalRequest, cancel_event: Optional[threading.Event] = None) -> TraversalResult:
    """List the regular files beneath a directory.

    The patterns are compiled once, then the tree is walked depth-first: entries whose
    names match an exclude pattern are pruned with their whole subtree, and files are kept
    when their path ends with one of the include suffixes (or always, with no include
    patterns).

    Args:
        request: What to list and how to filter it.
        cancel_event: Optional event; once set, the walk stops and the files found so far
            are returned with ``cancelled`` set on the result.

    Returns:
        The files in depth-first pre-order, plus any soft errors absorbed on the way.

    Raises:
        PatternCompilationError: If the exclude patterns cannot be compiled.
        TraversalError: If the root directory cannot be listed, or if any directory
            cannot be listed and the request's error action is RAISE.

    Example:
        >>> import tempfile, pathlib
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     root = pathlib.Path(tmp)
        ...     (root / "node_modules").mkdir()
        ...     (root / "node_modules" / "c.ts").touch()
        ...     (root / "a.ts").touch()
        ...     (root / "b.js").touch()
        ...     request = TraversalRequest.from_raw(tmp, include=".ts", exclude="node_modules")
        ...     [pathlib.Path(p).name for p in list_files(request).paths]
        ['a.ts']
    """
    patterns = PatternSet.from_patterns(request.include_patterns, request.exclude_patterns)
    exclusion_rules = build_exclusion_rules(request)

    walker = TreeWalker(
        request.root_directory,
        exclusion_rules=exclusion_rules,
        include=patterns.include,
        follow_symlinks=request.follow_symlinks,
        error_action=request.error_action,
        max_workers=request.max_workers,
        cancel_event=cancel_event,
    )
    result = walker.walk()
    log.info(
        "Listed %d files under %s (%d skipped with errors%s)",
        len(result),
        request.root_directory or ".",
        len(result.soft_errors),
        ", cancelled" if result.cancelled else "",
    )
    return result
