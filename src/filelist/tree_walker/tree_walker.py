"""Depth-first traversal producing a filtered list of regular files.

This module provides the TreeWalker class. The walk is pre-order: each directory's
subtree is fully listed before its next sibling, and siblings keep the order in which
the filesystem enumerated them.
"""

import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Iterator, List, Optional, Set, Union

from filelist.exceptions import TraversalError
from filelist.exclusion_rules.base_rules import BaseExclusionRules
from filelist.patterns import Predicate, build_include_predicate
from filelist.tree_walker.error_action import ErrorAction
from filelist.types import FileEntry, PathType, SoftError, TraversalResult

log = logging.getLogger(__name__)

_DIRECTORY = "directory"
_FILE = "file"


class TreeWalker:
    """Recursive directory walker with pruning, filtering and partial-failure tolerance.

    For every directory entry the walker first asks the exclusion rules; an excluded entry
    is neither emitted nor descended into. Remaining directories are descended into
    depth-first, and remaining regular files are emitted when their path passes the
    include predicate. Entries that are neither directories nor regular files (sockets,
    fifos, devices) are skipped.

    Symbolic Link Behavior:
        Symlinks are resolved one level. A symlink to a file is treated as that file. A
        symlink to a directory is descended into when follow_symlinks is True. Every
        directory's real path is remembered for the rest of the walk, and a directory
        whose real path was already visited (the root included) is skipped, so symlink
        cycles terminate and no directory is listed twice. Dangling symlinks are recorded
        as soft errors.

    Error Handling:
        A root that is missing, is not a directory or cannot be listed raises
        TraversalError. Failures below the root depend on error_action:
        - IGNORE (default): record a SoftError, skip the subtree and continue
        - RAISE: raise TraversalError for the first failure

    Concurrency:
        With max_workers greater than 1, each subdirectory of the root is walked in its
        own worker thread and the per-subtree results are merged in root enumeration
        order, so the output order is the same as for a sequential walk. When two subtrees
        reach the same real directory through symlinks, the one that gets there first
        lists it.

    Attributes:
        root_path (str): The root as given. An empty string walks the current directory
            and reports paths relative to it.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for pruning entries.
        include (Predicate): Predicate over emitted paths.
        follow_symlinks (bool): Whether symlinked directories are descended into.
        error_action (ErrorAction): How to handle directories that cannot be listed.
        max_workers (int): Threads used for the root's subdirectories.
        cancel_event (Optional[threading.Event]): Stops the walk once set.
        soft_errors (List[SoftError]): Failures absorbed by the most recent walk.
        cancelled (bool): Whether the most recent walk was stopped by cancel_event.

    Example:
        >>> walker = TreeWalker("project")  # doctest: +SKIP
        >>> walker.walk().paths  # doctest: +SKIP
        ['project/a.ts', 'project/lib/b.ts']
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        include: Optional[Predicate] = None,
        follow_symlinks: bool = True,
        error_action: ErrorAction = ErrorAction.IGNORE,
        max_workers: int = 1,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self.root_path = os.fspath(root_path)
        self.exclusion_rules = exclusion_rules
        self.include = include if include is not None else build_include_predicate(())
        self.follow_symlinks = follow_symlinks
        self.error_action = ErrorAction(error_action)
        self.max_workers = max_workers
        self.cancel_event = cancel_event
        self.soft_errors: List[SoftError] = []
        self.cancelled = False
        self._visited: Set[str] = set()
        self._lock = threading.Lock()
        self._prune = exclusion_rules is not None and exclusion_rules.has_rules()

    def walk(self) -> TraversalResult:
        """Walk the tree and collect every emitted file.

        Returns:
            The files in pre-order together with the soft errors met on the way.

        Raises:
            TraversalError: If the root cannot be listed, or if any directory cannot be
                listed and error_action is RAISE.
        """
        if self.max_workers > 1:
            entries = self._walk_parallel()
        else:
            entries = list(self.iterate_files())
        return TraversalResult(entries=entries, soft_errors=list(self.soft_errors), cancelled=self.cancelled)

    def iterate_files(self) -> Iterator[FileEntry]:
        """Lazily yield files in pre-order.

        Always sequential, whatever max_workers is. Errors surface when the generator is
        advanced, the root failure included. soft_errors and cancelled describe this walk
        once the generator is exhausted.

        Raises:
            TraversalError: As for walk().
        """
        root_entries = self._open_root()
        yield from self._iterate_entries(root_entries, "", self.root_path)

    def _open_root(self) -> List["os.DirEntry[str]"]:
        self.soft_errors = []
        self.cancelled = False
        self._visited = set()

        root = self.root_path or os.curdir
        log.debug("Walking %s", root)
        try:
            entries = self._list(root)
        except OSError as e:
            raise TraversalError(root, e) from e
        self._mark_visited(os.path.realpath(root))
        return entries

    def _walk_parallel(self) -> List[FileEntry]:
        root_entries = self._open_root()
        parts: List[Union[List[FileEntry], "Future[List[FileEntry]]"]] = []

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="filelist") as executor:
            for entry in root_entries:
                if self._is_cancelled():
                    break
                out_path = os.path.join(self.root_path, entry.name)
                kind = self._classify(entry, "", out_path)
                if kind == _DIRECTORY:
                    parts.append(executor.submit(self._collect_subtree, entry.path, f"{entry.name}/", out_path))
                elif kind == _FILE and self.include(out_path):
                    parts.append([FileEntry(out_path)])

            entries: List[FileEntry] = []
            for part in parts:
                entries.extend(part.result() if isinstance(part, Future) else part)
        return entries

    def _collect_subtree(self, fs_path: str, rel_dir: str, out_dir: str) -> List[FileEntry]:
        return list(self._descend(fs_path, rel_dir, out_dir))

    def _iterate_entries(self, entries: List["os.DirEntry[str]"], rel_dir: str, out_dir: str) -> Iterator[FileEntry]:
        for entry in entries:
            if self._is_cancelled():
                return
            out_path = os.path.join(out_dir, entry.name)
            kind = self._classify(entry, rel_dir, out_path)
            if kind == _DIRECTORY:
                yield from self._descend(entry.path, f"{rel_dir}{entry.name}/", out_path)
            elif kind == _FILE and self.include(out_path):
                yield FileEntry(out_path)

    def _classify(self, entry: "os.DirEntry[str]", rel_dir: str, out_path: str) -> Optional[str]:
        """Decide whether an entry is a directory to descend, a file to test, or neither."""
        try:
            is_dir = entry.is_dir()
            is_symlink = entry.is_symlink()
        except OSError as e:
            self._soft_fail(out_path, e)
            return None

        rel_path = f"{rel_dir}{entry.name}/" if is_dir else f"{rel_dir}{entry.name}"
        if self._prune and self.exclusion_rules.exclude(rel_path):  # type: ignore[union-attr]
            log.debug("Excluded %s", rel_path)
            return None

        if is_dir:
            if is_symlink and not self.follow_symlinks:
                log.debug("Not following symlinked directory %s", entry.path)
                return None
            return _DIRECTORY

        try:
            if entry.is_file():
                return _FILE
            if is_symlink:
                # is_file() is False for a dangling link; stat to report why
                os.stat(entry.path)
        except OSError as e:
            self._soft_fail(out_path, e)
            return None

        log.debug("Skipping special file %s", entry.path)
        return None

    def _descend(self, fs_path: str, rel_dir: str, out_dir: str) -> Iterator[FileEntry]:
        if not self._mark_visited(os.path.realpath(fs_path)):
            log.debug("Already visited %s, skipping", fs_path)
            return
        if self._is_cancelled():
            return
        try:
            entries = self._list(fs_path)
        except OSError as e:
            self._soft_fail(out_dir, e)
            return
        yield from self._iterate_entries(entries, rel_dir, out_dir)

    @staticmethod
    def _list(path: str) -> List["os.DirEntry[str]"]:
        # Read the whole listing so the handle is closed before descending
        with os.scandir(path) as it:
            return list(it)

    def _mark_visited(self, real_path: str) -> bool:
        with self._lock:
            if real_path in self._visited:
                return False
            self._visited.add(real_path)
            return True

    def _soft_fail(self, path: str, error: OSError) -> None:
        if self.error_action == ErrorAction.RAISE:
            raise TraversalError(path, error) from error
        log.warning("Skipping %s: %s", path, error)
        with self._lock:
            self.soft_errors.append(SoftError(path, error))

    def _is_cancelled(self) -> bool:
        if self.cancel_event is not None and self.cancel_event.is_set():
            self.cancelled = True
            return True
        return False
