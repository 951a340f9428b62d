from __future__ import annotations

"""
Directory Tree Generator.

Builds the immutable TreeNode hierarchy mirroring a directory on disk.
Siblings are enumerated one level at a time and their subtrees are built
concurrently on a bounded thread pool. Filtering (hidden entries and
ignore-set matches) is applied at discovery time and every filesystem
failure degrades to "no entries" instead of aborting the walk.
"""

import logging
import os
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import FrozenSet, Iterable, List, Optional, Tuple, Union

from filetree.core.pipeline.components.filters import (
    is_git_ignored,
    is_hidden,
    load_ignore_set,
)
from filetree.domain.config import default_workers
from filetree.domain.tree_models import TreeNode, sort_key
from filetree.infra.fs import expand_path

logger = logging.getLogger(__name__)

_PendingNode = Union[TreeNode, "Future[TreeNode]"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_directory_tree(
        input_path: str,
        depth_budget: Optional[int] = None,
        include_hidden: bool = False,
        include_git_ignored: bool = False,
        max_workers: Optional[int] = None,
) -> TreeNode:
    """
    Load the root ignore set and build the complete tree for input_path.

    Args:
        input_path: Root directory for the scan.
        depth_budget: Levels to descend below the root (None for unlimited).
        include_hidden: Keep entries whose name starts with a dot.
        include_git_ignored: Keep entries matched by the ignore set.
        max_workers: Upper bound on concurrently running subtree builds.

    Returns:
        TreeNode: The fully materialized tree rooted at input_path.
    """
    root_path = expand_path(input_path, os.curdir)
    ignore_set = load_ignore_set(root_path)
    logger.debug(f"Loaded {len(ignore_set)} ignore entries from '{root_path}'.")

    started = time.perf_counter()
    tree = build_tree(
        root_path,
        depth_budget,
        ignore_set,
        include_hidden,
        include_git_ignored,
        max_workers=max_workers,
    )
    elapsed = time.perf_counter() - started
    logger.debug(f"Tree built for '{root_path}': {tree.count()} nodes in {elapsed:.3f}s.")
    return tree


def build_tree(
        path: str,
        depth_budget: Optional[int],
        ignore_set: FrozenSet[str],
        include_hidden: bool,
        include_git_ignored: bool,
        *,
        depth: int = 0,
        max_workers: Optional[int] = None,
) -> TreeNode:
    """
    Recursively construct the subtree rooted at path.

    A depth_budget of 0 yields a childless node regardless of what is on
    disk. The ignore set is shared by reference across all workers.

    Args:
        path: Root entry of the subtree.
        depth_budget: Remaining levels to descend (None for unlimited).
        ignore_set: Raw ignore lines matched by substring containment.
        include_hidden: Disable hidden-entry filtering.
        include_git_ignored: Disable ignore-set filtering.
        depth: Depth assigned to the root node.
        max_workers: Pool size; defaults to the CPU count.

    Returns:
        TreeNode: Root of the built subtree.
    """
    with TreeBuilder(ignore_set, include_hidden, include_git_ignored, max_workers) as builder:
        return builder.build(path, depth_budget, depth=depth)

# -----------------------------------------------------------------------------
# TREE BUILDER SERVICE
# -----------------------------------------------------------------------------

class TreeBuilder:
    """
    Concurrent tree construction bound to one ignore set and filter setup.

    Subtrees are handed to the pool only while a worker slot is free;
    otherwise the calling thread builds them inline. Every submitted task
    therefore starts immediately, so parents waiting on their children can
    never starve the pool.
    """

    def __init__(
            self,
            ignore_set: FrozenSet[str],
            include_hidden: bool = False,
            include_git_ignored: bool = False,
            max_workers: Optional[int] = None,
    ):
        self.ignore_set = ignore_set
        self.include_hidden = include_hidden
        self.include_git_ignored = include_git_ignored
        self.max_workers = max_workers or default_workers()

        self._slots = threading.BoundedSemaphore(self.max_workers)
        self._executor: Optional[ThreadPoolExecutor] = None

    def __enter__(self) -> "TreeBuilder":
        self._executor = ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix="TreeWorker",
        )
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def build(self, path: str, depth_budget: Optional[int], depth: int = 0) -> TreeNode:
        """Build the subtree rooted at path (see build_tree)."""
        return self._build_node(path, _path_is_dir(path), depth_budget, depth)

    # -------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -------------------------------------------------------------------------

    def _build_node(
            self,
            path: str,
            is_dir: bool,
            depth_budget: Optional[int],
            depth: int,
    ) -> TreeNode:
        if _exhausted(depth_budget) or not is_dir:
            return TreeNode(path=path, is_dir=is_dir, depth=depth)

        next_budget = None if depth_budget is None else depth_budget - 1
        pending: List[_PendingNode] = [
            self._dispatch(entry_path, entry_is_dir, next_budget, depth + 1)
            for entry_path, entry_is_dir in self._scan(path)
        ]

        children = [p.result() if isinstance(p, Future) else p for p in pending]
        children.sort(key=sort_key)
        return TreeNode(path=path, is_dir=True, depth=depth, children=tuple(children))

    def _dispatch(
            self,
            path: str,
            is_dir: bool,
            depth_budget: Optional[int],
            depth: int,
    ) -> _PendingNode:
        """Submit the subtree to the pool if a slot is free, else build it here."""
        # Leaves are built inline
        is_leaf = not is_dir or _exhausted(depth_budget)
        if is_leaf or self._executor is None or not self._slots.acquire(blocking=False):
            return self._build_node(path, is_dir, depth_budget, depth)

        try:
            future = self._executor.submit(self._build_node, path, is_dir, depth_budget, depth)
        except RuntimeError:
            self._slots.release()
            raise
        future.add_done_callback(lambda _f: self._slots.release())
        return future

    def _scan(self, path: str) -> Iterable[Tuple[str, bool]]:
        """
        List the entries of one directory level that pass the filters.

        Enumeration errors end the listing early; entries gathered so far
        are kept and nothing is raised.
        """
        entries: List[Tuple[str, bool]] = []
        try:
            with os.scandir(path) as it:
                for entry in it:
                    if is_hidden(entry.name, self.include_hidden):
                        continue
                    if is_git_ignored(entry.path, self.ignore_set, self.include_git_ignored):
                        continue
                    entries.append((entry.path, _entry_is_dir(entry)))
        except OSError:
            pass
        return entries

# -----------------------------------------------------------------------------
# FILESYSTEM PROBES
# -----------------------------------------------------------------------------

def _entry_is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _path_is_dir(path: str) -> bool:
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def _exhausted(depth_budget: Optional[int]) -> bool:
    return depth_budget is not None and depth_budget <= 0
