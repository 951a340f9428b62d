from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the immutable node type produced by the tree builder and
consumed (read-only) by every rendering sink.
"""

import os
from dataclasses import dataclass, field
from typing import Iterator, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeNode:
    """
    Represents one filesystem entry (file or directory) in the tree.

    Attributes:
        path: Filesystem path of the entry.
        is_dir: Whether the entry resolved to a directory at discovery time.
        depth: Distance from the construction root plus the depth offset.
        children: Sorted child nodes (directories first, then by path).
    """
    path: str
    is_dir: bool = False
    depth: int = 0
    children: Tuple["TreeNode", ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        """
        Base name of the entry; filesystem roots render as their own path.

        Relative roots such as "." or ".." resolve to the directory they
        point at.
        """
        base = os.path.basename(os.path.normpath(self.path))
        if base in (os.curdir, os.pardir):
            resolved = os.path.abspath(self.path)
            return os.path.basename(resolved) or resolved
        return base or self.path

    def iter_preorder(self) -> Iterator["TreeNode"]:
        """Yield this node, then every descendant in sorted pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_preorder()

    def count(self) -> int:
        """Total number of nodes in this subtree, root included."""
        return sum(1 for _ in self.iter_preorder())


def sort_key(node: TreeNode) -> Tuple[bool, str]:
    """Ordering key for siblings: directories first, then ascending path."""
    return (not node.is_dir, node.path)
