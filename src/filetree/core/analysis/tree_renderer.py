from __future__ import annotations

"""
Tree Renderer.

Serializes a built TreeNode hierarchy to its sinks: the console (colored),
the system clipboard and a plain-text file. Every sink is a read-only
pre-order traversal over the same line formula, so their text is always
identical apart from console coloring.
"""

import logging
import os
import sys
from typing import List, Optional, TextIO

from filetree.domain.constants import ANSI_RESET, DIR_COLOR, DIR_SUFFIX, FILE_COLOR
from filetree.domain.tree_models import TreeNode
from filetree.infra.clipboard import copy_to_clipboard
from filetree.infra.fs import write_text_file

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# LINE FORMATTING
# -----------------------------------------------------------------------------

def format_line(node: TreeNode, spacer: str, prefix: str, color: bool = False) -> str:
    """
    Format a single node as ``<spacer * depth><prefix><name>[/]``.

    The root (depth 0) carries no indentation. When color is enabled the
    name and suffix are wrapped in the directory or file color.
    """
    indent = spacer * node.depth
    label = display_name(node) + (DIR_SUFFIX if node.is_dir else "")
    if color:
        tone = DIR_COLOR if node.is_dir else FILE_COLOR
        label = f"{tone}{label}{ANSI_RESET}"
    return f"{indent}{prefix}{label}"


def display_name(node: TreeNode) -> str:
    """
    Return the entry name as printable text.

    Names that are not valid UTF-8 on disk come back from the OS with
    surrogate escapes; those bytes are replaced with U+FFFD so that every
    sink can encode the line.
    """
    return os.fsencode(node.name).decode("utf-8", errors="replace")


def render_lines(tree: TreeNode, spacer: str, prefix: str) -> List[str]:
    """
    Produce the uncolored lines of the tree in pre-order.

    Args:
        tree: Root of the tree to render.
        spacer: Indentation unit repeated once per depth level.
        prefix: Marker placed before each entry name.

    Returns:
        List[str]: One line per node, without line terminators.
    """
    return [format_line(node, spacer, prefix) for node in tree.iter_preorder()]


def render_text(tree: TreeNode, spacer: str, prefix: str) -> str:
    """Join the rendered lines into one buffer, each line newline-terminated."""
    return "".join(f"{line}\n" for line in render_lines(tree, spacer, prefix))

# -----------------------------------------------------------------------------
# SINKS
# -----------------------------------------------------------------------------

def render_console(
        tree: TreeNode,
        spacer: str,
        prefix: str,
        stream: Optional[TextIO] = None,
        color: Optional[bool] = None,
) -> None:
    """
    Print the tree to a text stream, one entry per line.

    Args:
        tree: Root of the tree to render.
        spacer: Indentation unit.
        prefix: Per-line marker.
        stream: Destination stream (defaults to stdout).
        color: Force coloring on/off; None auto-detects terminal support.
    """
    out = stream if stream is not None else sys.stdout
    use_color = supports_color(out) if color is None else color

    for node in tree.iter_preorder():
        print(format_line(node, spacer, prefix, color=use_color), file=out)


def render_clipboard(tree: TreeNode, spacer: str, prefix: str) -> None:
    """
    Replace the system clipboard contents with the rendered tree.

    Raises:
        ClipboardUnavailableError: If the clipboard cannot be written.
    """
    copy_to_clipboard(render_text(tree, spacer, prefix))
    logger.info("Tree copied to clipboard.")


def render_file(tree: TreeNode, spacer: str, prefix: str, destination: str) -> None:
    """
    Write the rendered tree to destination, creating or truncating it.

    Raises:
        OSError: If the destination cannot be written.
    """
    write_text_file(destination, render_text(tree, spacer, prefix))
    logger.info(f"Tree saved to file: {destination}")

# -----------------------------------------------------------------------------
# TERMINAL DETECTION
# -----------------------------------------------------------------------------

def supports_color(stream: TextIO) -> bool:
    """Check whether ANSI colors should be emitted on stream."""
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False
