from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path expansion and plain-text persistence for rendered
trees. Acts as a thin abstraction over the 'os' module so the rest of the
application never opens files directly.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def expand_path(path: Optional[str], fallback: str) -> str:
    """
    Expand environment variables ($VAR/%VAR%) and user home shortcuts (~/).

    The result keeps the form the user typed: relative paths stay relative.
    Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Expanded path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.expandvars(os.path.expanduser(p))


def path_exists(path: str) -> bool:
    """Check that a scan root is present on disk (file or directory)."""
    return os.path.exists(path)

# -----------------------------------------------------------------------------
# PERSISTENCE API
# -----------------------------------------------------------------------------

def write_text_file(destination: str, content: str) -> None:
    """
    Write content to destination as UTF-8, creating or truncating the file.

    Errors are not handled here: an unwritable destination is a fatal
    condition for the caller.

    Args:
        destination: Target file path.
        content: Full text to persist.

    Raises:
        OSError: If the file cannot be opened or written.
    """
    with open(destination, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
