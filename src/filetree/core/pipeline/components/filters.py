from __future__ import annotations

"""
Entry Filtering and Ignore-Set Loading.

Loads the raw lines of the root-level .gitignore file and provides the
per-entry predicates used by the tree builder at discovery time. Ignore
lines are matched by plain substring containment against the full entry
path; no glob, negation or comment semantics are applied.
"""

import os
from typing import FrozenSet, Iterable

from filetree.domain.constants import GITIGNORE_FILE_NAME

# -----------------------------------------------------------------------------
# GITIGNORE INTEGRATION
# -----------------------------------------------------------------------------

def load_ignore_set(root_path: str) -> FrozenSet[str]:
    """
    Read the .gitignore located directly inside root_path into a set of lines.

    Lines are kept verbatim; only empty lines are discarded. Any read failure
    (missing file, permission error, root is not a directory, undecodable
    content) yields an empty set.

    Args:
        root_path: Directory expected to contain the .gitignore file.

    Returns:
        FrozenSet[str]: Raw non-empty lines of the file.
    """
    gitignore_path = os.path.join(root_path, GITIGNORE_FILE_NAME)
    try:
        with open(gitignore_path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError):
        return frozenset()

    return frozenset(line for line in content.splitlines() if line)

# -----------------------------------------------------------------------------
# ENTRY PREDICATES
# -----------------------------------------------------------------------------

def is_hidden(name: str, include_hidden: bool) -> bool:
    """
    Check whether an entry is excluded as hidden.

    Args:
        name: Base name of the entry.
        include_hidden: When True, hidden entries are never excluded.

    Returns:
        bool: True if the entry must be skipped.
    """
    return name.startswith(".") and not include_hidden


def is_git_ignored(path: str, ignore_set: Iterable[str], include_git_ignored: bool) -> bool:
    """
    Check whether an entry is excluded by the ignore set.

    Args:
        path: Full path of the entry.
        ignore_set: Raw ignore lines, matched as substrings of path.
        include_git_ignored: When True, ignore lines are never applied.

    Returns:
        bool: True if the entry must be skipped.
    """
    if include_git_ignored:
        return False
    return any(pattern in path for pattern in ignore_set)
