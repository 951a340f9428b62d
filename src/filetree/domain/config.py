from __future__ import annotations

"""
Configuration Domain.

Defines the default runtime configuration (session state) that drives a
single scan-and-render run. Interfaces merge their overrides on top of
these values before validation.
"""

import os
from typing import Any, Dict, List

from filetree.domain.constants import DEFAULT_PREFIX, DEFAULT_SPACER

# -----------------------------------------------------------------------------
# SCHEMA
# -----------------------------------------------------------------------------

CONFIG_KEYS: List[str] = [
    "input_path",
    "spacer",
    "prefix",
    "include_hidden",
    "include_git_ignored",
    "copy",
    "out_file",
    "depth",
    "workers",
    "color",
]

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

def default_workers() -> int:
    """Size of the traversal pool: one worker per available CPU core."""
    return max(1, os.cpu_count() or 1)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    A ``depth`` of None means the walk is not depth-limited. A ``color`` of
    None lets the console renderer auto-detect terminal support.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO
        "input_path": os.curdir,
        "out_file": None,
        "copy": False,

        # Formatting
        "spacer": DEFAULT_SPACER,
        "prefix": DEFAULT_PREFIX,
        "color": None,

        # Filtering
        "include_hidden": False,
        "include_git_ignored": False,

        # Traversal
        "depth": None,
        "workers": default_workers(),
    }
