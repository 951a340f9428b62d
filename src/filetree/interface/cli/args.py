from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (flags, help messages and defaults) and
translates the parsed argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from filetree.domain.constants import APP_NAME, APP_VERSION, DEFAULT_PREFIX, DEFAULT_SPACER

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the filetree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Render a directory as an indented tree listing.",
    )

    # --- Scan Root ---
    p.add_argument(
        "dir",
        nargs="?",
        default=None,
        help="Directory to scan (default: current working directory).",
    )

    # --- Formatting ---
    p.add_argument(
        "-s", "--spacer",
        default=None,
        help=f"Indentation unit repeated per depth level (default: {len(DEFAULT_SPACER)} spaces).",
    )
    p.add_argument(
        "-p", "--prefix",
        default=None,
        help=f"Marker printed before each entry name (default: '{DEFAULT_PREFIX}').",
    )
    p.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored console output.",
    )

    # --- Filtering ---
    p.add_argument(
        "-i", "--include-hidden",
        action="store_true",
        help="Include entries whose name starts with a dot.",
    )
    p.add_argument(
        "-g", "--git-ignored",
        action="store_true",
        help="Include entries matched by the root .gitignore.",
    )

    # --- Traversal ---
    p.add_argument(
        "-d", "--depth",
        type=_non_negative_int,
        default=None,
        help="Maximum number of levels to descend (default: unlimited).",
    )
    p.add_argument(
        "-j", "--workers",
        type=_positive_int,
        default=None,
        help="Number of worker threads used to scan directories (default: CPU count).",
    )

    # --- Output Sinks ---
    p.add_argument(
        "-c", "--copy",
        action="store_true",
        help="Copy the tree to the clipboard instead of printing it.",
    )
    p.add_argument(
        "-o", "--out-file",
        dest="out_file",
        default=None,
        help="Additionally write the tree to this file.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Persist diagnostic logs to this file.",
    )
    p.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Unset options map to None so that the merge step keeps the defaults.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.dir
    overrides["spacer"] = args.spacer
    overrides["prefix"] = args.prefix
    overrides["out_file"] = args.out_file
    overrides["depth"] = args.depth
    overrides["workers"] = args.workers

    if args.include_hidden:
        overrides["include_hidden"] = True
    if args.git_ignored:
        overrides["include_git_ignored"] = True
    if args.copy:
        overrides["copy"] = True
    if args.no_color:
        overrides["color"] = False

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    number = _parse_int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _positive_int(value: str) -> int:
    number = _parse_int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def _parse_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'")
