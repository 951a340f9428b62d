from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of defaults with
command-line overrides, validation, the pre-flight root check, tree
construction and delivery to the requested sinks.
"""

import os
import sys
from typing import Any, Dict, List, Optional

from filetree.core.analysis.tree_generator import generate_directory_tree
from filetree.core.analysis.tree_renderer import render_clipboard, render_console, render_file
from filetree.core.pipeline.validator import validate_config
from filetree.domain.config import CONFIG_KEYS, get_default_config
from filetree.domain.tree_models import TreeNode
from filetree.infra.clipboard import ClipboardUnavailableError
from filetree.infra.fs import expand_path, path_exists
from filetree.infra.logging import LoggingConfig, configure_logging, get_logger
from filetree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_PATH_NOT_FOUND = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 sink failure, 2 missing root,
             130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr only; stdout is reserved for the tree)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file), force=True)

    # 3. Defaults + overrides, then validation
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Pre-flight root verification
    input_path = expand_path(conf["input_path"], os.curdir)
    if not path_exists(input_path):
        msg = f"No such file or directory: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_PATH_NOT_FOUND

    # 5. Tree construction
    logger.debug(f"Scanning '{input_path}' (depth={conf['depth']}, workers={conf['workers']}).")
    try:
        tree = generate_directory_tree(
            input_path,
            depth_budget=conf["depth"],
            include_hidden=conf["include_hidden"],
            include_git_ignored=conf["include_git_ignored"],
            max_workers=conf["workers"],
        )
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    # 6. Delivery to sinks
    try:
        _deliver_primary(tree, conf)
    except ClipboardUnavailableError as e:
        logger.critical(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except BrokenPipeError:
        # Downstream reader closed early (e.g. piped into `head`)
        _silence_stdout()
        return EXIT_FAILURE
    except OSError as e:
        msg = f"Cannot write tree to standard output: {e}"
        logger.critical(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    if conf["out_file"]:
        try:
            render_file(tree, conf["spacer"], conf["prefix"], conf["out_file"])
        except OSError as e:
            msg = f"Cannot write output file '{conf['out_file']}': {e}"
            logger.critical(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return EXIT_FAILURE

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values for known keys into base.

    Args:
        base: The default configuration dictionary.
        overrides: Values supplied by the command line.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# OUTPUT DELIVERY
# -----------------------------------------------------------------------------

def _deliver_primary(tree: TreeNode, conf: Dict[str, Any]) -> None:
    """Send the tree to the clipboard when requested, otherwise to the console."""
    if conf["copy"]:
        render_clipboard(tree, conf["spacer"], conf["prefix"])
    else:
        render_console(tree, conf["spacer"], conf["prefix"], color=conf["color"])


def _silence_stdout() -> None:
    """
    Point stdout at the null device after a broken pipe.

    The interpreter flushes stdout again on exit; without this the flush
    raises a second BrokenPipeError.
    """
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
