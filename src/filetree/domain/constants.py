from __future__ import annotations

"""
Domain Constants.

Centralizes application-wide identifiers, rendering defaults and the
terminal color palette shared by the CLI and the renderer.
"""

APP_NAME = "filetree"
APP_VERSION = "0.1.0"

# -----------------------------------------------------------------------------
# RENDERING DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_SPACER = "    "
DEFAULT_PREFIX = "- "
DIR_SUFFIX = "/"
GITIGNORE_FILE_NAME = ".gitignore"

# -----------------------------------------------------------------------------
# TERMINAL PALETTE (ANSI SGR)
# -----------------------------------------------------------------------------

ANSI_BRIGHT_MAGENTA = "\033[95m"
ANSI_BRIGHT_CYAN = "\033[96m"
ANSI_RESET = "\033[0m"

DIR_COLOR = ANSI_BRIGHT_MAGENTA
FILE_COLOR = ANSI_BRIGHT_CYAN
