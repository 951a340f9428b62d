from __future__ import annotations

"""
System Clipboard Adapter.

Wraps pyperclip so that a missing clipboard mechanism surfaces as a single
application-level error instead of a backend-specific exception.
"""

import logging

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardUnavailableError(RuntimeError):
    """Raised when the system clipboard cannot be written."""


def copy_to_clipboard(text: str) -> None:
    """
    Replace the system clipboard contents with text.

    Args:
        text: Buffer to place on the clipboard.

    Raises:
        ClipboardUnavailableError: If no clipboard backend is usable.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailableError(f"Clipboard access is unavailable: {e}") from e
    logger.debug(f"Copied {len(text)} characters to the clipboard.")
