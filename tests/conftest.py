from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A shared on-disk project layout used by builder, renderer and CLI tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a small project tree on disk.

    Structure:
    /project
      .gitignore        ("ignored.txt")
      /.hidden_dir
      /sub
        file.txt
        .hidden.txt
        ignored.txt
    """
    root = tmp_path / "project"
    root.mkdir()

    (root / ".gitignore").write_text("ignored.txt\n", encoding="utf-8")
    (root / ".hidden_dir").mkdir()

    sub = root / "sub"
    sub.mkdir()
    (sub / "file.txt").write_text("content", encoding="utf-8")
    (sub / ".hidden.txt").write_text("secret", encoding="utf-8")
    (sub / "ignored.txt").write_text("noise", encoding="utf-8")

    return root
