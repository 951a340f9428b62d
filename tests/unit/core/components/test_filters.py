from __future__ import annotations

"""
Unit tests for the Ignore-Set Loader and entry predicates.

Verifies:
1. Raw line loading from the root .gitignore (no trimming, no parsing).
2. Silent degradation to an empty set on read failures.
3. Hidden and substring-based ignore predicates with their toggles.
"""

from pathlib import Path
from unittest.mock import patch

from filetree.core.pipeline.components.filters import is_git_ignored, is_hidden, load_ignore_set

# -----------------------------------------------------------------------------
# IGNORE-SET LOADING
# -----------------------------------------------------------------------------

def test_load_ignore_set_reads_raw_lines(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("target/\n*.log\n", encoding="utf-8")

    ignore = load_ignore_set(str(tmp_path))

    assert ignore == frozenset({"target/", "*.log"})


def test_load_ignore_set_drops_only_empty_lines(tmp_path: Path) -> None:
    """Comments and surrounding whitespace are kept verbatim."""
    (tmp_path / ".gitignore").write_text("\n\n# comment\n  build \n\nbuild\nbuild\n", encoding="utf-8")

    ignore = load_ignore_set(str(tmp_path))

    assert ignore == frozenset({"# comment", "  build ", "build"})


def test_load_ignore_set_empty_file(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").touch()

    assert load_ignore_set(str(tmp_path)) == frozenset()


def test_load_ignore_set_missing_file(tmp_path: Path) -> None:
    assert load_ignore_set(str(tmp_path)) == frozenset()


def test_load_ignore_set_root_is_a_file(tmp_path: Path) -> None:
    target = tmp_path / "plain.txt"
    target.write_text("x", encoding="utf-8")

    assert load_ignore_set(str(target)) == frozenset()


def test_load_ignore_set_permission_error(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("secret\n", encoding="utf-8")

    with patch("builtins.open", side_effect=PermissionError("denied")):
        assert load_ignore_set(str(tmp_path)) == frozenset()


def test_load_ignore_set_undecodable_content(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_bytes(b"\xff\xfe\xfa")

    assert load_ignore_set(str(tmp_path)) == frozenset()

# -----------------------------------------------------------------------------
# ENTRY PREDICATES
# -----------------------------------------------------------------------------

def test_is_hidden_respects_toggle() -> None:
    assert is_hidden(".env", include_hidden=False) is True
    assert is_hidden(".env", include_hidden=True) is False
    assert is_hidden("env", include_hidden=False) is False
    assert is_hidden("file.", include_hidden=False) is False


def test_is_git_ignored_substring_containment() -> None:
    ignore = frozenset({"node_modules", "*.log"})

    assert is_git_ignored("/repo/node_modules/pkg", ignore, False) is True
    assert is_git_ignored("/repo/src/my_node_modules_helper.py", ignore, False) is True
    # Glob syntax is not interpreted
    assert is_git_ignored("/repo/app.log", ignore, False) is False
    assert is_git_ignored("/repo/*.log", ignore, False) is True


def test_is_git_ignored_disabled_by_toggle() -> None:
    assert is_git_ignored("/repo/node_modules", frozenset({"node_modules"}), True) is False


def test_is_git_ignored_empty_set() -> None:
    assert is_git_ignored("/repo/anything", frozenset(), False) is False
