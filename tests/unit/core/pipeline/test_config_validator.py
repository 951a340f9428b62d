from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default value injection.
2. Type coercion (strings to bools/ints).
3. Verbatim handling of spacer and prefix.
4. Strict mode validation.
"""

import pytest

from filetree.core.pipeline.validator import validate_config
from filetree.domain.constants import DEFAULT_PREFIX, DEFAULT_SPACER


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg["spacer"] == DEFAULT_SPACER
    assert cfg["prefix"] == DEFAULT_PREFIX
    assert cfg["depth"] is None
    assert len(warnings) == 1


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["include_hidden"] is False
    assert cfg["include_git_ignored"] is False
    assert cfg["copy"] is False
    assert cfg["out_file"] is None
    assert cfg["color"] is None
    assert cfg["workers"] >= 1
    assert warnings == []


def test_validate_keeps_spacer_and_prefix_verbatim() -> None:
    cfg, warnings = validate_config({"spacer": "\t", "prefix": ""})

    assert cfg["spacer"] == "\t"
    assert cfg["prefix"] == ""
    assert warnings == []


def test_validate_strips_paths() -> None:
    cfg, _ = validate_config({"input_path": "  /data  ", "out_file": "   "})

    assert cfg["input_path"] == "/data"
    assert cfg["out_file"] is None


def test_validate_converts_strings() -> None:
    raw = {
        "include_hidden": "yes",
        "copy": "0",
        "color": "off",
        "depth": "3",
        "workers": " 2 ",
    }
    cfg, warnings = validate_config(raw)

    assert cfg["include_hidden"] is True
    assert cfg["copy"] is False
    assert cfg["color"] is False
    assert cfg["depth"] == 3
    assert cfg["workers"] == 2
    assert len(warnings) == 5


def test_validate_rejects_out_of_range_numbers() -> None:
    cfg, warnings = validate_config({"depth": -1, "workers": 0})

    assert cfg["depth"] is None
    assert cfg["workers"] >= 1
    assert len(warnings) == 2


def test_validate_zero_depth_is_valid() -> None:
    cfg, warnings = validate_config({"depth": 0})

    assert cfg["depth"] == 0
    assert warnings == []


def test_validate_bool_is_not_an_int() -> None:
    cfg, warnings = validate_config({"depth": True})

    assert cfg["depth"] is None
    assert warnings


def test_strict_mode_raises_type_error() -> None:
    with pytest.raises(TypeError):
        validate_config({"spacer": 4}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"include_hidden": "yes"}, strict=True)
    with pytest.raises(TypeError):
        validate_config([], strict=True)


def test_strict_mode_raises_value_error() -> None:
    with pytest.raises(ValueError):
        validate_config({"workers": 0}, strict=True)
