from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the raw configuration dictionary (defaults merged with CLI
overrides) into strictly typed values before a run starts. Handles type
coercion and default injection, collecting a warning for every value it
had to correct.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from filetree.domain.config import get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and the
                                          list of warnings produced.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on an out-of-range number.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # Path: surrounding whitespace is never meaningful
    merged["input_path"] = _as_str(
        merged.get("input_path"), defaults["input_path"], "input_path", warnings, strict, strip=True
    )
    merged["out_file"] = _as_optional_str(merged.get("out_file"), "out_file", warnings, strict)

    # Formatting: kept verbatim, empty strings included
    for field in ("spacer", "prefix"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict, strip=False)

    for field in ("include_hidden", "include_git_ignored", "copy"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    if merged.get("color") is not None:
        merged["color"] = _as_bool(merged.get("color"), None, "color", warnings, strict)

    merged["depth"] = _as_int(merged.get("depth"), None, "depth", 0, warnings, strict)
    merged["workers"] = _as_int(merged.get("workers"), defaults["workers"], "workers", 1, warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(
        value: Any,
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
        strip: bool,
) -> str:
    """Validate string inputs; stripped values fall back when left empty."""
    if value is None:
        return fallback
    if isinstance(value, str):
        if not strip:
            return value
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    """Validate an optional path; blank strings mean 'not set'."""
    if value is None:
        return None
    if isinstance(value, str):
        v = value.strip()
        return v or None

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Ignored.")
    return None


def _as_bool(value: Any, fallback: Any, field: str, warnings: List[str], strict: bool) -> Any:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_int(
        value: Any,
        fallback: Optional[int],
        field: str,
        minimum: int,
        warnings: List[str],
        strict: bool,
) -> Optional[int]:
    """Coerce integers (including numeric strings) and enforce a lower bound."""
    if value is None:
        return fallback

    number: Optional[int] = None
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif isinstance(value, str) and not strict:
        try:
            number = int(value.strip())
            warnings.append(f"Field '{field}' converted from '{value}' to {number}.")
        except ValueError:
            number = None

    if number is None:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if number < minimum:
        msg = f"Invalid field '{field}': {number} is below the minimum of {minimum}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    return number
