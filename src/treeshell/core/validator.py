from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary assembled from defaults, the
preferences file and CLI flags conforms to the expected schema. Handles
type coercion and enum checks, collecting warnings instead of failing.
"""

import logging
from typing import Any, Dict, List, Tuple

from treeshell.domain.config import (
    INPUT_MODES,
    LOG_LEVELS,
    NAMING_POLICIES,
    SUPPORTED_LOCALES,
    get_default_config,
)

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
        strict: If True, raises exceptions on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration
                                          and a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    # 2. Schema Definition (Declarative mapping)
    bool_fields = ["follow_symlinks", "sort_entries", "log_to_file"]

    choice_fields = {
        "naming_policy": NAMING_POLICIES,
        "input_mode": INPUT_MODES,
        "locale": SUPPORTED_LOCALES,
        "log_level": LOG_LEVELS,
    }

    # 3. Field Processing & Normalization
    # The root path is kept verbatim: it becomes the root node name
    path = merged.get("input_path")
    if path is None:
        merged["input_path"] = ""
    elif not isinstance(path, str):
        msg = f"Invalid field 'input_path': expected str, received {type(path).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        merged["input_path"] = defaults["input_path"]

    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field, choices in choice_fields.items():
        merged[field] = _as_choice(merged.get(field), defaults[field], choices, field, warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
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
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_choice(
        value: Any,
        fallback: str,
        choices: List[str],
        field: str,
        warnings: List[str],
        strict: bool
) -> str:
    """Accept a value only if it belongs to the allowed set (case-insensitive)."""
    if value is None:
        return fallback

    if isinstance(value, str):
        for choice in choices:
            if value.strip().lower() == choice.lower():
                return choice

    msg = f"Invalid field '{field}': '{value}' is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
