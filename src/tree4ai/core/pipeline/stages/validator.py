from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper for the pipeline, ensuring that the configuration
dictionary conforms to the expected schema. Handles type coercion and
default value injection so that CLI overrides or hand-written dictionaries
never reach the pipeline in an unexpected shape.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from tree4ai.domain.config import get_default_config

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SCHEMA
# -----------------------------------------------------------------------------

_STRING_FIELDS = ["root", "output_path"]

_BOOL_FIELDS = [
    "use_git", "include_ignored",
    "hide_secrets", "include_assets", "include_binaries",
    "include_header", "json_output",
]

_OPTIONAL_INT_FIELDS = ["max_depth", "max_files"]


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

    Converts untrusted inputs into strictly typed parameters and fills
    missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: A tuple containing the normalized
                                          configuration and a list of warnings.
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
    merged.update(config)

    # 2. Field Processing & Normalization
    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults.get(field, ""), field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults.get(field, False), field, warnings, strict)

    for field in _OPTIONAL_INT_FIELDS:
        merged[field] = _as_optional_int(merged.get(field), field, warnings, strict)

    # 3. Unknown keys are preserved but reported
    unknown = sorted(set(merged) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown configuration key '{key}' ignored by the pipeline.")

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        # Support numeric coercion (0/1)
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        # Support string coercion (human-friendly keywords)
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


def _as_optional_int(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[int]:
    """Accept None or a non-negative integer; numeric strings are coerced."""
    if value is None:
        return None

    if isinstance(value, int) and not isinstance(value, bool):
        if value >= 0:
            return value
        msg = f"Invalid field '{field}': must be >= 0, received {value}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Limit disabled.")
        return None

    if isinstance(value, str) and not strict:
        s = value.strip()
        if not s:
            return None
        if s.isdigit():
            warnings.append(f"Field '{field}' converted from '{value}' to int.")
            return int(s)

    msg = f"Invalid field '{field}': expected non-negative int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Limit disabled.")
    return None
