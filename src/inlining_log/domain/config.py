from __future__ import annotations

"""
Report Configuration.

Dict-based settings that drive report generation, with a validator that
normalizes user-supplied values and collects warnings instead of failing
unless strict mode is requested.
"""

import logging
from typing import Any, Dict, List, Tuple

from inlining_log.infra.logging.config import _LEVEL_MAP

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
REPORT_FORMATS: Tuple[str, ...] = ("list", "tree")
DEFAULT_REPORT_FORMAT = "tree"


def get_default_report_config() -> Dict[str, Any]:
    """
    Generate the default report configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "format": DEFAULT_REPORT_FORMAT,
        "print_to_log": False,
        "save_path": "",
        "log_level": "INFO",
    }

# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------
def validate_report_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a report configuration dictionary.

    Missing keys fall back to defaults. In non-strict mode invalid values are
    replaced by defaults (or coerced) and a warning is collected; in strict
    mode they raise.

    Args:
        config: User-supplied configuration, merged over the defaults.
        strict: Raise TypeError/ValueError instead of collecting warnings.

    Returns:
        Tuple[Dict[str, Any], List[str]]: (normalized config, warnings).
    """
    warnings: List[str] = []
    defaults = get_default_report_config()

    if config is None:
        return defaults, warnings

    if not isinstance(config, dict):
        msg = f"Invalid config: expected dict, got {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(msg + " Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    merged["format"] = _as_choice(
        merged.get("format"), REPORT_FORMATS, defaults["format"], "format", warnings, strict
    )
    merged["log_level"] = _as_choice(
        merged.get("log_level"), tuple(_LEVEL_MAP), defaults["log_level"], "log_level", warnings, strict
    )
    merged["print_to_log"] = _as_bool(
        merged.get("print_to_log"), defaults["print_to_log"], "print_to_log", warnings, strict
    )
    merged["save_path"] = _as_str(
        merged.get("save_path"), defaults["save_path"], "save_path", warnings, strict
    )

    unknown = sorted(set(merged) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown config key '{key}' ignored.")
        del merged[key]

    return merged, warnings

# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------
def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()
    msg = f"Field '{field}' invalid: expected str, got {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(msg + " Using fallback.")
    logger.warning(msg)
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, int) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from str '{value}' to bool True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from str '{value}' to bool False.")
                return False

    msg = f"Field '{field}' invalid: expected bool, got {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(msg + " Using fallback.")
    logger.warning(msg)
    return fallback


def _as_choice(
        value: Any,
        choices: Tuple[str, ...],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        for choice in choices:
            if choice.lower() == value.strip().lower():
                return choice
    msg = f"Field '{field}' invalid: {value!r} is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(msg + " Using fallback.")
    logger.warning(msg)
    return fallback
