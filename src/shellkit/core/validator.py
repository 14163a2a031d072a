from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the merged configuration dictionary into strictly typed values,
injecting defaults for anything missing or malformed.
"""

import codecs
import logging
from typing import Any, Dict, List, Optional, Tuple

from shellkit.domain.config import get_default_config
from shellkit.domain.tree_models import DepthPolicy
from shellkit.infra.logging.config import _LEVEL_MAP

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
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    unknown = sorted(set(config) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown config key '{key}' ignored.")
        merged.pop(key)

    merged["log_level"] = _as_level(merged.get("log_level"), defaults["log_level"], warnings, strict)
    merged["log_file"] = _as_optional_str(merged.get("log_file"), "log_file", warnings, strict)
    merged["locale"] = _as_str(merged.get("locale"), defaults["locale"], "locale", warnings, strict).lower()
    merged["encoding"] = _as_encoding(merged.get("encoding"), defaults["encoding"], warnings, strict)
    merged["tree_default_path"] = _as_str(
        merged.get("tree_default_path"), defaults["tree_default_path"], "tree_default_path", warnings, strict
    )
    merged["tree_max_depth"] = _as_int(
        merged.get("tree_max_depth"), defaults["tree_max_depth"], "tree_max_depth", warnings, strict
    )
    merged["tree_depth_policy"] = _as_policy(
        merged.get("tree_depth_policy"), defaults["tree_depth_policy"], warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool, exc: type = TypeError) -> None:
    if strict:
        raise exc(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback
    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    _reject(f"Invalid field '{field}': expected str or null, received {type(value).__name__}.", warnings, strict)
    return None


def _as_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    # bool is an int subclass but never a meaningful depth
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict and isinstance(value, str):
        try:
            coerced = int(value.strip())
        except ValueError:
            pass
        else:
            warnings.append(f"Field '{field}' converted from '{value}' to {coerced}.")
            return coerced

    _reject(f"Invalid field '{field}': expected int, received {type(value).__name__}.", warnings, strict)
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _as_level(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    level = _as_str(value, fallback, "log_level", warnings, strict).upper()
    if level not in _LEVEL_MAP:
        _reject(f"Invalid log level '{value}'.", warnings, strict, ValueError)
        return fallback
    return level


def _as_encoding(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    encoding = _as_str(value, fallback, "encoding", warnings, strict)
    try:
        codecs.lookup(encoding)
    except LookupError:
        _reject(f"Unknown encoding '{encoding}'.", warnings, strict, ValueError)
        return fallback
    return encoding


def _as_policy(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    raw = _as_str(value, fallback, "tree_depth_policy", warnings, strict).lower()
    try:
        return DepthPolicy(raw).value
    except ValueError:
        allowed = ", ".join(p.value for p in DepthPolicy)
        _reject(f"Invalid tree_depth_policy '{value}' (allowed: {allowed}).", warnings, strict, ValueError)
        return fallback
