from __future__ import annotations

"""
Configuration Domain Management.

Builds the runtime configuration dictionary from built-in defaults and the
optional user file `config.json` in the application data directory. The
file is read-only from the toolkit's point of view.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from shellkit.domain.tree_models import DepthPolicy
from shellkit.infra.fs import DEFAULT_ENCODING, get_user_data_dir
from shellkit.utils.i18n import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TREE_PATH = "."
UNLIMITED_DEPTH = -1


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": None,

        # Messages
        "locale": DEFAULT_LOCALE,

        # IO
        "encoding": DEFAULT_ENCODING,

        # Tree
        "tree_default_path": DEFAULT_TREE_PATH,
        "tree_max_depth": UNLIMITED_DEPTH,
        "tree_depth_policy": DepthPolicy.SKIP_RECURSION.value,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(warnings: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    Load the user configuration and merge it over the defaults.

    A missing file yields the defaults. A corrupted file also yields the
    defaults and is reported as a warning.

    Args:
        warnings: Optional sink for problems found in the file. When given,
            messages are appended there instead of being logged.

    Returns:
        Dict[str, Any]: Merged (not yet validated) configuration.
    """
    config = get_default_config()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        _report(f"Failed to load config '{CONFIG_FILE}': {e}. Using defaults.", warnings)
        return config

    if not isinstance(data, dict):
        _report("Corrupted config file (expected a JSON object). Using defaults.", warnings)
        return config

    config.update(data)
    logger.debug(f"Configuration loaded from {CONFIG_FILE}")
    return config


def _report(message: str, warnings: Optional[List[str]]) -> None:
    if warnings is None:
        logger.warning(message)
    else:
        warnings.append(message)
