from __future__ import annotations

"""
Configuration Domain Management.

Provides the session defaults and reads optional user preferences from a
JSON file in the user data directory. The tool never writes this file.
"""

import json
import logging
import os
from typing import Any, Dict, List

from treeshell.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
DEFAULT_LOCALE = "en"

NAMING_POLICIES: List[str] = ["basename", "full_path"]
INPUT_MODES: List[str] = ["token", "line"]
SUPPORTED_LOCALES: List[str] = ["en", "es"]
LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_config_file_path() -> str:
    """Absolute path of the optional preferences file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Session root ("" means: prompt the user)
        "input_path": "",

        # Snapshot
        "naming_policy": "basename",
        "follow_symlinks": False,
        "sort_entries": False,

        # Interface
        "input_mode": "token",
        "locale": DEFAULT_LOCALE,

        # Diagnostics
        "log_level": "WARNING",
        "log_to_file": True,
    }

# -----------------------------------------------------------------------------
# Persistence Logic (read-only)
# -----------------------------------------------------------------------------
def load_config(path: str = "") -> Dict[str, Any]:
    """
    Load user preferences merged over the defaults.

    Args:
        path: Optional explicit file path; defaults to the user data dir file.

    Returns:
        Dict[str, Any]: Merged configuration. Defaults on missing/corrupt file.
    """
    config = get_default_config()
    config_file = path or get_config_file_path()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    # Only known keys survive the merge
    for key in config:
        if key in data:
            config[key] = data[key]
    return config
