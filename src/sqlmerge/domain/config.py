from __future__ import annotations

"""
Configuration Domain Management.

Handles the persistent JSON configuration file and the default runtime
settings consumed by the command-line interface.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from sqlmerge.domain.constants import DEFAULT_OUTPUT_FILE
from sqlmerge.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"

CONFIG_KEYS = ("directory", "output_file_path", "logging_level", "logging_file")


def get_config_file_path() -> str:
    """Return the default location of the persistent configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "directory": os.getcwd(),
        "output_file_path": DEFAULT_OUTPUT_FILE,
        "logging_level": "INFO",
        "logging_file": None,
    }


# -----------------------------------------------------------------------------
# Persistence
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk, layered on top of the defaults.

    A missing file is not an error. An unreadable or malformed file is logged
    and ignored so that a broken config never blocks a merge run.

    Args:
        path: Explicit config file. Defaults to the user data directory file.

    Returns:
        Dict[str, Any]: Defaults overridden by the known keys found on disk.
    """
    config = get_default_config()
    config_path = path or get_config_file_path()

    if not os.path.exists(config_path):
        logger.debug(f"No configuration file at {config_path}; using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable configuration file '{config_path}': {e}")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Ignoring configuration file '{config_path}': expected a JSON object.")
        return config

    for key in CONFIG_KEYS:
        if key in data:
            config[key] = data[key]

    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        logger.debug(f"Unknown configuration keys ignored: {', '.join(unknown)}")

    return config
