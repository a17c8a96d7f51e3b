from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the merged configuration (defaults, config file and CLI
overrides) before a run: fills missing keys, coerces types, expands paths
and checks the logging level.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from sqlmerge.domain.config import get_default_config
from sqlmerge.infra.fs import normalize_path
from sqlmerge.infra.logging import LEVEL_NAMES

logger = logging.getLogger(__name__)


def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and the
                                          warnings collected on the way.

    Raises:
        TypeError: In strict mode, when config or a field has the wrong type.
        ValueError: In strict mode, when the logging level is unknown.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        config = {}

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # Path fields
    for key in ("directory", "output_file_path"):
        value = merged.get(key)
        if not isinstance(value, (str, os.PathLike)):
            msg = f"Invalid type for '{key}': expected a path string."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Using default.")
            value = defaults[key]
        merged[key] = normalize_path(os.fspath(value), defaults[key])

    # Logging level
    level = str(merged.get("logging_level") or "").strip().upper()
    if level not in LEVEL_NAMES:
        msg = f"Unknown logging level '{merged.get('logging_level')}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using INFO.")
        level = "INFO"
    merged["logging_level"] = level

    # Optional log file
    log_file = merged.get("logging_file")
    if log_file is not None and not isinstance(log_file, str):
        msg = "Invalid type for 'logging_file': expected a path string."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} File logging disabled.")
        log_file = None
    merged["logging_file"] = normalize_path(log_file, "") if log_file else None

    return merged, warnings
