from __future__ import annotations

"""
Logging Configuration Models.

Defines the settings used to initialize the logging subsystem for a merge
run, and how they are derived from the validated run configuration
("logging_level" / "logging_file" keys).
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LEVEL_NAMES = frozenset(_LEVEL_MAP)


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings for one sql-merge process.

    Console output goes to stderr so that `--dry-run` can use stdout for
    the merged document alone.

    Attributes:
        level: Minimum severity level to capture.
        console: Flag to enable stderr stream output.
        log_file: Optional path for persistent, rotated file storage.
        max_bytes: Maximum size per log segment before rotation.
        backup_count: Number of historical log segments to preserve.
        console_fmt: Format for terminal output.
        file_fmt: Format for file entries.
        datefmt: Timestamp format for file entries.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024  # 1MB
    backup_count: int = 3

    console_fmt: str = "sql-merge | %(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> LoggingConfig:
        """
        Build logging settings from a run configuration.

        Args:
            config: Configuration dict carrying "logging_level" and
                    "logging_file" (missing keys fall back to INFO, no file).

        Returns:
            LoggingConfig: Console logging plus the optional rotating file.
        """
        level = str(config.get("logging_level") or "INFO")
        log_file = config.get("logging_file") or None
        return cls(level=level, log_file=log_file)
