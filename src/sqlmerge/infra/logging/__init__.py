from __future__ import annotations

from .config import LEVEL_NAMES, LoggingConfig
from .core import (
    _CONFIGURED_FLAG_ATTR,
    configure_logging,
    get_logger,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LEVEL_NAMES",
    "LoggingConfig",
    "configure_logging",
    "get_logger",
]
