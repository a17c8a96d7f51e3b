from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Handlers are
attached directly to the root logger; a merge run is short and synchronous,
so no background listener is involved.

Only entry points call configure_logging(). Every other module obtains a
named logger and leaves handler setup alone.
"""

import logging
import sys

from sqlmerge.infra.logging.config import _LEVEL_MAP, LoggingConfig
from sqlmerge.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flag for idempotency
_CONFIGURED_FLAG_ATTR: str = "_sqlmerge_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger in an idempotent way.

    Behavior:
    - If already configured and force=False: no-op.
    - Otherwise: remove only handlers previously added by this module and
      apply the new configuration.
    - Never raises; on failure an emergency console handler is installed.

    Args:
        cfg: Logging configuration.
        force: Re-initialize handlers even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level_int = _parse_level(cfg.level)
        root.setLevel(level_int)
        _remove_our_handlers(root)

        if cfg.console:
            root.addHandler(_create_console_handler(level_int, logging.Formatter(cfg.console_fmt)))

        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
                cfg.max_bytes,
                cfg.backup_count,
            )
            if fh:
                root.addHandler(fh)

        setattr(root, _CONFIGURED_FLAG_ATTR, True)
        return root

    except Exception as e:
        _remove_our_handlers(root)
        root.setLevel(logging.INFO)
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
        _tag_handler(sh)
        root.addHandler(sh)
        root.warning(f"Logging configuration failed ({e}); using emergency console logger.")
        return root


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger.

    Args:
        name: Hierarchical name for the logger (usually __name__).
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()
