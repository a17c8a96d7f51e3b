from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies idempotent configuration, handler ownership and file rotation.
"""

import logging
from pathlib import Path

from sqlmerge.infra.logging import LoggingConfig, _HANDLER_TAG_ATTR, configure_logging


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    count = len(_our_handlers())
    configure_logging(cfg)

    assert count == 1
    assert len(_our_handlers()) == count, "Handlers were duplicated."


def test_force_replaces_only_our_handlers() -> None:
    foreign = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig(level="INFO"))
        configure_logging(LoggingConfig(level="DEBUG"), force=True)

        assert foreign in root.handlers
        assert len(_our_handlers()) == 1
        assert root.level == logging.DEBUG
    finally:
        root.removeHandler(foreign)


def test_unknown_level_defaults_to_info() -> None:
    configure_logging(LoggingConfig(level="CHATTY"), force=True)

    assert logging.getLogger().level == logging.INFO


def test_file_logging_and_rotation(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "sqlmerge.log"
    cfg = LoggingConfig(level="INFO", console=False, log_file=str(log_file), max_bytes=200, backup_count=2)

    configure_logging(cfg, force=True)
    logger = logging.getLogger("sqlmerge.test")
    for i in range(20):
        logger.info(f"Merged file number {i} into the output document")
    for h in _our_handlers():
        h.flush()

    assert log_file.exists()
    assert (tmp_path / "logs" / "sqlmerge.log.1").exists()
    assert "sqlmerge.test" in log_file.read_text(encoding="utf-8")


def test_unwritable_log_file_does_not_raise(tmp_path: Path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")

    root = configure_logging(
        LoggingConfig(level="INFO", console=True, log_file=str(blocker / "x.log")),
        force=True,
    )

    assert len(_our_handlers()) == 1
    assert root is logging.getLogger()


def test_logging_config_from_run_config(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"

    cfg = LoggingConfig.from_config({"logging_level": "DEBUG", "logging_file": str(log_file)})

    assert cfg.level == "DEBUG"
    assert cfg.log_file == str(log_file)
    assert cfg.console is True


def test_logging_config_from_empty_run_config() -> None:
    cfg = LoggingConfig.from_config({})

    assert cfg.level == "INFO"
    assert cfg.log_file is None
