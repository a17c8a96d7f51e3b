from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for SQL script directories and a deterministic clock.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Iterator, Union

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from sqlmerge.infra.logging import _CONFIGURED_FLAG_ATTR, _HANDLER_TAG_ATTR  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers installed by configure_logging() after each test."""
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)
    root.setLevel(logging.WARNING)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Time source frozen at 2020-01-01 00:00:00 local time."""
    return lambda: datetime(2020, 1, 1, 0, 0, 0)


@pytest.fixture
def make_sql_dir(tmp_path: Path) -> Callable[[Dict[str, Union[str, bytes]]], Path]:
    """
    Factory building a directory populated with the given files.

    Text values are written as UTF-8 without newline translation; bytes
    values are written as-is.
    """
    def _make(files: Dict[str, Union[str, bytes]], name: str = "sql") -> Path:
        root = tmp_path / name
        root.mkdir()
        for file_name, content in files.items():
            target = root / file_name
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_bytes(content.encode("utf-8"))
        return root

    return _make
