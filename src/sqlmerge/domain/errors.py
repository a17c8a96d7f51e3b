from __future__ import annotations

"""
Merge Error Hierarchy.

Every failure surfaced by the merge engine or the output writer derives from
SqlMergeError, so interface layers can trap a single type and report the
message verbatim.
"""

from typing import Optional


class SqlMergeError(Exception):
    """Base class for all terminal merge failures."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class DirectoryAccessError(SqlMergeError):
    """The input directory cannot be listed (missing, not a directory, permissions)."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        message = f"Cannot read directory: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, path)


class FileReadError(SqlMergeError):
    """A listed file could not be opened or read."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        message = f"Cannot read file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, path)


class EncodingError(SqlMergeError):
    """A merge candidate is not valid UTF-8 text."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File is not valid UTF-8: {path}", path)


class OutputWriteError(SqlMergeError):
    """The destination file could not be created or written."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        message = f"Cannot write output file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, path)
