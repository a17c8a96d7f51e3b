from __future__ import annotations

"""
Strict File Reading Component.

Reads script files as raw bytes and decodes them as UTF-8 without any
error substitution, so malformed input is detected instead of silently
repaired. Newlines and byte order marks are preserved verbatim.
"""

from sqlmerge.domain.errors import FileReadError

# -----------------------------------------------------------------------------
# RAW ACCESS
# -----------------------------------------------------------------------------

def read_bytes(file_path: str) -> bytes:
    """
    Read the complete byte content of a file.

    Raises:
        FileReadError: If the file cannot be opened or read.
    """
    try:
        with open(file_path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FileReadError(file_path, e.strerror or str(e)) from e


# -----------------------------------------------------------------------------
# ENCODING VALIDATION
# -----------------------------------------------------------------------------

def is_utf8_file(file_path: str) -> bool:
    """
    Check whether a file's full byte content is valid UTF-8.

    Args:
        file_path: Path to the file to inspect.

    Returns:
        bool: True if the whole byte sequence decodes strictly.

    Raises:
        FileReadError: If the file cannot be read at all.
    """
    try:
        read_bytes(file_path).decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def read_text(file_path: str) -> str:
    """
    Read a file as UTF-8 text without newline translation.

    Raises:
        FileReadError: If the file cannot be read.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    return read_bytes(file_path).decode("utf-8")
