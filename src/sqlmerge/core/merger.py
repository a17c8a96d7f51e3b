from __future__ import annotations

"""
SQL Merge Engine.

Concatenates the SQL scripts found directly inside a directory into a
single document:

1. A timestamp header is rendered from the injected time source.
2. Regular files are listed and sorted in natural order.
3. Non-candidates (other extensions, "exec" scripts) are skipped.
4. Each candidate must be valid UTF-8; the first invalid file aborts
   the whole merge.
5. Each accepted file is appended after a newline separator.

The engine never reads the system clock and never writes anything.
"""

import logging
from datetime import datetime
from typing import Callable, List

from sqlmerge.core.components.filters import is_merge_candidate
from sqlmerge.core.components.reader import is_utf8_file, read_text
from sqlmerge.core.services.scanner import list_directory_files
from sqlmerge.domain.constants import FILE_SEPARATOR, HEADER_FORMAT
from sqlmerge.domain.errors import EncodingError

logger = logging.getLogger(__name__)

TimeSource = Callable[[], datetime]


def format_header(get_time: TimeSource) -> str:
    """
    Render the generation timestamp comment.

    Args:
        get_time: Zero-argument callable returning the current local time.

    Returns:
        str: Header line such as "-- [2020-01-01 00:00:00]\\n".
    """
    return get_time().strftime(HEADER_FORMAT)


def merge_sql_files(directory: str, get_time: TimeSource) -> str:
    """
    Merge the SQL files directly under a directory into one text.

    Args:
        directory: Directory holding the scripts.
        get_time: Time source used for the header.

    Returns:
        str: Header followed by every merged file, each preceded by a newline.

    Raises:
        DirectoryAccessError: If the directory cannot be listed.
        FileReadError: If a candidate disappears or cannot be read.
        EncodingError: If a candidate is not valid UTF-8. Nothing is returned.
    """
    parts: List[str] = [format_header(get_time)]
    merged_count = 0

    for entry in list_directory_files(directory):
        if not is_merge_candidate(entry):
            logger.debug(f"Skipping non-candidate: {entry.name}")
            continue

        if not is_utf8_file(entry.path):
            logger.debug(f"Aborting merge on invalid encoding: {entry.path}")
            raise EncodingError(entry.path)

        try:
            content = read_text(entry.path)
        except UnicodeDecodeError as e:
            # Content changed between validation and read.
            raise EncodingError(entry.path) from e

        parts.append(FILE_SEPARATOR)
        parts.append(content)
        merged_count += 1
        logger.debug(f"Merged {entry.name}")

    logger.debug(f"Merged {merged_count} file(s) from {directory}")
    return "".join(parts)
