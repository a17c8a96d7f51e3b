from __future__ import annotations

"""
Directory Listing Service.

Enumerates the regular files that sit directly inside the input directory
and returns them in natural order of their base names. Subdirectories and
special entries are skipped; there is no recursion.
"""

import logging
import os
from typing import List

from sqlmerge.core.components.sorting import sort_naturally
from sqlmerge.domain.errors import DirectoryAccessError
from sqlmerge.domain.merge_models import DirectoryEntry

logger = logging.getLogger(__name__)


def list_directory_files(directory: str) -> List[DirectoryEntry]:
    """
    List regular files directly under a directory, naturally sorted.

    Symbolic links that resolve to regular files are listed; links to
    directories and dangling links are not.

    Args:
        directory: Directory to inspect.

    Returns:
        List[DirectoryEntry]: Entries sorted by natural order of file name.

    Raises:
        DirectoryAccessError: If the directory does not exist, is not a
                              directory, or cannot be read.
    """
    entries: List[DirectoryEntry] = []
    try:
        with os.scandir(directory) as it:
            for dir_entry in it:
                if dir_entry.is_file():
                    entries.append(DirectoryEntry.from_path(dir_entry.path))
                else:
                    logger.debug(f"Ignoring non-file entry: {dir_entry.path}")
    except OSError as e:
        raise DirectoryAccessError(directory, e.strerror or str(e)) from e

    logger.debug(f"Listed {len(entries)} file(s) in {directory}")
    return sort_naturally(entries, key=lambda entry: entry.name)
