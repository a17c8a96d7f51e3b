from __future__ import annotations

"""
Merge Candidate Classification.

Decides which directory entries take part in a merge: SQL scripts only,
except maintenance scripts whose name starts with the "exec" prefix.
"""

from sqlmerge.domain.constants import EXEC_PREFIX, SQL_EXTENSION
from sqlmerge.domain.merge_models import DirectoryEntry


def is_exec_script(file_name: str) -> bool:
    """
    Check the literal "exec" name prefix.

    This is a plain prefix test, so "executive.sql" matches as well.
    """
    return file_name.startswith(EXEC_PREFIX)


def is_merge_candidate(entry: DirectoryEntry) -> bool:
    """
    Classify a listed entry as a merge candidate.

    Args:
        entry: Entry produced by the directory listing.

    Returns:
        bool: True if the extension is exactly "sql" (case-sensitive) and
              the name does not start with "exec".
    """
    if entry.ext != SQL_EXTENSION:
        return False
    return not is_exec_script(entry.name)


def is_sql_file(path: str) -> bool:
    """Classify a path (or bare file name) as a merge candidate."""
    return is_merge_candidate(DirectoryEntry.from_path(path))
