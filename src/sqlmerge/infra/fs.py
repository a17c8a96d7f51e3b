from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and the per-user data directory used for the
persistent configuration file and the diagnostic log.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "SqlMerge"
UNIX_APP_DIR_NAME = ".sqlmerge"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/SqlMerge
    - Linux/Mac: ~/.sqlmerge

    The directory is not created here; writers create it on demand.

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use when the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def ensure_parent_dir(path: str) -> None:
    """Create the parent directory hierarchy of a target file if missing."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
