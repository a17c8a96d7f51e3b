from __future__ import annotations

"""
Domain Constants.

Centralizes the naming rules, output format and versioning shared by the
merge engine and the command-line interface.
"""

APP_NAME = "sql-merge"
APP_VERSION = "0.1.0"

# -----------------------------------------------------------------------------
# INPUT SELECTION RULES
# -----------------------------------------------------------------------------

SQL_EXTENSION = "sql"
EXEC_PREFIX = "exec"

# -----------------------------------------------------------------------------
# OUTPUT FORMAT
# -----------------------------------------------------------------------------

HEADER_FORMAT = "-- [%Y-%m-%d %H:%M:%S]\n"
FILE_SEPARATOR = "\n"
DEFAULT_OUTPUT_FILE = "merged.sql"
