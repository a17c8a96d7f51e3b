from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from sqlmerge.domain.constants import APP_NAME, APP_VERSION

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the sql-merge CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "Merge the SQL files directly under the directory given with -d "
            "(excluding exec_*.sql) into the file given with -o."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "-d", "--directory",
        dest="directory",
        default=None,
        help="directory path",
    )
    p.add_argument(
        "-o", "--output-file-path",
        dest="output_file_path",
        default=None,
        help="output file path",
    )

    # --- Configuration ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Read settings from this JSON file instead of the user config.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any configuration file and start from built-in defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )

    # --- Runtime ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the merged text to stdout instead of writing the output file.",
    )
    p.add_argument(
        "--log-file",
        dest="logging_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Unset options map to None so they never mask config file values.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides.
    """
    overrides: Dict[str, Any] = {
        "directory": args.directory,
        "output_file_path": args.output_file_path,
        "logging_file": args.logging_file,
        "logging_level": None,
    }

    if args.debug:
        overrides["logging_level"] = "DEBUG"

    return overrides
