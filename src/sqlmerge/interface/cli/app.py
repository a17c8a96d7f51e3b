from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, config file and CLI overrides), the merge itself, and the final
write of the merged document.
"""

import json
import os
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlmerge.core.components.writer import write_merged_output
from sqlmerge.core.merger import merge_sql_files
from sqlmerge.core.validator import validate_config
from sqlmerge.domain.config import get_default_config, load_config
from sqlmerge.domain.errors import SqlMergeError
from sqlmerge.infra.logging import LoggingConfig, configure_logging, get_logger
from sqlmerge.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 merge/write failure,
             2 invalid input, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console only until the config is resolved)
    configure_logging(LoggingConfig(level="DEBUG" if args.debug else "INFO"), force=True)

    # 3. Configuration resolution
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf)
    for w in warnings:
        logger.warning(f"Configuration: {w}")

    configure_logging(LoggingConfig.from_config(conf), force=True)

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight input verification
    directory = conf["directory"]
    if not os.path.isdir(directory):
        msg = f"Directory does not exist: {directory}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Merge
    logger.debug(f"Merging SQL files from {directory}")
    try:
        merged = merge_sql_files(directory, datetime.now)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    except SqlMergeError as e:
        logger.debug("Merge aborted.", exc_info=True)
        print(f"Error merging files: {e}", file=sys.stderr)
        return 1

    # 6. Output
    if args.dry_run:
        # Raw UTF-8 bytes: no stream re-encoding, no newline translation.
        sys.stdout.flush()
        sys.stdout.buffer.write(merged.encode("utf-8"))
        sys.stdout.buffer.flush()
        return 0

    output_path = conf["output_file_path"]
    try:
        write_merged_output(output_path, merged)
    except SqlMergeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.info(f"Merged output written to {output_path}")
    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values into the base configuration.

    Args:
        base: Configuration loaded from defaults or disk.
        overrides: Values coming from the command line.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


if __name__ == "__main__":
    sys.exit(main())
