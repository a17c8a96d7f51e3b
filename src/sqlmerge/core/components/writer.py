from __future__ import annotations

"""
Output Persistence.

Writes the merged document to its destination, replacing any previous
content. Text is written as UTF-8 with no newline translation so the
output matches the merged value byte for byte.
"""

import logging

from sqlmerge.domain.errors import OutputWriteError
from sqlmerge.infra.fs import ensure_parent_dir

logger = logging.getLogger(__name__)


def write_merged_output(output_path: str, merged: str) -> None:
    """
    Create or overwrite the output file with the merged text.

    Args:
        output_path: Destination file path.
        merged: Complete merged document.

    Raises:
        OutputWriteError: If the file or its parent directory cannot be
                          created or written.
    """
    try:
        ensure_parent_dir(output_path)
        with open(output_path, "w", encoding="utf-8", newline="") as out:
            out.write(merged)
    except OSError as e:
        raise OutputWriteError(output_path, e.strerror or str(e)) from e

    logger.debug(f"Wrote {len(merged)} characters to {output_path}")
