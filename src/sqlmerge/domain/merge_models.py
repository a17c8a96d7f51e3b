from __future__ import annotations

"""
Merge Domain Data Models.

Defines the immutable records exchanged between the directory scanner and
the merge engine.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntry:
    """
    A regular file found directly under the input directory.

    Attributes:
        path: Full path as produced by the directory listing.
        name: Base file name.
        ext: Extension without the leading dot (empty when absent).
    """
    path: str
    name: str
    ext: str

    @classmethod
    def from_path(cls, path: str) -> DirectoryEntry:
        name = os.path.basename(path)
        _, ext = os.path.splitext(name)
        return cls(path=path, name=name, ext=ext[1:])
