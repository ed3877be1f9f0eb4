"""
Call parameter models for the finder and the clean orchestration.

These are transient: each is built for one call and dropped when the call
returns.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EntryKind(Enum):
    """Kind of a directory entry, as far as the finder cares."""
    DIRECTORY = "directory"
    REGULAR_FILE = "regular_file"
    OTHER = "other"


@dataclass(frozen=True)
class DirectoryEntry:
    """
    One entry of a directory listing.

    ``path`` is the listed directory joined with ``name``; the self and parent
    pseudo-entries are never represented.
    """

    name: str
    path: str
    kind: EntryKind

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry, follow_symlinks: bool = False) -> "DirectoryEntry":
        """
        Build an entry from an ``os.scandir`` result.

        A stat failure classifies the entry as ``OTHER``.
        """
        try:
            if entry.is_dir(follow_symlinks=follow_symlinks):
                kind = EntryKind.DIRECTORY
            elif entry.is_file(follow_symlinks=follow_symlinks):
                kind = EntryKind.REGULAR_FILE
            else:
                kind = EntryKind.OTHER
        except OSError:
            kind = EntryKind.OTHER
        return cls(name=entry.name, path=entry.path, kind=kind)


@dataclass
class SearchSpec:
    """
    Input of a find call.
    """

    # Root directory of the walk.
    path: str
    # Extension to match without the leading dot; None matches every regular file.
    extension: Optional[str] = None
    # Descend into subdirectories.
    recursive: bool = False


@dataclass
class CleanSpec:
    """
    Input of a full clean call.
    """

    # Build description file handed to the clean tool, removed afterwards.
    output: str
    # Build directory removed after the tool finishes (only if empty).
    build_folder: Optional[str] = None
