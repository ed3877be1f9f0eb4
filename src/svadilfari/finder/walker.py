"""
Directory walking and extension filtering.

The walk is a pre-order, depth-first traversal driven by an explicit stack of
open directory listings rather than recursion, so tree depth is bounded only
by the filesystem. When a subdirectory is reached its listing is pushed and
walked to exhaustion before the parent listing advances, which keeps every
subdirectory's matches contiguous and ahead of the parent's later siblings.

Failures never propagate: a root that cannot be opened yields nothing, and
unreadable subdirectories or entries that cannot be stat'ed are skipped.
"""

import logging
import os
from typing import Iterator, List, Optional

from ..config import get_config
from ..models import DirectoryEntry, EntryKind, SearchResult, SearchSpec, UtilsConfig
from ..validation import ErrorSeverity, handle_file_error

logger = logging.getLogger(__name__)

Listing = Iterator[os.DirEntry]


def matches_extension(name: str, extension: Optional[str]) -> bool:
    """Check a file name against an extension filter.

    The extension of a name is the text after its final dot, compared
    case-sensitively with no normalization. ``None`` matches every name; a
    name without a dot matches no extension.

    Examples:
        >>> matches_extension("archive.tar.gz", "gz")
        True
        >>> matches_extension("archive.tar.gz", "tar")
        False
        >>> matches_extension("Makefile", "c")
        False
    """
    if extension is None:
        return True
    _, dot, suffix = name.rpartition(".")
    return bool(dot) and suffix == extension


def _next_entry(listing: Listing, path: str) -> Optional[os.DirEntry]:
    """Advance a listing, treating a read error as the end of the directory."""
    try:
        return next(listing, None)
    except OSError as e:
        handle_file_error(e, f"reading directory '{path}'",
                          severity=ErrorSeverity.DEBUG, reraise=False, logger=logger)
        return None


def _close_listing(listing: Listing) -> None:
    close = getattr(listing, "close", None)
    if close is not None:
        close()


def _open_listing(path: str, sort_entries: bool) -> Optional[Listing]:
    """Open a directory for iteration, or return None if it cannot be opened."""
    try:
        listing = os.scandir(path)
    except (OSError, ValueError) as e:
        handle_file_error(e, f"opening directory '{path}'",
                          severity=ErrorSeverity.DEBUG, reraise=False, logger=logger)
        return None

    if not sort_entries:
        return listing

    entries: List[os.DirEntry] = []
    with listing:
        while True:
            entry = _next_entry(listing, path)
            if entry is None:
                break
            entries.append(entry)
    entries.sort(key=lambda entry: entry.name)
    return iter(entries)


def iter_matches(spec: SearchSpec, config: Optional[UtilsConfig] = None) -> Iterator[str]:
    """
    Lazily yield the paths under ``spec.path`` that match ``spec.extension``.

    Args:
        spec: Root, extension filter and recursion flag
        config: Finder settings; the global configuration when omitted

    Yields:
        Paths of matching regular files, in traversal order

    Note:
        Open directory handles are closed when the generator is exhausted,
        closed early, or garbage collected.
    """
    config = config or get_config()
    root = os.fspath(spec.path)

    root_listing = _open_listing(root, config.sort_entries)
    if root_listing is None:
        return

    stack = [(root_listing, root)]
    try:
        while stack:
            listing, directory = stack[-1]
            raw_entry = _next_entry(listing, directory)
            if raw_entry is None:
                stack.pop()
                _close_listing(listing)
                continue

            # scandir never lists "." or "..".
            entry = DirectoryEntry.from_dir_entry(raw_entry, follow_symlinks=config.follow_symlinks)

            if entry.kind is EntryKind.DIRECTORY:
                if spec.recursive:
                    child_listing = _open_listing(entry.path, config.sort_entries)
                    if child_listing is not None:
                        stack.append((child_listing, entry.path))
            elif entry.kind is EntryKind.REGULAR_FILE:
                if matches_extension(entry.name, spec.extension):
                    yield entry.path
    finally:
        for listing, _ in reversed(stack):
            _close_listing(listing)


def find(spec: SearchSpec, config: Optional[UtilsConfig] = None) -> SearchResult:
    """
    Collect the files under ``spec.path`` whose extension matches.

    A missing or unreadable root is not an error: the result is simply empty.
    Entry order follows the filesystem's listing order unless
    ``finder.sort_entries`` is enabled; callers must not rely on it being
    alphabetical otherwise.

    Args:
        spec: Root, extension filter and recursion flag
        config: Finder settings; the global configuration when omitted

    Returns:
        SearchResult with every match in traversal order
    """
    if spec.extension is not None and spec.extension.startswith("."):
        logger.warning(
            f"Extension '{spec.extension}' starts with a dot; it is compared "
            f"against the text after each name's final dot"
        )

    result = SearchResult()
    for path in iter_matches(spec, config):
        result.append(path)

    logger.debug(
        f"find(path='{spec.path}', extension={spec.extension!r}, "
        f"recursive={spec.recursive}) matched {len(result)} files"
    )
    return result
