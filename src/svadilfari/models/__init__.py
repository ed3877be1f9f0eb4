"""
Data models for the build utilities.

Configuration Models:
- Finder, directory and clean settings loaded from TOML

Call Models:
- Find and clean parameters, directory entries

Result Models:
- Ordered find results with a host-table view
"""

from .config import UtilsConfig
from .specs import CleanSpec, DirectoryEntry, EntryKind, SearchSpec
from .results import SearchResult

__all__ = [
    # Configuration
    "UtilsConfig",
    # Calls
    "CleanSpec",
    "DirectoryEntry",
    "EntryKind",
    "SearchSpec",
    # Results
    "SearchResult",
]
