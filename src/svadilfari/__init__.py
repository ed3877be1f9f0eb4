"""
Svadilfari: OS primitives for build orchestration scripts.

The package is organized into specialized modules:
- finder: Recursive file discovery filtered by extension
- system: Process replacement, directory creation and removal helpers
- orchestration: Full clean (external clean tool, then artifact removal)
- host: The call surface bound into the build script host
- config: Configuration management and validation
- models: Call parameters, entries and results
- validation: Input validation and error handling
- cli: Command-line interface

Usage:
    From command line:
        svadilfari-utils find src -e c -r

    Programmatically:
        from svadilfari import SearchSpec, find
        sources = find(SearchSpec(path="src", extension="c", recursive=True))
"""

# Main interfaces
from .config import get_config, clear_config_cache, set_config_path
from .finder import find, iter_matches, matches_extension
from .orchestration import full_clean
from .system import exec_replace, make_directory
from .cli import main_cli

# Model classes for external use
from .models import (
    CleanSpec,
    DirectoryEntry,
    EntryKind,
    SearchResult,
    SearchSpec,
    UtilsConfig,
)

from .validation import ValidationError

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "find",
    "iter_matches",
    "matches_extension",
    "exec_replace",
    "make_directory",
    "full_clean",
    "main_cli",
    # Models
    "CleanSpec",
    "DirectoryEntry",
    "EntryKind",
    "SearchResult",
    "SearchSpec",
    "UtilsConfig",
    # Validation
    "ValidationError",
]
