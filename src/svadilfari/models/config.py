"""
Configuration data models.

This module contains the configuration structure for the build utilities,
loaded from `config.toml`.
"""

from dataclasses import dataclass

DEFAULT_DIRECTORY_MODE = 0o755
DEFAULT_CLEAN_TOOL = "ninja"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class UtilsConfig:
    """
    Configuration for the build utilities' global behavior.
    """

    # [finder] - sort each directory's entries by name before walking them.
    sort_entries: bool = False
    # [finder] - classify entries through symlinks, like stat(2) does.
    follow_symlinks: bool = False

    # [directories] - permission mode used by make_directory (umask applies).
    directory_mode: int = DEFAULT_DIRECTORY_MODE

    # [clean] - executable run by full_clean, looked up on PATH.
    clean_tool: str = DEFAULT_CLEAN_TOOL

    # [logging] - root log level used by the command-line interface.
    log_level: str = DEFAULT_LOG_LEVEL
