"""
Configuration validation utilities.

Turns the raw TOML sections into a validated ``UtilsConfig``.
"""

import logging
from typing import Any, Dict

from ..models.config import (
    DEFAULT_CLEAN_TOOL,
    DEFAULT_DIRECTORY_MODE,
    DEFAULT_LOG_LEVEL,
    UtilsConfig,
)
from ..validation import (
    ValidationError,
    validate_boolean,
    validate_directory_mode,
    validate_enum_choice,
    validate_non_empty_string,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data.get(name, {})
    if not isinstance(section, dict):
        raise ValidationError(
            f"[{name}] must be a table",
            field_name=name,
            value=section
        )
    return section


def validate_utils_config(config_data: Dict[str, Any]) -> UtilsConfig:
    """
    Validate and create a UtilsConfig from raw configuration data.

    Missing sections and keys fall back to their defaults.

    Args:
        config_data: Raw configuration from TOML

    Returns:
        Validated UtilsConfig instance

    Raises:
        ValidationError: If validation fails
    """
    finder_settings = _section(config_data, "finder")
    directory_settings = _section(config_data, "directories")
    clean_settings = _section(config_data, "clean")
    logging_settings = _section(config_data, "logging")

    sort_entries = validate_boolean(
        finder_settings.get("sort_entries", False),
        field_name="finder.sort_entries",
    )
    follow_symlinks = validate_boolean(
        finder_settings.get("follow_symlinks", False),
        field_name="finder.follow_symlinks",
    )
    if follow_symlinks:
        logger.warning(
            "finder.follow_symlinks is enabled: symlink loops are not detected "
            "and a looping tree is walked until the OS refuses the path"
        )

    directory_mode = validate_directory_mode(
        directory_settings.get("mode", DEFAULT_DIRECTORY_MODE),
        field_name="directories.mode",
    )

    clean_tool = validate_non_empty_string(
        clean_settings.get("tool", DEFAULT_CLEAN_TOOL),
        field_name="clean.tool",
    )

    log_level = validate_enum_choice(
        logging_settings.get("level", DEFAULT_LOG_LEVEL),
        valid_choices=LOG_LEVELS,
        field_name="logging.level",
        case_sensitive=False,
    )

    return UtilsConfig(
        sort_entries=sort_entries,
        follow_symlinks=follow_symlinks,
        directory_mode=directory_mode,
        clean_tool=clean_tool,
        log_level=log_level,
    )
