"""
Configuration management and singleton pattern.

This module provides the main configuration loading and management interface,
implementing a singleton pattern to ensure configuration is loaded only once.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from ..models.config import UtilsConfig
from ..validation import ErrorSeverity, ValidationError, handle_config_error
from .validators import validate_utils_config

logger = logging.getLogger(__name__)

# --- Global Singleton for Configuration ---

_CONFIG: Optional[UtilsConfig] = None

# Default location of the configuration file, at the project root. A missing
# default file means "use built-in defaults"; a path set through
# set_config_path() must exist.
_DEFAULT_CONFIG_FILE_PATH = Path(__file__).parent.parent.parent.parent / "conf" / "config.toml"
_CONFIG_FILE_PATH = _DEFAULT_CONFIG_FILE_PATH
_CONFIG_PATH_EXPLICIT = False


def set_config_path(config_path: Path) -> None:
    """
    Set a custom configuration file path.

    Args:
        config_path: Path to the config.toml file

    Note:
        The cached configuration is dropped, so the next get_config()
        call reads the new file.
    """
    global _CONFIG_FILE_PATH, _CONFIG, _CONFIG_PATH_EXPLICIT
    _CONFIG_FILE_PATH = Path(config_path)
    _CONFIG_PATH_EXPLICIT = True
    _CONFIG = None
    logger.info(f"Configuration path set to: {config_path}")


def reset_config_path() -> None:
    """Return to the default configuration path and drop the cache."""
    global _CONFIG_FILE_PATH, _CONFIG, _CONFIG_PATH_EXPLICIT
    _CONFIG_FILE_PATH = _DEFAULT_CONFIG_FILE_PATH
    _CONFIG_PATH_EXPLICIT = False
    _CONFIG = None


def clear_config_cache() -> None:
    """
    Clear the cached configuration, forcing a reload on next access.
    """
    global _CONFIG
    _CONFIG = None
    logger.debug("Configuration cache cleared")


def _read_config_file(config_path: Path) -> Dict[str, Any]:
    """Parse a TOML configuration file into a dictionary."""
    with open(config_path, "rb") as f:
        return tomllib.load(f)


def _load_config(config_path: Path, required: bool) -> UtilsConfig:
    """
    Load and validate the configuration file.

    Args:
        config_path: Path to the config.toml file
        required: Whether a missing file is an error

    Returns:
        Validated UtilsConfig instance

    Raises:
        FileNotFoundError: If a required configuration file is missing
        OSError: If the configuration file cannot be read
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    if not required and not config_path.exists():
        logger.debug(f"No configuration file at {config_path}, using defaults")
        return UtilsConfig()

    logger.info(f"Loading configuration from: {config_path}")
    try:
        utils_config = validate_utils_config(_read_config_file(config_path))
    except (OSError, ValidationError, tomllib.TOMLDecodeError) as e:
        handle_config_error(
            error=e,
            context=f"loading {config_path}",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
    logger.info(f"Successfully loaded configuration from {config_path}")
    return utils_config


def get_config() -> UtilsConfig:
    """
    Get the global configuration, loading it if necessary.

    The first call loads and validates the configuration file; subsequent
    calls return the cached instance.

    Returns:
        The singleton UtilsConfig instance

    Raises:
        FileNotFoundError: If an explicitly set configuration file is missing
        OSError: If the configuration file cannot be read
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _load_config(_CONFIG_FILE_PATH, required=_CONFIG_PATH_EXPLICIT)
    return _CONFIG


def is_config_loaded() -> bool:
    """
    Check if configuration has been loaded and cached.
    """
    return _CONFIG is not None


def get_config_info() -> dict:
    """
    Get information about the current configuration state.

    Returns:
        Dictionary with configuration metadata
    """
    return {
        "config_loaded": is_config_loaded(),
        "config_path": str(_CONFIG_FILE_PATH),
        "config_path_explicit": _CONFIG_PATH_EXPLICIT,
        "clean_tool": _CONFIG.clean_tool if _CONFIG else None,
    }
