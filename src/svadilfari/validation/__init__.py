"""
Validation and error handling for the svadilfari package.

This module provides input validation and error handling with consistent
error reporting across the application.
"""

from .exceptions import (
    ErrorSeverity,
    ValidationError,
    handle_error,
    handle_config_error,
    handle_file_error,
    handle_subprocess_error,
    handle_cli_error,
)

from .validators import (
    coerce_host_string,
    validate_boolean,
    validate_directory_mode,
    validate_enum_choice,
    validate_host_argument,
    validate_non_empty_string,
)

__all__ = [
    # Core functionality
    "ErrorSeverity",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_file_error",
    "handle_subprocess_error",
    "handle_cli_error",
    # Validators
    "coerce_host_string",
    "validate_boolean",
    "validate_directory_mode",
    "validate_enum_choice",
    "validate_host_argument",
    "validate_non_empty_string",
]
