"""
Validation functions.

Validators for configuration values and for values crossing the host
boundary. Host values follow the scripting host's coercion rules: numbers are
accepted wherever a string is expected, booleans are not.
"""

from typing import Any, List, Optional, Union

from .exceptions import ValidationError


def validate_enum_choice(
    value: Any,
    valid_choices: List[str],
    field_name: str = "choice",
    case_sensitive: bool = True
) -> str:
    """
    Validate that a value is one of the allowed choices.

    Args:
        value: Value to validate
        valid_choices: List of valid choices
        field_name: Name of the field being validated
        case_sensitive: Whether comparison should be case sensitive

    Returns:
        Validated choice, as spelled in ``valid_choices``

    Raises:
        ValidationError: If value is not in valid choices
    """
    if not isinstance(value, str):
        raise ValidationError(
            f"{field_name} must be a string, got {type(value).__name__}",
            field_name=field_name,
            value=value
        )

    for choice in valid_choices:
        if value == choice or (not case_sensitive and value.lower() == choice.lower()):
            return choice

    raise ValidationError(
        f"{field_name} must be one of {valid_choices}, got '{value}'",
        field_name=field_name,
        value=value
    )


def validate_non_empty_string(value: Any, field_name: str = "value") -> str:
    """
    Validate that a value is a non-empty string.

    Raises:
        ValidationError: If value is not a string or is empty
    """
    if not value or not isinstance(value, str):
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=value
        )
    return value


def validate_boolean(value: Any, field_name: str = "value") -> bool:
    """Validate that a value is a real boolean (no truthiness coercion)."""
    if not isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a boolean, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_directory_mode(value: Union[int, str], field_name: str = "mode") -> int:
    """
    Validate a permission mode given as an integer or an octal string.

    Args:
        value: Mode such as ``493``, ``"0755"`` or ``"0o755"``
        field_name: Name of the field being validated

    Returns:
        The mode as an integer in the range 0..0o7777

    Raises:
        ValidationError: If the mode cannot be parsed or is out of range
    """
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be an integer or octal string, got {value!r}",
            field_name=field_name,
            value=value
        )

    if isinstance(value, int):
        mode = value
    elif isinstance(value, str):
        text = value.strip().lower()
        if text.startswith("0o"):
            text = text[2:]
        try:
            mode = int(text, 8)
        except ValueError:
            raise ValidationError(
                f"{field_name} is not a valid octal mode: '{value}'",
                field_name=field_name,
                value=value
            )
    else:
        raise ValidationError(
            f"{field_name} must be an integer or octal string, got {type(value).__name__}",
            field_name=field_name,
            value=value
        )

    if not 0 <= mode <= 0o7777:
        raise ValidationError(
            f"{field_name} must be between 0 and 0o7777, got {oct(mode)}",
            field_name=field_name,
            value=value
        )
    return mode


def coerce_host_string(value: Any) -> Optional[str]:
    """
    Convert a host value to a string the way the host does, or return None.

    Strings pass through and numbers are converted to their string form.
    Everything else, booleans included, has no string form.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def validate_host_argument(value: Any, position: int, field_name: str = "argument") -> str:
    """
    Validate one positional argument passed by the host.

    Args:
        value: Argument value
        position: 1-based position, used in the error message
        field_name: Name of the call being validated

    Returns:
        The argument as a string

    Raises:
        ValidationError: If the argument has no string form
    """
    text = coerce_host_string(value)
    if text is None:
        raise ValidationError(
            f"bad argument #{position} to '{field_name}' (string expected, got {type(value).__name__})",
            field_name=field_name,
            value=value
        )
    return text
