"""
pathglob Core: Input Validators.

Validation for glob patterns and expansion options coming from callers,
configuration files and the environment.
"""
from typing import Any, Dict

from pathglob.core.constants import OPTION_KEYS, ConfigKey, ErrorCode


class ValidationError(Exception):
    """Base exception for validation errors."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        """Initialize ValidationError.

        Args:
            message: Error message
            error_code: Associated error code
        """
        super().__init__(message)
        self.error_code = error_code


def validate_pattern(pattern: str) -> bool:
    """Validate a glob pattern.

    Any string is a valid pattern; the empty pattern expands to nothing.
    Paths the filesystem cannot handle fail there and are reported like any
    other filesystem error.

    Args:
        pattern: Pattern to validate

    Returns:
        True if valid

    Raises:
        ValidationError: If pattern is invalid
    """
    if not isinstance(pattern, str):
        raise ValidationError(f"Pattern must be string, got {type(pattern)}")

    return True


def validate_max_depth(max_depth: Any) -> bool:
    """Validate the ** expansion depth limit.

    Args:
        max_depth: Depth limit, negative for unlimited

    Returns:
        True if valid

    Raises:
        ValidationError: If the value is not an integer
    """
    # bool is a subclass of int but never a meaningful depth
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise ValidationError(f"max_depth must be integer: {max_depth!r}")

    return True


def validate_options_config(options: Dict[str, Any]) -> bool:
    """Validate the option section of a configuration.

    Args:
        options: Mapping of option name to value

    Returns:
        True if valid

    Raises:
        ValidationError: If an option is unknown or has the wrong type
    """
    if not isinstance(options, dict):
        raise ValidationError("Options configuration must be a dictionary")

    for key, value in options.items():
        if key == ConfigKey.LOGGING:
            if value is not None and not isinstance(value, dict):
                raise ValidationError("Logging configuration must be a dictionary")
            continue

        if key not in OPTION_KEYS:
            raise ValidationError(f"Unknown option: {key}")

        if key == ConfigKey.MAX_DEPTH:
            validate_max_depth(value)
        elif not isinstance(value, bool):
            raise ValidationError(f"Option {key} must be boolean: {value!r}")

    return True
