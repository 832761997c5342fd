"""
Input validation utilities.

This module provides validation functions for harness parameters and
environment overrides used throughout the package.
"""

from ..core.exceptions import ConfigurationError


def validate_positive_number(value: int | float, name: str) -> None:
    """Validate that a number is positive."""
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative_number(value: int | float, name: str) -> None:
    """Validate that a number is zero or positive."""
    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {value}")


def parse_int_setting(raw: str, name: str) -> int:
    """Parse an integer setting, raising ConfigurationError on malformed text."""
    try:
        return int(raw.strip())
    except (ValueError, AttributeError) as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def parse_bool_setting(raw: str, name: str) -> bool:
    """Parse a boolean flag such as '1', 'true', 'no'."""
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off", ""):
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")
