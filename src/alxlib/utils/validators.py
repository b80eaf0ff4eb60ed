"""
Input validation helpers for AlxLib.

Used at the edges of the library (bit widths, configuration values). The
numeric functions themselves never validate.
"""

from typing import Any, Optional


class ValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(f"{field}: {message}" if field else message)


def validate_positive(value: float, field: str = "value",
                      allow_zero: bool = True) -> float:
    """
    Validate that a value is positive (or non-negative).

    Args:
        value: Value to validate
        field: Field name for error messages
        allow_zero: Whether zero is allowed

    Returns:
        The validated value

    Raises:
        ValidationError: If value is negative (or zero if not allowed)
    """
    if allow_zero:
        if value < 0:
            raise ValidationError(f"must be non-negative, got {value}", field)
    else:
        if value <= 0:
            raise ValidationError(f"must be positive, got {value}", field)
    return value


def validate_int(value: Any, field: str = "value") -> int:
    """
    Validate that a value is an integer (bools are rejected).

    Raises:
        ValidationError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"must be an integer, got {type(value).__name__}", field)
    return value


def validate_bool(value: Any, field: str = "value") -> bool:
    """
    Validate that a value is a real bool (strings like "false" are rejected).

    Raises:
        ValidationError: If value is not a bool
    """
    if not isinstance(value, bool):
        raise ValidationError(f"must be true or false, got {value!r}", field)
    return value


def validate_number(value: Any, field: str = "value") -> float:
    """
    Validate that a value is an int or float (bools are rejected).

    Raises:
        ValidationError: If value is not numeric
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"must be a number, got {type(value).__name__}", field)
    return value


def validate_enum(value: str, enum_class: type, field: str = "value") -> Any:
    """
    Validate that a string names a member of an enum.

    Args:
        value: Member name (case-insensitive)
        enum_class: The enum to look up
        field: Field name for error messages

    Returns:
        The enum member

    Raises:
        ValidationError: If value is not a member name
    """
    if isinstance(value, str):
        member = enum_class.__members__.get(value.upper())
        if member is not None:
            return member
    valid = ", ".join(enum_class.__members__)
    raise ValidationError(f"must be one of [{valid}], got {value!r}", field)
