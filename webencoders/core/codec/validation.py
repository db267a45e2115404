"""
Argument validation shared by every codec entry point.

All checks run before any buffer is touched, so a failed call never
leaves a partially transformed buffer behind.
"""
from typing import Any

from ..exceptions import ArgumentNullError, ArgumentRangeError, ArgumentBoundsError


def ensure_not_none(value: Any, param_name: str) -> None:
    """Raises ArgumentNullError if a required argument is None."""
    if value is None:
        raise ArgumentNullError(param_name)


def ensure_non_negative(value: int, param_name: str) -> None:
    """Raises ArgumentRangeError if value is negative."""
    if value < 0:
        raise ArgumentRangeError(
            f"Argument '{param_name}' must be non-negative, got {value}",
            param_name
        )


def validate_window(
    buffer_length: int,
    offset: int,
    count: int,
    buffer_name: str = 'input',
    offset_name: str = 'offset'
) -> None:
    """
    Validate an (offset, count) window against a buffer length.
    
    Args:
        buffer_length: Length of the addressed buffer
        offset: Start of the window
        count: Number of elements in the window
        buffer_name: Buffer argument name used in error messages
        offset_name: Offset argument name used in error messages
        
    Raises:
        ArgumentRangeError: If offset or count is negative
        ArgumentBoundsError: If the window runs past the end of the buffer
    """
    ensure_non_negative(offset, offset_name)
    ensure_non_negative(count, 'count')
    if buffer_length - offset < count:
        raise ArgumentBoundsError('count', offset_name, buffer_name)
