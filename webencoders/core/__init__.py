"""Core modules for webencoders."""
from .config import CodecConfig
from .exceptions import (
    WebEncodersError,
    ArgumentNullError,
    ArgumentRangeError,
    ArgumentBoundsError,
    MalformedInputError,
    InvalidLengthError,
)

__all__ = [
    'CodecConfig',
    'WebEncodersError',
    'ArgumentNullError',
    'ArgumentRangeError',
    'ArgumentBoundsError',
    'MalformedInputError',
    'InvalidLengthError',
]
