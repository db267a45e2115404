r"""
WebEncoders - base64url (RFC 4648 section 5) encoding without padding.

Usage:
    >>> from webencoders import base64url_encode, base64url_decode
    >>> 
    >>> base64url_encode(b"\xff\xff")
    '__8'
    >>> base64url_decode("__8")
    b'\xff\xff'
"""
import logging

from .core.codec import (
    Base64UrlCodec,
    Base64,
    base64url_decode,
    base64url_encode,
    base64url_encode_into,
    count_padding_chars,
    required_decode_buffer_size,
    required_encode_buffer_size,
)

# Configuration
from .core.config import CodecConfig

# Standard Base64 engines
from .core.engine import Base64Engine, StandardBase64Engine

# Logging
from .core.logging import configure_package_loggers

# Errors
from .core.exceptions import (
    WebEncodersError,
    ArgumentNullError,
    ArgumentRangeError,
    ArgumentBoundsError,
    MalformedInputError,
    InvalidLengthError,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for webencoders modules.
    
    Codecs never change logger levels themselves, so the level set
    here stays in effect for codecs created afterwards.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    configure_package_loggers(level)


__all__ = [
    'base64url_decode',
    'base64url_encode',
    'base64url_encode_into',
    'required_decode_buffer_size',
    'required_encode_buffer_size',
    'count_padding_chars',
    'Base64UrlCodec',
    'Base64',
    'CodecConfig',
    'Base64Engine',
    'StandardBase64Engine',
    'WebEncodersError',
    'ArgumentNullError',
    'ArgumentRangeError',
    'ArgumentBoundsError',
    'MalformedInputError',
    'InvalidLengthError',
    'setup_logging',
]
