"""
Base64url codec module.
"""
from .base64url import (
    Base64UrlCodec,
    Base64,
    base64url_decode,
    base64url_encode,
    base64url_encode_into,
)
from .sizing import (
    count_padding_chars,
    padding_chars_to_add,
    required_decode_buffer_size,
    required_encode_buffer_size,
)
from .validation import validate_window

__all__ = [
    'Base64UrlCodec',
    'Base64',
    'base64url_decode',
    'base64url_encode',
    'base64url_encode_into',
    'count_padding_chars',
    'padding_chars_to_add',
    'required_decode_buffer_size',
    'required_encode_buffer_size',
    'validate_window',
]
