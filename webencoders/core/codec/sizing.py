"""
Buffer size calculations for base64url encoding and decoding.

Sizes are the exact padded Base64 footprint: decoding needs room to
append the padding that base64url omits, encoding needs room for the
padded engine output before it is stripped.
"""
import sys
from typing import Union

from ..exceptions import ArgumentRangeError, InvalidLengthError
from .validation import ensure_non_negative

PADDING_CHAR = '='

# count % 4 -> padding characters to append before decoding.
# A remainder of 1 can never come from whole bytes.
_DECODE_PADDING = {0: 0, 2: 2, 3: 1}


def padding_chars_to_add(count: int) -> int:
    """
    Number of '=' characters that complete an unpadded base64url length.
    
    Args:
        count: Number of base64url characters
        
    Returns:
        0, 1 or 2
        
    Raises:
        InvalidLengthError: If count % 4 == 1
    """
    padding = _DECODE_PADDING.get(count % 4)
    if padding is None:
        raise InvalidLengthError(count, 'count')
    return padding


def count_padding_chars(text: Union[str, bytes, bytearray]) -> int:
    """
    Number of trailing padding characters in standard Base64 text.

    Assumes well-formed Base64 with no whitespace, which carries
    at most two padding characters. Accepts str or ASCII bytes.
    """
    if isinstance(text, (bytes, bytearray)):
        text = text.decode('ascii')
    if not text or text[-1] != PADDING_CHAR:
        return 0
    if len(text) > 1 and text[-2] == PADDING_CHAR:
        return 2
    return 1


def _checked(size: int, max_buffer_size: int) -> int:
    if size > max_buffer_size:
        raise ArgumentRangeError(
            f"Required buffer size {size} exceeds the maximum of {max_buffer_size}",
            'count'
        )
    return size


def required_decode_buffer_size(count: int, max_buffer_size: int = sys.maxsize) -> int:
    """
    Minimum buffer size for decoding count base64url characters in place.
    
    Args:
        count: Number of base64url characters to decode
        max_buffer_size: Largest size the computation may produce
        
    Returns:
        count rounded up to the next multiple of 4 (0 for empty input)
        
    Raises:
        ArgumentRangeError: If count is negative or the size overflows
        InvalidLengthError: If count % 4 == 1
    """
    ensure_non_negative(count, 'count')
    if count == 0:
        return 0
    return _checked(count + padding_chars_to_add(count), max_buffer_size)


def required_encode_buffer_size(count: int, max_buffer_size: int = sys.maxsize) -> int:
    """
    Minimum output buffer size for encoding count bytes.
    
    Args:
        count: Number of bytes to encode
        max_buffer_size: Largest size the computation may produce
        
    Returns:
        ceil(count / 3) * 4
        
    Raises:
        ArgumentRangeError: If count is negative or the size overflows
    """
    ensure_non_negative(count, 'count')
    whole_or_partial_blocks = (count + 2) // 3
    return _checked(whole_or_partial_blocks * 4, max_buffer_size)
