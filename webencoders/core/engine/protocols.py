"""
Protocol definitions for the standard Base64 engine.

The base64url codec only translates between the URL-safe unpadded form
and standard padded Base64; the sextet arithmetic is left to an engine.
"""
from typing import Protocol, Union

BytesLike = Union[bytes, bytearray, memoryview]


class Base64Engine(Protocol):
    """
    Protocol for standard (RFC 4648 section 4) Base64 engines.
    
    Allows a different Base64 implementation to be plugged in.
    """
    
    def encode(self, data: BytesLike) -> bytes:
        """
        Encode binary data.
        
        Args:
            data: Bytes to encode
            
        Returns:
            Padded Base64 text using the '+' and '/' alphabet, as ASCII bytes
        """
        ...
    
    def decode(self, data: BytesLike) -> bytes:
        """
        Decode padded Base64 text.
        
        Args:
            data: ASCII Base64 text using the '+' and '/' alphabet,
                length a multiple of 4
            
        Returns:
            Decoded bytes
            
        Raises:
            ValueError: If the text is malformed (binascii.Error included)
        """
        ...
