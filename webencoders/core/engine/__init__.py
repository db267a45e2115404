"""
Standard Base64 engines used by the base64url codec.
"""
from .protocols import Base64Engine, BytesLike
from .standard import StandardBase64Engine

__all__ = [
    'Base64Engine',
    'BytesLike',
    'StandardBase64Engine',
]
