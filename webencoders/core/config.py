"""
Codec configuration module.

Provides configuration for Base64UrlCodec instances.
"""
from dataclasses import dataclass, replace
import logging
import sys


@dataclass(frozen=True)
class CodecConfig:
    """
    Base64url codec configuration.
    
    Instances are immutable so a codec can be shared between threads.
    """
    # Largest buffer size a size computation may produce
    max_buffer_size: int = sys.maxsize
    
    # Reject characters outside the base64 alphabet instead of discarding them
    validate_alphabet: bool = True
    
    # Level at which this codec reports rejected input and engine calls
    log_level: int = logging.DEBUG
    
    def __post_init__(self):
        if self.max_buffer_size < 4:
            raise ValueError("max_buffer_size must be at least 4")
    
    @classmethod
    def default(cls) -> 'CodecConfig':
        """Create default configuration."""
        return cls()
    
    def with_overrides(self, **kwargs) -> 'CodecConfig':
        """Return a copy with the given fields replaced."""
        return replace(self, **kwargs)
