"""Standard Base64 engine backed by the base64 module."""
import base64

from .protocols import BytesLike


class StandardBase64Engine:
    """Base64 engine using the standard library encoder."""
    
    def __init__(self, validate: bool = True):
        """
        Initializes the engine.
        
        Args:
            validate: Reject non-alphabet characters instead of discarding them
        """
        self.validate = validate
    
    def encode(self, data: BytesLike) -> bytes:
        """Encodes bytes to padded standard Base64."""
        return base64.b64encode(data)
    
    def decode(self, data: BytesLike) -> bytes:
        """Decodes padded standard Base64, raising binascii.Error on bad input."""
        return base64.b64decode(bytes(data), validate=self.validate)
