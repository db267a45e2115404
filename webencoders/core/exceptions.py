"""
Custom exceptions for base64url encoding operations.

Every error derives from WebEncodersError and also from the builtin
exception a caller would naturally catch (TypeError or ValueError).
"""
from typing import Optional


class WebEncodersError(Exception):
    """Base exception for all webencoders errors."""
    
    def __init__(self, message: str, param_name: Optional[str] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            param_name: Name of the offending argument (if any)
        """
        self.param_name = param_name
        super().__init__(message)


class ArgumentNullError(WebEncodersError, TypeError):
    """Raised when a required buffer argument is None."""
    
    def __init__(self, param_name: str) -> None:
        super().__init__(f"Argument '{param_name}' must not be None", param_name)


class ArgumentRangeError(WebEncodersError, ValueError):
    """Raised for negative offsets/counts or buffer sizes that overflow."""
    pass


class ArgumentBoundsError(WebEncodersError, ValueError):
    """Raised when a window runs past the end of its buffer."""
    
    def __init__(
        self,
        count_name: str,
        offset_name: str,
        buffer_name: str
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            count_name: Name of the count argument
            offset_name: Name of the offset argument
            buffer_name: Name of the buffer argument
        """
        self.offset_name = offset_name
        self.buffer_name = buffer_name
        super().__init__(
            f"Invalid {count_name}, {offset_name} or {buffer_name} length.",
            count_name
        )


class MalformedInputError(WebEncodersError, ValueError):
    """Raised when input is not valid unpadded base64url."""
    pass


class InvalidLengthError(MalformedInputError):
    """Raised when an encoded length is congruent to 1 modulo 4."""
    
    def __init__(self, length: int, param_name: Optional[str] = None) -> None:
        self.length = length
        super().__init__(
            f"Malformed input: {length} is an invalid base64url length",
            param_name
        )
