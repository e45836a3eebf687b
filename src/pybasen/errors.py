"""
Errors raised when decoding baseN text

Encoding never fails, so every error here comes from a decode call.
"""

from enum import Enum


class DecodeError(ValueError):
    """An error when decoding baseN text into binary data"""

    class ErrorType(Enum):
        """Types of decode errors"""
        EXCESS_PADDING = "excess_padding"
        INVALID_PADDING_LENGTH = "invalid_padding_length"
        NON_CANONICAL_PADDING = "non_canonical_padding"
        INVALID_CHARACTER = "invalid_character"

    def __init__(self, error_type: ErrorType, algorithm: str, message: str = ""):
        self.error_type = error_type
        self.algorithm = algorithm
        super().__init__(f"{error_type.value}: {message}" if message else error_type.value)
