"""
Error raised when base32 text can't be decoded
"""

import errno as _errno
from enum import Enum
from typing import Optional


class Base32Error(ValueError):
    """An error when decoding base32 text"""

    class ErrorType(Enum):
        """Types of decode errors"""
        INVALID_LENGTH = "invalid_length"
        INVALID_PADDING = "invalid_padding"
        ILLEGAL_CHARACTER = "illegal_character"

    def __init__(self, error_type: ErrorType, message: str, operation: str = "decode",
                 char: Optional[int] = None, position: Optional[int] = None):
        self.error_type = error_type
        self.operation = operation
        self.message = message
        # The byte value and 1-based offset of an illegal character
        self.char = char
        self.position = position
        if error_type is Base32Error.ErrorType.ILLEGAL_CHARACTER:
            self.errno = _errno.EILSEQ
        else:
            self.errno = _errno.EINVAL
        super().__init__(f"{operation}: {message}")


def invalid_length() -> Base32Error:
    return Base32Error(
        Base32Error.ErrorType.INVALID_LENGTH,
        "RFC 4648 Base32 requires input length to be a multiple of 8",
    )


def invalid_padding() -> Base32Error:
    return Base32Error(
        Base32Error.ErrorType.INVALID_PADDING,
        "RFC 4648 Base32 padding length must be 0, 1, 3, 4, or 6",
    )


def illegal_character(char: int, position: int) -> Base32Error:
    """Build the error for byte `char` found at 1-based `position`"""
    printable = chr(char) if 0x20 <= char < 0x7f else '?'
    return Base32Error(
        Base32Error.ErrorType.ILLEGAL_CHARACTER,
        f"Illegal character in Base32 string: '{printable}' (0x{char:02X}) at position {position}",
        char=char,
        position=position,
    )
