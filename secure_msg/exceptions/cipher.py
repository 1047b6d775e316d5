"""Cipher transform exceptions."""

from .base import SecureMsgException


class CodePointOutOfRangeError(SecureMsgException):
    """Raised when a shifted character falls outside the Unicode range.

    Attributes:
        position: Index of the offending character in the input text
        code_point: The shifted value that could not be converted
    """

    def __init__(self, position: int, code_point: int):
        self.position = position
        self.code_point = code_point
        super().__init__(
            f"Character at position {position} shifts to {code_point}, "
            f"outside the valid code point range 0..0x10FFFF"
        )
