"""
Exception types raised by the hex grid engine.
"""


class HexFormatError(ValueError):
    """A hex string or hex keystroke could not be decoded."""


class MalformedLength(HexFormatError):
    """Raised when a hex string has an odd number of digits."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Hex string must have even length (got {length} digits)")


class InvalidDigit(HexFormatError):
    """Raised when a character is not a hexadecimal digit."""

    def __init__(self, position: int, char: str) -> None:
        self.position = position
        self.char = char
        super().__init__(f"Invalid hex character: '{char}' at position {position}")


class OutOfRange(IndexError):
    """Raised when a byte index falls outside the current buffer."""

    def __init__(self, byte_index: int, length: int) -> None:
        self.byte_index = byte_index
        self.length = length
        super().__init__(f"Byte index {byte_index} outside buffer of {length} bytes")
