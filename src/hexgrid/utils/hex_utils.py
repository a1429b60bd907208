"""
Utility functions for hex string conversion and cell formatting.
"""

import re
from typing import Final

from ..errors import InvalidDigit, MalformedLength

HEX_DIGITS: Final[str] = '0123456789ABCDEFabcdef'
PRINTABLE_MIN: Final[int] = 32
PRINTABLE_MAX: Final[int] = 126

# ASCII whitespace only; control separators and Unicode spaces are not skipped
WHITESPACE_RE: Final[re.Pattern] = re.compile(r'[ \t\n\r\f\v]+')


def is_hex_digit(char: str) -> bool:
    """Check if a single character is a valid hex digit."""

    return len(char) == 1 and char in HEX_DIGITS


def strip_whitespace(text: str) -> str:
    """Remove ASCII whitespace from a hex string."""

    return WHITESPACE_RE.sub('', text)


def parse_hex_string(hex_str: str) -> bytes:
    """
    Parse a hex string into bytes.

    ASCII whitespace anywhere in the string is ignored, so "DE AD" and "DEAD"
    decode to the same bytes. Empty input decodes to b''.

    Args:
        hex_str (str): String of hex values (e.g. "FF 00 A5")

    Returns:
        bytes: Parsed bytes

    Raises:
        MalformedLength: if the digit count is odd
        InvalidDigit: at the first character that is not a hex digit
    """

    clean_str = strip_whitespace(hex_str)
    if len(clean_str) % 2 != 0:
        raise MalformedLength(len(clean_str))

    for i, c in enumerate(clean_str):
        if c not in HEX_DIGITS:
            raise InvalidDigit(i, c)

    return bytes(int(clean_str[i:i + 2], 16) for i in range(0, len(clean_str), 2))


def parse_offset(text: str) -> int:
    """
    Parse a byte offset typed as hexadecimal, with or without a 0x prefix.

    Raises:
        ValueError: if the text is not a non-negative hex number
    """

    s = text.strip()
    if s[:2].lower() == '0x':
        s = s[2:]

    if not s or not all(c in HEX_DIGITS for c in s):
        raise ValueError(f"Invalid hexadecimal offset: {text!r}")

    return int(s, 16)


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"


def format_byte(value: int) -> str:
    """Format a byte as its two-digit uppercase hex cell."""

    return f"{value:02X}"


def printable_char(value: int) -> str:
    """Map a byte to its ascii pane character."""

    if PRINTABLE_MIN <= value <= PRINTABLE_MAX:
        return chr(value)

    return '.'
