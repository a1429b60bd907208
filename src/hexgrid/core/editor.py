"""
Nibble-level editing of the byte buffer.
"""

from typing import Callable, Optional

from ..errors import InvalidDigit, OutOfRange
from ..utils.hex_utils import is_hex_digit
from .addressing import GridPosition, Nibble
from .renderer import ByteUpdate, GridRenderer


class EditEngine:
    """
    Applies in-place edits to a fixed-length buffer.

    Every edit validates its input before the buffer is touched, then reports
    the single byte's hex and ascii cells so the caller can redraw only those.
    """

    def __init__(self, renderer: Optional[GridRenderer] = None,
                 on_modified: Optional[Callable[[], None]] = None) -> None:
        self.renderer = renderer or GridRenderer()
        self.on_modified = on_modified

    def _check_range(self, buffer: bytearray, byte_index: int) -> None:
        if not 0 <= byte_index < len(buffer):
            raise OutOfRange(byte_index, len(buffer))

    def _commit(self, buffer: bytearray, byte_index: int, value: int) -> ByteUpdate:
        buffer[byte_index] = value

        if self.on_modified:
            self.on_modified()

        return self.renderer.render_byte_span(buffer, byte_index)

    def apply_nibble(self, buffer: bytearray, position: GridPosition, hex_digit: str) -> ByteUpdate:
        """
        Replace one nibble of a byte with a typed hex digit.

        Raises:
            InvalidDigit: if ``hex_digit`` is not a single hex character
            OutOfRange: if the position is outside the buffer
        """

        if not is_hex_digit(hex_digit):
            raise InvalidDigit(0, hex_digit)

        self._check_range(buffer, position.byte_index)

        current = buffer[position.byte_index]
        nibble = int(hex_digit, 16)

        if position.nibble is Nibble.HIGH:
            value = (nibble << 4) | (current & 0x0F)
        else:
            value = (current & 0xF0) | nibble

        return self._commit(buffer, position.byte_index, value)

    def set_byte(self, buffer: bytearray, byte_index: int, value: int) -> ByteUpdate:
        """Replace a whole byte."""

        if not 0 <= value <= 255:
            raise ValueError("Byte value must be between 0 and 255")

        self._check_range(buffer, byte_index)

        return self._commit(buffer, byte_index, value)
