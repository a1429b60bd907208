"""
Conversion between raw hex pane text offsets and byte/nibble positions.
"""

import enum
from dataclasses import dataclass
from typing import Optional

from .layout import GridLayout


class Nibble(enum.Enum):
    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class GridPosition:
    """A digit cell in the hex pane: one nibble of one byte."""
    byte_index: int
    nibble: Nibble = Nibble.HIGH


class AddressingModel:
    """Resolves caret offsets in the hex pane to grid positions and back."""

    def __init__(self, layout: Optional[GridLayout] = None) -> None:
        self.layout = layout or GridLayout()

    def position_from_text_offset(self, hex_text: str, raw_offset: int,
                                  buffer_length: Optional[int] = None) -> Optional[GridPosition]:
        """
        Find the byte and nibble under a text offset of the hex pane.

        Separator columns, the mid-line gap, newlines and offsets past the
        text resolve to None. With ``buffer_length`` given, the padding cells
        of a short last line resolve to None too.
        """

        if raw_offset < 0 or raw_offset >= len(hex_text):
            return None

        line = hex_text.count('\n', 0, raw_offset)
        line_start = hex_text.rfind('\n', 0, raw_offset) + 1
        col_in_line = raw_offset - line_start

        for i in range(self.layout.bytes_per_line):
            column = self.layout.column_of(i)
            if col_in_line == column:
                nibble = Nibble.HIGH
            elif col_in_line == column + 1:
                nibble = Nibble.LOW
            else:
                continue

            byte_index = line * self.layout.bytes_per_line + i
            if buffer_length is not None and byte_index >= buffer_length:
                return None

            return GridPosition(byte_index, nibble)

        return None

    def text_offset_from_position(self, position: GridPosition) -> int:
        """Raw hex pane offset of the digit a position refers to."""

        offset = self.layout.hex_offset(position.byte_index)
        if position.nibble is Nibble.LOW:
            offset += 1

        return offset

    def next_position(self, position: GridPosition, buffer_length: int) -> Optional[GridPosition]:
        """
        The position the caret advances to after typing a digit.

        High moves to the low nibble of the same byte, low moves to the high
        nibble of the next byte. There is no wraparound: None past the end.
        """

        if position.nibble is Nibble.HIGH:
            next_pos = GridPosition(position.byte_index, Nibble.LOW)
        else:
            next_pos = GridPosition(position.byte_index + 1, Nibble.HIGH)

        if not 0 <= next_pos.byte_index < buffer_length:
            return None

        return next_pos

    def goto_byte_offset(self, byte_index: int, buffer_length: int) -> Optional[int]:
        """Caret offset for the high nibble of a byte, None outside the buffer."""

        if not 0 <= byte_index < buffer_length:
            return None

        return self.text_offset_from_position(GridPosition(byte_index, Nibble.HIGH))

    def snap_offset(self, hex_text: str, raw_offset: int) -> Optional[int]:
        """Canonical offset of the digit cell under ``raw_offset``, if any."""

        position = self.position_from_text_offset(hex_text, raw_offset)
        if position is None:
            return None

        return self.text_offset_from_position(position)
