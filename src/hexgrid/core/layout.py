"""
Grid layout arithmetic shared by rendering and addressing.

A hex pane line holds ``bytes_per_line`` cells of two digits plus one
separator space each, one extra space after the ``mid_line_gap_after``-th
cell and a trailing newline::

    48 65 6C 6C 6F 20 57 6F  72 6C 64 21 ...\\n

The ascii pane holds one character per byte plus a newline and the offset
pane a fixed-width address plus a newline. Every length below is derived from
the same constants so the three panes always stay in step.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class LayoutConstants:
    """Fixed shape of the grid."""
    bytes_per_line: int = 16
    mid_line_gap_after: int = 8
    offset_width: int = 8

    def __post_init__(self) -> None:
        if self.bytes_per_line < 1:
            raise ValueError(f"bytes_per_line must be at least 1, got {self.bytes_per_line}")
        # the gap is always emitted, so it has to follow a cell of the line
        if not 1 <= self.mid_line_gap_after <= self.bytes_per_line:
            raise ValueError(
                f"mid_line_gap_after must be in 1..{self.bytes_per_line}, "
                f"got {self.mid_line_gap_after}")
        if self.offset_width < 1:
            raise ValueError(f"offset_width must be at least 1, got {self.offset_width}")


DEFAULT_LAYOUT: Final[LayoutConstants] = LayoutConstants()

CELL_WIDTH: Final[int] = 3  # two digits and a separator


class GridLayout:
    """Pure mapping between byte indices and grid coordinates."""

    def __init__(self, constants: LayoutConstants = DEFAULT_LAYOUT) -> None:
        self.constants = constants

    @property
    def bytes_per_line(self) -> int:
        return self.constants.bytes_per_line

    @property
    def hex_line_length(self) -> int:
        # cells + mid-line gap + newline
        return self.bytes_per_line * CELL_WIDTH + 1 + 1

    @property
    def ascii_line_length(self) -> int:
        return self.bytes_per_line + 1

    @property
    def offset_line_length(self) -> int:
        return self.constants.offset_width + 1

    def column_of(self, byte_in_line: int) -> int:
        """Column of the high nibble digit of a byte slot within its hex line."""

        column = byte_in_line * CELL_WIDTH
        if byte_in_line >= self.constants.mid_line_gap_after:
            column += 1

        return column

    def line_of(self, byte_index: int) -> int:
        return byte_index // self.bytes_per_line

    def byte_in_line(self, byte_index: int) -> int:
        return byte_index % self.bytes_per_line

    def line_count(self, length: int) -> int:
        """Number of grid lines needed for a buffer of ``length`` bytes."""

        return (length + self.bytes_per_line - 1) // self.bytes_per_line

    def hex_line_start(self, line: int) -> int:
        return line * self.hex_line_length

    def hex_offset(self, byte_index: int) -> int:
        """Text offset of a byte's high nibble digit in the hex pane."""

        return (self.hex_line_start(self.line_of(byte_index))
                + self.column_of(self.byte_in_line(byte_index)))

    def ascii_offset(self, byte_index: int) -> int:
        """Text offset of a byte's character in the ascii pane."""

        return (self.line_of(byte_index) * self.ascii_line_length
                + self.byte_in_line(byte_index))
