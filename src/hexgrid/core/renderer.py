"""
Text rendering of the offset, hex and ascii panes.
"""

import enum
from dataclasses import dataclass, replace
from typing import NamedTuple, Optional, Sequence, Tuple

from ..errors import OutOfRange
from ..utils.hex_utils import format_byte, format_offset, printable_char
from .layout import GridLayout


class Pane(enum.Enum):
    OFFSET = "offset"
    HEX = "hex"
    ASCII = "ascii"


@dataclass(frozen=True)
class RenderSpan:
    """A fixed-width cell of one pane to overwrite after a byte changes."""
    pane: Pane
    start: int
    length: int
    text: str

    def apply(self, pane_text: str) -> str:
        """Return ``pane_text`` with this span written over it."""

        return pane_text[:self.start] + self.text + pane_text[self.start + self.length:]


class ByteUpdate(NamedTuple):
    """The hex and ascii cells that changed for one byte."""
    hex_span: RenderSpan
    ascii_span: RenderSpan


@dataclass(frozen=True)
class GridText:
    """Full text of the three panes."""
    offset_text: str = ""
    hex_text: str = ""
    ascii_text: str = ""

    def patch(self, span: RenderSpan) -> "GridText":
        if span.pane is Pane.HEX:
            return replace(self, hex_text=span.apply(self.hex_text))

        if span.pane is Pane.ASCII:
            return replace(self, ascii_text=span.apply(self.ascii_text))

        return replace(self, offset_text=span.apply(self.offset_text))

    def patch_all(self, spans: Sequence[RenderSpan]) -> "GridText":
        grid = self
        for span in spans:
            grid = grid.patch(span)

        return grid


class GridRenderer:
    """Formats a byte buffer into the three grid panes."""

    def __init__(self, layout: Optional[GridLayout] = None) -> None:
        self.layout = layout or GridLayout()

    def render_line(self, data: Sequence[int], line: int) -> Tuple[str, str, str]:
        """
        Render one grid line as (offset, hex, ascii) rows, newlines included.

        Missing cells of a short last line are padded in the hex row so every
        hex row has the same length; the ascii row only holds present bytes.
        """

        constants = self.layout.constants
        start = line * constants.bytes_per_line
        chunk = data[start:start + constants.bytes_per_line]

        hex_parts = []
        for j in range(constants.bytes_per_line):
            if j < len(chunk):
                hex_parts.append(format_byte(chunk[j]) + ' ')
            else:
                hex_parts.append('   ')
            if j == constants.mid_line_gap_after - 1:
                hex_parts.append(' ')

        offset_row = format_offset(start, constants.offset_width) + '\n'
        hex_row = ''.join(hex_parts) + '\n'
        ascii_row = ''.join(printable_char(b) for b in chunk) + '\n'

        return offset_row, hex_row, ascii_row

    def render_full(self, data: Sequence[int]) -> GridText:
        """Render the whole buffer. An empty buffer gives three empty panes."""

        offset_rows = []
        hex_rows = []
        ascii_rows = []

        for line in range(self.layout.line_count(len(data))):
            offset_row, hex_row, ascii_row = self.render_line(data, line)
            offset_rows.append(offset_row)
            hex_rows.append(hex_row)
            ascii_rows.append(ascii_row)

        return GridText(''.join(offset_rows), ''.join(hex_rows), ''.join(ascii_rows))

    def render_byte_span(self, data: Sequence[int], byte_index: int) -> ByteUpdate:
        """Recompute the hex and ascii cells of a single byte."""

        if not 0 <= byte_index < len(data):
            raise OutOfRange(byte_index, len(data))

        value = data[byte_index]
        hex_span = RenderSpan(Pane.HEX, self.layout.hex_offset(byte_index), 2, format_byte(value))
        ascii_span = RenderSpan(Pane.ASCII, self.layout.ascii_offset(byte_index), 1, printable_char(value))

        return ByteUpdate(hex_span, ascii_span)
