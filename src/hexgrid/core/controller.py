"""
Controller that turns caret and keystroke events into engine calls.
"""

import logging
from typing import Final, List, Optional

from ..errors import HexFormatError, OutOfRange
from ..utils.hex_utils import is_hex_digit, parse_offset
from ..utils.search import SearchEngine, SearchResult
from .addressing import AddressingModel
from .editor import EditEngine
from .layout import GridLayout
from .renderer import GridRenderer, GridText
from .session import Session

logger = logging.getLogger(__name__)

NOT_FOUND_STATUS_MESSAGE: Final[str] = "Not found"
INVALID_OFFSET_STATUS_MESSAGE: Final[str] = "Please enter a valid hexadecimal offset."
NOTHING_TO_SAVE_STATUS_MESSAGE: Final[str] = "No file name to save to."


class HexController:
    """
    Drives one session: rendering, caret placement, nibble typing and search.

    A keystroke runs position lookup, nibble edit, single-cell redraw and
    caret advance in that order; each step lives in its own engine object.
    """

    def __init__(self, session: Optional[Session] = None, layout: Optional[GridLayout] = None) -> None:
        self.session = session or Session()
        self.layout = layout or GridLayout()
        self.addressing = AddressingModel(self.layout)
        self.renderer = GridRenderer(self.layout)
        self.engine = EditEngine(self.renderer, on_modified=self.session.mark_modified)
        self.search_engine = SearchEngine(self.session)
        self.grid = GridText()
        self.refresh()

    def refresh(self) -> GridText:
        """Re-render all three panes from the buffer."""

        self.grid = self.renderer.render_full(self.session.data)
        if self.session.caret_offset > len(self.grid.hex_text):
            self.session.caret_offset = 0

        return self.grid

    def load(self, filename: str) -> None:
        self.session.load_file(filename)
        self.search_engine = SearchEngine(self.session)
        self.refresh()
        self.session.status_message = f"Loaded: {filename} ({self.session.get_size()} bytes)"

    def save(self, filename: Optional[str] = None) -> bool:
        if not self.session.save_file(filename):
            self.session.status_message = NOTHING_TO_SAVE_STATUS_MESSAGE
            return False

        self.session.status_message = f"Saved: {self.session.filename}"
        return True

    def handle_key(self, char: str) -> bool:
        """
        Type a hex digit at the caret. Returns True if the buffer changed.

        Non-hex keys and carets that are not on a digit cell of an existing
        byte are ignored.
        """

        if not self.session.data or not is_hex_digit(char):
            return False

        position = self.addressing.position_from_text_offset(
            self.grid.hex_text, self.session.caret_offset)
        if position is None:
            return False

        try:
            update = self.engine.apply_nibble(self.session.data, position, char)
        except OutOfRange as e:
            logger.debug("ignoring edit past end of buffer: %s", e)
            return False

        self.grid = self.grid.patch_all(update)

        next_pos = self.addressing.next_position(position, self.session.get_size())
        if next_pos is not None:
            self.session.caret_offset = self.addressing.text_offset_from_position(next_pos)

        return True

    def write_bytes(self, byte_index: int, data: bytes) -> int:
        """
        Overwrite whole bytes starting at ``byte_index``.

        Bytes that would fall past the end of the buffer are dropped. Returns
        the number of bytes written. The caret moves to the byte after them,
        or to the last byte when the write reaches the end of the buffer.
        """

        size = self.session.get_size()
        if not 0 <= byte_index < size:
            logger.debug("write at %d outside buffer of %d bytes", byte_index, size)
            return 0

        data = data[:size - byte_index]
        for i, value in enumerate(data):
            self.grid = self.grid.patch_all(
                self.engine.set_byte(self.session.data, byte_index + i, value))

        self.goto(min(byte_index + len(data), size - 1))
        return len(data)

    def snap_caret(self) -> None:
        """Move the caret onto the digit cell under it, if there is one."""

        offset = self.addressing.snap_offset(self.grid.hex_text, self.session.caret_offset)
        if offset is not None:
            self.session.caret_offset = offset

    def goto(self, byte_index: int) -> bool:
        offset = self.addressing.goto_byte_offset(byte_index, self.session.get_size())
        if offset is None:
            logger.debug("goto %d outside buffer of %d bytes", byte_index, self.session.get_size())
            return False

        self.session.caret_offset = offset
        self.session.top_line = self.layout.line_of(byte_index)
        return True

    def goto_text(self, text: str) -> bool:
        """Go to an offset typed by the user in hexadecimal."""

        try:
            byte_index = parse_offset(text)
        except ValueError:
            self.session.status_message = INVALID_OFFSET_STATUS_MESSAGE
            return False

        return self.goto(byte_index)

    def _show_result(self, result: Optional[SearchResult]) -> Optional[int]:
        if result is None or not self.goto(result.position):
            self.session.status_message = NOT_FOUND_STATUS_MESSAGE
            return None

        self.session.status_message = f"Found at offset: 0x{result.position:X}"
        return result.position

    def find(self, query: str) -> Optional[int]:
        """Search for a hex query and move the caret to the first match."""

        try:
            result = self.search_engine.find_hex(query)
        except HexFormatError as e:
            self.session.status_message = f"Invalid hex string: {e}"
            return None

        return self._show_result(result)

    def find_next(self) -> Optional[int]:
        return self._show_result(self.search_engine.find_next())

    def find_previous(self) -> Optional[int]:
        return self._show_result(self.search_engine.find_previous())

    def find_all(self, query: str) -> List[int]:
        """Every match offset of a hex query; the caret goes to the first one."""

        try:
            results = self.search_engine.find_all_hex(query)
        except HexFormatError as e:
            self.session.status_message = f"Invalid hex string: {e}"
            return []

        if not results:
            self.session.status_message = NOT_FOUND_STATUS_MESSAGE
            return []

        self.goto(results[0].position)
        self.session.status_message = f"Found {len(results)} matches"
        return [r.position for r in results]
