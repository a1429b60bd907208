"""
Terminal highlighting of rendered grids using Pygments.
"""

from pygments import highlight
from pygments.formatters.terminal import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer


def join_panes(offset_text: str, hex_text: str, ascii_text: str) -> str:
    """
    Merge the three panes line by line into ``hexdump -C`` style text::

        00000000  48 65 6C 6C 6F 20 57 6F  72 6C 64 21              |Hello World!|
    """

    lines = []
    for offset_row, hex_row, ascii_row in zip(offset_text.splitlines(),
                                              hex_text.splitlines(),
                                              ascii_text.splitlines()):
        lines.append(f"{offset_row}  {hex_row} |{ascii_row}|\n")

    return ''.join(lines)


class DumpHighlighter:
    """Colors joined grid text for a terminal."""

    def __init__(self, bg: str = 'dark') -> None:
        self.lexer = HexdumpLexer()
        self.formatter = TerminalFormatter(bg=bg)

    def highlight(self, text: str, color: bool = True) -> str:
        """
        Highlight dump text.

        Args:
            text: Text produced by join_panes
            color: When False the text is returned unchanged

        Returns:
            The text with ANSI color sequences
        """

        if not color or not text:
            return text

        return highlight(text, self.lexer, self.formatter)
