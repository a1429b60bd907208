"""
Utility package for hex codec, search and highlighting support functions.
"""

from .hex_utils import (
    is_hex_digit,
    parse_hex_string,
    parse_offset,
    format_offset,
    format_byte,
    printable_char,
    strip_whitespace
)
from .search import find_pattern, find_all, SearchEngine, SearchResult
from .highlight import join_panes, DumpHighlighter

__all__ = [
    'is_hex_digit',
    'parse_hex_string',
    'parse_offset',
    'format_offset',
    'format_byte',
    'printable_char',
    'strip_whitespace',
    'find_pattern',
    'find_all',
    'SearchEngine',
    'SearchResult',
    'join_panes',
    'DumpHighlighter'
]
