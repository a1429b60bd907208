"""
Exact byte-sequence search over the edited buffer.
"""

from typing import TYPE_CHECKING, List, Optional, Sequence

from .hex_utils import parse_hex_string

if TYPE_CHECKING:
    from ..core.session import Session


def find_pattern(data: Sequence[int], pattern: Sequence[int], start: int = 0) -> Optional[int]:
    """
    Find the first occurrence of a byte pattern at or after ``start``.

    An empty pattern matches at ``start``, so it is found at index 0 of any
    buffer, including an empty one.

    Args:
        data: Bytes to search in
        pattern: Bytes to search for
        start (int): Starting position for search

    Returns:
        int: Position of pattern or None if not found
    """

    if start < 0 or start > len(data):
        return None

    if not pattern:
        return start

    m = len(pattern)
    for i in range(start, len(data) - m + 1):
        for j in range(m):
            if data[i + j] != pattern[j]:
                break
        else:
            return i

    return None


def find_all(data: Sequence[int], pattern: Sequence[int]) -> List[int]:
    """
    Return every (possibly overlapping) match position, ascending.

    An empty pattern matches at every byte of the buffer.
    """

    if not pattern:
        return list(range(len(data)))

    positions = []
    pos = find_pattern(data, pattern)
    while pos is not None:
        positions.append(pos)
        pos = find_pattern(data, pattern, pos + 1)

    return positions


class SearchResult:
    """Represents a search result with position and match information."""

    def __init__(self, position: int, length: int, match: bytes):
        self.position = position
        self.length = length
        self.match = match

    def __repr__(self) -> str:
        return f"SearchResult(position={self.position}, length={self.length})"


class SearchEngine:
    """Runs hex queries against a session's buffer and remembers the last one."""

    def __init__(self, session: "Session") -> None:
        self.session = session
        self.last_search: Optional[bytes] = None
        self.last_result: Optional[SearchResult] = None

    def _search(self, pattern: bytes, start_pos: int) -> Optional[SearchResult]:
        pos = find_pattern(self.session.data, pattern, start_pos)
        # a hit has to start on a byte the caret can reach
        if pos is None or pos >= len(self.session.data):
            return None

        return SearchResult(pos, len(pattern), pattern)

    def find_hex(self, query: str, start_pos: int = 0) -> Optional[SearchResult]:
        """
        Search for a hex query such as "DE AD BE EF".

        Malformed queries raise HexFormatError; a well-formed query that does
        not occur returns None.
        """

        pattern = parse_hex_string(query)
        self.last_search = pattern
        self.last_result = self._search(pattern, start_pos)

        return self.last_result

    def find_next(self) -> Optional[SearchResult]:
        """Find the next occurrence of the last query after the last hit."""

        if self.last_search is None:
            return None

        start_pos = 0
        if self.last_result:
            start_pos = self.last_result.position + 1

        result = self._search(self.last_search, start_pos)
        if result:
            self.last_result = result

        return result

    def find_previous(self) -> Optional[SearchResult]:
        """Find the closest occurrence of the last query before the last hit."""

        if self.last_search is None:
            return None

        limit = len(self.session.data) + 1
        if self.last_result:
            limit = self.last_result.position

        previous = None
        for pos in find_all(self.session.data, self.last_search):
            if pos >= limit:
                break
            previous = pos

        if previous is None:
            return None

        self.last_result = SearchResult(previous, len(self.last_search), self.last_search)
        return self.last_result

    def find_all_hex(self, query: str) -> List[SearchResult]:
        """Find all occurrences of a hex query."""

        pattern = parse_hex_string(query)
        self.last_search = pattern

        return [SearchResult(pos, len(pattern), pattern)
                for pos in find_all(self.session.data, pattern)]
