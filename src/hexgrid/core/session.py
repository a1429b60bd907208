"""
Session state for one edited file.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)

TITLE = "Hex Editor"


class Session:
    """Owns the byte buffer being edited and the state around it."""

    def __init__(self, initial_data: bytes = b'') -> None:
        self.data = bytearray(initial_data)
        self.modified = False
        self.filename: Optional[str] = None
        self.caret_offset = 0
        self.top_line = 0
        self.status_message = ""

    def get_size(self) -> int:
        """Get the size of the buffer in bytes."""

        return len(self.data)

    def mark_modified(self) -> None:
        if not self.modified:
            logger.debug("session for %s is now modified", self.filename)
        self.modified = True

    def title(self) -> str:
        """Window title reflecting the current file and modification state."""

        title = TITLE
        if self.filename:
            title += f" - {self.filename}"
            if self.modified:
                title += " *"

        return title

    def load_file(self, filename: str) -> None:
        """Load data from a file, replacing the whole buffer."""

        with open(filename, 'rb') as f:
            data = bytearray(f.read())

        self.data = data
        self.filename = filename
        self.modified = False
        self.caret_offset = 0
        self.top_line = 0
        logger.info("loaded %s (%d bytes)", filename, len(data))

    def save_file(self, filename: Optional[str] = None) -> bool:
        """
        Save data to a file.

        Args:
            filename: Optional filename to save to. If None, uses current filename.

        Returns:
            bool: True if save was successful, False if there is nowhere to save
        """

        save_filename = filename or self.filename
        if not save_filename:
            return False

        try:
            with open(save_filename, 'wb') as f:
                f.write(bytes(self.data))
        except OSError as e:
            raise IOError(f"Failed to save file: {e}") from e

        self.filename = save_filename
        self.modified = False
        logger.info("saved %s (%d bytes)", save_filename, len(self.data))
        return True
