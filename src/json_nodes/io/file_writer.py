"""File writer for encoded JSON text."""

import logging
from pathlib import Path
from typing import Optional, Union
from ..error_handler import ErrorHandler


class FileWriter:
    """
    Writes text files in one piece.

    Files are created or truncated in place. There is no temporary file,
    locking or backup; concurrent writers to one path race.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)

    def write_text(self, text: str, file_path: Union[str, Path]) -> Path:
        """
        Write ``text`` to ``file_path`` as UTF-8.

        Args:
            text: Text to write
            file_path: Destination path; the parent directory must exist

        Returns:
            Path written

        Raises:
            FileAccessError: If the file cannot be opened or written
        """
        path = Path(file_path)
        try:
            with open(path, 'w', encoding='utf-8') as f:
                f.write(text)
        except OSError as e:
            raise self.error_handler.file_error(e, path, "write") from e

        self.logger.info(f"Wrote {len(text)} characters to {path}")
        return path
