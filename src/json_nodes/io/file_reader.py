"""File reader for JSON text."""

import logging
from pathlib import Path
from typing import Optional, Union
from ..error_handler import ErrorHandler


class FileReader:
    """Reads whole text files."""

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the file reader.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)

    def read_text(self, file_path: Union[str, Path]) -> str:
        """
        Read ``file_path`` as UTF-8 text.

        Args:
            file_path: Path to read

        Returns:
            File contents

        Raises:
            NotFoundError: If the file does not exist
            FileAccessError: If the file cannot be read
        """
        path = Path(file_path)
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as e:
            raise self.error_handler.file_error(e, path, "read") from e
        except UnicodeDecodeError as e:
            raise self.error_handler.encoding_error(e, path) from e

        self.logger.info(f"Read {len(text)} characters from {path}")
        return text
