"""Error translation for JSON Nodes operations."""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union
from .types import (
    FileAccessError,
    NotFoundError,
    ParseError,
    SerializationError,
)


class ErrorHandler:
    """
    Translates errors raised by the JSON library and the filesystem.

    Every translated error carries the offending location or path in its
    context. Nothing is recovered here; callers re-raise the result with
    the original exception chained.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse_error(self, error: json.JSONDecodeError) -> ParseError:
        """
        Build a ParseError from a JSON decoder failure.

        Args:
            error: JSONDecodeError raised by the parser

        Returns:
            ParseError with line, column and offset in its context
        """
        self.logger.debug(f"JSON parsing failed: {error.msg} at line {error.lineno}, column {error.colno}")
        return ParseError(
            f"JSON parsing failed: {error.msg} at line {error.lineno}, column {error.colno}",
            context={"line": error.lineno, "column": error.colno, "position": error.pos}
        )

    def empty_input_error(self) -> ParseError:
        """Build the ParseError reported for blank input."""
        return ParseError(
            "JSON parsing failed: input is empty",
            context={"line": 1, "column": 1, "position": 0}
        )

    def constant_error(self, constant: str) -> ParseError:
        """Build the ParseError for non-standard constants such as NaN."""
        return ParseError(
            f"JSON parsing failed: {constant} is not valid JSON",
            context={"token": constant}
        )

    def serialization_error(self, error: Exception, root: Any) -> SerializationError:
        """
        Build a SerializationError from a JSON writer failure.

        Args:
            error: TypeError or ValueError raised by the writer
            root: The flattened tree that failed to serialize

        Returns:
            SerializationError naming the root type
        """
        self.logger.debug(f"JSON serialization failed: {error}")
        return SerializationError(
            f"Value is not JSON serializable: {error}",
            context={"root_type": type(root).__name__}
        )

    def file_error(self, error: OSError, path: Union[str, Path],
                   operation: str) -> FileAccessError:
        """
        Build a FileAccessError (or NotFoundError) from an OSError.

        Args:
            error: OSError raised by the filesystem
            path: Path involved in the operation
            operation: "read" or "write"

        Returns:
            NotFoundError when reading a missing file, FileAccessError otherwise
        """
        context = {"path": str(path), "operation": operation, "errno": error.errno}
        self.logger.error(f"Failed to {operation} {path}: {error}")

        if isinstance(error, FileNotFoundError) and operation == "read":
            return NotFoundError(f"File not found: {path}", context=context)
        return FileAccessError(
            f"Failed to {operation} {path}: {error.strerror or error}",
            context=context
        )

    def encoding_error(self, error: UnicodeDecodeError,
                       path: Union[str, Path]) -> FileAccessError:
        """Build the FileAccessError for a file that is not valid UTF-8."""
        self.logger.error(f"Failed to read {path}: {error}")
        return FileAccessError(
            f"Failed to read {path}: not valid UTF-8 at byte {error.start}",
            context={"path": str(path), "operation": "read", "position": error.start}
        )
