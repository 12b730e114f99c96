"""Main JSON Nodes facade."""

import logging
from pathlib import Path
from typing import Any, Optional, Union
from .types import DynamicValue, ObjectMode
from .models import DecoderConfig, EncoderConfig
from .encoder import ValueEncoder
from .decoder import ValueDecoder
from .error_handler import ErrorHandler
from .io import FileReader, FileWriter


class JSONNodes:
    """
    Entry point exposing every JSON node operation.

    Composes the encoder, decoder and file helpers behind the names a
    graph host wires into nodes.
    """

    def __init__(self, encoder_config: Optional[EncoderConfig] = None,
                 decoder_config: Optional[DecoderConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize JSON Nodes.

        Args:
            encoder_config: Optional EncoderConfig
            decoder_config: Optional DecoderConfig
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)
        self.encoder = ValueEncoder(encoder_config, self.logger)
        self.decoder = ValueDecoder(decoder_config, self.logger)
        self.file_reader = FileReader(self.error_handler, self.logger)
        self.file_writer = FileWriter(self.error_handler, self.logger)

    def to_json_string(self, data: Any, indented: bool = False) -> str:
        """Encode ``data`` as JSON text."""
        return self.encoder.encode(data, indented)

    def to_json_file(self, data: Any, file_path: Union[str, Path],
                     indented: bool = False) -> Path:
        """Encode ``data`` and write it to ``file_path``, replacing any content."""
        return self.encoder.encode_to_file(data, file_path, indented)

    def from_json_string(self, json_text: str,
                         mode: ObjectMode = ObjectMode.DICTIONARY) -> DynamicValue:
        """Decode JSON text."""
        return self.decoder.decode(json_text, mode)

    def from_json_string_sublists(self, json_text: str) -> DynamicValue:
        """Decode JSON text with objects as ``[key, value]`` pairs."""
        return self.decoder.decode_sublists(json_text)

    def from_json_file(self, file_path: Union[str, Path],
                       mode: ObjectMode = ObjectMode.DICTIONARY) -> DynamicValue:
        """Read and decode a JSON file."""
        return self.decoder.decode_file(file_path, mode)

    def read_text(self, file_path: Union[str, Path]) -> str:
        return self.file_reader.read_text(file_path)

    def write_text(self, text: str, file_path: Union[str, Path]) -> Path:
        return self.file_writer.write_text(text, file_path)


def encode(value: Any, indented: bool = False, *,
           config: Optional[EncoderConfig] = None) -> str:
    """
    Flatten ``value`` and serialize it to JSON text.

    Args:
        value: List-like container, mapping, primitive or record
        indented: Pretty-print over multiple lines
        config: Optional EncoderConfig

    Returns:
        JSON text
    """
    return ValueEncoder(config).encode(value, indented)


def decode(json_text: str, mode: ObjectMode = ObjectMode.DICTIONARY, *,
           config: Optional[DecoderConfig] = None) -> DynamicValue:
    """
    Decode JSON text into native containers.

    Args:
        json_text: JSON text
        mode: Output shape for JSON objects
        config: Optional DecoderConfig

    Returns:
        Decoded value
    """
    return ValueDecoder(config).decode(json_text, mode)


def read_text(file_path: Union[str, Path]) -> str:
    """Read a UTF-8 text file."""
    return FileReader().read_text(file_path)


def write_text(text: str, file_path: Union[str, Path]) -> Path:
    """Create or truncate ``file_path`` and write ``text`` to it."""
    return FileWriter().write_text(text, file_path)
