"""Parse-to-native decoder."""

import logging
import math
from pathlib import Path
from typing import Any, Optional, Union
from .types import (
    DecoderInterface,
    DynamicValue,
    IntegerOverflowError,
    ObjectMode,
    Pairs,
    ParseError,
)
from .models import DecoderConfig
from .parser import JSONParser, FloatToken, IntegerToken, ObjectToken
from .error_handler import ErrorHandler
from .io.file_reader import FileReader

TRUE_TEXT = "true"


class ValueDecoder(DecoderInterface):
    """
    Decodes JSON text into native nested containers.

    Arrays become lists. Objects become dicts in ``ObjectMode.DICTIONARY``
    and ``Pairs`` of ``[key, value]`` in ``ObjectMode.SUBLISTS``; both keep
    document order. Booleans, integers and floats are coerced to native
    values, strings pass through and ``null`` follows
    ``DecoderConfig.null_as_text``.
    """

    def __init__(self, config: Optional[DecoderConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the decoder.

        Args:
            config: Optional DecoderConfig (defaults apply when omitted)
            logger: Optional logger instance
        """
        self.config = config or DecoderConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger)
        self.file_reader = FileReader(self.error_handler, self.logger)
        self.int_min, self.int_max = self.config.int_range()
        self.max_digits = len(str(abs(self.int_min)))

        if not self.config.coerce_scalars:
            self.logger.warning("Raw scalar decoding is deprecated; "
                                "every scalar will be returned as text")

    def decode(self, json_text: str, mode: ObjectMode = ObjectMode.DICTIONARY) -> DynamicValue:
        """
        Decode JSON text.

        Args:
            json_text: JSON text to decode
            mode: Output shape for JSON objects

        Returns:
            Decoded value

        Raises:
            ParseError: If the text is not well-formed JSON or a float
                literal is outside the double range
            IntegerOverflowError: If an integer literal is out of range
        """
        mode = ObjectMode(mode)
        tokens = self.parser.parse_tokens(json_text)
        self.logger.debug(f"Decoding JSON in {mode.value} mode")
        return self._convert(tokens, mode)

    def decode_sublists(self, json_text: str) -> DynamicValue:
        """Decode with objects returned as ``[key, value]`` pairs."""
        return self.decode(json_text, ObjectMode.SUBLISTS)

    def decode_file(self, file_path: Union[str, Path],
                    mode: ObjectMode = ObjectMode.DICTIONARY) -> DynamicValue:
        """
        Read ``file_path`` and decode its contents.

        Args:
            file_path: Path of the JSON file
            mode: Output shape for JSON objects

        Returns:
            Decoded value
        """
        return self.decode(self.file_reader.read_text(file_path), mode)

    def _convert(self, token: Any, mode: ObjectMode) -> DynamicValue:
        """Convert one token and its children."""
        if isinstance(token, ObjectToken):
            return self._convert_object(token, mode)
        if isinstance(token, list):
            return [self._convert(child, mode) for child in token]
        return self._convert_scalar(token)

    def _convert_object(self, token: ObjectToken, mode: ObjectMode) -> DynamicValue:
        # Duplicate keys keep their first position and take the last value
        entries = {}
        for key, child in token:
            entries[key] = self._convert(child, mode)

        if mode == ObjectMode.SUBLISTS:
            return Pairs.from_items(entries.items())
        return entries

    def _convert_scalar(self, token: Any) -> DynamicValue:
        if token is None:
            return JSONParser.token_text(token) if self.config.null_as_text else None

        if not self.config.coerce_scalars:
            return JSONParser.token_text(token)

        if isinstance(token, bool):
            return JSONParser.token_text(token) == TRUE_TEXT
        if isinstance(token, IntegerToken):
            return self._convert_integer(token)
        if isinstance(token, FloatToken):
            return self._convert_float(token)
        return JSONParser.token_text(token)

    def _convert_integer(self, token: IntegerToken) -> int:
        # Literals longer than the widest bound are out of range without
        # converting them; int() refuses very long digit strings
        if len(token.lstrip("-")) > self.max_digits or not (
                self.int_min <= int(token) <= self.int_max):
            raise IntegerOverflowError(
                f"Integer literal {self._shorten(token)} is outside the "
                f"{self.config.int_bits}-bit range [{self.int_min}, {self.int_max}]",
                context={"token": str(token), "int_bits": self.config.int_bits}
            )
        return int(token)

    def _convert_float(self, token: FloatToken) -> float:
        value = float(token)
        if math.isinf(value):
            raise ParseError(
                f"Float literal {self._shorten(token)} is outside the double range",
                context={"token": str(token)}
            )
        return value

    @staticmethod
    def _shorten(token: str, limit: int = 40) -> str:
        if len(token) <= limit:
            return token
        return f"{token[:limit]}... ({len(token)} characters)"
