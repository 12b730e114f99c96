"""JSON parser producing an order-preserving token tree."""

import json
import logging
from typing import Any, Optional
from .error_handler import ErrorHandler


class IntegerToken(str):
    """Integer literal, kept as its source text."""
    __slots__ = ()


class FloatToken(str):
    """Float literal, kept as its source text."""
    __slots__ = ()


class ObjectToken(list):
    """JSON object as ``(key, value)`` tuples in document order."""
    __slots__ = ()


class JSONParser:
    """
    Thin wrapper over the ``json`` module for the decoder.

    Numbers are not converted during parsing so the decoder can apply its
    own range rules, and objects are returned as key/value pairs so that
    both object output modes see the document order. Strings, booleans and
    null come back as native ``str``, ``bool`` and ``None``.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse_tokens(self, json_text: str) -> Any:
        """
        Parse JSON text into a token tree.

        Args:
            json_text: JSON text to parse

        Returns:
            Root token: list, ObjectToken, IntegerToken, FloatToken, str,
            bool or None

        Raises:
            ParseError: If the text is empty or not well-formed JSON
        """
        if not json_text.strip():
            raise self.error_handler.empty_input_error()

        try:
            tokens = json.loads(
                json_text,
                object_pairs_hook=ObjectToken,
                parse_int=IntegerToken,
                parse_float=FloatToken,
                parse_constant=self._reject_constant,
            )
        except json.JSONDecodeError as e:
            raise self.error_handler.parse_error(e) from e

        self.logger.debug(f"Parsed {len(json_text)} characters of JSON")
        return tokens

    def _reject_constant(self, constant: str) -> Any:
        """NaN and the infinities are not part of the JSON grammar."""
        raise self.error_handler.constant_error(constant)

    @staticmethod
    def token_text(token: Any) -> str:
        """
        Canonical text of a scalar token.

        Numbers keep their literal text, strings are returned unquoted and
        ``true``/``false``/``null`` use their JSON spelling.
        """
        if isinstance(token, str):
            return str(token)
        return json.dumps(token)
