"""Flatten-for-serialization encoder."""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union
from .types import EncoderInterface, DynamicValue, InputShape
from .models import EncoderConfig
from .data_type_detector import DataTypeDetector
from .error_handler import ErrorHandler
from .io.file_writer import FileWriter

TYPE_KEY = "Type"


class ValueEncoder(EncoderInterface):
    """
    Encodes arbitrary native values as JSON text.

    Lists and mappings are walked recursively and primitives pass through.
    Any other value is treated as a record and replaced by a field map:
    ``"Type"`` holds the record's type name, followed by one entry per
    readable field with the field value converted by ``str()``. Records
    are never walked into, so nested records appear as plain strings.
    """

    def __init__(self, config: Optional[EncoderConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the encoder.

        Args:
            config: Optional EncoderConfig (defaults apply when omitted)
            logger: Optional logger instance
        """
        self.config = config or EncoderConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.detector = DataTypeDetector(
            treat_strings_as_primitive=self.config.treat_strings_as_primitive,
            logger=self.logger
        )
        self.error_handler = ErrorHandler(self.logger)
        self.file_writer = FileWriter(self.error_handler, self.logger)

    def flatten(self, value: Any) -> DynamicValue:
        """
        Replace every record in ``value`` with its field map.

        Args:
            value: Nested list-like/mapping container, primitive or record

        Returns:
            JSON-compatible tree

        Raises:
            UnsupportedTypeError: If a record exposes no readable field
        """
        shape = self.detector.detect_input_shape(value)

        if shape == InputShape.LIST:
            return [self.flatten(item) for item in value]
        if shape == InputShape.MAPPING:
            return {key: self.flatten(item) for key, item in value.items()}
        if shape == InputShape.PRIMITIVE:
            return value
        return self._flatten_record(value)

    def _flatten_record(self, record: Any) -> DynamicValue:
        fields = self.detector.reflect_fields(record)
        field_map = {TYPE_KEY: self.detector.type_name(record)}
        for name, field_value in fields:
            field_map[name] = str(field_value)
        return field_map

    def serialize(self, tree: DynamicValue, indented: bool = False) -> str:
        """
        Write an already flattened tree as JSON text.

        Args:
            tree: JSON-compatible tree
            indented: Pretty-print over multiple lines

        Returns:
            JSON text

        Raises:
            SerializationError: If the tree holds a value JSON cannot represent
        """
        if indented:
            options = {"indent": self.config.indent}
        else:
            options = {"separators": (",", ":")}

        try:
            return json.dumps(
                tree,
                ensure_ascii=self.config.ensure_ascii,
                allow_nan=False,
                **options
            )
        except (TypeError, ValueError) as e:
            raise self.error_handler.serialization_error(e, tree) from e

    def encode(self, value: Any, indented: bool = False) -> str:
        """
        Flatten ``value`` and serialize it.

        Args:
            value: Value to encode
            indented: Pretty-print over multiple lines

        Returns:
            JSON text
        """
        json_text = self.serialize(self.flatten(value), indented)
        self.logger.debug(f"Encoded {type(value).__name__} to {len(json_text)} characters "
                          f"(indented={indented})")
        return json_text

    def encode_to_file(self, value: Any, file_path: Union[str, Path],
                       indented: bool = False) -> Path:
        """
        Encode ``value`` and write the text to ``file_path``.

        The file is created or truncated.

        Args:
            value: Value to encode
            file_path: Destination path
            indented: Pretty-print over multiple lines

        Returns:
            Path written
        """
        return self.file_writer.write_text(self.encode(value, indented), file_path)
