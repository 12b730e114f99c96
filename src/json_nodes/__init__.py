"""
JSON Nodes - JSON encode/decode operations for visual-programming graphs.

Flattens arbitrary values into JSON (objects become field maps) and
decodes JSON into native lists, dictionaries or key/value sublists.
"""

__version__ = "1.0.0"

from .json_nodes import JSONNodes, encode, decode, read_text, write_text
from .encoder import ValueEncoder
from .decoder import ValueDecoder
from .models import EncoderConfig, DecoderConfig
from .types import (
    Describable,
    DynamicValue,
    ErrorType,
    FileAccessError,
    IntegerOverflowError,
    JSONNodesError,
    NotFoundError,
    ObjectMode,
    Pairs,
    ParseError,
    SerializationError,
    UnsupportedTypeError,
    ValueKind,
)
from .data_type_detector import DataTypeDetector


def kind_of(value) -> ValueKind:
    """Return the DynamicValue variant of ``value``."""
    return DataTypeDetector().detect_value_kind(value)


__all__ = [
    "JSONNodes",
    "encode",
    "decode",
    "read_text",
    "write_text",
    "kind_of",
    "ValueEncoder",
    "ValueDecoder",
    "EncoderConfig",
    "DecoderConfig",
    "Describable",
    "DynamicValue",
    "ErrorType",
    "FileAccessError",
    "IntegerOverflowError",
    "JSONNodesError",
    "NotFoundError",
    "ObjectMode",
    "Pairs",
    "ParseError",
    "SerializationError",
    "UnsupportedTypeError",
    "ValueKind",
]
