"""Core type definitions for JSON Nodes."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union


class ValueKind(Enum):
    """Enumeration of DynamicValue variants."""
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    LIST = "list"
    OBJECT = "object"
    PAIRS = "pairs"


class InputShape(Enum):
    """Shape of an arbitrary encoder input value."""
    LIST = "list"
    MAPPING = "mapping"
    PRIMITIVE = "primitive"
    RECORD = "record"


class ObjectMode(Enum):
    """Output shape for decoded JSON objects."""
    DICTIONARY = "dictionary"
    SUBLISTS = "sublists"


class ErrorType(Enum):
    """Enumeration of error types."""
    PARSE = "parse"
    OVERFLOW = "overflow"
    UNSUPPORTED_TYPE = "unsupported_type"
    SERIALIZATION = "serialization"
    FILESYSTEM = "filesystem"
    NOT_FOUND = "not_found"


class Pairs(list):
    """
    Ordered sequence of ``[key, value]`` entries.

    Used as the decode output for JSON objects when the caller has no
    native associative-map type. Compares equal to a plain list of
    two-element lists.
    """

    @classmethod
    def from_items(cls, items: Iterable[Tuple[str, Any]]) -> 'Pairs':
        """Build from ``(key, value)`` tuples."""
        return cls([key, value] for key, value in items)

    def keys(self) -> List[str]:
        return [entry[0] for entry in self]

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in self}

    def __repr__(self) -> str:
        return f"Pairs({list.__repr__(self)})"


DynamicValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any], Pairs]


class JSONNodesError(Exception):
    """Base exception for all encode, decode and file errors."""

    error_type: Optional[ErrorType] = None

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class ParseError(JSONNodesError, ValueError):
    """JSON text is not well-formed."""
    error_type = ErrorType.PARSE


class IntegerOverflowError(JSONNodesError, OverflowError):
    """Integer literal does not fit the configured integer width."""
    error_type = ErrorType.OVERFLOW


class UnsupportedTypeError(JSONNodesError, TypeError):
    """Value is neither list-like, primitive nor a readable record."""
    error_type = ErrorType.UNSUPPORTED_TYPE


class SerializationError(JSONNodesError, ValueError):
    """Flattened tree contains something the JSON writer cannot represent."""
    error_type = ErrorType.SERIALIZATION


class FileAccessError(JSONNodesError):
    """File could not be read or written."""
    error_type = ErrorType.FILESYSTEM


class NotFoundError(FileAccessError):
    """File to read does not exist."""
    error_type = ErrorType.NOT_FOUND


# Abstract base classes for interfaces

class Describable(ABC):
    """
    Record capability used by the encoder.

    A describable record reports its own readable fields instead of being
    reflected. Values are stringified by the encoder, so any object is fine.
    """

    @abstractmethod
    def describe_fields(self) -> Iterable[Tuple[str, Any]]:
        """Yield ``(field_name, value)`` pairs in declaration order."""
        pass


class EncoderInterface(ABC):
    """Abstract interface for the flatten-for-serialization encoder."""

    @abstractmethod
    def flatten(self, value: Any) -> DynamicValue:
        """Replace records with field maps, leaving a JSON-compatible tree."""
        pass

    @abstractmethod
    def encode(self, value: Any, indented: bool = False) -> str:
        """Flatten and serialize to JSON text."""
        pass


class DecoderInterface(ABC):
    """Abstract interface for the parse-to-native decoder."""

    @abstractmethod
    def decode(self, json_text: str, mode: ObjectMode = ObjectMode.DICTIONARY) -> DynamicValue:
        """Parse JSON text into native nested containers."""
        pass
