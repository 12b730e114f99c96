"""Shape detection and field reflection for encoder inputs."""

import dataclasses
import inspect
import logging
from collections.abc import Mapping
from types import MemberDescriptorType
from typing import Any, List, Optional, Tuple
from .types import Describable, InputShape, Pairs, UnsupportedTypeError, ValueKind

PRIMITIVE_TYPES = (bool, int, float)
LIST_TYPES = (list, tuple)

# Modules whose names are left out of reflected type names
_UNQUALIFIED_MODULES = ("builtins", "__main__")


class DataTypeDetector:
    """
    Classifies native values for the encoder and DynamicValues for callers.

    Input values of unknown shape are sorted into list-like containers,
    mappings, primitives and records. Records are reflected into ordered
    ``(field_name, value)`` pairs.
    """

    def __init__(self, treat_strings_as_primitive: bool = True,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the data type detector.

        Args:
            treat_strings_as_primitive: Classify ``str`` as a primitive
            logger: Optional logger instance
        """
        self.treat_strings_as_primitive = treat_strings_as_primitive
        self.logger = logger or logging.getLogger(__name__)

    def detect_input_shape(self, value: Any) -> InputShape:
        """
        Detect the shape of an arbitrary encoder input.

        Args:
            value: Any native value

        Returns:
            InputShape enum indicating how the encoder treats the value
        """
        if isinstance(value, LIST_TYPES):
            return InputShape.LIST
        if isinstance(value, Mapping):
            return InputShape.MAPPING
        if value is None or isinstance(value, PRIMITIVE_TYPES):
            return InputShape.PRIMITIVE
        if isinstance(value, str) and self.treat_strings_as_primitive:
            return InputShape.PRIMITIVE
        return InputShape.RECORD

    def detect_value_kind(self, value: Any) -> ValueKind:
        """
        Detect the DynamicValue variant of a value.

        Args:
            value: A decoded or flattened value

        Returns:
            ValueKind tag

        Raises:
            UnsupportedTypeError: If the value is not a DynamicValue
        """
        if value is None:
            return ValueKind.NULL
        # bool before int, Pairs before list
        if isinstance(value, bool):
            return ValueKind.BOOLEAN
        if isinstance(value, int):
            return ValueKind.INTEGER
        if isinstance(value, float):
            return ValueKind.FLOAT
        if isinstance(value, str):
            return ValueKind.TEXT
        if isinstance(value, Pairs):
            return ValueKind.PAIRS
        if isinstance(value, list):
            return ValueKind.LIST
        if isinstance(value, dict):
            return ValueKind.OBJECT
        raise UnsupportedTypeError(
            f"{self.type_name(value)} is not a JSON value",
            context={"type": self.type_name(value)}
        )

    @staticmethod
    def type_name(value: Any) -> str:
        """Fully-qualified name of the value's type."""
        value_type = type(value)
        if value_type.__module__ in _UNQUALIFIED_MODULES:
            return value_type.__qualname__
        return f"{value_type.__module__}.{value_type.__qualname__}"

    def reflect_fields(self, value: Any) -> List[Tuple[str, Any]]:
        """
        Collect the readable fields of a record.

        Describable records report their own fields. Otherwise dataclass
        fields are used, then public instance attributes followed by public
        data descriptors (properties, slots, C-level getters) of the class.

        Args:
            value: Record to reflect

        Returns:
            Ordered list of (field_name, value) pairs

        Raises:
            UnsupportedTypeError: If the record exposes no readable field
        """
        if isinstance(value, Describable):
            return list(value.describe_fields())

        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            fields = [(field.name, getattr(value, field.name))
                      for field in dataclasses.fields(value)]
        else:
            fields = self._reflect_attributes(value)

        if not fields:
            raise UnsupportedTypeError(
                f"{self.type_name(value)} has no readable fields",
                context={"type": self.type_name(value)}
            )

        self.logger.debug(f"Reflected {len(fields)} fields from {self.type_name(value)}")
        return fields

    def _reflect_attributes(self, value: Any) -> List[Tuple[str, Any]]:
        """Reflect instance attributes and class data descriptors."""
        fields = []
        seen = set()

        instance_dict = getattr(value, "__dict__", None)
        if isinstance(instance_dict, dict):
            for name, attribute in instance_dict.items():
                if not name.startswith("_"):
                    fields.append((name, attribute))
                    seen.add(name)

        for klass in type(value).__mro__:
            if klass is object:
                continue
            for name, member in vars(klass).items():
                if name.startswith("_") or name in seen:
                    continue
                if not inspect.isdatadescriptor(member):
                    continue
                seen.add(name)
                if isinstance(member, MemberDescriptorType) and not hasattr(value, name):
                    # Unset slot
                    continue
                fields.append((name, getattr(value, name)))

        return fields
