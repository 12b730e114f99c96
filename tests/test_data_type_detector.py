"""Tests for data type detector."""

import pytest
from collections import OrderedDict
from json_nodes.data_type_detector import DataTypeDetector
from json_nodes.types import InputShape, Pairs, UnsupportedTypeError, ValueKind
from conftest import Point, Wall, Tag, Empty


class Slotted:
    __slots__ = ("x", "y", "_hidden")

    def __init__(self, x):
        self.x = x


class Base:
    @property
    def kind(self):
        return "base"


class Derived(Base):
    def __init__(self):
        self.size = 2


class Broken:
    def __init__(self):
        self.a = 1

    @property
    def b(self):
        return {}.missing


class TestDataTypeDetector:
    """Tests for DataTypeDetector class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.detector = DataTypeDetector()

    def test_detect_input_shape_list_like(self):
        """Test lists and tuples are list-like."""
        assert self.detector.detect_input_shape([1]) == InputShape.LIST
        assert self.detector.detect_input_shape(()) == InputShape.LIST
        assert self.detector.detect_input_shape(Pairs()) == InputShape.LIST

    def test_detect_input_shape_mapping(self):
        """Test mappings are detected."""
        assert self.detector.detect_input_shape({}) == InputShape.MAPPING
        assert self.detector.detect_input_shape(OrderedDict()) == InputShape.MAPPING

    def test_detect_input_shape_primitives(self):
        """Test primitive inputs."""
        for value in (None, True, 0, 1.5, "text"):
            assert self.detector.detect_input_shape(value) == InputShape.PRIMITIVE

    def test_detect_input_shape_string_as_record(self):
        """Test strings become records when not treated as primitives."""
        detector = DataTypeDetector(treat_strings_as_primitive=False)
        assert detector.detect_input_shape("text") == InputShape.RECORD

    def test_detect_input_shape_record(self):
        """Test other objects are records."""
        assert self.detector.detect_input_shape(Point(1, 2)) == InputShape.RECORD
        assert self.detector.detect_input_shape({1, 2}) == InputShape.RECORD

    @pytest.mark.parametrize("value, kind", [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOLEAN),
        (3, ValueKind.INTEGER),
        (3.0, ValueKind.FLOAT),
        ("3", ValueKind.TEXT),
        ([], ValueKind.LIST),
        ({}, ValueKind.OBJECT),
        (Pairs(), ValueKind.PAIRS),
    ])
    def test_detect_value_kind(self, value, kind):
        """Test every DynamicValue variant."""
        assert self.detector.detect_value_kind(value) == kind

    def test_detect_value_kind_rejects_records(self):
        """Test non-JSON values have no kind."""
        with pytest.raises(UnsupportedTypeError, match="not a JSON value"):
            self.detector.detect_value_kind(Point(1, 2))

    def test_type_name(self):
        """Test fully-qualified type names."""
        assert self.detector.type_name(Point(1, 2)) == f"{Point.__module__}.Point"
        assert self.detector.type_name(1j) == "complex"

    def test_reflect_dataclass_fields_in_order(self):
        """Test dataclass fields in declaration order."""
        assert self.detector.reflect_fields(Point(3, 4)) == [("X", 3), ("Y", 4)]

    def test_reflect_describable(self):
        """Test describable records report their own fields."""
        assert self.detector.reflect_fields(Tag("a", 1)) == [("Name", "a"), ("Count", 1)]

    def test_reflect_attributes_and_properties(self):
        """Test attributes come before properties; private names skipped."""
        fields = self.detector.reflect_fields(Wall(2.0, 3.0))
        assert fields == [("height", 2.0), ("width", 3.0), ("area", 6.0)]

    def test_reflect_inherited_properties(self):
        """Test properties on base classes are reflected."""
        assert self.detector.reflect_fields(Derived()) == [("size", 2), ("kind", "base")]

    def test_reflect_slots_skips_unset(self):
        """Test unset slots are skipped."""
        assert self.detector.reflect_fields(Slotted(5)) == [("x", 5)]

    def test_reflect_failing_property_propagates(self):
        """Test a property that raises is not silently skipped."""
        with pytest.raises(AttributeError, match="missing"):
            self.detector.reflect_fields(Broken())

    def test_reflect_empty_record_fails(self):
        """Test records with no fields are rejected."""
        with pytest.raises(UnsupportedTypeError):
            self.detector.reflect_fields(Empty())
