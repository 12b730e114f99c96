"""Pytest configuration and fixtures."""

import pytest
import tempfile
from dataclasses import dataclass
from pathlib import Path

from json_nodes.types import Describable


@dataclass
class Point:
    X: int
    Y: int


@dataclass
class Line:
    start: Point
    end: Point


class Wall:
    """Plain record with an instance attribute, a private one and a property."""

    def __init__(self, height: float, width: float):
        self.height = height
        self.width = width
        self._cache = None

    @property
    def area(self) -> float:
        return self.height * self.width


class Tag(Describable):
    """Record reporting its own fields."""

    def __init__(self, name: str, count: int):
        self.name = name
        self.count = count

    def describe_fields(self):
        yield "Name", self.name
        yield "Count", self.count


class Empty:
    pass


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_tree():
    """Nested list/object/primitive tree without records or nulls."""
    return {
        "name": "level 1",
        "elevation": 3.5,
        "visible": True,
        "rooms": [
            {"id": 101, "tags": ["office", "north"]},
            {"id": 102, "tags": []},
        ],
        "settings": {"units": "metric", "scale": 100, "empty": {}},
    }


@pytest.fixture
def sample_json():
    """JSON text with keys out of lexicographic order."""
    return '{"zeta": [1, 2.5, true], "alpha": {"b": "x", "a": null}, "mid": false}'
