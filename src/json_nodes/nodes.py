"""Node descriptors for graph hosts."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple
from .json_nodes import JSONNodes

CATEGORY = "JSON"

REQUIRED = object()


@dataclass(frozen=True)
class NodeInput:
    """A named node input port."""
    name: str
    type_tag: str
    default: Any = REQUIRED

    @property
    def required(self) -> bool:
        return self.default is REQUIRED


@dataclass(frozen=True)
class NodeSpec:
    """
    Describes one node a host can place in a graph.

    ``inputs`` are passed to ``function`` as keyword arguments, in port
    order. ``outputs`` names the ports of the returned value.
    """
    name: str
    display_name: str
    function: Callable[..., Any]
    inputs: Tuple[NodeInput, ...] = ()
    outputs: Tuple[str, ...] = ()
    category: str = CATEGORY
    description: str = ""

    def run(self, **values: Any) -> Any:
        """
        Call the node function with host-supplied input values.

        Raises:
            TypeError: If an input is unknown or a required one is missing
        """
        known = {port.name for port in self.inputs}
        unknown = sorted(set(values) - known)
        if unknown:
            raise TypeError(f"{self.name} got unknown inputs: {', '.join(unknown)}")

        arguments = {}
        for port in self.inputs:
            if port.name in values:
                arguments[port.name] = values[port.name]
            elif port.required:
                raise TypeError(f"{self.name} is missing required input '{port.name}'")
            else:
                arguments[port.name] = port.default
        return self.function(**arguments)


def build_registry(json_nodes: Optional[JSONNodes] = None) -> Dict[str, NodeSpec]:
    """
    Build the node registry around a JSONNodes instance.

    Args:
        json_nodes: Optional JSONNodes instance (a default one is created)

    Returns:
        Mapping of node name to NodeSpec
    """
    json_nodes = json_nodes or JSONNodes()

    specs = [
        NodeSpec(
            name="ToJsonString",
            display_name="To JSON String",
            function=json_nodes.to_json_string,
            inputs=(NodeInput("data", "any"), NodeInput("indented", "bool", False)),
            outputs=("json",),
            description="Serialize a value, replacing objects with their field maps.",
        ),
        NodeSpec(
            name="ToJsonFile",
            display_name="To JSON File",
            function=json_nodes.to_json_file,
            inputs=(NodeInput("data", "any"), NodeInput("file_path", "string"),
                    NodeInput("indented", "bool", False)),
            outputs=("file_path",),
            description="Serialize a value and overwrite the file with it.",
        ),
        NodeSpec(
            name="FromJsonString",
            display_name="From JSON String",
            function=json_nodes.from_json_string,
            inputs=(NodeInput("json_text", "string"),),
            outputs=("data",),
            description="Parse JSON into lists and dictionaries.",
        ),
        NodeSpec(
            name="FromJsonStringSublists",
            display_name="From JSON String (Sublists)",
            function=json_nodes.from_json_string_sublists,
            inputs=(NodeInput("json_text", "string"),),
            outputs=("data",),
            description="Parse JSON with objects as lists of [key, value] pairs.",
        ),
        NodeSpec(
            name="FromJsonFile",
            display_name="From JSON File",
            function=json_nodes.from_json_file,
            inputs=(NodeInput("file_path", "string"),),
            outputs=("data",),
            description="Read a file and parse it into lists and dictionaries.",
        ),
        NodeSpec(
            name="ReadText",
            display_name="Read Text File",
            function=json_nodes.read_text,
            inputs=(NodeInput("file_path", "string"),),
            outputs=("text",),
        ),
        NodeSpec(
            name="WriteText",
            display_name="Write Text File",
            function=json_nodes.write_text,
            inputs=(NodeInput("text", "string"), NodeInput("file_path", "string")),
            outputs=("file_path",),
        ),
    ]
    return {spec.name: spec for spec in specs}


NODE_REGISTRY = build_registry()


def get_node(name: str) -> NodeSpec:
    """
    Look up a node by name.

    Raises:
        KeyError: If no node has that name
    """
    try:
        return NODE_REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown node: {name}") from None
