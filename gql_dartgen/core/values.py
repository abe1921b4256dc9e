"""Decoding of GraphQL literal value nodes into plain Python values."""

from dataclasses import dataclass
from typing import Union

from graphql import (
    ArgumentNode,
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    Node,
    NullValueNode,
    ObjectFieldNode,
    ObjectValueNode,
    StringValueNode,
    VariableNode,
)


@dataclass(frozen=True)
class VariableRef:
    """A `$variable` reference found where a literal was expected."""
    name: str

    def __str__(self) -> str:
        return self.name


Value = Union[
    None, bool, int, float, str, list["Value"], dict[str, "Value"], VariableRef
]


def decode_value(node: Node) -> Value:
    """Convert a value node (or an argument/object field holding one) to a Python value.

    Enum literals decode to their name. Unknown node types raise TypeError.
    """
    if isinstance(node, VariableNode):
        return VariableRef(node.name.value)
    if isinstance(node, IntValueNode):
        return int(node.value)
    if isinstance(node, FloatValueNode):
        return float(node.value)
    if isinstance(node, (StringValueNode, BooleanValueNode, EnumValueNode)):
        return node.value
    if isinstance(node, NullValueNode):
        return None
    if isinstance(node, ListValueNode):
        return [decode_value(item) for item in node.values]
    if isinstance(node, ObjectValueNode):
        return {field.name.value: decode_value(field.value) for field in node.fields}
    if isinstance(node, (ArgumentNode, ObjectFieldNode)):
        return decode_value(node.value)
    raise TypeError(f"Cannot decode value from {type(node).__name__}")
