"""Rendering of type references, names and annotations into Dart syntax."""

from graphql import (
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    StringValueNode,
    TypeNode,
)

from .context import SchemaContext
from .scalars import ScalarRegistry
from .values import decode_value

DEPRECATED_DIRECTIVE = "deprecated"


def dart_string(value: object) -> str:
    """Quote a value as a double-quoted Dart string literal."""
    text = str(value)
    text = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
        .replace("\n", "\\n")
    )
    return f'"{text}"'


def deprecation_annotation(node) -> str | None:
    """Build the deprecation marker for a field, input field or argument.

    Returns None when the node has no @deprecated directive.

        name: String @deprecated                    -> @deprecated
        name: String @deprecated(reason: "use x")   -> @Deprecated("use x")
    """
    directive = next(
        (
            d
            for d in getattr(node, "directives", None) or ()
            if d.name.value == DEPRECATED_DIRECTIVE
        ),
        None,
    )
    if directive is None:
        return None
    if not directive.arguments:
        return "@deprecated"

    reasons = [
        dart_string(decode_value(arg))
        for arg in directive.arguments
        if isinstance(arg.value, StringValueNode)
    ]
    return f"@Deprecated({', '.join(reasons)})"


class TypeRenderer:
    """Renders GraphQL type references using the discovered scalar set."""

    def __init__(self, context: SchemaContext, registry: ScalarRegistry | None = None):
        self.context = context
        self.registry = registry or ScalarRegistry()

    def render_name(self, name: str) -> str:
        """Substitute a referenced type name."""
        return self.registry.resolve(name, self.context.scalars)

    def render_type(self, type_node: TypeNode) -> str:
        """Render a type reference; non-null wrappers are dropped."""
        if isinstance(type_node, NonNullTypeNode):
            return self.render_type(type_node.type)
        if isinstance(type_node, ListTypeNode):
            return f"List<{self.render_type(type_node.type)}>"
        if isinstance(type_node, NamedTypeNode):
            return self.render_name(type_node.name.value)
        raise TypeError(f"Unexpected type node {type(type_node).__name__}")
