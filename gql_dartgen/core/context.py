"""Discovery pass over a schema document.

Collects the schema-wide facts that rendering a single declaration
depends on: which names are custom scalars, and which interfaces exist.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from graphql import (
    DocumentNode,
    InterfaceTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    Visitor,
    visit,
)

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaContext:
    """Read-only result of the discovery pass."""
    scalars: frozenset[str] = frozenset()
    interfaces: Mapping[str, InterfaceTypeDefinitionNode] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def interface_field_names(self, interface_names: list[str]) -> set[str]:
        """Union of the field names declared by the named interfaces.

        Names missing from the table contribute nothing.
        """
        names: set[str] = set()
        for interface_name in interface_names:
            interface = self.interfaces.get(interface_name)
            if interface is None:
                continue
            names.update(f.name.value for f in interface.fields or ())
        return names


class _DiscoveryVisitor(Visitor):

    def __init__(self):
        super().__init__()
        self.scalars: set[str] = set()
        self.interfaces: dict[str, InterfaceTypeDefinitionNode] = {}

    def enter_scalar_type_definition(self, node: ScalarTypeDefinitionNode, *_args):
        self.scalars.add(node.name.value)

    def enter_interface_type_definition(
        self, node: InterfaceTypeDefinitionNode, *_args
    ):
        self.interfaces[node.name.value] = node


def discover(document: DocumentNode) -> SchemaContext:
    """Collect custom scalar names and interface definitions from a document."""
    visitor = _DiscoveryVisitor()
    visit(document, visitor)
    LOG.debug(
        "Discovered %d scalars and %d interfaces",
        len(visitor.scalars),
        len(visitor.interfaces),
    )
    return SchemaContext(
        scalars=frozenset(visitor.scalars),
        interfaces=MappingProxyType(dict(visitor.interfaces)),
    )
