"""Tests for the discovery pass."""

import pytest
from graphql import parse

from gql_dartgen.core.context import SchemaContext, discover

SCHEMA = """
scalar DateTime
scalar JSON

interface Node {
  id: ID!
}

interface Named {
  name: String
  id: ID!
}

type User implements Node & Named {
  id: ID!
  name: String
  createdAt: DateTime
}
"""


@pytest.fixture
def context():
    return discover(parse(SCHEMA))


class TestDiscover:
    """Tests for discover."""

    def test_scalars(self, context):
        assert context.scalars == frozenset({"DateTime", "JSON"})

    def test_interfaces(self, context):
        assert set(context.interfaces) == {"Node", "Named"}
        assert context.interfaces["Node"].name.value == "Node"

    def test_empty_results(self):
        context = discover(parse("type Query { ok: Boolean }"))
        assert context.scalars == frozenset()
        assert dict(context.interfaces) == {}

    def test_interfaces_are_read_only(self, context):
        with pytest.raises(TypeError):
            context.interfaces["Other"] = None

    def test_builtin_names_not_collected(self, context):
        assert "ID" not in context.scalars


class TestInterfaceFieldNames:
    """Tests for SchemaContext.interface_field_names."""

    def test_union_of_fields(self, context):
        assert context.interface_field_names(["Node", "Named"]) == {"id", "name"}

    def test_unknown_interface_contributes_nothing(self, context):
        assert context.interface_field_names(["Missing", "Node"]) == {"id"}

    def test_no_interfaces(self):
        assert SchemaContext().interface_field_names([]) == set()
