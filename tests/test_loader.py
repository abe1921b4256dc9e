"""Tests for schema loading."""

import pytest

from gql_dartgen.core.errors import SchemaLoadError
from gql_dartgen.core.generator import CodeGenerator
from gql_dartgen.core.loader import SchemaLoader


class TestSchemaLoader:
    """Tests for SchemaLoader."""

    def test_single_file(self, tmp_path):
        path = tmp_path / "github.graphql"
        path.write_text("type Query { ok: Boolean }\n")
        document = SchemaLoader(str(path)).load()
        assert [d.name.value for d in document.definitions] == ["Query"]

    def test_explicit_file_any_extension(self, tmp_path):
        path = tmp_path / "schema.txt"
        path.write_text("enum E { A }\n")
        document = SchemaLoader(str(path)).load()
        assert len(document.definitions) == 1

    def test_directory_is_merged_in_sorted_order(self, tmp_path):
        (tmp_path / "b.graphqls").write_text("type B { a: Int }\n")
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "c.gql").write_text("type C { a: Int }\n")
        (tmp_path / "a.graphql").write_text("type A { a: Int }\n")
        (tmp_path / "notes.md").write_text("# not a schema\n")

        document = SchemaLoader(str(tmp_path)).load()
        assert [d.name.value for d in document.definitions] == ["A", "B", "C"]

    def test_syntax_error(self, tmp_path):
        path = tmp_path / "broken.graphql"
        path.write_text("type Query {\n")
        with pytest.raises(SchemaLoadError) as exc:
            SchemaLoader(str(path)).load()
        assert exc.value.path == str(path)

    def test_empty_directory(self, tmp_path):
        with pytest.raises(SchemaLoadError, match="no schema files found"):
            SchemaLoader(str(tmp_path)).load()

    def test_merged_directory_generates(self, tmp_path):
        (tmp_path / "a.graphql").write_text("interface Node { id: ID! }\n")
        (tmp_path / "b.graphql").write_text("type User implements Node { id: ID! name: String }\n")

        document = SchemaLoader(str(tmp_path)).load()
        output = CodeGenerator().generate(document)

        assert "abstract class Node {" in output
        assert "abstract class User implements Node {\n  String name;\n}\n" in output

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "binary.graphql"
        path.write_bytes(b"type A { a: Int } # \xff\xfe")
        with pytest.raises(SchemaLoadError) as exc:
            SchemaLoader(str(path)).load()
        assert exc.value.path == str(path)
