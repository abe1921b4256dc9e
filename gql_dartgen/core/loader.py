"""GraphQL schema loader using graphql-core.

Reads a schema file, or every schema file in a directory, and merges
them into a single DocumentNode.
"""

import logging
import os

from graphql import DocumentNode, GraphQLSyntaxError, Source, parse

from .errors import SchemaLoadError

LOG = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")


class SchemaLoader:
    """Loads GraphQL schema files into one document."""

    def __init__(self, schema_path: str):
        """Initialize a loader with a path to a schema file or directory."""
        self.schema_path = schema_path

    def load(self) -> DocumentNode:
        """Parse all schema files and return the merged document."""
        schema_files = self._collect_schema_files()
        if not schema_files:
            raise SchemaLoadError(self.schema_path, "no schema files found")

        definitions = []
        for file_path in schema_files:
            LOG.debug("Parsing %s", file_path)
            document = self._parse_file(file_path)
            definitions.extend(document.definitions)

        if len(schema_files) == 1:
            return document
        return DocumentNode(definitions=tuple(definitions))

    def _collect_schema_files(self) -> list[str]:
        """Collect schema files from path.

        An explicit file is always used, whatever its extension.
        """
        if os.path.isfile(self.schema_path):
            return [self.schema_path]
        files = []
        for root, _, filenames in os.walk(self.schema_path):
            for filename in filenames:
                if filename.endswith(SCHEMA_EXTENSIONS):
                    files.append(os.path.join(root, filename))
        return sorted(files)

    @staticmethod
    def _parse_file(file_path: str) -> DocumentNode:
        try:
            with open(file_path, encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaLoadError(file_path, str(e)) from e

        try:
            return parse(Source(content, file_path))
        except GraphQLSyntaxError as e:
            LOG.error("Error parsing %s: %s", os.path.basename(file_path), e.message)
            raise SchemaLoadError(file_path, str(e)) from e
