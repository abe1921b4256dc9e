#!/usr/bin/env python3
"""Generate Dart declarations for the bundled example schema.

Shows the library API the CLI is built on:
1. Load the schema
2. Configure the generator
3. Print the generated code
"""

import logging
from pathlib import Path

from gql_dartgen.core import CodeGenerator, GeneratorConfig, SchemaLoader


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    schema_path = Path(__file__).parent / "github.graphql"

    document = SchemaLoader(str(schema_path)).load()
    config = GeneratorConfig(
        scalar_types={"DateTime": "DateTime"},
        file_header="// GENERATED CODE - DO NOT MODIFY BY HAND",
    )
    print(CodeGenerator(config).generate(document))


if __name__ == "__main__":
    main()
