"""Command-line interface for gql-dartgen."""

import json
import logging
from pathlib import Path

import click
from graphql.utilities import ast_to_dict

from .core.config import GeneratorConfig
from .core.errors import CodegenError
from .core.generator import CodeGenerator
from .core.loader import SchemaLoader


def parse_scalar_option(values: tuple[str, ...]) -> dict[str, str] | None:
    """Turn repeated NAME=TYPE options into a mapping."""
    if not values:
        return None
    mapping = {}
    for value in values:
        name, sep, target = value.partition("=")
        if not sep or not name or not target:
            raise click.BadParameter(
                f"expected NAME=TYPE, got {value!r}", param_hint="--scalar"
            )
        mapping[name.strip()] = target.strip()
    return mapping


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.version_option(package_name="gql-dartgen")
def main():
    """GraphQL to Dart code generator.

    Generate Dart class and enum declarations from GraphQL schemas.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file or directory.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output file for generated Dart code (e.g., out/output.dart).",
)
@click.option(
    "--dump-ast",
    type=click.Path(dir_okay=False),
    help="Also write the parsed schema AST as JSON to this file.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="TOML file with generator settings.",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on unknown interfaces, unsupported definitions and duplicate schemas.",
)
@click.option("--dynamic-type", help="Type used for custom scalars (default: dynamic).")
@click.option(
    "--scalar",
    "scalars",
    multiple=True,
    metavar="NAME=TYPE",
    help="Map a scalar to a fixed Dart type. May be repeated.",
)
@click.option(
    "--node-headers/--no-node-headers",
    default=None,
    help="Emit the '// Kind:' comment above each declaration.",
)
@click.option("--header", help="Text written at the top of the output file.")
@click.option("--exclude-prefix", help="Skip definitions whose name starts with this prefix.")
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with Jinja2 templates overriding the built-in ones.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    output: str,
    dump_ast: str | None,
    config_path: str | None,
    strict: bool | None,
    dynamic_type: str | None,
    scalars: tuple[str, ...],
    node_headers: bool | None,
    header: str | None,
    exclude_prefix: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate Dart declarations from a GraphQL schema.

    Examples:

        gql-dartgen generate --schema ./github.graphql --output ./out/output.dart

        gql-dartgen generate -s ./schema -o ./out/output.dart --dump-ast ./out/input.json

        gql-dartgen generate -s ./schema.graphql -o ./out.dart --scalar DateTime=DateTime
    """
    configure_logging(verbose)
    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()

    try:
        config = GeneratorConfig.from_file(config_path) if config_path else GeneratorConfig()
        scalar_types = parse_scalar_option(scalars)
        config = config.merged(
            strict=strict,
            dynamic_type=dynamic_type,
            scalar_types={**config.scalar_types, **scalar_types} if scalar_types else None,
            node_headers=node_headers,
            file_header=header,
            exclude_prefix=exclude_prefix,
            template_dir=template_dir,
        )

        if verbose:
            click.echo(f"Schema: {schema_path}")
            click.echo(f"Output: {output_path}")

        click.echo("Parsing schema...")
        document = SchemaLoader(str(schema_path)).load()

        if dump_ast:
            dump_path = Path(dump_ast).resolve()
            dump_path.parent.mkdir(parents=True, exist_ok=True)
            dump_path.write_text(json.dumps(ast_to_dict(document), indent=4))
            if verbose:
                click.echo(f"  AST written to: {dump_path}")

        click.echo("Generating code...")
        code = CodeGenerator(config).generate(document, filename=output_path.name)
    except CodegenError as e:
        raise click.ClickException(str(e)) from e

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(code)

    if verbose:
        click.echo(f"  Lines: {len(code.splitlines())}")
    click.echo(f"Done! Generated code in {output_path}")


if __name__ == "__main__":
    main()
