"""Code generator for GraphQL schemas.

Renders Jinja2 templates to produce Dart declarations from a parsed
schema document. Generation runs in two passes: a discovery pass that
collects custom scalars and interfaces, then a visit that emits one
declaration per definition as the traversal leaves it.

Supports custom templates via GeneratorConfig.template_dir:
    generator = CodeGenerator(GeneratorConfig(template_dir="./my_templates"))

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    Node,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    UnionTypeDefinitionNode,
    Visitor,
    visit,
)
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import GeneratorConfig
from .context import SchemaContext, discover
from .emitter import Emitter
from .errors import DuplicateSchemaError, UnresolvedInterfaceError, UnsupportedDefinitionError
from .hooks import HookRunner
from .render import TypeRenderer, deprecation_annotation
from .scalars import ScalarRegistry

LOG = logging.getLogger(__name__)

SUPPORTED_DEFINITIONS = (
    ObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    EnumTypeDefinitionNode,
    UnionTypeDefinitionNode,
    SchemaDefinitionNode,
    ScalarTypeDefinitionNode,
)


@dataclass
class Member:
    """One member line of a rendered declaration."""
    type: str
    name: str
    annotation: str | None = None
    arguments: list[str] = field(default_factory=list)


def node_kind(node: Node) -> str:
    """CamelCase AST kind name, e.g. 'ObjectTypeDefinition'."""
    return type(node).__name__.removesuffix("Node")


def source_lines(node: Node) -> tuple[int, int] | None:
    """First and last schema line of a node, when location info was kept."""
    if node.loc is None:
        return None
    return node.loc.start_token.line, node.loc.end_token.line


def create_environment(template_dir: str | None = None) -> Environment:
    """Build the Jinja2 environment; templates in template_dir win."""
    loaders = []
    if template_dir:
        template_path = Path(template_dir)
        if template_path.is_dir():
            loaders.append(FileSystemLoader(str(template_path)))
        else:
            LOG.warning("Template directory %s not found, using defaults", template_dir)
    loaders.append(PackageLoader("gql_dartgen", "templates"))

    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class DeclarationRenderer:
    """Renders one declaration per definition kind.

    Available templates to override:
        - class.dart.j2 - objects, interfaces and input objects
        - enum.dart.j2 - enums and unions
        - schema.dart.j2 - the root operation class
        - header.dart.j2 - the diagnostic comment above each declaration
    """

    def __init__(
        self,
        env: Environment,
        types: TypeRenderer,
        config: GeneratorConfig,
    ):
        self.env = env
        self.types = types
        self.config = config

    def object_type(self, node: ObjectTypeDefinitionNode) -> str:
        interface_names = [i.name.value for i in node.interfaces or ()]
        self._check_interfaces(node.name.value, interface_names)
        inherited = self.types.context.interface_field_names(interface_names)
        fields = [f for f in node.fields or () if f.name.value not in inherited]
        return self._render(
            "class.dart.j2",
            node,
            name=node.name.value,
            interfaces=[self.types.render_name(n) for n in interface_names],
            members=self._members(fields),
        )

    def interface_type(self, node: InterfaceTypeDefinitionNode) -> str:
        return self._render(
            "class.dart.j2",
            node,
            name=node.name.value,
            interfaces=[],
            members=self._members(node.fields or ()),
        )

    def input_object_type(self, node: InputObjectTypeDefinitionNode) -> str:
        return self._render(
            "class.dart.j2",
            node,
            name=node.name.value,
            interfaces=[],
            members=self._members(node.fields or ()),
        )

    def enum_type(self, node: EnumTypeDefinitionNode) -> str:
        return self._render(
            "enum.dart.j2",
            node,
            name=node.name.value,
            values=[v.name.value for v in node.values or ()],
        )

    def union_type(self, node: UnionTypeDefinitionNode) -> str:
        # Unions are flattened to an enum of their member type names
        return self._render(
            "enum.dart.j2",
            node,
            name=node.name.value,
            values=[self.types.render_name(t.name.value) for t in node.types or ()],
        )

    def schema(self, node: SchemaDefinitionNode) -> str:
        members = [
            Member(type=self.types.render_type(op.type), name=op.operation.value)
            for op in node.operation_types
        ]
        return self._render("schema.dart.j2", node, members=members)

    def _check_interfaces(self, type_name: str, interface_names: list[str]):
        for interface_name in interface_names:
            if interface_name in self.types.context.interfaces:
                continue
            if self.config.strict:
                raise UnresolvedInterfaceError(type_name, interface_name)
            LOG.warning(
                "%s implements unknown interface %s; no fields are excluded for it",
                type_name,
                interface_name,
            )

    def _members(
        self, fields: list[FieldDefinitionNode | InputValueDefinitionNode]
    ) -> list[Member]:
        return [
            Member(
                type=self.types.render_type(f.type),
                name=f.name.value,
                annotation=deprecation_annotation(f),
                arguments=self._arguments(f),
            )
            for f in fields
        ]

    def _arguments(self, node: FieldDefinitionNode | InputValueDefinitionNode) -> list[str]:
        """Render "type name" pairs, e.g. ["int first", "String after"]."""
        arguments = []
        for arg in getattr(node, "arguments", None) or ():
            rendered = f"{self.types.render_type(arg.type)} {arg.name.value}"
            annotation = deprecation_annotation(arg)
            if annotation:
                rendered = f"{annotation} {rendered}"
            arguments.append(rendered)
        return arguments

    def _header(self, node: Node) -> list[str]:
        if not self.config.node_headers:
            return []
        header = [f"Kind: {node_kind(node)}"]
        lines = source_lines(node)
        if lines:
            header.append(f"Schema Lines: {lines[0]} - {lines[1]}")
        return header

    def _render(self, template_name: str, node: Node, **context) -> str:
        template = self.env.get_template(template_name)
        return template.render(header=self._header(node), **context)


class _GenerationVisitor(Visitor):
    """Emits a declaration when the traversal leaves each definition."""

    def __init__(self, renderer: DeclarationRenderer, emitter: Emitter, strict: bool):
        super().__init__()
        self.renderer = renderer
        self.emitter = emitter
        self.strict = strict
        self.schema_count = 0

    def leave_object_type_definition(self, node, *_args):
        self._emit(node, self.renderer.object_type(node))

    def leave_interface_type_definition(self, node, *_args):
        self._emit(node, self.renderer.interface_type(node))

    def leave_input_object_type_definition(self, node, *_args):
        self._emit(node, self.renderer.input_object_type(node))

    def leave_enum_type_definition(self, node, *_args):
        self._emit(node, self.renderer.enum_type(node))

    def leave_union_type_definition(self, node, *_args):
        self._emit(node, self.renderer.union_type(node))

    def leave_schema_definition(self, node, *_args):
        self.schema_count += 1
        if self.schema_count > 1:
            if self.strict:
                raise DuplicateSchemaError("Document has more than one schema definition")
            LOG.warning("Document has more than one schema definition")
        self._emit(node, self.renderer.schema(node))

    def _emit(self, node: Node, block: str):
        LOG.debug("Emitting %s", node_kind(node))
        self.emitter.emit(block)


class CodeGenerator:
    """Generates Dart declarations from a parsed GraphQL schema document.

    Example:
        generator = CodeGenerator(GeneratorConfig(strict=True))
        dart = generator.generate(parse(sdl))

    When hooks is not given, the built-in hooks named by the config
    (exclude_prefix, file_header) are used.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        hooks: HookRunner | None = None,
    ):
        self.config = config or GeneratorConfig()
        self.hooks = hooks if hooks is not None else HookRunner.from_config(self.config)
        self.registry = ScalarRegistry(dynamic_type=self.config.dynamic_type)
        for scalar_name, target_type in self.config.scalar_types.items():
            self.registry.register(scalar_name, target_type)
        self.env = create_environment(self.config.template_dir)

    def generate(self, document: DocumentNode, filename: str = "output.dart") -> str:
        """Run both passes over the document and return the generated text."""
        document = self.hooks.run_pre_hooks(document)
        context = discover(document)
        self._check_definitions(document)

        emitter = Emitter()
        visitor = _GenerationVisitor(self._renderer(context), emitter, self.config.strict)
        visit(document, visitor)
        LOG.info("Generated %d declarations", len(emitter))

        return self.hooks.run_post_hooks(filename, emitter.output)

    def _renderer(self, context: SchemaContext) -> DeclarationRenderer:
        return DeclarationRenderer(
            self.env, TypeRenderer(context, self.registry), self.config
        )

    def _check_definitions(self, document: DocumentNode):
        """Report top-level definitions that no emitter handles."""
        for definition in document.definitions:
            if isinstance(definition, SUPPORTED_DEFINITIONS):
                continue
            lines = source_lines(definition)
            line = lines[0] if lines else None
            if self.config.strict:
                raise UnsupportedDefinitionError(node_kind(definition), line)
            LOG.warning(
                "Skipping unsupported definition %s%s",
                node_kind(definition),
                f" at line {line}" if line is not None else "",
            )
