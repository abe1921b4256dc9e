"""Core modules for GraphQL to Dart code generation."""

from .config import GeneratorConfig
from .context import SchemaContext, discover
from .emitter import Emitter
from .errors import (
    CodegenError,
    ConfigError,
    DuplicateSchemaError,
    SchemaLoadError,
    UnresolvedInterfaceError,
    UnsupportedDefinitionError,
)
from .generator import CodeGenerator, DeclarationRenderer
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .loader import SchemaLoader
from .render import TypeRenderer, deprecation_annotation
from .scalars import BUILTIN_SCALARS, ScalarRegistry
from .values import VariableRef, decode_value

__all__ = [
    # Config
    "GeneratorConfig",
    # Discovery
    "SchemaContext",
    "discover",
    # Rendering
    "BUILTIN_SCALARS",
    "ScalarRegistry",
    "TypeRenderer",
    "deprecation_annotation",
    "VariableRef",
    "decode_value",
    # Generation
    "CodeGenerator",
    "DeclarationRenderer",
    "Emitter",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    # Loading
    "SchemaLoader",
    # Errors
    "CodegenError",
    "ConfigError",
    "DuplicateSchemaError",
    "SchemaLoadError",
    "UnresolvedInterfaceError",
    "UnsupportedDefinitionError",
]
