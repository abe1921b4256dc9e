"""Exceptions raised while loading schemas and generating declarations."""


class CodegenError(Exception):
    """Base class for all gql-dartgen errors."""


class SchemaLoadError(CodegenError):
    """Raised when a schema file cannot be read or parsed."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class ConfigError(CodegenError):
    """Raised for a missing or invalid configuration file."""


class UnsupportedDefinitionError(CodegenError):
    """Raised in strict mode for a definition kind with no emitter."""

    def __init__(self, kind: str, line: int | None = None):
        self.kind = kind
        self.line = line
        where = f" at line {line}" if line is not None else ""
        super().__init__(f"Unsupported definition {kind}{where}")


class UnresolvedInterfaceError(CodegenError):
    """Raised in strict mode when an implemented interface is not declared."""

    def __init__(self, type_name: str, interface_name: str):
        self.type_name = type_name
        self.interface_name = interface_name
        super().__init__(
            f"{type_name} implements unknown interface {interface_name}"
        )


class DuplicateSchemaError(CodegenError):
    """Raised in strict mode when a document has more than one schema definition."""
