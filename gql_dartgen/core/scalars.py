"""Scalar name substitution.

GraphQL's built-in scalars map onto Dart core types; every custom scalar
declared in the schema is written as the dynamic type. Explicit
overrides take precedence over both:

    registry = ScalarRegistry(overrides={"DateTime": "DateTime"})
    registry.resolve("Int", known_scalars=set())          # "int"
    registry.resolve("JSON", known_scalars={"JSON"})      # "dynamic"
    registry.resolve("DateTime", known_scalars={"DateTime"})  # "DateTime"
"""

from collections.abc import Mapping, Set

BUILTIN_SCALARS: Mapping[str, str] = {
    "Int": "int",
    "Float": "double",
    "Boolean": "bool",
    "ID": "String",
    "String": "String",
}

DYNAMIC_TYPE = "dynamic"


class ScalarRegistry:
    """Resolves GraphQL type names to target type names."""

    def __init__(
        self,
        overrides: Mapping[str, str] | None = None,
        dynamic_type: str = DYNAMIC_TYPE,
    ):
        self._overrides: dict[str, str] = dict(overrides or {})
        self.dynamic_type = dynamic_type

    def register(self, scalar_name: str, target_type: str):
        """Map a scalar to a fixed target type."""
        self._overrides[scalar_name] = target_type

    def resolve(self, name: str, known_scalars: Set[str]) -> str:
        """Return the target type name for a referenced GraphQL type name."""
        if name in self._overrides:
            return self._overrides[name]
        if name in known_scalars:
            return self.dynamic_type
        return BUILTIN_SCALARS.get(name, name)
