"""Generator configuration.

Settings can be built in code, read from a TOML file, or both:

    config = GeneratorConfig.from_file("dartgen.toml")
    config = config.model_copy(update={"strict": True})

The TOML file may either hold the keys at the top level or under a
``[tool.gql-dartgen]`` table, so the settings can live in pyproject.toml.
"""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

TOOL_TABLE = "gql-dartgen"


class GeneratorConfig(BaseModel):
    """Options controlling how declarations are generated."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Type written for every custom scalar declared in the schema
    dynamic_type: str = "dynamic"
    # Explicit scalar -> target type mapping, checked before anything else
    scalar_types: dict[str, str] = Field(default_factory=dict)
    strict: bool = False
    node_headers: bool = True
    file_header: str | None = None
    exclude_prefix: str | None = None
    template_dir: str | None = None

    @classmethod
    def from_file(cls, path: str | Path) -> "GeneratorConfig":
        """Load settings from a TOML file."""
        path = Path(path)
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

        return cls.from_mapping(_tool_section(data), source=str(path))

    @classmethod
    def from_mapping(
        cls, data: dict[str, Any], source: str = "<mapping>"
    ) -> "GeneratorConfig":
        """Validate a plain mapping, reporting problems as ConfigError."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {source}: {e}") from e

    def merged(self, **overrides: Any) -> "GeneratorConfig":
        """Return a copy with every override that is not None applied."""
        update = {k: v for k, v in overrides.items() if v is not None}
        if not update:
            return self
        return self.from_mapping({**self.model_dump(), **update}, source="overrides")


def _tool_section(data: dict[str, Any]) -> dict[str, Any]:
    tool = data.get("tool")
    if isinstance(tool, dict) and TOOL_TABLE in tool:
        return tool[TOOL_TABLE]
    return data
