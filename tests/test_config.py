"""Tests for generator configuration."""

import pytest
from pydantic import ValidationError

from gql_dartgen.core.config import GeneratorConfig
from gql_dartgen.core.errors import ConfigError


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_defaults(self):
        config = GeneratorConfig()
        assert config.dynamic_type == "dynamic"
        assert config.scalar_types == {}
        assert config.strict is False
        assert config.node_headers is True

    def test_from_file_top_level(self, tmp_path):
        path = tmp_path / "dartgen.toml"
        path.write_text('strict = true\ndynamic_type = "Object"\n')
        config = GeneratorConfig.from_file(path)
        assert config.strict is True
        assert config.dynamic_type == "Object"

    def test_from_file_tool_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text(
            '[project]\nname = "x"\n\n'
            '[tool.gql-dartgen]\nnode_headers = false\n\n'
            '[tool.gql-dartgen.scalar_types]\nDateTime = "DateTime"\n'
        )
        config = GeneratorConfig.from_file(path)
        assert config.node_headers is False
        assert config.scalar_types == {"DateTime": "DateTime"}

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "dartgen.toml"
        path.write_text("indent = 4\n")
        with pytest.raises(ConfigError):
            GeneratorConfig.from_file(path)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "dartgen.toml"
        path.write_text("strict = \n")
        with pytest.raises(ConfigError):
            GeneratorConfig.from_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            GeneratorConfig.from_file(tmp_path / "missing.toml")

    def test_merged_ignores_none(self):
        config = GeneratorConfig(dynamic_type="Object")
        merged = config.merged(dynamic_type=None, strict=True)
        assert merged.dynamic_type == "Object"
        assert merged.strict is True

    def test_merged_without_changes_returns_self(self):
        config = GeneratorConfig()
        assert config.merged(strict=None) is config

    def test_frozen(self):
        config = GeneratorConfig()
        with pytest.raises(ValidationError):
            config.strict = True
