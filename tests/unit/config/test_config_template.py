"""Unit tests for config_template module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.storefront.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
)

REPO_CONFIG = Path(__file__).resolve().parents[3] / "config.yaml"


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_with_default(self):
        """Default value is used when the variable is not set."""
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-default_value}") == "default_value"

    def test_substitute_env_var_with_default_when_set(self):
        with patch.dict(os.environ, {"PRESENT_VAR": "actual_value"}):
            assert substitute_env_vars("${PRESENT_VAR:-default_value}") == "actual_value"

    def test_substitute_required_env_var_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_custom_error_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="set the database url"):
                substitute_env_vars("${DB:?set the database url}")


class TestLoadTemplatedYaml:
    """Test loading config.yaml style files into ConfigData."""

    def test_loads_slug_section(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n"
            "  slug:\n"
            "    max_attempts: ${SLUG_MAX_ATTEMPTS:-50}\n"
            "    fallback_prefix: item\n",
            encoding="utf-8",
        )

        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(config_file)

        assert config.slug.max_attempts == 50
        assert config.slug.fallback_prefix == "item"
        assert config.database.url == "sqlite:///./storefront.db"

    def test_environment_prefixed_override(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n  database:\n    url: ${DATABASE_URL:-sqlite:///./dev.db}\n",
            encoding="utf-8",
        )

        with patch.dict(
            os.environ, {"TEST_DATABASE_URL": "sqlite:///./test.db"}, clear=True
        ):
            config = load_templated_yaml(config_file, env_mode="test")

        assert config.database.url == "sqlite:///./test.db"

    def test_invalid_values_raise(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  slug:\n    max_attempts: 0\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(config_file)

    def test_empty_file_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("", encoding="utf-8")

        with pytest.raises(ValueError):
            load_templated_yaml(config_file)

    def test_repository_config_is_valid(self):
        """The shipped config.yaml loads with defaults only."""
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(REPO_CONFIG)

        assert config.app.name == "storefront"
        assert config.slug.max_attempts == 10_000
        assert config.logging.format == "plain"
