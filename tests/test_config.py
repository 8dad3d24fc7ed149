"""Unit tests for blueprint_engine.config.Config."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from blueprint_engine.catalog import Complexity, Domain, FeatureKey
from blueprint_engine.config import Config


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Defaults & validation
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_default_values(self):
        config = Config()
        assert config.output_dir == Path("./output")
        assert config.output_format == "json"
        assert config.json_indent == 2
        assert config.default_domain is Domain.STUDENT_PORTAL
        assert config.default_complexity is Complexity.BEGINNER
        assert config.template_dir is None
        assert config.default_features == (FeatureKey.AUTHENTICATION, FeatureKey.CRUD)

    def test_rejects_unknown_format(self):
        with pytest.raises(ValidationError):
            Config(output_format="pdf")

    def test_rejects_negative_indent(self):
        with pytest.raises(ValidationError):
            Config(json_indent=-1)

    def test_rejects_unknown_default_domain(self):
        with pytest.raises(ValidationError):
            Config(default_domain="space-station")


# ---------------------------------------------------------------------------
# Derived paths
# ---------------------------------------------------------------------------


class TestBlueprintPath:
    def test_json_path(self, tmp_config):
        assert tmp_config.blueprint_path("Campus Connect") == (
            tmp_config.output_dir / "campus-connect-blueprint.json"
        )

    def test_markdown_override(self, tmp_config):
        path = tmp_config.blueprint_path("Campus Connect", "markdown")
        assert path.name == "campus-connect-blueprint.md"

    def test_configured_format(self, tmp_path):
        config = Config(output_dir=tmp_path, output_format="markdown")
        assert config.blueprint_path("Shop").suffix == ".md"

    def test_unsafe_name_falls_back(self, tmp_config):
        assert tmp_config.blueprint_path("!!!").name == "project-blueprint.json"


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------


class TestPersistence:
    def test_save_and_load(self, tmp_path):
        config = Config(
            output_dir=tmp_path / "plans",
            output_format="markdown",
            json_indent=4,
            default_domain=Domain.HEALTHCARE,
        )
        path = config.save()
        assert path == tmp_path / "plans" / "config.json"
        assert Config.load(path) == config

    def test_save_to_explicit_path(self, tmp_config, tmp_path):
        target = tmp_path / "nested" / "settings.json"
        assert tmp_config.save(target) == target
        assert target.is_file()


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


class TestFromEnv:
    def test_defaults_without_variables(self, clean_env):
        assert Config.from_env() == Config()

    def test_reads_variables(self, clean_env, tmp_path):
        clean_env.setenv("BLUEPRINT_OUTPUT_DIR", str(tmp_path))
        clean_env.setenv("BLUEPRINT_OUTPUT_FORMAT", "markdown")
        clean_env.setenv("BLUEPRINT_JSON_INDENT", "0")
        clean_env.setenv("BLUEPRINT_DEFAULT_DOMAIN", "e-commerce")
        clean_env.setenv("BLUEPRINT_DEFAULT_COMPLEXITY", "advanced")
        clean_env.setenv("BLUEPRINT_DEFAULT_FEATURES", "search, payments")
        clean_env.setenv("BLUEPRINT_TEMPLATE_DIR", str(tmp_path / "templates"))

        config = Config.from_env()
        assert config.output_dir == tmp_path
        assert config.output_format == "markdown"
        assert config.json_indent == 0
        assert config.default_domain is Domain.E_COMMERCE
        assert config.default_complexity is Complexity.ADVANCED
        assert config.default_features == (FeatureKey.SEARCH, FeatureKey.PAYMENTS)
        assert config.template_dir == tmp_path / "templates"

    def test_invalid_variable_rejected(self, clean_env):
        clean_env.setenv("BLUEPRINT_OUTPUT_FORMAT", "yaml")
        with pytest.raises(ValidationError):
            Config.from_env()

    def test_unknown_default_feature_rejected(self, clean_env):
        clean_env.setenv("BLUEPRINT_DEFAULT_FEATURES", "crud,teleport")
        with pytest.raises(ValidationError):
            Config.from_env()
