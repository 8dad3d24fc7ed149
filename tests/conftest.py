"""Shared pytest fixtures for the blueprint engine test suite.

Provides reusable fixtures for:
- Raw request payloads (camelCase, as sent by a transport layer)
- Typed ``BlueprintRequest`` objects
- Generated blueprints for the reference "Campus Connect" scenario
- Isolated configuration and output directories
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from blueprint_engine.catalog import Complexity, Domain, FeatureKey
from blueprint_engine.config import Config
from blueprint_engine.generator import Blueprint, BlueprintRequest, generate_blueprint


# ---------------------------------------------------------------------------
# Payloads & requests
# ---------------------------------------------------------------------------

@pytest.fixture
def campus_payload() -> dict[str, Any]:
    """The reference request: a beginner student portal with auth and CRUD."""
    return {
        "projectName": "Campus Connect",
        "domain": "student-portal",
        "complexity": "beginner",
        "features": ["authentication", "crud"],
    }


@pytest.fixture
def campus_request() -> BlueprintRequest:
    """Typed version of :func:`campus_payload`."""
    return BlueprintRequest(
        project_name="Campus Connect",
        domain=Domain.STUDENT_PORTAL,
        complexity=Complexity.BEGINNER,
        features=(FeatureKey.AUTHENTICATION, FeatureKey.CRUD),
    )


@pytest.fixture
def shop_request() -> BlueprintRequest:
    """An advanced e-commerce request selecting several features."""
    return BlueprintRequest(
        project_name="Shop Smart",
        domain=Domain.E_COMMERCE,
        complexity=Complexity.ADVANCED,
        features=(
            FeatureKey.REALTIME_CHAT,
            FeatureKey.CRUD,
            FeatureKey.ANALYTICS,
            FeatureKey.FILE_UPLOAD,
        ),
    )


@pytest.fixture
def make_request():
    """Factory building a typed request from plain strings."""
    def _make(
        features: list[str],
        domain: str = "student-portal",
        complexity: str = "beginner",
        project_name: str = "Test Project",
    ) -> BlueprintRequest:
        return BlueprintRequest(
            project_name=project_name,
            domain=domain,
            complexity=complexity,
            features=tuple(features),
        )

    return _make


# ---------------------------------------------------------------------------
# Blueprints
# ---------------------------------------------------------------------------

@pytest.fixture
def campus_blueprint(campus_request: BlueprintRequest) -> Blueprint:
    """Blueprint generated for the reference request."""
    return generate_blueprint(campus_request)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_config(tmp_path: Path) -> Config:
    """Config writing into a temporary output directory (auto-cleanup)."""
    return Config(output_dir=tmp_path / "output")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every ``BLUEPRINT_*`` variable so ``Config.from_env`` sees defaults."""
    for name in (
        "BLUEPRINT_OUTPUT_DIR",
        "BLUEPRINT_OUTPUT_FORMAT",
        "BLUEPRINT_JSON_INDENT",
        "BLUEPRINT_DEFAULT_DOMAIN",
        "BLUEPRINT_DEFAULT_COMPLEXITY",
        "BLUEPRINT_DEFAULT_FEATURES",
        "BLUEPRINT_TEMPLATE_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
