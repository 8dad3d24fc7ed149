"""Pydantic v2 models for blueprint requests and generated blueprints.

Both are values: frozen once built.  Field names are snake_case in Python and
camelCase on the wire (``model_dump(by_alias=True)``), matching the JSON shape
the presentation layer renders.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from blueprint_engine.catalog import FEATURE_ORDER, Complexity, Domain, FeatureKey


class _ValueModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

class BlueprintRequest(_ValueModel):
    """A validated generation request."""
    project_name: str = Field(..., min_length=1, description="Name of the student project")
    domain: Domain = Field(..., description="Domain focus")
    complexity: Complexity = Field(..., description="Target complexity tier")
    features: tuple[FeatureKey, ...] = Field(
        ..., min_length=1, description="Selected features, de-duplicated"
    )

    @field_validator("project_name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Project name is required.")
        return stripped

    @field_validator("features")
    @classmethod
    def _dedupe_features(cls, value: tuple[FeatureKey, ...]) -> tuple[FeatureKey, ...]:
        return tuple(dict.fromkeys(value))

    def canonical_features(self) -> list[FeatureKey]:
        """Selected features in catalog order, independent of submission order."""
        selected = set(self.features)
        return [key for key in FEATURE_ORDER if key in selected]


# ---------------------------------------------------------------------------
# Blueprint
# ---------------------------------------------------------------------------

class TechStack(_ValueModel):
    """Recommended technologies grouped by category."""
    backend: list[str] = Field(default_factory=list)
    frontend: list[str] = Field(default_factory=list)
    database: list[str] = Field(default_factory=list)
    tooling: list[str] = Field(default_factory=list)


class RecommendedModule(_ValueModel):
    """A backend module to implement."""
    title: str
    description: str


class Milestone(_ValueModel):
    """One slot in the week-by-week plan."""
    label: str = Field(..., description="Week range, e.g. 'Week 1–2'")
    focus: str = Field(..., description="Short phrase describing the slot")
    tasks: list[str] = Field(default_factory=list)


class JavaSnippet(_ValueModel):
    """Sample Spring Boot controller."""
    description: str
    code: str


class Blueprint(_ValueModel):
    """The complete generated project blueprint."""
    summary: str
    stack: TechStack
    recommended_modules: list[RecommendedModule] = Field(default_factory=list)
    milestone_plan: list[Milestone] = Field(default_factory=list)
    java_snippet: JavaSnippet
    suggested_next_steps: list[str] = Field(default_factory=list)


class GenerationResult(_ValueModel):
    """Outcome of :func:`~blueprint_engine.generator.engine.generate`.

    Exactly one of ``blueprint`` and ``errors`` is populated.
    """
    blueprint: Optional[Blueprint] = None
    errors: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.blueprint is not None and not self.errors
