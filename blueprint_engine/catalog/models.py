"""Catalog entry types for the blueprint engine.

The catalog is a fixed set of feature, domain, and complexity-tier definitions.
Keys are closed ``str`` enumerations so that lookups inside the engine are
exhaustive, while entries themselves are frozen dataclasses holding tuples so
that nothing in the catalog can be mutated after import.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FeatureKey(str, Enum):
    """Selectable build features. Declaration order is the canonical order."""
    AUTHENTICATION = "authentication"
    CRUD = "crud"
    FILE_UPLOAD = "file-upload"
    NOTIFICATIONS = "notifications"
    SEARCH = "search"
    ANALYTICS = "analytics"
    PAYMENTS = "payments"
    REALTIME_CHAT = "realtime-chat"


class Domain(str, Enum):
    """Project domain focus."""
    STUDENT_PORTAL = "student-portal"
    E_COMMERCE = "e-commerce"
    HEALTHCARE = "healthcare"
    EVENT_MANAGEMENT = "event-management"
    LIBRARY_MANAGEMENT = "library-management"


class Complexity(str, Enum):
    """Target complexity tier."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


STACK_CATEGORIES: tuple[str, ...] = ("backend", "frontend", "database", "tooling")


# ---------------------------------------------------------------------------
# Content fragments
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StackSpec:
    """Stack entries grouped by category."""

    backend: tuple[str, ...] = ()
    frontend: tuple[str, ...] = ()
    database: tuple[str, ...] = ()
    tooling: tuple[str, ...] = ()

    def category(self, name: str) -> tuple[str, ...]:
        """Return the entries for one of :data:`STACK_CATEGORIES`."""
        if name not in STACK_CATEGORIES:
            raise KeyError(f"Unknown stack category: {name}")
        return getattr(self, name)


@dataclass(frozen=True)
class ModuleSpec:
    """A backend module contributed by a feature."""

    title: str
    description: str


@dataclass(frozen=True)
class SnippetTemplate:
    """A Spring Boot controller template for a domain.

    ``code`` must end with the closing brace of the controller class; feature
    endpoint hints are inserted directly before it.
    """

    description: str
    code: str


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FeatureDefinition:
    """Everything a single feature contributes to a blueprint."""

    key: FeatureKey
    label: str
    description: str
    stack_additions: StackSpec
    module: ModuleSpec
    tasks: tuple[str, ...]
    snippet_hint: Optional[str] = None


@dataclass(frozen=True)
class DomainDefinition:
    """A domain focus with its base stack and default features."""

    key: Domain
    label: str
    description: str
    base_stack: StackSpec
    snippet_template: SnippetTemplate
    implied_features: frozenset[FeatureKey] = field(default_factory=frozenset)


@dataclass(frozen=True)
class ComplexityTier:
    """Duration and milestone granularity of a complexity target."""

    key: Complexity
    label: str
    option_label: str
    description: str
    weeks: int
    milestone_slots: int
    next_steps: tuple[str, ...] = ()


@dataclass(frozen=True)
class CatalogOption:
    """A selectable option exposed to presentation layers."""

    value: str
    label: str
    description: str = ""
