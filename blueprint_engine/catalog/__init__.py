"""Blueprint catalog: the fixed tables of features, domains, and complexity tiers.

Usage::

    from blueprint_engine.catalog import FEATURE_DEFINITIONS, feature_options

    for option in feature_options():
        print(option.value, option.label)
"""

from __future__ import annotations

from blueprint_engine.catalog.domains import DOMAIN_DEFINITIONS
from blueprint_engine.catalog.features import FEATURE_DEFINITIONS, FEATURE_ORDER
from blueprint_engine.catalog.models import (
    STACK_CATEGORIES,
    CatalogOption,
    Complexity,
    ComplexityTier,
    Domain,
    DomainDefinition,
    FeatureDefinition,
    FeatureKey,
    ModuleSpec,
    SnippetTemplate,
    StackSpec,
)
from blueprint_engine.catalog.tiers import COMPLEXITY_TIERS


def feature_options() -> list[CatalogOption]:
    """Selectable features in canonical order."""
    return [
        CatalogOption(value=key.value, label=FEATURE_DEFINITIONS[key].label,
                      description=FEATURE_DEFINITIONS[key].description)
        for key in FEATURE_ORDER
    ]


def domain_options() -> list[CatalogOption]:
    """Selectable domains in declaration order."""
    return [
        CatalogOption(value=key.value, label=DOMAIN_DEFINITIONS[key].label,
                      description=DOMAIN_DEFINITIONS[key].description)
        for key in Domain
    ]


def complexity_options() -> list[CatalogOption]:
    """Selectable complexity tiers, labelled with their duration."""
    return [
        CatalogOption(value=key.value, label=COMPLEXITY_TIERS[key].option_label,
                      description=COMPLEXITY_TIERS[key].description)
        for key in Complexity
    ]


__all__ = [
    "COMPLEXITY_TIERS",
    "DOMAIN_DEFINITIONS",
    "FEATURE_DEFINITIONS",
    "FEATURE_ORDER",
    "STACK_CATEGORIES",
    "CatalogOption",
    "Complexity",
    "ComplexityTier",
    "Domain",
    "DomainDefinition",
    "FeatureDefinition",
    "FeatureKey",
    "ModuleSpec",
    "SnippetTemplate",
    "StackSpec",
    "complexity_options",
    "domain_options",
    "feature_options",
]
