"""Backend module synthesis from selected and domain-implied features."""

from __future__ import annotations

from collections.abc import Iterable

from blueprint_engine.catalog import FEATURE_DEFINITIONS, FEATURE_ORDER, DomainDefinition, FeatureKey

from .models import RecommendedModule


def features_in_scope(domain: DomainDefinition, selected: Iterable[FeatureKey]) -> list[FeatureKey]:
    """Union of selected and implied features, in canonical order."""
    scope = set(selected) | domain.implied_features
    return [key for key in FEATURE_ORDER if key in scope]


def synthesize_modules(
    domain: DomainDefinition,
    selected: Iterable[FeatureKey],
) -> list[RecommendedModule]:
    """Build one module per feature in scope, unique by title.

    Implied features contribute their module even when the requester did
    not select them; the request itself is left untouched.
    """
    modules: list[RecommendedModule] = []
    seen_titles: set[str] = set()

    for key in features_in_scope(domain, selected):
        spec = FEATURE_DEFINITIONS[key].module
        if spec.title in seen_titles:
            continue
        seen_titles.add(spec.title)
        modules.append(RecommendedModule(title=spec.title, description=spec.description))

    return modules
