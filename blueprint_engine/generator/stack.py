"""Stack resolution: domain base stack merged with feature additions."""

from __future__ import annotations

from collections.abc import Iterable

from blueprint_engine.catalog import (
    FEATURE_DEFINITIONS,
    STACK_CATEGORIES,
    DomainDefinition,
    FeatureKey,
)

from .models import TechStack


def merge_unique(*sequences: Iterable[str]) -> list[str]:
    """Concatenate string sequences, dropping exact duplicates.

    First occurrence wins: an entry keeps the position where it was first
    seen, and later repeats are discarded.  Comparison is exact (case and
    whitespace sensitive).

    Examples::

        merge_unique(["a", "b"], ["b", "c"]) -> ["a", "b", "c"]
        merge_unique(["b"], ["a", "b"])      -> ["b", "a"]
    """
    seen: set[str] = set()
    merged: list[str] = []
    for sequence in sequences:
        for entry in sequence:
            if entry not in seen:
                seen.add(entry)
                merged.append(entry)
    return merged


def resolve_stack(domain: DomainDefinition, features: Iterable[FeatureKey]) -> TechStack:
    """Merge the domain's base stack with each feature's additions.

    Args:
        domain: Domain definition supplying the base entries.
        features: Selected features, already in canonical catalog order.

    Returns:
        A ``TechStack`` whose categories list base entries first, then
        feature additions, without duplicates.
    """
    definitions = [FEATURE_DEFINITIONS[key] for key in features]
    categories = {
        category: merge_unique(
            domain.base_stack.category(category),
            *(definition.stack_additions.category(category) for definition in definitions),
        )
        for category in STACK_CATEGORIES
    }
    return TechStack(**categories)
