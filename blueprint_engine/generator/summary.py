"""Summary and next-step composition."""

from __future__ import annotations

from collections.abc import Sequence

from blueprint_engine.catalog import (
    FEATURE_DEFINITIONS,
    FEATURE_ORDER,
    ComplexityTier,
    DomainDefinition,
    FeatureKey,
)

_SUMMARY_TEMPLATE = (
    "{project_name} is a {domain} project targeting the {complexity} tier, pairing a "
    "Spring Boot REST API with a Next.js frontend across {count} in a {weeks}-week plan."
)


def compose_summary(
    project_name: str,
    domain: DomainDefinition,
    tier: ComplexityTier,
    feature_count: int,
) -> str:
    """One-sentence synopsis of the blueprint."""
    noun = "selected feature" if feature_count == 1 else "selected features"
    return _SUMMARY_TEMPLATE.format(
        project_name=project_name,
        complexity=tier.label,
        domain=domain.label,
        count=f"{feature_count} {noun}",
        weeks=tier.weeks,
    )


def compose_next_steps(
    project_name: str,
    domain: DomainDefinition,
    tier: ComplexityTier,
    selected: Sequence[FeatureKey],
) -> list[str]:
    """Ordered follow-up actions for the requester.

    Two project steps, then the tier's fixed steps, then a recommendation for
    any feature the domain implies but the requester did not select.
    """
    steps = [
        f"Bootstrap {project_name} with Spring Initializr using the backend stack listed above.",
        f"Create the Next.js frontend and connect it to the {domain.label} REST API.",
        *tier.next_steps,
    ]

    missing = [key for key in FEATURE_ORDER if key in domain.implied_features and key not in selected]
    if missing:
        labels = ", ".join(FEATURE_DEFINITIONS[key].label for key in missing)
        pronoun = "it" if len(missing) == 1 else "them"
        steps.append(f"Consider adding {labels}; most {domain.label} projects are expected to include {pronoun}.")

    return steps
