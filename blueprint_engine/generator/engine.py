"""Blueprint generation entry points.

``generate_blueprint`` is the pure composition step for a typed request.
``generate`` is the inbound contract used by transport layers: it validates a
raw payload and only composes a blueprint when validation passes.
"""

from __future__ import annotations

from typing import Any, Mapping

from blueprint_engine.catalog import COMPLEXITY_TIERS, DOMAIN_DEFINITIONS

from .milestones import plan_milestones
from .models import Blueprint, BlueprintRequest, GenerationResult
from .modules import synthesize_modules
from .snippets import compose_snippet
from .stack import resolve_stack
from .summary import compose_next_steps, compose_summary
from .validator import to_request, validate


def generate_blueprint(request: BlueprintRequest) -> Blueprint:
    """Compose a complete blueprint for a validated request.

    Every component works from the same canonical feature order, so the
    result depends only on the request's feature *set*.  Implied domain
    features contribute modules (and a next-step hint) only.

    Raises:
        GenerationError: On a catalog inconsistency.  No partial blueprint
            is ever returned.
    """
    domain = DOMAIN_DEFINITIONS[request.domain]
    tier = COMPLEXITY_TIERS[request.complexity]
    features = request.canonical_features()

    return Blueprint(
        summary=compose_summary(request.project_name, domain, tier, len(features)),
        stack=resolve_stack(domain, features),
        recommended_modules=synthesize_modules(domain, features),
        milestone_plan=plan_milestones(tier, features),
        java_snippet=compose_snippet(domain.snippet_template, features),
        suggested_next_steps=compose_next_steps(request.project_name, domain, tier, features),
    )


def generate(payload: Mapping[str, Any] | BlueprintRequest) -> GenerationResult:
    """Validate ``payload`` and generate a blueprint if it is well-formed.

    Validation failures come back as data in ``GenerationResult.errors``;
    generation is never attempted for an invalid payload.  A
    ``GenerationError`` propagates to the caller.
    """
    errors = validate(payload)
    if errors:
        return GenerationResult(errors=errors)

    request = payload if isinstance(payload, BlueprintRequest) else to_request(payload)
    return GenerationResult(blueprint=generate_blueprint(request))
