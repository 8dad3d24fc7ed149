"""Request validation at the engine's input boundary.

``validate`` accepts the raw, untyped payload sent by a transport layer and
returns every problem it finds as a human-readable message.  It never raises:
an empty list means the payload can be turned into a ``BlueprintRequest``.
"""

from __future__ import annotations

from typing import Any, Mapping

from blueprint_engine.catalog import Complexity, Domain, FEATURE_DEFINITIONS, FeatureKey

from .models import BlueprintRequest

_FEATURE_VALUES: frozenset[str] = frozenset(key.value for key in FEATURE_DEFINITIONS)
_DOMAIN_VALUES: frozenset[str] = frozenset(key.value for key in Domain)
_COMPLEXITY_VALUES: frozenset[str] = frozenset(key.value for key in Complexity)


def _field(payload: Mapping[str, Any], camel: str, snake: str) -> Any:
    """Read a field that may arrive camelCase (wire) or snake_case (Python)."""
    if camel in payload:
        return payload[camel]
    return payload.get(snake)


def _enum_value(value: Any) -> Any:
    if isinstance(value, (Domain, Complexity, FeatureKey)):
        return value.value
    return value


def validate(payload: Mapping[str, Any] | BlueprintRequest) -> list[str]:
    """Check a request against the catalog.

    Accumulates all failures rather than stopping at the first one:

    - project name missing, empty, or whitespace-only
    - feature list missing, not a list, or empty
    - feature keys that are not in the catalog (all named in one message)
    - domain or complexity outside their closed sets

    Args:
        payload: Decoded request body (camelCase or snake_case keys) or an
            already-built ``BlueprintRequest``.

    Returns:
        Error messages in a fixed order; empty when the request is valid.
    """
    if isinstance(payload, BlueprintRequest):
        payload = payload.model_dump()

    if not isinstance(payload, Mapping):
        return ["Request body must be a JSON object."]

    errors: list[str] = []

    project_name = _field(payload, "projectName", "project_name")
    if not isinstance(project_name, str) or not project_name.strip():
        errors.append("Project name is required.")

    features = _field(payload, "features", "features")
    if features is None or (isinstance(features, (list, tuple, set, frozenset)) and not features):
        errors.append("Select at least one feature to build your plan.")
    elif not isinstance(features, (list, tuple, set, frozenset)):
        errors.append("Features must be a list of feature keys.")
    else:
        invalid = [
            value
            for value in dict.fromkeys(str(_enum_value(f)) for f in features)
            if value not in _FEATURE_VALUES
        ]
        if invalid:
            errors.append(f"Unsupported features: {', '.join(invalid)}.")

    domain = _enum_value(payload.get("domain"))
    if not _is_member(domain, _DOMAIN_VALUES):
        errors.append(f"Unsupported domain: {_describe(domain)}.")

    complexity = _enum_value(payload.get("complexity"))
    if not _is_member(complexity, _COMPLEXITY_VALUES):
        errors.append(f"Unsupported complexity: {_describe(complexity)}.")

    return errors


def _is_member(value: Any, allowed: frozenset[str]) -> bool:
    return isinstance(value, str) and value in allowed


def _describe(value: Any) -> str:
    if value is None or value == "":
        return "(none)"
    return str(value)


def to_request(payload: Mapping[str, Any]) -> BlueprintRequest:
    """Build a typed request from a payload that passed :func:`validate`."""
    return BlueprintRequest(
        project_name=_field(payload, "projectName", "project_name"),
        domain=payload["domain"],
        complexity=payload["complexity"],
        features=tuple(_enum_value(f) for f in payload["features"]),
    )
