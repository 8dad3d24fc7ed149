"""Transport-agnostic request handling for the blueprint engine.

Maps a decoded request body onto a ``BlueprintResponse`` (status code plus
JSON-ready body) so that any HTTP framework, or the CLI, can expose the
engine without re-implementing the success / client-error / server-error
split.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from pydantic import BaseModel, Field

from blueprint_engine.catalog import complexity_options, domain_options, feature_options
from blueprint_engine.generator import GenerationError, generate
from blueprint_engine.utils import print_error

GENERIC_FAILURE_MESSAGE = "Failed to generate blueprint. Please review your inputs and try again."


class BlueprintResponse(BaseModel):
    """Status code and body for the transport layer to send."""
    status_code: int = Field(..., description="HTTP-style status code")
    body: dict[str, Any] = Field(default_factory=dict, description="JSON-serialisable body")

    @property
    def ok(self) -> bool:
        return self.status_code == 200


def handle_blueprint_request(payload: Any) -> BlueprintResponse:
    """Validate and generate, returning a 200, 400, or 500 response.

    - 200: the blueprint in its camelCase wire shape.
    - 400: ``{"errors": [...]}`` listing every validation failure.
    - 500: ``{"errors": [GENERIC_FAILURE_MESSAGE]}``; the underlying failure
      is printed to the operator console only.
    """
    if not isinstance(payload, dict):
        return BlueprintResponse(status_code=400, body={"errors": ["Request body must be a JSON object."]})

    try:
        result = generate(payload)
    except GenerationError as exc:
        print_error(f"Blueprint generation failed: {exc}")
        return BlueprintResponse(status_code=500, body={"errors": [GENERIC_FAILURE_MESSAGE]})
    except Exception as exc:
        print_error(f"Blueprint generation failed unexpectedly: {type(exc).__name__}: {exc}")
        return BlueprintResponse(status_code=500, body={"errors": [GENERIC_FAILURE_MESSAGE]})

    if not result.ok:
        return BlueprintResponse(status_code=400, body={"errors": result.errors})
    return BlueprintResponse(status_code=200, body=result.blueprint.model_dump(by_alias=True))


def handle_catalog_request() -> BlueprintResponse:
    """Selectable options for a form: features, domains, and complexities."""
    return BlueprintResponse(
        status_code=200,
        body={
            "features": [asdict(o) for o in feature_options()],
            "domains": [asdict(o) for o in domain_options()],
            "complexities": [asdict(o) for o in complexity_options()],
        },
    )
