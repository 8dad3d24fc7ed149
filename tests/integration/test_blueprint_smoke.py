"""Blueprint smoke tests.

These tests drive a request from the raw payload all the way to files on
disk, using the real catalog, generator, request boundary, and exporter.
"""

from __future__ import annotations

import json

import pytest

from blueprint_engine.catalog import Complexity, Domain
from blueprint_engine.config import Config
from blueprint_engine.generator import Blueprint, generate_blueprint
from blueprint_engine.generator.validator import to_request
from blueprint_engine.reporter import BlueprintExporter
from blueprint_engine.service import handle_blueprint_request
from blueprint_engine.utils import load_json


@pytest.mark.integration
class TestBlueprintSmoke:
    @pytest.mark.asyncio
    async def test_payload_to_json_file(self, campus_payload, tmp_config: Config):
        response = handle_blueprint_request(campus_payload)
        assert response.ok

        request = to_request(campus_payload)
        blueprint = generate_blueprint(request)
        path = await BlueprintExporter().export(
            blueprint, request, tmp_config.blueprint_path(request.project_name)
        )
        assert load_json(path) == response.body

    @pytest.mark.asyncio
    @pytest.mark.parametrize("domain", [d.value for d in Domain])
    async def test_every_domain_exports_markdown(self, domain, tmp_config: Config):
        payload = {
            "projectName": f"{domain} capstone",
            "domain": domain,
            "complexity": Complexity.ADVANCED.value,
            "features": ["crud", "file-upload", "analytics"],
        }
        response = handle_blueprint_request(payload)
        assert response.status_code == 200

        request = to_request(payload)
        blueprint = Blueprint.model_validate(response.body)
        path = await BlueprintExporter().export(
            blueprint, request, tmp_config.blueprint_path(request.project_name, "markdown"), "markdown"
        )
        document = path.read_text(encoding="utf-8")
        assert document.count("### Week") == 4
        assert "```java" in document

    def test_responses_are_stable_across_calls(self, campus_payload):
        first = handle_blueprint_request(dict(campus_payload))
        second = handle_blueprint_request(dict(campus_payload))
        assert json.dumps(first.body, sort_keys=True) == json.dumps(second.body, sort_keys=True)
