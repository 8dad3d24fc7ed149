"""Blueprint export to JSON or Markdown files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from blueprint_engine.catalog import COMPLEXITY_TIERS, DOMAIN_DEFINITIONS, FEATURE_DEFINITIONS
from blueprint_engine.config import OutputFormat
from blueprint_engine.generator.models import Blueprint, BlueprintRequest
from blueprint_engine.utils import save_json

from .templates import TemplateRenderer

MARKDOWN_TEMPLATE = "blueprint.md.j2"


class BlueprintExporter:
    """Writes generated blueprints to disk.

    JSON exports use the camelCase wire shape so they can be fed straight to
    a frontend; Markdown exports are rendered from ``blueprint.md.j2``.
    """

    def __init__(self, renderer: TemplateRenderer | None = None, json_indent: int = 2) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.json_indent = json_indent

    def build_context(self, blueprint: Blueprint, request: BlueprintRequest) -> dict[str, Any]:
        """Template context for a blueprint and the request that produced it."""
        return {
            "project_name": request.project_name,
            "domain_label": DOMAIN_DEFINITIONS[request.domain].label,
            "complexity_label": COMPLEXITY_TIERS[request.complexity].option_label,
            "feature_labels": [FEATURE_DEFINITIONS[key].label for key in request.canonical_features()],
            "blueprint": blueprint.model_dump(),
        }

    def render_markdown(self, blueprint: Blueprint, request: BlueprintRequest) -> str:
        """Render the Markdown document without writing it."""
        return self.renderer.render(MARKDOWN_TEMPLATE, self.build_context(blueprint, request))

    async def export(
        self,
        blueprint: Blueprint,
        request: BlueprintRequest,
        output_path: str | Path,
        output_format: OutputFormat = "json",
    ) -> Path:
        """Write *blueprint* to *output_path* in the requested format.

        Returns:
            The written file path.
        """
        path = Path(output_path)
        if output_format == "markdown":
            return await self.renderer.render_to_file(
                MARKDOWN_TEMPLATE, path, self.build_context(blueprint, request)
            )
        if output_format == "json":
            await save_json(blueprint.model_dump(by_alias=True), path, indent=self.json_indent)
            return path
        raise ValueError(f"Unsupported output format: {output_format}")
