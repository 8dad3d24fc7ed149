"""Blueprint reporter -- renders generated blueprints to files.

Usage::

    from blueprint_engine.reporter import BlueprintExporter

    exporter = BlueprintExporter()
    path = await exporter.export(blueprint, request, "output/plan.md", "markdown")
"""

from blueprint_engine.reporter.exporter import BlueprintExporter
from blueprint_engine.reporter.templates import TemplateRenderer

__all__ = [
    "BlueprintExporter",
    "TemplateRenderer",
]
