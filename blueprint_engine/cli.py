"""Command-line interface for the blueprint engine.

Usage::

    python -m blueprint_engine "Campus Connect" --domain student-portal \\
        --complexity beginner --features authentication,crud
    python -m blueprint_engine "Campus Connect" -f crud --format markdown -o ./plans
    python -m blueprint_engine --request request.json --no-save
    python -m blueprint_engine --list
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Optional

from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from blueprint_engine.catalog import complexity_options, domain_options, feature_options
from blueprint_engine.config import Config
from blueprint_engine.generator import Blueprint, GenerationError, generate
from blueprint_engine.generator.validator import to_request
from blueprint_engine.reporter import BlueprintExporter, TemplateRenderer
from blueprint_engine.utils import (
    console,
    load_json,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
)

EXIT_INVALID = 1
EXIT_FAILURE = 2


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def print_catalog() -> None:
    """Print every selectable feature, domain, and complexity tier."""
    for title, options in (
        ("Features", feature_options()),
        ("Domains", domain_options()),
        ("Complexity", complexity_options()),
    ):
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("Value", style="bold", no_wrap=True)
        table.add_column("Label")
        table.add_column("Description", style="dim")
        for option in options:
            table.add_row(option.value, option.label, option.description)
        console.print(table)
        console.print()


def print_blueprint(project_name: str, blueprint: Blueprint) -> None:
    """Render a blueprint to the console."""
    print_header(f"{project_name} Blueprint")
    console.print(Panel(Text(blueprint.summary), title="[bold]Quick Summary[/bold]", border_style="green"))
    console.print()

    print_summary_table(
        {category.capitalize(): ", ".join(items) for category, items in blueprint.stack.model_dump().items()},
        title="Suggested Tech Stack",
    )

    modules = Table(title="Recommended Modules", show_header=True, header_style="bold cyan")
    modules.add_column("Module", style="bold", no_wrap=True)
    modules.add_column("Description")
    for module in blueprint.recommended_modules:
        modules.add_row(escape(module.title), escape(module.description))
    console.print(modules)
    console.print()

    timeline = Table(title="Implementation Timeline", show_header=True, header_style="bold cyan")
    timeline.add_column("Weeks", style="bold", no_wrap=True)
    timeline.add_column("Focus")
    timeline.add_column("Tasks")
    for milestone in blueprint.milestone_plan:
        tasks = "\n".join(f"- {t}" for t in milestone.tasks)
        timeline.add_row(milestone.label, escape(milestone.focus), escape(tasks))
    console.print(timeline)
    console.print()

    console.print(f"[bold]Sample Spring Boot Controller[/bold]: {escape(blueprint.java_snippet.description)}")
    console.print(Syntax(blueprint.java_snippet.code, "java", line_numbers=False))
    console.print()

    console.print("[bold]Suggested Next Steps[/bold]")
    for index, step in enumerate(blueprint.suggested_next_steps, start=1):
        console.print(f"  {index}. {escape(step)}")
    console.print()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blueprint",
        description="Full Stack Java Blueprint -- Spring Boot + Next.js project roadmap generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  blueprint \"Campus Connect\" -d student-portal -c beginner -f authentication,crud\n"
            "  blueprint \"Shop Smart\" -d e-commerce -f crud,payments --format markdown\n"
            "  blueprint --list\n"
        ),
    )
    parser.add_argument("project_name", nargs="?", help="Name of the project")
    parser.add_argument("--domain", "-d", default=None, help="Domain focus (see --list)")
    parser.add_argument("--complexity", "-c", default=None, help="beginner, intermediate or advanced")
    parser.add_argument(
        "--features", "-f",
        default="",
        help="Comma-separated feature keys, e.g. authentication,crud",
    )
    parser.add_argument("--output", "-o", default=None, help="Output directory (default: ./output)")
    parser.add_argument(
        "--format",
        choices=("json", "markdown"),
        default=None,
        help="Export format (default: json)",
    )
    parser.add_argument(
        "--request", "-r",
        default=None,
        help="JSON file holding the request payload; command-line options override its fields",
    )
    parser.add_argument("--no-save", action="store_true", help="Print the blueprint without exporting it")
    parser.add_argument("--list", action="store_true", help="List the available features, domains and tiers")
    return parser


def _build_payload(args: argparse.Namespace, config: Config) -> dict[str, Any]:
    """Merge the optional request file with command-line options."""
    payload: dict[str, Any] = load_json(args.request) if args.request else {}

    if args.project_name:
        payload["projectName"] = args.project_name
    features = [f.strip() for f in args.features.split(",") if f.strip()]
    if features:
        payload["features"] = features
    if args.domain:
        payload["domain"] = args.domain
    if args.complexity:
        payload["complexity"] = args.complexity

    if "features" not in payload:
        defaults = ",".join(key.value for key in config.default_features)
        print_warning(f"No features given, using {defaults}")
        payload["features"] = [key.value for key in config.default_features]
    if "domain" not in payload:
        print_warning(f"No domain given, using {config.default_domain.value}")
        payload["domain"] = config.default_domain.value
    if "complexity" not in payload:
        print_warning(f"No complexity given, using {config.default_complexity.value}")
        payload["complexity"] = config.default_complexity.value
    return payload


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``python -m blueprint_engine``."""
    args = _build_parser().parse_args(argv)

    if args.list:
        print_catalog()
        return

    config = Config.from_env()
    if args.output:
        config.output_dir = Path(args.output)
    if args.format:
        config.output_format = args.format

    try:
        payload = _build_payload(args, config)
    except (OSError, json.JSONDecodeError) as exc:
        print_error(f"Cannot read request file {args.request}: {exc}")
        sys.exit(EXIT_INVALID)

    try:
        result = generate(payload)
    except GenerationError as exc:
        print_error(f"Blueprint generation failed: {exc}")
        sys.exit(EXIT_FAILURE)
    except Exception as exc:
        print_error(f"Blueprint generation failed unexpectedly: {type(exc).__name__}: {exc}")
        sys.exit(EXIT_FAILURE)

    if not result.ok:
        print_error("Cannot generate a blueprint:")
        for error in result.errors:
            console.print(f"  [red]- {escape(error)}[/red]")
        sys.exit(EXIT_INVALID)

    request = to_request(payload)
    print_blueprint(request.project_name, result.blueprint)

    if args.no_save:
        return

    exporter = BlueprintExporter(
        renderer=TemplateRenderer(config.template_dir),
        json_indent=config.json_indent,
    )
    path = asyncio.run(exporter.export(
        result.blueprint,
        request,
        config.blueprint_path(request.project_name),
        config.output_format,
    ))
    print_success(f"Blueprint written to {path}")


if __name__ == "__main__":
    main()
