"""Blueprint engine configuration.

Typed settings for the CLI and exporter.  All settings use Pydantic v2 models
so they are validated at construction time and can be serialised to/from JSON
or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from blueprint_engine.catalog import Complexity, Domain, FeatureKey
from blueprint_engine.utils import ensure_dir, sanitize_name

OutputFormat = Literal["json", "markdown"]

_EXTENSIONS: dict[str, str] = {"json": "json", "markdown": "md"}


class Config(BaseModel):
    """Global blueprint engine configuration.

    Instances are typically created once by the CLI entry point, either with
    defaults or via :meth:`from_env`, and passed to the exporter.
    """

    output_dir: Path = Field(default=Path("./output"))
    output_format: OutputFormat = Field(default="json")
    json_indent: int = Field(default=2, ge=0, description="Indentation of exported JSON")
    default_domain: Domain = Field(default=Domain.STUDENT_PORTAL)
    default_complexity: Complexity = Field(default=Complexity.BEGINNER)
    default_features: tuple[FeatureKey, ...] = Field(
        default=(FeatureKey.AUTHENTICATION, FeatureKey.CRUD),
        min_length=1,
        description="Features requested when none are given",
    )
    template_dir: Optional[Path] = Field(
        default=None, description="Override directory for export templates"
    )

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def blueprint_path(self, project_name: str, output_format: OutputFormat | None = None) -> Path:
        """Export path for a project, e.g. ``output/campus-connect-blueprint.json``."""
        fmt = output_format or self.output_format
        stem = sanitize_name(project_name) or "project"
        return self.output_dir / f"{stem}-blueprint.{_EXTENSIONS[fmt]}"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<output_dir>/config.json``.

        Returns:
            The path where the file was written.
        """
        target = path or (self.output_dir / "config.json")
        ensure_dir(target.parent)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            BLUEPRINT_OUTPUT_DIR, BLUEPRINT_OUTPUT_FORMAT, BLUEPRINT_JSON_INDENT,
            BLUEPRINT_DEFAULT_DOMAIN, BLUEPRINT_DEFAULT_COMPLEXITY,
            BLUEPRINT_DEFAULT_FEATURES (comma-separated feature keys),
            BLUEPRINT_TEMPLATE_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("BLUEPRINT_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["BLUEPRINT_OUTPUT_DIR"])
        if os.environ.get("BLUEPRINT_OUTPUT_FORMAT"):
            kwargs["output_format"] = os.environ["BLUEPRINT_OUTPUT_FORMAT"]
        if os.environ.get("BLUEPRINT_JSON_INDENT"):
            kwargs["json_indent"] = int(os.environ["BLUEPRINT_JSON_INDENT"])
        if os.environ.get("BLUEPRINT_DEFAULT_DOMAIN"):
            kwargs["default_domain"] = os.environ["BLUEPRINT_DEFAULT_DOMAIN"]
        if os.environ.get("BLUEPRINT_DEFAULT_COMPLEXITY"):
            kwargs["default_complexity"] = os.environ["BLUEPRINT_DEFAULT_COMPLEXITY"]
        if os.environ.get("BLUEPRINT_DEFAULT_FEATURES"):
            kwargs["default_features"] = tuple(
                key.strip() for key in os.environ["BLUEPRINT_DEFAULT_FEATURES"].split(",") if key.strip()
            )
        if os.environ.get("BLUEPRINT_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["BLUEPRINT_TEMPLATE_DIR"])
        return cls(**kwargs)
