"""Snippet composition: a domain controller extended with feature endpoints."""

from __future__ import annotations

import textwrap
from collections.abc import Sequence

from blueprint_engine.catalog import FEATURE_DEFINITIONS, FeatureKey, SnippetTemplate

from .errors import GenerationError
from .models import JavaSnippet

CLOSING_MARKER = "}"
_MEMBER_INDENT = " " * 4


def _split_at_closing_marker(code: str) -> tuple[str, str]:
    """Split template code into ``(class body, closing marker onwards)``."""
    stripped = code.rstrip()
    if not stripped.endswith(CLOSING_MARKER):
        raise GenerationError("snippet", "template does not end with a closing class marker")
    index = stripped.rfind(CLOSING_MARKER)
    return stripped[:index].rstrip(), code[index:]


def compose_snippet(template: SnippetTemplate, features: Sequence[FeatureKey]) -> JavaSnippet:
    """Insert each selected feature's endpoint hint into the domain controller.

    Hints are added in canonical feature order, each indented as a member of
    the controller class and separated by a blank line, directly before the
    class's closing brace.  Without hints the template is returned as-is.

    Raises:
        GenerationError: If the template has no closing marker.
    """
    hints = [
        FEATURE_DEFINITIONS[key].snippet_hint
        for key in features
        if FEATURE_DEFINITIONS[key].snippet_hint
    ]
    if not hints:
        return JavaSnippet(description=template.description, code=template.code)

    body, closing = _split_at_closing_marker(template.code)
    members = "\n\n".join(textwrap.indent(hint, _MEMBER_INDENT) for hint in hints)
    return JavaSnippet(
        description=template.description,
        code=f"{body}\n\n{members}\n{closing}",
    )
