"""Blueprint generator.

Turns a request (project name, domain, complexity, features) into a complete
project blueprint: stack, modules, milestone plan, Spring Boot snippet,
summary, and next steps.

Usage::

    from blueprint_engine.generator import generate

    result = generate({
        "projectName": "Campus Connect",
        "domain": "student-portal",
        "complexity": "beginner",
        "features": ["authentication", "crud"],
    })
    if result.ok:
        print(result.blueprint.summary)
    else:
        print(result.errors)
"""

from blueprint_engine.generator.engine import generate, generate_blueprint
from blueprint_engine.generator.errors import GenerationError
from blueprint_engine.generator.models import (
    Blueprint,
    BlueprintRequest,
    GenerationResult,
    JavaSnippet,
    Milestone,
    RecommendedModule,
    TechStack,
)
from blueprint_engine.generator.validator import validate

__all__ = [
    "Blueprint",
    "BlueprintRequest",
    "GenerationError",
    "GenerationResult",
    "JavaSnippet",
    "Milestone",
    "RecommendedModule",
    "TechStack",
    "generate",
    "generate_blueprint",
    "validate",
]
