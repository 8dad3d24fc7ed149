"""Complexity tiers and the fixed milestone content shared by every plan."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import Complexity, ComplexityTier


COMPLEXITY_TIERS: Mapping[Complexity, ComplexityTier] = MappingProxyType({
    Complexity.BEGINNER: ComplexityTier(
        key=Complexity.BEGINNER,
        label="beginner",
        option_label="Beginner (4 weeks)",
        description="A focused four-week build for a first full stack project.",
        weeks=4,
        milestone_slots=2,
        next_steps=(
            "Deploy the Next.js frontend to Vercel and the API to Render for a live demo link.",
        ),
    ),
    Complexity.INTERMEDIATE: ComplexityTier(
        key=Complexity.INTERMEDIATE,
        label="intermediate",
        option_label="Intermediate (6 weeks)",
        description="Six weeks with room for integration work and testing.",
        weeks=6,
        milestone_slots=3,
        next_steps=(
            "Add JUnit 5 and MockMvc tests for every controller before the mid-term review.",
            "Containerise the API with Docker Compose so evaluators can run it locally.",
        ),
    ),
    Complexity.ADVANCED: ComplexityTier(
        key=Complexity.ADVANCED,
        label="advanced",
        option_label="Advanced (8+ weeks)",
        description="Eight or more weeks covering production concerns end to end.",
        weeks=8,
        milestone_slots=4,
        next_steps=(
            "Add integration tests with Testcontainers and track coverage with JaCoCo.",
            "Expose API documentation with springdoc-openapi and publish it with the demo.",
            "Set up a GitHub Actions pipeline that builds, tests, and deploys on every merge.",
        ),
    ),
})


# ---------------------------------------------------------------------------
# Fixed milestone content
# ---------------------------------------------------------------------------

FOUNDATION_FOCUS = "Project foundation & environment setup"
FOUNDATION_TASKS: tuple[str, ...] = (
    "Generate the Spring Boot project with Spring Initializr and commit it to GitHub",
    "Scaffold the Next.js app with TypeScript and Tailwind CSS",
    "Configure the database connection, profiles, and environment variables",
)

POLISH_FOCUS = "Polish, testing & demo preparation"
POLISH_TASKS: tuple[str, ...] = (
    "Polish the UI, empty states, and validation messages",
    "Write the README, API reference, and architecture diagram",
    "Seed demo data and rehearse the viva walkthrough",
)

FEATURE_FOCUS_PREFIX = "Feature build: "
INTEGRATION_FOCUS = "Integration & hardening"
INTEGRATION_TASK = "Integrate modules end to end and expand test coverage"

# Focus phrases when the foundation and polish milestones collapse into
# fewer than three slots.
COLLAPSED_FIRST_FOCUS = "Foundation & core features"
COLLAPSED_LAST_FOCUS = "Feature completion & demo preparation"
COLLAPSED_SINGLE_FOCUS = "Build, polish & demo"
