"""Recommendation rules evaluated against project metadata.

Every rule is independent; all that fire are returned in declaration
order.
"""
from __future__ import annotations

from typing import Callable

from .models import ProjectMetadata, Recommendation


def _has_framework(metadata: ProjectMetadata, fragment: str) -> bool:
    return any(fragment in label for label in metadata.frameworks)


RULES: tuple[tuple[Callable[[ProjectMetadata], bool], Recommendation], ...] = (
    (
        lambda m: not m.has_readme,
        Recommendation(
            title="Missing README.md",
            description="Add a comprehensive README.md file to document the project",
            category="documentation",
            priority="high",
            action="Create README.md with project overview, setup instructions, and development guidelines",
        ),
    ),
    (
        lambda m: not m.has_copilot_instructions,
        Recommendation(
            title="Missing Copilot Instructions",
            description="Create .github/copilot-instructions.md to guide Copilot behavior",
            category="guidelines",
            priority="high",
            action="Generate copilot-instructions.md with project-specific guidelines",
        ),
    ),
    (
        lambda m: not m.has_github,
        Recommendation(
            title="Initialize Git Repository",
            description="Initialize a Git repository to enable version control",
            category="structure",
            priority="medium",
            action="Run git init and set up .gitignore",
        ),
    ),
    (
        lambda m: _has_framework(m, "TypeScript"),
        Recommendation(
            title="TypeScript Configuration",
            description="Ensure strict TypeScript configuration is enabled",
            category="best-practices",
            priority="medium",
            action="Update tsconfig.json with strict mode enabled",
        ),
    ),
    (
        lambda m: _has_framework(m, "React"),
        Recommendation(
            title="React Best Practices",
            description="Follow React best practices and hooks patterns",
            category="guidelines",
            priority="medium",
            action="Ensure use of functional components and hooks throughout the project",
        ),
    ),
)


def derive_recommendations(metadata: ProjectMetadata) -> list[Recommendation]:
    """Return the recommendations whose rule matches ``metadata``."""
    return [rec for predicate, rec in RULES if predicate(metadata)]
