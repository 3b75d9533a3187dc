"""Service layer for tailor.

All services return typed dataclasses. Services never import from tailor.ui,
tailor.cli, or typer. Consumer layers (CLI, MCP) handle presentation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from tailor.scanner.models import ProjectIssue, Recommendation


@dataclass(frozen=True)
class ProjectPath:
    """Analyze the project at ``path`` (or the default root when None)."""

    path: Optional[str] = None


@dataclass(frozen=True)
class PrecomputedReport:
    """Reuse a report previously returned by ``analyze_project``."""

    data: dict
    project_path: Optional[str] = None


AnalysisSource = Union[PrecomputedReport, ProjectPath]


def analysis_source(
    project_path: Optional[str] = None,
    analysis_data: Optional[dict] = None,
) -> AnalysisSource:
    """Pick the analysis source from optional tool arguments."""
    if analysis_data:
        return PrecomputedReport(data=analysis_data, project_path=project_path)
    return ProjectPath(path=project_path)


@dataclass
class RecommendationsSummary:
    """Recommendations and issues for one project."""

    project_name: str
    project_type: str
    recommendations: list[Recommendation] = field(default_factory=list)
    issues: list[ProjectIssue] = field(default_factory=list)
    frameworks: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "project_name": self.project_name,
            "recommendations": [r.to_dict() for r in self.recommendations],
            "issues": [i.to_dict() for i in self.issues],
            "metadata": {
                "project_type": self.project_type,
                "frameworks": self.frameworks,
                "languages": self.languages,
            },
        }


@dataclass
class ResourceInfo:
    """Description of a readable project resource."""

    uri: str
    name: str
    description: str
    mime_type: str


@dataclass
class ResourceContent:
    """A resource together with its rendered content."""

    uri: str
    mime_type: str
    content: str
