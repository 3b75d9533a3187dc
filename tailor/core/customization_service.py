"""Customization service - analysis and artifact generation for a project.

Implements the operations behind the MCP tools and CLI commands:
analyzing a project, writing Copilot instructions, updating the README,
and summarizing recommendations. Artifact operations accept either a
project path or a previously produced analysis report.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from tailor.core import (
    AnalysisSource,
    PrecomputedReport,
    ProjectPath,
    RecommendationsSummary,
)
from tailor.errors import (
    AnalysisError,
    ArtifactWriteError,
    InvalidAnalysisDataError,
    TailorError,
)
from tailor.renderers import render_instructions, render_readme
from tailor.scanner.metadata import INSTRUCTIONS_FILE, README_FILE
from tailor.scanner.models import (
    AnalysisResult,
    GeneratedContent,
    ProjectIssue,
    ProjectMetadata,
    ProjectStructure,
    Recommendation,
)
from tailor.scanner.project_analyzer import ProjectAnalyzer, detect_issues
from tailor.scanner.recommendations import derive_recommendations

logger = logging.getLogger("tailor.core.customization")

BACKUP_SUFFIX = ".backup"

_METADATA_STRINGS = ("name", "project_root")
_METADATA_STRING_LISTS = ("frameworks", "programming_languages")


def _check_metadata_types(metadata: dict) -> None:
    """Reject report metadata whose fields would be misread downstream."""
    for key in _METADATA_STRINGS:
        if key in metadata and not isinstance(metadata[key], str):
            raise InvalidAnalysisDataError(
                f"metadata.{key} must be a string, got {type(metadata[key]).__name__}"
            )
    if not isinstance(metadata.get("description", ""), str):
        raise InvalidAnalysisDataError("metadata.description must be a string")
    for key in _METADATA_STRING_LISTS:
        value = metadata.get(key, [])
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise InvalidAnalysisDataError(f"metadata.{key} must be a list of strings")


def parse_report(data: dict) -> AnalysisResult:
    """Rebuild an AnalysisResult from its ``to_dict()`` form.

    Only ``metadata`` is required. Missing recommendations are derived
    from the metadata; missing issues are recomputed from its flags.

    Raises:
        InvalidAnalysisDataError: If the data does not describe a report.
    """
    if not isinstance(data, dict):
        raise InvalidAnalysisDataError("expected a JSON object")
    if not isinstance(data.get("metadata"), dict):
        raise InvalidAnalysisDataError("missing 'metadata' object")
    _check_metadata_types(data["metadata"])

    try:
        metadata = ProjectMetadata.from_dict(data["metadata"])
        if isinstance(data.get("structure"), dict):
            structure = ProjectStructure.from_dict(data["structure"])
        else:
            structure = ProjectStructure(root=metadata.project_root)

        if "recommendations" in data:
            recommendations = tuple(Recommendation.from_dict(r) for r in data["recommendations"])
        else:
            recommendations = tuple(derive_recommendations(metadata))

        if "issues" in data:
            issues = tuple(ProjectIssue.from_dict(i) for i in data["issues"])
        else:
            issues = tuple(detect_issues(metadata))
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidAnalysisDataError(f"{type(e).__name__}: {e}") from e

    return AnalysisResult(
        metadata=metadata,
        structure=structure,
        issues=issues,
        recommendations=recommendations,
    )


class CustomizationService:
    """Analyzes projects and writes their customization artifacts."""

    def __init__(self, analyzer: Optional[ProjectAnalyzer] = None):
        self._analyzer = analyzer or ProjectAnalyzer.from_config()
        self._fs = self._analyzer.fs

    def resolve_analysis(self, source: AnalysisSource) -> tuple[Path, AnalysisResult]:
        """Resolve an analysis source to (project root, analysis).

        A precomputed report is used as-is; its root is the explicit
        project path when given, else the report's own project root.
        """
        if isinstance(source, PrecomputedReport):
            analysis = parse_report(source.data)
            if source.project_path:
                root = self._analyzer.resolve_root(source.project_path)
            else:
                root = Path(analysis.metadata.project_root)
            logger.debug("Using precomputed analysis for %s", root)
            return root, analysis

        if isinstance(source, ProjectPath):
            analysis = self._analyzer.analyze(source.path)
            return Path(analysis.metadata.project_root), analysis

        raise TypeError(f"Unsupported analysis source: {source!r}")

    def analyze_project(
        self,
        project_path: Optional[str] = None,
        max_depth: Optional[int] = None,
    ) -> AnalysisResult:
        """Run a full analysis, optionally overriding the depth limit.

        Raises:
            AnalysisError: If the project cannot be analyzed.
        """
        try:
            return self._analyzer.analyze(project_path, max_depth=max_depth)
        except (TailorError, OSError) as e:
            logger.error("Error analyzing project: %s", e)
            raise AnalysisError(
                f"Failed to analyze project: {e}",
                project_root=str(project_path or ""),
                operation="analyze_project",
            ) from e

    def generate_instructions(self, source: AnalysisSource) -> GeneratedContent:
        """Render and write .github/copilot-instructions.md.

        Raises:
            AnalysisError: If the analysis cannot be obtained.
            ArtifactWriteError: If the file cannot be written.
        """
        prefix = "Failed to generate Copilot instructions"
        root, analysis = self._resolve_for("generate_instructions", prefix, source)
        logger.info("Generating Copilot instructions for: %s", root)

        content = render_instructions(analysis.metadata)
        self._write_artifact(root / INSTRUCTIONS_FILE, content, "generate_instructions", prefix)

        return GeneratedContent(
            filename=INSTRUCTIONS_FILE.as_posix(),
            content=content,
            description="Generated Copilot custom instructions based on project analysis",
        )

    def update_readme(
        self,
        source: AnalysisSource,
        guidelines: Optional[str] = None,
    ) -> GeneratedContent:
        """Render README.md, backing up any existing file first.

        The backup and the overwrite are separate writes; a failure after
        the backup leaves README.md.backup in place.

        Raises:
            AnalysisError: If the analysis cannot be obtained.
            ArtifactWriteError: If the backup or README cannot be written.
        """
        prefix = "Failed to update README"
        root, analysis = self._resolve_for("update_readme", prefix, source)
        logger.info("Updating README for: %s", root)

        content = render_readme(analysis.metadata, guidelines)
        readme_path = root / README_FILE
        if self._fs.exists(readme_path):
            backup_path = root / f"{README_FILE}{BACKUP_SUFFIX}"
            try:
                existing = self._fs.read_text(readme_path)
            except OSError as e:
                raise ArtifactWriteError(
                    f"{prefix}: {e}",
                    file_path=str(readme_path),
                    operation="update_readme",
                ) from e
            self._write_artifact(backup_path, existing, "update_readme", prefix)
            logger.info("Backed up existing README to: %s", backup_path)
        self._write_artifact(readme_path, content, "update_readme", prefix)

        return GeneratedContent(
            filename=README_FILE,
            content=content,
            description="Generated or updated README.md with project guidelines",
        )

    def get_recommendations(self, source: AnalysisSource) -> RecommendationsSummary:
        """Summarize recommendations and issues for a project.

        Raises:
            AnalysisError: If the analysis cannot be obtained.
        """
        root, analysis = self._resolve_for(
            "get_recommendations", "Failed to get recommendations", source,
        )
        logger.info("Getting recommendations for: %s", root)
        metadata = analysis.metadata
        return RecommendationsSummary(
            project_name=metadata.name,
            project_type=metadata.project_type.value,
            recommendations=list(analysis.recommendations),
            issues=list(analysis.issues),
            frameworks=list(metadata.frameworks),
            languages=list(metadata.programming_languages),
        )

    def _write_artifact(self, path: Path, content: str, operation: str, prefix: str) -> None:
        try:
            self._fs.write_text(path, content)
        except OSError as e:
            raise ArtifactWriteError(
                f"{prefix}: {e}",
                file_path=str(path),
                operation=operation,
            ) from e

    def _resolve_for(
        self,
        operation: str,
        prefix: str,
        source: AnalysisSource,
    ) -> tuple[Path, AnalysisResult]:
        try:
            return self.resolve_analysis(source)
        except (TailorError, OSError) as e:
            logger.error("%s: %s", prefix, e)
            project = getattr(source, "path", None) or getattr(source, "project_path", None)
            raise AnalysisError(
                f"{prefix}: {e}",
                project_root=str(project or ""),
                operation=operation,
            ) from e
