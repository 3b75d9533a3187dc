"""Project analyzer orchestrator.

Resolves the project root, assembles metadata, walks the structure,
derives recommendations and flags missing artifacts, and builds an
AnalysisResult.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from tailor.errors import ProjectNotFoundError

from .filesystem import FileSystem, IgnoreMatcher
from .metadata import INSTRUCTIONS_FILE, README_FILE, MetadataAssembler
from .models import AnalysisResult, ProjectIssue, ProjectMetadata
from .recommendations import derive_recommendations
from .walker import DEFAULT_MAX_DEPTH, DEFAULT_MAX_REPORTED_FILES, StructureWalker


def detect_issues(metadata: ProjectMetadata) -> list[ProjectIssue]:
    """Missing-artifact issues, reported alongside recommendations."""
    issues: list[ProjectIssue] = []
    if not metadata.has_readme:
        issues.append(ProjectIssue(
            severity="high",
            category="missing",
            message=f"{README_FILE} file is missing",
        ))
    if not metadata.has_copilot_instructions:
        issues.append(ProjectIssue(
            severity="high",
            category="missing",
            message=f"{INSTRUCTIONS_FILE.as_posix()} file is missing",
        ))
    return issues


class ProjectAnalyzer:
    """Runs a full scan of one project root."""

    def __init__(
        self,
        max_depth: int = DEFAULT_MAX_DEPTH,
        max_reported_files: int = DEFAULT_MAX_REPORTED_FILES,
        ignore_match: str = "segment",
        default_path: Optional[Path] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger("tailor.scanner")
        self.max_depth = max_depth
        self.default_path = default_path
        self.fs = FileSystem(ignore=IgnoreMatcher(mode=ignore_match), logger=self.logger)
        self.assembler = MetadataAssembler(fs=self.fs, logger=self.logger)
        self.walker = StructureWalker(
            fs=self.fs,
            max_reported_files=max_reported_files,
            logger=self.logger,
        )

    @classmethod
    def from_config(cls, logger: Optional[logging.Logger] = None) -> ProjectAnalyzer:
        """Build an analyzer from the resolved tailor configuration."""
        from tailor.config import Config

        return cls(
            max_depth=Config.get_max_depth(),
            max_reported_files=Config.get_max_reported_files(),
            ignore_match=Config.get_ignore_match(),
            default_path=Config.get_default_project_path(),
            logger=logger,
        )

    def resolve_root(self, project_path: Optional[os.PathLike | str] = None) -> Path:
        """Explicit path, else configured default, else the enclosing git root."""
        if project_path:
            return Path(os.path.abspath(project_path))
        if self.default_path is not None:
            return Path(os.path.abspath(self.default_path))
        return self.fs.resolve_project_root()

    def analyze(
        self,
        project_path: Optional[os.PathLike | str] = None,
        max_depth: Optional[int] = None,
    ) -> AnalysisResult:
        """Analyze a project directory and return an AnalysisResult.

        Args:
            project_path: Root directory of the project. Defaults to the
                configured path or the git root above the working directory.
            max_depth: Override for the structure walker's depth limit.

        Raises:
            ProjectNotFoundError: If the root is not a directory.
        """
        root = self.resolve_root(project_path)
        if not self.fs.is_directory(root):
            raise ProjectNotFoundError(str(root))

        self.logger.info("Analyzing project at: %s", root)

        metadata = self.assembler.assemble(root)
        structure = self.walker.scan(
            root,
            max_depth=self.max_depth if max_depth is None else max_depth,
        )
        recommendations = derive_recommendations(metadata)
        issues = detect_issues(metadata)

        self.logger.info(
            "Analysis complete: %s (%s), %d files, %d recommendations",
            metadata.name,
            metadata.project_type.value,
            structure.total_files,
            len(recommendations),
        )
        return AnalysisResult(
            metadata=metadata,
            structure=structure,
            issues=tuple(issues),
            recommendations=tuple(recommendations),
        )
