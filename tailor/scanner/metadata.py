"""Metadata assembler: classifier output plus marker-file flags."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .classifier import PACKAGE_JSON, Classifier, load_manifest
from .filesystem import GIT_MARKER, FileSystem
from .models import ProjectMetadata

README_FILE = "README.md"
INSTRUCTIONS_FILE = Path(".github") / "copilot-instructions.md"
PYPROJECT_FILE = "pyproject.toml"


class MetadataAssembler:
    """Builds the ProjectMetadata record for a project root."""

    def __init__(
        self,
        fs: Optional[FileSystem] = None,
        classifier: Optional[Classifier] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger("tailor.scanner.metadata")
        self.fs = fs or FileSystem(logger=self.logger)
        self.classifier = classifier or Classifier(fs=self.fs, logger=self.logger)

    def assemble(self, root: os.PathLike | str) -> ProjectMetadata:
        root = Path(root)
        name = root.name
        description = ""

        manifest = load_manifest(self.fs, root, self.logger)
        if manifest is not None:
            manifest_name = manifest.get("name")
            if isinstance(manifest_name, str) and manifest_name:
                name = manifest_name
            manifest_description = manifest.get("description")
            if isinstance(manifest_description, str):
                description = manifest_description

        return ProjectMetadata(
            name=name,
            description=description,
            project_root=str(root),
            project_type=self.classifier.detect_project_type(root),
            has_github=self.fs.exists(root / GIT_MARKER),
            has_package_json=self.fs.exists(root / PACKAGE_JSON),
            has_python_project=self.fs.exists(root / PYPROJECT_FILE),
            has_readme=self.fs.exists(root / README_FILE),
            has_copilot_instructions=self.fs.exists(root / INSTRUCTIONS_FILE),
            frameworks=tuple(self.classifier.detect_frameworks(root)),
            programming_languages=tuple(self.classifier.detect_languages(root)),
        )
