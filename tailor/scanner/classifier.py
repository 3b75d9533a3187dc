"""Project classifier.

Turns marker-file evidence into a project type, a framework list and a
language list.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from .filesystem import FileSystem
from .models import ProjectType

PACKAGE_JSON = "package.json"
PYTHON_MARKERS: tuple[str, ...] = ("Pipfile", "pyproject.toml")
DOTNET_PROJECT_SUFFIX = ".csproj"

# Framework detection: dependency keys -> framework label, in rule order
FRAMEWORK_SIGNATURES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("react",), "React"),
    (("vue",), "Vue"),
    (("angular",), "Angular"),
    (("next",), "Next.js"),
    (("nuxt",), "Nuxt"),
    (("express", "@nestjs/core"), "Node.js Backend"),
    (("typescript",), "TypeScript"),
)

# Language detection: file extension -> language label
LANGUAGE_EXTENSIONS: dict[str, str] = {
    ".ts": "TypeScript",
    ".tsx": "TypeScript/JSX",
    ".js": "JavaScript",
    ".jsx": "JavaScript/JSX",
    ".py": "Python",
    ".cs": "C#",
    ".java": "Java",
    ".go": "Go",
    ".rb": "Ruby",
}


def load_manifest(
    fs: FileSystem,
    root: Path,
    logger: logging.Logger,
) -> Optional[dict]:
    """Parse ``package.json`` under ``root``.

    Returns None when the manifest is absent, unreadable, or not a JSON
    object.
    """
    manifest_path = root / PACKAGE_JSON
    if not fs.exists(manifest_path):
        return None
    try:
        data = json.loads(fs.read_text(manifest_path))
    except (OSError, ValueError) as e:
        logger.warning("Error reading %s: %s", manifest_path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: top-level value is not an object", manifest_path)
        return None
    return data


class Classifier:
    """Classifies a project root from the files it contains."""

    def __init__(
        self,
        fs: Optional[FileSystem] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger("tailor.scanner.classifier")
        self.fs = fs or FileSystem(logger=self.logger)

    def detect_project_type(self, root: os.PathLike | str) -> ProjectType:
        """First matching marker wins: Node, then Python, then .NET."""
        root = Path(root)
        if self.fs.exists(root / PACKAGE_JSON):
            return ProjectType.NODEJS
        if any(self.fs.exists(root / marker) for marker in PYTHON_MARKERS):
            return ProjectType.PYTHON
        if any(f.endswith(DOTNET_PROJECT_SUFFIX) for f in self.fs.list_files(root)):
            return ProjectType.DOTNET
        return ProjectType.UNKNOWN

    def detect_frameworks(self, root: os.PathLike | str) -> list[str]:
        """Framework labels from package.json dependency keys."""
        manifest = load_manifest(self.fs, Path(root), self.logger)
        if manifest is None:
            return []

        deps: set[str] = set()
        for section in ("dependencies", "devDependencies"):
            declared = manifest.get(section)
            if isinstance(declared, dict):
                deps.update(declared)
            elif declared is not None:
                self.logger.warning("Ignoring non-object %s in %s", section, PACKAGE_JSON)

        frameworks: list[str] = []
        for keys, label in FRAMEWORK_SIGNATURES:
            if any(key in deps for key in keys) and label not in frameworks:
                frameworks.append(label)
        return frameworks

    def detect_languages(self, root: os.PathLike | str) -> list[str]:
        """Language labels in first-seen order across the whole tree."""
        languages: list[str] = []
        for rel_path in self.fs.list_files(root, recursive=True):
            ext = os.path.splitext(rel_path)[1].lower()
            label = LANGUAGE_EXTENSIONS.get(ext)
            if label and label not in languages:
                languages.append(label)
        return languages
