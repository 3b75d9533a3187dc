"""Resource service - read-only project views for the assistant host."""
from __future__ import annotations

import json
import logging
from typing import Callable, Optional

from tailor.core import ResourceContent, ResourceInfo
from tailor.errors import UnknownResourceError
from tailor.scanner.metadata import INSTRUCTIONS_FILE, README_FILE
from tailor.scanner.project_analyzer import ProjectAnalyzer

logger = logging.getLogger("tailor.core.resources")

METADATA_URI = "project-config://metadata"
STRUCTURE_URI = "project-config://structure"
GUIDELINES_URI = "project-config://guidelines"
README_URI = "project-config://readme"

RESOURCES: tuple[ResourceInfo, ...] = (
    ResourceInfo(
        uri=METADATA_URI,
        name="Project Metadata",
        description="Project metadata including name, type, frameworks, and languages",
        mime_type="application/json",
    ),
    ResourceInfo(
        uri=STRUCTURE_URI,
        name="Project Structure",
        description="Scanned project directory structure and file organization",
        mime_type="application/json",
    ),
    ResourceInfo(
        uri=GUIDELINES_URI,
        name="Current Guidelines",
        description="Current Copilot custom instructions and project guidelines",
        mime_type="text/markdown",
    ),
    ResourceInfo(
        uri=README_URI,
        name="Project README",
        description="Current project README documentation",
        mime_type="text/markdown",
    ),
)

NO_GUIDELINES_TEXT = "No custom instructions file found. Create one to guide Copilot behavior."
NO_README_TEXT = "No README.md file found in project root."


class ResourceService:
    """Renders the project-config:// resources."""

    def __init__(self, analyzer: Optional[ProjectAnalyzer] = None):
        self._analyzer = analyzer or ProjectAnalyzer.from_config()
        self._fs = self._analyzer.fs
        self._readers: dict[str, Callable[[Optional[str]], str]] = {
            METADATA_URI: self.read_metadata,
            STRUCTURE_URI: self.read_structure,
            GUIDELINES_URI: self.read_guidelines,
            README_URI: self.read_readme,
        }

    def list_resources(self) -> list[ResourceInfo]:
        return list(RESOURCES)

    def get_resource(self, uri: str, project_path: Optional[str] = None) -> ResourceContent:
        """Render one resource by URI.

        Raises:
            UnknownResourceError: If the URI is not served.
        """
        reader = self._readers.get(uri)
        if reader is None:
            raise UnknownResourceError(uri, available=[r.uri for r in self.list_resources()])
        info = next(r for r in self.list_resources() if r.uri == uri)
        return ResourceContent(uri=uri, mime_type=info.mime_type, content=reader(project_path))

    def read_metadata(self, project_path: Optional[str] = None) -> str:
        root = self._analyzer.resolve_root(project_path)
        metadata = self._analyzer.assembler.assemble(root)
        return json.dumps(metadata.to_dict(), indent=2)

    def read_structure(self, project_path: Optional[str] = None) -> str:
        root = self._analyzer.resolve_root(project_path)
        structure = self._analyzer.walker.scan(root, max_depth=self._analyzer.max_depth)
        return json.dumps(structure.to_dict(), indent=2)

    def read_guidelines(self, project_path: Optional[str] = None) -> str:
        root = self._analyzer.resolve_root(project_path)
        return self._read_or_placeholder(root / INSTRUCTIONS_FILE, NO_GUIDELINES_TEXT)

    def read_readme(self, project_path: Optional[str] = None) -> str:
        root = self._analyzer.resolve_root(project_path)
        return self._read_or_placeholder(root / README_FILE, NO_README_TEXT)

    def _read_or_placeholder(self, path, placeholder: str) -> str:
        if not self._fs.exists(path):
            logger.debug("Resource file %s not found", path)
            return placeholder
        return self._fs.read_text(path)
