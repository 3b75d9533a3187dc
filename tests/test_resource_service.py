"""Tests for the project-config:// resources."""
import json

import pytest

from tailor.core.resource_service import (
    NO_GUIDELINES_TEXT,
    NO_README_TEXT,
    ResourceService,
)
from tailor.errors import UnknownResourceError
from tailor.scanner.project_analyzer import ProjectAnalyzer


@pytest.fixture
def service():
    return ResourceService(analyzer=ProjectAnalyzer())


class TestListResources:
    def test_four_resources(self, service):
        resources = service.list_resources()
        assert [r.uri for r in resources] == [
            "project-config://metadata",
            "project-config://structure",
            "project-config://guidelines",
            "project-config://readme",
        ]
        assert {r.mime_type for r in resources} == {"application/json", "text/markdown"}


class TestGetResource:
    def test_metadata_json(self, service, react_project):
        content = service.get_resource("project-config://metadata", str(react_project))
        assert content.mime_type == "application/json"
        data = json.loads(content.content)
        assert data["name"] == "my-app"
        assert data["project_type"] == "nodejs"

    def test_structure_json(self, service, react_project):
        content = service.get_resource("project-config://structure", str(react_project))
        data = json.loads(content.content)
        assert data["root"] == str(react_project)
        assert data["total_files"] == 4

    def test_guidelines_placeholder(self, service, react_project):
        content = service.get_resource("project-config://guidelines", str(react_project))
        assert content.content == NO_GUIDELINES_TEXT
        assert content.mime_type == "text/markdown"

    def test_guidelines_file(self, service, make_project):
        root = make_project({".github/copilot-instructions.md": "# Rules\n"})
        assert service.get_resource("project-config://guidelines", str(root)).content == "# Rules\n"

    def test_readme_placeholder(self, service, react_project):
        assert service.get_resource("project-config://readme", str(react_project)).content == NO_README_TEXT

    def test_readme_file(self, service, python_project):
        assert service.get_resource("project-config://readme", str(python_project)).content == "# pyproj\n"

    def test_default_root_from_config(self, python_project, monkeypatch):
        monkeypatch.setenv("TAILOR_PROJECT_PATH", str(python_project))
        service = ResourceService()
        assert service.get_resource("project-config://readme").content == "# pyproj\n"

    def test_unknown_uri(self, service):
        with pytest.raises(UnknownResourceError, match="project-config://secrets") as exc_info:
            service.get_resource("project-config://secrets")
        assert "project-config://readme" in str(exc_info.value)
