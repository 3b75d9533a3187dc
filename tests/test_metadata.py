"""Tests for the metadata assembler."""
from unittest.mock import MagicMock

from tailor.scanner.metadata import MetadataAssembler
from tailor.scanner.models import ProjectMetadata, ProjectType


class TestAssemble:
    def test_node_project(self, react_project):
        metadata = MetadataAssembler().assemble(react_project)

        assert metadata.name == "my-app"
        assert metadata.description == "A sample app"
        assert metadata.project_root == str(react_project)
        assert metadata.project_type is ProjectType.NODEJS
        assert metadata.has_github
        assert metadata.has_package_json
        assert not metadata.has_python_project
        assert not metadata.has_readme
        assert not metadata.has_copilot_instructions
        assert metadata.frameworks == ("React", "TypeScript")
        assert metadata.programming_languages == ("TypeScript/JSX", "TypeScript")

    def test_python_project_uses_directory_name(self, python_project):
        metadata = MetadataAssembler().assemble(python_project)
        assert metadata.name == "pyproj"
        assert metadata.description == ""
        assert metadata.project_type is ProjectType.PYTHON
        assert metadata.has_python_project
        assert metadata.has_readme
        assert metadata.programming_languages == ("Python",)

    def test_instructions_flag(self, make_project):
        root = make_project({".github/copilot-instructions.md": "# hi"})
        assert MetadataAssembler().assemble(root).has_copilot_instructions

    def test_empty_manifest_name_falls_back(self, make_project):
        root = make_project({"package.json": {"name": "", "description": 7}}, name="fallback")
        metadata = MetadataAssembler().assemble(root)
        assert metadata.name == "fallback"
        assert metadata.description == ""

    def test_invalid_manifest_still_node(self, make_project):
        root = make_project({"package.json": "oops"}, name="broken")
        metadata = MetadataAssembler().assemble(root)
        assert metadata.name == "broken"
        assert metadata.project_type is ProjectType.NODEJS
        assert metadata.frameworks == ()

    def test_uses_injected_classifier(self, make_project):
        root = make_project({"x.txt": ""})
        classifier = MagicMock()
        classifier.detect_project_type.return_value = ProjectType.DOTNET
        classifier.detect_frameworks.return_value = ["Angular"]
        classifier.detect_languages.return_value = ["C#"]

        metadata = MetadataAssembler(classifier=classifier).assemble(root)

        assert metadata.project_type is ProjectType.DOTNET
        assert metadata.frameworks == ("Angular",)
        classifier.detect_languages.assert_called_once_with(root)


class TestMetadataSerialization:
    def test_to_dict_uses_plain_values(self, react_project):
        d = MetadataAssembler().assemble(react_project).to_dict()
        assert d["project_type"] == "nodejs"
        assert d["frameworks"] == ["React", "TypeScript"]
        assert isinstance(d["programming_languages"], list)

    def test_from_dict_defaults(self):
        metadata = ProjectMetadata.from_dict({"name": "a", "project_root": "/tmp/a"})
        assert metadata.project_type is ProjectType.UNKNOWN
        assert metadata.frameworks == ()
        assert not metadata.has_readme
