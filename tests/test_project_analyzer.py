"""Tests for the project analyzer."""
import pytest

from tailor.errors import ProjectNotFoundError
from tailor.scanner.models import ProjectType
from tailor.scanner.project_analyzer import ProjectAnalyzer, detect_issues


class TestAnalyze:
    def test_react_project(self, react_project):
        result = ProjectAnalyzer().analyze(react_project)

        assert result.metadata.name == "my-app"
        assert result.metadata.project_type is ProjectType.NODEJS
        assert [r.title for r in result.recommendations] == [
            "Missing README.md",
            "Missing Copilot Instructions",
            "TypeScript Configuration",
            "React Best Practices",
        ]
        assert [i.message for i in result.issues] == [
            "README.md file is missing",
            ".github/copilot-instructions.md file is missing",
        ]
        assert result.structure.root == str(react_project)

    def test_react_with_readme_without_git(self, make_project):
        root = make_project({
            "package.json": {"name": "foo", "dependencies": {"react": "18.0.0", "typescript": "5.0.0"}},
            "README.md": "# foo\n",
        })
        result = ProjectAnalyzer().analyze(root)
        metadata = result.metadata

        assert metadata.project_type is ProjectType.NODEJS
        assert {"React", "TypeScript"} <= set(metadata.frameworks)
        assert metadata.has_readme
        assert not metadata.has_copilot_instructions
        assert not metadata.has_github

        priorities = {r.title: r.priority for r in result.recommendations}
        assert priorities["Missing Copilot Instructions"] == "high"
        assert priorities["Initialize Git Repository"] == "medium"
        assert "Missing README.md" not in priorities

    def test_repeat_scan_is_identical(self, react_project):
        first = ProjectAnalyzer().analyze(react_project)
        second = ProjectAnalyzer().analyze(react_project)
        assert first == second

    def test_max_depth_override(self, make_project):
        root = make_project({"a/b/c/d.txt": ""})
        shallow = ProjectAnalyzer().analyze(root, max_depth=0)
        deep = ProjectAnalyzer().analyze(root, max_depth=5)
        assert shallow.structure.total_files == 0
        assert deep.structure.total_files == 1

    def test_configured_depth_used_by_default(self, make_project):
        root = make_project({"a/b/c.txt": ""})
        result = ProjectAnalyzer(max_depth=0).analyze(root)
        assert [f.name for f in result.structure.folders] == ["a"]

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(ProjectNotFoundError, match="Not a directory"):
            ProjectAnalyzer().analyze(tmp_path / "nope")

    def test_file_root_raises(self, make_project):
        root = make_project({"file.txt": "x"})
        with pytest.raises(ProjectNotFoundError):
            ProjectAnalyzer().analyze(root / "file.txt")

    def test_to_dict_shape(self, python_project):
        d = ProjectAnalyzer().analyze(python_project).to_dict()
        assert set(d) == {"metadata", "structure", "issues", "recommendations"}
        assert d["metadata"]["project_type"] == "python"
        assert d["metadata"]["has_github"] is False
        assert d["issues"][0]["severity"] == "high"


class TestResolveRoot:
    def test_explicit_path_wins(self, tmp_path):
        analyzer = ProjectAnalyzer(default_path=tmp_path / "other")
        assert analyzer.resolve_root(tmp_path) == tmp_path

    def test_configured_default(self, tmp_path):
        analyzer = ProjectAnalyzer(default_path=tmp_path)
        assert analyzer.resolve_root(None) == tmp_path

    def test_git_root_of_cwd(self, make_project, monkeypatch):
        root = make_project({".git/HEAD": "", "src/a.py": ""})
        monkeypatch.chdir(root / "src")
        assert ProjectAnalyzer().resolve_root() == root


class TestFromConfig:
    def test_reads_env_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TAILOR_MAX_DEPTH", "1")
        monkeypatch.setenv("TAILOR_MAX_FILES", "7")
        monkeypatch.setenv("TAILOR_IGNORE_MATCH", "substring")
        monkeypatch.setenv("TAILOR_PROJECT_PATH", str(tmp_path))

        analyzer = ProjectAnalyzer.from_config()

        assert analyzer.max_depth == 1
        assert analyzer.walker.max_reported_files == 7
        assert analyzer.fs.ignore.mode == "substring"
        assert analyzer.resolve_root() == tmp_path


class TestDetectIssues:
    def test_only_instructions_missing(self, python_project):
        metadata = ProjectAnalyzer().analyze(python_project).metadata
        issues = detect_issues(metadata)
        assert [i.message for i in issues] == [".github/copilot-instructions.md file is missing"]
        assert issues[0].category == "missing"
