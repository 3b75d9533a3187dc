"""Data models for project scan results."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum

KEY_DIRECTORIES: tuple[str, ...] = ("src", "lib", "components", "pages", "utils", "tests", "docs")


class ProjectType(str, Enum):
    NODEJS = "nodejs"
    PYTHON = "python"
    DOTNET = "dotnet"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ProjectMetadata:
    """Classification and marker flags for one project root."""
    name: str
    description: str
    project_root: str
    project_type: ProjectType
    has_github: bool = False
    has_package_json: bool = False
    has_python_project: bool = False
    has_readme: bool = False
    has_copilot_instructions: bool = False
    frameworks: tuple[str, ...] = ()
    programming_languages: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        d = asdict(self)
        d["project_type"] = self.project_type.value
        d["frameworks"] = list(self.frameworks)
        d["programming_languages"] = list(self.programming_languages)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> ProjectMetadata:
        return cls(
            name=d["name"],
            description=d.get("description", ""),
            project_root=d["project_root"],
            project_type=ProjectType(d.get("project_type", "unknown")),
            has_github=bool(d.get("has_github", False)),
            has_package_json=bool(d.get("has_package_json", False)),
            has_python_project=bool(d.get("has_python_project", False)),
            has_readme=bool(d.get("has_readme", False)),
            has_copilot_instructions=bool(d.get("has_copilot_instructions", False)),
            frameworks=tuple(d.get("frameworks", ())),
            programming_languages=tuple(d.get("programming_languages", ())),
        )


@dataclass(frozen=True)
class FolderInfo:
    path: str
    name: str
    depth: int
    file_count: int  # immediate files only


@dataclass(frozen=True)
class FileInfo:
    path: str
    name: str
    extension: str
    size: int


@dataclass(frozen=True)
class ProjectStructure:
    """Bounded-depth inventory of folders and files."""
    root: str
    folders: tuple[FolderInfo, ...] = ()
    files: tuple[FileInfo, ...] = ()  # capped; see total_files
    total_files: int = 0
    key_directories: tuple[str, ...] = KEY_DIRECTORIES

    def to_dict(self) -> dict:
        return {
            "root": self.root,
            "folders": [asdict(f) for f in self.folders],
            "files": [asdict(f) for f in self.files],
            "total_files": self.total_files,
            "key_directories": list(self.key_directories),
        }

    @classmethod
    def from_dict(cls, d: dict) -> ProjectStructure:
        return cls(
            root=d["root"],
            folders=tuple(FolderInfo(**f) for f in d.get("folders", ())),
            files=tuple(FileInfo(**f) for f in d.get("files", ())),
            total_files=int(d.get("total_files", 0)),
            key_directories=tuple(d.get("key_directories", KEY_DIRECTORIES)),
        )


@dataclass(frozen=True)
class ProjectIssue:
    """A severity-tagged defect notice raised during analysis."""
    severity: str  # low, medium, high
    category: str  # missing, outdated, inconsistent
    message: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> ProjectIssue:
        return cls(severity=d["severity"], category=d["category"], message=d["message"])


@dataclass(frozen=True)
class Recommendation:
    """An actionable, priority-tagged suggestion."""
    title: str
    description: str
    category: str  # documentation, guidelines, structure, best-practices
    priority: str  # low, medium, high
    action: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> Recommendation:
        return cls(
            title=d["title"],
            description=d.get("description", ""),
            category=d["category"],
            priority=d["priority"],
            action=d.get("action", ""),
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Complete analysis of one project root."""
    metadata: ProjectMetadata
    structure: ProjectStructure
    issues: tuple[ProjectIssue, ...] = ()
    recommendations: tuple[Recommendation, ...] = ()

    def to_dict(self) -> dict:
        return {
            "metadata": self.metadata.to_dict(),
            "structure": self.structure.to_dict(),
            "issues": [i.to_dict() for i in self.issues],
            "recommendations": [r.to_dict() for r in self.recommendations],
        }


@dataclass(frozen=True)
class GeneratedContent:
    """A customization artifact written to the project."""
    filename: str
    content: str
    description: str

    def preview(self, limit: int = 500) -> str:
        return self.content[:limit] + "..."
