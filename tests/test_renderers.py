"""Tests for the Markdown renderers."""
from dataclasses import replace

import pytest

from tailor.renderers import render_instructions, render_readme
from tailor.scanner.models import ProjectMetadata, ProjectType


@pytest.fixture
def metadata():
    return ProjectMetadata(
        name="demo",
        description="",
        project_root="/tmp/demo",
        project_type=ProjectType.UNKNOWN,
    )


class TestRenderInstructions:
    def test_overview(self, metadata):
        text = render_instructions(replace(
            metadata,
            description="Demo app",
            frameworks=("Vue",),
            programming_languages=("JavaScript",),
        ))
        assert text.startswith("# Copilot Custom Instructions\n\n*Auto-generated for demo*\n")
        assert "- **Description**: Demo app" in text
        assert "- **Type**: unknown" in text
        assert "- **Frameworks**: Vue" in text
        assert "- **Languages**: JavaScript" in text

    def test_optional_overview_lines_omitted(self, metadata):
        text = render_instructions(metadata)
        assert "**Description**" not in text
        assert "**Frameworks**" not in text
        assert "**Languages**" not in text

    def test_react_sections(self, metadata):
        text = render_instructions(replace(metadata, frameworks=("React",)))
        assert "### TypeScript/React Standards" in text
        assert "### Backend Standards" not in text
        assert "  ├── hooks/         # Custom hooks" in text

    def test_backend_sections_with_node_layout(self, metadata):
        text = render_instructions(replace(
            metadata,
            project_type=ProjectType.NODEJS,
            frameworks=("Node.js Backend",),
        ))
        assert "### Backend Standards" in text
        assert "  ├── routes/        # API routes" in text
        assert "### TypeScript/React Standards" not in text

    def test_no_layout_for_python(self, metadata):
        text = render_instructions(replace(metadata, project_type=ProjectType.PYTHON))
        assert "src/" not in text

    def test_standard_sections_always_present(self, metadata):
        text = render_instructions(metadata)
        for heading in ("## Documentation", "## Git Workflow", "## Testing", "## Performance", "## Security"):
            assert heading in text
        assert "- Never commit secrets or API keys" in text


class TestRenderReadme:
    def test_unknown_project_has_no_prerequisites(self, metadata):
        text = render_readme(metadata)
        assert text.startswith("# demo\n\n## Getting Started\n")
        assert "### Prerequisites" not in text
        assert text.endswith("This project is licensed under the MIT License.\n")

    def test_node_instructions(self, metadata):
        text = render_readme(replace(metadata, project_type=ProjectType.NODEJS))
        assert "- Node.js (v16 or higher)" in text
        assert "npm run dev" in text

    def test_python_instructions(self, metadata):
        text = render_readme(replace(metadata, project_type=ProjectType.PYTHON))
        assert "- Python 3.8 or higher" in text

    def test_guidelines_section(self, metadata):
        text = render_readme(metadata, guidelines="Keep PRs small.")
        assert "## Development Guidelines\n\nKeep PRs small.\n" in text
        assert text.index("## Development Guidelines") < text.index("## Contributing")

    def test_empty_guidelines_omitted(self, metadata):
        assert "Development Guidelines" not in render_readme(metadata, guidelines="")
