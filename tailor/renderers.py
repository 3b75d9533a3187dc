"""Markdown renderers for Copilot instructions and README files.

Both functions are pure: they consume a ProjectMetadata record and return
the document text.
"""
from __future__ import annotations

from typing import Optional

from tailor.scanner.models import ProjectMetadata, ProjectType


def _uses(metadata: ProjectMetadata, *fragments: str) -> bool:
    return any(
        fragment in label
        for label in metadata.frameworks
        for fragment in fragments
    )


_REACT_LAYOUT = [
    "```",
    "src/",
    "  ├── components/    # React components",
    "  ├── pages/         # Page components",
    "  ├── utils/         # Utility functions",
    "  ├── hooks/         # Custom hooks",
    "  ├── types/         # TypeScript types",
    "  └── App.tsx        # Main app component",
    "```",
]

_NODE_LAYOUT = [
    "```",
    "src/",
    "  ├── routes/        # API routes",
    "  ├── controllers/   # Request handlers",
    "  ├── services/      # Business logic",
    "  ├── utils/         # Utility functions",
    "  └── types/         # TypeScript types",
    "```",
]

_STANDARD_SECTIONS: list[tuple[str, list[str]]] = [
    ("Documentation", [
        "Maintain an up-to-date README.md with setup instructions",
        "Document API endpoints with examples",
        "Include JSDoc comments for complex functions",
        "Add comments for non-obvious logic",
    ]),
    ("Git Workflow", [
        "Use descriptive commit messages following conventional commits",
        "Create feature branches for new features (feature/*)",
        "Create bugfix branches for fixes (bugfix/*)",
        "Request code review before merging to main",
    ]),
    ("Testing", [
        "Write unit tests for all utility functions",
        "Maintain test coverage above 80%",
        "Use descriptive test names that explain what is being tested",
        "Mock external dependencies in tests",
    ]),
    ("Performance", [
        "Optimize bundle size for frontend projects",
        "Use lazy loading for components when appropriate",
        "Implement proper caching strategies",
        "Monitor and log performance metrics",
    ]),
    ("Security", [
        "Never commit secrets or API keys",
        "Use environment variables for sensitive configuration",
        "Validate and sanitize user inputs",
        "Keep dependencies up-to-date",
    ]),
]


def render_instructions(metadata: ProjectMetadata) -> str:
    """Build .github/copilot-instructions.md for a project."""
    lines = [
        "# Copilot Custom Instructions",
        "",
        f"*Auto-generated for {metadata.name}*",
        "",
        "## Project Overview",
        f"- **Project Name**: {metadata.name}",
    ]
    if metadata.description:
        lines.append(f"- **Description**: {metadata.description}")
    lines.append(f"- **Type**: {metadata.project_type.value}")
    if metadata.frameworks:
        lines.append(f"- **Frameworks**: {', '.join(metadata.frameworks)}")
    if metadata.programming_languages:
        lines.append(f"- **Languages**: {', '.join(metadata.programming_languages)}")
    lines.append("")

    lines.extend(["## Code Style and Standards", ""])

    if _uses(metadata, "React", "TypeScript"):
        lines.extend([
            "### TypeScript/React Standards",
            "- Use functional components with hooks",
            "- Maintain strict TypeScript types (no `any`)",
            "- Use ESLint and Prettier for code formatting",
            "- Follow naming conventions: camelCase for variables/functions, PascalCase for components",
            "",
        ])

    if _uses(metadata, "Node.js", "Backend"):
        lines.extend([
            "### Backend Standards",
            "- Use async/await for asynchronous operations",
            "- Implement proper error handling with try/catch",
            "- Write unit tests for all utility functions",
            "- Follow RESTful API design principles",
            "",
        ])

    lines.extend([
        "## Project Structure",
        "",
        "The project should maintain the following directory structure:",
        "",
    ])
    if _uses(metadata, "React"):
        lines.extend(_REACT_LAYOUT)
    elif metadata.project_type is ProjectType.NODEJS:
        lines.extend(_NODE_LAYOUT)
    lines.append("")

    for title, items in _STANDARD_SECTIONS:
        lines.extend([f"## {title}", ""])
        lines.extend(f"- {item}" for item in items)
        lines.append("")

    return "\n".join(lines)


def render_readme(
    metadata: ProjectMetadata,
    guidelines: Optional[str] = None,
) -> str:
    """Build README.md, optionally with a development guidelines section."""
    lines = [f"# {metadata.name}", ""]

    if metadata.description:
        lines.extend([metadata.description, ""])

    lines.extend(["## Getting Started", ""])

    if metadata.project_type is ProjectType.NODEJS:
        lines.extend([
            "### Prerequisites",
            "- Node.js (v16 or higher)",
            "- npm or yarn",
            "",
            "### Installation",
            "",
            "```bash",
            "npm install",
            "```",
            "",
            "### Running the Project",
            "",
            "```bash",
            "npm run dev",
            "```",
            "",
        ])
    elif metadata.project_type is ProjectType.PYTHON:
        lines.extend([
            "### Prerequisites",
            "- Python 3.8 or higher",
            "- pip or conda",
            "",
            "### Installation",
            "",
            "```bash",
            "pip install -r requirements.txt",
            "```",
            "",
        ])

    if guidelines:
        lines.extend(["## Development Guidelines", "", guidelines, ""])

    lines.extend([
        "## Contributing",
        "",
        "Please read our contributing guidelines before submitting pull requests.",
        "",
        "## License",
        "",
        "This project is licensed under the MIT License.",
        "",
    ])
    return "\n".join(lines)
