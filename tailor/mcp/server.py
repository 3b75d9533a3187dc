"""MCP server exposing tailor services as tools, resources and prompts.

Runs via STDIO transport. Entry point: `tailor-mcp` console script.

Usage:
    VS Code:     {"servers": {"tailor": {"type": "stdio", "command": "tailor-mcp"}}}
    Claude Code: claude mcp add tailor -- tailor-mcp
"""
from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from tailor.core.resource_service import (
    GUIDELINES_URI,
    METADATA_URI,
    README_URI,
    RESOURCES,
    STRUCTURE_URI,
    ResourceService,
)
from tailor.errors import TailorError

logger = logging.getLogger("tailor.mcp")

mcp = FastMCP("tailor")


def _written(result) -> dict:
    """Tool payload for a generated artifact."""
    return {
        "status": "ok",
        "file": result.filename,
        "message": result.description,
        "preview": result.preview(),
    }


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool()
async def analyze_project(project_path: Optional[str] = None) -> dict:
    """Analyze a project's structure, type, frameworks and customization status.

    Args:
        project_path: Project root. Defaults to the configured path or the
            git root above the server's working directory.
    """
    from tailor.core.customization_service import CustomizationService

    try:
        result = CustomizationService().analyze_project(project_path)
        return {"status": "ok", "analysis": result.to_dict()}
    except TailorError as e:
        return {"status": "error", "error": str(e)}


@mcp.tool()
async def generate_copilot_instructions(
    project_path: Optional[str] = None,
    analysis_data: Optional[dict] = None,
) -> dict:
    """Generate .github/copilot-instructions.md for a project.

    Args:
        project_path: Project root.
        analysis_data: A report previously returned by analyze_project.
            When given, the project is not scanned again.
    """
    from tailor.core import analysis_source
    from tailor.core.customization_service import CustomizationService

    try:
        result = CustomizationService().generate_instructions(
            analysis_source(project_path, analysis_data),
        )
        return _written(result)
    except TailorError as e:
        return {"status": "error", "error": str(e)}


@mcp.tool()
async def update_readme(
    project_path: Optional[str] = None,
    guidelines: Optional[str] = None,
    analysis_data: Optional[dict] = None,
) -> dict:
    """Create or regenerate README.md. An existing README is saved to README.md.backup.

    Args:
        project_path: Project root.
        guidelines: Optional text placed under "Development Guidelines".
        analysis_data: A report previously returned by analyze_project.
    """
    from tailor.core import analysis_source
    from tailor.core.customization_service import CustomizationService

    try:
        result = CustomizationService().update_readme(
            analysis_source(project_path, analysis_data),
            guidelines,
        )
        return _written(result)
    except TailorError as e:
        return {"status": "error", "error": str(e)}


@mcp.tool()
async def get_customization_recommendations(
    project_path: Optional[str] = None,
    analysis_data: Optional[dict] = None,
) -> dict:
    """List customization recommendations and issues for a project.

    Args:
        project_path: Project root.
        analysis_data: A report previously returned by analyze_project.
    """
    from tailor.core import analysis_source
    from tailor.core.customization_service import CustomizationService

    try:
        summary = CustomizationService().get_recommendations(
            analysis_source(project_path, analysis_data),
        )
        return {"status": "ok", **summary.to_dict()}
    except TailorError as e:
        return {"status": "error", "error": str(e)}


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


def _read_resource(uri: str) -> str:
    return ResourceService().get_resource(uri).content


def project_metadata() -> str:
    return _read_resource(METADATA_URI)


def project_structure() -> str:
    return _read_resource(STRUCTURE_URI)


def project_guidelines() -> str:
    return _read_resource(GUIDELINES_URI)


def project_readme() -> str:
    return _read_resource(README_URI)


_RESOURCE_READERS = {
    METADATA_URI: project_metadata,
    STRUCTURE_URI: project_structure,
    GUIDELINES_URI: project_guidelines,
    README_URI: project_readme,
}

for _info in RESOURCES:
    mcp.resource(
        _info.uri,
        name=_info.name,
        description=_info.description,
        mime_type=_info.mime_type,
    )(_RESOURCE_READERS[_info.uri])


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


@mcp.prompt(
    name="analyze-and-customize",
    description=(
        "Comprehensive prompt to analyze a VS Code project and set up "
        "customization files (instructions, README, guidelines)"
    ),
)
def analyze_and_customize(project_path: Optional[str] = None) -> str:
    from tailor.prompts import get_prompt_content

    return get_prompt_content("analyze-and-customize", project_path)


@mcp.prompt(
    name="generate-instructions-only",
    description="Generate only the Copilot custom instructions file based on project analysis",
)
def generate_instructions_only(project_path: Optional[str] = None) -> str:
    from tailor.prompts import get_prompt_content

    return get_prompt_content("generate-instructions-only", project_path)


@mcp.prompt(
    name="review-and-improve",
    description="Review existing project customizations and suggest improvements",
)
def review_and_improve(project_path: Optional[str] = None) -> str:
    from tailor.prompts import get_prompt_content

    return get_prompt_content("review-and-improve", project_path)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """Run the tailor MCP server via STDIO transport."""
    from tailor.config import Config
    from tailor.ui import setup_logging

    setup_logging(Config.get_log_level())
    logger.info("Starting tailor MCP server")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
