"""Prompt templates that guide the assistant through a customization workflow."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tailor.errors import UnknownPromptError


@dataclass(frozen=True)
class PromptTemplate:
    name: str
    description: str
    body: str


PROMPT_TEMPLATES: tuple[PromptTemplate, ...] = (
    PromptTemplate(
        name="analyze-and-customize",
        description=(
            "Comprehensive prompt to analyze a VS Code project and set up "
            "customization files (instructions, README, guidelines)"
        ),
        body="""You are a VS Code customization expert. Your task is to analyze the provided project and help customize it for optimal Copilot experience.

Use the following tools in sequence:
1. First, analyze the project using the `analyze_project` tool to understand its structure, type, and current customization status
2. Review the analysis results to identify gaps and opportunities
3. Generate Copilot custom instructions using the `generate_copilot_instructions` tool
4. Update or create a README with guidelines using the `update_readme` tool
5. Explain what was done and provide recommendations for further improvements

The goal is to establish a solid foundation of project customization that will improve developer experience when using Copilot.""",
    ),
    PromptTemplate(
        name="generate-instructions-only",
        description="Generate only the Copilot custom instructions file based on project analysis",
        body="""You are a VS Code customization expert focused on Copilot instructions.

Your task:
1. Analyze the project using the `analyze_project` tool
2. Generate appropriate Copilot custom instructions using the `generate_copilot_instructions` tool
3. Provide a summary of what instructions were created and why they're important for this project

Focus on creating clear, actionable guidelines that reflect the project's technology stack and best practices.""",
    ),
    PromptTemplate(
        name="review-and-improve",
        description="Review existing project customizations and suggest improvements",
        body="""You are a code quality and customization expert.

Your task:
1. Analyze the project using the `analyze_project` tool
2. Get customization recommendations using the `get_customization_recommendations` tool
3. Review existing customization files (README, instructions) by reading the project resources
4. Provide detailed recommendations for:
   - What customization improvements are needed
   - How to enhance existing guidelines
   - Best practices that aren't yet documented
   - Potential issues or gaps in the current setup

Be constructive and provide actionable advice.""",
    ),
)


def get_prompt(name: str) -> PromptTemplate:
    for template in PROMPT_TEMPLATES:
        if template.name == name:
            return template
    raise UnknownPromptError(name)


def get_prompt_content(name: str, project_path: Optional[str] = None) -> str:
    """Prompt text, with the target project appended when one is given.

    Raises:
        UnknownPromptError: If no template has this name.
    """
    body = get_prompt(name).body
    if project_path:
        body += f"\n\nTarget project: {project_path}"
    return body
