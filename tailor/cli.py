#!/usr/bin/env python3
"""
tailor: analyze a project and generate its Copilot customization files
(custom instructions, README), or serve the same operations over MCP.
"""
import logging
from typing import Optional

import typer
from tailor import ui
from tailor.error_handler import handle_errors

logger = logging.getLogger("tailor.cli")

app = typer.Typer(
    name="tailor",
    help="Project analysis & Copilot customization CLI.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Import subcommands
from tailor.commands import config_cmd

app.add_typer(config_cmd.app, name="config", help="Manage configuration", rich_help_panel="Advanced")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    log_level: str = typer.Option(
        None, "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR). Overrides TAILOR_LOG_LEVEL.",
    ),
    plain: bool = typer.Option(False, "--plain", help="Plain text output (no colors or panels)."),
):
    """Project analysis & Copilot customization CLI."""
    if plain:
        ui.set_plain_mode(True)

    config_problem = None
    if verbose:
        level = "DEBUG"
    elif log_level:
        level = log_level
    else:
        from tailor.config import Config
        from tailor.errors import ConfigError
        try:
            level = Config.get_log_level()
        except ConfigError as e:
            # Config commands still run on a broken config
            level, config_problem = "INFO", e
    ui.setup_logging(level)
    if config_problem:
        logger.warning("Invalid configuration, logging at INFO: %s", config_problem)


def _service():
    from tailor.core.customization_service import CustomizationService

    return CustomizationService()


def _print_metadata(metadata) -> None:
    from rich.table import Table

    table = Table(title=f"{metadata.name}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Root", metadata.project_root)
    table.add_row("Type", metadata.project_type.value)
    if metadata.description:
        table.add_row("Description", metadata.description)
    table.add_row("Frameworks", ", ".join(metadata.frameworks) or "[dim]none[/dim]")
    table.add_row("Languages", ", ".join(metadata.programming_languages) or "[dim]none[/dim]")
    for label, flag in (
        ("Git", metadata.has_github),
        ("package.json", metadata.has_package_json),
        ("Python project", metadata.has_python_project),
        ("README.md", metadata.has_readme),
        ("Copilot instructions", metadata.has_copilot_instructions),
    ):
        table.add_row(label, ui.flag_icon(flag))
    ui.console.print(table)


def _print_recommendations(recommendations, issues) -> None:
    from rich.table import Table

    if issues:
        for issue in issues:
            ui.console.print(f"[priority.{issue.severity}]{issue.severity.upper()}[/] {issue.message}")

    if not recommendations:
        ui.success_panel("No recommendations", "This project is already customized.")
        return

    table = Table(title="Recommendations", show_header=True)
    table.add_column("Priority")
    table.add_column("Title", style="cyan")
    table.add_column("Action")
    for rec in recommendations:
        table.add_row(f"[priority.{rec.priority}]{rec.priority}[/]", rec.title, rec.action)
    ui.console.print(table)


@app.command(rich_help_panel="Customization")
@handle_errors
def analyze(
    path: Optional[str] = typer.Argument(None, help="Project root (defaults to the git root)"),
    json_output: bool = typer.Option(False, "--json", help="Print the full report as JSON"),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", min=0, help="Override the structure scan depth",
    ),
):
    """[bold cyan]Analyze[/bold cyan] a project's type, frameworks and customization status."""
    result = _service().analyze_project(path, max_depth=max_depth)
    if json_output:
        ui.print_json_output(result.to_dict())
        return

    _print_metadata(result.metadata)
    structure = result.structure
    ui.console.print(
        f"{ui.flag_icon(True)} {len(structure.folders)} folders, "
        f"{structure.total_files} files scanned"
    )
    _print_recommendations(result.recommendations, result.issues)


@app.command(rich_help_panel="Customization")
@handle_errors
def instructions(
    path: Optional[str] = typer.Argument(None, help="Project root (defaults to the git root)"),
):
    """[bold cyan]Generate[/bold cyan] .github/copilot-instructions.md."""
    from tailor.core import ProjectPath

    result = _service().generate_instructions(ProjectPath(path))
    ui.success_panel(f"Wrote {result.filename}", result.description)


@app.command(rich_help_panel="Customization")
@handle_errors
def readme(
    path: Optional[str] = typer.Argument(None, help="Project root (defaults to the git root)"),
    guidelines: Optional[str] = typer.Option(
        None, "--guidelines", "-g", help="Text for the Development Guidelines section",
    ),
):
    """[bold cyan]Create[/bold cyan] or regenerate README.md (existing file saved as README.md.backup)."""
    from tailor.core import ProjectPath

    result = _service().update_readme(ProjectPath(path), guidelines)
    ui.success_panel(f"Wrote {result.filename}", result.description)


@app.command(rich_help_panel="Customization")
@handle_errors
def recommend(
    path: Optional[str] = typer.Argument(None, help="Project root (defaults to the git root)"),
    json_output: bool = typer.Option(False, "--json", help="Print recommendations as JSON"),
):
    """List customization [bold]recommendations[/bold] for a project."""
    from tailor.core import ProjectPath

    summary = _service().get_recommendations(ProjectPath(path))
    if json_output:
        ui.print_json_output(summary.to_dict())
        return

    ui.console.print(f"[brand]{summary.project_name}[/brand] [muted]({summary.project_type})[/muted]")
    _print_recommendations(summary.recommendations, summary.issues)


@app.command(rich_help_panel="Server")
def serve():
    """Run the MCP server over stdio."""
    from tailor.mcp.server import main

    main()


if __name__ == "__main__":
    app()
