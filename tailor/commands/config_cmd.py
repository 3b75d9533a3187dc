"""CLI commands for configuration management."""
from __future__ import annotations

import typer
from tailor import ui
from tailor.error_handler import handle_errors

app = typer.Typer(
    name="config",
    help="Manage tailor configuration.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command()
@handle_errors
def show():
    """Display the resolved configuration (all layers merged)."""
    from rich.panel import Panel
    from rich.table import Table
    from tailor.core.config_service import get_config_service

    svc = get_config_service()
    info = svc.show()

    sources = info["sources"]
    ui.console.print(Panel(
        f"Global:  {sources['global_config'] or '[dim]not found[/dim]'}\n"
        f"Project: {sources['project_config'] or '[dim]not found[/dim]'}",
        title="Config Sources",
        border_style="cyan",
    ))

    for section, values in info["resolved"].items():
        if not isinstance(values, dict):
            continue
        table = Table(title=section.capitalize(), show_header=True)
        table.add_column("Setting", style="cyan")
        table.add_column("Value")
        for key, val in values.items():
            table.add_row(key, str(val) if val != "" else "[dim]not set[/dim]")
        ui.console.print(table)

    if info["error"]:
        ui.console.print(f"[bold red]Invalid configuration:[/bold red] {info['error']}")
        ui.console.print("[dim]Fix it with 'tailor config set <key> <value>'.[/dim]")


@app.command("set")
@handle_errors
def set_value(
    key: str = typer.Argument(..., help="Config key in dotted notation (e.g. scan.max_depth)"),
    value: str = typer.Argument(..., help="Value to set"),
):
    """Set a global configuration value."""
    from tailor.core.config_service import get_config_service

    svc = get_config_service()
    stored = svc.set_global(key, value)
    ui.console.print(f"[green]Set[/green] {key} = {stored!r}")


@app.command()
@handle_errors
def init():
    """Create a .tailor.toml project config in the current directory."""
    from tailor.core.config_service import get_config_service

    svc = get_config_service()
    path = svc.init_project_config()
    ui.console.print(f"[green]Created project config:[/green] {path}")


@app.command()
@handle_errors
def path():
    """Show all configuration file locations."""
    from rich.table import Table
    from tailor.core.config_service import get_config_service

    svc = get_config_service()
    paths = svc.config_paths()

    table = Table(title="Config Paths", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Location")
    for name, location in paths.items():
        table.add_row(name, location)
    ui.console.print(table)
