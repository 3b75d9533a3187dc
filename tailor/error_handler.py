"""Unified CLI error handler for tailor commands."""

from __future__ import annotations

import functools
import logging
import os
import traceback

import typer

from tailor import ui
from tailor.errors import (
    ArtifactWriteError,
    ConfigError,
    InvalidAnalysisDataError,
    ProjectNotFoundError,
    TailorError,
)

logger = logging.getLogger("tailor.error_handler")


def _debug_mode() -> bool:
    """Check if debug output is enabled via TAILOR_DEBUG env var."""
    return os.environ.get("TAILOR_DEBUG", "").lower() in ("1", "true", "yes")


def _render_tailor_error(e: TailorError) -> None:
    """Render a TailorError with Rich formatting and context."""
    ui.console.print(f"\n[bold red]Error:[/bold red] {e}")

    # Context details (only in debug mode)
    if e.context and _debug_mode():
        context_parts = [
            f"  [dim]{key}:[/dim] {value}" for key, value in e.context.items() if value
        ]
        if context_parts:
            ui.console.print("[dim]Context:[/dim]")
            for part in context_parts:
                ui.console.print(part)

    # Actionable hints based on error type
    if isinstance(e, ProjectNotFoundError):
        ui.console.print("[dim]Pass the path of an existing project directory.[/dim]")
    elif isinstance(e, ArtifactWriteError):
        ui.console.print("[dim]Check that the project directory is writable.[/dim]")
    elif isinstance(e, InvalidAnalysisDataError):
        ui.console.print("[dim]Run 'tailor analyze --json' to produce a valid report.[/dim]")
    elif isinstance(e, ConfigError):
        ui.console.print("[dim]Run 'tailor config show' to inspect the resolved configuration.[/dim]")


def handle_errors(func):
    """Decorator that catches TailorError and renders formatted CLI output.

    Usage::

        @app.command()
        @handle_errors
        def my_command(...):
            ...  # no try/except needed
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except TailorError as e:
            _render_tailor_error(e)
            if _debug_mode():
                ui.console.print(f"\n[dim]{traceback.format_exc()}[/dim]")
            raise typer.Exit(e.exit_code)
        except KeyboardInterrupt:
            ui.console.print("\n[dim]Interrupted.[/dim]")
            raise typer.Exit(130)
        except (typer.Exit, typer.Abort, SystemExit):
            raise
        except Exception as e:
            logger.debug("Unhandled error in %s", func.__name__, exc_info=True)
            ui.console.print(f"\n[bold red]Unexpected error:[/bold red] {e}")
            if _debug_mode():
                ui.console.print(f"\n[dim]{traceback.format_exc()}[/dim]")
            else:
                ui.console.print("[dim]Set TAILOR_DEBUG=1 for full traceback.[/dim]")
            raise typer.Exit(1)

    return wrapper
