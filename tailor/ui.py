"""Shared UI theme, console, logging and display helpers for tailor."""

import json
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.theme import Theme

# ── Output Mode State ──
_plain_mode: bool = False


def set_plain_mode(enabled: bool = True) -> None:
    """Enable or disable plain text output (no colors, no panels, ASCII only)."""
    global _plain_mode, console
    _plain_mode = enabled
    if enabled:
        console = Console(theme=TAILOR_THEME, no_color=True, highlight=False)


def print_json_output(data: dict | list) -> None:
    """Print data as formatted JSON to stdout."""
    print(json.dumps(data, indent=2, default=str))


# ── Theme ──
TAILOR_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "yellow",
    "error": "bold red",
    "priority.high": "bold red",
    "priority.medium": "yellow",
    "priority.low": "dim",
    "brand": "bold cyan",
    "muted": "dim",
})

console = Console(theme=TAILOR_THEME)

# ── Status Icons ──
ICONS = {
    "present": "[green]✔[/green]",   # checkmark
    "missing": "[red]✘[/red]",       # cross
}

# ASCII equivalents for plain mode
PLAIN_ICONS = {
    "present": "[OK]",
    "missing": "[--]",
}


def flag_icon(present: bool) -> str:
    """Icon for a marker-file flag."""
    key = "present" if present else "missing"
    if _plain_mode:
        return PLAIN_ICONS[key]
    return ICONS[key]


def setup_logging(level: str = "INFO") -> None:
    """Configure logging with a Rich handler bound to stderr.

    stdout carries MCP traffic when running as a server, so log output
    must never go there.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
        )],
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("mcp").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def success_panel(title: str, content=None):
    """Display a success panel."""
    if _plain_mode:
        print(f"OK: {title}")
        if content:
            print(f"  {content}")
        return

    console.print(Panel(
        content or "",
        title=f"[bold green]{title}[/bold green]",
        border_style="green",
    ))
