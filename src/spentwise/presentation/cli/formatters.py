"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels) out of the command module; this
module knows nothing about the store or the backend.
"""

from __future__ import annotations

from typing import Any, Iterable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "SpentWise") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {escape(message)}[/]")


# ---------------------------------------------------------------------------
# Settings table
# ---------------------------------------------------------------------------


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "on" if value else "off"
    if value == "":
        return "[dim](empty)[/]"
    return escape(str(value))


def settings_table(title: str, rows: Iterable[tuple[str, Any, Any, bool]]) -> None:
    """Print one category of settings.

    Each row is ``(key, value, default, customized)``.
    """
    table = Table(title=title, show_header=True, border_style="blue")
    table.add_column("Key", style="cyan", width=22)
    table.add_column("Value", style="green")
    table.add_column("Default", style="dim")
    table.add_column("", width=3)

    for key, value, default, customized in rows:
        table.add_row(key, _render(value), _render(default), "✎" if customized else "")

    console.print(table)
