"""Shared UI components for the uxguard CLI."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

theme = Theme(
    {
        "info": "dim cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "tip": "blue",
        "tip.label": "bold blue",
    }
)

console = Console(theme=theme)
error_console = Console(theme=theme, stderr=True)


def print_error(title: str, message: str, tip: str | None = None) -> None:
    """Print a styled error message with an optional actionable tip."""
    content = Text()
    content.append(f"{message}\n", style="white")

    if tip:
        content.append("\nTip: ", style="tip.label")
        content.append(tip, style="tip")

    error_console.print(
        Panel(
            content,
            title=f"[error]Error: {title}[/error]",
            border_style="red",
            padding=(1, 1),
        )
    )


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]✓[/bold green] {message}")
