"""Rich console output formatting utilities."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from closematch.cli.context import CLIContext

__all__ = [
    "console",
    "error_console",
    "print_did_you_mean",
    "print_error",
    "print_info",
    "print_options_table",
    "print_warning",
]

# Shared console instance
console = Console()
error_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message.

    Suppressed when --quiet flag is set.
    """
    if not CLIContext.get().quiet:
        console.print(f"[blue]i[/blue] {escape(message)}")


def print_did_you_mean(suggestions: list[str]) -> None:
    """Print 'Did you mean?' suggestions.

    The header is omitted in quiet mode so output stays one suggestion
    per line.

    Args:
        suggestions: Display names of matched candidates, in result order.
    """
    if not suggestions:
        return

    if not CLIContext.get().quiet:
        console.print("[dim]Did you mean?[/dim]")
    for name in suggestions:
        console.print(f"  [cyan]{escape(name)}[/cyan]")


def print_options_table(options: dict[str, Any]) -> None:
    """Print effective matching options as a two-column table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Option", style="cyan")
    table.add_column("Value")

    for name, value in options.items():
        if name == "version":
            continue
        table.add_row(name, escape(str(value)))

    console.print(table)
