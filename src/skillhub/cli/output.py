"""
Output formatting utilities for the CLI.

Provides consistent output formatting across all CLI commands.
"""

from typing import Any

from rich.console import Console
from rich.table import Table

from skillhub.skills.models import InstallMode, InstallResult

# Global console instance
console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")


def print_install_result(agent_name: str, result: InstallResult) -> None:
    """Print the outcome of installing a skill for one agent."""
    if not result.success:
        print_error(f"Failed to install to {agent_name}: {result.error or 'Unknown error'}")
    elif result.symlink_failed:
        print_warning(f"Installed to {agent_name} (copied, symlink unavailable)")
    elif result.mode is InstallMode.COPY:
        print_success(f"Copied to {agent_name}")
    else:
        print_success(f"Linked to {agent_name}")

    if result.path:
        console.print(f"  [dim]{result.path}[/dim]")


def print_table(
    headers: list[str],
    rows: list[list[Any]],
    title: str | None = None,
) -> None:
    """Print a table. The first column is highlighted."""
    table = Table(title=title)

    for i, header in enumerate(headers):
        table.add_column(header, style="cyan" if i == 0 else None)

    for row in rows:
        table.add_row(*[str(cell) for cell in row])

    console.print(table)
