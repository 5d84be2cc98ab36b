"""
skillhub agents - Supported coding agents.

Usage:
    skillhub agents list
    skillhub agents detect
"""

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from skillhub.agents.registry import get_registry

app = typer.Typer(
    name="agents",
    help="Supported AI coding agents.",
)

console = Console()


@app.command("list")
def list_agents(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show skills directories.",
        ),
    ] = False,
) -> None:
    """List supported agents."""
    registry = get_registry()
    detected = set(registry.detect_installed_agents())

    table = Table(title="Supported Agents")
    table.add_column("Id", style="cyan")
    table.add_column("Name")
    table.add_column("Detected")

    if verbose:
        table.add_column("Project Dir", style="dim")
        table.add_column("Global Dir", style="dim")

    for agent in registry.list_agents():
        row = [
            agent.id,
            agent.name,
            "[green]yes[/green]" if agent.id in detected else "[dim]no[/dim]",
        ]
        if verbose:
            row.append(agent.skills_dir)
            row.append(str(agent.global_skills_dir))
        table.add_row(*row)

    console.print(table)


@app.command()
def detect() -> None:
    """Detect which agents are installed on this machine."""
    registry = get_registry()
    detected = registry.detect_installed_agents()

    if not detected:
        console.print("[yellow]No supported agents detected.[/yellow]")
        return

    console.print(f"Detected {len(detected)} agent(s):")
    for agent_id in detected:
        console.print(f"  [cyan]{agent_id}[/cyan] {registry.require(agent_id).name}")
