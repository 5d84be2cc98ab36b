"""
skillhub config - Configuration commands.

Usage:
    skillhub config show
    skillhub config path
"""

import typer
import yaml
from rich.console import Console
from rich.syntax import Syntax

from skillhub.config import ConfigurationError, get_config_sources, load_config
from skillhub.storage.paths import get_global_config_path, get_manifest_path

app = typer.Typer(
    name="config",
    help="Configuration management.",
)

console = Console()


@app.command()
def show() -> None:
    """Show the merged configuration."""
    try:
        config = load_config()
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    content = yaml.dump(
        config.model_dump(mode="json"),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    console.print(Syntax(content, "yaml"))


@app.command()
def path() -> None:
    """Show configuration and manifest locations."""
    sources = get_config_sources()

    console.print(f"[bold]Global config:[/bold] {get_global_config_path()}")
    if sources["global"] is None:
        console.print("  [dim](not created)[/dim]")
    console.print(f"[bold]Project config:[/bold] {sources['project'] or '[dim](none)[/dim]'}")
    console.print(f"[bold]Manifest:[/bold] {get_manifest_path()}")
