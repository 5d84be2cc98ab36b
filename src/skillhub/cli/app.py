"""
Main Typer application for the skillhub CLI.

This module defines the root CLI application and registers all commands.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from skillhub import __version__
from skillhub.cli.commands import agents, config, skill
from skillhub.cli.output import print_info
from skillhub.config import ConfigurationError, get_config

app = typer.Typer(
    name="skillhub",
    help="Install skills for every AI coding tool on your machine.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"skillhub version [green]{__version__}[/green]")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route log records through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )


# noinspection PyUnusedLocal
@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging.",
        ),
    ] = False,
) -> None:
    """
    [bold blue]skillhub[/bold blue] - skill package manager for AI coding tools

    Skills are stored once in [bold]~/.skillhub/skills[/bold] (or the
    project's [bold].skillhub/skills[/bold]) and linked into each agent's
    skills directory.
    """
    if not verbose:
        try:
            verbose = get_config().general.verbose
        except ConfigurationError:
            pass  # Reported by the command that needs the config
    setup_logging(verbose)


app.command("add")(skill.add)
app.command("remove")(skill.remove)
app.command("list")(skill.list_skills)
app.command("status")(skill.status)
app.add_typer(agents.app, name="agents")
app.add_typer(config.app, name="config")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
