"""
skillhub add/remove/list/status - Skill installation commands.

Usage:
    skillhub add ./pdf-reader --agent claude-code --agent cursor
    skillhub add ./pdf-reader --all --global --mode copy
    skillhub remove pdf-reader
    skillhub list --json
    skillhub status pdf-reader
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from skillhub.agents.registry import UnknownAgentError
from skillhub.cli.output import (
    print_error,
    print_install_result,
    print_success,
    print_table,
    print_warning,
)
from skillhub.skills.manager import SkillManager
from skillhub.skills.models import InstallMode
from skillhub.skills.parser import SkillParseError

console = Console()


def _resolve_scope(manager: SkillManager, is_global: bool) -> bool:
    return is_global or manager.config.is_global_default()


def add(
    source: Annotated[
        Path,
        typer.Argument(
            help="Skill directory containing SKILL.md.",
        ),
    ],
    agents: Annotated[
        list[str] | None,
        typer.Option(
            "--agent",
            "-a",
            help="Target agent id (repeatable).",
        ),
    ] = None,
    all_agents: Annotated[
        bool,
        typer.Option(
            "--all",
            help="Install for every supported agent.",
        ),
    ] = False,
    is_global: Annotated[
        bool,
        typer.Option(
            "--global",
            "-g",
            help="Install in the home directory instead of the current project.",
        ),
    ] = False,
    mode: Annotated[
        InstallMode | None,
        typer.Option(
            "--mode",
            "-m",
            help="symlink (shared central copy) or copy (independent copies).",
            case_sensitive=False,
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option(
            "--name",
            "-n",
            help="Override the skill name from SKILL.md.",
        ),
    ] = None,
    write_config: Annotated[
        bool,
        typer.Option(
            "--write-config",
            help="Also reference the skill from each agent's instructions file.",
        ),
    ] = False,
) -> None:
    """Install a skill from a local directory."""
    manager = SkillManager()

    try:
        target_agents = manager.resolve_agents(agents, all_agents=all_agents)
        results = manager.add_skill(
            source,
            target_agents,
            is_global=_resolve_scope(manager, is_global),
            mode=mode or manager.config.install.mode,
            name=name,
            write_config=write_config,
        )
    except UnknownAgentError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except SkillParseError as e:
        print_error(f"Invalid skill: {e}")
        raise typer.Exit(1)
    except (OSError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(1)

    for agent_id, result in results.items():
        print_install_result(manager.registry.require(agent_id).name, result)

    if not all(result.success for result in results.values()):
        raise typer.Exit(1)


def remove(
    name: Annotated[
        str,
        typer.Argument(
            help="Skill name to remove.",
        ),
    ],
    agents: Annotated[
        list[str] | None,
        typer.Option(
            "--agent",
            "-a",
            help="Only remove from this agent (repeatable).",
        ),
    ] = None,
    is_global: Annotated[
        bool,
        typer.Option(
            "--global",
            "-g",
            help="Remove from the home directory instead of the current project.",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip confirmation.",
        ),
    ] = False,
) -> None:
    """Remove a skill from agents. The central copy is kept."""
    manager = SkillManager()
    scope = _resolve_scope(manager, is_global)

    if not yes:
        confirmed = typer.confirm(f"Remove skill '{name}'?")
        if not confirmed:
            console.print("[dim]Cancelled.[/dim]")
            return

    try:
        results = manager.remove_skill(name, agents, is_global=scope)
    except UnknownAgentError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except OSError as e:
        print_error(f"Failed to remove skill: {e}")
        raise typer.Exit(1)

    if not results:
        print_warning(f"Skill '{name}' is not installed.")
        return

    failed = False
    for agent_id, removed in results.items():
        if removed:
            print_success(f"Removed from {manager.registry.require(agent_id).name}")
        else:
            failed = True
            print_error(f"Failed to remove from {manager.registry.require(agent_id).name}")

    if failed:
        raise typer.Exit(1)


def list_skills(
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """List installed skills."""
    manager = SkillManager()
    skills = manager.list_installed()

    if as_json:
        typer.echo(json.dumps([s.model_dump(mode="json") for s in skills], indent=2))
        return

    if not skills:
        console.print("[yellow]No skills installed.[/yellow]")
        console.print("[dim]Install one: skillhub add ./my-skill[/dim]")
        return

    table = Table(title="Installed Skills")
    table.add_column("Name", style="cyan")
    table.add_column("Version", style="dim")
    table.add_column("Agents")
    table.add_column("Mode", style="dim")
    table.add_column("Scope", style="dim")

    for skill in skills:
        table.add_row(
            skill.name,
            skill.version,
            ", ".join(skill.installed_to),
            skill.mode.value,
            "global" if skill.is_global else "project",
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(skills)} skill(s)[/dim]")


def status(
    name: Annotated[
        str,
        typer.Argument(
            help="Skill name.",
        ),
    ],
    is_global: Annotated[
        bool,
        typer.Option(
            "--global",
            "-g",
            help="Check the home directory instead of the current project.",
        ),
    ] = False,
) -> None:
    """Show which agents have a skill installed."""
    manager = SkillManager()
    presence = manager.skill_status(name, is_global=_resolve_scope(manager, is_global))

    print_table(
        ["Agent", "Installed"],
        [
            [agent_id, "[green]yes[/green]" if installed else "[dim]no[/dim]"]
            for agent_id, installed in presence.items()
        ],
        title=f"Skill: {name}",
    )
