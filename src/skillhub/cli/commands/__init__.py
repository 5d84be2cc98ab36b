"""CLI command modules."""

from skillhub.cli.commands import agents, config, skill

__all__ = ["agents", "config", "skill"]
