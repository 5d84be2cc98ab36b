"""
Agent descriptor types for SkillHub.

An agent is an external AI coding tool with its own skills directory
convention. Every agent exposes the same capability set: presence
detection plus the legacy config-file install hooks.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel

if TYPE_CHECKING:
    from skillhub.skills.models import InstalledSkill

AgentFormat = Literal["markdown", "yaml", "json", "custom"]


class InstallOptions(BaseModel):
    """Scope options passed to the legacy agent hooks."""

    is_global: bool = False
    project_root: Path | None = None

    def base_dir(self) -> Path:
        """Directory project-scoped config paths resolve against."""
        return self.project_root or Path.cwd()


@dataclass(frozen=True)
class ConfigPath:
    """A config file an agent may also write skill references to."""

    type: Literal["global", "project"]
    path: str
    filename: str


@dataclass(frozen=True)
class AgentDescriptor:
    """Immutable description of one supported coding agent.

    Attributes:
        id: Unique registry key (e.g. ``claude-code``).
        name: Display name.
        format: Content format tag of the agent's config files.
        skills_dir: Project-relative skills directory.
        global_skills_dir: Absolute global skills directory.
        detect_installed: Returns True when the agent is present on this machine.
        install: Legacy hook writing a skill reference into a config file.
        uninstall: Legacy hook removing that reference.
        is_installed: Legacy hook checking for that reference.
        config_paths: Config files the legacy hooks may write to.
    """

    id: str
    name: str
    format: AgentFormat
    skills_dir: str
    global_skills_dir: Path
    detect_installed: Callable[[], bool]
    install: Callable[["InstalledSkill", InstallOptions], Path]
    uninstall: Callable[[str, InstallOptions], bool]
    is_installed: Callable[[str, InstallOptions], bool]
    config_paths: tuple[ConfigPath, ...] = field(default_factory=tuple)
