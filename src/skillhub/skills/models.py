"""
Skill models for SkillHub.

Defines installation outcomes and the records kept in the local manifest.
"""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class InstallMode(str, Enum):
    """How a skill is made visible to an agent."""

    SYMLINK = "symlink"
    COPY = "copy"


class InstallResult(BaseModel):
    """Outcome of one installer operation.

    Built fresh for every call and never persisted by the installer.
    """

    success: bool
    path: Path | None = Field(default=None, description="Agent-facing skill path")
    canonical_path: Path | None = Field(
        default=None,
        description="Central store path (symlink mode only)",
    )
    mode: InstallMode = InstallMode.SYMLINK
    symlink_failed: bool = Field(
        default=False,
        description="Linking failed and an independent copy was made instead",
    )
    error: str | None = None


class InstalledSkill(BaseModel):
    """A skill recorded in the local manifest."""

    name: str = Field(..., description="Skill display name")
    slug: str = Field(..., description="Unique skill identifier")
    version: str = Field(default="latest")
    skill_id: str | None = Field(default=None, description="Registry identifier, if any")
    installed_at: datetime = Field(default_factory=datetime.now)
    installed_to: list[str] = Field(default_factory=list, description="Agent ids")
    paths: dict[str, str] = Field(
        default_factory=dict,
        description="Map of agent id to agent-facing skill path",
    )
    canonical_path: str | None = None
    mode: InstallMode = InstallMode.SYMLINK
    is_global: bool = False
    project_path: str | None = Field(
        default=None,
        description="Project root of a project-scoped install",
    )


class SkillManifest(BaseModel):
    """The local record of installed skills."""

    version: str = Field(default="1.0.0", description="Manifest format version")
    skills: dict[str, InstalledSkill] = Field(
        default_factory=dict,
        description="Map of skill slug to installed skill",
    )
    updated_at: datetime = Field(default_factory=datetime.now)

    def add_skill(self, skill: InstalledSkill) -> None:
        """Add or replace a skill."""
        self.skills[skill.slug] = skill
        self.updated_at = datetime.now()

    def remove_skill(self, slug: str) -> bool:
        """Remove a skill.

        Returns:
            True if the skill was removed, False if not found.
        """
        if slug in self.skills:
            del self.skills[slug]
            self.updated_at = datetime.now()
            return True
        return False

    def list_all(self) -> list[InstalledSkill]:
        """List all recorded skills."""
        return list(self.skills.values())


class SkillFrontmatter(BaseModel):
    """Frontmatter parsed from SKILL.md."""

    name: str = Field(..., description="Skill name, also used as the folder name")
    description: str = Field(default="", description="Short description")
    version: str | None = Field(default=None, description="Skill version, if declared")

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> Any:
        # YAML reads "1.0" as a float
        if isinstance(value, (int, float)):
            return str(value)
        return value
