"""
Pydantic configuration schema for SkillHub.

This module defines all configuration models with validation.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from skillhub.skills.models import InstallMode

# =============================================================================
# Install Configuration
# =============================================================================


class InstallConfig(BaseModel):
    """Defaults for skill installation."""

    model_config = ConfigDict(extra="allow")

    mode: InstallMode = Field(
        default=InstallMode.SYMLINK,
        description="symlink (central store + links) or copy (independent copies)",
    )
    scope: Literal["project", "global"] = Field(
        default="project",
        description="Install under the current project or the home directory",
    )
    agents: list[str] = Field(
        default_factory=list,
        description="Default target agent ids (empty = detected agents)",
    )

    @field_validator("agents", mode="before")
    @classmethod
    def _split_agents(cls, value: Any) -> Any:
        # A single id from the environment arrives as a plain string
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


# =============================================================================
# General Configuration
# =============================================================================


class GeneralConfig(BaseModel):
    """General settings configuration."""

    model_config = ConfigDict(extra="allow")

    verbose: bool = False


# =============================================================================
# Root Configuration Model
# =============================================================================


class Config(BaseModel):
    """
    Root configuration model for SkillHub.

    Configuration can be loaded from YAML files and environment variables,
    merged in order of priority.
    """

    model_config = ConfigDict(extra="allow")

    install: InstallConfig = Field(default_factory=InstallConfig)
    general: GeneralConfig = Field(default_factory=GeneralConfig)

    def is_global_default(self) -> bool:
        """Check whether installs default to global scope."""
        return self.install.scope == "global"
