"""
Skill manager for SkillHub.

Installs a skill for several agents at once on top of the installer, and
keeps the local manifest in step.
"""

import logging
from pathlib import Path

from skillhub.agents.base import InstallOptions
from skillhub.agents.registry import AgentRegistry, get_registry
from skillhub.config import Config, get_config
from skillhub.skills.installer import (
    install_skill_dir_for_agent,
    is_skill_installed_for_agent,
    uninstall_skill_for_agent,
)
from skillhub.skills.manifest import load_manifest, save_manifest
from skillhub.skills.models import InstalledSkill, InstallMode, InstallResult
from skillhub.skills.naming import sanitize_name
from skillhub.skills.parser import read_skill_directory

logger = logging.getLogger(__name__)

DEFAULT_AGENT = "claude-code"


class SkillManager:
    """Main interface for installing and removing skills across agents.

    Provides methods to:
    - Pick target agents (explicit, all, configured or detected)
    - Install a skill directory for several agents
    - Remove a skill from agents
    - Report per-agent presence
    """

    def __init__(
        self,
        project_path: Path | None = None,
        registry: AgentRegistry | None = None,
        config: Config | None = None,
    ):
        """Initialize the skill manager.

        Args:
            project_path: Project root for project-scoped installs. Defaults to cwd.
            registry: Agent registry. Defaults to the process-wide registry.
            config: Configuration. Defaults to the loaded configuration.
        """
        self.project_path = project_path or Path.cwd()
        self.registry = registry or get_registry()
        self._config = config

    @property
    def config(self) -> Config:
        """Get the configuration (lazy loaded)."""
        if self._config is None:
            self._config = get_config()
        return self._config

    def resolve_agents(self, agent_ids: list[str] | None = None, all_agents: bool = False) -> list[str]:
        """Decide which agents to target.

        Order: explicit ids, every registered agent, configured defaults,
        detected agents, then Claude Code.

        Raises:
            UnknownAgentError: If an explicit or configured id is not registered.
        """
        if agent_ids:
            candidates = list(dict.fromkeys(agent_ids))
        elif all_agents:
            return self.registry.list_agent_ids()
        elif self.config.install.agents:
            candidates = list(self.config.install.agents)
        else:
            candidates = self.registry.detect_installed_agents() or [DEFAULT_AGENT]

        for agent_id in candidates:
            self.registry.require(agent_id)
        return candidates

    def add_skill(
        self,
        source: Path,
        agent_ids: list[str],
        is_global: bool = False,
        mode: InstallMode | str = InstallMode.SYMLINK,
        name: str | None = None,
        write_config: bool = False,
    ) -> dict[str, InstallResult]:
        """Install a skill directory for several agents.

        Args:
            source: Directory containing SKILL.md.
            agent_ids: Target agent ids.
            is_global: Install under the home directory.
            mode: ``symlink`` or ``copy``.
            name: Override the skill name from SKILL.md.
            write_config: Also reference the skill from each agent's config file.

        Returns:
            Map of agent id to InstallResult.

        Raises:
            SkillParseError: If the source is not a valid skill directory.
            UnknownAgentError: If an agent id is not registered.
        """
        for agent_id in agent_ids:
            self.registry.require(agent_id)

        frontmatter = read_skill_directory(source)
        skill_name = name or frontmatter.name
        slug = sanitize_name(skill_name)

        results: dict[str, InstallResult] = {}
        for agent_id in agent_ids:
            results[agent_id] = install_skill_dir_for_agent(
                slug,
                source,
                agent_id,
                mode=mode,
                is_global=is_global,
                cwd=self.project_path,
            )

        installed = {agent_id: r for agent_id, r in results.items() if r.success}
        if not installed:
            return results

        canonical = next((r.canonical_path for r in installed.values() if r.canonical_path), None)
        skill = InstalledSkill(
            name=skill_name,
            slug=slug,
            version=frontmatter.version or "latest",
            installed_to=list(installed),
            paths={agent_id: str(r.path) for agent_id, r in installed.items()},
            canonical_path=str(canonical) if canonical else None,
            mode=InstallMode(mode),
            is_global=is_global,
            project_path=None if is_global else str(self.project_path),
        )
        self._record(skill)

        if write_config:
            options = self._options(is_global)
            for agent_id in installed:
                config_file = self.registry.require(agent_id).install(skill, options)
                logger.debug(f"Referenced '{slug}' from {config_file}")

        return results

    def remove_skill(
        self,
        name: str,
        agent_ids: list[str] | None = None,
        is_global: bool = False,
    ) -> dict[str, bool]:
        """Remove a skill from agents.

        The canonical copy in the central store is kept.

        Args:
            name: Skill name or slug.
            agent_ids: Agents to remove from. Defaults to the agents recorded in
                the manifest, else every agent that has the skill.
            is_global: Remove from the global scope.

        Returns:
            Map of agent id to removal success. Empty if nothing was installed.
            An agent whose config file could not be updated reports False.

        Raises:
            UnknownAgentError: If an agent id is not registered.
        """
        slug = sanitize_name(name)
        manifest = load_manifest()
        recorded = manifest.skills.get(slug)

        if agent_ids:
            for agent_id in agent_ids:
                self.registry.require(agent_id)
            targets = list(agent_ids)
        elif recorded and self._same_scope(recorded, is_global):
            targets = [a for a in recorded.installed_to if a in self.registry]
        else:
            status = self.skill_status(slug, is_global)
            targets = [agent_id for agent_id, present in status.items() if present]

        options = self._options(is_global)
        results: dict[str, bool] = {}
        for agent_id in targets:
            results[agent_id] = uninstall_skill_for_agent(
                slug, agent_id, is_global=is_global, cwd=self.project_path
            )
            agent = self.registry.require(agent_id)
            try:
                if agent.is_installed(slug, options):
                    agent.uninstall(slug, options)
            except OSError as e:
                logger.warning(f"Could not update config file of {agent.name}: {e}")
                results[agent_id] = False

        if recorded and self._same_scope(recorded, is_global):
            removed = {agent_id for agent_id, ok in results.items() if ok}
            recorded.installed_to = [a for a in recorded.installed_to if a not in removed]
            for agent_id in removed:
                recorded.paths.pop(agent_id, None)
            if recorded.installed_to:
                manifest.add_skill(recorded)
            else:
                manifest.remove_skill(slug)
            save_manifest(manifest)

        return results

    def skill_status(self, name: str, is_global: bool = False) -> dict[str, bool]:
        """Report whether a skill is present for every registered agent."""
        slug = sanitize_name(name)
        return {
            agent_id: is_skill_installed_for_agent(
                slug, agent_id, is_global=is_global, cwd=self.project_path
            )
            for agent_id in self.registry.list_agent_ids()
        }

    def list_installed(self) -> list[InstalledSkill]:
        """List skills recorded in the manifest."""
        return load_manifest().list_all()

    def _same_scope(self, skill: InstalledSkill, is_global: bool) -> bool:
        """Check whether a manifest entry belongs to this scope and project."""
        if skill.is_global != is_global:
            return False
        return is_global or skill.project_path == str(self.project_path)

    def _options(self, is_global: bool) -> InstallOptions:
        return InstallOptions(is_global=is_global, project_root=self.project_path)

    def _record(self, skill: InstalledSkill) -> None:
        manifest = load_manifest()
        previous = manifest.skills.get(skill.slug)
        if previous and self._same_scope(previous, skill.is_global):
            # Keep agents installed by earlier runs
            skill.installed_to = list(dict.fromkeys(previous.installed_to + skill.installed_to))
            skill.paths = {**previous.paths, **skill.paths}
        manifest.add_skill(skill)
        save_manifest(manifest)
