"""
Built-in agent descriptors.

Descriptors are built at call time so that global directories follow the
current home directory.
"""

from dataclasses import dataclass
from pathlib import Path

from skillhub.agents.base import AgentDescriptor, AgentFormat, ConfigPath
from skillhub.agents.legacy import MarkdownBlockWriter
from skillhub.agents.registry import AgentRegistry


@dataclass(frozen=True)
class BuiltinAgent:
    """Directory conventions of a built-in agent, relative to home or project."""

    id: str
    name: str
    skills_dir: str
    global_skills_dir: str
    home_dir: str
    config_paths: tuple[ConfigPath, ...]
    format: AgentFormat = "markdown"


BUILTIN_AGENTS: tuple[BuiltinAgent, ...] = (
    BuiltinAgent(
        id="claude-code",
        name="Claude Code",
        skills_dir=".claude/skills",
        global_skills_dir=".claude/skills",
        home_dir=".claude",
        config_paths=(
            ConfigPath(type="global", path=".claude", filename="CLAUDE.md"),
            ConfigPath(type="project", path=".", filename="CLAUDE.md"),
        ),
    ),
    BuiltinAgent(
        id="cursor",
        name="Cursor",
        skills_dir=".cursor/skills",
        global_skills_dir=".cursor/skills",
        home_dir=".cursor",
        config_paths=(
            ConfigPath(type="global", path=".cursor/rules", filename="skillhub.mdc"),
            ConfigPath(type="project", path=".cursor/rules", filename="skillhub.mdc"),
        ),
    ),
    BuiltinAgent(
        id="codex",
        name="Codex",
        skills_dir=".codex/skills",
        global_skills_dir=".codex/skills",
        home_dir=".codex",
        config_paths=(
            ConfigPath(type="global", path=".codex", filename="AGENTS.md"),
            ConfigPath(type="project", path=".", filename="AGENTS.md"),
        ),
    ),
    BuiltinAgent(
        id="opencode",
        name="OpenCode",
        skills_dir=".opencode/skills",
        global_skills_dir=".config/opencode/skills",
        home_dir=".config/opencode",
        config_paths=(
            ConfigPath(type="global", path=".config/opencode", filename="AGENTS.md"),
            ConfigPath(type="project", path=".", filename="AGENTS.md"),
        ),
    ),
    BuiltinAgent(
        id="gemini-cli",
        name="Gemini CLI",
        skills_dir=".gemini/skills",
        global_skills_dir=".gemini/skills",
        home_dir=".gemini",
        config_paths=(
            ConfigPath(type="global", path=".gemini", filename="GEMINI.md"),
            ConfigPath(type="project", path=".", filename="GEMINI.md"),
        ),
    ),
    BuiltinAgent(
        id="windsurf",
        name="Windsurf",
        skills_dir=".windsurf/skills",
        global_skills_dir=".codeium/windsurf/skills",
        home_dir=".codeium/windsurf",
        config_paths=(
            ConfigPath(type="global", path=".codeium/windsurf/memories", filename="global_rules.md"),
            ConfigPath(type="project", path=".", filename=".windsurfrules"),
        ),
    ),
    BuiltinAgent(
        id="github-copilot",
        name="GitHub Copilot",
        skills_dir=".github/skills",
        global_skills_dir=".copilot/skills",
        home_dir=".copilot",
        config_paths=(
            ConfigPath(type="global", path=".copilot", filename="copilot-instructions.md"),
            ConfigPath(type="project", path=".github", filename="copilot-instructions.md"),
        ),
    ),
)


def build_agent(entry: BuiltinAgent, home: Path | None = None) -> AgentDescriptor:
    """Build a descriptor for a built-in agent rooted at the given home directory."""
    home = home or Path.home()
    writer = MarkdownBlockWriter(home, entry.config_paths)
    agent_home = home / entry.home_dir

    return AgentDescriptor(
        id=entry.id,
        name=entry.name,
        format=entry.format,
        skills_dir=entry.skills_dir,
        global_skills_dir=home / entry.global_skills_dir,
        detect_installed=agent_home.is_dir,
        install=writer.install,
        uninstall=writer.uninstall,
        is_installed=writer.is_installed,
        config_paths=entry.config_paths,
    )


def register_builtin_agents(registry: AgentRegistry, home: Path | None = None) -> None:
    """Register every built-in agent."""
    for entry in BUILTIN_AGENTS:
        registry.register(build_agent(entry, home))
