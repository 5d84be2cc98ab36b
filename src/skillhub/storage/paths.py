"""
Path utilities for SkillHub.

Provides consistent path resolution for configuration, the local manifest,
the central skills store and agent skills directories.

The central store and agent directory helpers are pure: they never touch
the filesystem.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skillhub.agents.base import AgentDescriptor

SKILLHUB_DIR = ".skillhub"
SKILLS_SUBDIR = "skills"


def get_skillhub_home() -> Path:
    """
    Get the SkillHub home directory.

    Resolution order:
    1. SKILLHUB_HOME environment variable
    2. Default: ~/.skillhub

    Returns:
        Path to the SkillHub home directory.
    """
    env_home = os.environ.get("SKILLHUB_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / SKILLHUB_DIR


def get_global_config_path() -> Path:
    """
    Get the path to the global configuration file.

    Returns:
        Path to ~/.skillhub/config.yaml
    """
    return get_skillhub_home() / "config.yaml"


def get_manifest_path() -> Path:
    """
    Get the path to the installed skills manifest.

    Returns:
        Path to ~/.skillhub/installed.json
    """
    return get_skillhub_home() / "installed.json"


def find_project_config(start_path: Path | None = None) -> Path | None:
    """
    Find the project configuration file by traversing up the directory tree.

    Looks for .skillhub/config.yaml starting from the given path
    (or current directory) and moving up to the root.

    Args:
        start_path: Starting directory to search from. Defaults to cwd.

    Returns:
        Path to the project config if found, None otherwise.
    """
    if start_path is None:
        start_path = Path.cwd()
    else:
        start_path = Path(start_path).resolve()

    current = start_path
    while current != current.parent:
        project_config = current / SKILLHUB_DIR / "config.yaml"
        if project_config.is_file():
            return project_config
        current = current.parent

    project_config = current / SKILLHUB_DIR / "config.yaml"
    if project_config.is_file():
        return project_config

    return None


def get_central_skills_dir(is_global: bool = True, cwd: str | Path | None = None) -> Path:
    """
    Get the central skills store shared by all agents.

    Args:
        is_global: Resolve under the home directory instead of the project.
        cwd: Project root. Defaults to the current directory at call time.

    Returns:
        Path to ~/.skillhub/skills or <project>/.skillhub/skills
    """
    if is_global:
        base_dir = Path.home()
    else:
        base_dir = Path(cwd) if cwd else Path.cwd()
    return base_dir / SKILLHUB_DIR / SKILLS_SUBDIR


def get_skill_canonical_path(
    skill_slug: str, is_global: bool = True, cwd: str | Path | None = None
) -> Path:
    """
    Get the canonical location of one skill in the central store.

    The slug is joined as given; callers sanitize it first.
    """
    return get_central_skills_dir(is_global, cwd) / skill_slug


def get_agent_skills_dir(
    agent: "AgentDescriptor", is_global: bool, cwd: str | Path | None = None
) -> Path:
    """
    Get the directory where an agent expects to find skill folders.

    Args:
        agent: Agent descriptor.
        is_global: Use the agent's global directory.
        cwd: Project root for project scope. Defaults to the current directory.

    Returns:
        The agent's global skills directory, or the project directory joined
        with the agent's relative skills directory.
    """
    if is_global:
        return Path(agent.global_skills_dir)
    base_dir = Path(cwd) if cwd else Path.cwd()
    return base_dir / agent.skills_dir


def ensure_directory(path: Path, mode: int = 0o755) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path.
        mode: Permission mode for created directories.

    Returns:
        The path (for chaining).
    """
    path.mkdir(parents=True, exist_ok=True, mode=mode)
    return path
