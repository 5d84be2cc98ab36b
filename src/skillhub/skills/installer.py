"""
Skill installer for SkillHub.

Makes a skill visible to an agent in one of two modes:

- symlink: the skill is written once to the central store
  (``<base>/.skillhub/skills/<name>``) and linked into the agent's skills
  directory. If the link cannot be created the agent gets an independent
  copy instead and the result is flagged with ``symlink_failed``.
- copy: the skill is written straight into the agent's skills directory;
  no central copy is made.

Public operations never raise. Failures come back as an unsuccessful
InstallResult or as False.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from skillhub.agents.base import AgentDescriptor
from skillhub.agents.registry import get_registry
from skillhub.skills.files import copy_directory, is_link, remove_path
from skillhub.skills.linker import create_symlink
from skillhub.skills.models import InstallMode, InstallResult
from skillhub.skills.naming import sanitize_name
from skillhub.storage.paths import (
    ensure_directory,
    get_agent_skills_dir,
    get_skill_canonical_path,
)

logger = logging.getLogger(__name__)

SKILL_MANIFEST_FILE = "SKILL.md"

Populate = Callable[[Path], None]


def _write_manifest(content: str) -> Populate:
    def populate(skill_dir: Path) -> None:
        ensure_directory(skill_dir)
        (skill_dir / SKILL_MANIFEST_FILE).write_text(content, encoding="utf-8")

    return populate


def _copy_tree(source_dir: Path) -> Populate:
    def populate(skill_dir: Path) -> None:
        copy_directory(source_dir, skill_dir)

    return populate


def _agent_skill_path(
    agent: AgentDescriptor, name: str, is_global: bool, cwd: str | Path | None
) -> Path:
    return get_agent_skills_dir(agent, is_global, cwd) / name


def _discard(path: Path) -> None:
    """Remove a partial link artifact, ignoring failures."""
    try:
        remove_path(path)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not clean up {path}: {e}")


def _link_or_copy(canonical_path: Path, agent_path: Path, populate: Populate) -> InstallResult:
    """Link the agent path to the canonical copy, falling back to a copy."""
    if create_symlink(canonical_path, agent_path):
        return InstallResult(
            success=True,
            path=agent_path,
            canonical_path=canonical_path,
            mode=InstallMode.SYMLINK,
        )

    logger.warning(f"Symlink failed, copying skill to {agent_path} instead")
    _discard(agent_path)
    populate(agent_path)
    return InstallResult(
        success=True,
        path=agent_path,
        canonical_path=canonical_path,
        mode=InstallMode.SYMLINK,
        symlink_failed=True,
    )


def _install(
    skill_slug: str,
    agent_id: str,
    populate: Populate,
    mode: InstallMode | str,
    is_global: bool,
    cwd: str | Path | None,
) -> InstallResult:
    install_mode = InstallMode(mode)

    agent = get_registry().get(agent_id)
    if agent is None:
        return InstallResult(success=False, mode=install_mode, error=f"Unknown agent: {agent_id}")

    cwd = cwd or os.getcwd()
    name = sanitize_name(skill_slug)
    agent_path = _agent_skill_path(agent, name, is_global, cwd)

    try:
        if install_mode is InstallMode.COPY:
            # Never write through a link left by an earlier symlink install
            if is_link(agent_path):
                remove_path(agent_path)
            populate(agent_path)
            logger.debug(f"Copied skill '{name}' to {agent_path}")
            return InstallResult(success=True, path=agent_path, mode=InstallMode.COPY)

        canonical_path = get_skill_canonical_path(name, is_global, cwd)
        populate(canonical_path)
        return _link_or_copy(canonical_path, agent_path, populate)

    except (OSError, ValueError) as e:
        logger.debug(f"Failed to install skill '{name}' for {agent_id}: {e}")
        return InstallResult(success=False, path=agent_path, mode=install_mode, error=str(e))


def install_skill_for_agent(
    skill_slug: str,
    skill_content: str,
    agent_id: str,
    *,
    mode: InstallMode | str = InstallMode.SYMLINK,
    is_global: bool = False,
    cwd: str | Path | None = None,
) -> InstallResult:
    """Install a skill given as SKILL.md text.

    Args:
        skill_slug: Skill name or slug; sanitized into the directory name.
        skill_content: Text written to SKILL.md.
        agent_id: Target agent id.
        mode: ``symlink`` (default) or ``copy``.
        is_global: Install under the home directory instead of the project.
        cwd: Project root for project scope. Defaults to the current directory.

    Returns:
        InstallResult describing where the skill ended up.
    """
    return _install(skill_slug, agent_id, _write_manifest(skill_content), mode, is_global, cwd)


def install_skill_dir_for_agent(
    skill_slug: str,
    source_dir: str | Path,
    agent_id: str,
    *,
    mode: InstallMode | str = InstallMode.SYMLINK,
    is_global: bool = False,
    cwd: str | Path | None = None,
) -> InstallResult:
    """Install a skill from a directory of files.

    Same behavior as install_skill_for_agent, but the whole source tree is
    copied (minus housekeeping files) instead of a single SKILL.md.
    """
    return _install(skill_slug, agent_id, _copy_tree(Path(source_dir)), mode, is_global, cwd)


def uninstall_skill_for_agent(
    skill_slug: str,
    agent_id: str,
    *,
    is_global: bool = False,
    cwd: str | Path | None = None,
) -> bool:
    """Remove a skill from an agent's skills directory.

    In symlink mode only the link is removed; the canonical copy stays
    because other agents may still point at it.

    Returns:
        True if the agent path is gone, False for an unknown agent or a
        failed removal.
    """
    agent = get_registry().get(agent_id)
    if agent is None:
        return False

    agent_path = _agent_skill_path(agent, sanitize_name(skill_slug), is_global, cwd)

    try:
        remove_path(agent_path)
    except (OSError, ValueError) as e:
        logger.debug(f"Failed to remove {agent_path}: {e}")
        return False

    logger.debug(f"Removed skill from {agent_path}")
    return True


def is_skill_installed_for_agent(
    skill_slug: str,
    agent_id: str,
    *,
    is_global: bool = False,
    cwd: str | Path | None = None,
) -> bool:
    """Check whether a skill is present in an agent's skills directory.

    Presence only: a link is not checked for pointing at the right place,
    but a dangling link counts as not installed.
    """
    agent = get_registry().get(agent_id)
    if agent is None:
        return False

    agent_path = _agent_skill_path(agent, sanitize_name(skill_slug), is_global, cwd)
    try:
        return os.access(agent_path, os.F_OK)
    except ValueError:
        # Not representable on this filesystem
        return False


def create_symlink_to_agent(central_skill_dir: str | Path, agent_skill_path: str | Path) -> InstallResult:
    """Link an already populated canonical directory into an agent directory.

    Used when the central copy was written by someone else (for example a
    downloader). On link failure the canonical directory is copied instead.
    """
    canonical_path = Path(central_skill_dir)
    agent_path = Path(agent_skill_path)

    try:
        return _link_or_copy(canonical_path, agent_path, _copy_tree(canonical_path))
    except (OSError, ValueError) as e:
        logger.debug(f"Failed to install {canonical_path} to {agent_path}: {e}")
        return InstallResult(
            success=False,
            path=agent_path,
            mode=InstallMode.SYMLINK,
            error=str(e),
        )
