"""
Local manifest of installed skills.

Records which skills are installed, where, and for which agents, in
~/.skillhub/installed.json.
"""

import logging

from pydantic import ValidationError

from skillhub.skills.models import InstalledSkill, SkillManifest
from skillhub.storage.paths import get_manifest_path

logger = logging.getLogger(__name__)


def load_manifest() -> SkillManifest:
    """Load the manifest from disk.

    Returns:
        SkillManifest (empty if the file doesn't exist or is invalid).
    """
    manifest_path = get_manifest_path()

    if not manifest_path.exists():
        return SkillManifest()

    try:
        return SkillManifest.model_validate_json(manifest_path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        logger.warning(f"Ignoring unreadable manifest {manifest_path}: {e}")
        return SkillManifest()


def save_manifest(manifest: SkillManifest) -> None:
    """Save the manifest to disk.

    Args:
        manifest: The manifest to save.
    """
    manifest_path = get_manifest_path()
    manifest_path.parent.mkdir(parents=True, exist_ok=True)
    manifest_path.write_text(manifest.model_dump_json(indent=2), encoding="utf-8")


def get_installed_skill(slug: str) -> InstalledSkill | None:
    """Look up a recorded skill by slug."""
    return load_manifest().skills.get(slug)


def add_installed_skill(skill: InstalledSkill) -> None:
    """Record a skill, replacing any existing entry with the same slug."""
    manifest = load_manifest()
    manifest.add_skill(skill)
    save_manifest(manifest)


def remove_installed_skill(slug: str) -> bool:
    """Drop a skill from the manifest.

    Returns:
        True if the skill was recorded, False otherwise.
    """
    manifest = load_manifest()
    if not manifest.remove_skill(slug):
        return False
    save_manifest(manifest)
    return True
