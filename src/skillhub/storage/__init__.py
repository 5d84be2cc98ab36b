"""Storage paths for SkillHub."""

from skillhub.storage.paths import (
    ensure_directory,
    find_project_config,
    get_agent_skills_dir,
    get_central_skills_dir,
    get_global_config_path,
    get_manifest_path,
    get_skill_canonical_path,
    get_skillhub_home,
)

__all__ = [
    "ensure_directory",
    "find_project_config",
    "get_agent_skills_dir",
    "get_central_skills_dir",
    "get_global_config_path",
    "get_manifest_path",
    "get_skill_canonical_path",
    "get_skillhub_home",
]
