"""
SkillHub skills.

A skill is a directory holding a SKILL.md manifest plus optional assets.
The installer stores a skill once in the central store
(``~/.skillhub/skills/<name>`` or ``<project>/.skillhub/skills/<name>``) and
links it into each agent's skills directory, or copies it per agent.

Usage:
    from skillhub.skills import install_skill_dir_for_agent

    result = install_skill_dir_for_agent("pdf-reader", "./pdf-reader", "claude-code")
    if result.symlink_failed:
        print("linked by copy:", result.path)

Multi-agent installs with manifest tracking live in
``skillhub.skills.manager.SkillManager``.
"""

# Models
from skillhub.skills.models import (
    InstalledSkill,
    InstallMode,
    InstallResult,
    SkillFrontmatter,
    SkillManifest,
)

# Files
from skillhub.skills.naming import sanitize_name
from skillhub.skills.files import copy_directory, remove_path
from skillhub.skills.linker import LinkState, create_symlink, probe_link

# Installer
from skillhub.skills.installer import (
    SKILL_MANIFEST_FILE,
    create_symlink_to_agent,
    install_skill_dir_for_agent,
    install_skill_for_agent,
    is_skill_installed_for_agent,
    uninstall_skill_for_agent,
)

# Manifest
from skillhub.skills.manifest import (
    add_installed_skill,
    get_installed_skill,
    load_manifest,
    remove_installed_skill,
    save_manifest,
)

# Parser
from skillhub.skills.parser import (
    SkillParseError,
    parse_skill_md,
    parse_yaml_frontmatter,
    read_skill_directory,
)

__all__ = [
    # Models
    "InstallMode",
    "InstallResult",
    "InstalledSkill",
    "SkillFrontmatter",
    "SkillManifest",
    # Files
    "LinkState",
    "copy_directory",
    "create_symlink",
    "probe_link",
    "remove_path",
    "sanitize_name",
    # Installer
    "SKILL_MANIFEST_FILE",
    "create_symlink_to_agent",
    "install_skill_dir_for_agent",
    "install_skill_for_agent",
    "is_skill_installed_for_agent",
    "uninstall_skill_for_agent",
    # Manifest
    "add_installed_skill",
    "get_installed_skill",
    "load_manifest",
    "remove_installed_skill",
    "save_manifest",
    # Parser
    "SkillParseError",
    "parse_skill_md",
    "parse_yaml_frontmatter",
    "read_skill_directory",
]
