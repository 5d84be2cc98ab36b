"""
Skill parser for SkillHub.

Reads the YAML frontmatter of a skill's SKILL.md.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from skillhub.skills.models import SkillFrontmatter


class SkillParseError(Exception):
    """Error parsing a skill."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(f"{message}" + (f" (at {path})" if path else ""))


def parse_yaml_frontmatter(content: str) -> tuple[dict[str, Any] | None, str]:
    """Parse YAML frontmatter from a markdown file.

    Frontmatter is delimited by --- at the start and end.

    Args:
        content: The full markdown content.

    Returns:
        Tuple of (frontmatter dict or None, remaining content).
    """
    if not content.startswith("---"):
        return None, content

    lines = content.split("\n")
    end_index = None

    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == "---":
            end_index = i
            break

    if end_index is None:
        return None, content

    frontmatter_text = "\n".join(lines[1:end_index])
    remaining_content = "\n".join(lines[end_index + 1 :]).strip()

    try:
        frontmatter = yaml.safe_load(frontmatter_text)
        if not isinstance(frontmatter, dict):
            return None, content
        return frontmatter, remaining_content
    except yaml.YAMLError:
        return None, content


def parse_skill_md(content: str, path: Path | None = None) -> SkillFrontmatter | None:
    """Parse the frontmatter of a SKILL.md file.

    Returns:
        The frontmatter model, or None if the file has no frontmatter.

    Raises:
        SkillParseError: If the frontmatter is present but invalid.
    """
    frontmatter_dict, _ = parse_yaml_frontmatter(content)
    if frontmatter_dict is None:
        return None

    if "name" not in frontmatter_dict:
        raise SkillParseError("SKILL.md frontmatter missing required 'name' field", path)

    try:
        return SkillFrontmatter(**frontmatter_dict)
    except ValidationError as e:
        raise SkillParseError(f"Invalid SKILL.md frontmatter: {e}", path) from e


def read_skill_directory(skill_dir: Path) -> SkillFrontmatter:
    """Read a skill directory's SKILL.md.

    A SKILL.md without frontmatter is accepted; the directory name is used
    as the skill name.

    Raises:
        SkillParseError: If the directory or its SKILL.md is missing or invalid.
    """
    skill_dir = Path(skill_dir)
    if not skill_dir.is_dir():
        raise SkillParseError("Skill source is not a directory", skill_dir)

    skill_md = skill_dir / "SKILL.md"
    if not skill_md.is_file():
        raise SkillParseError("SKILL.md not found", skill_dir)

    try:
        content = skill_md.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SkillParseError(f"Cannot read SKILL.md: {e}", skill_md) from e

    frontmatter = parse_skill_md(content, skill_md)
    if frontmatter is None:
        return SkillFrontmatter(name=skill_dir.resolve().name)
    return frontmatter
