"""
Legacy config-file writer for agents.

Before skills directories existed, SkillHub referenced installed skills from
each agent's own instructions file (CLAUDE.md, AGENTS.md, ...). A skill is
recorded as a marked block so it can be replaced or removed later:

    <!-- SKILLHUB:START:pdf-reader -->
    ...
    <!-- SKILLHUB:END:pdf-reader -->
"""

import logging
import re
from pathlib import Path

from skillhub.agents.base import ConfigPath, InstallOptions
from skillhub.skills.models import InstalledSkill

logger = logging.getLogger(__name__)

START_MARKER = "<!-- SKILLHUB:START:{slug} -->"
END_MARKER = "<!-- SKILLHUB:END:{slug} -->"


def render_block(skill: InstalledSkill) -> str:
    """Render the marked block for one skill."""
    lines = [
        START_MARKER.format(slug=skill.slug),
        f"## {skill.name}",
        "",
        f"Skill `{skill.slug}` (version {skill.version}) installed by SkillHub.",
    ]
    if skill.canonical_path:
        lines.append(f"Files: {skill.canonical_path}")
    lines.append(END_MARKER.format(slug=skill.slug))
    return "\n".join(lines)


def _block_pattern(slug: str) -> re.Pattern[str]:
    start = re.escape(START_MARKER.format(slug=slug))
    end = re.escape(END_MARKER.format(slug=slug))
    return re.compile(rf"\n*{start}.*?{end}\n*", re.DOTALL)


def _remove_block(text: str, slug: str) -> tuple[str, int]:
    """Cut a skill block out of text, leaving the surrounding text untouched."""

    def cut(match: re.Match[str]) -> str:
        # Keep the separation between the text around the block
        if match.start() == 0:
            return ""
        return "\n" if match.end() == len(text) else "\n\n"

    return _block_pattern(slug).subn(cut, text)


class MarkdownBlockWriter:
    """Writes skill reference blocks into an agent's markdown config file."""

    def __init__(self, home: Path, config_paths: tuple[ConfigPath, ...]):
        self.home = home
        self.config_paths = config_paths

    def config_file(self, options: InstallOptions) -> Path:
        """Resolve the config file for the requested scope."""
        scope = "global" if options.is_global else "project"
        for config_path in self.config_paths:
            if config_path.type == scope:
                base = self.home if options.is_global else options.base_dir()
                return base / config_path.path / config_path.filename
        raise ValueError(f"No {scope} config path defined")

    def install(self, skill: InstalledSkill, options: InstallOptions) -> Path:
        """Write or replace the block for a skill. Returns the config file path."""
        config_file = self.config_file(options)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        existing = config_file.read_text(encoding="utf-8") if config_file.exists() else ""
        content, _ = _remove_block(existing, skill.slug)
        if content.endswith("\n\n") or not content:
            separator = ""
        elif content.endswith("\n"):
            separator = "\n"
        else:
            separator = "\n\n"
        content = f"{content}{separator}{render_block(skill)}\n"

        config_file.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote skill block '{skill.slug}' to {config_file}")
        return config_file

    def uninstall(self, skill_slug: str, options: InstallOptions) -> bool:
        """Remove the block for a skill. Returns False if nothing was removed."""
        config_file = self.config_file(options)
        if not config_file.exists():
            return False

        content, count = _remove_block(config_file.read_text(encoding="utf-8"), skill_slug)
        if count == 0:
            return False

        config_file.write_text(content, encoding="utf-8")
        logger.debug(f"Removed skill block '{skill_slug}' from {config_file}")
        return True

    def is_installed(self, skill_slug: str, options: InstallOptions) -> bool:
        """Check whether a block for the skill exists."""
        config_file = self.config_file(options)
        if not config_file.exists():
            return False
        return START_MARKER.format(slug=skill_slug) in config_file.read_text(encoding="utf-8")
