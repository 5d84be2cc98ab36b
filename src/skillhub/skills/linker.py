"""
Symlink manager for SkillHub.

Links a skill's canonical directory into an agent skills directory. Links
are relative to the link's parent so a moved home directory or re-cloned
project keeps working. On Windows a directory junction is created instead.
"""

import logging
import os
import subprocess
import sys
from enum import Enum
from pathlib import Path

from skillhub.skills.files import is_link, remove_path
from skillhub.storage.paths import ensure_directory

logger = logging.getLogger(__name__)


class LinkState(Enum):
    """What currently occupies a link path."""

    ABSENT = "absent"
    CORRECT = "correct"
    OTHER = "other"


def _absolute(path: Path) -> str:
    """Absolute, normalized form of a path without following links."""
    return os.path.normpath(os.path.abspath(path))


def probe_link(target: Path, link_path: Path) -> LinkState:
    """Inspect a link path against the expected target.

    Returns:
        ABSENT if nothing exists there (a dangling link still counts as
        present), CORRECT if it is a link resolving to ``target``, OTHER for
        a link elsewhere or a regular file or directory.
    """
    if not os.path.lexists(link_path):
        return LinkState.ABSENT

    if is_link(link_path):
        existing = os.readlink(link_path)
        resolved = os.path.join(os.path.dirname(_absolute(link_path)), existing)
        if _absolute(Path(resolved)) == _absolute(target):
            return LinkState.CORRECT

    return LinkState.OTHER


def _make_link(target: Path, link_path: Path) -> None:
    if sys.platform == "win32":
        # Junctions need an absolute target
        subprocess.run(
            ["cmd", "/c", "mklink", "/J", str(link_path), _absolute(target)],
            check=True,
            capture_output=True,
        )
    else:
        relative = os.path.relpath(_absolute(target), os.path.dirname(_absolute(link_path)))
        os.symlink(relative, link_path, target_is_directory=True)


def create_symlink(target: Path, link_path: Path) -> bool:
    """Link ``link_path`` to ``target``, replacing whatever is there.

    Calling this again with the same arguments is a no-op that also
    reports success. Never raises; the caller decides on a fallback.

    Args:
        target: Directory the link should point to.
        link_path: Where the link is created.

    Returns:
        True if the link exists and points to ``target``, False on any failure.
    """
    target = Path(target)
    link_path = Path(link_path)

    try:
        if _absolute(target) == _absolute(link_path):
            return True

        state = probe_link(target, link_path)
        if state is LinkState.CORRECT:
            logger.debug(f"Link already in place: {link_path}")
            return True
        if state is LinkState.OTHER:
            logger.debug(f"Replacing existing entry at {link_path}")
            remove_path(link_path)

        ensure_directory(link_path.parent)
        _make_link(target, link_path)
        return True

    except (OSError, ValueError, subprocess.CalledProcessError) as e:
        logger.debug(f"Failed to link {link_path} -> {target}: {e}")
        return False
