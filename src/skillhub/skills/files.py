"""
Filesystem helpers for skill directories.

Copies skill trees while leaving out housekeeping entries, and removes
installed skill paths whether they are links, junctions or real directories.
"""

import os
import shutil
from pathlib import Path


# Excluded by name at every depth
EXCLUDE_FILES = frozenset({"README.md", "metadata.json", ".DS_Store"})
EXCLUDE_DIRS = frozenset({".git", "node_modules"})


def copy_directory(source: Path, destination: Path) -> None:
    """Recursively copy a skill directory, skipping excluded entries.

    Symlinks inside the source are copied as links, dangling or not. The
    destination is created if needed and merged into if it exists; an entry
    that is a link on either side is replaced rather than written through.
    Errors propagate; a partial copy is left in place.

    Args:
        source: Skill directory to copy from.
        destination: Directory to copy into.

    Raises:
        OSError: If reading the source or writing the destination fails.
    """
    source = Path(source)
    destination = Path(destination)

    def ignore(directory: str, names: list[str]) -> set[str]:
        src_dir = Path(directory)
        skipped = {
            name
            for name in names
            if name in EXCLUDE_FILES
            or (name in EXCLUDE_DIRS and _is_real_dir(src_dir / name))
        }

        dest_dir = destination / src_dir.relative_to(source)
        for name in names:
            if name in skipped:
                continue
            existing = dest_dir / name
            if (src_dir / name).is_symlink() or is_link(existing):
                remove_path(existing)

        return skipped

    shutil.copytree(source, destination, symlinks=True, ignore=ignore, dirs_exist_ok=True)


def _is_real_dir(path: Path) -> bool:
    return path.is_dir() and not is_link(path)


def is_link(path: Path) -> bool:
    """Check whether a path is a symbolic link or a directory junction."""
    return path.is_symlink() or os.path.isjunction(path)


def remove_path(path: Path) -> None:
    """Remove a file, directory tree, symlink or junction.

    Links are removed without touching what they point to. A missing path
    is not an error.

    Raises:
        OSError: If the removal fails.
    """
    if path.is_symlink():
        path.unlink()
    elif os.path.isjunction(path):
        os.rmdir(path)
    elif path.is_dir():
        shutil.rmtree(path)
    elif os.path.lexists(path):
        path.unlink()
