"""
SkillHub - skill package manager for AI coding tools

Installs skill bundles once into a central store and links them into the
skills directories of every supported coding agent.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("skillhub")
except PackageNotFoundError:
    __version__ = "1.0.0"

__all__ = [
    "__version__",
]
