"""Skill name sanitization."""

import re

FALLBACK_NAME = "unnamed-skill"
MAX_NAME_LENGTH = 255

_INVALID_CHARS = re.compile(r"[\\/:\x00]")
_EDGE_WHITESPACE_DOTS = re.compile(r"^[\s.]+|[\s.]+\Z")
_LEADING_DOTS = re.compile(r"^\.+")
_TRAILING_WHITESPACE_DOTS = re.compile(r"[\s.]+\Z")


def sanitize_name(name: str) -> str:
    """Turn an arbitrary skill name into a single safe path component.

    Separators, drive colons and NUL are dropped, surrounding whitespace and
    dots are trimmed, and leading dots are removed so the result never names
    a hidden entry. Empty results become ``unnamed-skill``; long ones are cut
    to 255 characters.

    Sanitizing twice gives the same result as sanitizing once.

    Examples:
        >>> sanitize_name("my/skill:name")
        'myskillname'
        >>> sanitize_name("../..")
        'unnamed-skill'
    """
    sanitized = _INVALID_CHARS.sub("", name)
    sanitized = _EDGE_WHITESPACE_DOTS.sub("", sanitized)
    sanitized = _LEADING_DOTS.sub("", sanitized)

    if not sanitized:
        sanitized = FALLBACK_NAME

    if len(sanitized) > MAX_NAME_LENGTH:
        # Truncation can expose trailing whitespace or dots
        sanitized = _TRAILING_WHITESPACE_DOTS.sub("", sanitized[:MAX_NAME_LENGTH])

    return sanitized
