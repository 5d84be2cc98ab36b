"""
Unit tests for skill name sanitization.
"""

import pytest

from skillhub.skills.naming import FALLBACK_NAME, MAX_NAME_LENGTH, sanitize_name

SAMPLE_NAMES = [
    "pdf-reader",
    "my/skill:name",
    "..\\..\\etc\\passwd",
    "../../secret",
    "  .hidden-skill.  ",
    "...",
    "",
    "   ",
    "name\x00with-nul",
    "C:\\skills\\thing",
    ".. . .x",
    "a" * 300,
    "a" * 254 + " " + "b" * 10,
    "a" * 254 + "." + "b" * 10,
    "Ünïcödé skill",
    "\t tabbed \n",
    ". leading space after dot",
]


class TestSanitizeName:
    """Tests for sanitize_name."""

    def test_plain_name_unchanged(self):
        """Test that a safe name passes through."""
        assert sanitize_name("pdf-reader") == "pdf-reader"

    def test_removes_separators(self):
        """Test that separators and colons are dropped, not replaced."""
        assert sanitize_name("my/skill:name") == "myskillname"
        assert sanitize_name("a\\b") == "ab"

    def test_removes_nul(self):
        """Test that NUL characters are dropped."""
        assert sanitize_name("abc\x00def") == "abcdef"

    def test_path_traversal_collapses(self):
        """Test that traversal sequences cannot escape the skills directory."""
        assert sanitize_name("../../secret") == "secret"
        assert sanitize_name("../..") == FALLBACK_NAME

    def test_trims_whitespace_and_dots(self):
        """Test trimming of surrounding whitespace and dots."""
        assert sanitize_name("  skill.  ") == "skill"
        assert sanitize_name(".hidden") == "hidden"
        assert sanitize_name(". .hidden") == "hidden"

    def test_inner_dots_kept(self):
        """Test that dots inside the name are preserved."""
        assert sanitize_name("skill.v2") == "skill.v2"

    def test_empty_uses_fallback(self):
        """Test fallback for names that sanitize to nothing."""
        assert sanitize_name("") == FALLBACK_NAME
        assert sanitize_name("...") == FALLBACK_NAME
        assert sanitize_name(" / : ") == FALLBACK_NAME

    def test_truncates_long_names(self):
        """Test truncation to the filesystem component limit."""
        assert sanitize_name("a" * 300) == "a" * MAX_NAME_LENGTH

    def test_truncation_does_not_leave_trailing_space(self):
        """Test that a cut landing on whitespace is trimmed."""
        result = sanitize_name("a" * 254 + " " + "b" * 10)
        assert result == "a" * 254

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_idempotent(self, name):
        """Test that sanitizing twice equals sanitizing once."""
        once = sanitize_name(name)
        assert sanitize_name(once) == once

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_result_is_safe(self, name):
        """Test the safety properties of every result."""
        result = sanitize_name(name)
        assert result
        assert len(result) <= MAX_NAME_LENGTH
        assert not result.startswith(".")
        for char in ("/", "\\", ":", "\x00"):
            assert char not in result
