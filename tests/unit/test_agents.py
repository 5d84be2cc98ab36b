"""
Unit tests for the agent registry, built-in agents and legacy config writer.
"""

import dataclasses

import pytest

from skillhub.agents import (
    BUILTIN_AGENTS,
    AgentRegistry,
    InstallOptions,
    UnknownAgentError,
    build_agent,
    detect_installed_agents,
    get_agent,
    get_agent_ids,
    get_all_agents,
    get_registry,
    register_agent,
    reset_registry,
)
from skillhub.agents.legacy import END_MARKER, START_MARKER, MarkdownBlockWriter, render_block
from skillhub.skills.models import InstalledSkill

BUILTIN_IDS = [
    "claude-code",
    "cursor",
    "codex",
    "opencode",
    "gemini-cli",
    "windsurf",
    "github-copilot",
]


# =============================================================================
# Registry Tests
# =============================================================================


class TestAgentRegistry:
    """Tests for AgentRegistry."""

    @pytest.fixture
    def registry(self):
        return AgentRegistry()

    def test_register_and_get(self, registry, agent_factory, temp_dir):
        """Test registering and retrieving an agent."""
        agent = agent_factory(temp_dir)
        registry.register(agent)

        assert registry.get("test-agent") is agent
        assert "test-agent" in registry
        assert len(registry) == 1

    def test_get_unknown(self, registry):
        """Test that an unknown id returns None."""
        assert registry.get("nope") is None
        assert "nope" not in registry

    def test_register_overwrites(self, registry, agent_factory, temp_dir):
        """Test that registering the same id replaces the entry."""
        first = agent_factory(temp_dir / "one")
        second = agent_factory(temp_dir / "two")
        registry.register(first)
        registry.register(second)

        assert registry.get("test-agent") is second
        assert len(registry) == 1

    def test_register_requires_id(self, registry, agent_factory, temp_dir):
        """Test that an empty id is rejected."""
        with pytest.raises(ValueError):
            registry.register(agent_factory(temp_dir, agent_id=""))

    def test_list_in_registration_order(self, registry, agent_factory, temp_dir):
        """Test list_agents and list_agent_ids."""
        for agent_id in ("b-agent", "a-agent", "c-agent"):
            registry.register(agent_factory(temp_dir, agent_id=agent_id))

        assert registry.list_agent_ids() == ["b-agent", "a-agent", "c-agent"]
        assert [a.id for a in registry.list_agents()] == ["b-agent", "a-agent", "c-agent"]

    def test_listing_is_a_snapshot(self, registry, agent_factory, temp_dir):
        """Test that mutating a listing does not change the registry."""
        registry.register(agent_factory(temp_dir))
        registry.list_agent_ids().clear()
        registry.list_agents().clear()
        assert len(registry) == 1

    def test_unregister_and_clear(self, registry, agent_factory, temp_dir):
        """Test removing agents."""
        registry.register(agent_factory(temp_dir, agent_id="one"))
        registry.register(agent_factory(temp_dir, agent_id="two"))

        assert registry.unregister("one") is True
        assert registry.unregister("one") is False
        assert registry.list_agent_ids() == ["two"]

        registry.clear()
        assert registry.list_agent_ids() == []

    def test_require(self, registry, agent_factory, temp_dir):
        """Test require raises for unknown ids with the available list."""
        registry.register(agent_factory(temp_dir))

        assert registry.require("test-agent").id == "test-agent"
        with pytest.raises(UnknownAgentError) as exc_info:
            registry.require("nope")

        assert exc_info.value.agent_id == "nope"
        assert exc_info.value.available == ["test-agent"]
        assert "Unknown agent: nope" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)

    def test_detect_installed_agents(self, registry, agent_factory, temp_dir):
        """Test detection tolerates failing hooks."""

        def broken():
            raise RuntimeError("detection exploded")

        registry.register(agent_factory(temp_dir, agent_id="present", detect=lambda: True))
        registry.register(agent_factory(temp_dir, agent_id="absent", detect=lambda: False))
        registry.register(agent_factory(temp_dir, agent_id="broken", detect=broken))
        registry.register(agent_factory(temp_dir, agent_id="also-present", detect=lambda: True))

        assert registry.detect_installed_agents() == ["present", "also-present"]

    def test_detect_empty(self, registry):
        """Test detection on an empty registry."""
        assert registry.detect_installed_agents() == []


class TestGlobalRegistry:
    """Tests for the process-wide registry."""

    def test_builtins_registered(self, fake_home):
        """Test that the built-in agents are available on first access."""
        assert get_agent_ids() == BUILTIN_IDS
        assert [a.id for a in get_all_agents()] == BUILTIN_IDS

    def test_singleton(self):
        """Test that the same registry is returned until reset."""
        registry = get_registry()
        assert get_registry() is registry

        reset_registry()
        assert get_registry() is not registry

    def test_register_agent(self, agent_factory, temp_dir):
        """Test registering into the process-wide registry."""
        register_agent(agent_factory(temp_dir))

        assert get_agent("test-agent") is not None
        assert "test-agent" in get_agent_ids()

    def test_detect(self, fake_home):
        """Test detection of built-in agents from the home directory."""
        assert detect_installed_agents() == []

        (fake_home / ".claude").mkdir()
        (fake_home / ".config" / "opencode").mkdir(parents=True)

        assert detect_installed_agents() == ["claude-code", "opencode"]


# =============================================================================
# Built-in Agent Tests
# =============================================================================


class TestBuiltinAgents:
    """Tests for the built-in agent descriptors."""

    def test_ids_unique(self):
        """Test that built-in ids are unique."""
        ids = [entry.id for entry in BUILTIN_AGENTS]
        assert len(ids) == len(set(ids))

    def test_claude_code(self, fake_home):
        """Test the Claude Code descriptor."""
        agent = get_agent("claude-code")

        assert agent.name == "Claude Code"
        assert agent.format == "markdown"
        assert agent.skills_dir == ".claude/skills"
        assert agent.global_skills_dir == fake_home / ".claude" / "skills"

    @pytest.mark.parametrize(
        ("agent_id", "skills_dir", "global_parts"),
        [
            ("cursor", ".cursor/skills", (".cursor", "skills")),
            ("codex", ".codex/skills", (".codex", "skills")),
            ("opencode", ".opencode/skills", (".config", "opencode", "skills")),
            ("gemini-cli", ".gemini/skills", (".gemini", "skills")),
            ("windsurf", ".windsurf/skills", (".codeium", "windsurf", "skills")),
            ("github-copilot", ".github/skills", (".copilot", "skills")),
        ],
    )
    def test_directories(self, fake_home, agent_id, skills_dir, global_parts):
        """Test project and global skills directories."""
        agent = get_agent(agent_id)

        assert agent.skills_dir == skills_dir
        assert agent.global_skills_dir == fake_home.joinpath(*global_parts)

    def test_descriptors_are_immutable(self, fake_home):
        """Test that descriptors cannot be modified."""
        agent = get_agent("cursor")
        with pytest.raises(dataclasses.FrozenInstanceError):
            agent.name = "Renamed"

    def test_build_agent_with_explicit_home(self, temp_dir):
        """Test building a descriptor for a given home directory."""
        agent = build_agent(BUILTIN_AGENTS[0], temp_dir)

        assert agent.global_skills_dir == temp_dir / ".claude" / "skills"
        assert agent.detect_installed() is False

        (temp_dir / ".claude").mkdir()
        assert agent.detect_installed() is True


# =============================================================================
# Legacy Writer Tests
# =============================================================================


class TestMarkdownBlockWriter:
    """Tests for the legacy config-file writer."""

    @pytest.fixture
    def skill(self):
        return InstalledSkill(
            name="PDF Reader",
            slug="pdf-reader",
            version="1.2.0",
            canonical_path="/skills/pdf-reader",
        )

    @pytest.fixture
    def writer(self, temp_dir):
        return MarkdownBlockWriter(temp_dir / "home", BUILTIN_AGENTS[0].config_paths)

    @pytest.fixture
    def project_options(self, temp_dir):
        return InstallOptions(is_global=False, project_root=temp_dir / "project")

    def test_config_file(self, writer, temp_dir, project_options):
        """Test config file resolution for both scopes."""
        assert writer.config_file(project_options) == temp_dir / "project" / "CLAUDE.md"
        assert (
            writer.config_file(InstallOptions(is_global=True))
            == temp_dir / "home" / ".claude" / "CLAUDE.md"
        )

    def test_install_creates_file(self, writer, skill, project_options):
        """Test writing a block into a new file."""
        path = writer.install(skill, project_options)

        content = path.read_text()
        assert content.startswith(START_MARKER.format(slug="pdf-reader"))
        assert END_MARKER.format(slug="pdf-reader") in content
        assert "## PDF Reader" in content
        assert "/skills/pdf-reader" in content
        assert writer.is_installed("pdf-reader", project_options) is True

    def test_install_keeps_existing_content(self, writer, skill, project_options, temp_dir):
        """Test that existing instructions are preserved."""
        config_file = temp_dir / "project" / "CLAUDE.md"
        config_file.parent.mkdir(parents=True)
        config_file.write_text("# Project rules\n\nBe nice.\n")

        writer.install(skill, project_options)

        content = config_file.read_text()
        assert content.startswith("# Project rules\n\nBe nice.\n\n")
        assert START_MARKER.format(slug="pdf-reader") in content

    def test_install_replaces_block(self, writer, skill, project_options):
        """Test that reinstalling replaces instead of duplicating."""
        writer.install(skill, project_options)
        skill.version = "2.0.0"
        path = writer.install(skill, project_options)

        content = path.read_text()
        assert content.count(START_MARKER.format(slug="pdf-reader")) == 1
        assert "version 2.0.0" in content
        assert "version 1.2.0" not in content

    def test_uninstall(self, writer, skill, project_options, temp_dir):
        """Test removing a block leaves other content."""
        config_file = temp_dir / "project" / "CLAUDE.md"
        config_file.parent.mkdir(parents=True)
        config_file.write_text("# Project rules\n")
        writer.install(skill, project_options)

        assert writer.uninstall("pdf-reader", project_options) is True

        assert config_file.read_text() == "# Project rules\n"
        assert writer.is_installed("pdf-reader", project_options) is False
        assert writer.uninstall("pdf-reader", project_options) is False

    def test_uninstall_only_target_block(self, writer, skill, project_options):
        """Test that other skills' blocks stay."""
        other = InstalledSkill(name="Other", slug="other")
        writer.install(skill, project_options)
        path = writer.install(other, project_options)

        writer.uninstall("pdf-reader", project_options)

        content = path.read_text()
        assert START_MARKER.format(slug="other") in content
        assert START_MARKER.format(slug="pdf-reader") not in content

    def test_uninstall_keeps_surrounding_whitespace(self, writer, skill, project_options, temp_dir):
        """Test that indentation and trailing spaces around the block survive."""
        config_file = temp_dir / "project" / "CLAUDE.md"
        config_file.parent.mkdir(parents=True)
        config_file.write_text("  Intro  \n")
        writer.install(skill, project_options)
        config_file.write_text(config_file.read_text() + "\n    indented code\n\n")

        writer.uninstall("pdf-reader", project_options)

        assert config_file.read_text() == "  Intro  \n\n    indented code\n\n"

    def test_install_keeps_trailing_spaces(self, writer, skill, project_options, temp_dir):
        """Test that text without a final newline is not trimmed."""
        config_file = temp_dir / "project" / "CLAUDE.md"
        config_file.parent.mkdir(parents=True)
        config_file.write_text("Be nice.  ")

        writer.install(skill, project_options)

        assert config_file.read_text() == f"Be nice.  \n\n{render_block(skill)}\n"

    def test_uninstall_first_block(self, writer, skill, project_options):
        """Test removing a block at the start of the file."""
        other = InstalledSkill(name="Other", slug="other")
        writer.install(skill, project_options)
        path = writer.install(other, project_options)

        writer.uninstall("pdf-reader", project_options)

        assert path.read_text() == f"{render_block(other)}\n"

    def test_missing_file(self, writer, project_options):
        """Test hooks on a file that does not exist."""
        assert writer.is_installed("pdf-reader", project_options) is False
        assert writer.uninstall("pdf-reader", project_options) is False
