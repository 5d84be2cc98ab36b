"""
Pytest configuration and fixtures for skillhub tests.
"""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from skillhub.agents.base import AgentDescriptor, InstallOptions
from skillhub.agents.registry import get_registry, reset_registry
from skillhub.config import clear_config_cache


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep registry, config cache and SKILLHUB_* variables out of other tests."""
    for key in list(os.environ):
        if key.startswith("SKILLHUB_"):
            monkeypatch.delenv(key)
    reset_registry()
    clear_config_cache()
    yield
    reset_registry()
    clear_config_cache()


@pytest.fixture
def fake_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home directory at a temporary directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    reset_registry()
    return home


@pytest.fixture
def project_dir(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide a project directory and make it the working directory."""
    project = temp_dir / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def skill_source(temp_dir: Path) -> Path:
    """Provide a skill directory with assets and housekeeping files."""
    source = temp_dir / "source" / "pdf-reader"
    (source / "scripts").mkdir(parents=True)
    (source / ".git").mkdir()
    (source / "node_modules" / "left-pad").mkdir(parents=True)

    (source / "SKILL.md").write_text(
        "---\nname: pdf-reader\ndescription: Read PDF files\nversion: 1.2.0\n---\n\n# PDF Reader\n"
    )
    (source / "scripts" / "extract.py").write_text("print('extract')\n")
    (source / "README.md").write_text("# Not installed\n")
    (source / "metadata.json").write_text("{}")
    (source / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (source / "node_modules" / "left-pad" / "index.js").write_text("module.exports = 1;\n")
    return source


def _make_agent(
    base: Path,
    agent_id: str = "test-agent",
    detect=lambda: True,
) -> AgentDescriptor:
    """Build a test agent whose global skills live under ``base``."""

    def install(skill, options: InstallOptions) -> Path:
        return base / "config.md"

    return AgentDescriptor(
        id=agent_id,
        name="Test Agent",
        format="markdown",
        skills_dir=".test/skills",
        global_skills_dir=base / ".test" / "skills",
        detect_installed=detect,
        install=install,
        uninstall=lambda slug, options: True,
        is_installed=lambda slug, options: False,
    )


@pytest.fixture
def test_agent(temp_dir: Path) -> AgentDescriptor:
    """Register a test agent rooted in the temporary directory."""
    agent = _make_agent(temp_dir / "agent-home")
    get_registry().register(agent)
    return agent


@pytest.fixture
def agent_factory():
    """Provide the test agent builder."""
    return _make_agent
