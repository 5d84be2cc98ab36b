"""
SkillHub agents.

An agent is a third-party AI coding tool that reads skills from its own
directory. The registry maps agent ids to their descriptors.

Usage:
    from skillhub.agents import get_registry

    registry = get_registry()
    agent = registry.get("claude-code")
    detected = registry.detect_installed_agents()
"""

from skillhub.agents.base import AgentDescriptor, AgentFormat, ConfigPath, InstallOptions
from skillhub.agents.registry import (
    AgentRegistry,
    UnknownAgentError,
    detect_installed_agents,
    get_agent,
    get_agent_ids,
    get_all_agents,
    get_registry,
    register_agent,
    reset_registry,
)
from skillhub.agents.builtin import BUILTIN_AGENTS, build_agent, register_builtin_agents

__all__ = [
    "AgentDescriptor",
    "AgentFormat",
    "AgentRegistry",
    "BUILTIN_AGENTS",
    "ConfigPath",
    "InstallOptions",
    "UnknownAgentError",
    "build_agent",
    "detect_installed_agents",
    "get_agent",
    "get_agent_ids",
    "get_all_agents",
    "get_registry",
    "register_agent",
    "register_builtin_agents",
    "reset_registry",
]
