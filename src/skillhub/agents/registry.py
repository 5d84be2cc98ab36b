"""Agent registry for SkillHub."""

import logging

from skillhub.agents.base import AgentDescriptor

logger = logging.getLogger(__name__)


class UnknownAgentError(ValueError):
    """Raised when a caller names an agent that is not registered."""

    def __init__(self, agent_id: str, available: list[str] | None = None):
        self.agent_id = agent_id
        self.available = available or []
        message = f"Unknown agent: {agent_id}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class AgentRegistry:
    """Registry of supported coding agents, keyed by agent id.

    Registration overwrites any existing entry with the same id.
    Listing follows registration order.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._agents: dict[str, AgentDescriptor] = {}

    def register(self, agent: AgentDescriptor) -> None:
        """Register an agent, replacing any previous entry with the same id.

        Args:
            agent: Agent descriptor to register

        Raises:
            ValueError: If the descriptor has no id
        """
        if not agent.id:
            raise ValueError("Agent descriptor must have an id")

        if agent.id in self._agents:
            logger.debug(f"Replacing registered agent: {agent.id}")
        self._agents[agent.id] = agent

    def unregister(self, agent_id: str) -> bool:
        """Unregister an agent.

        Returns:
            True if the agent was removed, False if not found
        """
        if agent_id in self._agents:
            del self._agents[agent_id]
            return True
        return False

    def get(self, agent_id: str) -> AgentDescriptor | None:
        """Get an agent by id, or None if not registered."""
        return self._agents.get(agent_id)

    def require(self, agent_id: str) -> AgentDescriptor:
        """Get an agent by id.

        Raises:
            UnknownAgentError: If the agent is not registered
        """
        agent = self._agents.get(agent_id)
        if agent is None:
            raise UnknownAgentError(agent_id, self.list_agent_ids())
        return agent

    def list_agents(self) -> list[AgentDescriptor]:
        """Get a snapshot of all registered agents."""
        return list(self._agents.values())

    def list_agent_ids(self) -> list[str]:
        """Get a snapshot of all registered agent ids."""
        return list(self._agents.keys())

    def clear(self) -> None:
        """Remove every registered agent."""
        self._agents.clear()

    def detect_installed_agents(self) -> list[str]:
        """Detect which registered agents are present on this machine.

        A failing detection hook counts as "not detected" for that agent
        only; the remaining agents are still checked.

        Returns:
            Ids of the agents whose detection returned True
        """
        detected = []
        for agent_id, agent in list(self._agents.items()):
            try:
                if agent.detect_installed():
                    detected.append(agent_id)
            except Exception as e:
                logger.debug(f"Detection failed for agent '{agent_id}': {e}")
        return detected

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    def __len__(self) -> int:
        return len(self._agents)


# Singleton instance
_registry: AgentRegistry | None = None


def get_registry() -> AgentRegistry:
    """Get the process-wide agent registry.

    The registry is populated with the built-in agents on first access.

    Returns:
        AgentRegistry instance.
    """
    global _registry
    if _registry is None:
        from skillhub.agents.builtin import register_builtin_agents

        _registry = AgentRegistry()
        register_builtin_agents(_registry)
    return _registry


def reset_registry() -> None:
    """Drop the registry so the next access rebuilds it from the built-ins."""
    global _registry
    _registry = None


def register_agent(agent: AgentDescriptor) -> None:
    """Register an agent in the process-wide registry."""
    get_registry().register(agent)


def get_agent(agent_id: str) -> AgentDescriptor | None:
    """Look up an agent in the process-wide registry."""
    return get_registry().get(agent_id)


def get_all_agents() -> list[AgentDescriptor]:
    """List every agent in the process-wide registry."""
    return get_registry().list_agents()


def get_agent_ids() -> list[str]:
    """List every agent id in the process-wide registry."""
    return get_registry().list_agent_ids()


def detect_installed_agents() -> list[str]:
    """Detect installed agents from the process-wide registry."""
    return get_registry().detect_installed_agents()
