from __future__ import annotations

import inspect
from typing import Awaitable, Callable, Dict, Optional, Union

from sampling_gate.core.logging_config import get_logger
from sampling_gate.errors import AgentUnavailableError, SessionNotFoundError

from .agent import Agent

logger = get_logger(__name__)

AgentFactory = Callable[[str], Union[Agent, Awaitable[Agent]]]
"""
AgentFactory:
    A callable that takes a session identifier and returns (or awaits to) the
    ``Agent`` serving that session.
"""


class AgentRegistry:
    """
    In-memory registry of agents keyed by session identifier.

    Sessions can be registered with a ready agent or with a factory that builds
    the agent the first time the session is resolved. The registry implements
    the ``AgentResolver`` capability, so it can be handed straight to the
    sampling service.
    """

    def __init__(self) -> None:
        """Initialize an empty agent registry."""
        self._agents: Dict[str, Agent] = {}
        self._factories: Dict[str, AgentFactory] = {}

    def register(self, session_id: str, agent: Agent) -> None:
        """
        Register a live agent for a session.

        Args:
            session_id: The session identifier.
            agent: The agent serving the session.
        """
        self._factories.pop(str(session_id), None)
        self._agents[str(session_id)] = agent

    def register_factory(self, session_id: str, factory: AgentFactory) -> None:
        """
        Register a factory that builds the session's agent on first lookup.

        Args:
            session_id: The session identifier.
            factory: A callable taking the session id and returning an Agent.
        """
        self._agents.pop(str(session_id), None)
        self._factories[str(session_id)] = factory

    def unregister(self, session_id: str) -> Optional[Agent]:
        """Forget a session and return its agent, if one was built. Unknown sessions are ignored."""
        self._factories.pop(str(session_id), None)
        return self._agents.pop(str(session_id), None)

    def has(self, session_id: str) -> bool:
        """
        Check if an agent or factory exists for the session.

        Args:
            session_id: The session identifier.

        Returns:
            True if the session is registered, False otherwise.
        """
        return str(session_id) in self._agents or str(session_id) in self._factories

    async def resolve_agent(self, session_id: str) -> Agent:
        """
        Retrieve the agent for a session, building it from its factory if needed.

        Args:
            session_id: The session identifier to look up.

        Returns:
            The live Agent for the session.

        Raises:
            SessionNotFoundError: If nothing is registered for the session.
            AgentUnavailableError: If the factory fails or the agent is closed.
        """
        key = str(session_id)
        agent = self._agents.get(key)
        if agent is None:
            factory = self._factories.get(key)
            if factory is None:
                raise SessionNotFoundError(key)
            agent = await self._build(key, factory)
            self._agents[key] = agent
            self._factories.pop(key, None)

        if agent.closed:
            raise AgentUnavailableError(key, "agent has been closed")
        return agent

    async def _build(self, session_id: str, factory: AgentFactory) -> Agent:
        logger.debug(f"Building agent for session {session_id}")
        try:
            agent = factory(session_id)
            if inspect.isawaitable(agent):
                agent = await agent
        except Exception as e:
            logger.error(f"Agent factory failed for session {session_id}: {e}", exc_info=True)
            raise AgentUnavailableError(session_id, "agent factory failed") from e
        if not isinstance(agent, Agent):
            logger.error(f"Agent factory for session {session_id} returned {type(agent).__name__}, not an Agent")
            raise AgentUnavailableError(session_id, "agent factory returned no agent")
        return agent
