from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .provider import Provider


class ExtensionManager:
    """
    Owns the extensions of one agent and the model provider they share.

    Extensions never hold the provider themselves; they ask the manager for it
    whenever they need a completion, so swapping the provider takes effect on
    the next call.
    """

    def __init__(self, provider: Optional[Provider] = None) -> None:
        self._provider = provider

    async def get_provider(self) -> Optional[Provider]:
        """Return the configured provider, or ``None`` if none is set."""
        return self._provider

    def set_provider(self, provider: Optional[Provider]) -> None:
        self._provider = provider


class Agent:
    """
    Session-scoped agent runtime.

    Only the parts the sampling gate relies on are modelled here: the session it
    belongs to, its extension manager, and whether it has been shut down.
    """

    def __init__(self, session_id: str, extension_manager: Optional[ExtensionManager] = None) -> None:
        self.session_id = session_id
        self.extension_manager = extension_manager or ExtensionManager()
        self.closed = False

    async def provider(self) -> Optional[Provider]:
        """Model provider configured for this agent, if any."""
        return await self.extension_manager.get_provider()

    def close(self) -> None:
        self.closed = True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(session_id={self.session_id}, closed={self.closed})"


@runtime_checkable
class AgentResolver(Protocol):
    """Capability that maps a session identifier to its live agent."""

    async def resolve_agent(self, session_id: str) -> Agent:
        """
        Look up the agent for a session.

        Raises:
            SessionNotFoundError: If no agent exists for the session.
            AgentUnavailableError: If the agent exists but cannot serve requests.
        """
        ...
