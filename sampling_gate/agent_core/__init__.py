"""Agent runtime pieces the sampling gate depends on.

The sampling gate does not own agents. It only needs two narrow capabilities
from the agent runtime:

- ``AgentResolver.resolve_agent(session_id)``: map a session to its live agent.
- ``Agent.provider()``: obtain the agent's configured model provider, if any.

This package defines those capabilities, the internal conversation message
model providers consume, an in-memory ``AgentRegistry`` resolver, and a
Pydantic AI backed provider.
"""

from .agent import Agent, AgentResolver, ExtensionManager
from .agent_registry import AgentRegistry
from .conversation import ConversationRole, ImageBlock, Message, MessageContent, RawBlock, TextBlock
from .provider import Provider, ProviderUsage, ToolSpec

__all__ = [
    "Agent",
    "AgentRegistry",
    "AgentResolver",
    "ConversationRole",
    "ExtensionManager",
    "ImageBlock",
    "Message",
    "MessageContent",
    "Provider",
    "ProviderUsage",
    "RawBlock",
    "TextBlock",
    "ToolSpec",
]
