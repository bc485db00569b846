"""Model provider capability interface.

The sampling gate never talks to a model SDK directly. It only needs a handle that
can turn a system prompt and a conversation into a reply, so providers are modelled
as a narrow protocol that real adapters and test stubs both satisfy.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence, Tuple, runtime_checkable

from pydantic import BaseModel, Field

from .conversation import Message


class ToolSpec(BaseModel):
    """Tool definition offered to the model alongside a completion request."""

    name: str = Field(..., description="Tool name as exposed to the model")
    description: str = Field(default="", description="What the tool does")
    input_schema: Dict[str, Any] = Field(default_factory=dict, description="JSON schema of the tool arguments")


class ProviderUsage(BaseModel):
    """Usage report returned with every completion.

    Attributes:
        model: Identifier of the model that actually produced the reply
        input_tokens: Prompt tokens consumed, when the provider reports them
        output_tokens: Completion tokens produced, when the provider reports them
        total_tokens: Sum of both, when the provider reports it
    """

    model: str = Field(..., description="Model that produced the reply")
    input_tokens: Optional[int] = Field(default=None, description="Prompt tokens consumed")
    output_tokens: Optional[int] = Field(default=None, description="Completion tokens produced")
    total_tokens: Optional[int] = Field(default=None, description="Total tokens")


@runtime_checkable
class Provider(Protocol):
    """Protocol every model provider handle implements."""

    async def complete(
        self,
        system: str,
        messages: Sequence[Message],
        tools: Sequence[ToolSpec],
    ) -> Tuple[Message, ProviderUsage]:
        """Run one completion.

        Args:
            system: System prompt for the call
            messages: Conversation so far, oldest first
            tools: Tools the model may call; may be empty

        Returns:
            The assistant reply and the usage report

        Raises:
            Exception: Any provider-side failure (network, quota, bad reply)
        """
        ...
