from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import pytest

from sampling_gate.agent_core.agent import Agent, ExtensionManager
from sampling_gate.agent_core.agent_registry import AgentRegistry
from sampling_gate.agent_core.conversation import Message
from sampling_gate.agent_core.provider import ProviderUsage, ToolSpec
from sampling_gate.sampling.schemas import Role, SamplingMessage, SamplingRequest
from sampling_gate.sampling.service import SamplingService


class StubProvider:
    """Provider double that records every call and replies with a fixed message."""

    def __init__(
        self,
        reply: Optional[Message] = None,
        model: str = "stub-1",
        error: Optional[Exception] = None,
    ) -> None:
        self.reply = reply if reply is not None else Message.assistant().with_text("4")
        self.model = model
        self.error = error
        self.calls: List[Tuple[str, List[Message], List[ToolSpec]]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def complete(
        self,
        system: str,
        messages: Sequence[Message],
        tools: Sequence[ToolSpec],
    ) -> Tuple[Message, ProviderUsage]:
        self.calls.append((system, list(messages), list(tools)))
        if self.error is not None:
            raise self.error
        return self.reply, ProviderUsage(model=self.model, total_tokens=7)


@pytest.fixture
def stub_provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def registry(stub_provider: StubProvider) -> AgentRegistry:
    reg = AgentRegistry()
    reg.register("session-1", Agent("session-1", ExtensionManager(stub_provider)))
    return reg


@pytest.fixture
def service(registry: AgentRegistry) -> SamplingService:
    return SamplingService(resolver=registry)


@pytest.fixture
def sampling_request() -> SamplingRequest:
    return SamplingRequest(
        session_id="session-1",
        extension_name="developer",
        messages=[SamplingMessage.text(Role.user, "2+2?")],
        max_tokens=100,
    )
