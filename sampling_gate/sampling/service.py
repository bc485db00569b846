from __future__ import annotations

from typing import Optional

from sampling_gate.agent_core.agent import AgentResolver
from sampling_gate.agent_core.agent_registry import AgentRegistry
from sampling_gate.core.logging_config import get_logger
from sampling_gate.core.monitoring import log_llm_call, log_sampling_decision
from sampling_gate.errors import (
    CompletionFailedError,
    InvalidSamplingInputError,
    ProviderUnavailableError,
)

from .schemas import (
    DEFAULT_SYSTEM_PROMPT,
    DENIAL_TEXT,
    DENIED_MODEL,
    STOP_REASON_END_TURN,
    STOP_REASON_USER_DENIED,
    Role,
    SamplingAction,
    SamplingApprovalRequest,
    SamplingMessage,
    SamplingPendingResponse,
    SamplingRequest,
    SamplingResponse,
    TextContent,
)
from .translation import to_conversation_messages, to_sampling_content

logger = get_logger(__name__)


class SamplingService:
    """
    Human-in-the-loop gate in front of model sampling.

    Intake only acknowledges a request. The model is called when a reviewer
    resolves the request with ``approve`` or ``edit``; ``deny`` answers with a
    canned refusal without touching the agent or its provider. The service keeps
    no state between calls, and the agent and provider are looked up fresh on
    every decision.
    """

    def __init__(self, resolver: AgentResolver) -> None:
        self.resolver = resolver

    async def submit_request(self, request: SamplingRequest) -> SamplingPendingResponse:
        """Acknowledge a sampling request; the reviewer is notified out of band."""
        logger.info(
            f"Sampling request from extension '{request.extension_name}' "
            f"in session {request.session_id} awaiting review ({len(request.messages)} message(s))"
        )
        return SamplingPendingResponse()

    async def resolve_decision(self, decision: SamplingApprovalRequest) -> SamplingResponse:
        """
        Apply a reviewer decision.

        Raises:
            InvalidSamplingInputError: Unknown action, or ``edit`` without messages.
            SessionNotFoundError: The session has no agent.
            AgentUnavailableError: The session's agent cannot serve requests.
            ProviderUnavailableError: The agent has no model provider.
            CompletionFailedError: The provider call failed.
        """
        action = self._parse_action(decision.action)
        log_sampling_decision(decision.session_id, decision.original_request.extension_name, action.value)

        if action == SamplingAction.approve:
            return await self._process(decision.session_id, decision.original_request)

        if action == SamplingAction.edit:
            if not decision.edited_messages:
                raise InvalidSamplingInputError("Action 'edit' requires a non-empty 'edited_messages' list")
            edited = decision.original_request.model_copy(update={"messages": list(decision.edited_messages)})
            return await self._process(decision.session_id, edited)

        logger.info(f"Sampling request denied by reviewer in session {decision.session_id}")
        return self.denial_response()

    @staticmethod
    def denial_response() -> SamplingResponse:
        return SamplingResponse(
            message=SamplingMessage(role=Role.assistant, content=TextContent(text=DENIAL_TEXT)),
            model=DENIED_MODEL,
            stop_reason=STOP_REASON_USER_DENIED,
        )

    @staticmethod
    def _parse_action(action: str) -> SamplingAction:
        try:
            return SamplingAction(action)
        except ValueError as e:
            allowed = ", ".join(a.value for a in SamplingAction)
            raise InvalidSamplingInputError(f"Unknown action '{action}', expected one of: {allowed}") from e

    async def _process(self, session_id: str, request: SamplingRequest) -> SamplingResponse:
        agent = await self.resolver.resolve_agent(session_id)

        provider = await agent.provider()
        if provider is None:
            raise ProviderUnavailableError(session_id)

        messages = to_conversation_messages(request.messages)
        system_prompt = request.system_prompt if request.system_prompt is not None else DEFAULT_SYSTEM_PROMPT

        logger.debug(f"Forwarding {len(messages)} message(s) to provider for session {session_id}")
        try:
            reply, usage = await provider.complete(system_prompt, messages, [])
        except Exception as e:
            logger.error(f"Provider completion failed for session {session_id}: {e}", exc_info=True)
            raise CompletionFailedError(session_id, str(e)) from e

        log_llm_call(usage.model, usage.total_tokens)

        # The provider's own stop reason is not propagated.
        return SamplingResponse(
            message=SamplingMessage(role=Role.assistant, content=to_sampling_content(reply)),
            model=usage.model,
            stop_reason=STOP_REASON_END_TURN,
        )


# Global singletons
_registry: Optional[AgentRegistry] = None
_service: Optional[SamplingService] = None


def get_agent_registry() -> AgentRegistry:
    global _registry
    if _registry is None:
        _registry = AgentRegistry()
    return _registry


def get_sampling_service() -> SamplingService:
    global _service
    if _service is None:
        _service = SamplingService(resolver=get_agent_registry())
    return _service
