"""
Session API Endpoints.

This module lets the host application attach an agent to a session so that
approved sampling requests for that session have a provider to run against.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from sampling_gate.agent_core.adapters.pydantic_ai_provider import build_provider
from sampling_gate.agent_core.agent import Agent, ExtensionManager
from sampling_gate.core.logging_config import get_logger
from sampling_gate.server.services.deps import AgentRegistryDep, SettingsDep, verify_secret_key

logger = get_logger(__name__)

router = APIRouter(dependencies=[Depends(verify_secret_key)])


class SessionAgentCreate(BaseModel):
    """Schema for attaching an agent to a session."""

    model: Optional[str] = Field(
        default=None,
        description="Pydantic AI model name ('provider:model'). Falls back to SAMPLING_GATE_MODEL.",
        examples=["openai:gpt-4o"],
    )


class SessionAgentStatus(BaseModel):
    session_id: str
    model: Optional[str] = None
    has_provider: bool


@router.post(
    "/{session_id}/agent",
    response_model=SessionAgentStatus,
    summary="Attach Agent",
    description="Register an agent for the session, replacing any existing one.",
)
async def attach_agent(
    session_id: str,
    registry: AgentRegistryDep,
    app_settings: SettingsDep,
    body: Optional[SessionAgentCreate] = None,
):
    """
    Attach an agent to a session.

    The agent is registered even without a model; sampling decisions for it then
    fail with a provider error until a model is configured.
    """
    model_name = (body.model if body else None) or app_settings.model
    provider = build_provider(model_name)
    previous = registry.unregister(session_id)
    if previous is not None:
        previous.close()
        logger.info(f"Closed previous agent of session {session_id}")
    registry.register(session_id, Agent(session_id, ExtensionManager(provider)))
    logger.info(f"Attached agent to session {session_id} (model={model_name})")
    return SessionAgentStatus(session_id=session_id, model=model_name, has_provider=provider is not None)


@router.delete(
    "/{session_id}/agent",
    status_code=204,
    summary="Detach Agent",
    description="Close and forget the agent registered for the session.",
    responses={404: {"description": "No agent registered for the session"}},
)
async def detach_agent(session_id: str, registry: AgentRegistryDep):
    if not registry.has(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    agent = registry.unregister(session_id)
    if agent is not None:
        agent.close()
    logger.info(f"Detached agent from session {session_id}")
