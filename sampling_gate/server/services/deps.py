"""
API Dependencies.

Provides the sampling service and agent registry singletons to API endpoints,
and the shared-secret check guarding the sampling routes.
"""

import secrets
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, status

from sampling_gate.agent_core.agent_registry import AgentRegistry
from sampling_gate.core.logging_config import get_logger
from sampling_gate.sampling.service import (
    SamplingService,
    get_agent_registry,
    get_sampling_service,
)
from sampling_gate.server.core import constant
from sampling_gate.server.core.config import Settings, settings

logger = get_logger(__name__)


def get_settings() -> Settings:
    return settings


SettingsDep = Annotated[Settings, Depends(get_settings)]
SamplingServiceDep = Annotated[SamplingService, Depends(get_sampling_service)]
AgentRegistryDep = Annotated[AgentRegistry, Depends(get_agent_registry)]


async def verify_secret_key(
    app_settings: SettingsDep,
    x_secret_key: Annotated[Optional[str], Header(alias=constant.SECRET_KEY_HEADER)] = None,
) -> None:
    """
    Reject the request unless it carries the configured shared secret.

    When no secret is configured the check is disabled.
    """
    expected = app_settings.secret_key.get_secret_value() if app_settings.secret_key else ""
    if not expected:
        return
    if x_secret_key is None or not secrets.compare_digest(x_secret_key, expected):
        logger.warning("Rejected request with missing or invalid secret key")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
