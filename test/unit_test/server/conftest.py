from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from sampling_gate.agent_core.agent_registry import AgentRegistry
from sampling_gate.sampling.service import SamplingService, get_agent_registry, get_sampling_service
from sampling_gate.server.core.config import Settings
from sampling_gate.server.main import app
from sampling_gate.server.services.deps import get_settings


@pytest.fixture
def app_settings() -> Settings:
    """Settings with the secret check disabled; tests override as needed."""
    return Settings(_env_file=None, secret_key=None, model=None)


@pytest_asyncio.fixture(name="client")
async def client_fixture(
    registry: AgentRegistry,
    service: SamplingService,
    app_settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client wired to the stub-backed registry and service."""
    app.dependency_overrides[get_agent_registry] = lambda: registry
    app.dependency_overrides[get_sampling_service] = lambda: service
    app.dependency_overrides[get_settings] = lambda: app_settings

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()
