"""Human review gate for extension sampling requests.

An extension asks for a model completion by submitting a ``SamplingRequest``.
Intake only acknowledges it; a reviewer later approves it, approves an edited
version, or denies it through a ``SamplingApprovalRequest``. Approved requests
are translated into the agent's conversation format and completed by the
session agent's provider.
"""

from sampling_gate.errors import (
    AgentUnavailableError,
    CompletionFailedError,
    InvalidSamplingInputError,
    ProviderUnavailableError,
    SamplingError,
    SessionNotFoundError,
)

from .schemas import (
    ImageContent,
    OpaqueContent,
    Role,
    SamplingAction,
    SamplingApprovalRequest,
    SamplingMessage,
    SamplingPendingResponse,
    SamplingRequest,
    SamplingResponse,
    TextContent,
)
from .service import SamplingService, get_agent_registry, get_sampling_service

__all__ = [
    "AgentUnavailableError",
    "CompletionFailedError",
    "ImageContent",
    "InvalidSamplingInputError",
    "OpaqueContent",
    "ProviderUnavailableError",
    "Role",
    "SamplingAction",
    "SamplingApprovalRequest",
    "SamplingError",
    "SamplingMessage",
    "SamplingPendingResponse",
    "SamplingRequest",
    "SamplingResponse",
    "SamplingService",
    "SessionNotFoundError",
    "TextContent",
    "get_agent_registry",
    "get_sampling_service",
]
