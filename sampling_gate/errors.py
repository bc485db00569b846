"""Error types for the sampling gate.

Two families exist. Client errors describe a decision the reviewer can fix and
resubmit; their message is safe to return to the caller. Server errors describe a
broken session, agent, or provider; their message is only ever logged.
"""

from __future__ import annotations


class SamplingError(Exception):
    """Base error for all sampling gate exceptions."""

    status_code: int = 500
    client_error: bool = False


class InvalidSamplingInputError(SamplingError):
    """Raised for an unknown action or an edit without replacement messages."""

    status_code = 400
    client_error = True


class SessionNotFoundError(SamplingError):
    """Raised when no agent is registered for the session."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"No agent registered for session '{session_id}'")
        self.session_id = session_id


class AgentUnavailableError(SamplingError):
    """Raised when the session has an agent that cannot serve requests."""

    def __init__(self, session_id: str, reason: str) -> None:
        super().__init__(f"Agent for session '{session_id}' is unavailable: {reason}")
        self.session_id = session_id


class ProviderUnavailableError(SamplingError):
    """Raised when the agent has no model provider configured."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Agent for session '{session_id}' has no model provider configured")
        self.session_id = session_id


class CompletionFailedError(SamplingError):
    """Raised for any failure inside the provider completion call."""

    def __init__(self, session_id: str, message: str) -> None:
        super().__init__(f"Completion failed for session '{session_id}': {message}")
        self.session_id = session_id
