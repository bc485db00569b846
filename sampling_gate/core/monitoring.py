"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for monitoring and tracing
of the sampling gate, including:
- API endpoint tracing
- Pydantic AI model calls
- Reviewer decisions on sampling requests

The initialization is conditional on the LOGFIRE_ENABLED environment variable;
when Logfire is not configured every helper degrades to a debug log line.
"""

import logging
import os
from typing import Optional

import logfire
from fastapi import FastAPI

logger = logging.getLogger(__name__)

# Logfire configuration from environment
LOGFIRE_ENABLED = os.getenv("LOGFIRE_ENABLED", "false").lower() in ("true", "1", "yes")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_PROJECT_NAME = os.getenv("LOGFIRE_PROJECT_NAME", "sampling-gate")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "sampling-gate-server")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "0.0.0")

# Sampling configuration
LOGFIRE_SAMPLE_RATE = float(os.getenv("LOGFIRE_SAMPLE_RATE", "1.0"))
LOGFIRE_TRACE_SAMPLE_RATE = float(os.getenv("LOGFIRE_TRACE_SAMPLE_RATE", "1.0"))

# Feature flags
LOGFIRE_TRACE_PYDANTIC_AI = os.getenv("LOGFIRE_TRACE_PYDANTIC_AI", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_HTTPX = os.getenv("LOGFIRE_TRACE_HTTPX", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_FASTAPI = os.getenv("LOGFIRE_TRACE_FASTAPI", "true").lower() in ("true", "1", "yes")

_logfire_configured = False


def is_logfire_configured() -> bool:
    return _logfire_configured


def initialize_logfire(app: FastAPI | None = None) -> bool:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    Args:
        app: FastAPI application instance for FastAPI instrumentation (optional).

    Returns:
        True if Logfire was configured, False if it stayed disabled.
    """
    global _logfire_configured

    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not LOGFIRE_TOKEN:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
            sampling=logfire.SamplingOptions(
                head=LOGFIRE_SAMPLE_RATE,
                tail=LOGFIRE_TRACE_SAMPLE_RATE,
            ),
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False
    _logfire_configured = True

    if LOGFIRE_TRACE_PYDANTIC_AI:
        try:
            logfire.instrument_pydantic_ai()
            logger.info("Logfire: Pydantic AI instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument Pydantic AI: {e}")

    if LOGFIRE_TRACE_HTTPX:
        try:
            logfire.instrument_httpx()
            logger.info("Logfire: HTTPX instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument HTTPX: {e}")

    if LOGFIRE_TRACE_FASTAPI:
        if app is not None:
            try:
                logfire.instrument_fastapi(app=app)
                logger.info("Logfire: FastAPI instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument FastAPI: {e}")
        else:
            logger.debug("FastAPI app instance not provided, skipping FastAPI instrumentation")

    logger.info(
        f"Logfire monitoring initialized: "
        f"project={LOGFIRE_PROJECT_NAME}, "
        f"environment={LOGFIRE_ENVIRONMENT}, "
        f"service={LOGFIRE_SERVICE_NAME}"
    )
    return True


def log_sampling_decision(session_id: str, extension_name: str, action: str) -> None:
    """
    Log a reviewer decision on a sampling request.

    Args:
        session_id: The agent session the request belongs to
        extension_name: The extension that issued the request
        action: The reviewer action (approve, edit, deny)
    """
    if not _logfire_configured:
        logger.debug(f"Sampling decision: session_id={session_id} action={action}")
        return
    try:
        logfire.info(
            "Sampling decision received",
            session_id=session_id,
            extension_name=extension_name,
            action=action,
        )
    except Exception:
        logger.debug(f"Could not log sampling decision to Logfire: session_id={session_id}")


def log_llm_call(model: str, tokens_used: Optional[int]) -> None:
    """
    Log an LLM model call with usage metrics.

    Args:
        model: The model name
        tokens_used: Total tokens used in the call, if reported
    """
    if not _logfire_configured:
        logger.debug(f"LLM call completed: model={model} tokens_used={tokens_used}")
        return
    try:
        logfire.info(
            "LLM call completed",
            model=model,
            tokens_used=tokens_used,
        )
    except Exception:
        logger.debug(f"Could not log LLM call to Logfire: model={model}")


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    if not _logfire_configured:
        return
    try:
        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Could not log API request to Logfire: {method} {path}")
