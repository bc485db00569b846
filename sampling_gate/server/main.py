"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request tracing) and exception handlers, and includes all API routers.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sampling_gate.core.logging_config import get_logger, setup_logging
from sampling_gate.core.monitoring import initialize_logfire

from .api.v1 import health, sampling, sessions
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Nothing is persisted: pending sampling requests live only with the reviewer,
    so startup and shutdown have no state to load or flush.
    """
    logger.info(f"Starting up {constant.PROJECT_NAME} Server...")
    yield
    logger.info(f"Shutting down {constant.PROJECT_NAME} Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Sampling Gate Server API

    Extensions running inside an agent session submit sampling requests here
    instead of calling a model directly. A reviewer approves, edits or denies
    each request; only approved requests reach the session agent's model.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

# Set all CORS enabled origins
cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(sampling.router, prefix=f"{constant.API_V1_STR}/sampling", tags=["sampling"])
app.include_router(sessions.router, prefix=f"{constant.API_V1_STR}/sessions", tags=["sessions"])


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)
