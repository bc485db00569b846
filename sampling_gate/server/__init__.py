"""
Sampling Gate Server Package.

This package contains the web server exposing the sampling review workflow.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    services: Dependency providers for the API layer.
    middleware: Request logging and tracing middleware.
    exception_handlers: Mapping of errors to HTTP responses.
"""
