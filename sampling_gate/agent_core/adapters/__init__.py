"""AI Framework Adapters.

This module provides adapter implementations of the provider capability for
concrete AI frameworks.

Available Adapters:
- PydanticAIProvider: Provider backed by the Pydantic AI framework
"""

from .pydantic_ai_provider import PydanticAIProvider, build_provider

__all__ = [
    "PydanticAIProvider",
    "build_provider",
]
