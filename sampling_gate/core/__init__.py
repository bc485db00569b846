"""
Core utilities and configuration for the sampling gate.

This package provides shared functionality such as logging configuration and
monitoring integration.
"""

from sampling_gate.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
