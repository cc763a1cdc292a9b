"""
Storage configuration using Pydantic settings.

Configuration comes from environment variables with sensible defaults.
Supports mock mode for local development.
"""

from .settings import Settings, configure_logging, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
