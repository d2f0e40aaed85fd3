"""Bulb state sources.

Importing this package registers the built-in providers.
"""

from .base import BulbStateProvider
from .home_assistant import HomeAssistantProvider
from .registry import create_provider, get_provider_class, get_registry, register_provider

__all__ = [
    "BulbStateProvider",
    "HomeAssistantProvider",
    "create_provider",
    "get_provider_class",
    "get_registry",
    "register_provider",
]
