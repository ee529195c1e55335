"""Core configuration and factory components."""

from prompt_console.core.config import Settings, get_settings
from prompt_console.core.factory import ComponentFactory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
]
