"""Abstract interfaces for pluggable console strategies."""

from prompt_console.interfaces.template import (
    BaseTemplateResolver,
    MissingValueFallback,
    PlaceholderPolicy,
)

__all__ = [
    "BaseTemplateResolver",
    "MissingValueFallback",
    "PlaceholderPolicy",
]
