"""Template engine strategies.

Implements placeholder extraction, variable reconciliation and rendering
for prompt templates.
"""

from prompt_console.strategies.template_engine.models import ResolvedPrompt
from prompt_console.strategies.template_engine.resolver import (
    TemplateResolver,
    extract_placeholders,
    reconcile,
    render,
)

__all__ = [
    "ResolvedPrompt",
    "TemplateResolver",
    "extract_placeholders",
    "reconcile",
    "render",
]
