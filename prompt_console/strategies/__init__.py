"""Strategy implementations for the prompt console.

This package contains concrete implementations of the abstract
interfaces defined in prompt_console.interfaces.
"""

from prompt_console.strategies.catalog import (
    KNOWN_MODELS,
    ModelInfo,
    collect_tags,
    filter_prompts,
    normalize_model_catalog,
)
from prompt_console.strategies.template_engine import ResolvedPrompt, TemplateResolver

__all__ = [
    "KNOWN_MODELS",
    "ModelInfo",
    "ResolvedPrompt",
    "TemplateResolver",
    "collect_tags",
    "filter_prompts",
    "normalize_model_catalog",
]
