"""Model catalog and prompt list strategies."""

from prompt_console.strategies.catalog.filters import collect_tags, filter_prompts
from prompt_console.strategies.catalog.models import KNOWN_MODELS, ModelInfo, model_label
from prompt_console.strategies.catalog.normalizer import derive_model_info, normalize_model_catalog

__all__ = [
    "KNOWN_MODELS",
    "ModelInfo",
    "collect_tags",
    "derive_model_info",
    "filter_prompts",
    "model_label",
    "normalize_model_catalog",
]
