"""Model catalog normalizer.

Shapes the backend's model-catalog response into the ordered
``id -> ModelInfo`` mapping the playground panels display. The backend
payload is loosely typed, so every entry is coerced field by field and
entries that cannot be identified are skipped rather than failing the
whole catalog.
"""

import logging
import math
from typing import Any

from prompt_console.strategies.catalog.models import KNOWN_MODELS, PROVIDER_NAMES, ModelInfo

logger = logging.getLogger(__name__)


# Upstream key spellings for each ModelInfo field
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name", "display_name", "displayName", "label"),
    "provider": ("provider", "provider_name", "providerName", "owned_by"),
    "description": ("description", "summary"),
    "context_window": ("context_window", "contextWindow", "context_length", "contextLength"),
    "input_price": ("input_price", "inputPrice", "prompt_price"),
    "output_price": ("output_price", "outputPrice", "completion_price"),
}

_ID_KEYS = ("id", "model", "model_id", "modelId")


def _first(entry: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = entry.get(key)
        if value not in (None, ""):
            return value
    return None


def _format_context(value: Any) -> str:
    if isinstance(value, bool):
        return ""
    if isinstance(value, int | float):
        if not math.isfinite(value):
            return ""
        return f"{int(value):,} tokens"
    return str(value)


def _format_price(value: Any) -> str:
    if isinstance(value, bool):
        return ""
    if isinstance(value, int | float):
        if not math.isfinite(value):
            return ""
        return f"${value:g} / 1K tokens"
    return str(value)


def derive_model_info(model_id: str) -> ModelInfo:
    """Build display information from a ``provider/name`` model id.

    Args:
        model_id: The model id.

    Returns:
        Built-in information when the id is known, otherwise fields
        derived from the id itself.
    """
    if model_id in KNOWN_MODELS:
        return KNOWN_MODELS[model_id].model_copy()

    provider_key, sep, name = model_id.partition("/")
    if not sep:
        return ModelInfo(id=model_id, name=model_id, provider="Other")
    provider = PROVIDER_NAMES.get(provider_key.lower(), provider_key)
    return ModelInfo(id=model_id, name=name or model_id, provider=provider)


def _normalize_entry(model_id: Any, entry: Any) -> ModelInfo | None:
    """Coerce one upstream entry; returns None if it has no usable id."""
    if isinstance(entry, str) and model_id is None:
        model_id, entry = entry, {}
    elif isinstance(entry, str):
        entry = {"name": entry}
    elif not isinstance(entry, dict):
        entry = {}

    if model_id is None:
        model_id = _first(entry, _ID_KEYS)
    if not isinstance(model_id, str) or not model_id.strip():
        return None
    model_id = model_id.strip()

    info = derive_model_info(model_id)
    updates: dict[str, str] = {}
    for field, aliases in _FIELD_ALIASES.items():
        value = _first(entry, aliases)
        if value is None:
            continue
        match field:
            case "context_window":
                formatted = _format_context(value)
            case "input_price" | "output_price":
                formatted = _format_price(value)
            case _:
                formatted = str(value)
        if formatted:
            updates[field] = formatted

    if "provider" in updates:
        updates["provider"] = PROVIDER_NAMES.get(updates["provider"].lower(), updates["provider"])

    return info.model_copy(update=updates)


def normalize_model_catalog(payload: Any) -> dict[str, ModelInfo]:
    """Normalize an upstream model catalog.

    Accepted shapes:
    - ``{"openai/gpt-4": {...}, ...}``: mapping of id to entry
    - ``{"models": [...]}``: wrapped list
    - ``[...]``: list of entries or bare id strings

    Args:
        payload: The decoded JSON body from the backend.

    Returns:
        Mapping of model id to ModelInfo in upstream order. Duplicate ids
        keep their first entry.
    """
    if isinstance(payload, dict) and isinstance(payload.get("models"), list):
        pairs = [(None, entry) for entry in payload["models"]]
    elif isinstance(payload, dict):
        pairs = list(payload.items())
    elif isinstance(payload, list):
        pairs = [(None, entry) for entry in payload]
    else:
        logger.warning(f"Unexpected model catalog payload type: {type(payload).__name__}")
        return {}

    catalog: dict[str, ModelInfo] = {}
    skipped = 0
    for model_id, entry in pairs:
        info = _normalize_entry(model_id, entry)
        if info is None:
            skipped += 1
            continue
        catalog.setdefault(info.id, info)

    if skipped:
        logger.warning(f"Skipped {skipped} model catalog entries without an id")
    logger.debug(f"Normalized model catalog: {len(catalog)} models")
    return catalog
