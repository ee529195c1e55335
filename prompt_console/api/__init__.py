"""Backend API client, request/response schemas and form helpers."""

from prompt_console.api.schemas import (
    PlaygroundRequest,
    PlaygroundResponse,
    Prompt,
    PromptCreate,
    PromptUpdate,
    PromptVersion,
    Tag,
)
from prompt_console.api.client import PromptAPIClient, PromptAPIError

__all__ = [
    "PlaygroundRequest",
    "PlaygroundResponse",
    "Prompt",
    "PromptAPIClient",
    "PromptAPIError",
    "PromptCreate",
    "PromptUpdate",
    "PromptVersion",
    "Tag",
]
