"""API request and response schemas.

Pydantic v2 models mirroring the prompt catalog backend.
"""

import json
from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, field_validator


def stringify_meta(meta: Any) -> dict[str, str] | None:
    """Coerce free-form metadata into a string-to-string mapping.

    Args:
        meta: Metadata as received from the backend or a form.

    Returns:
        A new mapping with string keys and values, or None if meta is None.

    Raises:
        ValueError: If meta is neither None nor a mapping.
    """
    if meta is None:
        return None
    if not isinstance(meta, dict):
        raise ValueError(f"Metadata must be an object, got {type(meta).__name__}")

    result: dict[str, str] = {}
    for key, value in meta.items():
        match value:
            case None:
                result[str(key)] = ""
            case bool():
                result[str(key)] = "true" if value else "false"
            case str():
                result[str(key)] = value
            case dict() | list():
                result[str(key)] = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
            case _:
                result[str(key)] = str(value)
    return result


Metadata = Annotated[dict[str, str] | None, BeforeValidator(stringify_meta)]


# =============================================================================
# Prompt Schemas
# =============================================================================


class Tag(BaseModel):
    """A tag attached to a prompt."""

    id: int
    name: str


class PromptVersion(BaseModel):
    """A stored revision of a prompt's text and metadata."""

    id: int
    prompt_id: int
    version: int
    text: str
    meta: Metadata = None
    created_at: datetime


class Prompt(BaseModel):
    """A prompt record as returned by the backend."""

    id: int
    name: str
    description: str | None = None
    text: str
    tags: list[Tag] = Field(default_factory=list)
    meta: Metadata = None
    version: int = 1
    versions: list[PromptVersion] = Field(default_factory=list)

    @property
    def tag_names(self) -> list[str]:
        """Names of the prompt's tags, in backend order."""
        return [tag.name for tag in self.tags]

    def text_for_version(self, version: int | None) -> str:
        """Return the text of a stored version, or the current text.

        Args:
            version: Version number, or None for the current version.

        Returns:
            The matching version's text, falling back to the current text.
        """
        if version is None or version == self.version:
            return self.text
        for entry in self.versions:
            if entry.version == version:
                return entry.text
        return self.text


class PromptWrite(BaseModel):
    """Fields sent when creating or updating a prompt."""

    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    text: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    meta: Metadata = None

    @field_validator("description")
    @classmethod
    def blank_description_to_none(cls, v: str | None) -> str | None:
        """Send blank descriptions as null."""
        if v is None or not v.strip():
            return None
        return v

    @field_validator("meta")
    @classmethod
    def empty_meta_to_none(cls, v: dict[str, str] | None) -> dict[str, str] | None:
        """Send an empty metadata mapping as null."""
        return v or None

    @classmethod
    def from_prompt(cls, prompt: Prompt) -> "PromptWrite":
        """Build an editable copy of an existing prompt."""
        return cls(
            name=prompt.name,
            description=prompt.description,
            text=prompt.text,
            tags=prompt.tag_names,
            meta=prompt.meta,
        )


class PromptCreate(PromptWrite):
    """Request schema for creating a prompt."""


class PromptUpdate(PromptWrite):
    """Request schema for updating a prompt."""


# =============================================================================
# Playground Schemas
# =============================================================================


class PlaygroundRequest(BaseModel):
    """Request schema for testing a prompt against one or more models."""

    prompt_id: int
    version: int | None = None
    models: list[str] = Field(min_length=1)
    variables: dict[str, str] | None = None


class PlaygroundResponse(BaseModel):
    """Model responses keyed by model id."""

    responses: dict[str, str] = Field(default_factory=dict)
