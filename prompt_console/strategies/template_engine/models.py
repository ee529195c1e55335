"""Template engine domain models.

Pydantic models specific to template resolution.
These live here to avoid circular imports with the API layer.
"""

from pydantic import BaseModel, Field


class ResolvedPrompt(BaseModel):
    """A prompt template rendered against a variable set."""

    template: str = Field(description="The template text before substitution")
    text: str = Field(description="The rendered prompt text")
    variables: dict[str, str] = Field(
        default_factory=dict,
        description="Variable set used for rendering, in template order",
    )
    missing: list[str] = Field(
        default_factory=list,
        description="Placeholder names that had no value or an empty value",
    )

    @property
    def is_complete(self) -> bool:
        """Whether every placeholder received a non-empty value."""
        return not self.missing
