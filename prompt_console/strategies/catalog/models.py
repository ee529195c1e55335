"""Model catalog domain models.

Display information for the language models offered in the playground.
"""

from pydantic import BaseModel, Field


class ModelInfo(BaseModel):
    """Display information for one model."""

    id: str = Field(description="Model id in 'provider/name' form")
    name: str = Field(description="Human-readable model name")
    provider: str = Field(description="Human-readable provider name")
    description: str = Field(default="", description="Short model description")
    context_window: str = Field(default="", description="Context window, formatted for display")
    input_price: str = Field(default="", description="Input price, formatted for display")
    output_price: str = Field(default="", description="Output price, formatted for display")


PROVIDER_NAMES: dict[str, str] = {
    "openai": "OpenAI",
    "anthropic": "Anthropic",
    "google": "Google",
    "meta": "Meta",
    "mistral": "Mistral",
    "cohere": "Cohere",
}


KNOWN_MODELS: dict[str, ModelInfo] = {
    info.id: info
    for info in (
        ModelInfo(
            id="openai/gpt-4",
            name="GPT-4",
            provider="OpenAI",
            description="Most capable GPT-4 model, better at complex tasks and produces higher quality outputs.",
            context_window="8,192 tokens",
            input_price="$0.03 / 1K tokens",
            output_price="$0.06 / 1K tokens",
        ),
        ModelInfo(
            id="openai/gpt-3.5-turbo",
            name="GPT-3.5 Turbo",
            provider="OpenAI",
            description="Fast, inexpensive model for simple tasks. Great for quick iterations and testing.",
            context_window="16,385 tokens",
            input_price="$0.0005 / 1K tokens",
            output_price="$0.0015 / 1K tokens",
        ),
        ModelInfo(
            id="anthropic/claude-3-opus",
            name="Claude 3 Opus",
            provider="Anthropic",
            description="Most powerful Claude model, excelling at complex analysis, coding, and creative tasks.",
            context_window="200,000 tokens",
            input_price="$0.015 / 1K tokens",
            output_price="$0.075 / 1K tokens",
        ),
        ModelInfo(
            id="anthropic/claude-3-sonnet",
            name="Claude 3 Sonnet",
            provider="Anthropic",
            description="Balanced performance and speed. Ideal for enterprise workloads and scaled deployments.",
            context_window="200,000 tokens",
            input_price="$0.003 / 1K tokens",
            output_price="$0.015 / 1K tokens",
        ),
        ModelInfo(
            id="google/gemini-pro",
            name="Gemini Pro",
            provider="Google",
            description="Google's most capable model with multimodal understanding and generation capabilities.",
            context_window="32,768 tokens",
            input_price="$0.00025 / 1K tokens",
            output_price="$0.0005 / 1K tokens",
        ),
        ModelInfo(
            id="meta/llama-2-70b",
            name="Llama 2 70B",
            provider="Meta",
            description="Open-source model with strong performance across various tasks. Great for self-hosting.",
            context_window="4,096 tokens",
            input_price="$0.0007 / 1K tokens",
            output_price="$0.0009 / 1K tokens",
        ),
    )
}


def model_label(info: ModelInfo) -> str:
    """Return the 'Provider / Name' label shown in model pickers."""
    return f"{info.provider} / {info.name}"
