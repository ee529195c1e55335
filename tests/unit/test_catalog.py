"""Unit tests for the model catalog normalizer and prompt list filters."""

import pytest

from prompt_console.api.schemas import Prompt
from prompt_console.strategies.catalog import (
    KNOWN_MODELS,
    collect_tags,
    derive_model_info,
    filter_prompts,
    model_label,
    normalize_model_catalog,
)


# =============================================================================
# Model Catalog Tests
# =============================================================================


class TestNormalizeModelCatalog:
    """Test suite for normalize_model_catalog."""

    def test_known_catalog_has_six_models(self):
        """Test the built-in catalog contents."""
        assert list(KNOWN_MODELS) == [
            "openai/gpt-4",
            "openai/gpt-3.5-turbo",
            "anthropic/claude-3-opus",
            "anthropic/claude-3-sonnet",
            "google/gemini-pro",
            "meta/llama-2-70b",
        ]

    def test_mapping_of_ids(self):
        """Test a mapping from id to entry, keeping upstream order."""
        payload = {
            "anthropic/claude-3-opus": {"description": "Custom"},
            "openai/gpt-4": {},
        }
        catalog = normalize_model_catalog(payload)

        assert list(catalog) == ["anthropic/claude-3-opus", "openai/gpt-4"]
        assert catalog["anthropic/claude-3-opus"].description == "Custom"
        assert catalog["anthropic/claude-3-opus"].name == "Claude 3 Opus"
        assert catalog["openai/gpt-4"] == KNOWN_MODELS["openai/gpt-4"]

    def test_wrapped_list(self):
        """Test a {"models": [...]} payload with camelCase fields."""
        payload = {
            "models": [
                {
                    "id": "mistral/mistral-large",
                    "displayName": "Mistral Large",
                    "contextWindow": 32000,
                    "inputPrice": 0.004,
                    "outputPrice": "$0.012 / 1K tokens",
                },
            ]
        }
        info = normalize_model_catalog(payload)["mistral/mistral-large"]

        assert info.name == "Mistral Large"
        assert info.provider == "Mistral"
        assert info.context_window == "32,000 tokens"
        assert info.input_price == "$0.004 / 1K tokens"
        assert info.output_price == "$0.012 / 1K tokens"

    def test_list_of_bare_ids(self):
        """Test a plain list of id strings."""
        catalog = normalize_model_catalog(["google/gemini-pro", "acme/rocket-1"])

        assert catalog["google/gemini-pro"].provider == "Google"
        assert catalog["acme/rocket-1"].provider == "acme"
        assert catalog["acme/rocket-1"].name == "rocket-1"

    def test_string_entry_in_mapping_is_name(self):
        """Test that a string value in an id mapping is used as the display name."""
        catalog = normalize_model_catalog({"openai/gpt-4o": "GPT-4o"})
        assert catalog["openai/gpt-4o"].name == "GPT-4o"
        assert catalog["openai/gpt-4o"].provider == "OpenAI"

    def test_provider_names_normalized(self):
        """Test that lowercase provider keys map to display names."""
        catalog = normalize_model_catalog([{"id": "x/y", "provider": "anthropic"}])
        assert catalog["x/y"].provider == "Anthropic"

    def test_entries_without_id_skipped(self):
        """Test that unidentifiable entries are dropped, not fatal."""
        payload = [{"name": "nameless"}, 42, None, {"id": "  "}, {"model": "meta/llama-3"}]
        catalog = normalize_model_catalog(payload)
        assert list(catalog) == ["meta/llama-3"]

    def test_duplicate_ids_keep_first(self):
        """Test that duplicate ids keep the first entry."""
        payload = [{"id": "a/b", "name": "First"}, {"id": "a/b", "name": "Second"}]
        assert normalize_model_catalog(payload)["a/b"].name == "First"

    @pytest.mark.parametrize("payload", [None, "openai/gpt-4", 3, True])
    def test_unexpected_payload_returns_empty(self, payload):
        """Test that non-collection payloads give an empty catalog."""
        assert normalize_model_catalog(payload) == {}

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_numbers_are_dropped(self, value):
        """Test that NaN and infinite numbers leave the field empty instead of raising."""
        payload = {"x/y": {"context_window": value, "input_price": value, "output_price": value}}

        info = normalize_model_catalog(payload)["x/y"]

        assert info.context_window == ""
        assert info.input_price == ""
        assert info.output_price == ""

    def test_non_finite_known_model_keeps_builtin_values(self):
        """Test that a NaN override does not erase built-in catalog data."""
        payload = {"openai/gpt-4": {"context_window": float("nan")}}
        info = normalize_model_catalog(payload)["openai/gpt-4"]
        assert info.context_window == KNOWN_MODELS["openai/gpt-4"].context_window

    def test_does_not_mutate_known_models(self):
        """Test that overrides never leak into the built-in catalog."""
        normalize_model_catalog({"openai/gpt-4": {"name": "Renamed"}})
        assert KNOWN_MODELS["openai/gpt-4"].name == "GPT-4"

    def test_derive_model_info_without_provider(self):
        """Test ids that have no provider prefix."""
        info = derive_model_info("local-model")
        assert info.name == "local-model"
        assert info.provider == "Other"

    def test_model_label(self):
        """Test the provider / name label."""
        assert model_label(KNOWN_MODELS["meta/llama-2-70b"]) == "Meta / Llama 2 70B"


# =============================================================================
# Prompt Filter Tests
# =============================================================================


def prompt(id: int, name: str, text: str, tags: list[str], description: str | None = None) -> Prompt:
    return Prompt(
        id=id,
        name=name,
        description=description,
        text=text,
        tags=[{"id": i, "name": t} for i, t in enumerate(tags)],
    )


class TestPromptFilters:
    """Test suite for client-side prompt list filtering."""

    @pytest.fixture
    def prompts(self):
        """Create a small prompt catalog."""
        return [
            prompt(1, "Support Reply", "Reply to {{customer}}", ["support", "email"]),
            prompt(2, "Summarizer", "Summarize {{doc}}", ["analysis"], "Short summaries"),
            prompt(3, "Escalation", "Escalate ticket", ["support"]),
        ]

    def test_collect_tags_first_seen_order(self, prompts):
        """Test distinct tags in first-seen order."""
        assert collect_tags(prompts) == ["support", "email", "analysis"]

    def test_no_filters_returns_all(self, prompts):
        """Test that empty filters keep every prompt."""
        assert filter_prompts(prompts) == prompts
        assert filter_prompts(prompts, search="", tag="") == prompts

    def test_search_is_case_insensitive(self, prompts):
        """Test substring search across name, description and text."""
        assert [p.id for p in filter_prompts(prompts, search="REPLY")] == [1]
        assert [p.id for p in filter_prompts(prompts, search="short")] == [2]
        assert [p.id for p in filter_prompts(prompts, search="ticket")] == [3]

    def test_tag_filter(self, prompts):
        """Test exact tag filtering."""
        assert [p.id for p in filter_prompts(prompts, tag="support")] == [1, 3]
        assert filter_prompts(prompts, tag="supp") == []

    def test_search_and_tag_combined(self, prompts):
        """Test that both filters must match."""
        assert [p.id for p in filter_prompts(prompts, search="escalate", tag="support")] == [3]
