"""Unit tests for API schemas and prompt form helpers."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from prompt_console.api.forms import add_meta, add_tag, remove_meta, remove_tag
from prompt_console.api.schemas import (
    PlaygroundRequest,
    Prompt,
    PromptCreate,
    PromptUpdate,
    stringify_meta,
)


def make_prompt(**overrides) -> Prompt:
    """Build a prompt payload the way the backend returns it."""
    payload = {
        "id": 1,
        "name": "Support reply",
        "description": "Answer a customer ticket",
        "text": "Reply to {{customer_name}} about {{issue}}.",
        "tags": [{"id": 1, "name": "support"}, {"id": 2, "name": "email"}],
        "meta": {"owner": "cx-team"},
        "version": 2,
        "versions": [
            {
                "id": 10,
                "prompt_id": 1,
                "version": 1,
                "text": "Reply to {{customer_name}}.",
                "meta": None,
                "created_at": "2024-01-01T10:00:00Z",
            },
        ],
    }
    payload.update(overrides)
    return Prompt.model_validate(payload)


# =============================================================================
# Metadata Stringification Tests
# =============================================================================


class TestStringifyMeta:
    """Test suite for metadata coercion at the API boundary."""

    def test_none_passes_through(self):
        """Test that missing metadata stays None."""
        assert stringify_meta(None) is None

    def test_scalar_values(self):
        """Test stringification of scalar JSON values."""
        meta = {"count": 3, "ratio": 0.5, "live": True, "off": False, "note": None, "s": "x"}
        assert stringify_meta(meta) == {
            "count": "3",
            "ratio": "0.5",
            "live": "true",
            "off": "false",
            "note": "",
            "s": "x",
        }

    def test_nested_values_become_compact_json(self):
        """Test that lists and objects are serialized as compact JSON."""
        meta = {"models": ["a", "b"], "limits": {"max": 10}}
        assert stringify_meta(meta) == {"models": '["a","b"]', "limits": '{"max":10}'}

    def test_non_mapping_rejected(self):
        """Test that a non-object metadata value is rejected."""
        with pytest.raises(ValueError):
            stringify_meta(["not", "a", "dict"])

    def test_prompt_meta_is_stringified(self):
        """Test that Prompt applies the coercion when parsing backend data."""
        prompt = make_prompt(meta={"temperature": 0.2, "reviewed": True})
        assert prompt.meta == {"temperature": "0.2", "reviewed": "true"}

    def test_prompt_rejects_list_meta(self):
        """Test that a malformed metadata value fails validation."""
        with pytest.raises(ValidationError):
            make_prompt(meta=[1, 2])


# =============================================================================
# Prompt Model Tests
# =============================================================================


class TestPrompt:
    """Test suite for the Prompt model."""

    def test_parses_backend_payload(self):
        """Test parsing of a full backend record."""
        prompt = make_prompt()

        assert prompt.tag_names == ["support", "email"]
        assert prompt.versions[0].created_at == datetime.fromisoformat("2024-01-01T10:00:00+00:00")
        assert prompt.versions[0].meta is None

    def test_text_for_current_version(self):
        """Test that the current version (or None) gives the current text."""
        prompt = make_prompt()
        assert prompt.text_for_version(None) == prompt.text
        assert prompt.text_for_version(2) == prompt.text

    def test_text_for_stored_version(self):
        """Test that an older version returns its stored text."""
        assert make_prompt().text_for_version(1) == "Reply to {{customer_name}}."

    def test_text_for_unknown_version_falls_back(self):
        """Test that an unknown version falls back to the current text."""
        prompt = make_prompt()
        assert prompt.text_for_version(99) == prompt.text


class TestPromptWrite:
    """Test suite for create/update request schemas."""

    def test_empty_meta_sent_as_null(self):
        """Test that empty metadata is serialized as null."""
        data = PromptCreate(name="n", text="t", meta={})
        assert data.model_dump()["meta"] is None

    def test_blank_description_sent_as_null(self):
        """Test that a blank description is serialized as null."""
        data = PromptCreate(name="n", description="   ", text="t")
        assert data.description is None

    def test_name_required(self):
        """Test that an empty name is rejected."""
        with pytest.raises(ValidationError):
            PromptCreate(name="", text="t")

    def test_from_prompt(self):
        """Test building an editable copy of an existing prompt."""
        update = PromptUpdate.from_prompt(make_prompt())

        assert isinstance(update, PromptUpdate)
        assert update.model_dump() == {
            "name": "Support reply",
            "description": "Answer a customer ticket",
            "text": "Reply to {{customer_name}} about {{issue}}.",
            "tags": ["support", "email"],
            "meta": {"owner": "cx-team"},
        }

    def test_playground_request_requires_models(self):
        """Test that at least one model must be requested."""
        with pytest.raises(ValidationError):
            PlaygroundRequest(prompt_id=1, models=[])


# =============================================================================
# Form Helper Tests
# =============================================================================


class TestFormHelpers:
    """Test suite for tag and metadata editing helpers."""

    def test_add_tag(self):
        """Test adding a new, trimmed tag."""
        assert add_tag(["a"], " b ") == ["a", "b"]

    def test_add_tag_ignores_blank_and_duplicates(self):
        """Test that blank and duplicate tags are ignored."""
        assert add_tag(["a"], "   ") == ["a"]
        assert add_tag(["a"], "a") == ["a"]

    def test_add_tag_does_not_mutate(self):
        """Test that the input list is left unchanged."""
        tags = ["a"]
        add_tag(tags, "b")
        assert tags == ["a"]

    def test_remove_tag(self):
        """Test removing a tag."""
        assert remove_tag(["a", "b"], "a") == ["b"]
        assert remove_tag(["a"], "missing") == ["a"]

    def test_add_meta(self):
        """Test adding a metadata entry."""
        assert add_meta({"a": "1"}, "b", "2") == {"a": "1", "b": "2"}

    def test_add_meta_requires_key_and_value(self):
        """Test that blank keys or values are ignored."""
        assert add_meta({}, "", "v") == {}
        assert add_meta({}, "k", "") == {}

    def test_add_meta_does_not_overwrite(self):
        """Test that an existing key keeps its value."""
        assert add_meta({"a": "1"}, "a", "2") == {"a": "1"}

    def test_remove_meta(self):
        """Test removing a metadata entry without mutating the input."""
        meta = {"a": "1", "b": "2"}
        assert remove_meta(meta, "a") == {"b": "2"}
        assert meta == {"a": "1", "b": "2"}
