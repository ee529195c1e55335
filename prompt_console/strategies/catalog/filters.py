"""Prompt list filtering.

Client-side search and tag filtering for the prompt list, matching what
the backend does for its ``search`` and ``tag`` query parameters.
"""

from collections.abc import Iterable

from prompt_console.api.schemas import Prompt


def collect_tags(prompts: Iterable[Prompt]) -> list[str]:
    """Return distinct tag names across prompts, in first-seen order."""
    tags: dict[str, None] = {}
    for prompt in prompts:
        for name in prompt.tag_names:
            tags.setdefault(name, None)
    return list(tags)


def matches_search(prompt: Prompt, search: str) -> bool:
    """Case-insensitive substring match on name, description and text."""
    needle = search.strip().casefold()
    if not needle:
        return True
    haystacks = (prompt.name, prompt.description or "", prompt.text)
    return any(needle in haystack.casefold() for haystack in haystacks)


def filter_prompts(
    prompts: Iterable[Prompt],
    search: str | None = None,
    tag: str | None = None,
) -> list[Prompt]:
    """Filter prompts by search text and tag.

    Args:
        prompts: Prompts to filter.
        search: Optional search text. Blank means no search filter.
        tag: Optional exact tag name. Blank means no tag filter.

    Returns:
        Matching prompts in their original order.
    """
    return [
        prompt
        for prompt in prompts
        if (not search or matches_search(prompt, search))
        and (not tag or tag in prompt.tag_names)
    ]
