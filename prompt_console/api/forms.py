"""Tag and metadata editing helpers for the prompt form.

Every helper returns a new collection and leaves its input untouched, so
form state held by the UI can be replaced wholesale on each edit.
"""

from collections.abc import Mapping, Sequence


def add_tag(tags: Sequence[str], tag: str) -> list[str]:
    """Append a tag unless it is blank or already present.

    Args:
        tags: Current tag names.
        tag: Tag typed by the user.

    Returns:
        The updated tag list.
    """
    tag = tag.strip()
    if not tag or tag in tags:
        return list(tags)
    return [*tags, tag]


def remove_tag(tags: Sequence[str], tag: str) -> list[str]:
    """Drop every occurrence of a tag."""
    return [t for t in tags if t != tag]


def add_meta(meta: Mapping[str, str], key: str, value: str) -> dict[str, str]:
    """Add a metadata entry.

    Blank keys or values are ignored, and an existing key is never
    overwritten; remove it first to change its value.

    Args:
        meta: Current metadata.
        key: Metadata key typed by the user.
        value: Metadata value typed by the user.

    Returns:
        The updated metadata mapping.
    """
    key = key.strip()
    if not key or not value or key in meta:
        return dict(meta)
    return {**meta, key: value}


def remove_meta(meta: Mapping[str, str], key: str) -> dict[str, str]:
    return {k: v for k, v in meta.items() if k != key}
