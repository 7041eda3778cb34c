"""Small helpers over bs4 nodes shared by the pipeline stages."""

from __future__ import annotations

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString


def is_text(node) -> bool:
    """True for character data (not comments, CDATA, doctypes or PIs)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def tag_name(tag: Tag) -> str:
    return (tag.name or "").lower()


def attr_text(value) -> str:
    """Flatten bs4 attribute values; multi-valued ones (class, rel) come as lists."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


def get_attr(tag: Tag, name: str) -> str:
    """Case-insensitive attribute lookup returning '' when absent."""
    for key, value in tag.attrs.items():
        if key.lower() == name:
            return attr_text(value)
    return ""


def has_attr(tag: Tag, name: str) -> bool:
    return any(key.lower() == name for key in tag.attrs)


def class_tokens(tag: Tag) -> list[str]:
    return get_attr(tag, "class").split()


def child_tags(tag: Tag) -> list[Tag]:
    """Snapshot of the element children, safe to mutate while iterating."""
    return [child for child in tag.children if isinstance(child, Tag)]
