"""Hidden-subtree pruning.

An element is dropped when it hides itself (``hidden``, ``aria-hidden``,
``<input type=hidden>``, inline ``display:none`` / ``visibility:hidden`` /
zero opacity) or when any ancestor does.
"""

from __future__ import annotations

from bs4 import Tag

from pagesexp.dom import child_tags, get_attr, has_attr, tag_name

ARIA_HIDDEN_VALUES = {"true", "1", "yes"}


def parse_style(value: str) -> dict[str, str]:
    """Parse an inline style into lower-cased ``{property: value}`` pairs."""
    styles: dict[str, str] = {}
    for item in value.split(";"):
        key, sep, val = item.partition(":")
        if not sep:
            continue
        key = key.strip().lower()
        if key:
            styles[key] = val.strip().lower()
    return styles


def is_self_hidden(el: Tag) -> bool:
    if has_attr(el, "hidden"):
        return True
    if get_attr(el, "aria-hidden").strip().lower() in ARIA_HIDDEN_VALUES:
        return True
    if tag_name(el) == "input" and get_attr(el, "type").strip().lower() == "hidden":
        return True

    style = get_attr(el, "style")
    if style:
        styles = parse_style(style)
        if "none" in styles.get("display", ""):
            return True
        if "hidden" in styles.get("visibility", ""):
            return True
        opacity = styles.get("opacity")
        if opacity is not None and opacity.startswith("0"):
            return True
    return False


def prune_hidden(node: Tag, hidden_upstream: bool = False) -> None:
    """Delete hidden children of ``node`` recursively; ``node`` itself is not judged."""
    for child in child_tags(node):
        hidden = hidden_upstream or is_self_hidden(child)
        if hidden:
            child.decompose()
        else:
            prune_hidden(child, hidden)
