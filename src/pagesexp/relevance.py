"""Relevance pruning.

Keeps an element only if it is interactive, carries an id, carries its own
text, or leads to a surviving interactive descendant. Decorative wrappers
with none of those disappear together with their subtrees.
"""

from __future__ import annotations

from bs4 import Tag

from pagesexp.dom import child_tags, get_attr, is_text, tag_name
from pagesexp.models import CompactOptions
from pagesexp.tables import ANCHOR_TAGS


def interactive_selector(options: CompactOptions) -> str:
    return ",".join(sorted(options.interactive_tags))


def has_direct_text(el: Tag) -> bool:
    return any(is_text(child) and child.strip() for child in el.children)


def should_keep(el: Tag, options: CompactOptions, selector: str) -> bool:
    if tag_name(el) in options.interactive_tags:
        return True
    if get_attr(el, "id").strip():
        return True
    if has_direct_text(el):
        return True
    if selector and el.select_one(selector) is not None:
        return True
    return False


def _prune(el: Tag, options: CompactOptions, selector: str) -> bool:
    for child in child_tags(el):
        if not _prune(child, options, selector):
            child.decompose()

    for child in list(el.children):
        if is_text(child) and not child.strip():
            child.extract()

    if tag_name(el) in ANCHOR_TAGS:
        return True
    return should_keep(el, options, selector)


def prune_irrelevant(root: Tag, options: CompactOptions) -> None:
    if not options.relevant_only:
        return
    _prune(root, options, interactive_selector(options))
