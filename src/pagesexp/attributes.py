"""Attribute allow-listing."""

from __future__ import annotations

from bs4 import Tag

from pagesexp.dom import tag_name
from pagesexp.models import CompactOptions
from pagesexp.tables import TAG_ATTR_ALLOW


def allowed_attrs(tag: str, options: CompactOptions) -> frozenset[str]:
    return options.keep_attrs | TAG_ATTR_ALLOW.get(tag, frozenset())


def should_keep_attr(name: str, allowed: frozenset[str], options: CompactOptions) -> bool:
    """Decide one attribute. Event handlers and style are settled before the allow-list."""
    name = name.lower()
    if name.startswith("on"):
        return False
    if name == "style" and not options.keep_style:
        return False
    if name in allowed:
        return True
    if name.startswith("data-") and not options.drop_data_attrs:
        return True
    if name.startswith("aria-") and not options.drop_aria_attrs:
        return True
    return False


def reduce_element(el: Tag, options: CompactOptions) -> None:
    allowed = allowed_attrs(tag_name(el), options)
    for name in list(el.attrs):
        if not should_keep_attr(name, allowed, options):
            del el[name]


def reduce_attributes(root: Tag, options: CompactOptions) -> None:
    if not options.strip_attrs:
        return
    reduce_element(root, options)
    for el in root.find_all(True):
        reduce_element(el, options)
