"""Structural filtering and payload sanitizing of the working tree.

Removes what is never page content (comments, scripts, styles, SVG, MathML,
namespaced vendor tags), flattens custom elements into their children, and
blanks inlined base64 media so one icon cannot dominate the output.
"""

from __future__ import annotations

from bs4 import Comment, Tag

from pagesexp.dom import child_tags, get_attr, tag_name
from pagesexp.tables import ALLOWED_HTML_TAGS, REMOVE_TAGS

IMAGE_TAGS = ("img",)
DATA_SCHEME = "data:"


def remove_comments(node: Tag) -> None:
    for child in list(node.children):
        if isinstance(child, Comment):
            child.extract()
        elif isinstance(child, Tag):
            remove_comments(child)


def _remove_matching(node: Tag, predicate) -> None:
    # Removed subtrees are never descended into.
    for child in child_tags(node):
        if predicate(child):
            child.decompose()
        else:
            _remove_matching(child, predicate)


def remove_denylisted(root: Tag) -> None:
    _remove_matching(root, lambda el: tag_name(el) in REMOVE_TAGS)


def remove_namespaced(root: Tag) -> None:
    _remove_matching(root, lambda el: ":" in tag_name(el))


def unwrap_unknown(node: Tag) -> None:
    """Replace every non-HTML element below ``node`` with its children, in place."""
    for child in child_tags(node):
        unwrap_unknown(child)
        if tag_name(child) not in ALLOWED_HTML_TAGS:
            child.unwrap()


def filter_structure(root: Tag) -> None:
    """Comments, denylisted tags, namespaced tags, then custom-element unwrapping."""
    remove_comments(root)
    remove_denylisted(root)
    remove_namespaced(root)
    unwrap_unknown(root)


def _is_data_uri(value: str) -> bool:
    return value.strip().lower().startswith(DATA_SCHEME)


def strip_srcset(srcset: str) -> str:
    """Drop candidates starting with data: and rejoin the rest."""
    kept = [
        part
        for part in (p.strip() for p in srcset.split(","))
        if part and not _is_data_uri(part)
    ]
    return ", ".join(kept)


def strip_data_uris(root: Tag) -> None:
    for el in root.find_all(IMAGE_TAGS):
        src = get_attr(el, "src")
        if src and _is_data_uri(src):
            el["src"] = ""
        srcset = get_attr(el, "srcset")
        if srcset and DATA_SCHEME in srcset.lower():
            el["srcset"] = strip_srcset(srcset)
