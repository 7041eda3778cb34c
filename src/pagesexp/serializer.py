"""S-expression serializer.

Each element becomes ``(head {:attr "value"} children...)`` where the head is
a CSS-like token: tag (``div`` left implicit), ``#id``, then ``.class`` per
class token. Text children are quoted strings with whitespace collapsed.

Example::

    (html (body (#main.wide (a {:href "/home"} "Home") (button "Go"))))
"""

from __future__ import annotations

from bs4 import Tag

from pagesexp.dom import attr_text, class_tokens, get_attr, is_text, tag_name
from pagesexp.models import CompactOptions
from pagesexp.tables import DEFAULT_SERIALIZED_ATTRS

_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"})


def quote(value: str) -> str:
    return '"' + value.translate(_ESCAPES) + '"'


def normalize_text(value: str) -> str:
    return " ".join(value.split())


def head_token(el: Tag, options: CompactOptions) -> str:
    name = tag_name(el)
    if not options.css_head:
        return name

    if name == "div":
        token = ""
    elif name == "span":
        token = options.span_alias
    else:
        token = name

    el_id = get_attr(el, "id").strip()
    if options.include_id_in_head and el_id:
        token += f"#{el_id}"
    token += "".join(f".{cls}" for cls in class_tokens(el))
    return token or "div"


def attr_items(el: Tag, options: CompactOptions) -> list[tuple[str, str]]:
    """Attributes left after head extraction, filtered and sorted by name."""
    keep = options.keep_attrs or DEFAULT_SERIALIZED_ATTRS
    id_in_head = options.css_head and options.include_id_in_head and get_attr(el, "id").strip()

    items: list[tuple[str, str]] = []
    for name, value in el.attrs.items():
        key = name.lower()
        if options.css_head and key == "class":
            continue
        if id_in_head and key == "id":
            continue
        if key not in keep:
            continue
        items.append((key, attr_text(value)))
    items.sort(key=lambda kv: kv[0])
    return items


def _format_attrs(items: list[tuple[str, str]], options: CompactOptions) -> str:
    if not items:
        return ""
    pairs = [f":{key} {quote(value)}" for key, value in items]
    if options.attr_map:
        return " {" + " ".join(pairs) + "}"
    return "".join(f" {pair}" for pair in pairs)


def _emit(node, options: CompactOptions, depth: int) -> str:
    pad = " " * (options.indent * depth) if options.pretty else ""

    if is_text(node):
        text = normalize_text(str(node))
        if not text:
            return ""
        return pad + quote(text)

    if not isinstance(node, Tag):
        return ""

    out = pad + "(" + head_token(node, options) + _format_attrs(attr_items(node, options), options)
    frags = [frag for frag in (_emit(child, options, depth + 1) for child in node.children) if frag]
    if not frags:
        return out + ")"
    if options.pretty:
        return out + "\n" + "\n".join(frags) + "\n" + pad + ")"
    return out + " " + " ".join(frags) + ")"


def serialize(root: Tag, options: CompactOptions | None = None) -> str:
    """Render ``root`` as a deterministic S-expression string."""
    return _emit(root, options or CompactOptions(), 0)
