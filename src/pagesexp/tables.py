"""Static tag and attribute tables shared by the compaction stages."""

from __future__ import annotations

# Non-content tags removed together with their whole subtree.
REMOVE_TAGS: frozenset[str] = frozenset({
    "script", "style", "noscript", "template", "meta", "link", "svg", "math",
})

# Standard HTML vocabulary. Anything else (custom elements, typos, vendor
# tags) is unwrapped so its children survive.
ALLOWED_HTML_TAGS: frozenset[str] = frozenset({
    "html", "head", "title", "base", "link", "meta", "style", "script", "noscript", "body",
    "section", "nav", "article", "aside", "h1", "h2", "h3", "h4", "h5", "h6", "header",
    "footer", "address", "main", "p", "hr", "pre", "blockquote", "ol", "ul", "li", "dl", "dt",
    "dd", "figure", "figcaption", "div", "a", "em", "strong", "small", "s", "cite", "q", "dfn",
    "abbr", "ruby", "rb", "rt", "rtc", "rp", "data", "time", "code", "var", "samp", "kbd",
    "sub", "sup", "i", "b", "u", "mark", "bdi", "bdo", "span", "br", "wbr", "ins", "del",
    "picture", "source", "img", "iframe", "embed", "object", "param", "video", "audio", "track",
    "map", "area", "table", "caption", "colgroup", "col", "tbody", "thead", "tfoot", "tr", "td",
    "th", "form", "label", "input", "button", "select", "datalist", "optgroup", "option", "textarea",
    "output", "progress", "meter", "fieldset", "legend", "details", "summary", "dialog", "slot",
    "template", "canvas", "menu",
})

# Extra attributes kept per tag when attribute stripping is on.
# <form> gets nothing beyond the global keep list.
TAG_ATTR_ALLOW: dict[str, frozenset[str]] = {
    "a": frozenset({"href"}),
    "img": frozenset({"src", "srcset"}),
    "input": frozenset({"type", "name", "value", "checked", "disabled", "placeholder"}),
    "label": frozenset({"for"}),
    "button": frozenset({"type", "name", "value", "disabled"}),
    "select": frozenset({"name", "disabled", "multiple"}),
    "option": frozenset({"value", "selected", "disabled"}),
    "textarea": frozenset({"name", "disabled", "placeholder"}),
    "form": frozenset(),
    "iframe": frozenset({"src"}),
}

# Attributes the serializer emits when no keep list is configured.
DEFAULT_SERIALIZED_ATTRS: frozenset[str] = frozenset({
    "id", "class", "name", "href", "src", "srcset", "for", "value", "type", "role",
})

DEFAULT_INTERACTIVE_TAGS: tuple[str, ...] = ("a", "button", "input", "i", "select", "textarea")
DEFAULT_KEEP_ATTRS: tuple[str, ...] = ("id", "class", "href", "src", "srcset")

# Elements that anchor the output and survive relevance pruning.
ANCHOR_TAGS: frozenset[str] = frozenset({"html", "body"})
