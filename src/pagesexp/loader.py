"""Obtain a detached, mutable copy of a document's root element.

Nothing downstream ever touches the caller's tree: strings are parsed into a
fresh soup, and parsed trees are deep-copied before the root is handed out.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path

from bs4 import BeautifulSoup, FeatureNotFound, Tag
from bs4.builder import ParserRejectedMarkup

from pagesexp.config import Settings
from pagesexp.errors import DocumentUnavailable
from pagesexp.fetcher import FetchError, fetch_html

logger = logging.getLogger(__name__)


def looks_like_url(source: str) -> bool:
    head = source.lstrip()[:8].lower()
    return head.startswith("http://") or head.startswith("https://")


def _parse(markup: str | bytes, parser: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(markup, parser)
    except FeatureNotFound as exc:
        raise DocumentUnavailable(f"HTML parser '{parser}' is not installed") from exc
    except ParserRejectedMarkup as exc:
        raise DocumentUnavailable(f"Markup rejected by {parser}: {exc}") from exc


def _detach_root(soup: BeautifulSoup) -> Tag:
    html = soup.find("html")
    if html is not None:
        return html.extract()

    # Fragment without an <html> element: adopt the top-level nodes.
    root = soup.new_tag("html")
    for node in list(soup.contents):
        root.append(node.extract())
    return root


def load_tree(
    source: str | bytes | Tag,
    settings: Settings | None = None,
    parser: str | None = None,
) -> Tag:
    """
    Return a detached copy of the document's ``html`` element.

    ``source`` is rendered markup or an already-parsed bs4 tree. Parsed trees
    are copied, never mutated.
    """
    if parser is None:
        parser = settings.html_parser if settings is not None else "lxml"

    if isinstance(source, Tag):
        html = source if source.name == "html" else source.find("html")
        if html is not None:
            return copy.copy(html)
        if isinstance(source, BeautifulSoup):
            return _detach_root(copy.copy(source))
        root = BeautifulSoup("", "html.parser").new_tag("html")
        root.append(copy.copy(source))
        return root

    if isinstance(source, (str, bytes)):
        if not source.strip():
            raise DocumentUnavailable("Document is empty")
        soup = _parse(source, parser)
        root = _detach_root(soup)
        logger.debug("Parsed %d bytes with %s", len(source), parser)
        return root

    if source is None:
        raise DocumentUnavailable("No document supplied")
    raise DocumentUnavailable(f"Unsupported document source: {type(source).__name__}")


def load_url(url: str, settings: Settings) -> Tag:
    """Render ``url`` remotely and load the resulting document."""
    try:
        html = fetch_html(url, settings)
    except FetchError as exc:
        raise DocumentUnavailable(str(exc)) from exc
    return load_tree(html, settings)


def load_file(path: str | Path, settings: Settings | None = None) -> Tag:
    try:
        markup = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentUnavailable(f"Cannot read {path}: {exc}") from exc
    return load_tree(markup, settings)


def load_source(source, settings: Settings | None = None) -> Tag:
    """Dispatch on the source kind: URL string, markup, or parsed tree."""
    if isinstance(source, str) and looks_like_url(source):
        if settings is None:
            try:
                settings = Settings.from_env()
            except ValueError as exc:
                raise DocumentUnavailable(f"Invalid fetch settings: {exc}") from exc
        return load_url(source.strip(), settings)
    return load_tree(source, settings)
