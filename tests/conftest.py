"""Shared fixtures for pagesexp tests."""

from __future__ import annotations

import pytest
from bs4 import Tag

from pagesexp.config import Settings
from pagesexp.loader import load_tree
from pagesexp.models import CompactOptions


@pytest.fixture()
def settings() -> Settings:
    """Minimal settings with a dummy key for testing."""
    return Settings(scraper_api_key="test-scraper-key")


@pytest.fixture()
def options() -> CompactOptions:
    return CompactOptions()


def make_root(markup: str, parser: str = "lxml") -> Tag:
    """Parse markup into a detached <html> root."""
    return load_tree(markup, parser=parser)


SAMPLE_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <title>Shop</title>
    <meta charset="utf-8">
    <link rel="stylesheet" href="/app.css">
    <script>var secret = 1; console.log("tracking");</script>
    <style>body { color: red; }</style>
</head>
<body>
    <!-- tracking pixel -->
    <my-header><nav id="top"><a href="/home" onclick="track()">Home</a></nav></my-header>
    <div class="wrapper"><div class="decor"><span></span></div></div>
    <main>
        <h1>Products</h1>
        <div class="card" data-sku="42"><button id="buy" class="btn primary" aria-label="Buy">Buy now</button></div>
        <img src="data:image/png;base64,AAAA" alt="pixel">
        <div style="display:none"><button id="ghost">Hidden</button></div>
    </main>
    <svg><text>icon</text></svg>
</body>
</html>
"""

SAMPLE_SEXPR = (
    '(html (body'
    ' (nav#top (a {:href "/home"} "Home"))'
    ' (main (h1 "Products") (.card (button#buy.btn.primary "Buy now")))))'
)
