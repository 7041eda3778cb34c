"""End-to-end tests for pagesexp.compactor module."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from bs4 import BeautifulSoup

from pagesexp.compactor import compact_page, compact_page_result, compact_tree
from pagesexp.errors import DocumentUnavailable, TraversalFailure
from pagesexp.models import CompactOptions

from .conftest import SAMPLE_HTML, SAMPLE_SEXPR, make_root


class TestCompactPage:
    def test_sample_html(self):
        assert compact_page(SAMPLE_HTML) == SAMPLE_SEXPR

    def test_minimal_document(self):
        result = compact_page('<div id="x"><button>Go</button></div>')
        assert result == '(html (body (#x (button "Go"))))'

    def test_deterministic(self):
        assert compact_page(SAMPLE_HTML) == compact_page(SAMPLE_HTML)

    def test_script_subtree_dropped(self):
        html = '<div id="x"><script><b id="inner">evil()</b></script><a href="/ok">ok</a></div>'
        result = compact_page(html)
        assert "evil" not in result
        assert "inner" not in result
        assert "script" not in result
        assert '(a {:href "/ok"} "ok")' in result

    def test_custom_element_unwrapped(self):
        result = compact_page('<fancy-card><button id="b1">Go</button></fancy-card>')
        assert '(button#b1 "Go")' in result
        assert "fancy-card" not in result

    def test_hidden_inheritance(self):
        html = '<div style="display:none"><button id="child">Hidden</button></div><button id="ok">Ok</button>'
        result = compact_page(html)
        assert "child" not in result
        assert "button#ok" in result

    def test_relevance_keep_by_id(self):
        decorative = compact_page('<section><div class="bg"><span class="dot"></span></div></section>')
        identified = compact_page('<section id="hero"><div class="bg"><span class="dot"></span></div></section>')
        assert decorative == "(html (body))"
        assert identified == "(html (body (section#hero)))"

    def test_onclick_dropped_even_when_kept(self):
        opts = CompactOptions(keep_attrs=["id", "onclick"])
        result = compact_page('<button id="b" onclick="buy()">Buy</button>', opts)
        assert "onclick" not in result
        assert "buy()" not in result

    def test_data_attribute_controlled_by_option(self):
        html = '<a href="/x" data-foo="bar">x</a>'
        kept = compact_page(html, CompactOptions(keep_attrs=["href", "data-foo"]))
        dropped = compact_page(html, CompactOptions(keep_attrs=["href"], drop_data_attrs=True))
        assert ':data-foo "bar"' in kept
        assert "data-foo" not in dropped

    def test_data_uri_src_blanked(self):
        opts = CompactOptions(relevant_only=False)
        inline = compact_page('<img src="data:image/png;base64,AAAA">', opts)
        remote = compact_page('<img src="https://x/y.png">', opts)
        assert '(img {:src ""})' in inline
        assert "AAAA" not in inline
        assert '(img {:src "https://x/y.png"})' in remote

    def test_pretty_output(self):
        result = compact_page('<div id="x"><button>Go</button></div>', CompactOptions(pretty=True))
        assert result == '(html\n  (body\n    (#x\n      (button\n        "Go"\n      )\n    )\n  )\n)'

    def test_caller_soup_untouched(self):
        soup = BeautifulSoup(SAMPLE_HTML, "lxml")
        before = str(soup)
        compact_page(soup)
        assert str(soup) == before

    def test_all_nodes_keeps_head_and_decor(self):
        result = compact_page(SAMPLE_HTML, CompactOptions(relevant_only=False))
        assert '(head (title "Shop"))' in result
        assert "(.wrapper (.decor (span)))" in result

    def test_url_source(self, settings):
        with patch("pagesexp.loader.fetch_html", return_value="<a href='/n'>Next</a>"):
            result = compact_page("https://example.com", settings=settings)
        assert result == '(html (body (a {:href "/n"} "Next")))'

    def test_empty_document(self):
        with pytest.raises(DocumentUnavailable):
            compact_page("")


class TestCompactTree:
    def test_mutates_given_root(self):
        root = make_root('<div><script>x</script><a href="/a">a</a></div>')
        compact_tree(root)
        assert root.find("script") is None

    def test_malformed_selector_is_traversal_failure(self):
        opts = CompactOptions(interactive_tags=["a["])
        with pytest.raises(TraversalFailure):
            compact_tree(make_root("<div><div></div></div>"), opts)

    def test_stage_error_surfaced_verbatim(self):
        with patch("pagesexp.compactor.prune_hidden", side_effect=RuntimeError("context destroyed")):
            with pytest.raises(TraversalFailure, match="^context destroyed$"):
                compact_tree(make_root("<p>x</p>"))


class TestCompactPageResult:
    def test_success(self):
        result = compact_page_result('<a href="/x">x</a>')
        assert result.is_error is False
        assert result.text == '(html (body (a {:href "/x"} "x")))'

    def test_document_unavailable(self):
        result = compact_page_result("")
        assert result.is_error is True
        assert result.text.startswith("Failed to generate compact representation: ")
        assert "empty" in result.text

    def test_traversal_failure(self):
        result = compact_page_result("<div></div>", CompactOptions(interactive_tags=["a["]))
        assert result.is_error is True
        assert result.text.startswith("Failed to generate compact representation: ")

    def test_bad_env_settings_reported(self):
        with patch.dict("os.environ", {"SCRAPER_TIMEOUT": "soon"}), \
             patch("pagesexp.config.load_dotenv"):
            result = compact_page_result("https://example.com")
        assert result.is_error is True
        assert result.text.startswith("Failed to generate compact representation: Invalid fetch settings")
