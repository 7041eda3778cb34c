"""Page-to-S-expression compaction pipeline.

Stages, strictly in order, each consuming the previous one's output:
  1. Load       detached copy of the document root
  2. Filter     comments, non-content tags, namespaced tags, custom elements
  3. Sanitize   inlined data: URIs on images
  4. Visibility hidden subtrees (self or inherited)
  5. Attributes allow-listed attributes only
  6. Relevance  interactive / identified / textual subtrees only
  7. Serialize  S-expression string
"""

from __future__ import annotations

import logging

from bs4 import Tag

from pagesexp.attributes import reduce_attributes
from pagesexp.cleaner import filter_structure, strip_data_uris
from pagesexp.config import Settings
from pagesexp.errors import CompactError, TraversalFailure
from pagesexp.loader import load_source
from pagesexp.models import CompactOptions, ToolResult
from pagesexp.relevance import prune_irrelevant
from pagesexp.serializer import serialize
from pagesexp.visibility import prune_hidden

logger = logging.getLogger(__name__)

FAILURE_PREFIX = "Failed to generate compact representation"


def compact_tree(root: Tag, options: CompactOptions | None = None) -> str:
    """Run stages 2-7 over ``root``, which is mutated in place."""
    options = options or CompactOptions()
    try:
        filter_structure(root)
        strip_data_uris(root)
        logger.debug("Structural filter done")
        prune_hidden(root)
        logger.debug("Hidden subtrees pruned")
        reduce_attributes(root, options)
        prune_irrelevant(root, options)
        logger.debug("Attributes reduced, irrelevant subtrees pruned")
        return serialize(root, options)
    except Exception as exc:
        raise TraversalFailure(str(exc)) from exc


def compact_page(
    source,
    options: CompactOptions | None = None,
    settings: Settings | None = None,
) -> str:
    """
    Compact a rendered document into an S-expression.

    Args:
        source: Rendered HTML, a parsed bs4 tree (left untouched), or an
            http(s) URL rendered through ScraperAPI.
        options: Compaction options; defaults match the selector-authoring
            profile (relevant nodes only, attribute map, CSS-like heads).
        settings: Fetch and parser settings; loaded from .env for URLs when omitted.

    Raises:
        DocumentUnavailable: no root element could be obtained.
        TraversalFailure: a stage failed while walking the tree.
    """
    root = load_source(source, settings)
    sexpr = compact_tree(root, options)
    logger.info("Compacted page to %d chars", len(sexpr))
    return sexpr


def compact_page_result(
    source,
    options: CompactOptions | None = None,
    settings: Settings | None = None,
) -> ToolResult:
    """Same as :func:`compact_page`, reported as text plus an error flag."""
    try:
        return ToolResult(text=compact_page(source, options, settings))
    except CompactError as exc:
        logger.error("Failed to generate compact page representation: %s", exc)
        return ToolResult(text=f"{FAILURE_PREFIX}: {exc}", is_error=True)
