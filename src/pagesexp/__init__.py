"""pagesexp - Compact rendered web pages into selector-friendly S-expressions."""

__version__ = "0.1.0"

from pagesexp.compactor import compact_page, compact_page_result, compact_tree
from pagesexp.errors import CompactError, DocumentUnavailable, TraversalFailure
from pagesexp.models import CompactOptions, ToolResult

__all__ = [
    "CompactError",
    "CompactOptions",
    "DocumentUnavailable",
    "ToolResult",
    "TraversalFailure",
    "compact_page",
    "compact_page_result",
    "compact_tree",
]
