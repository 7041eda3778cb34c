"""Exceptions raised by the compaction pipeline."""

from __future__ import annotations


class CompactError(Exception):
    """Base class for failures that abort a compaction call."""


class DocumentUnavailable(CompactError):
    """Raised when no root element can be obtained from the document source."""


class TraversalFailure(CompactError):
    """Raised when a pipeline stage fails while walking or mutating the tree."""
