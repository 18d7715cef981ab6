"""
Exceptions raised while summarizing a build trace.
"""

from typing import Any, Optional


class SummarizerError(Exception):
    """Base class for build summarizer errors."""


class MalformedTraceError(SummarizerError):
    """The raw trace cannot be turned into a tree."""

    def __init__(self, message: str, node_id: Any = None, parent_id: Optional[Any] = None):
        super().__init__(message)
        self.node_id = node_id
        self.parent_id = parent_id


class EmptyAggregateSetError(SummarizerError):
    """Ranking was asked for on an empty list of aggregates."""
