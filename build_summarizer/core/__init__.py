"""Core components for build summaries."""

from .errors import EmptyAggregateSetError, MalformedTraceError, SummarizerError
from .summarizer import BuildSummarizer, summarize
from .types import Aggregate, IoSummary, Node, NodeLabel, SummaryConfig

__all__ = [
    "BuildSummarizer",
    "summarize",
    "Aggregate",
    "IoSummary",
    "Node",
    "NodeLabel",
    "SummaryConfig",
    "SummarizerError",
    "MalformedTraceError",
    "EmptyAggregateSetError",
]
