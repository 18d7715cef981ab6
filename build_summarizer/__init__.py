"""
Build Summarizer - Broccoli Build Trace Summary Tool
"""

__version__ = "1.0.0"

from .core.summarizer import BuildSummarizer, summarize
from .core.errors import EmptyAggregateSetError, MalformedTraceError, SummarizerError
from .core.types import SummaryConfig

__all__ = [
    "BuildSummarizer",
    "summarize",
    "SummaryConfig",
    "SummarizerError",
    "MalformedTraceError",
    "EmptyAggregateSetError",
]
