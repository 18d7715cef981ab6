"""Summary document assembly."""

from .report_builder import CACHE_HIT_PLACEHOLDER, build_report

__all__ = ["CACHE_HIT_PLACEHOLDER", "build_report"]
