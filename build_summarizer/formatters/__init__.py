"""Output formatting helpers."""

from .time_formatter import format_count, format_duration

__all__ = ["format_count", "format_duration"]
