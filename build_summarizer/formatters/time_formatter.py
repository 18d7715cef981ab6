"""
Duration and count formatting for summary output.
"""

from typing import Union


def format_duration(ns: Union[int, float]) -> str:
    """
    Format a duration in nanoseconds as milliseconds.

    Args:
        ns: Duration in nanoseconds

    Returns:
        Formatted string with two decimals and thousands separators
        (e.g., "10.00ms", "1,234.57ms")
    """
    return f"{ns / 1e6:,.2f}ms"


def format_count(count: Union[int, float]) -> str:
    """Format a count with thousands separators (e.g., "12,345")."""
    if isinstance(count, float) and count.is_integer():
        count = int(count)
    return f"{count:,}"
