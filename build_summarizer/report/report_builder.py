"""
Report builder for the build summary document.
"""

from typing import Any, Dict, List, Mapping, Sequence

from ..core.types import Aggregate, BuildInfo
from ..formatters import format_duration
from ..processors.ranker import select_most_expensive

CACHE_HIT_PLACEHOLDER = 'N/A%'


def build_info(build: Mapping[str, Any], steps: int) -> BuildInfo:
    """
    Copy the host tool's build metadata into the summary layout.

    Args:
        build: The ``summary.build`` object of the raw trace
        steps: Number of nodes in the trace tree

    Returns:
        Build section of the summary
    """
    return {
        'type': build.get('type'),
        'count': build.get('count'),
        'outputChangedFiles': build.get('outputChangedFiles'),
        'inputChangedFiles': {
            'primary': build.get('primaryFile'),
            'changedFiles': build.get('changedFiles'),
            'total': build.get('changedFileCount'),
        },
        'steps': steps,
    }


def rank(aggregates: Sequence[Aggregate], cutoff: float) -> List[Dict[str, Any]]:
    # A trace without plugin boundaries has nothing to rank
    if not aggregates:
        return []
    return [a.to_dict() for a in select_most_expensive(aggregates, cutoff)]


def build_report(
    total_time_ns: float,
    build: Mapping[str, Any],
    steps: int,
    plugins: Sequence[Aggregate],
    plugins_by_name: Sequence[Aggregate],
    cutoff: float,
) -> Dict[str, Any]:
    """
    Assemble the summary document.

    Args:
        total_time_ns: Sum of ``time.self`` over the whole tree
        build: Raw ``summary.build`` metadata
        steps: Number of nodes in the tree
        plugins: Per-instance aggregates in tree order
        plugins_by_name: Per-name group aggregates in first-seen order
        cutoff: Ranking cutoff fraction

    Returns:
        Dictionary ready for JSON serialization
    """
    return {
        'totalTime': format_duration(total_time_ns),
        'CacheHit': CACHE_HIT_PLACEHOLDER,
        'build': build_info(build, steps),
        'plugins': rank(plugins, cutoff),
        'pluginsByName': rank(plugins_by_name, cutoff),
    }
