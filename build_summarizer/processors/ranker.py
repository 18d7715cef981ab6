"""
Ranking of plugin aggregates by self time.
"""

from typing import List, Sequence

from ..core.errors import EmptyAggregateSetError
from ..core.types import Aggregate, SummaryConfig

FALLBACK_LIMIT = 10


def select_most_expensive(
    aggregates: Sequence[Aggregate],
    cutoff: float = SummaryConfig.DEFAULT_CUTOFF,
    fallback_limit: int = FALLBACK_LIMIT,
) -> List[Aggregate]:
    """
    Select the aggregates whose self time is a significant share of the build.

    The reference total is the total time of the first aggregate as supplied,
    before sorting. For the summaries built here that is the outermost
    plugin, but it is not necessarily the largest total.

    Aggregates are sorted by numeric self time, descending (ties keep their
    input order). Everything before the first aggregate whose
    ``self_time / reference_total`` drops below ``cutoff`` is returned; if
    none drops below it, the first ``fallback_limit`` sorted aggregates are.

    Args:
        aggregates: Aggregates to rank
        cutoff: Minimum fraction of the reference total
        fallback_limit: Cap used when no aggregate falls below the cutoff

    Returns:
        Ranked list of aggregates

    Raises:
        EmptyAggregateSetError: If ``aggregates`` is empty
    """
    if not aggregates:
        raise EmptyAggregateSetError("Cannot rank an empty list of aggregates: no reference total")

    reference_total = aggregates[0].total_time
    ranked = sorted(aggregates, key=lambda a: a.self_time, reverse=True)

    # A zero reference gives no meaningful fraction; nothing counts as below the cutoff
    if reference_total:
        for index, aggregate in enumerate(ranked):
            if aggregate.self_time / reference_total < cutoff:
                return ranked[:index]

    return ranked[:fallback_limit]
