"""
Unit tests for build_summarizer.processors.ranker module.
"""
import pytest
from build_summarizer.core.errors import EmptyAggregateSetError
from build_summarizer.core.types import Aggregate, IoSummary, SummaryConfig
from build_summarizer.processors.ranker import select_most_expensive


def aggregate(name, self_time, total_time=0):
    return Aggregate(
        name=name,
        self_time=self_time,
        total_time=total_time,
        addon="",
        io_self=IoSummary(),
        io_total=IoSummary(),
    )


class TestSelectMostExpensive:
    """Tests for select_most_expensive()."""

    def test_cutoff_stops_at_first_small_item(self):
        """Items after the first one below the cutoff are dropped."""
        aggregates = [aggregate("a", 60, total_time=100), aggregate("b", 30), aggregate("c", 10)]
        ranked = select_most_expensive(aggregates, cutoff=0.5)
        assert [a.name for a in ranked] == ["a"]

    def test_sorted_by_numeric_self_time(self):
        """Sorting is numeric, never by display string."""
        aggregates = [aggregate("root", 5, total_time=1000), aggregate("big", 900), aggregate("mid", 95)]
        ranked = select_most_expensive(aggregates, cutoff=0.05)
        assert [a.name for a in ranked] == ["big", "mid"]

    def test_reference_is_first_supplied_not_largest(self):
        """The reference total comes from the first input item, even if another is larger."""
        aggregates = [aggregate("first", 10, total_time=20), aggregate("second", 15, total_time=10_000)]
        # 10/20 and 15/20 both clear a 0.4 cutoff; against 10_000 neither would
        ranked = select_most_expensive(aggregates, cutoff=0.4)
        assert [a.name for a in ranked] == ["second", "first"]

    def test_fallback_to_top_ten(self):
        """When nothing falls below the cutoff at most ten items are returned."""
        aggregates = [aggregate(f"p{i}", 100 - i, total_time=100) for i in range(15)]
        ranked = select_most_expensive(aggregates, cutoff=0.05)
        assert [a.name for a in ranked] == [f"p{i}" for i in range(10)]

    def test_fallback_keeps_short_lists(self):
        """Fewer than ten qualifying items are all returned."""
        aggregates = [aggregate("a", 50, total_time=100), aggregate("b", 40)]
        assert len(select_most_expensive(aggregates, cutoff=0.05)) == 2

    def test_first_item_below_cutoff(self):
        """If even the largest item is below the cutoff nothing is returned."""
        aggregates = [aggregate("a", 1, total_time=100), aggregate("b", 2)]
        assert select_most_expensive(aggregates, cutoff=0.05) == []

    def test_default_cutoff_is_summary_default(self):
        """Without a cutoff argument the summary's default fraction applies."""
        assert SummaryConfig.DEFAULT_CUTOFF == 0.05
        aggregates = [aggregate("a", 60, total_time=100), aggregate("b", 6), aggregate("c", 4)]
        assert [a.name for a in select_most_expensive(aggregates)] == ["a", "b"]

    def test_ties_keep_input_order(self):
        """Equal self times keep their input order."""
        aggregates = [aggregate("a", 10, total_time=20), aggregate("b", 10), aggregate("c", 10)]
        assert [a.name for a in select_most_expensive(aggregates)] == ["a", "b", "c"]

    def test_zero_reference_total_uses_fallback(self):
        """A zero reference total falls back to the top ten."""
        aggregates = [aggregate("a", 0, total_time=0), aggregate("b", 3)]
        assert [a.name for a in select_most_expensive(aggregates)] == ["b", "a"]

    def test_input_not_mutated(self):
        """The caller's list keeps its order."""
        aggregates = [aggregate("a", 1, total_time=10), aggregate("b", 9)]
        select_most_expensive(aggregates)
        assert [a.name for a in aggregates] == ["a", "b"]

    def test_output_invariant(self):
        """Output is sorted and every item clears the cutoff unless it is the fallback."""
        aggregates = [aggregate(f"p{i}", (i * 37) % 101, total_time=500) for i in range(30)]
        ranked = select_most_expensive(aggregates, cutoff=0.1)
        times = [a.self_time for a in ranked]
        assert times == sorted(times, reverse=True)
        assert all(t / 500 >= 0.1 for t in times) or len(ranked) <= 10

    def test_empty_input_raises(self):
        """Ranking nothing is an error."""
        with pytest.raises(EmptyAggregateSetError):
            select_most_expensive([])
