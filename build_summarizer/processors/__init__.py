"""Processors for trace tree construction, traversal and aggregation."""

from .file_processor import TraceFileProcessor
from .tree_builder import TreeBuilder
from .traversal import ancestor_of, count_nodes, find_descendant, pre_order, stat_entries, union_of
from .stat_matcher import DEFAULT_CATEGORIES, StatCategories, StatPattern, sum_matching, sum_stat
from .plugin_aggregator import PluginAggregator
from .ranker import select_most_expensive

__all__ = [
    "TraceFileProcessor",
    "TreeBuilder",
    "ancestor_of",
    "count_nodes",
    "find_descendant",
    "pre_order",
    "stat_entries",
    "union_of",
    "DEFAULT_CATEGORIES",
    "StatCategories",
    "StatPattern",
    "sum_matching",
    "sum_stat",
    "PluginAggregator",
    "select_most_expensive",
]
