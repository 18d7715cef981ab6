"""
Plugin aggregator for build trace nodes.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence

from ..core.types import Aggregate, IoSummary, Node
from ..extractors.addon_extractor import AddonExtractor
from .stat_matcher import DEFAULT_CATEGORIES, StatCategories, sum_matching
from .traversal import NodePredicate, pre_order, union_of

TraversalFactory = Callable[[Optional[NodePredicate]], Iterator[Node]]


class PluginAggregator:
    """Rolls up time and I/O statistics for plugin boundary nodes."""

    def __init__(self, categories: StatCategories = DEFAULT_CATEGORIES, addon_extractor: Optional[AddonExtractor] = None):
        """
        Initialize with the stat categories used for I/O reporting.

        Args:
            categories: StatCategories instance
            addon_extractor: AddonExtractor instance (a new one by default)
        """
        self.categories = categories
        self.addon_extractor = addon_extractor or AddonExtractor()

    @staticmethod
    def is_plugin(node: Node) -> bool:
        return node.is_boundary

    def all_plugins(self, nodes: Iterable[Node]) -> List[Node]:
        return [node for node in nodes if self.is_plugin(node)]

    def group_plugins(self, nodes: Iterable[Node]) -> Dict[str, List[Node]]:
        """
        Group plugin nodes by name.

        Args:
            nodes: Nodes to scan (non-plugins are ignored)

        Returns:
            Dictionary mapping plugin name -> plugin nodes, in first-seen order
        """
        groups: Dict[str, List[Node]] = {}
        for node in self.all_plugins(nodes):
            groups.setdefault(node.name, []).append(node)
        return groups

    def summarize_one(self, plugin: Node) -> Aggregate:
        """Summarize a single plugin instance."""
        return self.summarize_nodes(
            lambda stop=None: pre_order(plugin, stop),
            members=[plugin],
            name=plugin.name,
        )

    def summarize_group(self, plugins: Sequence[Node], name: Optional[str] = None) -> Aggregate:
        """
        Summarize several instances of the same plugin as one entry.

        Members nested inside each other are only counted once.

        Raises:
            ValueError: If ``plugins`` is empty
        """
        if not plugins:
            raise ValueError("Cannot summarize an empty plugin group")
        return self.summarize_nodes(
            lambda stop=None: union_of(*(pre_order(plugin, stop) for plugin in plugins)),
            members=plugins,
            name=name if name is not None else plugins[0].name,
            count=len(plugins),
        )

    def summarize_nodes(
        self,
        traversal_factory: TraversalFactory,
        members: Sequence[Node],
        name: str,
        count: Optional[int] = None,
    ) -> Aggregate:
        """
        Shared summary routine for one plugin or a group of plugins.

        ``traversal_factory(stop)`` must return a fresh pre-order walk over
        the members' subtrees, not descending into children for which
        ``stop`` is true. Self figures use the walk that stops at nested
        plugins and leave the nested plugin nodes out entirely; total figures
        use the unrestricted walk.

        Args:
            traversal_factory: Callable producing fresh traversals
            members: The plugin nodes being summarized
            name: Plugin name reported for the aggregate
            count: Member count, only for groups

        Returns:
            Aggregate with numeric (unformatted) values
        """
        member_ids = {id(member) for member in members}

        def own_work() -> Iterator[Node]:
            for node in traversal_factory(self.is_plugin):
                if id(node) in member_ids or not self.is_plugin(node):
                    yield node

        def all_work() -> Iterator[Node]:
            return traversal_factory(None)

        return Aggregate(
            name=name,
            self_time=sum_matching(own_work(), 'time.self'),
            total_time=sum_matching(all_work(), 'time.self'),
            addon=self.addon_extractor.addons_for(all_work()),
            io_self=self.summarize_io(own_work),
            io_total=self.summarize_io(all_work),
            count=count,
        )

    def summarize_io(self, traversal: Callable[[], Iterator[Node]]) -> IoSummary:
        """Sum the I/O categories over a restartable traversal."""
        categories = self.categories
        return IoSummary(
            ios=sum_matching(traversal(), *categories.io_count),
            io_time=sum_matching(traversal(), *categories.io_time),
            read_time=sum_matching(traversal(), *categories.read),
            write_time=sum_matching(traversal(), *categories.write),
            other_time=sum_matching(traversal(), *categories.other),
        )
