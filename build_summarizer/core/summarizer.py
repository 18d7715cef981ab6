"""
Main build summary orchestrator.
"""

from typing import Any, Dict, Mapping, Union

from ..core.errors import MalformedTraceError
from ..core.types import SummaryConfig
from ..processors import (
    TraceFileProcessor,
    TreeBuilder,
    PluginAggregator,
    count_nodes,
    pre_order,
    sum_stat,
)
from ..report import build_report


def build_metadata(raw_trace: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the trace's ``summary.build`` object, or an empty mapping when absent."""
    summary = raw_trace.get('summary') or {}
    if not isinstance(summary, Mapping):
        raise MalformedTraceError(f"Trace summary must be an object, got {summary!r}")
    build = summary.get('build') or {}
    if not isinstance(build, Mapping):
        raise MalformedTraceError(f"Trace summary.build must be an object, got {build!r}")
    return build


class BuildSummarizer:
    """Main orchestrator for build trace summaries."""

    def __init__(self, cutoff: float = SummaryConfig.DEFAULT_CUTOFF):
        """
        Initialize the BuildSummarizer.

        Args:
            cutoff: Minimum fraction of the reference total time a plugin's
                    self time must reach to be listed
        """
        # Configuration
        self.config = SummaryConfig(cutoff=cutoff)

        # Initialize components
        self.file_processor = TraceFileProcessor()
        self.tree_builder = TreeBuilder()
        self.aggregator = PluginAggregator()

    @classmethod
    def from_config(cls, config: Union[SummaryConfig, Mapping[str, Any], None]) -> 'BuildSummarizer':
        return cls(cutoff=SummaryConfig.from_options(config).cutoff)

    def summarize(self, raw_trace: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Produce the summary document for a raw trace.

        Args:
            raw_trace: Trace document with ``nodes`` and ``summary.build``

        Returns:
            Summary dictionary

        Raises:
            MalformedTraceError: If the node tree cannot be built
        """
        # Pass 1: Build the tree
        root = self.tree_builder.build_tree(raw_trace)

        # Pass 2: Whole-build figures
        total_time = sum_stat(pre_order(root), 'time.self')
        steps = count_nodes(pre_order(root))

        # Pass 3: Per-instance and per-name plugin aggregates
        plugins = [self.aggregator.summarize_one(p) for p in self.aggregator.all_plugins(pre_order(root))]
        groups = self.aggregator.group_plugins(pre_order(root))
        plugins_by_name = [self.aggregator.summarize_group(members, name) for name, members in groups.items()]

        print(f"Found {steps} build steps, {len(plugins)} plugin instances "
              f"across {len(plugins_by_name)} unique plugins")

        return build_report(
            total_time_ns=total_time,
            build=build_metadata(raw_trace),
            steps=steps,
            plugins=plugins,
            plugins_by_name=plugins_by_name,
            cutoff=self.config.cutoff,
        )

    def process_trace_file(self, file_path: str) -> Dict[str, Any]:
        """
        Load a trace file and summarize it.

        Args:
            file_path: Path to the trace JSON file

        Returns:
            Summary dictionary
        """
        return self.summarize(self.file_processor.process_file(file_path))


def summarize(raw_trace: Mapping[str, Any], config: Union[SummaryConfig, Mapping[str, Any], None] = None) -> Dict[str, Any]:
    """
    Summarize a raw trace.

    Args:
        raw_trace: Trace document supplied by the host build tool
        config: Optional SummaryConfig or mapping; ``cutoff`` is the only option

    Returns:
        Summary dictionary
    """
    return BuildSummarizer.from_config(config).summarize(raw_trace)
