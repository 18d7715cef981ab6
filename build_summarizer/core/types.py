"""
Type definitions for build trace summaries.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, TypedDict, Union

from ..formatters.time_formatter import format_count, format_duration


class IoStats(TypedDict):
    """Formatted I/O figures for one side (self or total) of an aggregate."""
    ios: str
    ioTime: str
    readTime: str
    writeTime: str
    otherTime: str


class InputChangedFiles(TypedDict):
    """Changed input files reported by the host build tool."""
    primary: Any
    changedFiles: Any
    total: Any


class BuildInfo(TypedDict):
    """Build metadata section of the summary."""
    type: Any
    count: Any
    outputChangedFiles: Any
    inputChangedFiles: InputChangedFiles
    steps: int


class NodeLabel:
    """Identity of a trace node: its display name and plugin boundary flag."""

    __slots__ = ('name', 'is_boundary', 'extra')

    def __init__(self, name: str, is_boundary: bool = False, extra: Optional[Dict[str, Any]] = None):
        self.name = name
        self.is_boundary = is_boundary
        self.extra = dict(extra or {})

    @classmethod
    def from_raw(cls, raw: Union[Mapping[str, Any], str, None]) -> 'NodeLabel':
        """
        Build a label from the raw ``id`` object of a trace node.

        Older traces carry a bare string instead of an object; it is taken
        as the name of a non-boundary node.
        """
        if raw is None:
            return cls('')
        if isinstance(raw, str):
            return cls(raw)
        extra = {k: v for k, v in raw.items() if k not in ('name', 'broccoliNode')}
        return cls(str(raw.get('name', '')), bool(raw.get('broccoliNode', False)), extra)

    def __repr__(self) -> str:
        return f"NodeLabel(name={self.name!r}, is_boundary={self.is_boundary})"


class Node:
    """
    One recorded build step or sub-operation.

    Children are owned exclusively by their parent and stored as a tuple once
    the tree has been built; ``parent`` is a non-owning back-reference.
    """

    __slots__ = ('node_id', 'label', 'stats', 'children', 'parent')

    def __init__(self, node_id: Any, label: NodeLabel, stats: Optional[Mapping[str, Any]] = None):
        self.node_id = node_id
        self.label = label
        self.stats = stats or {}
        self.children: Tuple['Node', ...] = ()
        self.parent: Optional['Node'] = None

    @property
    def name(self) -> str:
        return self.label.name

    @property
    def is_boundary(self) -> bool:
        return self.label.is_boundary

    def __repr__(self) -> str:
        return f"Node(node_id={self.node_id!r}, name={self.label.name!r})"


class SummaryConfig:
    """Configuration for build summaries."""

    DEFAULT_CUTOFF = 0.05

    def __init__(self, cutoff: float = DEFAULT_CUTOFF):
        """
        Initialize summary configuration.

        Args:
            cutoff: Minimum fraction of the reference total time a plugin's
                    self time must reach to be listed in the summary.
                    Default: 0.05 (5%)

        Raises:
            ValueError: If cutoff is not a number between 0 and 1
        """
        if isinstance(cutoff, bool) or not isinstance(cutoff, (int, float)):
            raise ValueError(f"cutoff must be a number, got {cutoff!r}")
        if not 0 <= cutoff <= 1:
            raise ValueError(f"cutoff must be between 0 and 1, got {cutoff}")
        self.cutoff = float(cutoff)

    @classmethod
    def from_options(cls, options: Union['SummaryConfig', Mapping[str, Any], None]) -> 'SummaryConfig':
        """Accept a SummaryConfig, a plain mapping of options, or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        unknown = set(options) - {'cutoff'}
        if unknown:
            raise ValueError(f"Unknown summary option(s): {sorted(unknown)}")
        return cls(**options)


@dataclass(frozen=True)
class IoSummary:
    """I/O counts and times (nanoseconds) for one side of an aggregate."""
    ios: float = 0
    io_time: float = 0
    read_time: float = 0
    write_time: float = 0
    other_time: float = 0

    def to_dict(self) -> IoStats:
        return {
            'ios': format_count(self.ios),
            'ioTime': format_duration(self.io_time),
            'readTime': format_duration(self.read_time),
            'writeTime': format_duration(self.write_time),
            'otherTime': format_duration(self.other_time),
        }


@dataclass(frozen=True)
class Aggregate:
    """Rolled-up metrics for one plugin instance or a group of same-named ones."""
    name: str
    self_time: float
    total_time: float
    addon: str
    io_self: IoSummary
    io_total: IoSummary
    count: Optional[int] = None

    @property
    def is_group(self) -> bool:
        return self.count is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the formatted dictionary used in the summary document."""
        result: Dict[str, Any] = {'name': self.name}
        if self.is_group:
            result['count'] = self.count
        result.update({
            'selfTime': format_duration(self.self_time),
            'totalTime': format_duration(self.total_time),
            'addon': self.addon,
            'io': {
                'self': self.io_self.to_dict(),
                'total': self.io_total.to_dict(),
            },
        })
        return result
