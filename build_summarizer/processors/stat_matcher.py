"""
Statistic matching and summation over trace nodes.
"""

import re
from typing import Iterable, Tuple, Union

from ..core.types import Node
from .traversal import stat_entries

Number = Union[int, float]

READ_OPERATIONS: Tuple[str, ...] = (
    'readFileSync', 'readFile',
    'readdirSync', 'readdir',
    'statSync', 'stat',
    'lstatSync', 'lstat',
    'fstatSync', 'fstat',
    'existsSync', 'exists',
    'accessSync', 'access',
    'realpathSync', 'realpath',
    'readlinkSync', 'readlink',
    'openSync', 'open',
    'readSync', 'read',
)

WRITE_OPERATIONS: Tuple[str, ...] = (
    'writeFileSync', 'writeFile',
    'writeSync', 'write',
    'appendFileSync', 'appendFile',
    'mkdirSync', 'mkdir',
    'rmdirSync', 'rmdir',
    'unlinkSync', 'unlink',
    'renameSync', 'rename',
    'symlinkSync', 'symlink',
    'linkSync', 'link',
    'copyFileSync', 'copyFile',
    'utimesSync', 'utimes',
    'chmodSync', 'chmod',
    'truncateSync', 'truncate',
)

OTHER_OPERATIONS: Tuple[str, ...] = (
    'closeSync', 'close',
    'fsyncSync', 'fsync',
    'fdatasyncSync', 'fdatasync',
    'watch', 'watchFile', 'unwatchFile',
)


class StatPattern:
    """
    A dotted statistic path that may contain wildcards.

    ``*`` stands for exactly one path segment (``fs.*.time`` matches
    ``fs.readFileSync.time`` but not ``fs.time``); ``**`` stands for one or
    more segments.
    """

    def __init__(self, pattern: str):
        self.pattern = pattern
        parts = []
        for segment in pattern.split('.'):
            if segment == '**':
                parts.append(r'.+')
            elif segment == '*':
                parts.append(r'[^.]+')
            else:
                parts.append(re.escape(segment))
        self._regex = re.compile(r'\.'.join(parts) + r'\Z')

    def matches(self, path: str) -> bool:
        return self._regex.match(path) is not None

    def __repr__(self) -> str:
        return f"StatPattern({self.pattern!r})"


def _numeric(value) -> Number:
    # bool is an int subclass but never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value or 0


def sum_matching(nodes: Iterable[Node], *patterns: Union[str, StatPattern]) -> Number:
    """
    Sum the numeric stat leaves whose dotted path matches any pattern.

    Stats that are absent, falsy or not numbers add nothing. A leaf matched by
    several patterns is counted once.

    Args:
        nodes: Nodes whose stats are searched
        *patterns: Dotted path patterns (strings or StatPattern)

    Returns:
        Sum of the matched values (0 when nothing matches)
    """
    compiled = [p if isinstance(p, StatPattern) else StatPattern(p) for p in patterns]
    if not compiled:
        return 0

    total = 0
    for node in nodes:
        for path, value in stat_entries(node):
            if any(p.matches(path) for p in compiled):
                total += _numeric(value)
    return total


def sum_stat(nodes: Iterable[Node], path: str) -> Number:
    """Sum one dotted stat path over ``nodes``; shorthand for a single-pattern ``sum_matching``."""
    return sum_matching(nodes, path)


def _time_patterns(operations: Iterable[str]) -> Tuple[StatPattern, ...]:
    return tuple(StatPattern(f"fs.{op}.time") for op in operations)


class StatCategories:
    """Fixed pattern sets used wherever I/O is reported."""

    def __init__(
        self,
        read_operations: Iterable[str] = READ_OPERATIONS,
        write_operations: Iterable[str] = WRITE_OPERATIONS,
        other_operations: Iterable[str] = OTHER_OPERATIONS,
    ):
        """
        Args:
            read_operations: fs operation names counted as reads
            write_operations: fs operation names counted as writes
            other_operations: fs operation names that are neither
        """
        self.read = _time_patterns(read_operations)
        self.write = _time_patterns(write_operations)
        self.other = _time_patterns(other_operations)
        self.io_count = (StatPattern('fs.*.count'),)
        self.io_time = (StatPattern('fs.*.time'),)


DEFAULT_CATEGORIES = StatCategories()
