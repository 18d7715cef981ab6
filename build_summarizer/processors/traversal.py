"""
Traversal primitives over the trace tree.

Every function here returns a fresh generator, so calling it again restarts
the walk from scratch; nothing is shared between two calls.
"""

from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Tuple, Union

from ..core.types import Node

NodePredicate = Callable[[Node], bool]


def pre_order(node: Node, stop_descending_into: Optional[NodePredicate] = None) -> Iterator[Node]:
    """
    Walk a subtree in pre-order.

    The node itself comes first, then each child's subtree in order. When
    ``stop_descending_into`` is true for a child, the child is still yielded
    but its descendants are not.

    Args:
        node: Root of the subtree
        stop_descending_into: Optional predicate applied to each child

    Yields:
        Nodes of the subtree
    """
    yield node
    for child in node.children:
        if stop_descending_into is not None and stop_descending_into(child):
            yield child
            continue
        yield from pre_order(child, stop_descending_into)


def ancestor_of(node: Node, predicate: NodePredicate) -> Optional[Node]:
    """
    Return the nearest ancestor (excluding ``node``) matching the predicate,
    or None once the root has been passed.
    """
    current = node.parent
    while current is not None:
        if predicate(current):
            return current
        current = current.parent
    return None


def find_descendant(node: Node, predicate: NodePredicate) -> Optional[Node]:
    """Return the first node in pre-order (``node`` included) matching the predicate."""
    return next((n for n in pre_order(node) if predicate(n)), None)


def union_of(*sequences: Iterable[Any]) -> Iterator[Any]:
    """
    Chain several sequences, dropping items already produced.

    Nodes are compared by identity and everything else by value; the two
    kinds are tracked in separate seen-sets so an identity match can never
    collide with a value match.
    """
    seen_nodes = set()
    seen_values = set()
    for sequence in sequences:
        for item in sequence:
            if isinstance(item, Node):
                key = id(item)
                if key in seen_nodes:
                    continue
                seen_nodes.add(key)
            else:
                if item in seen_values:
                    continue
                seen_values.add(item)
            yield item


def stat_entries(source: Union[Node, Mapping[str, Any]], prefix: str = '') -> Iterator[Tuple[str, Any]]:
    """
    Flatten a nested stats mapping into ``(dotted_path, value)`` leaf entries.

    Args:
        source: A node (its stats are used) or a stats mapping
        prefix: Dotted path of ``source`` inside an enclosing mapping

    Yields:
        Tuples of (dotted path, leaf value)
    """
    stats = source.stats if isinstance(source, Node) else source
    for key, value in stats.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            yield from stat_entries(value, path)
        else:
            yield path, value


def count_nodes(nodes: Iterable[Node]) -> int:
    return sum(1 for _ in nodes)
