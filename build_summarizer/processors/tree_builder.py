"""
Tree builder for broccoli-viz style build traces.
"""

from typing import Any, Dict, List, Mapping

from ..core.errors import MalformedTraceError
from ..core.types import Node, NodeLabel


class TreeBuilder:
    """Builds the node tree from the flat node list of a trace."""

    def build_tree(self, raw_trace: Mapping[str, Any]) -> Node:
        """
        Build the node tree for a raw trace and return its root.

        The first node in input order is taken as the root; the producer
        always writes the root first, this is not verified.

        Args:
            raw_trace: Trace document with a ``nodes`` list

        Returns:
            Root node of the tree

        Raises:
            MalformedTraceError: If the node list is missing or empty, a node
                entry is not an object or has no usable identifier, an
                identifier repeats, ``stats`` or ``children`` has the wrong
                shape, a child identifier does not resolve, or a child is
                listed under two parents
        """
        raw_nodes = raw_trace.get('nodes') if isinstance(raw_trace, Mapping) else None
        if not raw_nodes:
            raise MalformedTraceError("Trace has no nodes; cannot determine a root")
        if not isinstance(raw_nodes, list):
            raise MalformedTraceError(f"Trace 'nodes' must be a list, got {type(raw_nodes).__name__}")

        # First pass: create every node keyed by its identifier
        nodes: Dict[Any, Node] = {}
        child_ids: Dict[Any, List[Any]] = {}
        root = None
        for raw in raw_nodes:
            if not isinstance(raw, Mapping):
                raise MalformedTraceError(f"Trace node must be an object, got {raw!r}")
            node_id = raw.get('_id')
            if node_id is None:
                raise MalformedTraceError(f"Trace node without an '_id': {raw!r}")
            if not _is_hashable(node_id):
                raise MalformedTraceError(f"Node id {node_id!r} is not a valid identifier")
            if node_id in nodes:
                raise MalformedTraceError(f"Duplicate node id {node_id!r}", node_id=node_id)

            stats = raw.get('stats') or {}
            if not isinstance(stats, Mapping):
                raise MalformedTraceError(
                    f"Node {node_id!r} has stats that are not an object: {stats!r}", node_id=node_id
                )
            children = raw.get('children') or []
            if not isinstance(children, list):
                raise MalformedTraceError(
                    f"Node {node_id!r} has children that are not a list: {children!r}", node_id=node_id
                )
            for child_id in children:
                if not _is_hashable(child_id):
                    raise MalformedTraceError(
                        f"Node {node_id!r} lists an invalid child id {child_id!r}",
                        node_id=child_id,
                        parent_id=node_id,
                    )

            node = Node(node_id, NodeLabel.from_raw(raw.get('id')), stats)
            nodes[node_id] = node
            child_ids[node_id] = list(children)
            if root is None:
                root = node

        # Second pass: resolve child ids and set parent back-references
        for node_id, node in nodes.items():
            children = []
            for child_id in child_ids[node_id]:
                child = nodes.get(child_id)
                if child is None:
                    raise MalformedTraceError(
                        f"Node {node_id!r} references unknown child {child_id!r}",
                        node_id=child_id,
                        parent_id=node_id,
                    )
                if child.parent is not None or child is root or child is node:
                    raise MalformedTraceError(
                        f"Node {child_id!r} cannot be a child of {node_id!r}: "
                        f"it is the root, itself, or already has a parent",
                        node_id=child_id,
                        parent_id=node_id,
                    )
                child.parent = node
                children.append(child)
            node.children = tuple(children)

        return root


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True
