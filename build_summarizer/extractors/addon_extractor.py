"""
Addon name extraction from trace node names.
"""

import re
from typing import Iterable, List, Optional

from ..core.types import Node
from ..processors.traversal import ancestor_of


class AddonExtractor:
    """Infers the owning addon of a node from the names of its ancestors."""

    def __init__(self):
        """Initialize regex patterns for the two addon naming conventions."""
        # Addon#treeFor (ember-cli-babel - addon)
        self.tree_for_pattern = re.compile(r'^Addon#treeFor \((?P<addon>.+?) - (?P<type>[^)]*)\)$')
        # /path/to/node_modules/ember-power-select/addon, scoped packages kept whole
        self.addon_path_pattern = re.compile(r'(?:^|/)(?P<addon>(?:@[^/]+/)?[^/]+)/addon/?$')

    def addon_name(self, name: str) -> Optional[str]:
        """
        Return the addon named by a node name, or None if the name follows
        neither convention.
        """
        if not name:
            return None
        match = self.tree_for_pattern.match(name) or self.addon_path_pattern.search(name)
        return match.group('addon') if match else None

    def is_addon_node(self, node: Node) -> bool:
        return self.addon_name(node.name) is not None

    def addon_of(self, node: Node) -> str:
        """Name of the nearest addon ancestor of ``node``, '' when there is none."""
        ancestor = ancestor_of(node, self.is_addon_node)
        if ancestor is None:
            return ''
        return self.addon_name(ancestor.name)

    def addons_for(self, nodes: Iterable[Node]) -> str:
        """
        Comma-joined distinct addon names for ``nodes`` in first-seen order.

        Nodes without an addon ancestor contribute nothing.
        """
        addons: List[str] = []
        for node in nodes:
            addon = self.addon_of(node)
            if addon and addon not in addons:
                addons.append(addon)
        return ','.join(addons)
