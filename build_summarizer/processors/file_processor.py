"""
Trace file loading using a streaming JSON parser.
"""

import ijson
from typing import Any, Dict, List


class TraceFileProcessor:
    """Loads broccoli-viz trace files using a streaming parser."""

    @staticmethod
    def process_file(file_path: str) -> Dict[str, Any]:
        """
        Read a trace file into a raw trace document.

        Only the parts the summary needs are kept: the ``nodes`` list and the
        ``summary.build`` metadata.

        Args:
            file_path: Path to the trace JSON file

        Returns:
            Dictionary with ``nodes`` and ``summary.build`` keys
        """
        nodes: List[Dict] = []

        print(f"Processing {file_path}...")

        with open(file_path, 'rb') as f:
            for node in ijson.items(f, 'nodes.item', use_float=True):
                nodes.append(node)
                if len(nodes) % 10000 == 0:
                    print(f"  Read {len(nodes)} nodes...")

        with open(file_path, 'rb') as f:
            build = next(ijson.items(f, 'summary.build', use_float=True), None)

        print(f"Completed reading file: {len(nodes)} nodes found.")

        return {
            'nodes': nodes,
            'summary': {'build': build or {}},
        }
