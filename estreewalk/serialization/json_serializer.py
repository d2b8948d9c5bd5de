"""JSON serialization for ESTree trees."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from estreewalk.ast.base import Node, iter_child_nodes, node_to_dict

logger = logging.getLogger(__name__)


def count_nodes(node: Node) -> int:
    """Count the nodes of a tree."""
    return 1 + sum(count_nodes(child) for child in iter_child_nodes(node))


class JsonSerializer:
    """JSON serializer for ESTree trees with optional metadata."""

    format_name = "estreewalk-json"

    def __init__(self, include_metadata: bool = True) -> None:
        self.include_metadata = include_metadata

    def serialize(self, node: Node, output_path: str | Path | None = None) -> str:
        """Serialize a tree to JSON."""
        serialized = self._serialize_with_metadata(node)
        json_str = json.dumps(serialized, indent=2, ensure_ascii=False)

        if output_path:
            with Path(output_path).open("w", encoding="utf-8") as f:
                f.write(json_str)

        return json_str

    def deserialize(
        self,
        json_str: str | None = None,
        input_path: str | Path | None = None,
    ) -> Node:
        """Deserialize JSON to a tree."""
        if input_path:
            with Path(input_path).open(encoding="utf-8") as f:
                json_str = f.read()

        if not json_str:
            msg = "No JSON input provided"
            raise ValueError(msg)

        return self._deserialize_tree(json.loads(json_str))

    def _serialize_with_metadata(self, node: Node) -> dict[str, Any]:
        if not self.include_metadata:
            return node_to_dict(node)

        return {
            "ast": node_to_dict(node),
            "metadata": {
                "format": self.format_name,
                "version": "1.0",
                "root_type": node.type,
                "node_count": count_nodes(node),
            },
        }

    def _deserialize_tree(self, data: Any) -> Node:
        # Accept both wrapped (with metadata) and bare trees
        if isinstance(data, dict) and "ast" in data and "type" not in data:
            data = data["ast"]
        if not isinstance(data, dict) or "type" not in data:
            msg = "Expected an ESTree node object with a 'type' field"
            raise ValueError(msg)

        node = Node.from_dict(data)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Loaded %s tree with %d nodes", node.type, count_nodes(node))
        return node
