"""YAML serialization for ESTree trees."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from estreewalk.serialization.json_serializer import JsonSerializer

if TYPE_CHECKING:
    from estreewalk.ast.base import Node


class YamlSerializer(JsonSerializer):
    """YAML serializer for ESTree trees with human-readable output."""

    format_name = "estreewalk-yaml"

    def __init__(self, include_metadata: bool = True, flow_style: bool = False) -> None:
        super().__init__(include_metadata)
        self.flow_style = flow_style

    def serialize(self, node: Node, output_path: str | Path | None = None) -> str:
        """Serialize a tree to YAML."""
        yaml_str = yaml.dump(
            self._serialize_with_metadata(node),
            default_flow_style=self.flow_style,
            allow_unicode=True,
            sort_keys=False,
            indent=2,
            width=120,
        )

        if output_path:
            with Path(output_path).open("w", encoding="utf-8") as f:
                f.write(yaml_str)

        return yaml_str

    def deserialize(
        self,
        yaml_str: str | None = None,
        input_path: str | Path | None = None,
    ) -> Node:
        """Deserialize YAML to a tree."""
        if input_path:
            with Path(input_path).open(encoding="utf-8") as f:
                yaml_str = f.read()

        if not yaml_str:
            msg = "No YAML input provided"
            raise ValueError(msg)

        return self._deserialize_tree(yaml.safe_load(yaml_str))
