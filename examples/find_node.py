"""Example: Locating nodes by source position."""

import sys
from pathlib import Path

from estreewalk import find_node_after, find_node_around, find_node_before
from estreewalk.serialization import load_tree


def describe(found):
    if found is None:
        return "no match"
    node = found.node
    return f"{node.type} [{node.start}, {node.end}]"


def main() -> None:
    if len(sys.argv) != 3:
        print("Usage: python find_node.py <tree.json> <offset>")
        sys.exit(1)

    tree = load_tree(Path(sys.argv[1]))
    pos = int(sys.argv[2])

    print("Innermost expression around:", describe(find_node_around(tree, pos, "Expression")))
    print("Next statement after:", describe(find_node_after(tree, pos, "Statement")))
    print("Last statement before:", describe(find_node_before(tree, pos, "Statement")))


if __name__ == "__main__":
    main()
