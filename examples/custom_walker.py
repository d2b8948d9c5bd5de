"""Example: Custom walkers over an ESTree tree."""

from estreewalk import ancestor, make, recursive, simple
from estreewalk.serialization import JsonSerializer

SOURCE_TREE = """
{
  "type": "Program", "start": 0, "end": 44, "sourceType": "script",
  "body": [
    {
      "type": "FunctionDeclaration", "start": 0, "end": 44,
      "id": {"type": "Identifier", "start": 9, "end": 12, "name": "add"},
      "params": [
        {"type": "Identifier", "start": 13, "end": 14, "name": "a"},
        {"type": "Identifier", "start": 16, "end": 17, "name": "b"}
      ],
      "expression": false, "generator": false, "async": false,
      "body": {
        "type": "BlockStatement", "start": 19, "end": 44,
        "body": [
          {
            "type": "ReturnStatement", "start": 21, "end": 42,
            "argument": {
              "type": "CallExpression", "start": 28, "end": 41,
              "callee": {"type": "Identifier", "start": 28, "end": 35, "name": "combine"},
              "arguments": [
                {"type": "Identifier", "start": 36, "end": 37, "name": "a"},
                {"type": "Identifier", "start": 39, "end": 40, "name": "b"}
              ]
            }
          }
        ]
      }
    }
  ]
}
"""


def collect_calls(tree):
    """Names of called functions."""
    calls = []

    def visit(node, state):
        if node.callee.type == "Identifier":
            state.append(node.callee.name)

    simple(tree, {"CallExpression": visit}, None, calls)
    return calls


def enclosing_functions(tree):
    """Map each identifier to the function it appears in."""
    result = {}

    def visit(node, state, ancestors):
        functions = [a for a in ancestors if a.type == "FunctionDeclaration"]
        result[(node.name, node.start)] = functions[-1].id.name if functions else None

    ancestor(tree, {"Identifier": visit})
    return result


def declared_names(tree):
    """Collect declared names, without descending into function bodies."""
    names = []

    def function(node, state, c):
        if node.id:
            state.append(node.id.name)

    walkers = make({"Function": function})
    recursive(tree, names, None, walkers)
    return names


def main() -> None:
    tree = JsonSerializer().deserialize(SOURCE_TREE)

    print("Calls:", collect_calls(tree))
    print("Declared:", declared_names(tree))
    for (name, start), function in sorted(enclosing_functions(tree).items(), key=lambda i: i[0][1]):
        print(f"  {name}@{start} in {function}")


if __name__ == "__main__":
    main()
