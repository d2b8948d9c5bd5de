"""Tests for node construction."""

import logging
import os
import subprocess
import sys
import textwrap
import warnings
from pathlib import Path

import pytest

from estreewalk.ast import Node, Position, is_closed
from estreewalk.parser import (
    DeprecatedUsageError,
    DeprecationMode,
    NodeFactory,
    NodePositionError,
    ParserOptions,
)
from estreewalk.walk import find_node_around


def _factory(options=None, start=3, end=10):
    factory = NodeFactory(options)
    factory.start = start
    factory.start_loc = Position(1, start)
    factory.last_tok_end = end
    factory.last_tok_end_loc = Position(1, end)
    return factory


class TestNodeLifecycle:
    """Test starting and finishing nodes."""

    def test_open_node(self) -> None:
        """Test a started node has a start but no type or end."""
        node = _factory().start_node()

        assert node.start == 3
        assert node.type is None
        assert node.end is None
        assert not is_closed(node)

    def test_round_trip_with_locations_and_ranges(self) -> None:
        """Test finished nodes carry matching offsets, range and location."""
        factory = _factory(ParserOptions.full())
        node = factory.finish_node(factory.start_node(), "X")

        assert is_closed(node)
        assert node.type == "X"
        assert (node.start, node.end) == (3, 10)
        assert node.range == [node.start, node.end]
        assert node.loc.start == Position(1, 3)
        assert node.loc.end == Position(1, 10)

    def test_default_options_add_no_metadata(self) -> None:
        """Test loc, range and sourceFile are only added when configured."""
        factory = _factory()
        node = factory.finish_node(factory.start_node(), "X")

        assert not hasattr(node, "loc")
        assert not hasattr(node, "range")
        assert not hasattr(node, "sourceFile")

    def test_source_file_options(self) -> None:
        """Test the source file tags."""
        options = ParserOptions(locations=True, direct_source_file="a.js", source_file="b.js")
        node = _factory(options).start_node()

        assert node.sourceFile == "a.js"
        assert node.loc.source == "b.js"

    def test_explicit_positions(self) -> None:
        """Test starting and finishing at explicit positions."""
        factory = _factory(ParserOptions.full())
        node = factory.start_node_at(20, Position(2, 4))
        factory.finish_node_at(node, "Identifier", 25, Position(2, 9))

        assert (node.start, node.end) == (20, 25)
        assert node.range == [20, 25]
        assert node.loc.start == Position(2, 4)
        assert node.loc.end == Position(2, 9)

    def test_built_tree_is_searchable(self) -> None:
        """Test nodes built by the factory work with the walker."""
        factory = _factory(ParserOptions.full(), start=0)

        program = factory.start_node()
        statement = factory.start_node_at(0, Position(1, 0))
        callee = factory.finish_node_at(factory.start_node_at(0, Position(1, 0)), "Identifier", 1, Position(1, 1))
        callee.name = "f"
        call = factory.start_node_at(0, Position(1, 0))
        call.callee = callee
        call.arguments = []
        factory.finish_node_at(call, "CallExpression", 3, Position(1, 3))
        statement.expression = call
        factory.finish_node_at(statement, "ExpressionStatement", 4, Position(1, 4))
        program.body = [statement]
        factory.last_tok_end = 4
        factory.finish_node(program, "Program")

        found = find_node_around(program, 2, "CallExpression")

        assert found.node is call


class TestDeprecatedPositions:
    """Test the legacy ``[pos, loc]`` calling convention."""

    def test_start_node_at_pair_warns(self) -> None:
        """Test a position pair is accepted with a deprecation warning."""
        loc = Position(1, 3)
        factory = _factory(ParserOptions.full())

        with pytest.warns(FutureWarning, match="start_node_at"):
            legacy = factory.start_node_at([3, loc])
        modern = factory.start_node_at(3, loc)

        assert legacy.start == modern.start == 3
        assert legacy.loc == modern.loc
        assert legacy.range == modern.range

    def test_default_configuration(self) -> None:
        """Test a position pair under the default options."""
        factory = _factory()

        with pytest.warns(FutureWarning):
            node = factory.start_node_at([3, Position(1, 3)])

        assert node.start == 3
        assert not hasattr(node, "loc")

    def test_finish_node_at_pair_warns(self) -> None:
        """Test finish_node_at accepts a position pair as well."""
        factory = _factory(ParserOptions.full())
        node = factory.start_node()

        with pytest.warns(FutureWarning, match="finish_node_at"):
            factory.finish_node_at(node, "X", (12, Position(1, 12)))

        assert node.end == 12
        assert node.range == [3, 12]
        assert node.loc.end == Position(1, 12)

    def test_warns_once(self) -> None:
        """Test the warning is reported once per factory and method."""
        factory = _factory()

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            factory.start_node_at([1, None])
            factory.start_node_at([2, None])
            factory.finish_node_at(factory.start_node(), "X", [3, None])

        assert len(caught) == 2

    def test_warning_shown_under_default_filters(self, tmp_path) -> None:
        """Test the one-time warning reaches stderr of a plain interpreter run."""
        (tmp_path / "myparser.py").write_text(
            textwrap.dedent(
                """
                from estreewalk.parser import NodeFactory


                def parse():
                    factory = NodeFactory()
                    factory.start_node_at([3, None])
                    factory.start_node_at([4, None])
                """
            ),
            encoding="utf-8",
        )
        (tmp_path / "run.py").write_text("import myparser\n\nmyparser.parse()\n", encoding="utf-8")

        env = {key: value for key, value in os.environ.items() if key != "PYTHONWARNINGS"}
        project_root = str(Path(__file__).resolve().parent.parent)
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [project_root, env.get("PYTHONPATH")]))
        result = subprocess.run(
            [sys.executable, "run.py"],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
            check=True,
        )

        assert result.stderr.count("start_node_at([pos, loc]) is deprecated") == 1
        assert "myparser.py" in result.stderr

    def test_strict_configuration_raises(self) -> None:
        """Test deprecations are errors under the strict options."""
        factory = _factory(ParserOptions.strict())

        with pytest.raises(DeprecatedUsageError):
            factory.start_node_at([3, Position(1, 3)])
        with pytest.raises(DeprecatedUsageError):
            factory.start_node_at([3, Position(1, 3)])

    def test_trace_configuration_logs_stack(self, caplog) -> None:
        """Test trace mode logs the warning with a stack."""
        factory = _factory(ParserOptions(deprecation=DeprecationMode.TRACE))

        with caplog.at_level(logging.WARNING, logger="estreewalk.parser.node_factory"):
            factory.start_node_at([3, None])

        assert len(caplog.records) == 1
        assert "deprecated" in caplog.records[0].getMessage()
        assert caplog.records[0].stack_info

    def test_pair_with_explicit_loc(self) -> None:
        """Test a position pair combined with a location is rejected."""
        factory = _factory()

        with pytest.raises(NodePositionError) as excinfo:
            factory.start_node_at([3, None], Position(1, 3))

        assert isinstance(excinfo.value, TypeError)
        assert excinfo.value.method == "start_node_at"


class TestParserOptions:
    """Test parser option handling."""

    def test_defaults(self) -> None:
        """Test default options."""
        options = ParserOptions.default()

        assert not options.locations
        assert not options.ranges
        assert options.deprecation is DeprecationMode.WARN

    def test_presets(self) -> None:
        """Test the named presets."""
        assert ParserOptions.full().locations
        assert ParserOptions.full().ranges
        assert ParserOptions.strict().deprecation is DeprecationMode.ERROR

    def test_from_dict_camel_case(self) -> None:
        """Test JavaScript-style option names."""
        options = ParserOptions.from_dict(
            {"locations": True, "directSourceFile": "a.js", "sourceFile": "b.js", "throwDeprecation": True}
        )

        assert options.locations
        assert options.direct_source_file == "a.js"
        assert options.source_file == "b.js"
        assert options.deprecation is DeprecationMode.ERROR

    def test_from_dict_trace(self) -> None:
        """Test the trace flag."""
        assert ParserOptions.from_dict({"traceDeprecation": True}).deprecation is DeprecationMode.TRACE

    def test_dict_round_trip(self) -> None:
        """Test to_dict output is accepted by from_dict."""
        options = ParserOptions(ranges=True, direct_source_file="a.js", deprecation=DeprecationMode.TRACE)

        assert ParserOptions.from_dict(options.to_dict()) == options

    def test_invalid_deprecation_mode(self) -> None:
        """Test unknown deprecation modes are rejected."""
        with pytest.raises(ValueError):
            ParserOptions.from_dict({"deprecation": "loud"})


def test_node_repr() -> None:
    """Test node representation."""
    assert repr(Node("Identifier", 1, 2)) == "Node(type='Identifier', start=1, end=2)"
