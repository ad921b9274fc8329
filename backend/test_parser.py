"""Tests for the edge-list parser"""

from dataclasses import FrozenInstanceError

import pytest

from graphboard.compiler.parser import (
    ParsePolicy,
    parse_graph,
    parse_line,
    read_graph_source,
)
from graphboard.errors import ParseError


def test_sample_graph_ids_and_calls(sample_text):
    graph = parse_graph(sample_text)

    assert [(n.id, n.name, n.calls) for n in graph] == [
        (0, "A", (1,)),
        (1, "B", (2,)),
        (2, "C", ()),
        (3, "D", ()),
    ]
    assert graph.edge_count == 2
    assert graph.skipped_lines == ()


def test_ids_follow_first_sight_order():
    graph = parse_graph("digraph {\nz -> y\nx\ny -> w\n}")

    assert [n.name for n in graph] == ["z", "y", "x", "w"]
    assert [n.id for n in graph] == list(range(4))
    assert graph.get("w").id == 3
    assert "x" in graph
    assert graph.get("missing") is None


def test_cycles_are_kept():
    graph = parse_graph("A -> B\nB -> A\nA -> A")

    assert graph.get("A").calls == (1, 0)
    assert graph.get("B").calls == (0,)


def test_lone_node_does_not_touch_calls():
    graph = parse_graph("A -> B\nA\nB")

    assert len(graph) == 2
    assert graph.get("A").calls == (1,)
    assert graph.get("B").calls == ()


def test_no_dangling_edges():
    text = "\n".join(["digraph {", "a -> b", "c -> a", "b -> d", "e", "d -> c", "}"])
    graph = parse_graph(text)

    edges = list(graph.edges())
    assert len(edges) == graph.edge_count == 4
    for source, target in edges:
        assert 0 <= source < len(graph)
        assert graph[target].id == target


def test_quotes_whitespace_and_semicolons_are_stripped():
    assert parse_line('  "pkg.mod" -> "pkg.other" ;') == ("pkg.mod", "pkg.other")
    assert parse_line('"lonely"') == ("lonely", None)
    assert parse_line("   ") is None


@pytest.mark.parametrize("line", ["A -> B -> C", "A ->", "-> B", '"" -> B'])
def test_malformed_lines_raise(line):
    with pytest.raises(ParseError):
        parse_line(line)


def test_malformed_line_skipped_by_default():
    graph = parse_graph("digraph {\nA -> B -> C\nA -> B\n}")

    assert [n.name for n in graph] == ["A", "B"]
    assert graph.skipped_lines == ((2, "A -> B -> C"),)


def test_raise_policy_names_the_line():
    with pytest.raises(ParseError) as exc:
        parse_graph("digraph {\nA -> B\nA -> \n}", on_error=ParsePolicy.RAISE)

    assert exc.value.line_no == 3
    assert "A -> " in str(exc.value)


def test_policy_accepts_plain_string():
    with pytest.raises(ParseError):
        parse_graph("A -> B -> C", on_error="raise")


def test_duplicate_edges_preserved_unless_deduped():
    text = "A -> B\nA -> B"

    assert parse_graph(text).get("A").calls == (1, 1)
    assert parse_graph(text, dedupe_edges=True).get("A").calls == (1,)


def test_header_and_closer_only_dropped_at_edges():
    graph = parse_graph("\n\ndigraph G {\nA -> B\n}\n\n")

    assert [n.name for n in graph] == ["A", "B"]
    assert graph.skipped_lines == ()


def test_closer_with_semicolon_is_dropped():
    graph = parse_graph("digraph {\nA -> B\n};")

    assert [n.name for n in graph] == ["A", "B"]
    assert graph.skipped_lines == ()


def test_parsed_graph_is_read_only(sample_text):
    graph = parse_graph(sample_text)
    node = graph.get("A")

    with pytest.raises(FrozenInstanceError):
        node.id = 42
    with pytest.raises(FrozenInstanceError):
        node.name = "Z"
    with pytest.raises(AttributeError):
        node.calls.append(3)
    with pytest.raises(AttributeError):
        graph.nodes = ()
    assert isinstance(graph.nodes, tuple)


def test_read_graph_source(tmp_path, sample_text):
    path = tmp_path / "calls.dot"
    path.write_text(sample_text, encoding="utf-8")

    assert read_graph_source(path) == sample_text


def test_read_graph_source_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_graph_source(tmp_path / "nope.dot")
