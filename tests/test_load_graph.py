"""Tests for parsing graph descriptions."""

import logging

import pytest

from citygraph.domain.models import EdgeSpec
from citygraph.graph import iter_edge_specs, load_graph, parse_line


def test_parse_line_reads_all_segments():
    specs = parse_line("A -> B:3, C:2, D:1, E:4")

    assert specs == [
        EdgeSpec("A", "B", 3),
        EdgeSpec("A", "C", 2),
        EdgeSpec("A", "D", 1),
        EdgeSpec("A", "E", 4),
    ]


def test_parse_line_ignores_whitespace():
    specs = parse_line("   New York   ->   Boston :  -12 ,Albany:+7   ")

    assert specs == [
        EdgeSpec("New York", "Boston", -12),
        EdgeSpec("New York", "Albany", 7),
    ]


@pytest.mark.parametrize("line", ["", "   ", "A B:3", "just a comment", "A ->"])
def test_parse_line_skips_lines_without_edges(line):
    assert parse_line(line) == []


@pytest.mark.parametrize(
    "segment",
    ["B", "B:", "B:1:2", ":4", "B:x", "B:3.5"],
)
def test_malformed_segment_does_not_drop_the_line(segment):
    specs = parse_line(f"A -> {segment}, C:2")

    assert specs == [EdgeSpec("A", "C", 2)]


def test_malformed_segment_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="citygraph.graph.load_graph"):
        parse_line("A -> B:oops", line_number=7)

    assert "invalid weight" in caplog.text


def test_iter_edge_specs_keeps_file_order():
    lines = ["A -> B:1\n", "\n", "B -> C:2, A:5\n"]

    specs = list(iter_edge_specs(lines))

    assert [(s.source, s.target) for s in specs] == [("A", "B"), ("B", "C"), ("B", "A")]


def test_load_graph_directed(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("A -> B:3, C:2\nB -> C:1\n", encoding="utf-8")

    graph = load_graph(path)

    assert graph.directed
    assert graph.names == ("A", "B", "C")
    assert graph.edge_count == 3


def test_load_graph_undirected_mirrors(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("A -> B:5\n", encoding="utf-8")

    graph = load_graph(path, directed=False)

    assert graph.edge_count == 2
    assert graph.weight_between(1, 0) == 5


def test_load_graph_sort_edges_by_weight(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("A -> B:9, C:1, D:5\n", encoding="utf-8")

    in_file_order = load_graph(path)
    by_weight = load_graph(path, sort_edges_by_weight=True)

    assert [e.weight for e in in_file_order.out_edges(0)] == [9, 1, 5]
    assert [e.weight for e in by_weight.out_edges(0)] == [1, 5, 9]


def test_load_graph_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_graph(tmp_path / "missing.txt")
