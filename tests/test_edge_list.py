import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "partition"))

from edge_list import (
    DiscontinuityError,
    DuplicateEdgeError,
    EmptyGraphError,
    FileOpenError,
    OddNodeCountError,
    ParseError,
    count_edges,
    load_edge_list,
    parse_edge_lines,
)


def test_square_graph():
    graph, n = parse_edge_lines(["0 1\n", "1 2\n", "2 3\n", "3 0\n"])
    assert n == 4
    assert graph == {0: {1, 3}, 1: {0, 2}, 2: {1, 3}, 3: {2, 0}}
    assert count_edges(graph) == 4


def test_comments_blank_and_dos_lines_skipped():
    lines = ["# square\n", "\n", "0 1\r\n", "\r\n", "\r", "2 3\n"]
    graph, n = parse_edge_lines(lines)
    assert n == 4
    assert set(graph) == set(range(4))


def test_standalone_node_as_self_loop():
    graph, n = parse_edge_lines(["0 1", "2 2", "3 3"])
    assert n == 4
    assert graph[2] == {2}
    assert count_edges(graph) == 1


def test_trailing_tokens_ignored():
    graph, n = parse_edge_lines(["0 1 extra", "2 3 # pair"])
    assert n == 4
    assert graph[0] == {1}


@pytest.mark.parametrize("bad", ["0", "a b", "0 x", "-1 2", "1.5 2", "   ", "1_0 2", "0 \u0661"])
def test_bad_indices(bad):
    with pytest.raises(ParseError) as exc:
        parse_edge_lines(["# header", "0 1", bad])
    assert exc.value.line == 3
    assert str(exc.value) == "Bad indices at line 3"


def test_duplicate_same_direction():
    with pytest.raises(DuplicateEdgeError) as exc:
        parse_edge_lines(["0 1", "2 3", "0 1"])
    assert exc.value.line == 3


def test_duplicate_reverse_direction():
    with pytest.raises(DuplicateEdgeError) as exc:
        parse_edge_lines(["0 1", "", "1 0"])
    assert exc.value.line == 3
    assert "line 3" in str(exc.value)


def test_repeated_self_loop():
    with pytest.raises(DuplicateEdgeError):
        parse_edge_lines(["0 1", "2 2", "2 2", "3 3"])


def test_gap_reports_missing_node():
    with pytest.raises(DiscontinuityError, match="Node 3 is defined, but not 2"):
        parse_edge_lines(["0 1", "1 3"])


def test_missing_node_zero():
    with pytest.raises(DiscontinuityError, match="Node 0 must be defined"):
        parse_edge_lines(["1 2", "3 4"])


def test_empty_graph():
    with pytest.raises(EmptyGraphError, match="does not define any edges"):
        parse_edge_lines(["# nothing", ""], source="empty.txt")


def test_odd_node_count():
    with pytest.raises(OddNodeCountError):
        parse_edge_lines(["0 1", "1 2"])


def test_load_edge_list(tmp_path):
    path = tmp_path / "g.txt"
    path.write_bytes(b"0 1\r\n\r\n2 3\r\n")
    graph, n = load_edge_list(str(path))
    assert n == 4
    assert graph[2] == {3}


def test_load_edge_list_bare_cr_does_not_split_lines(tmp_path):
    path = tmp_path / "g.txt"
    path.write_bytes(b"0 1\r2 3\n0 1\n")
    with pytest.raises(DuplicateEdgeError) as exc:
        load_edge_list(str(path))
    assert exc.value.line == 2


def test_load_edge_list_missing_file(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(FileOpenError, match="Cannot open file"):
        load_edge_list(str(missing))
