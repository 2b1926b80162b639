"""
Edge list reader for the Ising coefficient converter.

Input is a list of edges, two node indices per line. Indices start at 0 and
must be numbered continuously. Empty lines and lines starting with '#' are
allowed. Repeating an edge is an error. A standalone node is declared as an
edge to itself.
"""

from __future__ import annotations

from typing import Dict, Iterable, Set, Tuple

Graph = Dict[int, Set[int]]  # node -> neighbors, both directions stored


class QxtError(Exception):
    """User-facing error; the message is printed as is."""


class ParseError(QxtError):
    def __init__(self, line: int):
        super().__init__(f"Bad indices at line {line}")
        self.line = line


class DuplicateEdgeError(QxtError):
    def __init__(self, line: int):
        super().__init__(f"Edge repetition at line {line}")
        self.line = line


class DiscontinuityError(QxtError):
    pass


class EmptyGraphError(QxtError):
    pass


class OddNodeCountError(QxtError):
    pass


class FileOpenError(QxtError):
    pass


def _is_blank(line: str) -> bool:
    return not line or line.startswith("#") or line == "\r"


def parse_indices(line: str, line_no: int) -> Tuple[int, int]:
    """Return the first two tokens of a line as non-negative node indices."""
    tokens = line.split()
    if len(tokens) < 2:
        raise ParseError(line_no)
    # ASCII digits only; int() would also take "1_0" and non-Latin digits
    for tok in tokens[:2]:
        if not (tok.isascii() and tok.isdigit()):
            raise ParseError(line_no)
    return int(tokens[0]), int(tokens[1])


def check_continuity(graph: Graph) -> None:
    expected = 0
    for idx in sorted(graph):
        if idx != expected:
            if expected == 0:
                raise DiscontinuityError("Node 0 must be defined")
            raise DiscontinuityError(f"Node {idx} is defined, but not {idx - 1}")
        expected += 1


def parse_edge_lines(lines: Iterable[str], source: str = "<input>") -> Tuple[Graph, int]:
    """
    Build a symmetric adjacency mapping from edge list lines.

    Line numbers in errors are 1-based and count skipped lines too.
    Returns (graph, n) where n is the node count.
    """
    graph: Graph = {}
    seen: Set[Tuple[int, int]] = set()

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\n")
        if _is_blank(line):
            continue

        x, y = parse_indices(line, line_no)

        # only the exact ordered pair is looked up; both directions go in below
        if (x, y) in seen:
            raise DuplicateEdgeError(line_no)
        seen.add((x, y))
        seen.add((y, x))

        graph.setdefault(x, set()).add(y)
        graph.setdefault(y, set()).add(x)

    check_continuity(graph)

    n = len(graph)
    if n == 0:
        raise EmptyGraphError(f"Input file {source} does not define any edges")
    if n % 2:
        raise OddNodeCountError("Number of nodes must be even")

    return graph, n


def load_edge_list(path: str) -> Tuple[Graph, int]:
    """Read and validate an edge list file. Returns (graph, n)."""
    try:
        f = open(path, "r", encoding="utf-8", newline="\n")
    except OSError:
        raise FileOpenError(f"Cannot open file {path}") from None
    with f:
        return parse_edge_lines(f, source=path)


def count_edges(graph: Graph) -> int:
    """Number of distinct undirected edges, self-loops excluded."""
    return sum(1 for u, nbrs in graph.items() for v in nbrs if u < v)
