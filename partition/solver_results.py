"""
Parse solver readouts and keep the best balanced bisections.

Each readout is "energy group_size bit_string". The first character of a bit
string defines group A, so a string and its complement describe the same
split. Only equal splits are accepted, and of those only the ones at the
lowest energy seen are kept.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Set, TextIO, Tuple, Union

import networkx as nx

from edge_list import Graph, QxtError


class SolutionSizeError(QxtError):
    pass


@dataclass(frozen=True)
class SolverReadout:
    energy: int
    group_size: int
    bit_string: str


def read_readouts(source: Union[str, TextIO]) -> Iterator[SolverReadout]:
    """Yield readouts until the input ends or a triple is malformed."""
    text = source if isinstance(source, str) else source.read()
    tokens = text.split()
    for pos in range(0, len(tokens) - 2, 3):
        energy, group_size, bits = tokens[pos:pos + 3]
        try:
            yield SolverReadout(int(energy), int(group_size), bits)
        except ValueError:
            return


def canonicalize(bit_string: str) -> str:
    """Map every symbol equal to the first one to '0', the rest to '1'."""
    if not bit_string:
        return ""
    first = bit_string[0]
    return "".join("0" if c == first else "1" for c in bit_string)


def is_balanced(canonical: str) -> bool:
    return bool(canonical) and 2 * canonical.count("0") == len(canonical)


@dataclass
class SolutionSet:
    """Distinct canonical bisections at the lowest energy seen so far."""

    best_energy: Optional[int] = None
    solutions: Set[str] = field(default_factory=set)
    accepted: int = 0
    discarded: int = 0

    def offer(self, readout: SolverReadout) -> bool:
        """Consider one readout. Returns True if it is kept."""
        canonical = canonicalize(readout.bit_string)
        if not is_balanced(canonical):
            self.discarded += 1
            return False
        self.accepted += 1

        H = readout.energy
        if self.best_energy is None or H < self.best_energy:
            self.best_energy = H
            self.solutions = {canonical}
            return True
        if H > self.best_energy:
            return False
        self.solutions.add(canonical)
        return True

    def sorted_solutions(self) -> List[str]:
        return sorted(self.solutions)

    def __bool__(self) -> bool:
        return bool(self.solutions)


def collect_solutions(readouts: Iterable[SolverReadout]) -> SolutionSet:
    result = SolutionSet()
    for r in readouts:
        result.offer(r)
    return result


# -------------------- Reporting --------------------

def split_groups(canonical: str) -> Tuple[List[int], List[int]]:
    """Return (group A, group B) index lists; group A holds position 0."""
    group_a = [i for i, c in enumerate(canonical) if c == canonical[0]]
    group_b = [i for i, c in enumerate(canonical) if c != canonical[0]]
    return group_a, group_b


def cut_edges(G: nx.Graph, canonical: str) -> int:
    if len(canonical) != G.number_of_nodes():
        raise SolutionSizeError(
            f"Solution {canonical} has {len(canonical)} nodes, graph has {G.number_of_nodes()}"
        )
    group_a, group_b = split_groups(canonical)
    return int(nx.cut_size(G, group_a, group_b))


def to_networkx(graph: Graph) -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(sorted(graph))
    for u, nbrs in graph.items():
        for v in nbrs:
            if u < v:
                G.add_edge(u, v)
    return G


def format_solution(canonical: str, G: Optional[nx.Graph] = None) -> str:
    group_a, group_b = split_groups(canonical)
    lines = [
        "Group A:" + "".join(f" {i}" for i in group_a),
        "Group B:" + "".join(f" {i}" for i in group_b),
    ]
    if G is not None:
        lines.append(f"Cut edges: {cut_edges(G, canonical)}")
    return "\n".join(lines) + "\n"


def format_solutions(solutions: Iterable[str], G: Optional[nx.Graph] = None) -> str:
    """Format solutions in sorted order, a blank line after each."""
    return "".join(format_solution(s, G) + "\n" for s in sorted(solutions))
