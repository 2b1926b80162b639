"""
Ising coefficients for balanced graph bisection.

Hamiltonian H = sum_ij (N - e_ij) s_i s_j, where e_ij = 1 if the edge exists
between i and j and 0 otherwise. Only the upper triangle (diagonal included)
is written, one "i j weight" line per pair.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple

import numpy as np

from edge_list import Graph

ISAKOV_SUFFIX = ".isakov"

Coefficient = Tuple[int, int, int]  # (i, j, weight), i <= j


def coefficient_matrix(graph: Graph, n: int) -> np.ndarray:
    """Symmetric weight matrix: N - 1 on edges, N elsewhere, 0 on the diagonal."""
    W = np.full((n, n), n, dtype=np.int64)
    for u, nbrs in graph.items():
        for v in nbrs:
            W[u, v] = n - 1
    np.fill_diagonal(W, 0)
    return W


def iter_coefficients(graph: Graph, n: int) -> Iterator[Coefficient]:
    """Yield upper-triangle records in index-major order."""
    W = coefficient_matrix(graph, n)
    rows, cols = np.triu_indices(n)
    for i, j in zip(rows.tolist(), cols.tolist()):
        yield i, j, int(W[i, j])


def format_coefficients(records: Iterable[Coefficient]) -> str:
    return "".join(f"{i} {j} {w}\n" for i, j, w in records)


def coefficient_path(input_path: str) -> str:
    return input_path + ISAKOV_SUFFIX


def write_coefficients(graph: Graph, n: int, path: str) -> int:
    """Write the coefficient table to path. Returns the number of records."""
    records = list(iter_coefficients(graph, n))
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(format_coefficients(records))
    return len(records)
