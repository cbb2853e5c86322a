"""Balanced k-way partitioning of graphs stored in compressed sparse rows."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple, Union

from dynsssp.distributed import block_range
from dynsssp.metis import GraphFormatError

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class CSRGraph:
    """A graph with 0-based CSR offsets, neighbour indices and edge weights."""

    n: int
    m: int
    xadj: List[int]
    adjncy: List[int]
    weights: List[int]


def read_csr_graph(path: PathLike) -> CSRGraph:
    """Read ``n m``, then ``n+1`` offsets, ``m`` neighbours and ``m`` weights.

    Offsets and neighbours in the file are 1-based and are shifted to 0-based.
    """
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    try:
        values = [int(token) for token in tokens]
    except ValueError as exc:
        raise GraphFormatError("non-integer value in graph file") from exc
    if len(values) < 2:
        raise GraphFormatError("missing vertex and edge counts")
    n, m = values[0], values[1]
    if n < 0 or m < 0:
        raise GraphFormatError("negative vertex or edge count")
    body = values[2:]
    if len(body) < (n + 1) + 2 * m:
        raise GraphFormatError("graph file ends early")
    xadj = [x - 1 for x in body[: n + 1]]
    adjncy = [x - 1 for x in body[n + 1 : n + 1 + m]]
    weights = body[n + 1 + m : n + 1 + 2 * m]
    return CSRGraph(n=n, m=m, xadj=xadj, adjncy=adjncy, weights=weights)


def _connections(graph: CSRGraph) -> List[Dict[int, int]]:
    if len(graph.xadj) != graph.n + 1:
        raise ValueError("offset array must have n + 1 entries")
    links: List[Dict[int, int]] = [{} for _ in range(graph.n)]
    for u, (begin, end) in enumerate(zip(graph.xadj, graph.xadj[1:])):
        if not 0 <= begin <= end <= len(graph.adjncy):
            raise ValueError(f"bad offsets for vertex {u}")
        for v, weight in zip(graph.adjncy[begin:end], graph.weights[begin:end]):
            if not 0 <= v < graph.n:
                raise ValueError(f"vertex {u} has out-of-range neighbour {v}")
            if v == u:
                continue
            links[u][v] = links[u].get(v, 0) + weight
            links[v][u] = links[v].get(u, 0) + weight
    return links


def partition_graph(graph: CSRGraph, nparts: int) -> List[int]:
    """Assign each vertex a part in ``0..nparts-1`` with balanced part sizes.

    Parts are grown one at a time, each absorbing the unassigned vertex most
    strongly connected to it (lowest index on ties) until it reaches its
    share of the vertices, which keeps tightly linked vertices together.
    """
    if nparts < 1:
        raise ValueError("number of parts must be positive")
    links = _connections(graph)
    part = [-1] * graph.n
    next_free = 0

    for current in range(nparts):
        start, end = block_range(graph.n, current, nparts)
        gains: Dict[int, int] = {}
        for _ in range(end - start):
            if gains:
                vertex = max(gains.items(), key=_gain_key)[0]
                del gains[vertex]
            else:
                while part[next_free] != -1:
                    next_free += 1
                vertex = next_free
            part[vertex] = current
            for neighbour, weight in links[vertex].items():
                if part[neighbour] == -1:
                    gains[neighbour] = gains.get(neighbour, 0) + weight
    return part


def _gain_key(item: Tuple[int, int]) -> Tuple[int, int]:
    vertex, gain = item
    return gain, -vertex


def write_partition(graph: CSRGraph, part: Sequence[int], path: PathLike) -> None:
    """Write a ``# NodeID PartitionID`` header and one ``node part`` line per vertex."""
    with open(path, "w", encoding="utf-8") as out:
        out.write("# NodeID PartitionID\n")
        for node, assigned in enumerate(part[: graph.n]):
            out.write(f"{node} {assigned}\n")