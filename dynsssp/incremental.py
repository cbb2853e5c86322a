"""Single-source shortest paths with incremental edge insertions and deletions.

Graphs are 1-based adjacency lists: ``adj[u]`` holds ``(v, weight)`` pairs
and ``adj[0]`` is unused.
"""

from __future__ import annotations

import heapq
import logging
import math
import os
from dataclasses import dataclass
from typing import List, Tuple, Union

from dynsssp.metis import GraphFormatError

PathLike = Union[str, "os.PathLike[str]"]
Graph = List[List[Tuple[int, int]]]

INF = math.inf
NO_PARENT = -1

logger = logging.getLogger(__name__)


@dataclass
class SSSPResult:
    """Distances and shortest-path-tree parents, indexed by vertex."""

    dist: list
    parent: List[int]

    def path_to(self, node: int) -> List[int]:
        """Return the vertices from the root to ``node`` along parent links."""
        if self.dist[node] == INF:
            raise ValueError(f"node {node} is unreachable")
        path = []
        current = node
        while current != NO_PARENT:
            path.append(current)
            if len(path) > len(self.parent):
                raise ValueError(f"parent links from node {node} form a cycle")
            current = self.parent[current]
        path.reverse()
        return path


@dataclass(frozen=True)
class EdgeChange:
    """One edge change: ``change_type`` is ``"I"`` to insert or ``"D"`` to delete."""

    change_type: str
    u: int
    v: int
    weight: int


def dijkstra(adj: Graph, start: int) -> SSSPResult:
    """Compute shortest distances and parents from ``start``."""
    size = len(adj)
    result = SSSPResult(dist=[INF] * size, parent=[NO_PARENT] * size)
    result.dist[start] = 0
    queue = [(0, start)]
    while queue:
        current, u = heapq.heappop(queue)
        if current > result.dist[u]:
            continue
        for v, weight in adj[u]:
            candidate = result.dist[u] + weight
            if result.dist[v] > candidate:
                result.dist[v] = candidate
                result.parent[v] = u
                heapq.heappush(queue, (candidate, v))
    return result


def update_vertex(z: int, adj: Graph, result: SSSPResult) -> bool:
    """Relax every edge entering ``z``; return whether its distance improved."""
    updated = False
    for u, edges in enumerate(adj[1:], start=1):
        if result.dist[u] == INF:
            continue
        for v, weight in edges:
            if v == z and result.dist[z] > result.dist[u] + weight:
                result.dist[z] = result.dist[u] + weight
                result.parent[z] = u
                updated = True
    return updated


def single_change(
    change_type: str, u: int, v: int, weight: int, adj: Graph, result: SSSPResult
) -> None:
    """Apply one edge change to ``adj`` and repair ``result`` in place."""
    if result.dist[u] > result.dist[v]:
        x, y = u, v
    else:
        x, y = v, u

    if change_type == "I":
        adj[u].append((v, weight))
        if result.dist[y] != INF and result.dist[x] > result.dist[y] + weight:
            result.dist[x] = result.dist[y] + weight
            result.parent[x] = y
    elif change_type == "D":
        adj[u][:] = [edge for edge in adj[u] if edge[0] != v]
        if result.parent[x] == y:
            result.dist[x] = INF
            result.parent[x] = NO_PARENT

    queue = [(result.dist[x], x)]
    while queue:
        _, z = heapq.heappop(queue)
        if update_vertex(z, adj, result):
            for neighbor, _weight in adj[z]:
                heapq.heappush(queue, (result.dist[neighbor], neighbor))


def read_matrix_market(path: PathLike) -> Tuple[int, Graph]:
    """Read a weighted MatrixMarket coordinate file as a directed graph.

    Returns the row count and the 1-based adjacency lists. Entries whose
    vertices fall outside ``1..nrows`` are logged and skipped; reading stops
    at the first entry that is not three integers.
    """
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().splitlines()

    remaining = iter(lines)
    nrows = 0
    for line in remaining:
        if line.startswith("%"):
            continue
        try:
            nrows, _ncols, _nentries = (int(field) for field in line.split()[:3])
        except ValueError as exc:
            raise GraphFormatError("error reading graph dimensions") from exc
        break

    adj: Graph = [[] for _ in range(nrows + 1)]
    tokens = " ".join(remaining).split()
    for triple in zip(*[iter(tokens)] * 3):
        try:
            u, v, w = (int(token) for token in triple)
        except ValueError:
            break
        if not (1 <= u <= nrows and 1 <= v <= nrows):
            logger.warning("Invalid node index: %d or %d", u, v)
            continue
        adj[u].append((v, w))
    return nrows, adj


def read_changes(path: PathLike) -> List[EdgeChange]:
    """Read ``<type> u v w`` lines; blank, ``%`` and malformed lines are skipped."""
    changes = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            line = line.rstrip("\n")
            if not line or line.startswith("%"):
                continue
            text = line.lstrip()
            if not text:
                continue
            fields = text[1:].split()
            if len(fields) < 3:
                continue
            try:
                u, v, w = (int(field) for field in fields[:3])
            except ValueError:
                continue
            changes.append(EdgeChange(text[0], u, v, w))
    return changes


def format_shortest_paths(start_node: int, nrows: int, result: SSSPResult) -> str:
    """Render the distance and path to every node other than ``start_node``."""
    parts = [f"\nShortest paths from node {start_node}:\n"]
    for node in range(1, nrows + 1):
        if node == start_node:
            continue
        if result.dist[node] == INF:
            parts.append(f"To node {node}: Unreachable\n")
        else:
            path = " -> ".join(str(vertex) for vertex in result.path_to(node))
            parts.append(f"To node {node}: Distance = {result.dist[node]}, Path = {path}\n")
    return "".join(parts)