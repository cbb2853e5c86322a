"""Block-distributed Dijkstra over 0-based METIS adjacency lists.

Vertices are split into contiguous blocks, one per process. Each process
only relaxes edges whose both ends lie in its own block, while the next
vertex to settle is the global minimum over all blocks (lowest index on
ties).
"""

from __future__ import annotations

import heapq
import math
from typing import List, Sequence, Tuple

from dynsssp.metis import Edge

INF = math.inf

Adjacency = Sequence[Sequence[Edge]]


def block_range(num_vertices: int, rank: int, size: int) -> Tuple[int, int]:
    """Return the half-open vertex range ``(start, end)`` owned by ``rank``."""
    if size < 1:
        raise ValueError("process count must be positive")
    if not 0 <= rank < size:
        raise ValueError(f"rank {rank} outside 0..{size - 1}")
    per_proc, remainder = divmod(num_vertices, size)
    start = rank * per_proc + min(rank, remainder)
    end = start + per_proc + (1 if rank < remainder else 0)
    return start, end


def distribute_graph(
    adjacency: Adjacency, rank: int, size: int
) -> Tuple[List[Sequence[Edge]], int, int]:
    """Return ``(local_adjacency, start, end)`` for the block owned by ``rank``."""
    start, end = block_range(len(adjacency), rank, size)
    return list(adjacency[start:end]), start, end


def distributed_dijkstra(adjacency: Adjacency, source: int, nprocs: int) -> list:
    """Compute distances from ``source`` as ``nprocs`` block-owning processes would.

    Unreachable vertices get ``math.inf``. Edges that cross from one block
    to another are not relaxed, so with more than one process distances can
    only be equal to or larger than the true shortest distances.
    """
    num_vertices = len(adjacency)
    if not 0 <= source < num_vertices:
        raise ValueError("invalid source vertex")

    blocks = [distribute_graph(adjacency, rank, nprocs) for rank in range(nprocs)]
    owner: List[int] = []
    for rank, (_local, start, end) in enumerate(blocks):
        owner.extend([rank] * (end - start))

    dist = [INF] * num_vertices
    dist[source] = 0
    visited = [False] * num_vertices
    queue = [(0, source)]
    while queue:
        current, u = heapq.heappop(queue)
        if visited[u] or current != dist[u]:
            continue
        visited[u] = True
        local, start, end = blocks[owner[u]]
        for edge in local[u - start]:
            v = edge.to
            if not start <= v < end:
                continue
            candidate = current + edge.weight
            if dist[v] > candidate:
                dist[v] = candidate
                heapq.heappush(queue, (candidate, v))
    return dist


def format_distances(distances: Sequence) -> str:
    """Render one ``Vertex i: d`` line per vertex, ``INF`` when unreachable."""
    return "".join(
        f"Vertex {index}: {'INF' if distance == INF else distance}\n"
        for index, distance in enumerate(distances)
    )