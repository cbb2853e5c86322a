"""Reading METIS adjacency files and applying edge change lists to them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]

# METIS "fmt" header values whose adjacency lines carry edge weights.
WEIGHTED_FORMATS = frozenset({1, 10, 11})


class GraphFormatError(ValueError):
    """Raised when a graph or change file cannot be parsed."""


@dataclass(frozen=True)
class Edge:
    """A directed edge to vertex ``to`` (0-based) with an integer weight."""

    to: int
    weight: int = 1


Adjacency = List[List[Edge]]


def _ints(tokens: Iterable[str], where: str) -> List[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise GraphFormatError(f"non-integer value in {where}") from exc


def parse_metis_graph(lines: Iterable[str]) -> Adjacency:
    """Parse METIS adjacency lines into 0-based adjacency lists.

    Leading lines starting with ``%`` are comments. The header holds the
    vertex count, the edge count and an optional format code; formats 1, 10
    and 11 mean each neighbour is followed by its edge weight, otherwise
    every edge has weight 1.
    """
    remaining = iter(lines)
    header = next((line for line in remaining if not line.startswith("%")), None)
    if header is None:
        raise GraphFormatError("missing header line")

    fields = _ints(header.split(), "header")
    if len(fields) < 2:
        raise GraphFormatError("header needs vertex and edge counts")
    num_vertices = fields[0]
    if num_vertices < 0:
        raise GraphFormatError("negative vertex count")
    fmt = fields[2] if len(fields) > 2 else 0
    weighted = fmt in WEIGHTED_FORMATS

    adjacency: Adjacency = []
    for line_number in range(1, num_vertices + 1):
        line = next(remaining, None)
        if line is None:
            raise GraphFormatError(f"error reading line {line_number} from graph file")
        values = _ints(line.split(), f"adjacency line {line_number}")
        if weighted:
            if len(values) % 2:
                raise GraphFormatError(f"missing weight on adjacency line {line_number}")
            edges = [Edge(neighbor - 1, weight) for neighbor, weight in zip(values[::2], values[1::2])]
        else:
            edges = [Edge(neighbor - 1, 1) for neighbor in values]
        adjacency.append(edges)
    return adjacency


def read_metis_graph(path: PathLike) -> Adjacency:
    """Read a METIS graph file into 0-based adjacency lists."""
    with open(path, encoding="utf-8") as handle:
        return parse_metis_graph(handle)


def _parse_change(line: str) -> Optional[Tuple[str, int, int, int]]:
    text = line.lstrip()
    if not text:
        return None
    kind, rest = text[0], text[1:].split()
    if len(rest) < 3:
        return None
    try:
        u, v, w = (int(token) for token in rest[:3])
    except ValueError:
        return None
    return kind, u, v, w


def apply_changes(adjacency: Adjacency, path: PathLike) -> None:
    """Apply ``I u v w`` insertions and ``D u v w`` deletions from a file in place.

    Vertex numbers in the change file are 0-based. Lines that do not parse
    are skipped; a deletion removes every edge ``u -> v`` of weight ``w``.
    """
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            change = _parse_change(line)
            if change is None:
                continue
            kind, u, v, w = change
            if kind not in ("I", "D"):
                continue
            if not 0 <= u < len(adjacency):
                raise GraphFormatError(f"change refers to unknown vertex {u}")
            if kind == "I":
                adjacency[u].append(Edge(v, w))
            else:
                adjacency[u][:] = [e for e in adjacency[u] if not (e.to == v and e.weight == w)]