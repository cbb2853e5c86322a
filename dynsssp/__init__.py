"""Shortest paths on static and changing graphs: incremental repair, block-distributed Dijkstra, graph partitioning."""

__version__ = "0.1.0"
__all__ = ["__version__"]