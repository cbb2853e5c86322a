"""Command-line entry point for shortest-path and partitioning runs."""

from __future__ import annotations

import argparse
import os
import sys
import time
from typing import List, Optional

from dynsssp.distributed import distributed_dijkstra, format_distances
from dynsssp.incremental import (
    dijkstra,
    format_shortest_paths,
    read_changes,
    read_matrix_market,
    single_change,
)
from dynsssp.metis import apply_changes, read_metis_graph
from dynsssp.partition import partition_graph, read_csr_graph, write_partition


def _run_incremental(args: argparse.Namespace) -> int:
    total_start = time.process_time()
    nrows, adj = read_matrix_market(args.graph)
    start_node = args.start
    if not 1 <= start_node <= nrows:
        raise ValueError(f"start node {start_node} outside 1..{nrows}")

    changes = read_changes(args.changes) if os.path.exists(args.changes) else []
    for change in changes:
        if not (1 <= change.u <= nrows and 1 <= change.v <= nrows):
            raise ValueError(f"change refers to unknown node: {change.u} or {change.v}")

    parts = [f"Initial SSSP from node {start_node}:\n"]
    began = time.process_time()
    result = dijkstra(adj, start_node)
    parts.append(format_shortest_paths(start_node, nrows, result))
    elapsed = time.process_time() - began
    parts.append(f"Execution time for initial SSSP: {elapsed:g} seconds\n")

    parts.append("\nProcessing changes incrementally...\n")
    began = time.process_time()
    for change in changes:
        kind = "Deletion" if change.change_type == "D" else "Insertion"
        parts.append(
            f"\nProcessing {kind} of edge {change.u}->{change.v} (weight: {change.weight})\n"
        )
        single_change(change.change_type, change.u, change.v, change.weight, adj, result)
    elapsed = time.process_time() - began
    parts.append(f"Execution time for incremental updates: {elapsed:g} seconds\n")

    parts.append("\nFinal SSSP after changes:\n")
    parts.append(format_shortest_paths(start_node, nrows, result))
    total = time.process_time() - total_start
    parts.append(f"\nTotal program execution time: {total:g} seconds\n")

    with open(args.output, "w", encoding="utf-8") as out:
        out.write("".join(parts))
    return 0


def _run_mpi(args: argparse.Namespace) -> int:
    began = time.perf_counter()
    adjacency = read_metis_graph(args.graph)
    apply_changes(adjacency, args.changes)
    distances = distributed_dijkstra(adjacency, args.source, args.procs)
    elapsed = time.perf_counter() - began
    with open(args.output, "w", encoding="utf-8") as out:
        out.write(f"Execution Time: {elapsed:g} seconds\n")
        out.write(f"Final shortest distances from vertex {args.source}:\n")
        out.write(format_distances(distances))
    return 0


def _run_hybrid(args: argparse.Namespace) -> int:
    adjacency = read_metis_graph(args.graph)
    began = time.perf_counter()
    distances = distributed_dijkstra(adjacency, args.source, args.procs)
    elapsed = time.perf_counter() - began
    with open(args.output, "w", encoding="utf-8") as out:
        out.write(f"Execution Time: {elapsed:g} seconds\n")
        out.write(format_distances(distances))
    return 0


def _run_partition(args: argparse.Namespace) -> int:
    graph = read_csr_graph(args.graph)
    part = partition_graph(graph, args.parts)
    write_partition(graph, part, args.output)
    print(f"Graph partitioned into {args.parts} parts. Output written to '{args.output}'.")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dynsssp", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    incremental = commands.add_parser(
        "incremental", help="shortest paths on a MatrixMarket graph, then apply edge changes"
    )
    incremental.add_argument("graph")
    incremental.add_argument("--changes", default="changes.txt")
    incremental.add_argument("--output", default="../results/output1.txt")
    incremental.add_argument("--start", type=int, default=1)
    incremental.set_defaults(handler=_run_incremental)

    mpi = commands.add_parser(
        "mpi", help="block-distributed shortest paths on a METIS graph with changes"
    )
    mpi.add_argument("graph")
    mpi.add_argument("changes")
    mpi.add_argument("source", type=int)
    mpi.add_argument("--procs", type=int, default=1)
    mpi.add_argument("--output", default="output_mpi.txt")
    mpi.set_defaults(handler=_run_mpi)

    hybrid = commands.add_parser("hybrid", help="block-distributed shortest paths on a METIS graph")
    hybrid.add_argument("graph")
    hybrid.add_argument("source", type=int)
    hybrid.add_argument("--procs", type=int, default=1)
    hybrid.add_argument("--output", default="hybrid_output.txt")
    hybrid.set_defaults(handler=_run_hybrid)

    partition = commands.add_parser("partition", help="split a CSR graph into balanced parts")
    partition.add_argument("graph", nargs="?", default="metis.graph")
    partition.add_argument("--parts", type=int, default=1)
    partition.add_argument("--output", default="partitioned.graph")
    partition.set_defaults(handler=_run_partition)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run a subcommand and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())