# dynsssp

Single-source shortest paths (SSSP) on weighted directed graphs, including
graphs whose edges change over time. The package uses only the standard
library.

It is made of four modules:

- `dynsssp.incremental`: Dijkstra on 1-based adjacency lists. After it, edge
  insertions and deletions are applied one at a time, and only the affected part
  of the shortest-path tree is repaired.
- `dynsssp.metis`: reads METIS adjacency files, weighted or unweighted, into
  0-based lists of `Edge` values. It also applies `I`/`D` change files to them.
- `dynsssp.distributed`: a block-distributed Dijkstra. The vertices are split
  into contiguous blocks, one per worker.
- `dynsssp.partition`: reads a CSR graph, splits it into parts of balanced size
  and writes the `NodeID PartitionID` assignment file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides a `dynsssp` command with four subcommands. To
list them:

```
dynsssp --help
```

When a run fails because a file cannot be read or an argument is invalid, the
command prints `error: ...` to standard error and exits with status 1.

### `dynsssp incremental GRAPH [--changes FILE] [--output FILE] [--start N]`

1. Reads a weighted Matrix Market coordinate file as a directed graph.
2. Runs Dijkstra from node `--start`, which defaults to 1.
3. Applies the edge changes from `--changes`, which defaults to `changes.txt`.
   If that file does not exist, no changes are applied.
4. Writes the report to `--output`, which defaults to `../results/output1.txt`.

The report holds:

- the initial shortest paths;
- one line for each change processed;
- the final shortest paths;
- CPU timings.

The start node must lie in `1..nrows`. Every change must refer to nodes in that
range.

### `dynsssp mpi GRAPH CHANGES SOURCE [--procs P] [--output FILE]`

1. Reads a METIS graph.
2. Applies the change file, whose vertex numbers count from 0.
3. Computes the distances from vertex `SOURCE` with the block-distributed
   solver, using `P` blocks. The default is 1.
4. Writes the result to `--output`, which defaults to `output_mpi.txt`.

The output file holds:

- an `Execution Time:` line;
- a `Final shortest distances from vertex ...:` line;
- one `Vertex i: d` line per vertex.

### `dynsssp hybrid GRAPH SOURCE [--procs P] [--output FILE]`

This is the same as `mpi`, with two differences:

- No change file is applied.
- The output file has no `Final shortest distances` line.

The default output file is `hybrid_output.txt`.

### `dynsssp partition [GRAPH] [--parts K] [--output FILE]`

This subcommand:

1. Reads a CSR graph file. The default is `metis.graph`.
2. Splits it into `K` parts. The default is 1.
3. Writes the assignment to `--output`. The default is `partitioned.graph`.
4. Prints a confirmation line.

## Library use

### Shortest paths and incremental changes

An adjacency list is indexed by node number from 1, and `adj[0]` is unused.
Each entry holds `(target, weight)` pairs:

```python
from dynsssp.incremental import dijkstra, single_change, format_shortest_paths

adj = [
    [],                  # unused slot 0
    [(2, 4), (3, 1)],    # 1 -> 2 (4), 1 -> 3 (1)
    [],
    [(2, 1)],            # 3 -> 2 (1)
]

result = dijkstra(adj, 1)
print(result.dist[2])        # 2
print(result.path_to(2))     # [1, 3, 2]

# Delete the edge 3 -> 2 and repair the tree in place.
single_change("D", 3, 2, 1, adj, result)
print(result.dist[2])        # 4

print(format_shortest_paths(1, 3, result))
```

`dijkstra` returns an `SSSPResult`, which has `dist` and `parent` lists.
Unreachable nodes have distance `math.inf` and parent `-1`.
`SSSPResult.path_to(node)` raises `ValueError` for an unreachable node.
`format_shortest_paths` lists an unreachable node as `Unreachable`.

In `single_change`, a deletion (`"D"`) removes every edge `u -> v`, whatever its
weight. An insertion (`"I"`) appends the edge. After either change, the affected
vertices are re-relaxed through `update_vertex(z, adj, result)`. That function
relaxes every edge that enters `z`.

#### Reading graphs and change files

`read_matrix_market(path)` loads a weighted Matrix Market coordinate file and
returns `(nrows, adj)`:

- Entries with out-of-range nodes are logged and skipped.
- Reading stops at the first entry that is not three integers.
- A header that cannot be parsed raises `GraphFormatError`.

`read_changes(path)` returns a list of `EdgeChange(change_type, u, v, weight)`.
The file has one change per line:

```
I 3 5 2
D 1 4 7
```

Blank lines, lines starting with `%` and malformed lines are skipped.

### METIS graphs

`read_metis_graph(path)` and `parse_metis_graph(lines)` return 0-based adjacency
lists of `Edge(to, weight)`. The file is laid out as follows:

- Leading `%` lines are comments.
- The header gives the vertex count, the edge count and an optional format code.
- Formats 1, 10 and 11 carry a weight after each neighbour. In any other format,
  every edge has weight 1.

A malformed file raises `GraphFormatError`, a subclass of `ValueError`.

`apply_changes(adjacency, path)` applies a change file in place, with 0-based
vertex numbers:

- A deletion removes only the edges whose target *and* weight both match.
- A change whose source vertex is unknown raises `GraphFormatError`.

### Block-distributed solver

`block_range(num_vertices, rank, size)` gives the half-open vertex range owned
by one worker. When the count does not divide evenly, the first blocks get one
extra vertex each.

`distribute_graph(adjacency, rank, size)` returns `(local_adjacency, start,
end)` for that worker.

`distributed_dijkstra(adjacency, source, nprocs)` computes the distances from
`source`:

- The next vertex settled is always the global minimum, taking the lowest index
  on ties.
- Each block relaxes only the edges whose two ends both lie inside it.
- So with more than one block, distances can be larger than the true shortest
  distances. With one block, they are exact.

`format_distances(distances)` renders `Vertex i: d` lines, with `INF` for
unreachable vertices.

### Partitioning

```python
from dynsssp.partition import read_csr_graph, partition_graph, write_partition

graph = read_csr_graph("metis.graph")
part = partition_graph(graph, 4)
write_partition(graph, part, "partitioned.graph")
```

The graph file read by `read_csr_graph` is a stream of integers:

- `n m`;
- then `n + 1` offsets;
- then `m` neighbours;
- then `m` weights.

Offsets and neighbours are 1-based and are shifted to 0-based in the returned
`CSRGraph`.

`partition_graph` grows the parts one after another, with these rules:

- Each part takes the unassigned vertex most strongly connected to it, by summed
  edge weight, taking the lowest index on ties.
- A part stops growing once it holds its share of the vertices.
- Part sizes differ by at most one.

## What this package does not do

- The block-distributed solver runs in a single Python process. It reproduces
  the results of several cooperating workers, but it does not start processes
  or threads and does not run anything in parallel.
- Partitioning uses the greedy growth heuristic described above. It is not a
  multilevel k-way partitioner, and it does not report or minimise the edge cut.