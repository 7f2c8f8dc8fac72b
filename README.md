# edgebound

Tools for edge-weighted graphs: reading DIMACS instances and weight files,
building graphs with forward and backward stars, transforming and checking
them, generating random instances, drawing them as DOT or GML, and computing
the San Segundo linear-programming lower bound for a vertex coloring you
supply.

## Installation

```
pip install .
```

## Modules

- `edgebound.graph`: `Graph` and `build_graph(n, tails, heads, node_weights,
  arc_weights, with_matrix)`. A graph keeps its arcs, node and arc weights,
  forward and backward stars (`forward_star(node)`, `backward_star(node)`),
  in-, out- and total degrees, and optionally an adjacency matrix
  (`has_arc(tail, head)`). `check_forward_star()` and
  `check_backward_star()` return lists of consistency errors; `describe()`,
  `describe_forward_star()`, `describe_backward_star()` and
  `describe_matrix()` return text listings.
- `edgebound.graphio`: `read_dimacs(path)` (lenient) and
  `read_dimacs_strict(path)` return a `GraphData` with 0-based endpoints,
  each edge stored with its smaller endpoint as tail; malformed files raise
  `DimacsError`. `read_node_weights`, `read_edge_weights` and `read_weights`
  load whitespace-separated weights into a graph.
- `edgebound.transform`: `reorder(graph, order)` and
  `reorder_by_degree(graph, descending)` relabel nodes;
  `complement_directed` and `complement_undirected` build complements;
  `floyd_warshall(weight)` gives all-pairs distances and predecessors;
  `is_undirected`, `is_connected` and `graph_info` summarise an instance as a
  `GraphInfo`. `sort_non_increasing` and `sort_non_decreasing` sort items by
  score.
- `edgebound.generators`: `random_undirected_by_density`,
  `random_undirected`, `random_directed_by_density` and `random_directed`
  build random graphs from an optional `random.Random`; `write_dot`,
  `write_gml` and `write_gml_undirected` write drawings and return the path
  written.
- `edgebound.sansegundo`: `san_segundo_bound(graph, colors, num_colors,
  time_limit)` solves the bound's linear program with SciPy's HiGHS
  interior-point method and returns a `SanSegundoResult` with `value`,
  `best_bound`, `status`, `time` (CPU seconds), the weight split `rho` of
  every arc and the load `pi` of every color.

## Example

```python
from edgebound.graph import build_graph
from edgebound.graphio import read_dimacs, read_edge_weights
from edgebound.sansegundo import san_segundo_bound

data = read_dimacs("instance.col")
graph = build_graph(data.nodes, data.tails, data.heads,
                    [0.0] * data.nodes, [0.0] * len(data.tails), True)
read_edge_weights(graph, "instance.col.weights")

# Any proper coloring with colors 0..k-1; here every node gets its own color.
colors = list(range(graph.n))
result = san_segundo_bound(graph, colors, len(colors), 60.0)
print(result.value, result.status)
```

## What it does not do

The package has no command-line program and writes no results file. It does
not color graphs: `san_segundo_bound` takes a coloring from the caller, and
there is no DSATUR or random greedy coloring here. The Shimizu bound and its
first-policy variant are not provided either.