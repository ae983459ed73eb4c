# algolab

A small collection of classic algorithms in plain Python, with no
dependencies beyond the standard library.

## What is inside

### `algolab.graphs`

Graphs are given as square adjacency matrices (lists of lists of integers);
a non-square matrix raises `ValueError`.

- `Edge(u, v, w)`: a frozen dataclass for a weighted edge.
- `kruskal(matrix)`: a minimum spanning forest by Kruskal's method. Only the
  lower triangle is read and a zero entry means no edge; edges of equal weight
  keep the order in which the lower triangle lists them.
- `prim(matrix)`: a minimum spanning tree grown from vertex 0. A zero entry
  means no edge; raises `ValueError` if some vertex cannot be reached.
- `spanning_tree_cost(edges)`: the total weight of a list of `Edge` values.
- `floyd_warshall(matrix, inf=INF)`: all-pairs shortest distances, where `inf`
  marks a missing edge. `format_distance_matrix(dist, inf=INF)` renders the
  result, writing `INF` for entries equal to `inf`.
- `dijkstra(matrix, source)`: shortest distances from `source`; a zero entry
  means no edge and unreachable vertices get `INF` (99999). A source outside
  the matrix raises `ValueError`.
- `topological_sort(vertex_count, edges)`: the vertices of a directed acyclic
  graph, given as `(src, dest)` pairs, in topological order. Depth-first search
  visits vertices and successors in ascending order. An out-of-range edge
  raises `ValueError`.

### `algolab.knapsack`

- `Item(weight, value)`: a frozen dataclass; the weight must be positive.
  `Item.density()` returns value per unit of weight.
- `knapsack_01(capacity, weights, values)`: the best value for the 0/1
  knapsack by dynamic programming.
- `greedy_discrete_knapsack(items, capacity)`: takes whole items in order of
  falling density while they fit.
- `fractional_knapsack(items, capacity)`: fills the capacity by density,
  taking a fraction of the first item that does not fit.

### `algolab.backtracking`

- `solve_n_queens(n)`: the first placement of `n` non-attacking queens found
  column by column, as rows of 0/1 cells, or `None` if there is none.
  `format_board(board)` renders it as lines of space-separated cells.
- `subset_sums(values, target)`: a generator of every subset (as a tuple, in
  input order) that adds up to `target`.

### `algolab.sorting`

- `selection_sort`, `quick_sort` (last-element pivot) and `merge_sort`
  (stable) each return a sorted copy of their input.
- `random_array(n, low=1, high=10000, rng=None)`: `n` random integers from
  `low` to `high` inclusive.
- `benchmark(sort, sizes, low=1, high=10000, rng=None)`: yields
  `(n, milliseconds)` of CPU time taken by `sort` on a random array of each
  size.
- `write_csv(path, rows)`: writes the rows under the header
  `n,Time taken (ms)`, times to two decimals.

## Example

```python
from algolab.graphs import kruskal, spanning_tree_cost
from algolab.knapsack import knapsack_01

matrix = [
    [0, 4, 4, 0, 0, 0],
    [4, 0, 2, 0, 0, 0],
    [4, 2, 0, 3, 4, 2],
    [0, 0, 3, 0, 3, 0],
    [0, 0, 4, 3, 0, 3],
    [0, 0, 2, 0, 3, 0],
]
tree = kruskal(matrix)
print(spanning_tree_cost(tree))  # 14

print(knapsack_01(50, [10, 20, 30], [60, 100, 120]))  # 220
```

## Sorting benchmark

The package installs a command that times one sorting algorithm on random
arrays, prints each timing and saves the results as CSV:

```
algolab-sort [selection|quick|merge]
```

The algorithm defaults to `quick`. Sizes default to 1000 to 10000 in steps of
1000 for `selection`, and 5000 to 10000 in steps of 500 for `quick` and
`merge`. Options:

- `-o`, `--output`: the CSV file to write (default `sorting_times.csv`)
- `--start`, `--stop`, `--step`: the array sizes to time
- `--low`, `--high`: the range of the random values (default 1 to 10000)
- `--seed`: a seed for reproducible arrays

If the output file cannot be written, the command prints `Error opening file.`
and exits with status 1.

## Tests

```
pip install -e .[test]
pytest
```