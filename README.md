# dsaworks

A small library of classic data structures and algorithms in plain Python. It has
no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

Graphs (nodes are integers unless noted):

- `dsaworks.graph`: `Graph`, a generic adjacency-list graph. `add_edge(u, v, directed)`
  adds an edge, both ways when `directed` is false. `format_adjacency()` returns one
  line per node, such as `1->0 ,  2 ,  `. `adjacency_with_self(n, edges)` returns
  undirected lists for nodes `0..n-1`, each led by the node itself; edges that name a
  node outside that range are ignored.
- `dsaworks.traversal`: `bfs_traversal(n, edges)` gives breadth-first order over an
  undirected graph, visiting neighbours in ascending order. `dfs_components(n, edges)`
  gives the connected components in depth-first preorder.
- `dsaworks.toposort`: `topological_sort_dfs(edges, n)` and
  `topological_sort_kahn(edges, n)`. Both raise `ValueError` for a node outside
  `0..n-1`. The Kahn variant leaves out nodes that lie on a cycle.
- `dsaworks.cycles`: `has_directed_cycle(n, edges)` checks from nodes `1..n`.
  `has_undirected_cycle_bfs(n, edges)` and `has_undirected_cycle_dfs(n, edges)` check
  from nodes `0..n-1`.

Heaps and trees:

- `dsaworks.heaps`: `MaxHeap(capacity=100)` has `insert`, `pop`, `len()` and iteration
  in level order. It raises `IndexError` when full or empty. Also `heap_sort`,
  `build_min_heap` and `merge_max_heaps`.
- `dsaworks.heap_problems`: `kth_smallest(values, k)`, `min_rope_cost(lengths)`, and
  `is_max_heap(root)` for `TreeNode` trees. `is_max_heap` requires the tree to be
  complete and each parent to be strictly greater than its children.
- `dsaworks.bst_heap`: `inorder(root)`, and `bst_to_min_heap(root)`, which rewrites a
  tree's values in place.

Linked lists:

- `dsaworks.linked_list`: `ListNode`, `from_values` and `to_list`. Also
  `SinglyLinkedList`, with `push_front`, `push_back`, and 1-based `insert_at` and
  `delete_at`.
- `dsaworks.list_algorithms`: `insertion_sort`, `intersection`, `merge_sorted`,
  `partition`, `remove_duplicates` and `reverse`. Each works on `ListNode` chains by
  relinking nodes.
- `dsaworks.doubly_linked`: `DoublyLinkedList`, which has the same operations plus
  `reversed()`.
- `dsaworks.circular_list`: `CircularLinkedList`, with `insert_after(element, value)`
  and `delete(value)`. Also the chain checks `is_circular(head)` and `has_loop(head)`.
- `dsaworks.binary_list`: `sort_binary_list(head)` moves 0-valued nodes ahead of the
  rest.

Queues and scans:

- `dsaworks.array_queue`: `ArrayQueue(capacity=100001)`. Its freed slots are reused
  only after the queue empties.
- `dsaworks.circular_queue`: `CircularQueue(capacity)`.
- `dsaworks.array_deque`: `ArrayDeque(capacity)`.

  All three raise `IndexError` rather than returning a marker value.
- `dsaworks.queue_problems`: `reverse_queue`, `first_non_repeating` (uses `#` where no
  character qualifies) and `reverse_first_k`.
- `dsaworks.scans`: `PetrolPump`, `tour_start(pumps)` (returns `None` when no start
  works) and `first_negative_in_windows(values, k)`.

Math:

- `dsaworks.mathutils`: `binary_digits`, `bishop_moves(row, column)` on a 1-based 8x8
  board, and `sieve(limit)`.

## Example

```python
from dsaworks.traversal import bfs_traversal
from dsaworks.toposort import topological_sort_kahn
from dsaworks.mathutils import sieve

bfs_traversal(5, [(0, 1), (1, 2), (2, 3), (3, 4)])         # [0, 1, 2, 3, 4]
topological_sort_kahn([(0, 1), (1, 2), (2, 3), (2, 4)], 5)  # [0, 1, 2, 3, 4]
sieve(30)                                                   # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
```

## Command line

`dsaworks-graph` reads integers from standard input in this order:

1. the number of nodes;
2. the number of edges;
3. that many `u v` pairs.

It prints two prompt lines, then the adjacency list of the undirected graph in the
`format_adjacency()` form:

```
printf '3 2\n0 1\n1 2\n' | dsaworks-graph
```

On malformed input it writes an error to standard error and exits with status 1.

## What it does not do

This is the only command. The other modules are used from Python only. Nothing is
stored on disk, and no graph can be read from or written to a file.