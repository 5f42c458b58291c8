# strukture

A collection of classic data structures and algorithms written in plain
Python, with no third-party dependencies.

## What is inside

Sequences, queues and stacks

- `strukture.fifo_queue.Queue` – a first-in, first-out queue (`push`, `pop`,
  `front`, `clear`, `copy`). `pop` and `front` raise `IndexError` when empty.
- `strukture.double_ended_queue.Deque` – a double-ended queue (`push_front`,
  `push_back`, `pop_front`, `pop_back`, `front`, `back`, `clear`, `copy`).
- `strukture.doubly_linked_list.DoublyLinkedList` – a doubly linked list with a
  movable cursor: the `current` property, `next`, `previous`, `to_start`,
  `to_end`, `insert_before`, `insert_after` and `remove`, plus indexing with
  non-negative indices and forward and reverse iteration.
  `max_element` returns the largest item of any iterable.
- `strukture.stack_search.Stack` – a last-in, first-out stack (`push`, `pop`,
  `top`). `binary_search` finds a value in a sorted sequence, and
  `stack_search` looks for a value in a stack of sorted lists, returning the
  index within the list and the list's position from the bottom of the stack,
  or `None`. The stack is left as it was.

Graphs

- `strukture.graph.MatrixGraph` – a directed graph stored as an adjacency matrix.
- `strukture.list_graph.ListGraph` – a directed graph stored as sorted adjacency lists.

Both share the interface of `strukture.graph.DirectedGraph`: labelled nodes
(`Node`), weighted and labelled edges (`Edge`), `add_edge`, `remove_edge`,
`has_edge`, `neighbors`, `set_node_count` (which only grows the graph),
iteration over edges ordered by start and then end node, and breadth-first
(`bfs`) and depth-first (`dfs`) traversal that visits every node, taking up
unreachable ones in turn by number. Node numbers out of range raise
`IndexError`; asking for a missing edge raises `KeyError`.

Algorithms

- `strukture.radix_heap` – `radix_sort` for non-negative integers, binary
  max-heap operations kept in a list (`fix_downwards`, `fix_upwards`,
  `make_heap`, `heap_insert`, `heap_extract`) and `heap_sort`.
- `strukture.recursion` – `fibonacci` and `gcd`.
- `strukture.bezout` – greatest common divisor together with Bézout
  coefficients, for two numbers (`bezout`) or many (`bezout_many`), and
  `format_combination` to print the result.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from strukture.fifo_queue import Queue
from strukture.graph import MatrixGraph
from strukture.radix_heap import radix_sort
from strukture.recursion import fibonacci, gcd
from strukture.bezout import bezout

queue = Queue([1, 2, 3])
queue.push(4)
assert queue.pop() == 1
assert len(queue) == 3

graph = MatrixGraph(3)
graph.add_edge(0, 1)
graph.add_edge(1, 2)
assert [node.number for node in graph.bfs(0)] == [0, 1, 2]

values = [170, 45, 75, 90, 802, 24, 2, 66]
radix_sort(values)
assert values == [2, 24, 45, 66, 75, 90, 170, 802]

assert fibonacci(10) == 55
assert gcd(12, 18) == 6

g, k_a, k_b = bezout(240, 46)
assert g == k_a * 240 + k_b * 46
```

## Command-line tool

- `strukture-bezout [NUMBERS ...]` – prints the greatest common divisor of the
  given integers written as an integer combination of them, in the form
  `g = (k1) * n1 + (k2) * n2 + ...`. With no numbers it uses
  `150 -105 -12 8`; fewer than two numbers is an error.

## What it does not do

The package has no map or dictionary structures (array, tree or hash based)
and no comparison sorts such as bubble, selection, quick or merge sort, nor a
command for sorting numbers stored in files. The only sorting it offers is
`radix_sort` and `heap_sort` on lists in memory.