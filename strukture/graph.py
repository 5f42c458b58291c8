"""Directed graphs with labelled nodes and weighted, labelled edges."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Union


@dataclass(eq=False)
class Node:
    """A graph node identified by its number; the label is free data."""

    number: int
    label: Any = None


@dataclass(eq=False)
class Edge:
    """A directed edge between two nodes of the same graph."""

    start: Node
    end: Node
    weight: float = 0.0
    label: Any = None


NodeRef = Union[Node, int]


class DirectedGraph(ABC):
    """A directed graph on nodes numbered ``0 .. node_count() - 1``.

    Node numbers out of range raise ``IndexError``; asking for an edge that
    does not exist raises ``KeyError``. Nodes and edges handed out are the
    graph's own objects, so changing their labels or weights changes the graph.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("graph size must not be negative")

    def _check_node(self, number: int) -> None:
        if not 0 <= number < self.node_count():
            raise IndexError(f"no node numbered {number}")

    @abstractmethod
    def node(self, number: int) -> Node:
        """Return the node numbered ``number``."""

    @abstractmethod
    def edge(self, start: int, end: int) -> Edge:
        """Return the edge from ``start`` to ``end``."""

    @abstractmethod
    def node_count(self) -> int:
        """Return the number of nodes."""

    @abstractmethod
    def set_node_count(self, size: int) -> None:
        """Grow the graph to ``size`` nodes; shrinking is not allowed."""

    @abstractmethod
    def has_edge(self, start: int, end: int) -> bool:
        """Return whether an edge leads from ``start`` to ``end``."""

    @abstractmethod
    def add_edge(self, start: int, end: int, weight: float = 0.0) -> None:
        """Add an edge; an existing edge is left unchanged."""

    @abstractmethod
    def remove_edge(self, start: int, end: int) -> None:
        """Remove an edge if it exists."""

    @abstractmethod
    def neighbors(self, number: int) -> list[int]:
        """Return the numbers of the nodes ``number`` leads to, ascending."""

    def node_label(self, number: int) -> Any:
        """Return the label of a node."""
        return self.node(number).label

    def set_node_label(self, number: int, label: Any) -> None:
        """Set the label of a node."""
        self.node(number).label = label

    def edge_weight(self, start: int, end: int) -> float:
        """Return the weight of an edge."""
        return self.edge(start, end).weight

    def set_edge_weight(self, start: int, end: int, weight: float) -> None:
        """Set the weight of an edge."""
        self.edge(start, end).weight = weight

    def edge_label(self, start: int, end: int) -> Any:
        """Return the label of an edge."""
        return self.edge(start, end).label

    def set_edge_label(self, start: int, end: int, label: Any) -> None:
        """Set the label of an edge."""
        self.edge(start, end).label = label

    def edges(self) -> Iterator[Edge]:
        """Iterate over the edges ordered by start node, then by end node."""
        for start in range(self.node_count()):
            for end in self.neighbors(start):
                yield self.edge(start, end)

    def __iter__(self) -> Iterator[Edge]:
        return self.edges()

    def _start_number(self, node: NodeRef) -> int:
        number = node.number if isinstance(node, Node) else node
        self._check_node(number)
        return number

    def _roots(self, node: NodeRef) -> Iterator[int]:
        start = self._start_number(node)
        count = self.node_count()
        return ((start + offset) % count for offset in range(count))

    def bfs(self, node: NodeRef) -> list[Node]:
        """Breadth-first order of every node, starting at ``node``.

        Nodes not reachable are taken up in turn by number, wrapping around.
        """
        visited = [False] * self.node_count()
        order: list[Node] = []
        for root in self._roots(node):
            if visited[root]:
                continue
            visited[root] = True
            queue = deque([root])
            while queue:
                current = queue.popleft()
                order.append(self.node(current))
                for neighbor in self.neighbors(current):
                    if not visited[neighbor]:
                        visited[neighbor] = True
                        queue.append(neighbor)
        return order

    def dfs(self, node: NodeRef) -> list[Node]:
        """Depth-first order of every node, starting at ``node``.

        Nodes not reachable are taken up in turn by number, wrapping around.
        """
        visited = [False] * self.node_count()
        order: list[Node] = []
        for root in self._roots(node):
            if visited[root]:
                continue
            visited[root] = True
            order.append(self.node(root))
            stack = [iter(self.neighbors(root))]
            while stack:
                for neighbor in stack[-1]:
                    if not visited[neighbor]:
                        visited[neighbor] = True
                        order.append(self.node(neighbor))
                        stack.append(iter(self.neighbors(neighbor)))
                        break
                else:
                    stack.pop()
        return order


class MatrixGraph(DirectedGraph):
    """Directed graph stored as an adjacency matrix."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._nodes = [Node(number) for number in range(size)]
        self._matrix: list[list[Optional[Edge]]] = [[None] * size for _ in range(size)]

    def node(self, number: int) -> Node:
        self._check_node(number)
        return self._nodes[number]

    def edge(self, start: int, end: int) -> Edge:
        if not self.has_edge(start, end):
            raise KeyError((start, end))
        edge = self._matrix[start][end]
        assert edge is not None
        return edge

    def node_count(self) -> int:
        return len(self._nodes)

    def set_node_count(self, size: int) -> None:
        old = self.node_count()
        if size <= old:
            raise ValueError("the node count can only grow")
        self._nodes.extend(Node(number) for number in range(old, size))
        for row in self._matrix:
            row.extend([None] * (size - old))
        self._matrix.extend([None] * size for _ in range(size - old))

    def has_edge(self, start: int, end: int) -> bool:
        self._check_node(start)
        self._check_node(end)
        return self._matrix[start][end] is not None

    def add_edge(self, start: int, end: int, weight: float = 0.0) -> None:
        if not self.has_edge(start, end):
            self._matrix[start][end] = Edge(self._nodes[start], self._nodes[end], weight)

    def remove_edge(self, start: int, end: int) -> None:
        if self.has_edge(start, end):
            self._matrix[start][end] = None

    def neighbors(self, number: int) -> list[int]:
        self._check_node(number)
        return [end for end, edge in enumerate(self._matrix[number]) if edge is not None]