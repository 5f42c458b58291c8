"""Directed graph stored as sorted adjacency lists."""

from __future__ import annotations

from bisect import bisect_left

from strukture.graph import DirectedGraph, Edge, Node


def _end_number(edge: Edge) -> int:
    return edge.end.number


class ListGraph(DirectedGraph):
    """Directed graph keeping each node's outgoing edges sorted by end node."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._nodes = [Node(number) for number in range(size)]
        self._adjacency: list[list[Edge]] = [[] for _ in range(size)]

    def _locate(self, start: int, end: int) -> tuple[list[Edge], int, bool]:
        self._check_node(start)
        self._check_node(end)
        edges = self._adjacency[start]
        position = bisect_left(edges, end, key=_end_number)
        found = position < len(edges) and edges[position].end.number == end
        return edges, position, found

    def node(self, number: int) -> Node:
        self._check_node(number)
        return self._nodes[number]

    def edge(self, start: int, end: int) -> Edge:
        edges, position, found = self._locate(start, end)
        if not found:
            raise KeyError((start, end))
        return edges[position]

    def node_count(self) -> int:
        return len(self._nodes)

    def set_node_count(self, size: int) -> None:
        old = self.node_count()
        if size <= old:
            raise ValueError("the node count can only grow")
        self._nodes.extend(Node(number) for number in range(old, size))
        self._adjacency.extend([] for _ in range(size - old))

    def has_edge(self, start: int, end: int) -> bool:
        return self._locate(start, end)[2]

    def add_edge(self, start: int, end: int, weight: float = 0.0) -> None:
        edges, position, found = self._locate(start, end)
        if not found:
            edges.insert(position, Edge(self._nodes[start], self._nodes[end], weight))

    def remove_edge(self, start: int, end: int) -> None:
        edges, position, found = self._locate(start, end)
        if found:
            del edges[position]

    def neighbors(self, number: int) -> list[int]:
        self._check_node(number)
        return [edge.end.number for edge in self._adjacency[number]]