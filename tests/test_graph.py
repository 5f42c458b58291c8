import pytest

from strukture.graph import DirectedGraph, Edge, MatrixGraph, Node


def _pairs(graph):
    return [(edge.start.number, edge.end.number) for edge in graph.edges()]


@pytest.fixture
def tree():
    graph = MatrixGraph(5)
    for start, end in [(0, 1), (0, 2), (1, 3), (2, 4)]:
        graph.add_edge(start, end)
    return graph


def test_new_graph_has_nodes_but_no_edges():
    graph = MatrixGraph(4)
    assert graph.node_count() == 4
    assert [graph.node(i).number for i in range(4)] == [0, 1, 2, 3]
    assert list(graph.edges()) == []


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        MatrixGraph(-1)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        DirectedGraph(3)


def test_edges_are_directed():
    graph = MatrixGraph(3)
    graph.add_edge(0, 1)
    assert graph.has_edge(0, 1)
    assert not graph.has_edge(1, 0)


def test_edge_weight_default_and_given():
    graph = MatrixGraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2, 2.5)
    assert graph.edge_weight(0, 1) == 0
    assert graph.edge_weight(1, 2) == 2.5


def test_adding_existing_edge_keeps_it():
    graph = MatrixGraph(2)
    graph.add_edge(0, 1, 2.5)
    graph.add_edge(0, 1, 7.0)
    assert graph.edge_weight(0, 1) == 2.5
    assert len(list(graph.edges())) == 1


def test_remove_edge():
    graph = MatrixGraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.remove_edge(0, 1)
    assert not graph.has_edge(0, 1)
    graph.remove_edge(0, 1)
    assert _pairs(graph) == [(1, 2)]


def test_missing_edge_raises_key_error():
    graph = MatrixGraph(3)
    with pytest.raises(KeyError):
        graph.edge(0, 1)
    with pytest.raises(KeyError):
        graph.edge_weight(2, 0)


@pytest.mark.parametrize("number", [-1, 3, 10])
def test_invalid_node_raises_index_error(number):
    graph = MatrixGraph(3)
    with pytest.raises(IndexError):
        graph.node(number)
    with pytest.raises(IndexError):
        graph.has_edge(0, number)
    with pytest.raises(IndexError):
        graph.add_edge(number, 0)


def test_set_node_count_grows_and_keeps_edges():
    graph = MatrixGraph(3)
    graph.add_edge(0, 2, 1.5)
    graph.set_node_count(5)
    assert graph.node_count() == 5
    assert graph.node(4).number == 4
    assert graph.edge_weight(0, 2) == 1.5
    graph.add_edge(4, 0)
    graph.add_edge(2, 4)
    assert _pairs(graph) == [(0, 2), (2, 4), (4, 0)]


@pytest.mark.parametrize("size", [1, 3])
def test_set_node_count_must_grow(size):
    graph = MatrixGraph(3)
    with pytest.raises(ValueError):
        graph.set_node_count(size)


def test_node_labels_are_shared_with_edges():
    graph = MatrixGraph(3)
    graph.add_edge(1, 2)
    graph.set_node_label(1, "start")
    assert graph.node_label(1) == "start"
    assert graph.node(1).label == "start"
    assert graph.edge(1, 2).start.label == "start"


def test_edge_label_and_weight_setters():
    graph = MatrixGraph(3)
    graph.add_edge(2, 0)
    graph.set_edge_label(2, 0, "back")
    graph.set_edge_weight(2, 0, 4.0)
    assert graph.edge_label(2, 0) == "back"
    assert graph.edge(2, 0).weight == 4.0


def test_edges_are_ordered_by_start_then_end():
    pairs = [(2, 1), (0, 3), (3, 0), (0, 1), (2, 0), (1, 1)]
    graph = MatrixGraph(4)
    for start, end in pairs:
        graph.add_edge(start, end)
    assert _pairs(graph) == sorted(pairs)
    assert [(e.start.number, e.end.number) for e in graph] == sorted(pairs)


def test_neighbors_ascending():
    graph = MatrixGraph(5)
    for end in (4, 1, 3):
        graph.add_edge(0, end)
    assert graph.neighbors(0) == [1, 3, 4]
    assert graph.neighbors(2) == []


def test_bfs_order(tree):
    assert [node.number for node in tree.bfs(0)] == [0, 1, 2, 3, 4]


def test_dfs_order(tree):
    assert [node.number for node in tree.dfs(0)] == [0, 1, 3, 2, 4]


def test_bfs_wraps_around_to_unreached_nodes(tree):
    assert [node.number for node in tree.bfs(3)] == [3, 4, 0, 1, 2]


@pytest.mark.parametrize("start", range(5))
def test_traversals_visit_every_node_once(tree, start):
    for order in (tree.bfs(start), tree.dfs(start)):
        numbers = [node.number for node in order]
        assert numbers[0] == start
        assert sorted(numbers) == list(range(5))


def test_traversal_accepts_node_or_number(tree):
    assert tree.bfs(tree.node(2)) == tree.bfs(2)
    assert tree.dfs(Node(1)) == tree.dfs(1)


def test_traversal_rejects_invalid_start(tree):
    with pytest.raises(IndexError):
        tree.bfs(5)


def test_traversal_returns_graph_nodes(tree):
    order = tree.dfs(0)
    assert all(node is tree.node(node.number) for node in order)


def test_edge_objects_hold_graph_nodes():
    graph = MatrixGraph(2)
    graph.add_edge(0, 1, 3.0)
    edge = graph.edge(0, 1)
    assert isinstance(edge, Edge)
    assert edge.start is graph.node(0)
    assert edge.end is graph.node(1)