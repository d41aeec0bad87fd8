import pytest

from eulertools.graph import Node, shortest_path

MATRIX = [
    [131, 673, 234, 103, 18],
    [201, 96, 342, 965, 150],
    [630, 803, 746, 422, 111],
    [537, 699, 497, 121, 956],
    [805, 732, 524, 37, 331],
]


def _grid_graph(matrix):
    rows, cols = len(matrix), len(matrix[0])
    graph = {}
    for r, row in enumerate(matrix):
        for c, weight in enumerate(row):
            adjacency = []
            if c + 1 < cols:
                adjacency.append(r * cols + c + 1)
            if r + 1 < rows:
                adjacency.append((r + 1) * cols + c)
            graph[r * cols + c] = Node(weight, adjacency)
    return graph


def test_right_down_minimal_path():
    graph = _grid_graph(MATRIX)
    assert shortest_path(graph, 0, 24) == 2427


def test_single_node_path_is_its_weight():
    graph = {7: Node(42, [])}
    assert shortest_path(graph, 7, 7) == 42


def test_extra_edge_never_lengthens_path():
    graph = _grid_graph(MATRIX)
    before = shortest_path(graph, 0, 24)
    graph[0].adjacency.append(24)
    after = shortest_path(graph, 0, 24)
    assert after <= before
    assert after == graph[0].weight + graph[24].weight


def test_path_at_least_endpoint_weights():
    graph = _grid_graph(MATRIX)
    for dst in range(1, 25):
        assert shortest_path(graph, 0, dst) >= graph[0].weight + graph[dst].weight


def test_unreachable_raises():
    graph = {1: Node(1, []), 2: Node(2, [1])}
    with pytest.raises(ValueError):
        shortest_path(graph, 1, 2)


def test_unknown_nodes_raise():
    graph = {1: Node(1, [])}
    with pytest.raises(KeyError):
        shortest_path(graph, 5, 1)
    with pytest.raises(KeyError):
        shortest_path(graph, 1, 5)


def test_node_defaults():
    node = Node()
    assert node.weight == 0
    assert node.adjacency == []
    assert Node().adjacency is not node.adjacency