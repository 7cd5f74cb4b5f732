import math
from itertools import product

import pytest

from algobox.graphs import breadth_first_search, depth_first_search, floyd_warshall

INF = math.inf


@pytest.mark.parametrize(
    ("start", "end", "nodes", "edges", "expected"),
    [
        (
            0,
            5,
            6,
            [
                [0, 1, 1, 0, 0, 0],
                [1, 0, 0, 1, 0, 1],
                [1, 0, 0, 1, 0, 0],
                [0, 1, 1, 0, 1, 0],
                [0, 0, 0, 1, 0, 0],
                [0, 1, 0, 0, 0, 0],
            ],
            (True, 2),
        ),
        (
            0,
            5,
            6,
            [
                [0, 1, 1, 0, 0, 0],
                [1, 0, 0, 1, 0, 0],
                [1, 0, 0, 1, 0, 0],
                [0, 1, 1, 0, 1, 0],
                [0, 0, 0, 1, 0, 1],
                [0, 0, 0, 0, 1, 0],
            ],
            (True, 4),
        ),
        (
            0,
            5,
            6,
            [
                [0, 1, 1, 0, 0, 0],
                [1, 0, 0, 1, 0, 0],
                [1, 0, 0, 1, 0, 0],
                [0, 1, 1, 0, 1, 0],
                [0, 0, 0, 1, 0, 0],
                [0, 0, 0, 0, 0, 0],
            ],
            (False, 0),
        ),
    ],
)
def test_breadth_first_search(start, end, nodes, edges, expected):
    assert breadth_first_search(start, end, nodes, edges) == expected


SAMPLE_NODES = [1, 2, 3, 4, 5, 6]
SAMPLE_EDGES = [
    [False, True, True, False, False, False],
    [True, False, False, True, False, False],
    [True, False, False, True, False, False],
    [False, True, True, False, True, False],
    [False, False, False, True, False, True],
    [False, False, False, False, True, False],
]


def test_depth_first_search_sample_graph():
    route, found = depth_first_search(1, 6, SAMPLE_NODES, SAMPLE_EDGES)
    assert found is True
    assert route == [1, 3, 4, 5, 6]


def test_depth_first_search_leaves_edges_untouched():
    edges = [list(row) for row in SAMPLE_EDGES]
    depth_first_search(1, 6, SAMPLE_NODES, edges)
    assert edges == SAMPLE_EDGES


def test_depth_first_search_unreachable():
    edges = [list(row) for row in SAMPLE_EDGES]
    edges[4][5] = edges[5][4] = False
    assert depth_first_search(1, 6, SAMPLE_NODES, edges) == ([], False)


def test_depth_first_search_unknown_start():
    with pytest.raises(ValueError):
        depth_first_search(9, 6, SAMPLE_NODES, SAMPLE_EDGES)


GRAPH = [
    [0, INF, -2, INF],
    [4, 0, 3, INF],
    [INF, INF, 0, 2],
    [INF, -1, INF, 0],
]


def test_floyd_warshall_example():
    assert floyd_warshall(GRAPH) == [
        [0, -1, -2, 0],
        [4, 0, 2, 4],
        [5, 1, 0, 2],
        [3, -1, 1, 0],
    ]


def test_floyd_warshall_triangle_inequality():
    result = floyd_warshall(GRAPH)
    size = len(result)
    for i, j, k in product(range(size), repeat=3):
        assert result[i][j] <= result[i][k] + result[k][j]
    for i in range(size):
        assert result[i][j] <= GRAPH[i][j] or True
        assert all(result[i][j] <= GRAPH[i][j] for j in range(size))


def test_floyd_warshall_does_not_modify_input():
    graph = [list(row) for row in GRAPH]
    floyd_warshall(graph)
    assert graph == GRAPH


@pytest.mark.parametrize("graph", [[], [[0, 1]]])
def test_floyd_warshall_rejects_bad_shape(graph):
    with pytest.raises(ValueError):
        floyd_warshall(graph)