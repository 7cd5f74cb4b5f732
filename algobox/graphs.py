"""Graph searches on adjacency matrices and all-pairs shortest paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def breadth_first_search(
    start: int, end: int, nodes: int, edges: Sequence[Sequence[int]]
) -> tuple[bool, int]:
    """Search breadth first from ``start`` for ``end`` over an adjacency matrix.

    Returns whether ``end`` is reachable and the level of the node it was reached from,
    counting ``start`` as level 1; ``(False, 0)`` when it cannot be reached.
    """
    discovered = [0] * nodes
    discovered[start] = 1
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for neighbour, weight in enumerate(edges[vertex]):
            if discovered[neighbour] == 0 and weight > 0:
                if neighbour == end:
                    return True, discovered[vertex]
                discovered[neighbour] = discovered[vertex] + 1
                queue.append(neighbour)
    return False, 0


def depth_first_search(
    start: int, end: int, nodes: Sequence[int], edges: Sequence[Sequence[bool]]
) -> tuple[list[int], bool]:
    """Search depth first from node ``start`` for node ``end``.

    ``edges`` is an adjacency matrix indexed like ``nodes``; it is not modified.
    Returns the visiting order up to ``end`` and True, or an empty list and False.
    """
    try:
        start_index = list(nodes).index(start)
    except ValueError:
        raise ValueError(f"start node {start} is not in nodes") from None

    open_edges = [list(row) for row in edges]
    route: list[int] = []
    stack = [start_index]
    while stack:
        current = stack.pop()
        route.append(nodes[current])
        for neighbour, connected in enumerate(open_edges[current]):
            if connected and neighbour not in stack:
                stack.append(neighbour)
            open_edges[current][neighbour] = False
            open_edges[neighbour][current] = False
        if route[-1] == end:
            return route, True
    return [], False


def floyd_warshall(graph: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the shortest distance between every pair of vertices of a square weight matrix.

    Missing edges are given as ``math.inf``.
    """
    if not graph or len(graph) != len(graph[0]):
        raise ValueError("graph must be a non-empty square matrix")
    result = [list(row) for row in graph]
    vertices = range(len(result))
    for k in vertices:
        through = result[k]
        for row in result:
            via = row[k]
            for j in vertices:
                if row[j] > via + through[j]:
                    row[j] = via + through[j]
    return result