"""Graph algorithms on adjacency matrices: BFS, DFS, Dijkstra, Floyd-Warshall and Kruskal."""

import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

INF = math.inf


def _square(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def _check_node(node: int, count: int) -> None:
    if not 0 <= node < count:
        raise ValueError(f"node {node} is out of range for {count} nodes")


def bfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the nodes reachable from start in breadth-first order.

    adjacency[u][v] is truthy when there is an edge from u to v; neighbours
    are explored in increasing index order.
    """
    rows = _square(adjacency)
    _check_node(start, len(rows))
    visited = [False] * len(rows)
    visited[start] = True
    queue = deque([start])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour, linked in enumerate(rows[node]):
            if linked and not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def dfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the nodes reachable from start in depth-first order.

    adjacency[u][v] is truthy when there is an edge from u to v; neighbours
    are explored in increasing index order.
    """
    rows = _square(adjacency)
    _check_node(start, len(rows))
    visited = [False] * len(rows)
    visited[start] = True
    order = [start]
    stack = [iter(enumerate(rows[start]))]
    while stack:
        for neighbour, linked in stack[-1]:
            if linked and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append(iter(enumerate(rows[neighbour])))
                break
        else:
            stack.pop()
    return order


def dijkstra(weights: Sequence[Sequence[float]], start: int) -> list[float]:
    """Return the shortest distance from start to every node.

    weights[u][v] is the weight of the edge from u to v, with 0 meaning no
    edge. Unreachable nodes get math.inf.
    """
    rows = _square(weights)
    count = len(rows)
    _check_node(start, count)
    dist = [INF] * count
    done = [False] * count
    dist[start] = 0
    for _ in range(count):
        candidates = [i for i in range(count) if not done[i] and dist[i] < INF]
        if not candidates:
            break
        u = min(candidates, key=dist.__getitem__)
        done[u] = True
        for v, weight in enumerate(rows[u]):
            if weight and not done[v] and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def floyd_warshall(distances: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return all-pairs shortest distances.

    distances[i][j] is the direct edge weight, math.inf where there is none
    and 0 on the diagonal. The input is left unchanged.
    """
    dist = _square(distances)
    count = len(dist)
    for k in range(count):
        for i in range(count):
            for j in range(count):
                if dist[i][k] != INF and dist[k][j] != INF:
                    dist[i][j] = min(dist[i][j], dist[i][k] + dist[k][j])
    return dist


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    u: int
    v: int
    weight: int


@dataclass
class SpanningTree:
    """Edges chosen for a minimum spanning tree, in the order they were taken."""

    edges: list[Edge] = field(default_factory=list)
    total_weight: int = 0


def _sort_by_weight(edges: list[Edge]) -> list[Edge]:
    """Order edges by weight using exchange sort, which fixes how ties fall."""
    ordered = list(edges)
    for i in range(len(ordered) - 1):
        for j in range(i + 1, len(ordered)):
            if ordered[j].weight < ordered[i].weight:
                ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered


def kruskal(node_count: int, edges: Iterable[Edge | tuple[int, int, int]]) -> SpanningTree:
    """Return a minimum spanning forest of the graph by Kruskal's algorithm."""
    if node_count < 0:
        raise ValueError(f"node_count must be non-negative, got {node_count}")
    all_edges = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in all_edges:
        _check_node(edge.u, node_count)
        _check_node(edge.v, node_count)

    parent = list(range(node_count))

    def find(node: int) -> int:
        root = node
        while parent[root] != root:
            root = parent[root]
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    tree = SpanningTree()
    for edge in _sort_by_weight(all_edges):
        root_u, root_v = find(edge.u), find(edge.v)
        if root_u != root_v:
            parent[root_u] = root_v
            tree.edges.append(edge)
            tree.total_weight += edge.weight
    return tree