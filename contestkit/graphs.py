"""Shortest-path and spanning-tree exercises on weighted graphs."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

Edge = tuple[int, int, int]


def _check_node(node: int, low: int, high: int) -> None:
    if not low <= node <= high:
        raise IndexError(f"node {node} outside {low}..{high}")


def _undirected(n: int, edges: Iterable[Edge]) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        _check_node(u, 0, n - 1)
        _check_node(v, 0, n - 1)
        adjacency[u].append((w, v))
        adjacency[v].append((w, u))
    return adjacency


def _dijkstra(adjacency: Sequence[Sequence[tuple[int, int]]], source: int) -> list[int | None]:
    """Distances from source; None marks nodes that cannot be reached."""
    distance: list[int | None] = [None] * len(adjacency)
    distance[source] = 0
    heap = [(0, source)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for weight, neighbour in adjacency[node]:
            candidate = dist + weight
            known = distance[neighbour]
            if known is None or candidate < known:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distance


def _halve(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


def cctv_cost(n: int, edges: Iterable[Edge], halvings: int) -> int:
    """Weight of the minimum spanning tree grown from node 0 over nodes 0..n-1,
    after halving the heaviest edge (rounding toward zero) `halvings` times.
    Nodes unreachable from node 0 are left out."""
    if n < 1:
        raise ValueError("the graph needs at least one node")
    adjacency = _undirected(n, edges)
    visited = [False] * n
    frontier = [(0, 0)]
    chosen: list[int] = []
    while frontier:
        weight, node = heapq.heappop(frontier)
        if visited[node]:
            continue
        visited[node] = True
        heapq.heappush(chosen, -weight)
        for edge_weight, neighbour in adjacency[node]:
            if not visited[neighbour]:
                heapq.heappush(frontier, (edge_weight, neighbour))
    for _ in range(max(halvings, 0)):
        heaviest = -chosen[0]
        heapq.heapreplace(chosen, -_halve(heaviest))
    return -sum(chosen)


def trap_distances(
    n: int,
    edges: Iterable[Edge],
    start: int,
    target: int,
    queries: Iterable[int],
) -> list[int | None]:
    """For each queried node of 1..n, the length of the shortest directed walk
    from start to target that passes through it, or None if there is none."""
    forward: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    backward: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        _check_node(u, 1, n)
        _check_node(v, 1, n)
        forward[u].append((w, v))
        backward[v].append((w, u))
    _check_node(start, 1, n)
    _check_node(target, 1, n)
    from_start = _dijkstra(forward, start)
    to_target = _dijkstra(backward, target)
    results: list[int | None] = []
    for node in queries:
        _check_node(node, 1, n)
        head, tail = from_start[node], to_target[node]
        results.append(None if head is None or tail is None else head + tail)
    return results


def cheapest_portal(
    n: int, edges: Iterable[Edge], portals: Iterable[tuple[int, int]]
) -> int | None:
    """Cheapest cost of walking from node 0 to a portal (node, fee) and paying
    its fee; None when no portal can be reached."""
    if n < 1:
        raise ValueError("the graph needs at least one node")
    distance = _dijkstra(_undirected(n, edges), 0)
    best: int | None = None
    for node, fee in portals:
        _check_node(node, 0, n - 1)
        reach = 0 if node == 0 else distance[node]
        if reach is None:
            continue
        cost = reach + fee
        if best is None or cost < best:
            best = cost
    return best