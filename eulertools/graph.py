"""Weighted-node graphs and shortest paths over them."""

from __future__ import annotations

import heapq
from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass
class Node:
    """A graph node carrying a weight and the ids of the nodes it leads to."""

    weight: int = 0
    adjacency: list[int] = field(default_factory=list)


def shortest_path(graph: Mapping[int, Node], src: int, dst: int) -> int:
    """Return the least total node weight along a path from ``src`` to ``dst``.

    The weights of both end points are included. Raises KeyError for unknown
    nodes and ValueError when ``dst`` cannot be reached.
    """
    if dst not in graph:
        raise KeyError(dst)
    heap = [(graph[src].weight, src)]
    visited: set[int] = set()
    while heap:
        dist, node = heapq.heappop(heap)
        if node in visited:
            continue
        if node == dst:
            return dist
        visited.add(node)
        for nxt in graph[node].adjacency:
            if nxt not in visited:
                heapq.heappush(heap, (dist + graph[nxt].weight, nxt))
    raise ValueError(f"no path from {src} to {dst}")