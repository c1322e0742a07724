"""
Shortest paths with Dijkstra's algorithm.

Edges are undirected; an unset weight counts as 0.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from .core import Graph
from .logging import get_logger
from .utils import reconstruct_path

logger = get_logger(__name__)


@dataclass
class ShortestPath:
    """
    Result of a shortest-path query.

    Attributes:
        path: Vertex ids from start to end (inclusive).
        distance: Total weight of the path.
    """

    path: List[str]
    distance: float


def dijkstra(graph: Graph, start_id: str, end_id: str) -> Optional[ShortestPath]:
    """
    Find a minimum-weight path between two vertices.

    Relaxation uses a strict ``<``, so among equally short paths the one
    discovered first is kept.

    Args:
        graph: Graph with non-negative edge weights.
        start_id: Source vertex id.
        end_id: Target vertex id.

    Returns:
        ShortestPath, or None if either id is unknown, the target is
        unreachable, or the graph has a negative weight.

    Complexity: O(E log V) using a binary heap, plus O(E) to build the
    adjacency once per call.

    Example:
        >>> result = dijkstra(G, "1", "7")
        >>> result.path, result.distance
        (['1', '2', '7'], 8)
    """
    if graph.get_vertex(start_id) is None or graph.get_vertex(end_id) is None:
        logger.warning("Unknown endpoint in dijkstra(%r, %r)", start_id, end_id)
        return None

    adjacency: Dict[str, List[Tuple[str, float]]] = {
        v.id: [] for v in graph.get_vertices()
    }
    for e in graph.get_edges():
        weight = e.weight or 0
        if weight < 0:
            logger.warning(
                "Dijkstra requires non-negative weights. Found %s on edge %r", weight, e.id
            )
            return None
        adjacency.setdefault(e.source.id, []).append((e.target.id, weight))
        adjacency.setdefault(e.target.id, []).append((e.source.id, weight))

    dist: Dict[str, float] = {start_id: 0}
    parent: Dict[str, Optional[str]] = {start_id: None}

    # Priority queue: (distance, discovery order, node) keeps ties first-come
    counter = 0
    pq: List[Tuple[float, int, str]] = [(0, counter, start_id)]
    visited: Set[str] = set()

    while pq:
        d, _, u = heapq.heappop(pq)

        if u in visited:
            continue
        visited.add(u)

        if u == end_id:
            break

        for v, weight in adjacency[u]:
            if v in visited:
                continue

            new_dist = d + weight
            if v not in dist or new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                counter += 1
                heapq.heappush(pq, (new_dist, counter, v))

    if end_id not in visited:
        return None

    path = reconstruct_path(parent, start_id, end_id)
    if path is None:
        return None

    logger.debug("Shortest path %s with distance %s", path, dist[end_id])
    return ShortestPath(path=path, distance=dist[end_id])
