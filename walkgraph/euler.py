"""
Euler trails and circuits: validation and construction with Fleury's
algorithm.

A connected graph has an Euler circuit when no vertex has odd degree and an
Euler trail when exactly two do; the trail then runs between them.

References:
    - Fleury, M. "Deux problemes de geometrie de situation", Journal de
      mathematiques elementaires (1883).
    - West, D. B. "Introduction to Graph Theory", 2nd ed. Section 1.2.
"""

from typing import List, Optional, Sequence

from .core import Graph
from .edge import get_edge_id, is_bridge
from .logging import get_logger
from .traversal import is_connected
from .vertex import get_degree, get_neighbors
from .walks import is_circuit, is_trail

logger = get_logger(__name__)


def odd_degree_vertices(graph: Graph) -> List[str]:
    """Return the ids of vertices with odd degree, in vertex order."""
    return [v.id for v in graph.get_vertices() if get_degree(graph, v.id) % 2 != 0]


def is_euler_trail(graph: Graph, walk: Sequence[str]) -> bool:
    """
    Check that a walk is an Euler trail.

    The graph must be connected, the walk must be a trail, and both of its
    ends must have odd degree.
    """
    if not is_connected(graph):
        return False

    if not is_trail(graph, walk):
        return False

    first = graph.get_vertex(walk[0])
    last = graph.get_vertex(walk[-1])
    if first is None or last is None:
        return False

    return get_degree(graph, first.id) % 2 == 1 and get_degree(graph, last.id) % 2 == 1


def is_euler_circuit(graph: Graph, walk: Sequence[str]) -> bool:
    """
    Check that a walk is an Euler circuit.

    Requires no odd-degree vertex, a connected graph, a circuit, and every
    vertex of the graph to appear in the walk.
    """
    if odd_degree_vertices(graph):
        return False

    if not is_connected(graph):
        return False

    if not is_circuit(graph, walk):
        return False

    visited = set(walk)
    return all(v.id in visited for v in graph.get_vertices())


def get_euler_circuit_or_path(
    graph: Graph, start_id: Optional[str] = None
) -> Optional[List[str]]:
    """
    Build an Euler circuit or trail with Fleury's algorithm.

    Works on a clone. From the current vertex: with a single remaining
    neighbor, cross that edge; with several, cross the edge to the first
    neighbor whose edge is not a bridge of the remaining graph; with none,
    stop.
    Crossed edges are deleted, and a vertex left without edges is deleted
    too, so bridge tests only see the part of the graph still to be walked.

    Args:
        graph: Graph to walk.
        start_id: Vertex to start from. Defaults to the first odd-degree
            vertex when there are exactly two, else the first vertex.

    Returns:
        The walk as a list of vertex ids, or None when the graph is
        disconnected, has more than two odd-degree vertices, or is empty.

    Complexity: O(E * (V + E) * E) with bridge tests re-scanning the graph.

    Example:
        >>> walk = get_euler_circuit_or_path(G)
        >>> is_euler_trail(G, walk) or is_euler_circuit(G, walk)
        True
    """
    vertices = graph.get_vertices()
    if not vertices:
        return None

    odd = odd_degree_vertices(graph)
    connected = is_connected(graph)
    if len(odd) > 2 or not connected:
        logger.debug("No Euler walk: %d odd vertices, connected=%s", len(odd), connected)
        return None

    if start_id is None:
        start_id = odd[0] if len(odd) == 2 else vertices[0].id
    elif graph.get_vertex(start_id) is None:
        logger.warning("Start vertex %r not in graph", start_id)
        return None

    working = graph.clone()
    walk: List[str] = []
    current = start_id

    while True:
        walk.append(current)
        neighbors = get_neighbors(working, current)
        if not neighbors:
            break

        chosen = neighbors[0]
        edge_id = get_edge_id(working, current, chosen)
        if len(neighbors) > 1:
            for candidate in neighbors:
                candidate_edge = get_edge_id(working, current, candidate)
                if not is_bridge(working, candidate_edge):
                    chosen, edge_id = candidate, candidate_edge
                    break

        logger.debug("Fleury step %r -> %r over edge %r", current, chosen, edge_id)
        working.remove_edge(edge_id)
        if get_degree(working, current) == 0:
            working.remove_vertex(current)
        current = chosen

    return walk
