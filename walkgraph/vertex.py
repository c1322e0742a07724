"""
Vertex-level queries: degree, neighbors, adjacency and isolation.

Unknown vertex ids are not an error here; they simply have no edges, so the
queries answer 0, an empty list or False.
"""

from typing import List, Sequence

from .core import Graph


def get_degree(graph: Graph, vertex_id: str) -> int:
    """
    Return the number of edges touching a vertex.

    A self-loop touches its vertex once and therefore adds 1.

    Args:
        graph: Graph to query.
        vertex_id: Id of the vertex.

    Returns:
        Degree of the vertex (0 for unknown ids).
    """
    return sum(1 for e in graph.get_edges() if e.touches(vertex_id))


def get_neighbors(graph: Graph, vertex_id: str) -> List[str]:
    """
    Return the ids reachable from a vertex over one edge.

    One entry per touching edge, in edge order, so parallel edges repeat a
    neighbor and a self-loop yields the vertex itself.

    Example:
        >>> a, b = Vertex("a"), Vertex("b")
        >>> G = Graph([a, b], [Edge("1", "AB", a, b)])
        >>> get_neighbors(G, "a")
        ['b']
    """
    return [e.other(vertex_id) for e in graph.get_edges() if e.touches(vertex_id)]


def are_adjacent(graph: Graph, vertex1: str, vertex2: str) -> bool:
    return vertex2 in get_neighbors(graph, vertex1)


def is_isolated(graph: Graph, vertex_id: str) -> bool:
    return get_degree(graph, vertex_id) == 0


def are_connected(graph: Graph, vertex_ids: Sequence[str]) -> bool:
    """
    Check that every consecutive pair in a sequence is adjacent.

    This is pairwise walk validity, not reachability: ``['a', 'c']`` is not
    connected even when a path a-b-c exists. Sequences shorter than two
    elements are trivially connected.
    """
    for i in range(len(vertex_ids) - 1):
        if not are_adjacent(graph, vertex_ids[i], vertex_ids[i + 1]):
            return False
    return True
