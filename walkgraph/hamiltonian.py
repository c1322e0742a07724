"""
Hamiltonian paths and cycles.

Validation is exact. Generation is a heuristic: it only tries the parent
chains produced by a breadth-first and a depth-first search and gives up if
neither visits every vertex, so a None result does not prove that no
Hamiltonian path exists.
"""

from typing import List, Optional, Sequence

from .core import Graph
from .traversal import breadth_first_search, depth_first_search
from .walks import is_cycle, is_path


def _covers_all_vertices(graph: Graph, walk: Sequence[str]) -> bool:
    visited = set(walk)
    return all(v.id in visited for v in graph.get_vertices())


def is_hamiltonian_cycle(graph: Graph, walk: Sequence[str]) -> bool:
    """Check that a walk is a cycle through every vertex of the graph."""
    return is_cycle(graph, walk) and _covers_all_vertices(graph, walk)


def is_hamiltonian_path(graph: Graph, walk: Sequence[str]) -> bool:
    """
    Check that a walk is a path visiting every vertex exactly once.

    Args:
        graph: Graph the walk runs on.
        walk: Sequence of vertex ids.

    Returns:
        True if the walk is a path and its vertex set is the graph's.
    """
    if not is_path(graph, walk):
        return False
    return set(walk) == {v.id for v in graph.get_vertices()}


def generate_hamiltonian_path(
    graph: Graph, start_id: Optional[str] = None
) -> Optional[List[str]]:
    """
    Try to find a Hamiltonian path from the traversal parent chains.

    The breadth-first path is tried first, then the depth-first one.

    Args:
        graph: Graph to search.
        start_id: Vertex to start the traversals from (defaults to the first
            vertex).

    Returns:
        A Hamiltonian path, or None if neither traversal produced one.

    Example:
        >>> generate_hamiltonian_path(G)   # base five-vertex graph
        ['2', '1', '3', '4', '5']
    """
    path = breadth_first_search(graph, start_id)
    if is_hamiltonian_path(graph, path):
        return path

    path = depth_first_search(graph, start_id)
    if is_hamiltonian_path(graph, path):
        return path

    return None
