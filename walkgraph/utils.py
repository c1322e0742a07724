"""
Utility functions shared by the analysis modules.

Provides vertex indexing for matrix construction and path reconstruction
from parent maps.
"""

from typing import Dict, List, Optional

from .core import Graph


def vertex_index_map(graph: Graph) -> Dict[str, int]:
    """
    Map vertex ids to their position in the vertex list.

    If an id appears more than once, the first position wins.

    Args:
        graph: Graph whose vertices are indexed.

    Returns:
        Dictionary mapping vertex id -> row/column index.

    Example:
        >>> vertex_index_map(Graph([Vertex("c"), Vertex("a")]))
        {'c': 0, 'a': 1}
    """
    index: Dict[str, int] = {}
    for i, vertex in enumerate(graph.get_vertices()):
        index.setdefault(vertex.id, i)
    return index


def reconstruct_path(
    parent: Dict[str, Optional[str]], start: str, end: str
) -> Optional[List[str]]:
    """
    Reconstruct the path from ``start`` to ``end`` using a parent map.

    Follows ``parent`` backwards from ``end`` until ``start`` is reached,
    then reverses. The parent map may come from any traversal where
    parent[node] is the vertex that discovered node.

    Args:
        parent: Dictionary mapping node -> parent node (or None).
        start: First vertex of the path.
        end: Last vertex of the path.

    Returns:
        List of vertex ids from start to end (inclusive), or None if the
        chain from end never reaches start.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'A', 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'B', 'A')
        None
    """
    path = []
    current: Optional[str] = end
    seen = set()
    while current != start:
        if current is None or current in seen:
            return None
        seen.add(current)
        path.append(current)
        current = parent.get(current)

    path.append(start)
    path.reverse()
    return path
