"""Tree-specific queries: leaves, internal vertices, path and star trees."""

from .core import Graph
from .structure import is_tree
from .vertex import get_degree
from .walks import is_path


def is_leaf(graph: Graph, vertex_id: str) -> bool:
    return get_degree(graph, vertex_id) == 1


def is_internal_vertex(graph: Graph, vertex_id: str) -> bool:
    return get_degree(graph, vertex_id) > 1


def is_path_tree(graph: Graph) -> bool:
    """
    Determine whether a tree is a path P_n.

    The vertex list, taken in order, must itself be a path, so a path tree
    whose vertices were added out of order is not recognised.
    """
    if not is_tree(graph):
        return False
    return is_path(graph, [v.id for v in graph.get_vertices()])


def is_star_tree(graph: Graph) -> bool:
    """Determine whether a tree has exactly one internal vertex (a hub)."""
    if not is_tree(graph):
        return False
    internal = [v for v in graph.get_vertices() if is_internal_vertex(graph, v.id)]
    return len(internal) == 1
