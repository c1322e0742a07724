"""
Whole-graph structure: matrix and list representations, classification
and comparison.

Every function re-derives its answer from the current vertex and edge lists.
Classification predicates answer False for the empty graph.

References:
    - West, D. B. "Introduction to Graph Theory", 2nd ed. Chapter 1.
    - https://en.wikipedia.org/wiki/Hypercube_graph
"""

import math
from typing import Dict, List, Optional

import numpy as np

from .core import Edge, Graph, GraphType, Vertex
from .traversal import has_cycles, is_connected, two_coloring
from .utils import vertex_index_map
from .vertex import are_adjacent, get_degree, get_neighbors


def get_total_degree(graph: Graph) -> int:
    """Return the sum of all vertex degrees (twice the edge count)."""
    return 2 * len(graph.get_edges())


def get_adjacency_matrix(graph: Graph) -> np.ndarray:
    """
    Build the adjacency matrix of the graph.

    Rows and columns follow the vertex list order. Each edge sets both
    ``[s, t]`` and ``[t, s]`` to 1, so parallel edges still give 1 and a
    self-loop marks the diagonal. Edges whose endpoints are not in the vertex
    list are skipped.

    Args:
        graph: Graph to convert.

    Returns:
        (n, n) integer numpy array.

    Example:
        >>> get_adjacency_matrix(G)   # triangle a-b-c
        array([[0, 1, 1],
               [1, 0, 1],
               [1, 1, 0]])
    """
    n = len(graph.get_vertices())
    index = vertex_index_map(graph)
    matrix = np.zeros((n, n), dtype=int)

    for e in graph.get_edges():
        i = index.get(e.source.id)
        j = index.get(e.target.id)
        if i is None or j is None:
            continue
        matrix[i, j] = 1
        matrix[j, i] = 1

    return matrix


def get_adjacency_list(graph: Graph) -> Dict[str, List[str]]:
    """
    Build the adjacency list of the graph.

    Each edge appends its target to the source's list and its source to the
    target's list, in edge order, so parallel edges produce repeated entries.
    """
    adjacency: Dict[str, List[str]] = {v.id: [] for v in graph.get_vertices()}

    for e in graph.get_edges():
        adjacency.setdefault(e.source.id, []).append(e.target.id)
        adjacency.setdefault(e.target.id, []).append(e.source.id)

    return adjacency


def is_subgraph(graph: Graph, other: Graph) -> bool:
    """
    Determine whether ``other`` is a subgraph of ``graph``.

    Membership is by object identity: ``other`` must be built from the same
    Vertex and Edge instances, not from equal copies.
    """
    vertex_ids = {id(v) for v in graph.get_vertices()}
    edge_ids = {id(e) for e in graph.get_edges()}

    return all(id(v) in vertex_ids for v in other.get_vertices()) and all(
        id(e) in edge_ids for e in other.get_edges()
    )


def is_regular(graph: Graph) -> bool:
    vertices = graph.get_vertices()
    if not vertices:
        return False
    first = get_degree(graph, vertices[0].id)
    return all(get_degree(graph, v.id) == first for v in vertices)


def get_regular_degree(graph: Graph) -> int:
    """Return the common degree of a regular graph, or -1 if not regular."""
    if not is_regular(graph):
        return -1
    return get_degree(graph, graph.get_vertices()[0].id)


def is_complete(graph: Graph) -> bool:
    """
    Determine whether every pair of distinct vertices is adjacent.

    Checks the adjacency matrix: square, zero diagonal, every off-diagonal
    entry 1. A graph with a self-loop is never complete.
    """
    matrix = get_adjacency_matrix(graph)
    if matrix.size == 0:
        return False

    n, m = matrix.shape
    if n != m:
        return False

    if np.any(np.diag(matrix) != 0):
        return False

    off_diagonal = ~np.eye(n, dtype=bool)
    return bool(np.all(matrix[off_diagonal] == 1))


def is_cyclic(graph: Graph) -> bool:
    """
    Determine whether the graph is a ring.

    This is the cycle-graph shape (every vertex has exactly two neighbors and
    there are as many edges as vertices), not "contains a cycle"; see
    has_cycles for that.
    """
    vertices = graph.get_vertices()
    if not vertices:
        return False
    return (
        all(len(get_neighbors(graph, v.id)) == 2 for v in vertices)
        and len(graph.get_edges()) == len(vertices)
    )


def is_bipartite(graph: Graph) -> bool:
    """
    Determine whether the first vertex's component is two-colourable.

    Returns:
        True if no two adjacent vertices share a colour.
    """
    if not graph.get_vertices():
        return False
    return two_coloring(graph) is not None


def is_complete_bipartite(graph: Graph) -> bool:
    """
    Determine whether the graph is complete bipartite.

    The graph must be two-colourable, and every vertex of colour 0 must be
    adjacent to every vertex of colour 1.
    """
    if not graph.get_vertices():
        return False

    color = two_coloring(graph)
    if color is None:
        return False

    vertices = graph.get_vertices()
    first_group = [v.id for v in vertices if color.get(v.id) == 0]
    second_group = [v.id for v in vertices if color.get(v.id) == 1]

    return all(
        are_adjacent(graph, u, w) for u in first_group for w in second_group
    )


def is_hypercube(graph: Graph) -> bool:
    """
    Determine whether the graph has the shape of a hypercube Q_n.

    Q_n has 2**n vertices, is n-regular and has 2**(n-1) * n edges. Only
    these counts are checked, not an isomorphism.
    """
    degree = get_regular_degree(graph)
    if degree == -1:
        return False

    n = math.log2(len(graph.get_vertices()))
    return n == degree and 2 ** (n - 1) * n == len(graph.get_edges())


def is_tree(graph: Graph) -> bool:
    """A tree is a non-empty connected graph without cycles."""
    if not graph.get_vertices():
        return False
    return is_connected(graph) and not has_cycles(graph)


def get_graph_type(graph: Graph) -> List[GraphType]:
    """
    Classify the graph.

    Returns:
        Every matching GraphType in the order Complete, Cyclic,
        CompleteBipartite, Hypercube, Regular, Bipartite, Tree, or
        ``[GraphType.OTHER]`` when none match.
    """
    checks = (
        (GraphType.COMPLETE, is_complete),
        (GraphType.CYCLIC, is_cyclic),
        (GraphType.COMPLETE_BIPARTITE, is_complete_bipartite),
        (GraphType.HYPERCUBE, is_hypercube),
        (GraphType.REGULAR, is_regular),
        (GraphType.BIPARTITE, is_bipartite),
        (GraphType.TREE, is_tree),
    )
    graph_types = [graph_type for graph_type, check in checks if check(graph)]
    return graph_types or [GraphType.OTHER]


def is_the_same_as(graph: Graph, other: Graph) -> bool:
    """Compare the sets of vertex ids and the sets of edge ids of two graphs."""
    same_vertices = {v.id for v in graph.get_vertices()} == {
        v.id for v in other.get_vertices()
    }
    same_edges = {e.id for e in graph.get_edges()} == {e.id for e in other.get_edges()}
    return same_vertices and same_edges


def get_edge_between_vertices(
    graph: Graph, vertex1: Vertex, vertex2: Vertex
) -> Optional[Edge]:
    """
    Return the first edge joining two vertices in either direction.

    Args:
        graph: Graph to search.
        vertex1: First vertex.
        vertex2: Second vertex.

    Returns:
        The edge, or None if the vertices are not adjacent.
    """
    if not are_adjacent(graph, vertex1.id, vertex2.id):
        return None

    pair = (vertex1.id, vertex2.id)
    for e in graph.get_edges():
        if e.endpoints() in (pair, pair[::-1]):
            return e
    return None
