"""
Spanning trees: Prim's minimum spanning tree and traversal-based spanning
paths.

Prim here scans the edge list for crossing edges at every step instead of
keeping a priority queue, so the first minimum-weight crossing edge in edge
order always wins a tie.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties) and 23.2 (Prim).
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .core import Edge, Graph, SearchMethod, Vertex
from .hamiltonian import generate_hamiltonian_path, is_hamiltonian_path
from .logging import get_logger
from .traversal import depth_first_search
from .weights import rng_default

logger = get_logger(__name__)


@dataclass
class SpanningTree:
    """
    Vertices and edges of a spanning tree.

    Both lists hold the original graph's objects, so the tree passes
    is_subgraph against the graph it came from.

    Attributes:
        vertices: Tree vertices in the order they joined the tree.
        edges: Tree edges in the order they were selected.
    """

    vertices: List[Vertex]
    edges: List[Edge]

    def to_graph(self) -> Graph:
        """Return a new Graph over the tree's vertices and edges."""
        return Graph(list(self.vertices), list(self.edges))


def total_weight(graph: Graph) -> float:
    """Sum all edge weights, counting unset weights as 0."""
    return sum(e.weight or 0 for e in graph.get_edges())


def prim(
    graph: Graph,
    start_id: Optional[str] = None,
    rng: Optional[np.random.Generator] = None,
) -> Optional[SpanningTree]:
    """
    Prim's algorithm for a minimum spanning tree.

    Grows a tree from ``start_id``. Each of the ``|V| - 1`` steps picks the
    minimum-weight edge with exactly one endpoint in the tree and adds that
    edge and its outside endpoint.

    Args:
        graph: Weighted graph (unset weights count as 0).
        start_id: Vertex to grow from. A random vertex is used when None.
        rng: Generator used to pick the random start.

    Returns:
        SpanningTree, or None if the graph is empty, ``start_id`` is unknown,
        or some step finds no crossing edge (disconnected graph).

    Complexity: O(V * E).

    Example:
        >>> tree = prim(G, "1")
        >>> len(tree.edges) == len(G.get_vertices()) - 1
        True
    """
    vertices = graph.get_vertices()
    if not vertices:
        return None

    if start_id is None:
        if rng is None:
            rng = rng_default()
        start_id = vertices[int(rng.integers(len(vertices)))].id
    elif graph.get_vertex(start_id) is None:
        logger.warning("Start vertex %r not in graph", start_id)
        return None

    tree_vertex_ids = [start_id]
    in_tree = {start_id}
    tree_edges: List[Edge] = []
    vertex_count = len({v.id for v in vertices})

    for _ in range(vertex_count - 1):
        min_edge: Optional[Edge] = None
        for e in graph.get_edges():
            source_in = e.source.id in in_tree
            target_in = e.target.id in in_tree
            if source_in == target_in:
                continue
            if min_edge is None or (e.weight or 0) < (min_edge.weight or 0):
                min_edge = e

        if min_edge is None:
            logger.debug("No crossing edge after %d vertices; graph is disconnected", len(in_tree))
            return None

        new_id = min_edge.target.id if min_edge.source.id in in_tree else min_edge.source.id
        logger.debug("Prim adds edge %r reaching %r", min_edge.id, new_id)
        tree_edges.append(min_edge)
        tree_vertex_ids.append(new_id)
        in_tree.add(new_id)

    tree_vertices = [graph.get_vertex(vid) or Vertex(vid, vid) for vid in tree_vertex_ids]
    return SpanningTree(vertices=tree_vertices, edges=tree_edges)


def create_spanning_tree(
    graph: Graph,
    search_method: SearchMethod = SearchMethod.BREADTH_FIRST,
    start_id: Optional[str] = None,
) -> Optional[List[str]]:
    """
    Build a spanning path from a graph traversal.

    Breadth-first delegates to generate_hamiltonian_path (which falls back to
    depth-first). Depth-first uses only the depth-first path.

    Returns:
        The vertex ids of the spanning path, or None if the traversal did not
        produce a Hamiltonian path.
    """
    if search_method == SearchMethod.BREADTH_FIRST:
        return generate_hamiltonian_path(graph, start_id)

    path = depth_first_search(graph, start_id)
    return path if is_hamiltonian_path(graph, path) else None


def is_spanning_tree(graph: Graph, path: Sequence[str]) -> bool:
    return is_hamiltonian_path(graph, path)
