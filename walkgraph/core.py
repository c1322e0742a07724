"""
Core graph data structures.

Provides the Vertex and Edge records, the mutable Graph store they live in,
and the enums used to report classifications. The store keeps vertices and
edges in insertion order and does no validation: an edge may reference a
vertex id that is not in the vertex list. Every analysis function in this
package takes a Graph and re-scans it on each call.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class GraphType(Enum):
    """Structural classifications reported by get_graph_type."""

    COMPLETE = "complete"
    CYCLIC = "cyclic"
    REGULAR = "regular"
    COMPLETE_BIPARTITE = "complete_bipartite"
    BIPARTITE = "bipartite"
    HYPERCUBE = "hypercube"
    TREE = "tree"
    OTHER = "other"


class WalkType(Enum):
    """Classifications of a sequence of vertex ids."""

    OPEN = "open"
    CLOSED = "closed"
    INVALID = "invalid"
    TRAIL = "trail"
    CIRCUIT = "circuit"
    PATH = "path"
    CYCLE = "cycle"


class SearchMethod(Enum):
    """Traversal used when building a spanning tree."""

    BREADTH_FIRST = "breadth_first"
    DEPTH_FIRST = "depth_first"


@dataclass(eq=False)
class Vertex:
    """
    A vertex of the graph.

    Identity is by ``id``. Instances compare by object identity so that
    subgraph checks can tell a shared vertex from an equal copy.

    Attributes:
        id: Unique identifier within a graph.
        label: Human-readable label.
    """

    id: str
    label: str = ""


@dataclass(eq=False)
class Edge:
    """
    An undirected edge between two vertices.

    ``source`` and ``target`` are kept exactly as given; the analysis code
    treats (source, target) and (target, source) as the same connection.

    Attributes:
        id: Unique identifier within a graph.
        label: Human-readable label.
        source: One endpoint.
        target: The other endpoint.
        weight: Numeric weight. ``None`` is normalised to 0 by Graph.
    """

    id: str
    label: str
    source: Vertex
    target: Vertex
    weight: Optional[float] = 0

    def endpoints(self) -> tuple:
        """Return the ``(source.id, target.id)`` pair."""
        return self.source.id, self.target.id

    def touches(self, vertex_id: str) -> bool:
        """Return True if either endpoint has the given id."""
        return self.source.id == vertex_id or self.target.id == vertex_id

    def other(self, vertex_id: str) -> str:
        """
        Return the id of the endpoint opposite ``vertex_id``.

        For a self-loop the vertex itself is returned.
        """
        return self.target.id if self.source.id == vertex_id else self.source.id


class Graph:
    """
    Mutable store of vertices and edges.

    Lookups return None for unknown ids rather than raising, matching the
    total-function contract of the analysis layers built on top.

    Complexity:
        - add_vertex / add_edge: O(1) amortized
        - get_vertex / get_edge: O(V) / O(E)
        - remove_vertex: O(V + E)
        - remove_edge: O(E)
        - clone: O(V + E)
    """

    def __init__(
        self,
        vertices: Optional[List[Vertex]] = None,
        edges: Optional[List[Edge]] = None,
    ):
        """
        Initialize a graph.

        Args:
            vertices: Initial vertices (kept in the given order).
            edges: Initial edges (kept in the given order). Edges without a
                weight get weight 0.
        """
        self.vertices: List[Vertex] = list(vertices) if vertices else []
        self.edges: List[Edge] = []
        for edge in edges or []:
            self.add_edge(edge)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self.vertices)}, edges={len(self.edges)})"

    def add_vertex(self, vertex: Vertex) -> None:
        self.vertices.append(vertex)

    def add_edge(self, edge: Edge) -> None:
        if edge.weight is None:
            edge.weight = 0
        self.edges.append(edge)

    def get_vertex(self, vertex_id: str) -> Optional[Vertex]:
        for vertex in self.vertices:
            if vertex.id == vertex_id:
                return vertex
        return None

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        for edge in self.edges:
            if edge.id == edge_id:
                return edge
        return None

    def get_vertices(self) -> List[Vertex]:
        return self.vertices

    def get_edges(self) -> List[Edge]:
        return self.edges

    def remove_edge(self, edge_id: str) -> None:
        self.edges = [e for e in self.edges if e.id != edge_id]

    def remove_vertex(self, vertex_id: str) -> None:
        """Remove a vertex together with every edge touching it."""
        self.vertices = [v for v in self.vertices if v.id != vertex_id]
        self.edges = [e for e in self.edges if not e.touches(vertex_id)]

    def clone(self) -> "Graph":
        """
        Return an independent copy of the store.

        Vertex and edge objects are shallow-copied, so mutating a clone
        (removing edges, reassigning weights) never touches this graph.
        Cloned edges keep referencing the original endpoint objects.

        Returns:
            New Graph with copied vertex and edge lists.
        """
        return Graph(
            [copy.copy(v) for v in self.vertices],
            [copy.copy(e) for e in self.edges],
        )
