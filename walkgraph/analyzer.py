"""
Object-style access to the analysis functions.

GraphAnalyzer binds one Graph and forwards every call to the module-level
function of the same name, so

    >>> analyzer = graph_analyzer(G)
    >>> analyzer.is_bipartite()

is the same as ``is_bipartite(G)``. The analyzer holds no state besides the
graph, and nothing is cached: mutating ``analyzer.graph`` is reflected in the
next query.
"""

from typing import Dict, List, Optional, Sequence

import numpy as np

from . import edge, euler, hamiltonian, mst, shortest, structure, traversal, trees, vertex, walks
from .core import Edge, Graph, GraphType, SearchMethod, Vertex, WalkType
from .weights import RandomWeightOptions


class GraphAnalyzer:
    """
    Analysis façade over a single Graph.

    Attributes:
        graph: The analysed graph. Weight assignment mutates it in place.
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    def __repr__(self) -> str:
        return f"GraphAnalyzer({self.graph!r})"

    def clone(self) -> "GraphAnalyzer":
        """Return an analyzer over an independent copy of the graph."""
        return GraphAnalyzer(self.graph.clone())

    # Vertex analysis

    def get_degree(self, vertex_id: str) -> int:
        return vertex.get_degree(self.graph, vertex_id)

    def get_neighbors(self, vertex_id: str) -> List[str]:
        return vertex.get_neighbors(self.graph, vertex_id)

    def are_adjacent(self, vertex1: str, vertex2: str) -> bool:
        return vertex.are_adjacent(self.graph, vertex1, vertex2)

    def is_isolated(self, vertex_id: str) -> bool:
        return vertex.is_isolated(self.graph, vertex_id)

    def are_connected(self, vertex_ids: Sequence[str]) -> bool:
        return vertex.are_connected(self.graph, vertex_ids)

    # Edge analysis

    def has_parallel_edges(self) -> bool:
        return edge.has_parallel_edges(self.graph)

    def has_self_loops(self) -> bool:
        return edge.has_self_loops(self.graph)

    def get_edge_id(self, vertex1: str, vertex2: str) -> str:
        return edge.get_edge_id(self.graph, vertex1, vertex2)

    def is_bridge(self, edge_id: str) -> bool:
        return edge.is_bridge(self.graph, edge_id)

    def assign_weight_to_edge(self, edge_id: str, weight: float) -> None:
        edge.assign_weight_to_edge(self.graph, edge_id, weight)

    def assign_random_weight_to_edge(
        self,
        edge_id: str,
        options: Optional[RandomWeightOptions] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        edge.assign_random_weight_to_edge(self.graph, edge_id, options, rng)

    def assign_random_weights_to_edges(
        self,
        options: Optional[RandomWeightOptions] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        edge.assign_random_weights_to_edges(self.graph, options, rng)

    def get_edge_weight(self, edge_id: str) -> Optional[float]:
        return edge.get_edge_weight(self.graph, edge_id)

    # Structure

    def get_total_degree(self) -> int:
        return structure.get_total_degree(self.graph)

    def get_adjacency_matrix(self) -> np.ndarray:
        return structure.get_adjacency_matrix(self.graph)

    def get_adjacency_list(self) -> Dict[str, List[str]]:
        return structure.get_adjacency_list(self.graph)

    def is_subgraph(self, other: Graph) -> bool:
        return structure.is_subgraph(self.graph, other)

    def is_regular(self) -> bool:
        return structure.is_regular(self.graph)

    def get_regular_degree(self) -> int:
        return structure.get_regular_degree(self.graph)

    def is_complete(self) -> bool:
        return structure.is_complete(self.graph)

    def is_cyclic(self) -> bool:
        return structure.is_cyclic(self.graph)

    def is_bipartite(self) -> bool:
        return structure.is_bipartite(self.graph)

    def is_complete_bipartite(self) -> bool:
        return structure.is_complete_bipartite(self.graph)

    def is_hypercube(self) -> bool:
        return structure.is_hypercube(self.graph)

    def is_tree(self) -> bool:
        return structure.is_tree(self.graph)

    def get_graph_type(self) -> List[GraphType]:
        return structure.get_graph_type(self.graph)

    def is_the_same_as(self, other: Graph) -> bool:
        return structure.is_the_same_as(self.graph, other)

    def get_edge_between_vertices(self, vertex1: Vertex, vertex2: Vertex) -> Optional[Edge]:
        return structure.get_edge_between_vertices(self.graph, vertex1, vertex2)

    # Traversal

    def is_connected(self) -> bool:
        return traversal.is_connected(self.graph)

    def has_cycles(self) -> bool:
        return traversal.has_cycles(self.graph)

    def breadth_first_search(self, start_id: Optional[str] = None) -> List[str]:
        return traversal.breadth_first_search(self.graph, start_id)

    def depth_first_search(self, start_id: Optional[str] = None) -> List[str]:
        return traversal.depth_first_search(self.graph, start_id)

    # Spanning trees

    def prim(
        self,
        start_id: Optional[str] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional[mst.SpanningTree]:
        return mst.prim(self.graph, start_id, rng)

    def total_weight(self) -> float:
        return mst.total_weight(self.graph)

    def create_spanning_tree(
        self,
        search_method: SearchMethod = SearchMethod.BREADTH_FIRST,
        start_id: Optional[str] = None,
    ) -> Optional[List[str]]:
        return mst.create_spanning_tree(self.graph, search_method, start_id)

    def is_spanning_tree(self, path: Sequence[str]) -> bool:
        return mst.is_spanning_tree(self.graph, path)

    # Walks

    def is_valid_walk(self, walk: Sequence[str]) -> bool:
        return walks.is_valid_walk(self.graph, walk)

    def is_open_walk(self, walk: Sequence[str]) -> bool:
        return walks.is_open_walk(self.graph, walk)

    def is_closed_walk(self, walk: Sequence[str]) -> bool:
        return walks.is_closed_walk(self.graph, walk)

    def traverse_edges(self, walk: Sequence[str]) -> List[Optional[Edge]]:
        return walks.traverse_edges(self.graph, walk)

    def has_non_repeating_edges(self, walk: Sequence[str]) -> bool:
        return walks.has_non_repeating_edges(self.graph, walk)

    def has_non_repeating_vertices(self, walk: Sequence[str]) -> bool:
        return walks.has_non_repeating_vertices(self.graph, walk)

    def is_trail(self, walk: Sequence[str]) -> bool:
        return walks.is_trail(self.graph, walk)

    def is_circuit(self, walk: Sequence[str]) -> bool:
        return walks.is_circuit(self.graph, walk)

    def is_path(self, walk: Sequence[str]) -> bool:
        return walks.is_path(self.graph, walk)

    def is_cycle(self, walk: Sequence[str]) -> bool:
        return walks.is_cycle(self.graph, walk)

    def get_walk_type(self, walk: Sequence[str]) -> WalkType:
        return walks.get_walk_type(self.graph, walk)

    # Euler and Hamiltonian walks

    def is_euler_trail(self, walk: Sequence[str]) -> bool:
        return euler.is_euler_trail(self.graph, walk)

    def is_euler_circuit(self, walk: Sequence[str]) -> bool:
        return euler.is_euler_circuit(self.graph, walk)

    def get_euler_circuit_or_path(self, start_id: Optional[str] = None) -> Optional[List[str]]:
        return euler.get_euler_circuit_or_path(self.graph, start_id)

    def is_hamiltonian_cycle(self, walk: Sequence[str]) -> bool:
        return hamiltonian.is_hamiltonian_cycle(self.graph, walk)

    def is_hamiltonian_path(self, walk: Sequence[str]) -> bool:
        return hamiltonian.is_hamiltonian_path(self.graph, walk)

    def generate_hamiltonian_path(self, start_id: Optional[str] = None) -> Optional[List[str]]:
        return hamiltonian.generate_hamiltonian_path(self.graph, start_id)

    def dijkstra(self, start_id: str, end_id: str) -> Optional[shortest.ShortestPath]:
        return shortest.dijkstra(self.graph, start_id, end_id)

    # Trees

    def is_leaf(self, vertex_id: str) -> bool:
        return trees.is_leaf(self.graph, vertex_id)

    def is_internal_vertex(self, vertex_id: str) -> bool:
        return trees.is_internal_vertex(self.graph, vertex_id)

    def is_path_tree(self) -> bool:
        return trees.is_path_tree(self.graph)

    def is_star_tree(self) -> bool:
        return trees.is_star_tree(self.graph)


def graph_analyzer(graph: Graph) -> GraphAnalyzer:
    """Create a GraphAnalyzer bound to ``graph``."""
    return GraphAnalyzer(graph)
