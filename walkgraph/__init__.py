"""
walkgraph - undirected graph analysis.

This package provides textbook graph-theory queries over a small mutable
graph store:
- Vertex and edge queries (degree, neighbors, bridges, weights)
- Structure (adjacency matrix/list, connectivity, classification)
- Walks (trails, circuits, paths, cycles, Euler and Hamiltonian walks)
- Weighted graphs (Prim minimum spanning tree, Dijkstra shortest path)
- Tree queries (leaves, path and star trees)

Every function takes the Graph as its first argument; GraphAnalyzer binds one
graph and exposes the same operations as methods.
"""

__version__ = "0.1.0"

from .analyzer import GraphAnalyzer, graph_analyzer
from .core import Edge, Graph, GraphType, SearchMethod, Vertex, WalkType
from .edge import (
    assign_random_weight_to_edge,
    assign_random_weights_to_edges,
    assign_weight_to_edge,
    get_edge_id,
    get_edge_weight,
    has_parallel_edges,
    has_self_loops,
    is_bridge,
)
from .euler import get_euler_circuit_or_path, is_euler_circuit, is_euler_trail, odd_degree_vertices
from .hamiltonian import generate_hamiltonian_path, is_hamiltonian_cycle, is_hamiltonian_path
from .logging import configure_logging, get_logger, set_log_level
from .mst import SpanningTree, create_spanning_tree, is_spanning_tree, prim, total_weight
from .shortest import ShortestPath, dijkstra
from .structure import (
    get_adjacency_list,
    get_adjacency_matrix,
    get_edge_between_vertices,
    get_graph_type,
    get_regular_degree,
    get_total_degree,
    is_bipartite,
    is_complete,
    is_complete_bipartite,
    is_cyclic,
    is_hypercube,
    is_regular,
    is_subgraph,
    is_the_same_as,
    is_tree,
)
from .traversal import (
    breadth_first_search,
    depth_first_search,
    has_cycles,
    is_connected,
    reachable_from,
    two_coloring,
)
from .trees import is_internal_vertex, is_leaf, is_path_tree, is_star_tree
from .utils import reconstruct_path, vertex_index_map
from .vertex import are_adjacent, are_connected, get_degree, get_neighbors, is_isolated
from .walks import (
    get_walk_type,
    has_non_repeating_edges,
    has_non_repeating_vertices,
    is_circuit,
    is_closed_walk,
    is_cycle,
    is_open_walk,
    is_path,
    is_trail,
    is_valid_walk,
    traverse_edges,
)
from .weights import MAX_DRAW_ATTEMPTS, RandomWeightOptions, random_weight, rng_default

__all__ = [
    "__version__",
    # Graph store
    "Vertex",
    "Edge",
    "Graph",
    "GraphType",
    "WalkType",
    "SearchMethod",
    # Façade
    "GraphAnalyzer",
    "graph_analyzer",
    # Vertex analysis
    "get_degree",
    "get_neighbors",
    "are_adjacent",
    "is_isolated",
    "are_connected",
    # Edge analysis
    "has_parallel_edges",
    "has_self_loops",
    "get_edge_id",
    "is_bridge",
    "assign_weight_to_edge",
    "assign_random_weight_to_edge",
    "assign_random_weights_to_edges",
    "get_edge_weight",
    # Random weights
    "RandomWeightOptions",
    "random_weight",
    "rng_default",
    "MAX_DRAW_ATTEMPTS",
    # Structure
    "get_total_degree",
    "get_adjacency_matrix",
    "get_adjacency_list",
    "is_subgraph",
    "is_regular",
    "get_regular_degree",
    "is_complete",
    "is_cyclic",
    "is_bipartite",
    "is_complete_bipartite",
    "is_hypercube",
    "is_tree",
    "get_graph_type",
    "is_the_same_as",
    "get_edge_between_vertices",
    # Traversal
    "is_connected",
    "reachable_from",
    "breadth_first_search",
    "depth_first_search",
    "has_cycles",
    "two_coloring",
    # Spanning trees
    "SpanningTree",
    "prim",
    "total_weight",
    "create_spanning_tree",
    "is_spanning_tree",
    # Walks
    "is_valid_walk",
    "is_open_walk",
    "is_closed_walk",
    "traverse_edges",
    "has_non_repeating_edges",
    "has_non_repeating_vertices",
    "is_trail",
    "is_circuit",
    "is_path",
    "is_cycle",
    "get_walk_type",
    # Euler and Hamiltonian walks
    "odd_degree_vertices",
    "is_euler_trail",
    "is_euler_circuit",
    "get_euler_circuit_or_path",
    "is_hamiltonian_cycle",
    "is_hamiltonian_path",
    "generate_hamiltonian_path",
    # Shortest paths
    "ShortestPath",
    "dijkstra",
    # Trees
    "is_leaf",
    "is_internal_vertex",
    "is_path_tree",
    "is_star_tree",
    # Utilities
    "vertex_index_map",
    "reconstruct_path",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
