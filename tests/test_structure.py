"""Tests for whole-graph structure and classification."""

import numpy as np
import pytest

from walkgraph import (
    Edge,
    Graph,
    GraphType,
    Vertex,
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


class TestRepresentations:
    """Tests for degree totals, adjacency matrix and adjacency list."""

    def test_total_degree(self, base_graph, complete_graph):
        """Test the handshake sum."""
        assert get_total_degree(base_graph) == 12
        assert get_total_degree(complete_graph) == 24

    def test_adjacency_matrix(self, base_graph):
        """Test the base graph's adjacency matrix."""
        expected = np.array(
            [
                [0, 1, 1, 0, 0],
                [1, 0, 1, 0, 1],
                [1, 1, 0, 1, 0],
                [0, 0, 1, 0, 1],
                [0, 1, 0, 1, 0],
            ]
        )
        matrix = get_adjacency_matrix(base_graph)
        assert matrix.dtype.kind == "i"
        assert np.array_equal(matrix, expected)
        assert np.array_equal(matrix, matrix.T)

    def test_adjacency_matrix_parallel_edges(self, complete_graph):
        """Test that parallel edges still give 1."""
        matrix = get_adjacency_matrix(complete_graph)
        assert np.array_equal(matrix, np.ones((4, 4), dtype=int) - np.eye(4, dtype=int))

    def test_adjacency_matrix_repeatable(self, base_graph):
        """Test that building the matrix twice gives the same result."""
        first = get_adjacency_matrix(base_graph)
        second = get_adjacency_matrix(base_graph)
        assert np.array_equal(first, second)

    def test_adjacency_matrix_skips_unknown_endpoints(self):
        """Test that edges to vertices outside the list are skipped."""
        a, ghost = Vertex("a"), Vertex("ghost")
        G = Graph([a], [Edge("1", "AG", a, ghost)])
        assert np.array_equal(get_adjacency_matrix(G), np.zeros((1, 1), dtype=int))

    def test_adjacency_matrix_empty(self):
        """Test the empty graph."""
        assert get_adjacency_matrix(Graph()).shape == (0, 0)

    def test_adjacency_list(self, base_graph):
        """Test the base graph's adjacency list."""
        assert get_adjacency_list(base_graph) == {
            "1": ["2", "3"],
            "2": ["1", "3", "5"],
            "3": ["2", "1", "4"],
            "4": ["3", "5"],
            "5": ["4", "2"],
        }

    def test_adjacency_list_isolated(self, disconnected_graph):
        """Test that isolated vertices get an empty list."""
        assert get_adjacency_list(disconnected_graph)["4"] == []


class TestClassification:
    """Tests for the structural predicates."""

    def test_regular(self, cyclic_graph, hypercube_graph, base_graph):
        """Test regularity and its degree."""
        assert is_regular(cyclic_graph)
        assert get_regular_degree(cyclic_graph) == 2
        assert get_regular_degree(hypercube_graph) == 3
        assert not is_regular(base_graph)
        assert get_regular_degree(base_graph) == -1

    def test_regular_complete_fixtures(self, complete_graph, simple_complete_graph):
        """Test that K4 stored with both directions has degree 6, simple K4 degree 3."""
        assert get_regular_degree(complete_graph) == 6
        assert get_regular_degree(simple_complete_graph) == 3

    def test_complete(self, complete_graph, simple_complete_graph, cyclic_graph):
        """Test completeness."""
        assert is_complete(complete_graph)
        assert is_complete(simple_complete_graph)
        assert not is_complete(cyclic_graph)

    def test_complete_rejects_self_loop(self, simple_complete_graph):
        """Test that a self-loop breaks completeness."""
        a = simple_complete_graph.get_vertex("1")
        simple_complete_graph.add_edge(Edge("7", "11", a, a))
        assert not is_complete(simple_complete_graph)

    def test_cyclic(self, cyclic_graph, base_graph, path_tree):
        """Test ring detection."""
        assert is_cyclic(cyclic_graph)
        assert not is_cyclic(base_graph)
        assert not is_cyclic(path_tree)

    def test_bipartite(self, bipartite_graph, cyclic_graph, hypercube_graph, base_graph):
        """Test two-colourability."""
        assert is_bipartite(bipartite_graph)
        assert is_bipartite(cyclic_graph)
        assert is_bipartite(hypercube_graph)
        assert not is_bipartite(base_graph)

    def test_complete_bipartite(self, bipartite_graph, cyclic_graph, hypercube_graph):
        """Test complete bipartiteness."""
        assert is_complete_bipartite(bipartite_graph)
        assert is_complete_bipartite(cyclic_graph)
        assert not is_complete_bipartite(hypercube_graph)

    def test_hypercube(self, hypercube_graph, cyclic_graph, complete_graph):
        """Test hypercube shape."""
        assert is_hypercube(hypercube_graph)
        assert is_hypercube(cyclic_graph)
        assert not is_hypercube(complete_graph)

    def test_tree(self, small_star_tree, path_tree, base_graph, disconnected_graph):
        """Test tree detection."""
        assert is_tree(small_star_tree)
        assert is_tree(path_tree)
        assert not is_tree(base_graph)
        assert not is_tree(disconnected_graph)

    @pytest.mark.parametrize(
        "check",
        [is_regular, is_complete, is_cyclic, is_bipartite, is_complete_bipartite, is_hypercube, is_tree],
    )
    def test_empty_graph_is_nothing(self, check):
        """Test that classification predicates reject the empty graph."""
        assert not check(Graph())


class TestGraphType:
    """Tests for get_graph_type."""

    def test_base(self, base_graph):
        """Test that the base graph matches no class."""
        assert get_graph_type(base_graph) == [GraphType.OTHER]

    def test_cyclic(self, cyclic_graph):
        """Test the 4-cycle's classes in order."""
        assert get_graph_type(cyclic_graph) == [
            GraphType.CYCLIC,
            GraphType.COMPLETE_BIPARTITE,
            GraphType.HYPERCUBE,
            GraphType.REGULAR,
            GraphType.BIPARTITE,
        ]

    def test_complete(self, complete_graph):
        """Test K4."""
        assert get_graph_type(complete_graph) == [GraphType.COMPLETE, GraphType.REGULAR]

    def test_hypercube(self, hypercube_graph):
        """Test Q3."""
        assert get_graph_type(hypercube_graph) == [
            GraphType.HYPERCUBE,
            GraphType.REGULAR,
            GraphType.BIPARTITE,
        ]

    def test_bipartite(self, bipartite_graph):
        """Test K_{2,4}."""
        assert get_graph_type(bipartite_graph) == [
            GraphType.COMPLETE_BIPARTITE,
            GraphType.BIPARTITE,
        ]

    def test_path_tree(self, path_tree):
        """Test that a path is bipartite and a tree."""
        assert get_graph_type(path_tree) == [GraphType.BIPARTITE, GraphType.TREE]

    def test_empty(self):
        """Test the empty graph."""
        assert get_graph_type(Graph()) == [GraphType.OTHER]


class TestComparison:
    """Tests for is_subgraph, is_the_same_as and get_edge_between_vertices."""

    def test_subgraph_shares_objects(self, base_graph):
        """Test a subgraph built from the graph's own objects."""
        vertices = base_graph.get_vertices()[:3]
        edges = base_graph.get_edges()[:3]
        assert is_subgraph(base_graph, Graph(vertices, edges))

    def test_subgraph_rejects_copies(self, base_graph):
        """Test that equal copies are not members."""
        assert not is_subgraph(base_graph, base_graph.clone())

    def test_empty_is_subgraph(self, base_graph):
        """Test that the empty graph is a subgraph of anything."""
        assert is_subgraph(base_graph, Graph())

    def test_same_as_clone(self, base_graph):
        """Test id-set equality against a clone."""
        assert is_the_same_as(base_graph, base_graph.clone())

    def test_not_same_after_removal(self, base_graph):
        """Test that a missing edge breaks equality."""
        other = base_graph.clone()
        other.remove_edge("6")
        assert not is_the_same_as(base_graph, other)

    def test_edge_between_vertices(self, base_graph):
        """Test edge lookup by vertex objects in both directions."""
        v2, v5 = base_graph.get_vertex("2"), base_graph.get_vertex("5")
        assert get_edge_between_vertices(base_graph, v2, v5).id == "6"
        assert get_edge_between_vertices(base_graph, v5, v2).id == "6"

    def test_no_edge_between_vertices(self, base_graph):
        """Test non-adjacent vertices."""
        v1, v4 = base_graph.get_vertex("1"), base_graph.get_vertex("4")
        assert get_edge_between_vertices(base_graph, v1, v4) is None
