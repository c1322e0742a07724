"""Tests for shared utility functions."""

from walkgraph import Graph, Vertex, reconstruct_path, vertex_index_map


class TestVertexIndexMap:
    """Tests for vertex_index_map."""

    def test_list_order(self, base_graph):
        """Test that indices follow the vertex list."""
        assert vertex_index_map(base_graph) == {"1": 0, "2": 1, "3": 2, "4": 3, "5": 4}

    def test_duplicate_id_first_wins(self):
        """Test that a repeated id keeps its first index."""
        G = Graph([Vertex("a"), Vertex("b"), Vertex("a")])
        assert vertex_index_map(G) == {"a": 0, "b": 1}

    def test_empty(self):
        """Test the empty graph."""
        assert vertex_index_map(Graph()) == {}


class TestReconstructPath:
    """Tests for reconstruct_path."""

    def test_simple(self):
        """Test a straight parent chain."""
        parent = {"A": None, "B": "A", "C": "B"}
        assert reconstruct_path(parent, "A", "C") == ["A", "B", "C"]

    def test_start_equals_end(self):
        """Test a single-vertex path."""
        assert reconstruct_path({"A": None}, "A", "A") == ["A"]

    def test_start_not_on_chain(self):
        """Test that a chain that never reaches the start gives None."""
        parent = {"A": None, "B": "A", "C": "B"}
        assert reconstruct_path(parent, "B", "A") is None

    def test_unknown_end(self):
        """Test an end missing from the parent map."""
        assert reconstruct_path({"A": None}, "A", "Z") is None

    def test_loop_in_parent_map(self):
        """Test that a parent loop terminates."""
        parent = {"A": "B", "B": "A"}
        assert reconstruct_path(parent, "C", "A") is None
