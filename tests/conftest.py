"""Pytest configuration and shared fixtures for walkgraph tests.

This module provides:
- A deterministic RNG fixture for randomised operations
- A ``make_graph`` factory and the fixture graphs used across modules
"""

import os
from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np
import pytest

from walkgraph import Edge, Graph, Vertex

GraphFactory = Callable[..., Graph]


def build_graph(
    vertex_count: int,
    pairs: Sequence[Tuple[int, int]],
    weights: Optional[Sequence[float]] = None,
    labels: Optional[str] = None,
) -> Graph:
    """Build a graph with vertices '1'..'n' and edges '1'..'m' in the given order.

    Args:
        vertex_count: Number of vertices.
        pairs: (source, target) vertex numbers, one per edge.
        weights: Optional edge weights, parallel to ``pairs``.
        labels: Optional vertex labels, one character per vertex.
    """
    vertices: Dict[int, Vertex] = {}
    for i in range(1, vertex_count + 1):
        label = labels[i - 1] if labels else str(i)
        vertices[i] = Vertex(str(i), label)

    edges = []
    for k, (s, t) in enumerate(pairs, start=1):
        source, target = vertices[s], vertices[t]
        weight = weights[k - 1] if weights else 0
        edges.append(Edge(str(k), source.label + target.label, source, target, weight))

    return Graph(list(vertices.values()), edges)


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def make_graph() -> GraphFactory:
    """Factory fixture building numbered graphs (see build_graph)."""
    return build_graph


@pytest.fixture
def base_graph() -> Graph:
    """Five vertices A-E: triangle A-B-C plus the square B-C-D-E."""
    return build_graph(
        5,
        [(1, 2), (2, 3), (1, 3), (3, 4), (4, 5), (5, 2)],
        labels="ABCDE",
    )


@pytest.fixture
def bipartite_graph() -> Graph:
    """K_{2,4} with parts {1, 2} and {3, 4, 5, 6}."""
    return build_graph(
        6,
        [(1, 3), (1, 4), (1, 5), (1, 6), (2, 3), (2, 4), (2, 5), (2, 6)],
    )


@pytest.fixture
def cyclic_graph() -> Graph:
    """The 4-cycle 1-2-3-4-1."""
    return build_graph(4, [(1, 2), (2, 3), (3, 4), (4, 1)])


@pytest.fixture
def complete_graph() -> Graph:
    """K4 with every pair stored in both directions (12 edges)."""
    return build_graph(
        4,
        [
            (1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4),
            (2, 1), (3, 1), (4, 1), (3, 2), (4, 2), (4, 3),
        ],
    )


@pytest.fixture
def simple_complete_graph() -> Graph:
    """K4 with one edge per pair."""
    return build_graph(4, [(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4)])


@pytest.fixture
def hypercube_graph() -> Graph:
    """Q3: the cube on eight vertices."""
    return build_graph(
        8,
        [
            (1, 2), (1, 8), (1, 4), (2, 3), (2, 7), (3, 4),
            (3, 6), (4, 5), (5, 6), (5, 8), (8, 7), (7, 6),
        ],
    )


@pytest.fixture
def euler_trail_graph() -> Graph:
    """Connected graph whose only odd-degree vertices are 2 and 4."""
    return build_graph(
        6,
        [(1, 2), (1, 3), (1, 4), (1, 5), (2, 3), (2, 6), (3, 4), (3, 6), (4, 5)],
    )


@pytest.fixture
def euler_circuit_graph() -> Graph:
    """The Euler trail graph plus edge 4-2, so every degree is even."""
    return build_graph(
        6,
        [(1, 2), (1, 3), (1, 4), (1, 5), (2, 3), (2, 6), (3, 4), (3, 6), (4, 5), (4, 2)],
    )


@pytest.fixture
def dijkstra_graph() -> Graph:
    """Seven vertices with positive integer weights."""
    return build_graph(
        7,
        [
            (1, 2), (1, 3), (1, 4), (1, 6), (2, 3), (2, 5), (2, 6),
            (2, 7), (3, 5), (3, 7), (4, 5), (5, 6), (6, 7),
        ],
        weights=[4, 7, 3, 6, 6, 3, 5, 4, 4, 4, 2, 7, 4],
    )


@pytest.fixture
def mst_graph() -> Graph:
    """Nine vertices, 19 edges, every weight 1."""
    pairs = [
        (1, 6), (1, 7), (1, 9), (2, 4), (2, 8), (2, 9), (3, 4),
        (3, 5), (3, 6), (3, 8), (4, 8), (4, 9), (5, 6), (5, 7),
        (5, 8), (6, 7), (6, 8), (6, 9), (7, 9),
    ]
    return build_graph(9, pairs, weights=[1] * len(pairs))


@pytest.fixture
def small_star_tree() -> Graph:
    """Star with hub 1 and leaves 2, 3, 4."""
    return build_graph(4, [(1, 2), (1, 3), (1, 4)])


@pytest.fixture
def star_tree() -> Graph:
    """Star with hub 1 and leaves 2, 3, 4, 5."""
    return build_graph(5, [(1, 2), (1, 3), (1, 4), (1, 5)])


@pytest.fixture
def path_tree() -> Graph:
    """The path 1-2-3-4."""
    return build_graph(4, [(1, 2), (2, 3), (3, 4)])


@pytest.fixture
def disconnected_graph() -> Graph:
    """Vertices 1-4 with edges 1-2 and 1-3; vertex 4 is isolated."""
    return build_graph(4, [(1, 2), (1, 3)], labels="ABCD")
