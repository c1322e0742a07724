"""
Edge-level queries and weight assignment.

Bridge detection works on a clone of the graph, so the caller's store is
never touched. Weight assignment mutates edges in place.
"""

from typing import Optional

import numpy as np

from .core import Graph
from .logging import get_logger
from .traversal import is_connected
from .weights import RandomWeightOptions, random_weight, rng_default

logger = get_logger(__name__)


def has_parallel_edges(graph: Graph) -> bool:
    """
    Determine whether two edges join the same pair of vertices.

    Endpoint pairs are compared unordered, so an edge stored as (a, b) and
    another stored as (b, a) are parallel.
    """
    edges = graph.get_edges()
    unique_pairs = {tuple(sorted(e.endpoints())) for e in edges}
    return len(edges) != len(unique_pairs)


def has_self_loops(graph: Graph) -> bool:
    return any(e.source.id == e.target.id for e in graph.get_edges())


def get_edge_id(graph: Graph, vertex1: str, vertex2: str) -> str:
    """
    Return the id of the first edge joining two vertices in either direction.

    Returns:
        The edge id, or an empty string if the vertices are not joined.
    """
    for e in graph.get_edges():
        if e.endpoints() in ((vertex1, vertex2), (vertex2, vertex1)):
            return e.id
    return ""


def is_bridge(graph: Graph, edge_id: str) -> bool:
    """
    Determine whether removing an edge disconnects the graph.

    The check runs on a clone: connectivity is measured, the edge removed,
    connectivity measured again, and the edge put back on the clone.

    Args:
        graph: Graph holding the edge.
        edge_id: Id of the edge to test.

    Returns:
        True if the graph was connected and is not connected without the
        edge. False for unknown edge ids.
    """
    if graph.get_edge(edge_id) is None:
        return False

    working = graph.clone()
    was_connected = is_connected(working)

    removed = working.get_edge(edge_id)
    working.remove_edge(edge_id)
    still_connected = is_connected(working)
    working.add_edge(removed)

    return was_connected and not still_connected


def assign_weight_to_edge(graph: Graph, edge_id: str, weight: float) -> None:
    edge = graph.get_edge(edge_id)
    if edge is None:
        return
    edge.weight = weight


def assign_random_weight_to_edge(
    graph: Graph,
    edge_id: str,
    options: Optional[RandomWeightOptions] = None,
    rng: Optional[np.random.Generator] = None,
) -> None:
    """
    Assign one random integer weight to an edge.

    The draw always floors to an integer; the remaining options (range, sign,
    zero) are taken from ``options``.

    Args:
        graph: Graph holding the edge.
        edge_id: Id of the edge. Unknown ids are ignored.
        options: Draw configuration (defaults to RandomWeightOptions()).
        rng: Generator to draw from.
    """
    if graph.get_edge(edge_id) is None:
        return

    base = options or RandomWeightOptions()
    integer_options = RandomWeightOptions(
        max=base.max,
        min=base.min,
        force_integer=True,
        allow_negative=base.allow_negative,
        allow_zero=base.allow_zero,
    )
    weight = random_weight(integer_options, rng)
    logger.debug("Edge %r gets random weight %s", edge_id, weight)
    assign_weight_to_edge(graph, edge_id, weight)


def assign_random_weights_to_edges(
    graph: Graph,
    options: Optional[RandomWeightOptions] = None,
    rng: Optional[np.random.Generator] = None,
) -> None:
    """Give every edge its own independent random integer weight."""
    if rng is None:
        rng = rng_default()
    for e in graph.get_edges():
        assign_random_weight_to_edge(graph, e.id, options, rng)


def get_edge_weight(graph: Graph, edge_id: str) -> Optional[float]:
    """
    Return an edge's weight.

    Returns:
        The weight, or None if the edge is unknown or its weight is 0/unset.
    """
    edge = graph.get_edge(edge_id)
    if edge is None or not edge.weight:
        return None
    return edge.weight
