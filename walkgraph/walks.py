"""
Walk validation and classification.

A walk is a sequence of vertex ids in which consecutive ids are adjacent.
The classifications build on each other:

    trail   = open walk without repeated edges
    circuit = closed walk without repeated edges
    path    = trail without repeated vertices
    cycle   = circuit without repeated vertices apart from the shared ends

Sequences shorter than two ids are never walks.
"""

from typing import List, Optional, Sequence

from .core import Edge, Graph, WalkType
from .structure import get_edge_between_vertices
from .vertex import are_connected


def is_valid_walk(graph: Graph, walk: Sequence[str]) -> bool:
    if walk is None or len(walk) < 2:
        return False
    return are_connected(graph, walk)


def is_open_walk(graph: Graph, walk: Sequence[str]) -> bool:
    return is_valid_walk(graph, walk) and walk[0] != walk[-1]


def is_closed_walk(graph: Graph, walk: Sequence[str]) -> bool:
    return is_valid_walk(graph, walk) and walk[0] == walk[-1]


def traverse_edges(graph: Graph, walk: Sequence[str]) -> List[Optional[Edge]]:
    """
    Resolve the edge used by each step of a walk.

    Args:
        graph: Graph the walk runs on.
        walk: Sequence of vertex ids.

    Returns:
        One entry per consecutive pair: the first edge joining the pair, or
        None when either id is unknown or the pair is not adjacent.
    """
    edges: List[Optional[Edge]] = []
    for current_id, next_id in zip(walk, walk[1:]):
        current = graph.get_vertex(current_id)
        following = graph.get_vertex(next_id)
        if current is None or following is None:
            edges.append(None)
            continue
        edges.append(get_edge_between_vertices(graph, current, following))
    return edges


def has_non_repeating_edges(graph: Graph, walk: Sequence[str]) -> bool:
    """
    Check that every step resolves to an edge and no edge is used twice.

    Edges are compared by identity, so two parallel edges count as
    different edges, but a walk only ever resolves the first of them.
    """
    traversed = traverse_edges(graph, walk)
    if any(e is None for e in traversed):
        return False
    return len({id(e) for e in traversed}) == len(traversed)


def has_non_repeating_vertices(graph: Graph, walk: Sequence[str]) -> bool:
    return len(set(walk)) == len(walk)


def is_trail(graph: Graph, walk: Sequence[str]) -> bool:
    return is_open_walk(graph, walk) and has_non_repeating_edges(graph, walk)


def is_circuit(graph: Graph, walk: Sequence[str]) -> bool:
    return is_closed_walk(graph, walk) and has_non_repeating_edges(graph, walk)


def is_path(graph: Graph, walk: Sequence[str]) -> bool:
    return is_trail(graph, walk) and has_non_repeating_vertices(graph, walk)


def is_cycle(graph: Graph, walk: Sequence[str]) -> bool:
    """A circuit whose inner vertices (all but the shared ends) are distinct."""
    if not is_circuit(graph, walk):
        return False
    return has_non_repeating_vertices(graph, walk[1:-1])


def get_walk_type(graph: Graph, walk: Sequence[str]) -> WalkType:
    """
    Return the most specific classification of a sequence of vertex ids.

    Checked from most to least specific: cycle, path, circuit, trail,
    closed walk, open walk. Anything else is INVALID.
    """
    if not is_valid_walk(graph, walk):
        return WalkType.INVALID

    if is_closed_walk(graph, walk):
        if is_cycle(graph, walk):
            return WalkType.CYCLE
        if is_circuit(graph, walk):
            return WalkType.CIRCUIT
        return WalkType.CLOSED

    if is_path(graph, walk):
        return WalkType.PATH
    if is_trail(graph, walk):
        return WalkType.TRAIL
    return WalkType.OPEN
