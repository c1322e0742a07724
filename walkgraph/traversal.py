"""
Graph traversal algorithms: BFS, DFS, reachability, cycle search and
two-colouring.

All traversals follow neighbors in edge insertion order and use explicit
stacks or queues, so recursion depth is never a limit.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .core import Graph
from .logging import get_logger
from .utils import reconstruct_path
from .vertex import get_neighbors

logger = get_logger(__name__)


def _resolve_start(graph: Graph, start_id: Optional[str]) -> Optional[str]:
    if start_id is None:
        vertices = graph.get_vertices()
        return vertices[0].id if vertices else None
    if graph.get_vertex(start_id) is None:
        logger.warning("Start vertex %r not in graph", start_id)
        return None
    return start_id


def reachable_from(graph: Graph, source: str) -> List[str]:
    """
    Return every vertex id reachable from ``source``, in BFS order.

    Complexity: O(V * E), since neighbors are re-derived from the edge list.
    """
    order = [source]
    seen: Set[str] = {source}
    queue = deque([source])

    while queue:
        u = queue.popleft()
        for v in get_neighbors(graph, u):
            if v not in seen:
                seen.add(v)
                order.append(v)
                queue.append(v)

    return order


def is_connected(graph: Graph) -> bool:
    """
    Determine whether every vertex is reachable from the first vertex.

    The empty graph and single-vertex graphs are connected.

    Args:
        graph: Graph to check.

    Returns:
        True if the graph is connected, False otherwise.
    """
    vertices = graph.get_vertices()
    if not vertices:
        return True

    reached = set(reachable_from(graph, vertices[0].id))
    return all(v.id in reached for v in vertices)


def breadth_first_search(graph: Graph, start_id: Optional[str] = None) -> List[str]:
    """
    Breadth-first search returning a parent-chain path.

    The start vertex is processed first; each newly discovered neighbor
    records the vertex it was discovered from. The result is the path along
    those parent links from the first processed vertex (the start) to the
    last processed vertex, not the full visitation order.

    Args:
        graph: Graph to traverse.
        start_id: Vertex to start from (defaults to the first vertex).

    Returns:
        List of vertex ids, or an empty list if the start is unknown or the
        graph is empty.

    Example:
        >>> breadth_first_search(G, "1")   # base five-vertex graph
        ['1', '3', '4']
    """
    start = _resolve_start(graph, start_id)
    if start is None:
        return []

    processed = [start]
    parent: Dict[str, Optional[str]] = {start: None}
    queue = deque([start])

    while queue:
        u = queue.popleft()
        for v in get_neighbors(graph, u):
            if v not in parent:
                parent[v] = u
                processed.append(v)
                queue.append(v)

    return reconstruct_path(parent, processed[0], processed[-1]) or []


def depth_first_search(graph: Graph, start_id: Optional[str] = None) -> List[str]:
    """
    Depth-first search returning a parent-chain path.

    Vertices are marked as processed only when discovered from a neighbor,
    so the start vertex can be rediscovered deeper in the search. The first
    processed vertex is therefore the start's first neighbor, and the result
    is the parent-chain path from it to the last processed vertex.

    Args:
        graph: Graph to traverse.
        start_id: Vertex to start from (defaults to the first vertex).

    Returns:
        List of vertex ids. An isolated start yields ``[start_id]``; an
        unknown start or empty graph yields an empty list.

    Example:
        >>> depth_first_search(G, "1")   # base five-vertex graph
        ['2', '1', '3', '4', '5']
    """
    start = _resolve_start(graph, start_id)
    if start is None:
        return []

    processed: List[str] = []
    parent: Dict[str, Optional[str]] = {}
    stack: List[Tuple[str, Iterator[str]]] = [(start, iter(get_neighbors(graph, start)))]

    while stack:
        u, neighbors = stack[-1]
        for v in neighbors:
            if v not in parent:
                parent[v] = u
                processed.append(v)
                stack.append((v, iter(get_neighbors(graph, v))))
                break
        else:
            stack.pop()

    if not processed:
        return [start]

    return reconstruct_path(parent, processed[0], processed[-1]) or []


def has_cycles(graph: Graph) -> bool:
    """
    Search for a cycle with a DFS from the first vertex.

    The search keeps the current DFS path. A neighbor that is already on the
    path, other than the vertex we just came from, closes a cycle. Parallel
    edges back to the parent are skipped along with the parent, while a
    self-loop is reported as a cycle.

    Only the component of the first vertex is searched.

    Args:
        graph: Graph to check.

    Returns:
        True if a cycle was found, False otherwise (including empty graphs).
    """
    vertices = graph.get_vertices()
    if not vertices:
        return False

    root = vertices[0].id
    on_path: Set[str] = {root}
    stack: List[Tuple[str, Optional[str], Iterator[str]]] = [
        (root, None, iter(get_neighbors(graph, root)))
    ]

    while stack:
        u, came_from, neighbors = stack[-1]
        for v in neighbors:
            if v == came_from:
                continue
            if v in on_path:
                logger.debug("Cycle closed at %r from %r", v, u)
                return True
            on_path.add(v)
            stack.append((v, u, iter(get_neighbors(graph, v))))
            break
        else:
            stack.pop()
            on_path.discard(u)

    return False


def two_coloring(graph: Graph) -> Optional[Dict[str, int]]:
    """
    Colour the component of the first vertex with colours 0 and 1.

    The first vertex gets colour 0 and every uncoloured neighbor gets the
    opposite colour of the vertex it was reached from.

    Args:
        graph: Graph to colour.

    Returns:
        Dictionary mapping vertex id -> colour for the first vertex's
        component, ``{}`` for the empty graph, or None if two adjacent
        vertices (or a self-loop) share a colour.
    """
    vertices = graph.get_vertices()
    if not vertices:
        return {}

    root = vertices[0].id
    color: Dict[str, int] = {root: 0}
    stack = [root]

    while stack:
        u = stack.pop()
        for v in get_neighbors(graph, u):
            if v not in color:
                color[v] = 1 - color[u]
                stack.append(v)
            elif color[v] == color[u]:
                return None

    return color
