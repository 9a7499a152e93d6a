"""Structural queries over a ``WeightedGraph``.

Adjacency, degree, directedness, cycles and component size. Like the
traversals, these accept city names and answer unknown names with a
neutral result instead of raising.
"""

from collections import deque
from typing import Deque, Dict, Iterator, List

from ..domain.models import Edge
from .weighted_graph import WeightedGraph


def neighbors(graph: WeightedGraph, vertex: str) -> List[str]:
    """Distinct out-edge targets of ``vertex`` in first-occurrence order."""
    handle = graph.handle_of(vertex)
    if handle is None:
        return []
    # dict keeps insertion order and collapses parallel edges
    seen: Dict[int, None] = dict.fromkeys(e.target for e in graph.out_edges(handle))
    return [graph.name_of(h) for h in seen]


def highest_degree(graph: WeightedGraph) -> List[str]:
    """Return every city whose out-degree equals the maximum, in handle order."""
    degrees = [graph.out_degree(h) for h in range(graph.vertex_count)]
    if not degrees:
        return []
    top = max(degrees)
    return [graph.name_of(h) for h, degree in enumerate(degrees) if degree == top]


def is_directed(graph: WeightedGraph) -> bool:
    """Infer directedness from the stored edges.

    The graph is reported undirected only if every edge ``u -> v`` with
    weight ``w`` has a mirror ``v -> u`` with the same weight. This looks
    at the edges alone and ignores ``graph.directed``, so an edge-symmetric
    directed graph is reported undirected. Quadratic in the worst case.
    """
    for u in range(graph.vertex_count):
        for edge in graph.out_edges(u):
            mirrored = any(
                back.target == u and back.weight == edge.weight
                for back in graph.out_edges(edge.target)
            )
            if not mirrored:
                return True
    return False


def are_adjacent(graph: WeightedGraph, source: str, target: str) -> bool:
    """True if ``source`` has an out-edge to ``target``. One direction only."""
    u = graph.handle_of(source)
    v = graph.handle_of(target)
    if u is None or v is None:
        return False
    return any(edge.target == v for edge in graph.out_edges(u))


def has_cycle_through(graph: WeightedGraph, vertex: str) -> bool:
    """Return True if a simple cycle leaves ``vertex`` and comes back to it.

    Depth-first search from ``vertex``: reaching ``vertex`` again after at
    least one edge closes a cycle, while reaching any other city already
    on the current path prunes that branch. Cities are released when the
    search backtracks out of them, so a city reached through one branch
    is still explored from its siblings. A self-loop counts as a cycle.
    """
    start = graph.handle_of(vertex)
    if start is None:
        return False

    on_path = [False] * graph.vertex_count
    on_path[start] = True
    handles = [start]
    stack: List[Iterator[Edge]] = [iter(graph.out_edges(start))]

    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            on_path[handles.pop()] = False
            continue
        if edge.target == start:
            return True
        if not on_path[edge.target]:
            on_path[edge.target] = True
            handles.append(edge.target)
            stack.append(iter(graph.out_edges(edge.target)))
    return False


def component_size(graph: WeightedGraph, vertex: str) -> int:
    """Count the cities reachable from ``vertex`` by out-edges, itself included.

    For a directed graph this is forward reachability, not weak
    connectivity. Returns 0 if ``vertex`` is unknown.
    """
    start = graph.handle_of(vertex)
    if start is None:
        return 0

    visited = [False] * graph.vertex_count
    visited[start] = True
    queue: Deque[int] = deque([start])
    count = 1

    while queue:
        current = queue.popleft()
        for edge in graph.out_edges(current):
            if not visited[edge.target]:
                visited[edge.target] = True
                queue.append(edge.target)
                count += 1
    return count
