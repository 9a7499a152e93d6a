"""Reachability and path algorithms over a ``WeightedGraph``.

Every function takes city names, resolves them through the registry and
returns a neutral result (``False``, ``0``, ``None`` or a not-found
``TraversalPath``) when either name is unknown. Scratch state is
allocated per call, so a built graph can be queried from several
threads at once.

Depth-first searches use explicit stacks of out-edge iterators instead
of recursion, so long chains do not run into the interpreter's
recursion limit.
"""

from collections import deque
from typing import Deque, Dict, Iterator, List, Optional, Sequence, Tuple

from ..domain.models import Edge, TraversalPath
from .weighted_graph import WeightedGraph


def _endpoints(graph: WeightedGraph, source: str, target: str) -> Optional[Tuple[int, int]]:
    start = graph.handle_of(source)
    goal = graph.handle_of(target)
    if start is None or goal is None:
        return None
    return start, goal


def _build_path(
    graph: WeightedGraph, source: str, target: str, handles: Sequence[int]
) -> TraversalPath:
    weights = tuple(
        graph.weight_between(u, v) for u, v in zip(handles, handles[1:])
    )
    return TraversalPath(
        source=source,
        target=target,
        vertices=tuple(graph.name_of(h) for h in handles),
        weights=weights,
    )


def is_there_a_path(graph: WeightedGraph, source: str, target: str) -> bool:
    """Return True if ``target`` is reachable from ``source`` by out-edges."""
    endpoints = _endpoints(graph, source, target)
    if endpoints is None:
        return False
    start, goal = endpoints

    visited = [False] * graph.vertex_count
    visited[start] = True
    queue: Deque[int] = deque([start])

    while queue:
        current = queue.popleft()
        if current == goal:
            return True
        for edge in graph.out_edges(current):
            if not visited[edge.target]:
                visited[edge.target] = True
                queue.append(edge.target)
    return False


def bfs_from_to(graph: WeightedGraph, source: str, target: str) -> TraversalPath:
    """Find a path with the fewest hops using breadth-first search.

    Parameters
    ----------
    graph:
        Graph to search.
    source:
        Name of the start city.
    target:
        Name of the goal city.

    Returns
    -------
    TraversalPath
        The path from ``source`` to ``target`` (inclusive). Out-edges are
        expanded in insertion order and the first edge discovered to a
        city fixes its parent, so ties between equally short paths go to
        the earliest inserted edges. ``found`` is False if either city
        is unknown or the goal is unreachable.
    """
    endpoints = _endpoints(graph, source, target)
    if endpoints is None:
        return TraversalPath(source=source, target=target)
    start, goal = endpoints

    parent: Dict[int, int] = {}
    visited = [False] * graph.vertex_count
    visited[start] = True
    queue: Deque[int] = deque([start])

    while queue:
        current = queue.popleft()
        if current == goal:
            path = [goal]
            while path[-1] != start:
                path.append(parent[path[-1]])
            path.reverse()
            return _build_path(graph, source, target, path)
        for edge in graph.out_edges(current):
            if not visited[edge.target]:
                visited[edge.target] = True
                parent[edge.target] = current
                queue.append(edge.target)

    return TraversalPath(source=source, target=target)


def dfs_from_to(graph: WeightedGraph, source: str, target: str) -> TraversalPath:
    """Find the first path reached by depth-first search.

    The search commits to the first unvisited neighbour in insertion
    order and backtracks out of dead ends. Cities stay visited after a
    dead end, which is enough to find *a* path and keeps the search
    linear in the size of the graph.
    """
    endpoints = _endpoints(graph, source, target)
    if endpoints is None:
        return TraversalPath(source=source, target=target)
    start, goal = endpoints

    path = [start]
    if start == goal:
        return _build_path(graph, source, target, path)

    visited = [False] * graph.vertex_count
    visited[start] = True
    stack: List[Iterator[Edge]] = [iter(graph.out_edges(start))]

    while stack:
        for edge in stack[-1]:
            neighbor = edge.target
            if visited[neighbor]:
                continue
            path.append(neighbor)
            if neighbor == goal:
                return _build_path(graph, source, target, path)
            visited[neighbor] = True
            stack.append(iter(graph.out_edges(neighbor)))
            break
        else:
            stack.pop()
            path.pop()

    return TraversalPath(source=source, target=target)


def shortest_path_length(
    graph: WeightedGraph, source: str, target: str
) -> Optional[int]:
    """Return the minimum number of hops from ``source`` to ``target``.

    Edge weights are ignored. Returns None if either city is unknown or
    the goal is unreachable; a city is 0 hops away from itself. For the
    minimum total weight see ``cheapest_path_cost``.
    """
    endpoints = _endpoints(graph, source, target)
    if endpoints is None:
        return None
    start, goal = endpoints

    distance: List[Optional[int]] = [None] * graph.vertex_count
    distance[start] = 0
    queue: Deque[int] = deque([start])

    while queue:
        current = queue.popleft()
        hops = distance[current]
        assert hops is not None
        if current == goal:
            return hops
        for edge in graph.out_edges(current):
            if distance[edge.target] is None:
                distance[edge.target] = hops + 1
                queue.append(edge.target)
    return None


def _simple_path_costs(graph: WeightedGraph, start: int, goal: int) -> Iterator[int]:
    """Yield the total weight of every simple path from ``start`` to ``goal``.

    Exhaustive backtracking: a city is on the current path while its
    out-edges are being explored and is released when the search
    backtracks out of it. Parallel edges yield one path each. The number
    of simple paths can grow exponentially with the size of the graph,
    so this is only suitable for small graphs.
    """
    if start == goal:
        yield 0
        return

    on_path = [False] * graph.vertex_count
    on_path[start] = True
    handles = [start]
    costs = [0]
    stack: List[Iterator[Edge]] = [iter(graph.out_edges(start))]

    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            costs.pop()
            on_path[handles.pop()] = False
            continue
        cost = costs[-1] + edge.weight
        if edge.target == goal:
            yield cost
        elif not on_path[edge.target]:
            on_path[edge.target] = True
            handles.append(edge.target)
            costs.append(cost)
            stack.append(iter(graph.out_edges(edge.target)))


def number_of_simple_paths(graph: WeightedGraph, source: str, target: str) -> int:
    """Count the simple paths from ``source`` to ``target``.

    Returns 0 if either city is unknown. Exponential in the worst case.
    """
    endpoints = _endpoints(graph, source, target)
    if endpoints is None:
        return 0
    return sum(1 for _ in _simple_path_costs(graph, *endpoints))


def cheapest_path_cost(
    graph: WeightedGraph, source: str, target: str
) -> Optional[int]:
    """Return the minimum total weight over all simple paths.

    Every simple path is enumerated, so negative weights are handled
    without any special casing, at exponential worst-case cost. Returns
    None if either city is unknown or the goal is unreachable.
    """
    endpoints = _endpoints(graph, source, target)
    if endpoints is None:
        return None
    return min(_simple_path_costs(graph, *endpoints), default=None)
