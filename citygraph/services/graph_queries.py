"""Graph query service - Name-level facade over the query algorithms.

The front end talks to this service rather than to the algorithm
modules, so the graph is loaded once through the repository and every
query is logged in one place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..domain.errors import VertexNotFoundError
from ..domain.models import TraversalPath
from ..graph import structure, traversal
from ..graph.weighted_graph import WeightedGraph
from ..ports.graph import GraphRepositoryPort


@dataclass
class GraphQueryService:
    """Answer structural queries about the loaded city graph.

    Unknown city names get the same neutral answers as the underlying
    algorithms (``False``, ``0``, ``None``, empty list, not-found path).
    Use ``has_vertex`` or ``require_vertex`` to tell them apart.

    Attributes:
        graph_repository: Supplies the graph, loaded on first use
    """

    graph_repository: GraphRepositoryPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> WeightedGraph:
        return self.graph_repository.load()

    # -----------------
    # VERTICES
    # -----------------

    def has_vertex(self, name: str) -> bool:
        return self.graph.has_vertex(name)

    def require_vertex(self, name: str) -> int:
        """Return the handle of ``name``.

        Raises:
            VertexNotFoundError: If the city was never seen.
        """
        handle = self.graph.handle_of(name)
        if handle is None:
            raise VertexNotFoundError(f"Unknown vertex: {name}", vertex=name)
        return handle

    def list_vertices(self) -> Sequence[str]:
        return self.graph.names

    # -----------------
    # PATHS
    # -----------------

    def is_there_a_path(self, source: str, target: str) -> bool:
        self._logger.debug("Checking reachability", extra={"source": source, "target": target})
        return traversal.is_there_a_path(self.graph, source, target)

    def bfs_from_to(self, source: str, target: str) -> TraversalPath:
        self._logger.debug("BFS path", extra={"source": source, "target": target})
        return self._log_path(traversal.bfs_from_to(self.graph, source, target))

    def dfs_from_to(self, source: str, target: str) -> TraversalPath:
        self._logger.debug("DFS path", extra={"source": source, "target": target})
        return self._log_path(traversal.dfs_from_to(self.graph, source, target))

    def shortest_path_length(self, source: str, target: str) -> Optional[int]:
        """Minimum number of hops, or None if there is no path."""
        self._logger.debug("Shortest path length", extra={"source": source, "target": target})
        return traversal.shortest_path_length(self.graph, source, target)

    def cheapest_path_cost(self, source: str, target: str) -> Optional[int]:
        """Minimum total weight over simple paths, or None if there is no path."""
        self._logger.debug("Cheapest path cost", extra={"source": source, "target": target})
        return traversal.cheapest_path_cost(self.graph, source, target)

    def number_of_simple_paths(self, source: str, target: str) -> int:
        self._logger.debug("Counting simple paths", extra={"source": source, "target": target})
        return traversal.number_of_simple_paths(self.graph, source, target)

    # -----------------
    # STRUCTURE
    # -----------------

    def neighbors(self, vertex: str) -> List[str]:
        return structure.neighbors(self.graph, vertex)

    def highest_degree(self) -> List[str]:
        return structure.highest_degree(self.graph)

    def is_directed(self) -> bool:
        """Directedness inferred from the edges, not the construction flag."""
        return structure.is_directed(self.graph)

    def are_adjacent(self, source: str, target: str) -> bool:
        return structure.are_adjacent(self.graph, source, target)

    def has_cycle_through(self, vertex: str) -> bool:
        self._logger.debug("Cycle detection", extra={"vertex": vertex})
        return structure.has_cycle_through(self.graph, vertex)

    def component_size(self, vertex: str) -> int:
        return structure.component_size(self.graph, vertex)

    def _log_path(self, path: TraversalPath) -> TraversalPath:
        if path.found:
            self._logger.info(
                "Path found",
                extra={"source": path.source, "target": path.target, "hops": path.hops},
            )
        else:
            self._logger.warning(
                "No path found",
                extra={"source": path.source, "target": path.target},
            )
        return path
