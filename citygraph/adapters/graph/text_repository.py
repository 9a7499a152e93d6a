"""Text Graph Repository adapter.

This adapter wraps ``graph.load_graph`` and adds:
- Configuration injection (path and construction policy from config)
- Caching of the built graph
- Logging
- Typed errors
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...graph.load_graph import load_graph
from ...graph.weighted_graph import WeightedGraph


@dataclass
class TextGraphRepository:
    """Graph repository that loads from a text description file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (path, directedness, edge ordering)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[WeightedGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> WeightedGraph:
        """Load the city graph from the configured file.

        Returns:
            The built graph.

        Raises:
            GraphError: If the file cannot be read.
        """
        if self._graph is not None:
            return self._graph

        path = self.config.graph_path
        self._logger.debug(
            "Loading graph",
            extra={"graph_path": str(path), "directed": self.config.directed},
        )

        try:
            graph = load_graph(
                path,
                directed=self.config.directed,
                sort_edges_by_weight=self.config.sort_edges_by_weight,
            )
        except (OSError, UnicodeDecodeError) as e:
            raise GraphError(
                f"Failed to load graph from {path}",
                file_path=str(path),
                cause=e,
            ) from e

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"vertices": graph.vertex_count, "edges": graph.edge_count},
        )
        return graph

    def list_vertices(self) -> Sequence[str]:
        """List all city names in registration order.

        Raises:
            GraphError: If the graph cannot be loaded.
        """
        return self.load().names

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
