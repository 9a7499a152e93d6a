"""Graph ports - Abstractions for graph loading.

The query algorithms only need a built ``WeightedGraph``; where it
comes from is the repository's business.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..graph.weighted_graph import WeightedGraph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/text_repository.py

    The repository is responsible for loading and caching the
    city graph from persistent storage.
    """

    def load(self) -> WeightedGraph:
        """Load the city graph.

        Returns:
            The built graph, read-only from here on.
        """
        ...

    def list_vertices(self) -> Sequence[str]:
        """List all city names in registration order."""
        ...
