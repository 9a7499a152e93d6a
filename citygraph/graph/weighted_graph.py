"""In-memory weighted graph of named cities.

Cities are registered lazily and receive a dense integer handle in
first-seen order. Each handle owns an ordered list of out-edges;
insertion order is preserved because the traversals depend on it.

The ``directed`` flag is a construction policy only: it decides whether
``add_edge`` also appends the mirrored edge. Whether a graph *looks*
directed is a separate inference, see ``structure.is_directed``.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence

from ..domain.models import Edge, EdgeSpec


class WeightedGraph:
    """Vertex registry plus adjacency store.

    Attributes:
        directed: Whether ``add_edge`` stores only ``source -> target``
    """

    def __init__(self, directed: bool = True) -> None:
        self.directed = directed
        self._name_to_handle: Dict[str, int] = {}
        self._names: List[str] = []
        self._adjacency: List[List[Edge]] = []

    @classmethod
    def from_edges(
        cls, edges: Iterable[EdgeSpec], directed: bool = True
    ) -> WeightedGraph:
        """Build a graph by adding every triple in order."""
        graph = cls(directed=directed)
        for spec in edges:
            graph.add_edge(spec.source, spec.target, spec.weight)
        return graph

    # -----------------
    # REGISTRY
    # -----------------

    def ensure_vertex(self, name: str) -> int:
        """Return the handle for ``name``, registering it if unseen."""
        handle = self._name_to_handle.get(name)
        if handle is None:
            handle = len(self._names)
            self._name_to_handle[name] = handle
            self._names.append(name)
            self._adjacency.append([])
        return handle

    def has_vertex(self, name: str) -> bool:
        return name in self._name_to_handle

    def handle_of(self, name: str) -> Optional[int]:
        """Return the handle for ``name``, or None if never seen."""
        return self._name_to_handle.get(name)

    def name_of(self, handle: int) -> str:
        return self._names[handle]

    @property
    def names(self) -> Sequence[str]:
        """City names in handle order."""
        return tuple(self._names)

    @property
    def vertex_count(self) -> int:
        return len(self._names)

    @property
    def edge_count(self) -> int:
        """Number of stored out-edges, mirrored edges included."""
        return sum(len(edges) for edges in self._adjacency)

    # -----------------
    # ADJACENCY
    # -----------------

    def add_edge(self, source: str, target: str, weight: int) -> None:
        """Append ``source -> target``; also ``target -> source`` if undirected."""
        u = self.ensure_vertex(source)
        v = self.ensure_vertex(target)
        self._adjacency[u].append(Edge(target=v, weight=weight))
        if not self.directed:
            self._adjacency[v].append(Edge(target=u, weight=weight))

    def out_edges(self, handle: int) -> Sequence[Edge]:
        return self._adjacency[handle]

    def out_degree(self, handle: int) -> int:
        return len(self._adjacency[handle])

    def weight_between(self, source: int, target: int) -> Optional[int]:
        """Weight of the first out-edge from ``source`` to ``target``."""
        for edge in self._adjacency[source]:
            if edge.target == target:
                return edge.weight
        return None

    def sort_out_edges(self, key: Callable[[Edge], int]) -> None:
        """Stable-sort every out-edge list.

        Only meant to run while the graph is still being built.
        """
        for edges in self._adjacency:
            edges.sort(key=key)

    def __contains__(self, name: object) -> bool:
        return name in self._name_to_handle

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(directed={self.directed}, "
            f"vertices={self.vertex_count}, edges={self.edge_count})"
        )
