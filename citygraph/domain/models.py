"""Immutable domain models for the City Graph Explorer.

All models are frozen dataclasses with slots for memory efficiency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class Edge:
    """An out-edge stored under its source vertex.

    Attributes:
        target: Handle of the vertex the edge points to
        weight: Integer weight, any sign
    """

    target: int
    weight: int


@dataclass(frozen=True, slots=True)
class EdgeSpec:
    """A parsed ``SOURCE -> TARGET:WEIGHT`` triple, by city name."""

    source: str
    target: str
    weight: int


@dataclass(frozen=True, slots=True)
class TraversalPath:
    """Outcome of a path-producing traversal between two cities.

    ``vertices`` and ``weights`` interleave when rendered:
    ``vertices[i] -weights[i]-> vertices[i + 1]``. A weight is ``None``
    if no out-edge joins the two vertices, which a traversal never
    produces but a hand-built path may.

    Attributes:
        source: Requested start city
        target: Requested goal city
        vertices: City names along the path, empty when not found
        weights: Weight of each hop, one fewer than ``vertices``
    """

    source: str
    target: str
    vertices: tuple[str, ...] = field(default_factory=tuple)
    weights: tuple[Optional[int], ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        """Check if a path was found."""
        return len(self.vertices) > 0

    @property
    def hops(self) -> int:
        """Return the number of edges along the path."""
        return max(len(self.vertices) - 1, 0)

    @property
    def total_weight(self) -> Optional[int]:
        """Sum of the hop weights, or None if not found or a hop has no edge."""
        if not self.found or any(w is None for w in self.weights):
            return None
        return sum(w for w in self.weights if w is not None)

    def render(self) -> str:
        """Render the path as ``A -3-> B -1-> C``.

        A missing path renders as ``A --x-- B``.
        """
        if not self.found:
            return f"{self.source} --x-- {self.target}"
        parts = [self.vertices[0]]
        for weight, name in zip(self.weights, self.vertices[1:]):
            label = "?" if weight is None else str(weight)
            parts.append(f" -{label}-> {name}")
        return "".join(parts)
