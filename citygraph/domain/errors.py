"""Typed domain errors for the City Graph Explorer.

Graph queries never raise for unknown city names; they return neutral
results instead. These errors cover loading the graph description and
the strict lookups the front end performs when it wants to tell the
user a city is unknown.

All errors inherit from CityGraphError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CityGraphError(Exception):
    """Base error for the city graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(CityGraphError):
    """Graph description could not be loaded.

    Attributes:
        file_path: Path to the graph description file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class VertexNotFoundError(CityGraphError):
    """City name never seen by the graph.

    Attributes:
        vertex: The name that was looked up
    """

    vertex: str = ""

