"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CityGraphError,
    GraphError,
    VertexNotFoundError,
)
from .models import Edge, EdgeSpec, TraversalPath

__all__ = [
    # Models
    "Edge",
    "EdgeSpec",
    "TraversalPath",
    # Errors
    "CityGraphError",
    "GraphError",
    "VertexNotFoundError",
]
