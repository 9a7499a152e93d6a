"""Application services - Orchestration of the graph core.

Services use ports (protocols) for dependency injection,
making them testable and decoupled from concrete implementations.
"""

from .graph_queries import GraphQueryService

__all__ = [
    "GraphQueryService",
]
