"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextGraphRepository: Loads graph from ``SOURCE -> TARGET:WEIGHT`` files
"""

from .text_repository import TextGraphRepository

__all__ = ["TextGraphRepository"]
