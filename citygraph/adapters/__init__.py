"""Adapters layer - Concrete implementations of ports.

Available implementations:
- graph.TextGraphRepository: Loads the graph from a text description
"""
