"""Top-level package for the City Graph Explorer project.

This package exposes the weighted city graph, the query algorithms
that run on top of it, and the small text front end used to load a
graph description and explore it interactively.
"""

__version__ = "0.1.0"
