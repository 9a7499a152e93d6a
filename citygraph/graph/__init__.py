"""Graph-related utilities for representing the city network.

This subpackage contains the in-memory weighted graph, the loader that
builds it from a text description, and the query algorithms that run
on top of it.
"""

from .load_graph import iter_edge_specs, load_graph, parse_line
from .structure import (
    are_adjacent,
    component_size,
    has_cycle_through,
    highest_degree,
    is_directed,
    neighbors,
)
from .traversal import (
    bfs_from_to,
    cheapest_path_cost,
    dfs_from_to,
    is_there_a_path,
    number_of_simple_paths,
    shortest_path_length,
)
from .weighted_graph import WeightedGraph

__all__ = [
    "WeightedGraph",
    # Loading
    "load_graph",
    "iter_edge_specs",
    "parse_line",
    # Traversal
    "is_there_a_path",
    "bfs_from_to",
    "dfs_from_to",
    "shortest_path_length",
    "number_of_simple_paths",
    "cheapest_path_cost",
    # Structure
    "neighbors",
    "highest_degree",
    "is_directed",
    "are_adjacent",
    "has_cycle_through",
    "component_size",
]
