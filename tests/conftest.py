import pytest

from citygraph.config import reset_config
from citygraph.graph import WeightedGraph


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def abc_graph() -> WeightedGraph:
    """``A -> B:3, C:2`` and ``B -> C:1``, directed."""
    graph = WeightedGraph(directed=True)
    graph.add_edge("A", "B", 3)
    graph.add_edge("A", "C", 2)
    graph.add_edge("B", "C", 1)
    return graph


@pytest.fixture
def triangle() -> WeightedGraph:
    """Directed cycle ``A -> B -> C -> A``."""
    graph = WeightedGraph(directed=True)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 1)
    graph.add_edge("C", "A", 1)
    return graph


@pytest.fixture
def diamond() -> WeightedGraph:
    """``A->B``, ``A->C``, ``B->D``, ``C->D``, ``D->A``."""
    graph = WeightedGraph(directed=True)
    graph.add_edge("A", "B", 1)
    graph.add_edge("A", "C", 4)
    graph.add_edge("B", "D", 2)
    graph.add_edge("C", "D", 1)
    graph.add_edge("D", "A", 3)
    return graph
