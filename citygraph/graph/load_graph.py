"""Graph loading from text descriptions.

Each line of a description lists the out-edges of one city::

    Paris -> Lyon:465, Lille:225
    Lyon -> Marseille:315

Whitespace around names and weights is ignored. Blank lines and lines
without ``->`` are skipped. Every ``TARGET:WEIGHT`` segment must have
exactly one colon and an integer weight; a malformed segment is skipped
without dropping the rest of its line.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from ..domain.models import EdgeSpec
from .weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)

ARROW = "->"


def parse_line(line: str, line_number: int = 0) -> List[EdgeSpec]:
    """Parse one ``SOURCE -> T1:W1, T2:W2`` line into edge triples."""
    line = line.strip()
    if not line or ARROW not in line:
        return []

    parts = line.split(ARROW)
    source = parts[0].strip()
    if not source:
        logger.warning("Skipping line without source", extra={"line": line_number})
        return []

    specs: List[EdgeSpec] = []
    for segment in parts[1].split(","):
        segment = segment.strip()
        if not segment:
            continue
        tokens = segment.split(":")
        if len(tokens) != 2 or not tokens[0].strip():
            logger.warning(
                "Skipping malformed edge",
                extra={"line": line_number, "segment": segment},
            )
            continue
        try:
            weight = int(tokens[1].strip())
        except ValueError:
            logger.warning(
                "Skipping edge with invalid weight",
                extra={"line": line_number, "segment": segment},
            )
            continue
        specs.append(EdgeSpec(source=source, target=tokens[0].strip(), weight=weight))
    return specs


def iter_edge_specs(lines: Iterable[str]) -> Iterator[EdgeSpec]:
    """Yield edge triples from description lines, in file order."""
    for number, line in enumerate(lines, start=1):
        yield from parse_line(line, number)


def load_graph(
    path: Union[str, Path],
    directed: bool = True,
    sort_edges_by_weight: bool = False,
) -> WeightedGraph:
    """Build a graph from a description file.

    Parameters
    ----------
    path:
        Text file in the ``SOURCE -> TARGET:WEIGHT, ...`` format.
    directed:
        If False, every edge is also stored in the opposite direction.
    sort_edges_by_weight:
        Stable-sort each city's out-edges by weight once loading is
        done, so traversals try cheaper edges first. Off by default,
        which keeps file order.

    Returns
    -------
    WeightedGraph
        The loaded graph.

    Raises
    ------
    OSError
        If the file cannot be read.
    """
    with open(path, encoding="utf-8") as f:
        graph = WeightedGraph.from_edges(iter_edge_specs(f), directed=directed)

    if sort_edges_by_weight:
        graph.sort_out_edges(key=lambda edge: edge.weight)

    return graph
