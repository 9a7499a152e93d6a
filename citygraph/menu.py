"""Interactive text menu for exploring a city graph.

The menu is a thin front end: it reads city names from the user, calls
``GraphQueryService`` and renders the answers as sentences. Unknown
city names are reported as such instead of showing the neutral answer
the query would give.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import click

from . import __version__
from .config import MenuConfig, ObservabilityConfig, get_config
from .container import Container
from .domain.errors import GraphError, VertexNotFoundError
from .domain.models import TraversalPath
from .services import GraphQueryService

EXIT_CHOICES = {"0", "q", "quit", "exit"}


def configure_logging(config: ObservabilityConfig) -> None:
    """Route log records to stderr using the configured level and format."""
    logging.basicConfig(level=config.level, format=config.format)


def format_names(names: Iterable[str]) -> str:
    """Render names as ``[A, B, C]``."""
    return "[" + ", ".join(names) + "]"


@dataclass
class GraphMenu:
    """Line-oriented menu loop over a GraphQueryService.

    Attributes:
        service: Answers the queries
        config: Menu configuration (screen clearing, separator)
    """

    service: GraphQueryService
    config: MenuConfig = field(default_factory=lambda: get_config().menu)

    _logger: logging.Logger = field(init=False, repr=False)
    _options: List[Tuple[str, str, Callable[[], None]]] = field(
        init=False, repr=False
    )

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._options = [
            ("1", "Check if the graph is directed", self.show_directed),
            ("2", "Perform BFS from a source to a destination", self.show_bfs),
            ("3", "Perform DFS from a source to a destination", self.show_dfs),
            ("4", "Find the shortest path length between two vertices", self.show_shortest),
            ("5", "Count the number of simple paths between two vertices", self.show_path_count),
            ("6", "List neighbors of a vertex", self.show_neighbors),
            ("7", "Find vertex(es) with the highest degree", self.show_highest_degree),
            ("8", "Check if two vertices are adjacent", self.show_adjacent),
            ("9", "Check if there's a cycle involving a vertex", self.show_cycle),
            ("10", "Find the number of vertices in a vertex's connected component", self.show_component),
            ("11", "Check if there is a path between two vertices", self.show_reachable),
            ("12", "Find the cheapest path cost between two vertices", self.show_cheapest),
            ("13", "List all vertices", self.show_vertices),
        ]

    @property
    def actions(self) -> Dict[str, Callable[[], None]]:
        return {key: action for key, _, action in self._options}

    def run(self) -> None:
        """Show the menu until the user exits or input runs out."""
        click.echo("Welcome to the Graph Operations Menu!")
        click.echo(self.config.separator)

        while True:
            if self.config.clear_screen:
                click.clear()
            self.print_menu()
            try:
                choice = self._ask(f"Enter your choice (0-{len(self._options)})")
                if choice.lower() in EXIT_CHOICES:
                    click.echo("Exiting the Graph Operations Menu. Goodbye!")
                    break
                self.dispatch(choice)
            except click.Abort:
                click.echo()
                break
            click.echo(self.config.separator)

    def print_menu(self) -> None:
        click.echo("Please select an operation:")
        for key, label, _ in self._options:
            click.echo(f"{key}. {label}")
        click.echo("0. Exit")

    def dispatch(self, choice: str) -> None:
        """Run the action for ``choice``, reporting unknown vertices."""
        action = self.actions.get(choice)
        if action is None:
            click.echo(
                f"Invalid choice. Please select a valid option (0-{len(self._options)})."
            )
            return
        try:
            action()
        except VertexNotFoundError as e:
            self._logger.debug("Unknown vertex", extra={"vertex": e.vertex})
            click.echo(f"No such vertex: {e.vertex}.")

    # -----------------
    # ACTIONS
    # -----------------

    def show_directed(self) -> None:
        directed = self.service.is_directed()
        click.echo(f"The graph is {'' if directed else 'not '}directed.")

    def show_bfs(self) -> None:
        source, target = self._ask_pair("BFS")
        self._echo_path("BFS", self.service.bfs_from_to(source, target))

    def show_dfs(self) -> None:
        source, target = self._ask_pair("DFS")
        self._echo_path("DFS", self.service.dfs_from_to(source, target))

    def show_shortest(self) -> None:
        source, target = self._ask_pair("shortest path")
        length = self.service.shortest_path_length(source, target)
        if length is None:
            click.echo(f"No path found from {source} to {target}.")
        else:
            click.echo(
                f"Shortest path length from {source} to {target} is: {length} hop(s)"
            )

    def show_cheapest(self) -> None:
        source, target = self._ask_pair("cheapest path")
        cost = self.service.cheapest_path_cost(source, target)
        if cost is None:
            click.echo(f"No path found from {source} to {target}.")
        else:
            click.echo(f"Cheapest path cost from {source} to {target} is: {cost}")

    def show_path_count(self) -> None:
        source, target = self._ask_pair("counting paths")
        count = self.service.number_of_simple_paths(source, target)
        click.echo(f"Number of simple paths from {source} to {target} is: {count}")

    def show_neighbors(self) -> None:
        vertex = self._ask_vertex("Enter vertex to list its neighbors")
        click.echo(f"Neighbors of {vertex}: {format_names(self.service.neighbors(vertex))}")

    def show_highest_degree(self) -> None:
        names = self.service.highest_degree()
        click.echo(f"Vertex(es) with the highest degree: {format_names(names)}")

    def show_adjacent(self) -> None:
        source, target = self._ask_pair("adjacency")
        adjacent = self.service.are_adjacent(source, target)
        click.echo(f"{source} and {target} are {'' if adjacent else 'not '}adjacent.")

    def show_cycle(self) -> None:
        vertex = self._ask_vertex("Enter vertex to check for a cycle")
        has_cycle = self.service.has_cycle_through(vertex)
        click.echo(
            f"There is {'a ' if has_cycle else 'no '}cycle involving vertex {vertex}."
        )

    def show_component(self) -> None:
        vertex = self._ask_vertex("Enter vertex to find its connected component size")
        size = self.service.component_size(vertex)
        click.echo(
            f"Number of vertices in the connected component containing {vertex}: {size}"
        )

    def show_reachable(self) -> None:
        source, target = self._ask_pair("reachability")
        reachable = self.service.is_there_a_path(source, target)
        click.echo(f"There is {'a' if reachable else 'no'} path from {source} to {target}.")

    def show_vertices(self) -> None:
        click.echo(f"Vertices: {format_names(self.service.list_vertices())}")

    # -----------------
    # INPUT / OUTPUT
    # -----------------

    def _ask(self, text: str) -> str:
        return click.prompt(text, default="", show_default=False).strip()

    def _ask_vertex(self, text: str) -> str:
        name = self._ask(text)
        self.service.require_vertex(name)
        return name

    def _ask_pair(self, purpose: str) -> Tuple[str, str]:
        source = self._ask_vertex(f"Enter source vertex for {purpose}")
        target = self._ask_vertex(f"Enter destination vertex for {purpose}")
        return source, target

    def _echo_path(self, label: str, path: TraversalPath) -> None:
        if path.found:
            click.echo(f"{label} path: {path.render()}")
        else:
            click.echo(f"{path.render()} (no {label} path found)")


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--graph",
    "graph_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Graph description file (defaults to the configured data file).",
)
@click.option(
    "--directed/--undirected",
    default=None,
    help="Store edges one way, or mirror every edge.",
)
@click.option(
    "--sort-by-weight/--file-order",
    default=None,
    help="Order each city's out-edges by weight instead of file order.",
)
@click.option(
    "--clear/--no-clear",
    "clear_screen",
    default=None,
    help="Clear the console before showing the menu.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
)
def main(
    graph_path: Optional[Path],
    directed: Optional[bool],
    sort_by_weight: Optional[bool],
    clear_screen: Optional[bool],
    log_level: Optional[str],
) -> None:
    """Load a city graph description and explore it interactively."""
    config = get_config()

    graph_updates: Dict[str, object] = {}
    if graph_path is not None:
        graph_updates["data_dir"] = graph_path.resolve().parent
        graph_updates["graph_file"] = graph_path.name
    if directed is not None:
        graph_updates["directed"] = directed
    if sort_by_weight is not None:
        graph_updates["sort_edges_by_weight"] = sort_by_weight

    menu_updates: Dict[str, object] = {}
    if clear_screen is not None:
        menu_updates["clear_screen"] = clear_screen

    observability = config.observability
    if log_level is not None:
        observability = observability.model_copy(update={"level": log_level.upper()})

    config = config.model_copy(
        update={
            "graph": config.graph.model_copy(update=graph_updates),
            "menu": config.menu.model_copy(update=menu_updates),
            "observability": observability,
        }
    )
    configure_logging(config.observability)

    container = Container.create_default(config)
    service: GraphQueryService = container.resolve(GraphQueryService)
    try:
        graph = service.graph
    except GraphError as e:
        raise click.ClickException(str(e)) from e

    click.echo(
        f"Loaded {graph.vertex_count} vertices and {graph.edge_count} edges "
        f"from {config.graph.graph_path}"
    )
    GraphMenu(service=service, config=config.menu).run()


if __name__ == "__main__":
    main()
