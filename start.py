"""Simple launcher for the city graph menu.

This script asks whether the graph should be read as directed or
undirected, then starts the interactive menu on the default data file.
"""

from __future__ import annotations

import sys

from citygraph.menu import main as menu_main


def main() -> None:
    print("=== City Graph launcher ===")
    print("1) Directed graph")
    print("2) Undirected graph")
    choice = input("Choice (1/2, directed/undirected): ").strip().lower()

    if choice in {"1", "directed", "d"}:
        mode = "--directed"
    elif choice in {"2", "undirected", "u"}:
        mode = "--undirected"
    else:
        print("Unrecognised choice, using a directed graph.")
        mode = "--directed"

    menu_main([mode, *sys.argv[1:]])


if __name__ == "__main__":
    main()
