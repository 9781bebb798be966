"""Command-line entry point: read a colony file and print the ants' moves."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from lemin.display import print_graph
from lemin.model import LeminError
from lemin.movement import print_ant_movements
from lemin.parser import parse_input_file
from lemin.paths import find_all_paths, unique_paths


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation on the file named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("ERROR: No input file provided")
        return 1

    try:
        graph = parse_input_file(args[0])
        print_graph(graph)
        paths = find_all_paths(graph.start_room.name, graph.end_room.name, graph.rooms)
        solution = unique_paths(graph, paths)
        if not solution.paths:
            raise LeminError("ERROR: No unique path found")
        print()
        print_ant_movements(solution, graph)
    except LeminError as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())