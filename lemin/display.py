"""Text rendering of colonies and paths."""

from __future__ import annotations

from collections.abc import Iterable

from lemin.model import Graph, LeminError, Path, Solution


def format_paths(paths: Solution | Iterable[Path]) -> str:
    """Render paths as a blank line followed by one ``a -> b`` line per path."""
    if isinstance(paths, Solution):
        paths = paths.paths
    body = "".join(" -> ".join(path.names()) + "\n" for path in paths)
    return "\n" + body


def print_paths(paths: Solution | Iterable[Path]) -> None:
    """Print paths as produced by :func:`format_paths`."""
    print(format_paths(paths), end="")


def format_graph(graph: Graph) -> str:
    """Render a colony back into its description format."""
    if graph.start_room is None:
        raise LeminError("ERROR: Missing start room")
    if graph.end_room is None:
        raise LeminError("ERROR: Missing end room")
    if not graph.rooms:
        raise LeminError("ERROR: No rooms found")
    if not graph.links:
        raise LeminError("ERROR: No links between rooms")

    start, end = graph.start_room, graph.end_room
    lines = [str(graph.number_of_ants), "##start", f"{start.name} {start.x} {start.y}"]
    lines.extend(
        f"{name} {room.x} {room.y}"
        for name, room in graph.rooms.items()
        if not room.is_start and not room.is_end
    )
    lines += ["##end", f"{end.name} {end.x} {end.y}"]
    lines.extend(graph.links)
    return "".join(line + "\n" for line in lines)


def print_graph(graph: Graph) -> None:
    """Print the colony description."""
    print(format_graph(graph), end="")