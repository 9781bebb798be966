"""Simulation of ants walking the chosen paths, one turn at a time."""

from __future__ import annotations

from collections.abc import Iterator

from lemin.model import Graph, LeminError, Room, Solution


def find_direct_path(solution: Solution, start_room: Room, end_room: Room) -> int | None:
    """Return the index of a path leading straight from start to end, if any."""
    for index, path in enumerate(solution.paths):
        rooms = path.rooms
        if len(rooms) == 2 and rooms[0] is start_room and rooms[1] is end_room:
            return index
    return None


def ant_movements(solution: Solution, graph: Graph) -> Iterator[str]:
    """Yield one line per turn listing the moves made, as ``L<ant>-<room>``."""
    if not solution.paths:
        raise LeminError("ERROR: No unique path found")

    paths = [path.rooms for path in solution.paths]
    ant_count = graph.number_of_ants
    direct = find_direct_path(solution, graph.start_room, graph.end_room)

    assignment = [ant % len(paths) for ant in range(ant_count)]
    if direct is not None and assignment:
        assignment[-1] = direct
    positions = [0] * ant_count

    available: dict[Room, bool] = {room: True for rooms in paths for room in rooms}

    while True:
        moves: list[str] = []
        direct_used = False

        for ant, path_index in enumerate(assignment):
            rooms = paths[path_index]
            position = positions[ant]
            if position >= len(rooms) - 1:
                continue

            if len(rooms) == 2:
                if direct_used:
                    continue
                direct_used = True

            current, following = rooms[position], rooms[position + 1]
            if not available.get(following, False):
                continue
            if current is not graph.start_room:
                available[current] = True
            if following is not graph.end_room:
                available[following] = False

            positions[ant] += 1
            moves.append(f"L{ant + 1}-{following.name}")

        if not moves:
            return
        yield " ".join(moves)


def print_ant_movements(solution: Solution, graph: Graph) -> None:
    """Print every turn of the simulation on its own line."""
    for line in ant_movements(solution, graph):
        print(line)