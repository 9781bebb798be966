"""Path search and selection of room-disjoint paths."""

from __future__ import annotations

from collections import deque

from lemin.model import Graph, LeminError, Path, Room, Solution


def find_all_paths(start_room: str, end_room: str, rooms: dict[str, Room]) -> list[Path]:
    """Return every simple path from ``start_room`` to ``end_room``, shortest first."""
    if start_room not in rooms:
        raise LeminError("ERROR: Missing start room")
    if end_room not in rooms:
        raise LeminError("ERROR: Missing end room")

    start = rooms[start_room]
    queue = deque([(start, (start,), frozenset({start_room}))])
    found: list[Path] = []

    while queue:
        room, walk, visited = queue.popleft()
        if room.name == end_room:
            found.append(Path(list(walk)))
            continue
        for neighbor in room.connected_rooms:
            if neighbor.name not in visited:
                queue.append((neighbor, walk + (neighbor,), visited | {neighbor.name}))

    if not found:
        raise LeminError("ERROR: No path found from start room to end room")
    return found


def _interior(graph: Graph, path: Path) -> set[str]:
    return {
        room.name
        for room in path.rooms
        if room is not graph.start_room and room is not graph.end_room
    }


def unique_paths(graph: Graph, all_paths: list[Path]) -> Solution:
    """Pick the largest greedy set of paths that share no intermediate rooms."""
    if not all_paths:
        return Solution([])

    interiors = [_interior(graph, path) for path in all_paths]
    best: list[Path] = []

    for i, interior in enumerate(interiors):
        chosen = [all_paths[i]]
        occupied = set(interior)
        for j, other in enumerate(interiors):
            if j == i:
                continue
            if occupied.isdisjoint(other):
                chosen.append(all_paths[j])
                occupied |= other

        if len(chosen) > len(best):
            best = chosen
        if len(best) == len(all_paths):
            break

    return Solution(best)