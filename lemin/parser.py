"""Reading a colony description into a :class:`Graph`."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

from lemin.model import Graph, LeminError, Room

MAX_ANTS = 10000

_NON_SPACE = r"[^\t\n\f\r ]"
_ROOM_PATTERN = re.compile(rf"{_NON_SPACE}+ -*[0-9]+ -*[0-9]+")
_TUNNEL_PATTERN = re.compile(rf"{_NON_SPACE}+-{_NON_SPACE}+")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_LIMIT = 2**63


def _atoi(text: str) -> int | None:
    """Parse a signed decimal integer that fits in 64 bits, or return None."""
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not -_INT64_LIMIT <= value < _INT64_LIMIT:
        return None
    return value


def parse_room(line: str, rooms: dict[str, Room], is_start: bool, is_end: bool) -> str:
    """Create a room from ``line``, add it to ``rooms`` and return its name."""
    fields = line.split()
    if len(fields) != 3:
        raise LeminError(f"ERROR: Invalid room format {line}")

    name, x_text, y_text = fields
    if name.startswith("#") or name.startswith("L"):
        raise LeminError(f"ERROR: Invalid room name {name}")

    x, y = _atoi(x_text), _atoi(y_text)
    if x is None or y is None:
        raise LeminError(f"ERROR: Invalid room coordinates {line}")

    if any(room.x == x and room.y == y for room in rooms.values()):
        raise LeminError(f"ERROR: Duplicate room coordinates {x} {y}")

    if name in rooms:
        raise LeminError(f"ERROR: Duplicate room name {name}")

    rooms[name] = Room(name, x, y, is_start=is_start, is_end=is_end)
    return name


def parse_tunnel(line: str, rooms: dict[str, Room], tunnels: list[str]) -> None:
    """Connect the two rooms named in ``line`` and record the tunnel."""
    parts = line.split("-")
    if len(parts) != 2 or parts[0] == parts[1]:
        raise LeminError(f"ERROR: Invalid tunnel definition {line}")

    first, second = parts
    if first not in rooms or second not in rooms:
        raise LeminError(f"ERROR: Tunnel references unknown room(s) {line}")

    reverse = f"{second}-{first}"
    if any(tunnel in (line, reverse) for tunnel in tunnels):
        raise LeminError(f"ERROR: Duplicate tunnel {line}")

    tunnels.append(line)
    rooms[first].connect(rooms[second])


def _read_ant_count(stream) -> int:
    for line in stream:
        if not line or line.startswith("#"):
            continue
        value = _atoi(line)
        if value is not None and value > 0:
            if value > MAX_ANTS:
                break
            return value
    raise LeminError("ERROR: Couldn't find a valid number of ants")


def parse_lines(lines: Iterable[str]) -> Graph:
    """Build a colony graph from the lines of a description."""
    stream = (line.strip() for line in lines)
    number_of_ants = _read_ant_count(stream)

    rooms: dict[str, Room] = {}
    tunnels: list[str] = []
    start_name: str | None = None
    end_name: str | None = None
    end_defined = False

    for line in stream:
        if not line or line.startswith("##"):
            command = line.lower()
            if command == "##start":
                if start_name is not None:
                    raise LeminError("ERROR: Multiple start rooms defined")
                if end_defined:
                    raise LeminError("ERROR: Start must be defined before End")
                room_line = next(stream, None)
                if not room_line:
                    raise LeminError("ERROR: Missing room after ##start")
                start_name = parse_room(room_line, rooms, True, False)
            elif command == "##end":
                if end_name is not None:
                    raise LeminError("ERROR: Multiple end rooms defined")
                end_defined = True
                room_line = next(stream, None)
                if room_line is None:
                    raise LeminError("ERROR: Missing room after ##end")
                end_name = parse_room(room_line, rooms, False, True)
            continue

        if _TUNNEL_PATTERN.fullmatch(line):
            parse_tunnel(line, rooms, tunnels)
        elif _ROOM_PATTERN.fullmatch(line):
            parse_room(line, rooms, False, False)
        elif line.startswith("#"):
            continue
        else:
            raise LeminError(f"ERROR: Invalid data Format: {line}")

    if start_name is None or end_name is None:
        raise LeminError("ERROR: Missing start or end room")
    if start_name == end_name:
        raise LeminError("ERROR: Start room and end room cannot be the same")
    if not rooms:
        raise LeminError("ERROR: No rooms found")
    if not tunnels:
        raise LeminError("ERROR: No links between rooms")

    return Graph(
        number_of_ants=number_of_ants,
        start_room=rooms[start_name],
        end_room=rooms[end_name],
        rooms=rooms,
        links=tunnels,
    )


def parse_input_file(filename: str | os.PathLike[str]) -> Graph:
    """Read a ``.txt`` colony description from disk."""
    path = os.fspath(filename)
    if not path.endswith(".txt"):
        raise LeminError("ERROR: Invalid file type, only .txt files are accepted")
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError:
        raise LeminError("ERROR: Could not open file") from None
    with handle:
        return parse_lines(handle)