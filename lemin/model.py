"""Core data types describing an ant colony."""

from __future__ import annotations

from dataclasses import dataclass, field


class LeminError(Exception):
    """Raised when the colony description is invalid or cannot be solved."""


@dataclass(eq=False)
class Room:
    """A room of the colony; rooms compare and hash by identity."""

    name: str
    x: int
    y: int
    is_start: bool = False
    is_end: bool = False
    connected_rooms: list[Room] = field(default_factory=list, repr=False)

    def connect(self, other: Room) -> None:
        """Join this room and ``other`` with a two-way tunnel."""
        self.connected_rooms.append(other)
        other.connected_rooms.append(self)


@dataclass
class Graph:
    """A parsed colony: ants, rooms, the start and end rooms and the links."""

    number_of_ants: int
    start_room: Room
    end_room: Room
    rooms: dict[str, Room]
    links: list[str]


@dataclass
class Path:
    """An ordered walk of rooms from the start room to the end room."""

    rooms: list[Room]

    def names(self) -> list[str]:
        """Return the names of the rooms along the path."""
        return [room.name for room in self.rooms]


@dataclass
class Solution:
    """The set of paths the ants are sent along."""

    paths: list[Path] = field(default_factory=list)