import pytest

from lemin.model import LeminError
from lemin.parser import parse_lines
from lemin.paths import find_all_paths, unique_paths

DIAMOND = [
    "2",
    "##start",
    "start 0 0",
    "a 1 0",
    "b 1 1",
    "##end",
    "end 2 0",
    "start-a",
    "a-end",
    "start-b",
    "b-end",
    "a-b",
]


def _graph(lines):
    return parse_lines(lines)


def _paths(graph):
    return find_all_paths(graph.start_room.name, graph.end_room.name, graph.rooms)


def test_all_paths_of_diamond():
    graph = _graph(DIAMOND)
    found = {tuple(path.names()) for path in _paths(graph)}
    assert found == {
        ("start", "a", "end"),
        ("start", "b", "end"),
        ("start", "a", "b", "end"),
        ("start", "b", "a", "end"),
    }


def test_paths_are_shortest_first_and_simple():
    graph = _graph(DIAMOND)
    paths = _paths(graph)
    lengths = [len(path.rooms) for path in paths]
    assert lengths == sorted(lengths)
    for path in paths:
        assert path.rooms[0] is graph.start_room
        assert path.rooms[-1] is graph.end_room
        assert len(set(path.names())) == len(path.rooms)


def test_consecutive_rooms_are_connected():
    graph = _graph(DIAMOND)
    for path in _paths(graph):
        for here, there in zip(path.rooms, path.rooms[1:]):
            assert there in here.connected_rooms


def test_missing_start_room():
    graph = _graph(DIAMOND)
    with pytest.raises(LeminError, match="ERROR: Missing start room"):
        find_all_paths("nowhere", "end", graph.rooms)


def test_missing_end_room():
    graph = _graph(DIAMOND)
    with pytest.raises(LeminError, match="ERROR: Missing end room"):
        find_all_paths("start", "nowhere", graph.rooms)


def test_no_path():
    lines = ["1", "##start", "s 0 0", "a 1 1", "##end", "e 2 2", "c 3 3", "s-a", "e-c"]
    graph = _graph(lines)
    with pytest.raises(LeminError, match="ERROR: No path found from start room to end room"):
        _paths(graph)


def test_unique_paths_are_disjoint():
    graph = _graph(DIAMOND)
    solution = unique_paths(graph, _paths(graph))
    assert len(solution.paths) == 2
    seen = set()
    for path in solution.paths:
        interior = set(path.names()[1:-1])
        assert seen.isdisjoint(interior)
        seen |= interior


def test_unique_paths_start_with_first_path():
    graph = _graph(DIAMOND)
    paths = _paths(graph)
    solution = unique_paths(graph, paths)
    assert solution.paths[0] is paths[0]


def test_unique_paths_empty_input():
    graph = _graph(DIAMOND)
    assert unique_paths(graph, []).paths == []


def test_direct_path_is_always_compatible():
    lines = ["1", "##start", "s 0 0", "a 1 1", "##end", "e 2 2", "s-e", "s-a", "a-e"]
    graph = _graph(lines)
    paths = _paths(graph)
    solution = unique_paths(graph, paths)
    assert len(solution.paths) == len(paths)
    assert solution.paths[0].names() == ["s", "e"]


def test_single_chain_gives_single_path():
    lines = ["1", "##start", "s 0 0", "a 1 1", "##end", "e 2 2", "s-a", "a-e"]
    graph = _graph(lines)
    solution = unique_paths(graph, _paths(graph))
    assert [path.names() for path in solution.paths] == [["s", "a", "e"]]