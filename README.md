# lemin

`lemin` reads an ant farm description. It finds routes from the start room to
the end room, picks a set of routes that share no intermediate rooms, and
prints the ants' moves turn by turn.

## Installation

```
pip install .
```

## Usage

```
lemin farm.txt
```

The input file name must end in `.txt`. The program first prints the farm as
it was understood: the ant count, the start room, the other rooms, the end
room and the tunnels. Then it prints a blank line and one line for each turn.
Each move is written `L<ant>-<room>`, and ants are numbered from 1.

If something goes wrong, the program prints a message that starts with
`ERROR:` and exits with status 1. This happens when no file is given, when
the input is invalid, or when there is no route from start to end.

### Input format

```
3
##start
start 0 0
a 1 0
b 1 1
##end
end 2 0
start-a
a-end
start-b
b-end
```

- **Ant count.** The ant count is the first line that holds a positive
  integer. Blank lines, lines that begin with `#`, and any other lines before
  it are skipped. A count above 10000 is rejected.
- **Rooms.** A room is written `name x y`, where `x` and `y` are integers.
  A name may not begin with `#` or `L`. Two rooms may not share a name, and
  they may not share the same coordinates.
- **Start and end rooms.** `##start` marks the next line as the start room,
  and `##end` marks the next line as the end room. Case does not matter. The
  start room must come before the end room. Each one may be given only once,
  and the two must be different rooms.
- **Tunnels.** A tunnel is written `name1-name2`. It joins two rooms that are
  already defined and runs in both directions. A tunnel may not join a room to
  itself, and no tunnel may be given twice in either direction. At least one
  tunnel is required.
- **Comments.** Other lines that begin with `#` are ignored.

## Library use

```python
from lemin.parser import parse_input_file
from lemin.paths import find_all_paths, unique_paths
from lemin.movement import ant_movements

graph = parse_input_file("farm.txt")
paths = find_all_paths(graph.start_room.name, graph.end_room.name, graph.rooms)
solution = unique_paths(graph, paths)
for turn in ant_movements(solution, graph):
    print(turn)
```

- `lemin.parser.parse_lines` builds a `Graph` from any iterable of lines,
  without reading a file.
- `lemin.paths.find_all_paths` returns every simple path, shortest first.
- `lemin.paths.unique_paths` returns the largest set it finds, by a greedy
  search, of paths that share no intermediate rooms.
- `lemin.display.format_graph` and `lemin.display.format_paths` return the
  text that `print_graph` and `print_paths` write.
- The data types `Room`, `Graph`, `Path` and `Solution` are in `lemin.model`.

Invalid input raises `lemin.model.LeminError`. Its message is the `ERROR:`
text that the command prints.

## Running the tests

```
pip install .[test]
pytest
```