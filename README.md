# roguekit

Building blocks for roguelike games, in plain Python with no dependencies.

## What is inside

- `roguekit.colors` – the frozen `Color` dataclass (`r`, `g`, `b`, each 0–255) and a large palette of named colours such as `WHITE`, `BLACK`, `DARK_GREY` and `CornflowerBlue`.
- `roguekit.vchar` – `VChar`, a glyph with foreground and background colours.
- `roguekit.rng` – `RandomNumberGenerator`, a small linear congruential generator seeded from an int, a string or the clock, with `roll_dice(n, d)`.
- `roguekit.xml` – `XmlNode`, `XmlWriter` and `XmlReader` for a simple indented, XML-like save format, plus `from_string` for reading stored values back as `int`, `float`, `bool` or `str`.
- `roguekit.serialization` – `component_to_xml` for writing `(name, value)` pairs into an `XmlNode`, binary `serialize` / `deserialize` helpers, and `GzipFile` for gzip-compressed save files.
- `roguekit.astar` – a step-wise `AStarSearch` over user states that implement `AStarState`, with `SearchState` reporting progress.
- `roguekit.pathfinding` – `find_path(start, end, navigator)` on top of A*, returning a `NavigationPath`; describe your map with a `Navigator`.
- `roguekit.terminal` – `VirtualTerminal` (a dense grid of `VChar` cells) and `SparseTerminal` (freely placed `XChar` characters), plus the module-level `scale_factor` used when sizing terminals from pixels.

## Installing

```
pip install .
```

## A quick look

Dice:

```python
from roguekit.rng import RandomNumberGenerator

rng = RandomNumberGenerator(42)
damage = rng.roll_dice(3, 6)   # 3d6, between 3 and 18
```

The same seed always gives the same rolls. A string seed is hashed to a number; with no seed the current time is used.

Path finding on a grid:

```python
from roguekit.pathfinding import Navigator, find_path

class Grid(Navigator):
    def __init__(self, width, height, walls=()):
        self.width, self.height, self.walls = width, height, set(walls)

    def get_distance_estimate(self, pos, goal):
        return abs(pos[0] - goal[0]) + abs(pos[1] - goal[1])

    def get_successors(self, pos):
        x, y = pos
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if 0 <= nx < self.width and 0 <= ny < self.height and (nx, ny) not in self.walls:
                yield (nx, ny)

    def get_cost(self, pos, successor):
        return 1.0

path = find_path((0, 0), (3, 0), Grid(5, 5))
path.success        # True
list(path.steps)    # [(1, 0), (2, 0), (3, 0)] – the start is not included
```

`is_goal` and `is_same_state` default to plain equality; override them if your locations need something else. When no path exists, `success` is `False` and `steps` is empty.

For more control, drive `AStarSearch` yourself: call `set_start_and_goal_states`, then `search_step` until it stops returning `SearchState.SEARCHING`, and read `solution()`, `solution_reversed()` and `solution_cost()`. `open_list()` and `closed_list()` show the search frontier while it runs.

Save files in the XML-like format:

```python
import io
from roguekit.xml import XmlReader, XmlWriter
from roguekit.serialization import component_to_xml
from roguekit.colors import GOLD

out = io.StringIO()
writer = XmlWriter(out, "save")
player = writer.add_node("player")
component_to_xml(player, ("hp", 10), ("tint", GOLD))
writer.commit()

root = XmlReader(io.StringIO(out.getvalue())).get()
node = root.find("player")
node.val("hp", int)    # 10
node.color("tint")     # Color(r=229, g=191, b=0)
```

`XmlWriter` and `XmlReader` also take a file path instead of a stream.

Binary values, optionally compressed:

```python
from roguekit.serialization import GzipFile

with GzipFile("save.gz", "w") as f:
    f.serialize(42)
    f.serialize("hello")
    f.serialize([1, 2, 3])

with GzipFile("save.gz", "r") as f:
    f.deserialize(int)          # 42
    f.deserialize(str)          # "hello"
    f.deserialize(list[int])    # [1, 2, 3]
```

Integers are written as 32-bit, floats as 64-bit and lengths as 64-bit values, all little-endian. `Color` values take three bytes. The plain `serialize(stream, value)` and `deserialize(stream, kind)` functions do the same on any binary stream.

Terminals:

```python
from roguekit.terminal import VirtualTerminal

term = VirtualTerminal((8, 8))    # 8x8 pixel font cells
term.resize_chars(80, 25)
term.clear()
term.box(0, 0, 79, 24)
term.print_center(12, "Welcome, adventurer")
term.get_char(0, 0).glyph          # 218, the top-left box corner
```

`border()` draws a box round the whole terminal, `fill()` fills a rectangle with one glyph, and `resize_pixels()` sizes the grid from a pixel area using the font size and `scale_factor`.

## What it does not do

The terminals only hold cell data: there is no window, no font loading and no drawing to the screen, so a graphics back end has to render them. There is no entity or component store and no message passing between game systems; those are left to the game.

## Running the tests

```
pip install .[test]
pytest
```