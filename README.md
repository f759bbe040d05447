# hexmaze

hexmaze builds random mazes on a grid of hexagonal cells. It finds a shortest
route from the top-left cell to the bottom-right cell and writes the maze as a
two-page PostScript document. The first page shows the bare maze. The second
page shows the maze with the route drawn in.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Command line

```
hexmaze ROWS COLUMNS [EXTRA_WALLS]
```

- `ROWS`, `COLUMNS`: the size of the maze. Each must be between 1 and 50.
- `EXTRA_WALLS` (optional, default 0): the basic maze has exactly one route
  between any two cells. Removing more walls opens loops. The program removes
  one fewer wall than this number, chosen at random among interior walls. If
  the maze has too few walls left, the program reports an error.

Each argument is read as its leading integer; text with no leading integer
counts as 0. The program prints its progress, writes `maze.ps` to the current
directory, and exits with status 0 on success or 1 on a usage error, a bad
size, or a file that cannot be written.

```
hexmaze 20 30 10
```

## Library use

```python
import random

from hexmaze.maze import generate_tree_maze, remove_additional_walls, find_path
from hexmaze.postscript import write_maze

rng = random.Random(42)
grid = generate_tree_maze(10, 12, rng)
remove_additional_walls(grid, 5, rng)
path = find_path(grid)   # list of (row, col) cells from (0, 0) to the exit
write_maze(grid, "maze.ps")
```

A maze is a list of rows, each a list of integer cell values. The bits of a
cell are the flags of `hexmaze.geometry.Cell`: six wall bits (`WALL_UP`,
`WALL_UP_RIGHT`, `WALL_DOWN_RIGHT`, `WALL_DOWN`, `WALL_DOWN_LEFT`,
`WALL_UP_LEFT`), plus `VISITED`, which `find_path` sets on the cells of the
route, and `DEAD_END`.

- `hexmaze.maze`: `generate_tree_maze(rows, cols, rng=None)`,
  `remove_additional_walls(grid, count, rng=None)` and `find_path(grid)`.
  `find_path` raises `ValueError` when the exit cannot be reached.
- `hexmaze.postscript`: `draw_line`, `draw_maze(grid, draw_solution=False,
  draw_dead_ends=False)` and `render_document(grid)` return PostScript text;
  `write_maze(grid, path="maze.ps")` saves the document to a file.
- `hexmaze.geometry`: the `Cell` flags, `neighbor(r, c, direction)` for the
  six directions (0 is up, then clockwise), `opposite(direction)`, and the
  page coordinates `compute_x(c)` and `compute_y(r, c)`.
- `hexmaze.disjointset.DisjointSet`: union-find with path compression and
  union by rank (`find`, `join`).
- `hexmaze.sampler.Sampler`: draws distinct integers from `range(n)` without
  replacement (`sample`, `len()`).

## What it does not do

The output is PostScript only; hexmaze does not display mazes or produce
other image formats. The command always writes to `maze.ps` and takes no
option for another file name. Nothing in the package marks cells as
`DEAD_END`; dead ends are drawn only if the caller sets that flag and asks
`draw_maze` for them.

## Running the tests

```
pytest
```