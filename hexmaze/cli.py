"""Command line entry point: build a random hexagonal maze and write it as PostScript."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from hexmaze.geometry import MAX_COLS, MAX_ROWS
from hexmaze.maze import find_path, generate_tree_maze, remove_additional_walls
from hexmaze.postscript import write_maze

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_OUTPUT = "maze.ps"


def _to_int(text: str) -> int:
    """Read a leading integer from ``text``, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the maze generator; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(
            "Usage: hexmaze <rows> <columns> <removeWalls (Optional)>",
            file=sys.stderr,
        )
        return 1

    rows = _to_int(args[0])
    cols = _to_int(args[1])
    walls = _to_int(args[2]) if len(args) > 2 else 0

    if not (0 < rows <= MAX_ROWS and 0 < cols <= MAX_COLS):
        print(f"Maze dimensions must be between 1 and {MAX_ROWS}", file=sys.stderr)
        return 1

    print(f"Generating {rows}x{cols} maze...")
    grid = generate_tree_maze(rows, cols)
    print(f"Maze generated. Removing {walls} walls...")
    try:
        remove_additional_walls(grid, walls)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print("Finding path...")
    find_path(grid)
    print(f"Writing to {_OUTPUT}...")
    try:
        write_maze(grid, _OUTPUT)
    except OSError:
        print(f"Error: cannot open {_OUTPUT}")
        return 1
    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())