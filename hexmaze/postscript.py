"""PostScript rendering of hexagonal mazes."""

from __future__ import annotations

import os
from collections.abc import Sequence

from hexmaze.geometry import (
    DRAW_E,
    DRAW_V,
    Cell,
    compute_x,
    compute_y,
    neighbor,
)

Grid = Sequence[Sequence[int]]

# Order in which open sides are traced: up, down, up-right, down-right, up-left, down-left.
_TRACE_ORDER = (0, 3, 1, 2, 5, 4)
_ON_PATH = Cell.VISITED | Cell.DEAD_END

_HALF_E = DRAW_E // 2

_SOLUTION_STYLE = (
    "0 0 1 setrgbcolor gsave currentlinewidth 5 mul setlinewidth  1 setlinecap\n"
)
_DEAD_END_STYLE = "1 0 0 setrgbcolor\n"
_TITLE = "/Arial findfont 20 scalefont setfont\n54 730 moveto ({}) show\n"


def _dimensions(grid: Grid) -> tuple[int, int]:
    rows = len(grid)
    if rows == 0 or len(grid[0]) == 0:
        raise ValueError("maze must have at least one row and one column")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("all maze rows must have the same length")
    return rows, cols


def draw_line(x1: int, y1: int, x2: int, y2: int) -> str:
    """Return a PostScript command stroking a line between two points."""
    return f"newpath {x1} {y1} moveto {x2} {y2} lineto stroke\n"


def _walls(grid: Grid, rows: int, cols: int) -> list[str]:
    out: list[str] = []
    # Up-right, down-right and down walls of every cell.
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            x, y = compute_x(c), compute_y(r, c)
            if value & Cell.WALL_UP_RIGHT:
                out.append(draw_line(x + _HALF_E, y + DRAW_V, x + DRAW_E, y))
            if value & Cell.WALL_DOWN_RIGHT:
                out.append(draw_line(x + DRAW_E, y, x + _HALF_E, y - DRAW_V))
            if value & Cell.WALL_DOWN:
                out.append(draw_line(x + _HALF_E, y - DRAW_V, x - _HALF_E, y - DRAW_V))

    # The remaining walls are all on the outside of the maze.
    x = compute_x(0)
    for r in range(rows):
        y = compute_y(r, 0)
        out.append(draw_line(x - _HALF_E, y + DRAW_V, x - DRAW_E, y))
        out.append(draw_line(x - DRAW_E, y, x - _HALF_E, y - DRAW_V))

    for c in range(cols):
        x, y = compute_x(c), compute_y(0, c)
        out.append(draw_line(x - _HALF_E, y + DRAW_V, x + _HALF_E, y + DRAW_V))

    for c in range(2, cols, 2):
        x, y = compute_x(c), compute_y(0, c)
        out.append(draw_line(x - _HALF_E, y + DRAW_V, x - DRAW_E, y))

    for c in range(1, cols, 2):
        x, y = compute_x(c), compute_y(rows - 1, c)
        out.append(draw_line(x - _HALF_E, y - DRAW_V, x - DRAW_E, y))
    return out


def _dead_ends(grid: Grid) -> list[str]:
    out = [_DEAD_END_STYLE]
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if not value & Cell.DEAD_END:
                continue
            x, y = compute_x(c), compute_y(r, c)
            for direction in _TRACE_ORDER:
                if value & (1 << direction):
                    continue
                r2, c2 = neighbor(r, c, direction)
                out.append(draw_line(x, y, compute_x(c2), compute_y(r2, c2)))
    return out


def _solution(grid: Grid, rows: int, cols: int) -> list[str]:
    out = [_SOLUTION_STYLE]
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value & _ON_PATH != Cell.VISITED:
                continue
            x, y = compute_x(c), compute_y(r, c)
            for direction in _TRACE_ORDER:
                if value & (1 << direction):
                    continue
                r2, c2 = neighbor(r, c, direction)
                if not (0 <= r2 < rows and 0 <= c2 < cols):
                    continue
                if grid[r2][c2] & _ON_PATH != Cell.VISITED:
                    continue
                mid_x = (x + compute_x(c2)) // 2
                mid_y = (y + compute_y(r2, c2)) // 2
                out.append(draw_line(x, y, mid_x, mid_y))
    out.append("grestore\n")
    return out


def draw_maze(grid: Grid, draw_solution: bool = False, draw_dead_ends: bool = False) -> str:
    """Return the PostScript drawing the maze, optionally with dead ends and solution."""
    rows, cols = _dimensions(grid)
    parts = ["0.25 setlinewidth\n"]
    parts.extend(_walls(grid, rows, cols))
    if draw_dead_ends:
        parts.extend(_dead_ends(grid))
    if draw_solution:
        parts.extend(_solution(grid, rows, cols))
    return "".join(parts)


def render_document(grid: Grid) -> str:
    """Return a two-page PostScript document: the maze, then the maze with its solution."""
    return "".join(
        [
            "%!PS-Adobe-2.0\n\n%%Pages: 2\n%%Page: 1 1\n",
            _TITLE.format("Random Maze"),
            draw_maze(grid, False, False),
            "showpage\n",
            "%%Page: 2 2\n",
            _TITLE.format("Random Maze With Solution"),
            draw_maze(grid, True, False),
            "showpage\n",
        ]
    )


def write_maze(grid: Grid, path: str | os.PathLike[str] = "maze.ps") -> None:
    """Write the PostScript document for ``grid`` to ``path``."""
    document = render_document(grid)
    with open(path, "w", encoding="ascii") as handle:
        handle.write(document)