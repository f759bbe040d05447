"""Generation and solving of random hexagonal mazes."""

from __future__ import annotations

import random
from collections import deque

from hexmaze.disjointset import DisjointSet
from hexmaze.geometry import DIRECTIONS, Cell, neighbor, opposite
from hexmaze.sampler import Sampler

Grid = list[list[int]]

_ALL_WALLS = int(Cell.ALL_WALLS)
_VISITED = int(Cell.VISITED)


def _dimensions(grid: Grid) -> tuple[int, int]:
    rows = len(grid)
    if rows == 0 or len(grid[0]) == 0:
        raise ValueError("maze must have at least one row and one column")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("all maze rows must have the same length")
    return rows, cols


def _inside(r: int, c: int, rows: int, cols: int) -> bool:
    return 0 <= r < rows and 0 <= c < cols


def _decode(edge: int, rows: int, cols: int) -> tuple[int, int, int]:
    """Split a sampled edge number into a cell and one of its sides."""
    col = edge % cols
    edge //= cols
    return edge % rows, col, edge // rows


def _open_wall(grid: Grid, r: int, c: int, direction: int) -> None:
    r2, c2 = neighbor(r, c, direction)
    grid[r][c] &= ~(1 << direction)
    grid[r2][c2] &= ~(1 << opposite(direction))


def generate_tree_maze(rows: int, cols: int, rng: random.Random | None = None) -> Grid:
    """Return a ``rows`` x ``cols`` maze whose open walls form a spanning tree."""
    if rows <= 0 or cols <= 0:
        raise ValueError(f"maze dimensions must be positive, got {rows}x{cols}")
    grid = [[_ALL_WALLS] * cols for _ in range(rows)]
    cells = DisjointSet(rows * cols)
    edges = Sampler(3 * rows * cols, rng)

    joined = 0
    while joined < rows * cols - 1:
        r1, c1, direction = _decode(edges.sample(), rows, cols)
        r2, c2 = neighbor(r1, c1, direction)
        if not _inside(r2, c2, rows, cols):
            continue
        first, second = r1 * cols + c1, r2 * cols + c2
        if cells.find(first) != cells.find(second):
            _open_wall(grid, r1, c1, direction)
            cells.join(first, second)
            joined += 1
    return grid


def remove_additional_walls(grid: Grid, count: int, rng: random.Random | None = None) -> None:
    """Open ``count - 1`` further interior walls of ``grid``, chosen at random."""
    rows, cols = _dimensions(grid)
    edges = Sampler(3 * rows * cols, rng)

    for _ in range(count - 1):
        while True:
            try:
                edge = edges.sample()
            except IndexError:
                raise ValueError("no interior walls left to remove") from None
            r1, c1, direction = _decode(edge, rows, cols)
            r2, c2 = neighbor(r1, c1, direction)
            if _inside(r2, c2, rows, cols) and grid[r1][c1] & (1 << direction):
                break
        _open_wall(grid, r1, c1, direction)


def _open_neighbors(grid: Grid, r: int, c: int, rows: int, cols: int):
    for direction in DIRECTIONS:
        r2, c2 = neighbor(r, c, direction)
        if _inside(r2, c2, rows, cols) and not grid[r][c] & (1 << direction):
            yield r2, c2


def find_path(grid: Grid) -> list[tuple[int, int]]:
    """Mark a shortest path from the top-left to the bottom-right cell as visited.

    Returns the cells of the path in order, starting at ``(0, 0)``.
    """
    rows, cols = _dimensions(grid)
    distance: list[list[int | None]] = [[None] * cols for _ in range(rows)]
    exit_cell = (rows - 1, cols - 1)
    distance[rows - 1][cols - 1] = 0
    pending = deque([exit_cell])

    while pending:
        r, c = pending.popleft()
        for r2, c2 in _open_neighbors(grid, r, c, rows, cols):
            if distance[r2][c2] is None:
                distance[r2][c2] = distance[r][c] + 1
                pending.append((r2, c2))

    if distance[0][0] is None:
        raise ValueError("the exit cannot be reached from the entrance")

    r, c = 0, 0
    grid[r][c] |= _VISITED
    path = [(r, c)]
    while distance[r][c] != 0:
        wanted = distance[r][c] - 1
        r, c = next(
            (r2, c2)
            for r2, c2 in _open_neighbors(grid, r, c, rows, cols)
            if distance[r2][c2] == wanted
        )
        grid[r][c] |= _VISITED
        path.append((r, c))
    return path