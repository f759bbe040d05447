import random
from collections import deque

import pytest

from hexmaze.geometry import Cell, neighbor, opposite
from hexmaze.maze import find_path, generate_tree_maze, remove_additional_walls

WALL_MASK = int(Cell.ALL_WALLS)


def inside(grid, r, c):
    return 0 <= r < len(grid) and 0 <= c < len(grid[0])


def open_edges(grid):
    total = 0
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            for d in (1, 2, 3):
                r2, c2 = neighbor(r, c, d)
                if inside(grid, r2, c2) and not value & (1 << d):
                    total += 1
    return total


def reachable(grid, start=(0, 0)):
    seen = {start}
    todo = deque([start])
    while todo:
        r, c = todo.popleft()
        for d in range(6):
            r2, c2 = neighbor(r, c, d)
            if inside(grid, r2, c2) and not grid[r][c] & (1 << d) and (r2, c2) not in seen:
                seen.add((r2, c2))
                todo.append((r2, c2))
    return seen


@pytest.mark.parametrize("rows,cols,seed", [(1, 1, 0), (1, 5, 1), (4, 1, 2), (5, 7, 3), (10, 10, 4)])
def test_tree_maze_is_spanning_tree(rows, cols, seed):
    grid = generate_tree_maze(rows, cols, random.Random(seed))
    assert len(grid) == rows and all(len(row) == cols for row in grid)
    assert open_edges(grid) == rows * cols - 1
    assert len(reachable(grid)) == rows * cols


def test_walls_are_symmetric_and_border_closed():
    grid = generate_tree_maze(8, 9, random.Random(11))
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            for d in range(6):
                r2, c2 = neighbor(r, c, d)
                if inside(grid, r2, c2):
                    assert bool(value & (1 << d)) == bool(grid[r2][c2] & (1 << opposite(d)))
                else:
                    assert value & (1 << d)


def test_single_cell_has_all_walls():
    assert generate_tree_maze(1, 1, random.Random(0)) == [[WALL_MASK]]


def test_same_seed_gives_same_maze():
    first = generate_tree_maze(6, 6, random.Random(5))
    second = generate_tree_maze(6, 6, random.Random(5))
    assert open_edges(first) == 35
    assert len(reachable(first)) == 36
    assert [list(row) for row in first] == [list(row) for row in second]


@pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
def test_bad_dimensions_rejected(rows, cols):
    with pytest.raises(ValueError):
        generate_tree_maze(rows, cols)


@pytest.mark.parametrize("count", [2, 5, 10])
def test_remove_additional_walls_opens_count_minus_one(count):
    grid = generate_tree_maze(6, 6, random.Random(7))
    before = open_edges(grid)
    remove_additional_walls(grid, count, random.Random(8))
    assert open_edges(grid) == before + count - 1


@pytest.mark.parametrize("count", [0, 1])
def test_remove_small_count_changes_nothing(count):
    grid = generate_tree_maze(4, 4, random.Random(9))
    copy = [row[:] for row in grid]
    remove_additional_walls(grid, count, random.Random(1))
    assert grid == copy


def test_remove_too_many_walls_raises():
    grid = generate_tree_maze(2, 2, random.Random(3))
    with pytest.raises(ValueError):
        remove_additional_walls(grid, 100, random.Random(3))


def check_path(grid, path):
    assert path[0] == (0, 0)
    assert path[-1] == (len(grid) - 1, len(grid[0]) - 1)
    for (r, c), following in zip(path, path[1:]):
        assert any(
            neighbor(r, c, d) == following and not grid[r][c] & (1 << d) for d in range(6)
        )
    visited = {
        (r, c)
        for r, row in enumerate(grid)
        for c, value in enumerate(row)
        if value & Cell.VISITED
    }
    assert visited == set(path)


@pytest.mark.parametrize("seed", range(5))
def test_find_path_in_tree_maze(seed):
    grid = generate_tree_maze(7, 8, random.Random(seed))
    path = find_path(grid)
    check_path(grid, path)
    assert len(set(path)) == len(path)


def test_find_path_with_extra_openings():
    grid = generate_tree_maze(9, 9, random.Random(21))
    remove_additional_walls(grid, 30, random.Random(22))
    path = find_path(grid)
    check_path(grid, path)


def test_find_path_is_shortest_in_open_grid():
    rng = random.Random(4)
    grid = generate_tree_maze(5, 1, rng)
    path = find_path(grid)
    assert path == [(r, 0) for r in range(5)]


def test_find_path_single_cell():
    grid = [[WALL_MASK]]
    assert find_path(grid) == [(0, 0)]
    assert grid[0][0] & Cell.VISITED


def test_find_path_unreachable_exit():
    grid = [[WALL_MASK] * 3 for _ in range(3)]
    with pytest.raises(ValueError):
        find_path(grid)


def test_find_path_rejects_empty_grid():
    with pytest.raises(ValueError):
        find_path([])