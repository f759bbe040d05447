"""Hexagonal grid layout: cell flags, neighbours and drawing coordinates."""

from __future__ import annotations

import enum

MAX_ROWS = 50
MAX_COLS = 50
DRAW_E = 6
DRAW_V = 5
DRAW_X_LEFT = 54
DRAW_Y_TOP = 708

DIRECTIONS = range(6)


class Cell(enum.IntFlag):
    """Bits stored in a maze cell; wall bit ``1 << d`` faces direction ``d``."""

    WALL_UP = 0x01
    WALL_UP_RIGHT = 0x02
    WALL_DOWN_RIGHT = 0x04
    WALL_DOWN = 0x08
    WALL_DOWN_LEFT = 0x10
    WALL_UP_LEFT = 0x20
    VISITED = 0x40
    DEAD_END = 0x80
    ALL_WALLS = 0x3F


def compute_x(c: int) -> int:
    """Horizontal page coordinate of the centre of a cell in column ``c``."""
    return DRAW_X_LEFT + DRAW_E + (3 * DRAW_E * c) // 2


def compute_y(r: int, c: int) -> int:
    """Vertical page coordinate of the centre of the cell at ``(r, c)``."""
    return DRAW_Y_TOP - DRAW_V - 2 * DRAW_V * r - (c & 1) * DRAW_V


def _check_direction(direction: int) -> None:
    if direction not in DIRECTIONS:
        raise ValueError(f"direction must be in 0..5, got {direction}")


def neighbor(r: int, c: int, direction: int) -> tuple[int, int]:
    """Return the cell adjacent to ``(r, c)`` in ``direction`` (0=up, clockwise)."""
    _check_direction(direction)
    odd = c % 2
    if direction == 0:
        return r - 1, c
    if direction == 1:
        return r - 1 + odd, c + 1
    if direction == 2:
        return r + odd, c + 1
    if direction == 3:
        return r + 1, c
    if direction == 4:
        return r + odd, c - 1
    return r - 1 + odd, c - 1


def opposite(direction: int) -> int:
    """Return the direction pointing back the other way."""
    _check_direction(direction)
    return (direction + 3) % 6