"""Checks that a map is well formed and can be won."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Optional

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COIN = "C"
FILLED = "F"

_VALID = frozenset((WALL, FLOOR, PLAYER, EXIT, COIN))
_REACHABLE = frozenset((FLOOR, COIN, EXIT, PLAYER))


class MapError(ValueError):
    """Raised when a map breaks one of the rules."""


def is_rectangular(grid: Sequence[str]) -> bool:
    """True when the map has rows and they are all the same length."""
    if not grid:
        return False
    width = len(grid[0])
    return all(len(row) == width for row in grid)


def lateral_walls(grid: Sequence[str]) -> bool:
    """True when every row starts and ends with a wall."""
    return all(row[:1] == WALL and row[-1:] == WALL for row in grid)


def it_has_walls(grid: Sequence[str]) -> bool:
    """True when the map is enclosed: first and last rows all wall, sides walled."""
    if not grid:
        return False
    return (
        all(cell == WALL for cell in grid[0])
        and all(cell == WALL for cell in grid[-1])
        and lateral_walls(grid)
    )


def has_all_elements(grid: Sequence[str]) -> bool:
    """True for exactly one player, exactly one exit and at least one coin."""
    text = "".join(grid)
    return text.count(PLAYER) == 1 and text.count(EXIT) == 1 and text.count(COIN) >= 1


def has_valid_elements(grid: Sequence[str]) -> bool:
    """True when every cell is a wall, floor, player, exit or coin."""
    return all(cell in _VALID for row in grid for cell in row)


def find_player(grid: Sequence[Sequence[str]]) -> Optional[tuple[int, int]]:
    """Return the (x, y) of the first player cell, or None."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == PLAYER:
                return x, y
    return None


def flood_fill(cells: MutableSequence[MutableSequence[str]], x: int, y: int) -> None:
    """Mark with 'F' every cell reachable from (x, y) without crossing walls.

    cells must be mutable rows, such as lists of characters.
    """
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if not (0 <= cy < len(cells) and 0 <= cx < len(cells[cy])):
            continue
        if cells[cy][cx] not in _REACHABLE:
            continue
        cells[cy][cx] = FILLED
        stack.extend(((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)))


def check_remaining(cells: Sequence[Sequence[str]]) -> bool:
    """True when no coin or exit is left unmarked."""
    return not any(cell in (COIN, EXIT) for row in cells for cell in row)


def is_winnable(grid: Sequence[str]) -> bool:
    """True when the player can reach every coin and the exit."""
    start = find_player(grid)
    if start is None:
        return False
    cells = [list(row) for row in grid]
    flood_fill(cells, *start)
    return check_remaining(cells)


def validate(grid: Sequence[str]) -> None:
    """Raise MapError for the first rule the map breaks."""
    if not is_rectangular(grid):
        raise MapError("Error: Map Format is invalid")
    if not it_has_walls(grid):
        raise MapError("Error: Map is not closed")
    if not has_all_elements(grid):
        raise MapError("Error: Map must have 1 Player, 1 Exit and 1 Coin or more")
    if not has_valid_elements(grid):
        raise MapError("Error: Invalid Characters")
    if not is_winnable(grid):
        raise MapError("Error: Map is not winnable, GG FF15")