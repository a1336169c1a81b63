"""Reading and checking ``.ber`` map files."""

from __future__ import annotations

import os
from collections.abc import Sequence

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "X"


class GameError(Exception):
    """A fatal error that ends the game."""


def read_map_file(path: str | os.PathLike[str]) -> list[str]:
    """Read a map file and return its rows.

    The number of rows taken is the number of non-empty lines in the file;
    that many lines are then read from the top, blank ones included.
    """
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise GameError("Failed to open map file") from exc
    lines = content.split("\n")
    count = sum(1 for line in lines if line)
    if count == 0:
        raise GameError("Empty map file")
    return lines[:count]


def validate_map(rows: Sequence[Sequence[str]]) -> int:
    """Check that every row has the same length and return that width."""
    if not rows:
        raise GameError("Invalid map")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise GameError("Invalid map")
    return width


def count_collectibles(rows: Sequence[Sequence[str]]) -> int:
    """Count the collectible tiles on the map."""
    return sum(1 for row in rows for tile in row if tile == COLLECTIBLE)


def find_player(rows: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Return the ``(x, y)`` of the first player start, scanning row by row."""
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile == PLAYER:
                return x, y
    raise GameError("Player start position not found.")


def find_enemies(rows: Sequence[Sequence[str]]) -> list[tuple[int, int]]:
    """Return the ``(x, y)`` of every enemy tile, in scan order."""
    return [
        (x, y)
        for y, row in enumerate(rows)
        for x, tile in enumerate(row)
        if tile == ENEMY
    ]