"""Game state: player movement, collectibles, enemies and animations."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .maps import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    WALL,
    GameError,
    count_collectibles,
    find_enemies,
    find_player,
    read_map_file,
    validate_map,
)

TILE_SIZE = 64


class Key(Enum):
    """Keys the game reacts to."""

    UP = "w"
    DOWN = "s"
    LEFT = "a"
    RIGHT = "d"
    ESCAPE = "escape"


_STEPS = {
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
}


class GameWon(Exception):
    """Raised when the player reaches the exit with everything collected."""

    def __init__(self, moves: int) -> None:
        super().__init__(f"You win in {moves} moves!")
        self.moves = moves


class ExitRequested(GameError):
    """Raised when the player asks to quit."""


@dataclass
class Animation:
    """A looping sequence of frames that advances every ``frame_delay`` ticks."""

    frame_count: int
    frame_delay: int
    frames: tuple[Any, ...] = ()
    current_frame: int = 0
    frame_timer: int = 0

    def update(self) -> None:
        self.frame_timer += 1
        if self.frame_timer >= self.frame_delay:
            self.frame_timer = 0
            self.current_frame = (self.current_frame + 1) % self.frame_count

    def frame(self) -> Any:
        return self.frames[self.current_frame]


def _enemy_animation() -> Animation:
    return Animation(frame_count=2, frame_delay=5)


@dataclass
class Enemy:
    x: int
    y: int
    dir_x: int = 1
    dir_y: int = 0
    anim: Animation = field(default_factory=_enemy_animation)


@dataclass
class Game:
    """The whole state of one game on one map."""

    grid: list[list[str]]
    width: int
    height: int
    player_x: int
    player_y: int
    collectibles: int
    moves: int = 0
    facing_right: bool = True
    is_dead: bool = False
    enemies: list[Enemy] = field(default_factory=list)
    player_anim: Animation = field(
        default_factory=lambda: Animation(frame_count=2, frame_delay=60)
    )
    collectible_anim: Animation = field(
        default_factory=lambda: Animation(frame_count=2, frame_delay=60)
    )
    enemy_anim: Animation = field(default_factory=_enemy_animation)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> Game:
        width = validate_map(rows)
        grid = [list(row) for row in rows]
        player_x, player_y = find_player(grid)
        game = cls(
            grid=grid,
            width=width,
            height=len(grid),
            player_x=player_x,
            player_y=player_y,
            collectibles=count_collectibles(grid),
        )
        for x, y in find_enemies(grid):
            game.add_enemy(x, y)
        return game

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Game:
        return cls.from_rows(read_map_file(path))

    def add_enemy(self, x: int, y: int) -> Enemy:
        """Put a new enemy at the front of the enemy list and return it."""
        enemy = Enemy(x, y, anim=replace(self.enemy_anim))
        self.enemies.insert(0, enemy)
        return enemy

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def handle_input(self, key: Any) -> bool:
        """Apply one key press; return True if the player moved."""
        if self.is_dead:
            return False
        try:
            key = Key(key)
        except ValueError:
            return False
        if key is Key.ESCAPE:
            raise ExitRequested("Exit requested")
        dx, dy = _STEPS[key]
        if key is Key.LEFT:
            self.facing_right = False
        elif key is Key.RIGHT:
            self.facing_right = True
        new_x, new_y = self.player_x + dx, self.player_y + dy
        if not self._inside(new_x, new_y):
            return False
        tile = self.grid[new_y][new_x]
        if tile == WALL:
            return False
        if tile == COLLECTIBLE:
            self.grid[new_y][new_x] = FLOOR
            self.collectibles -= 1
            print(f"Collected one item. Remaining: {self.collectibles}")
        elif tile == EXIT:
            if self.collectibles == 0:
                won = GameWon(self.moves + 1)
                print(won)
                raise won
            print("You must collect all items before exiting!")
            return False
        self.player_x, self.player_y = new_x, new_y
        self.moves += 1
        print(f"Move: {self.moves}")
        return True

    def update_enemies(self) -> None:
        """Advance every enemy one step, bouncing off walls."""
        for enemy in self.enemies:
            enemy.anim.update()
            next_x, next_y = enemy.x + enemy.dir_x, enemy.y + enemy.dir_y
            if not self._inside(next_x, next_y) or self.grid[next_y][next_x] == WALL:
                enemy.dir_x = -enemy.dir_x
                enemy.dir_y = -enemy.dir_y
            else:
                enemy.x, enemy.y = next_x, next_y
            if (enemy.x, enemy.y) == (self.player_x, self.player_y):
                self.is_dead = True

    def tick(self) -> None:
        """Advance enemies and animations by one frame."""
        self.update_enemies()
        self.player_anim.update()
        self.collectible_anim.update()