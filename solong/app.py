"""Window, textures and the main loop of the game."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import pygame

from .game import TILE_SIZE, Game, GameWon, Key
from .image import Image, draw_sprite, draw_sprite_flipped
from .maps import COLLECTIBLE, EXIT, WALL, GameError

FPS = 60
TEXTURE_DIR = "textures"

_KEYS = {
    pygame.K_w: Key.UP,
    pygame.K_UP: Key.UP,
    pygame.K_s: Key.DOWN,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_a: Key.LEFT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_d: Key.RIGHT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESCAPE,
}


@dataclass(frozen=True)
class Textures:
    """Every image the game draws, animations as tuples of frames."""

    floor: Image
    wall: Image
    exit: Image
    player_dead: Image
    player_frames: tuple[Image, ...]
    collectible_frames: tuple[Image, ...]
    enemy_frames: tuple[Image, ...]


def _image_from_surface(surface: pygame.Surface) -> Image:
    width, height = surface.get_size()
    pixels = []
    for y in range(height):
        for x in range(width):
            color = surface.get_at((x, y))
            pixels.append((color.a << 24) | (color.r << 16) | (color.g << 8) | color.b)
    return Image(width, height, pixels)


def _surface_from_image(image: Image) -> pygame.Surface:
    data = bytearray()
    for pixel in image.pixels:
        data += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
    return pygame.image.frombuffer(bytes(data), (image.width, image.height), "RGB")


def load_texture(path: str | os.PathLike[str]) -> Image:
    """Load an image file into an :class:`Image`."""
    try:
        surface = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as exc:
        raise GameError("Failed to load texture") from exc
    return _image_from_surface(surface)


def load_textures(directory: str | os.PathLike[str]) -> Textures:
    """Load the full texture set from ``directory``."""
    base = Path(directory)

    def load(name: str) -> Image:
        return load_texture(base / name)

    return Textures(
        floor=load("floor.xpm"),
        wall=load("wall.xpm"),
        exit=load("exit.xpm"),
        player_dead=load("player_death1.xpm"),
        player_frames=(load("player_idle1.xpm"), load("player_idle2.xpm")),
        collectible_frames=(load("collectible1.xpm"), load("collectible2.xpm")),
        enemy_frames=(load("enemy1.xpm"), load("enemy2.xpm")),
    )


def render_map(game: Game, textures: Textures, screen: Image) -> None:
    """Draw tiles, enemies and the player onto ``screen``."""
    for y, row in enumerate(game.grid):
        for x, tile in enumerate(row):
            px, py = x * TILE_SIZE, y * TILE_SIZE
            draw_sprite(screen, textures.floor, px, py)
            if tile == WALL:
                draw_sprite(screen, textures.wall, px, py)
            elif tile == COLLECTIBLE:
                frame = textures.collectible_frames[game.collectible_anim.current_frame]
                draw_sprite(screen, frame, px, py)
            elif tile == EXIT:
                draw_sprite(screen, textures.exit, px, py)

    for enemy in game.enemies:
        frame = textures.enemy_frames[enemy.anim.current_frame]
        draw_sprite(screen, frame, enemy.x * TILE_SIZE, enemy.y * TILE_SIZE)

    if game.is_dead:
        player = textures.player_dead
    else:
        player = textures.player_frames[game.player_anim.current_frame]
    px, py = game.player_x * TILE_SIZE, game.player_y * TILE_SIZE
    if game.facing_right:
        draw_sprite(screen, player, px, py)
    else:
        draw_sprite_flipped(screen, player, px, py)


def key_from_pygame(keycode: int) -> Key | None:
    """Map a pygame key code to a game key, or None if the game ignores it."""
    return _KEYS.get(keycode)


def _run(game: Game, directory: Path) -> int:
    pygame.init()
    try:
        size = (game.width * TILE_SIZE, game.height * TILE_SIZE)
        window = pygame.display.set_mode(size)
        pygame.display.set_caption("solong")
        textures = load_textures(directory)
        screen = Image.blank(*size)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    print("Game closed.")
                    return 0
                if event.type == pygame.KEYDOWN:
                    key = key_from_pygame(event.key)
                    if key is not None:
                        game.handle_input(key)
            game.tick()
            render_map(game, textures, screen)
            window.blit(_surface_from_image(screen), (0, 0))
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named in ``argv``; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 1:
            raise GameError("Usage: solong <map.ber>")
        game = Game.from_file(args[0])
        return _run(game, Path(TEXTURE_DIR))
    except GameWon:
        return 0
    except GameError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())