# solong

A small top-down tile game. Walk across a map, pick up every collectible,
avoid the enemies patrolling the corridors, and step onto the exit once
nothing is left to collect.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window, loads the textures and
reads the keyboard.

## Playing

```
solong path/to/map.ber
```

The command takes exactly one argument: the map file. Textures are read
from a `textures/` directory in the current working directory, which must
hold `floor.xpm`, `wall.xpm`, `exit.xpm`, `player_death1.xpm`,
`player_idle1.xpm`, `player_idle2.xpm`, `collectible1.xpm`,
`collectible2.xpm`, `enemy1.xpm` and `enemy2.xpm`.

Controls:

| Key                  | Action       |
|----------------------|--------------|
| `W` / Up arrow       | move up      |
| `S` / Down arrow     | move down    |
| `A` / Left arrow     | move left    |
| `D` / Right arrow    | move right   |
| `Esc`                | quit         |

Every successful move prints the running move count. Picking up an item
prints how many remain. Walking onto the exit before every item is
collected is refused with a message; walking onto it afterwards prints
`You win in N moves!` and ends the game with status 0.

Enemies walk back and forth horizontally, turning round at walls and at the
edge of the map. An enemy that steps onto the player's tile kills the
player: the player is drawn with the death texture and further key presses
are ignored until the window is closed.

Errors (wrong number of arguments, a missing or empty map file, rows of
different lengths, no `P` on the map, a texture that cannot be loaded) are
printed to standard error as `Error` followed by the message, and the
command exits with status 1. Pressing `Esc` is reported the same way, with
the message `Exit requested`. Closing the window prints `Game closed.` and
exits with status 0.

## Map format

A map is a plain text file, one row per line, every row the same length:

| Character | Meaning          |
|-----------|------------------|
| `1`       | wall             |
| `0`       | floor            |
| `P`       | player start     |
| `C`       | collectible      |
| `E`       | exit             |
| `X`       | enemy start      |

Example:

```
1111111
1P0C0E1
10X0001
1111111
```

## Using the game logic directly

The rules live in `solong.game` and do not need a display:

```python
from solong.game import Game, Key, GameWon

game = Game.from_rows(["11111", "1PCE1", "11111"])
game.handle_input(Key.RIGHT)   # collects the item, returns True
try:
    game.handle_input(Key.RIGHT)
except GameWon as won:
    print("finished in", won.moves, "moves")
```

`Game.from_file(path)` builds a game from a map file. `Game.handle_input`
returns whether the player moved, raises `GameWon` on reaching the exit
with everything collected and `ExitRequested` for `Key.ESCAPE`.
`Game.tick()` advances the enemies and the animations by one frame;
`Game.update_enemies()` moves the enemies alone, and `Game.add_enemy(x, y)`
places another one. The state is held in plain attributes such as
`player_x`, `player_y`, `moves`, `collectibles`, `is_dead` and `enemies`.

Map reading and checks are in `solong.maps` (`read_map_file`,
`validate_map`, `count_collectibles`, `find_player`, `find_enemies`), which
raise `GameError` on bad input. Pixel buffers and sprite blitting are in
`solong.image` (`Image`, `draw_sprite`, `draw_sprite_flipped`). The window,
texture loading (`load_texture`, `load_textures`, `Textures`), drawing
(`render_map`) and key mapping (`key_from_pygame`) are in `solong.app`.

## What it does not do

- The map is only checked for equal row lengths and a player start. It is
  not checked for a closed outer wall, a single exit or start, unknown
  characters, or whether the collectibles and exit can be reached.
- The move count is printed to the terminal, not drawn in the window.
- Enemies only patrol left and right; there is no death animation and no
  restart after dying.

## Running the tests

```
pip install .[test]
pytest
```