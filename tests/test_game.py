import pytest

from solong.game import (
    Animation,
    Enemy,
    ExitRequested,
    Game,
    GameWon,
    Key,
)
from solong.maps import GameError

BASIC = [
    "111111",
    "1P0C01",
    "100E01",
    "111111",
]


def test_from_rows_sets_up_state():
    game = Game.from_rows(BASIC)
    assert (game.player_x, game.player_y) == (1, 1)
    assert game.width == len(BASIC[0])
    assert game.height == len(BASIC)
    assert game.collectibles == 1
    assert game.moves == 0
    assert game.facing_right is True


def test_from_rows_without_player():
    with pytest.raises(GameError, match="Player start position not found."):
        Game.from_rows(["111", "101", "111"])


def test_from_rows_invalid_map():
    with pytest.raises(GameError, match="Invalid map"):
        Game.from_rows(["1111", "1P1"])


def test_from_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(BASIC) + "\n")
    game = Game.from_file(path)
    assert game.grid == [list(row) for row in BASIC]


def test_move_right_counts_and_prints(capsys):
    game = Game.from_rows(BASIC)
    assert game.handle_input(Key.RIGHT) is True
    assert (game.player_x, game.player_y) == (2, 1)
    assert game.moves == 1
    assert "Move: 1" in capsys.readouterr().out


def test_character_keys_accepted():
    game = Game.from_rows(BASIC)
    assert game.handle_input("s") is True
    assert (game.player_x, game.player_y) == (1, 2)


def test_wall_blocks_but_left_turns_player():
    game = Game.from_rows(BASIC)
    assert game.handle_input(Key.LEFT) is False
    assert (game.player_x, game.player_y) == (1, 1)
    assert game.facing_right is False
    assert game.moves == 0


def test_unknown_key_ignored():
    game = Game.from_rows(BASIC)
    assert game.handle_input("q") is False
    assert game.handle_input(12345) is False
    assert game.moves == 0


def test_collecting_clears_tile(capsys):
    game = Game.from_rows(BASIC)
    game.handle_input(Key.RIGHT)
    game.handle_input(Key.RIGHT)
    assert game.collectibles == 0
    assert game.grid[1][3] == "0"
    assert "Collected one item. Remaining: 0" in capsys.readouterr().out


def test_exit_blocked_until_collected(capsys):
    game = Game.from_rows(BASIC)
    game.handle_input(Key.DOWN)
    game.handle_input(Key.RIGHT)
    assert game.handle_input(Key.RIGHT) is False
    assert (game.player_x, game.player_y) == (2, 2)
    assert "You must collect all items before exiting!" in capsys.readouterr().out


def test_winning_raises_with_move_count():
    game = Game.from_rows(BASIC)
    game.handle_input(Key.RIGHT)
    game.handle_input(Key.RIGHT)
    with pytest.raises(GameWon) as info:
        game.handle_input(Key.DOWN)
    assert info.value.moves == game.moves + 1


def test_escape_requests_exit():
    game = Game.from_rows(BASIC)
    with pytest.raises(ExitRequested, match="Exit requested"):
        game.handle_input(Key.ESCAPE)


def test_dead_player_ignores_input():
    game = Game.from_rows(BASIC)
    game.is_dead = True
    assert game.handle_input(Key.RIGHT) is False
    assert game.handle_input(Key.ESCAPE) is False
    assert (game.player_x, game.player_y) == (1, 1)


def test_animation_advances_after_delay():
    anim = Animation(frame_count=2, frame_delay=2, frames=("a", "b"))
    anim.update()
    assert anim.frame() == "a"
    anim.update()
    assert anim.frame() == "b"
    assert anim.frame_timer == 0
    anim.update()
    anim.update()
    assert anim.frame() == "a"


def test_add_enemy_prepends_with_own_animation():
    game = Game.from_rows(BASIC)
    first = game.add_enemy(2, 2)
    second = game.add_enemy(4, 2)
    assert game.enemies == [second, first]
    first.anim.update()
    assert first.anim.frame_timer != second.anim.frame_timer
    assert game.enemy_anim.frame_timer == 0


def test_enemies_found_in_reverse_scan_order():
    game = Game.from_rows(["11111", "1X0P1", "10X01", "11111"])
    assert [(e.x, e.y) for e in game.enemies] == [(2, 2), (1, 1)]


def test_enemy_bounces_off_wall():
    game = Game.from_rows(["1111", "1X01", "1P01", "1111"])
    enemy = game.enemies[0]
    game.update_enemies()
    assert (enemy.x, enemy.y) == (2, 1)
    game.update_enemies()
    assert (enemy.x, enemy.y) == (2, 1)
    assert enemy.dir_x == -1
    assert game.is_dead is False


def test_enemy_kills_player():
    game = Game.from_rows(["11111", "1X0P1", "11111"])
    game.update_enemies()
    assert game.is_dead is False
    game.update_enemies()
    assert (game.enemies[0].x, game.enemies[0].y) == (game.player_x, game.player_y)
    assert game.is_dead is True


def test_tick_advances_animations_and_enemies():
    game = Game.from_rows(["11111", "1X0P1", "11111"])
    game.player_anim = Animation(frame_count=2, frame_delay=1)
    game.collectible_anim = Animation(frame_count=2, frame_delay=1)
    game.tick()
    assert game.player_anim.current_frame == 1
    assert game.collectible_anim.current_frame == 1
    assert game.enemies[0].anim.frame_timer == 1


def test_enemy_defaults():
    enemy = Enemy(3, 4)
    assert (enemy.dir_x, enemy.dir_y) == (1, 0)
    assert enemy.anim.frame_delay == 5