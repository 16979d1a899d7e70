import pytest

from solong.game import KEY_UP, Game, MoveResult, Tile

CORRIDOR = [
    "1111111",
    "1P0C0E1",
    "1111111",
]

ROOM = [
    "11111",
    "1C0E1",
    "1P001",
    "11111",
]


def test_from_grid_dimensions_and_counts():
    game = Game.from_grid(CORRIDOR)
    assert game.width == len(CORRIDOR[0])
    assert game.height == len(CORRIDOR)
    assert game.coins == 1
    assert game.players == 1
    assert game.exits == 1


def test_from_grid_player_position():
    game = Game.from_grid(ROOM)
    assert (game.player_x, game.player_y) == (1, 2)
    assert game.tile_at(game.player_x, game.player_y) == "P"


def test_from_grid_rejects_empty_and_playerless():
    with pytest.raises(ValueError):
        Game.from_grid([])
    with pytest.raises(ValueError):
        Game.from_grid(["111", "1C1", "111"])


@pytest.mark.parametrize(
    "x, y, tile",
    [
        (0, 0, Tile.WALL),
        (1, 1, Tile.PLAYER),
        (2, 1, Tile.FLOOR),
        (3, 1, Tile.COIN),
        (5, 1, Tile.EXIT),
    ],
)
def test_tile_at_matches_tile_values(x, y, tile):
    game = Game.from_grid(CORRIDOR)
    assert Tile(game.tile_at(x, y)) is tile


def test_count_accepts_tile_or_char():
    game = Game.from_grid(CORRIDOR)
    assert game.count(Tile.WALL) == game.count("1")
    assert game.count(Tile.WALL) == "".join(CORRIDOR).count("1")


def test_move_into_wall_is_blocked():
    game = Game.from_grid(CORRIDOR)
    before = game.rows
    assert game.move_player(0, 1) is MoveResult.BLOCKED
    assert game.rows == before
    assert (game.player_x, game.player_y) == (1, 1)


def test_move_onto_floor():
    game = Game.from_grid(CORRIDOR)
    assert game.move_player(1, 2) is MoveResult.MOVED
    assert (game.player_x, game.player_y) == (2, 1)
    assert game.tile_at(1, 1) == "0"
    assert game.tile_at(2, 1) == "P"
    assert game.count(Tile.PLAYER) == 1


def test_collecting_coin_then_winning():
    game = Game.from_grid(CORRIDOR)
    game.move_player(1, 2)
    assert game.move_player(1, 3) is MoveResult.MOVED
    assert game.coins == 0
    assert game.count(Tile.COIN) == 0
    game.move_player(1, 4)
    assert game.move_player(1, 5) is MoveResult.WON
    assert (game.player_x, game.player_y) == (4, 1)


def test_exit_with_coins_left_is_stepped_on():
    grid = ["1111111", "1PE0C01", "1111111"]
    game = Game.from_grid(grid)
    assert game.move_player(1, 2) is MoveResult.MOVED
    assert game.count(Tile.EXIT) == 0
    assert game.coins == 1


def test_move_outside_map_raises():
    game = Game.from_grid(CORRIDOR)
    with pytest.raises(IndexError):
        game.move_player(-1, 1)


def test_handle_key_up_moves_player():
    game = Game.from_grid(ROOM)
    assert game.handle_key(KEY_UP) is MoveResult.MOVED
    assert (game.player_x, game.player_y) == (1, 1)
    assert game.coins == 0


def test_handle_other_key_does_nothing():
    game = Game.from_grid(ROOM)
    before = game.rows
    assert game.handle_key(KEY_UP + 1) is None
    assert game.rows == before


def test_format_map_frames_rows():
    game = Game.from_grid(ROOM)
    text = game.format_map()
    assert text.startswith("\n----- MAP CONTENT -----\n")
    assert text.endswith("-----------------------\n")
    body = text[len("\n----- MAP CONTENT -----\n"):-len("-----------------------\n")]
    assert body.splitlines() == ROOM