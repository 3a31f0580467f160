import numpy as np
import pytest

from game.board import Board
from game.game_2048 import Direction
from game.status import GameStatus
from game.twenty48 import Twenty48Game
from tests.helpers import make_game, non_zero_count
from utils.history import GameState


@pytest.mark.parametrize("rows,cols", [(3, 3), (4, 4), (3, 16), (16, 16), (7, 5)])
def test_fresh_game(rows, cols, rng):
    game = Twenty48Game(rows, cols, rng=rng)
    assert game.rows == rows
    assert game.cols == cols
    assert non_zero_count(game) == 2
    assert game.score == 0
    assert game.move_count == 0
    assert game.current_status == GameStatus.PLAYABLE
    assert game.game_status() == GameStatus.PLAYABLE
    assert not game.is_undo_possible()


def test_out_of_range_dimensions_fail_fast(rng):
    with pytest.raises(ValueError):
        Twenty48Game(2, 4, rng=rng)
    with pytest.raises(ValueError):
        Twenty48Game(4, 17, rng=rng)


def test_successful_move_updates_counters_and_spawns():
    game = make_game([[2, 0, 2, 4], [0] * 4, [0] * 4, [0] * 4])
    assert game.move_left()
    assert game.move_count == 1
    assert game.score == 4
    assert len(game.history) == 1
    # two tiles after the merge plus one spawned tile
    assert non_zero_count(game) == 3
    assert game.get_cell_value(0, 0) == 4


def test_no_op_move_changes_nothing():
    values = [[2, 4, 8, 16], [0] * 4, [0] * 4, [0] * 4]
    game = make_game(values, score=12, move_count=3)
    assert not game.move_left()
    assert not game.move_down()
    assert game.board.tolist() == values
    assert game.score == 12
    assert game.move_count == 3
    assert game.current_status == GameStatus.PLAYABLE
    assert len(game.history) == 0


def test_each_direction_helper():
    centre = [[0, 0, 0], [0, 2, 0], [0, 0, 0]]
    expected = {"up": (2, 1), "down": (0, 1), "left": (1, 0), "right": (1, 2)}
    for name, (row, col) in expected.items():
        game = make_game(centre)
        assert getattr(game, f"move_{name}")()
        assert game.get_cell_value(row, col) == 2
        assert game.get_cell_value(1, 1) in (0, 2, 4)
        assert game.move_count == 1


def test_history_snapshot_matches_pre_move_state():
    values = [[2, 2, 0], [0, 0, 0], [0, 4, 4]]
    game = make_game(values, score=40)
    assert game.move_left()
    state = game.history.pop()
    assert state.board.tolist() == values
    assert state.score == 40
    assert state.status == GameStatus.PLAYABLE


def test_undo_restores_previous_state(rng):
    game = Twenty48Game(4, 4, rng=rng)
    snapshots = []
    for direction in [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN] * 2:
        before = (game.board.tolist(), game.score, game.current_status)
        if game.move(direction):
            snapshots.append(before)

    assert game.move_count == len(snapshots)
    while snapshots:
        board, score, status = snapshots.pop()
        assert game.undo()
        assert game.board.tolist() == board
        assert game.score == score
        assert game.current_status == status
        assert game.move_count == len(snapshots)

    assert not game.undo()
    assert game.move_count == 0


def test_undo_on_empty_history_mutates_nothing(rng):
    game = Twenty48Game(4, 4, rng=rng)
    board = game.board.tolist()
    assert not game.undo()
    assert game.board.tolist() == board
    assert game.score == 0
    assert game.move_count == 0


def test_history_is_capped_at_ten(rng):
    # 8x8 never fills up within 15 moves, so some direction always moves
    game = Twenty48Game(8, 8, rng=rng)
    moves = 0
    directions = [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN]
    i = 0
    while moves < 15 and i < 200:
        if game.move(directions[i % 4]):
            moves += 1
        i += 1
    assert moves == 15
    assert len(game.history) == 10

    undone = 0
    while game.undo():
        undone += 1
    assert undone == 10
    assert game.move_count == 5


def test_reaching_2048_reports_win_once():
    game = make_game([[1024, 1024, 0], [0, 0, 0], [0, 0, 0]])
    assert game.move_left()
    assert game.get_cell_value(0, 0) == 2048
    assert game.game_status() == GameStatus.WIN
    assert game.game_status() == GameStatus.WON_BUT_STILL_PLAYABLE
    assert game.game_status() == GameStatus.WON_BUT_STILL_PLAYABLE


def test_undo_after_win_forgets_the_win():
    game = make_game([[1024, 1024, 0], [0, 0, 0], [0, 0, 0]])
    game.move_left()
    game.game_status()
    assert game.game_status() == GameStatus.WON_BUT_STILL_PLAYABLE
    assert game.undo()
    assert game.current_status == GameStatus.PLAYABLE
    assert game.game_status() == GameStatus.PLAYABLE


def test_locked_board_is_lost_and_cannot_move():
    game = make_game([[2, 4, 2], [4, 2, 4], [2, 4, 2]])
    assert game.game_status() == GameStatus.LOST
    for direction in Direction:
        assert not game.move(direction)
    assert game.game_status() == GameStatus.LOST


def test_move_that_only_merges_still_spawns():
    # full board, only a merge is possible
    game = make_game([[2, 2, 4], [4, 8, 16], [32, 64, 128]])
    assert game.move_left()
    assert game.score == 4
    assert non_zero_count(game) == 9
    assert game.board.tolist()[1:] == [[4, 8, 16], [32, 64, 128]]


def test_same_seed_gives_same_game():
    first = Twenty48Game(5, 4, rng=np.random.default_rng(3))
    second = Twenty48Game(5, 4, rng=np.random.default_rng(3))
    for direction in [Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT] * 3:
        assert first.move(direction) == second.move(direction)
    assert first.board == second.board
    assert first.score == second.score


def test_cell_access_is_bounds_checked(rng):
    game = Twenty48Game(3, 3, rng=rng)
    with pytest.raises(IndexError):
        game.get_cell_value(3, 0)


def test_restore_honours_win_tile_and_history_capacity():
    states = [GameState.capture(Board.from_array([[v, 0, 0], [0, 0, 0], [0, 0, 0]]),
                                v, GameStatus.PLAYABLE) for v in (2, 4, 8)]
    game = Twenty48Game.restore(Board.from_array([[32, 32, 0], [0, 0, 0], [0, 0, 0]]),
                                states, 3, 8, GameStatus.PLAYABLE,
                                rng=np.random.default_rng(0), win_tile=64, history_capacity=2)
    assert [state.score for state in game.history] == [4, 8]

    assert game.move_left()
    assert game.game_status() == GameStatus.WIN
    assert len(game.history) == 2
    assert [state.score for state in game.history] == [8, 8]
