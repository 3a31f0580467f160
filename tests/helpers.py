import numpy as np

from game.board import Board
from game.status import GameStatus
from game.twenty48 import Twenty48Game


def make_game(values, score=0, move_count=0, status=GameStatus.PLAYABLE, seed=7):
    """Build a game on a fixed board with a seeded spawn source."""

    return Twenty48Game.restore(Board.from_array(values), [], move_count, score, status,
                                rng=np.random.default_rng(seed))


def non_zero_count(game):
    return int(np.count_nonzero(game.board.cells))
