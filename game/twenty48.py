import numpy as np

from config import GameConfig
from game.board import Board
from game.game_2048 import Direction, apply_move
from game.spawner import Spawner
from game.status import GameStatus, evaluate_status
from utils.history import GameState, History


class Twenty48Game:
    """
    一局2048游戏
    管理棋盘、撤销历史、分数、移动次数和游戏状态

    典型用法: 创建游戏后循环执行 移动 -> game_status() 直到游戏结束
    """
    def __init__(self, rows=GameConfig.DEFAULT_ROWS, cols=GameConfig.DEFAULT_COLS, rng=None,
                 win_tile=GameConfig.WIN_TILE, history_capacity=GameConfig.HISTORY_CAPACITY):
        self.board = Board(rows, cols)
        self.history = History(history_capacity)
        self.spawner = Spawner(rng if rng is not None else np.random.default_rng())
        self.win_tile = win_tile
        self._score = 0
        self._move_count = 0
        self._status = GameStatus.PLAYABLE

        for _ in range(GameConfig.INITIAL_TILES):
            self.spawner.spawn(self.board)

    @classmethod
    def restore(cls, board, history, move_count, score, status, rng=None,
                win_tile=GameConfig.WIN_TILE, history_capacity=GameConfig.HISTORY_CAPACITY):
        """
        由已保存的数据恢复游戏, 不生成新方块

        参数:
        board: Board, 尺寸决定游戏尺寸
        history: GameState 列表, 从最早到最新
        move_count: 移动次数
        score: 分数
        status: GameStatus
        win_tile, history_capacity: 与构造函数相同
        """
        game = cls.__new__(cls)
        game.board = board.clone()
        game.history = History(history_capacity)
        for state in history:
            game.history.push(state)
        game.spawner = Spawner(rng if rng is not None else np.random.default_rng())
        game.win_tile = win_tile
        game._score = int(score)
        game._move_count = int(move_count)
        game._status = status
        return game

    @property
    def rows(self):
        return self.board.rows

    @property
    def cols(self):
        return self.board.cols

    @property
    def score(self):
        return self._score

    @property
    def move_count(self):
        return self._move_count

    @property
    def current_status(self):
        """最近一次计算的状态（不重新计算）"""
        return self._status

    def get_cell_value(self, row, col):
        return self.board.get(row, col)

    def move(self, direction):
        """
        向指定方向移动

        返回:
        True 表示棋盘发生变化（已记录历史、生成新方块）, False 表示移动无效且状态未变
        """
        # 先保存快照, 只有移动有效时才放入历史
        snapshot = GameState.capture(self.board, self._score, self._status)
        changed, gained = apply_move(self.board, direction)
        if not changed:
            return False

        self.history.push(snapshot)
        self._score += gained
        self._move_count += 1
        self.spawner.spawn(self.board)
        return True

    def move_up(self):
        return self.move(Direction.UP)

    def move_down(self):
        return self.move(Direction.DOWN)

    def move_left(self):
        return self.move(Direction.LEFT)

    def move_right(self):
        return self.move(Direction.RIGHT)

    def is_undo_possible(self):
        return not self.history.is_empty()

    def undo(self):
        """
        恢复到上一步之前的棋盘、分数和状态

        注意: 如果上一步刚刚胜利, 撤销后状态会回到 PLAYABLE, 之前胜利的记录也随之消失
        """
        state = self.history.pop()
        if state is None:
            return False

        self.board.cells[:, :] = state.board.cells
        self._score = state.score
        self._status = state.status
        self._move_count -= 1
        return True

    def game_status(self):
        """
        计算并返回当前状态, 建议每次移动后调用一次
        返回 WIN 后再次调用会变为 WON_BUT_STILL_PLAYABLE 或 WON_BUT_UNPLAYABLE
        """
        self._status = evaluate_status(self.board, self._status, self.win_tile)
        return self._status
