import numpy as np

from config import GameConfig


class Spawner:
    """
    在随机空格中生成新方块（2 或 4）
    随机数发生器由外部注入, 便于固定种子复现
    """
    def __init__(self, rng=None, four_probability=GameConfig.SPAWN_FOUR_PROBABILITY):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.four_probability = four_probability

    def spawn(self, board):
        """
        在棋盘的一个空格上放置2或4

        参数:
        board: Board, 至少要有一个空格

        返回:
        (row, col, value): 生成的位置和值
        """
        empty = board.empty_cells()
        if not empty:
            raise RuntimeError("棋盘已满, 无法生成新方块")

        row, col = empty[int(self.rng.integers(len(empty)))]
        value = 4 if self.rng.random() < self.four_probability else 2
        board.set(row, col, value)
        return row, col, value
