import numpy as np

from config import GameConfig


def check_dimensions(rows, cols):
    """检查棋盘尺寸是否在 [MIN_BOARD_DIMENSION, MAX_BOARD_DIMENSION] 范围内"""
    low, high = GameConfig.MIN_BOARD_DIMENSION, GameConfig.MAX_BOARD_DIMENSION
    for name, value in (("rows", rows), ("cols", cols)):
        if not low <= value <= high:
            raise ValueError(f"{name}={value} 超出范围 [{low}, {high}]")


class Board:
    """
    2048游戏板
    [0][0] 是左下角（仅影响显示，与规则无关）, 0 表示空格
    """
    def __init__(self, rows, cols):
        check_dimensions(rows, cols)
        self.cells = np.zeros((rows, cols), dtype=np.int64)

    @classmethod
    def from_array(cls, values):
        """
        由二维列表或数组创建游戏板

        参数:
        values: R x C 的二维数据, 尺寸必须合法

        返回:
        board: 新的 Board, 数据为深拷贝
        """
        array = np.array(values, dtype=np.int64)
        if array.ndim != 2:
            raise ValueError(f"棋盘必须是二维数组, 实际维度: {array.ndim}")
        board = cls(*array.shape)
        board.cells[:, :] = array
        return board

    @property
    def rows(self):
        return self.cells.shape[0]

    @property
    def cols(self):
        return self.cells.shape[1]

    @property
    def shape(self):
        return self.cells.shape

    def _check_index(self, row, col):
        # numpy 的负索引会回绕, 这里必须显式检查
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"单元格 ({row}, {col}) 超出棋盘 {self.rows}x{self.cols}")

    def get(self, row, col):
        self._check_index(row, col)
        return int(self.cells[row, col])

    def set(self, row, col, value):
        self._check_index(row, col)
        self.cells[row, col] = value

    def clone(self):
        board = Board(self.rows, self.cols)
        board.cells[:, :] = self.cells
        return board

    def empty_cells(self):
        """返回所有空格坐标 [(row, col), ...], 按行优先顺序"""
        return [(int(r), int(c)) for r, c in np.argwhere(self.cells == 0)]

    def max_tile(self):
        return int(self.cells.max())

    def tolist(self):
        return self.cells.tolist()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __repr__(self):
        return f"Board({self.tolist()})"
