from collections import namedtuple

from config import GameConfig


class GameState(namedtuple("GameState", ["board", "score", "status"])):
    """
    某一时刻的游戏快照（棋盘深拷贝, 分数, 状态）
    创建后不可修改
    """
    __slots__ = ()

    @classmethod
    def capture(cls, board, score, status):
        snapshot = board.clone()
        snapshot.cells.setflags(write=False)
        return cls(snapshot, int(score), status)


class History:
    """
    撤销历史: 有容量上限的后进先出栈
    超出容量时丢弃最早的快照
    """
    def __init__(self, capacity=GameConfig.HISTORY_CAPACITY):
        self.capacity = capacity
        self.buffer = []

    def __len__(self):
        return len(self.buffer)

    def __iter__(self):
        # 从最早到最新
        return iter(self.buffer)

    def push(self, state):
        self.buffer.append(state)
        if len(self.buffer) > self.capacity:
            self.buffer.pop(0)

    def save(self, board, score, status):
        self.push(GameState.capture(board, score, status))

    def pop(self):
        """弹出最新的快照, 历史为空时返回 None"""
        if not self.buffer:
            return None
        return self.buffer.pop()

    def is_empty(self):
        return not self.buffer

    def clear(self):
        self.buffer = []
