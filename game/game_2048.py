from enum import IntEnum

import numpy as np


class Direction(IntEnum):
    """移动方向, 编号与动作空间一致"""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


def iter_lines(cells, direction):
    """
    按移动方向依次返回每一行/列的一维视图
    视图的索引0永远是靠近移动方向的边缘（近端）, 对视图的修改直接写回棋盘

    参数:
    cells: R x C 的 numpy 数组
    direction: Direction

    返回:
    生成器, 每次产生一个一维视图
    """
    rows, cols = cells.shape
    if direction == Direction.LEFT:
        for i in range(rows):
            yield cells[i, :]
    elif direction == Direction.RIGHT:
        for i in range(rows):
            yield cells[i, ::-1]
    elif direction == Direction.DOWN:
        # 第0行在底部
        for j in range(cols):
            yield cells[:, j]
    elif direction == Direction.UP:
        for j in range(cols):
            yield cells[::-1, j]


def compact_line(line):
    """
    压缩一行: 非零值保持相对顺序移到近端, 其余位置填0

    返回:
    changed: 该行是否发生变化
    """
    non_zero = line[line != 0]
    count = len(non_zero)
    # 前count个恰好是全部非零值时, 后面必然全是0
    if np.array_equal(line[:count], non_zero):
        return False
    line[:count] = non_zero
    line[count:] = 0
    return True


def merge_line(line):
    """
    合并一行已压缩的数据, 从近端向远端扫描
    相邻相等的两个值合并到靠近近端的位置, 后续的值向近端移动一格, 最远端补0
    合并后的格子在本次移动中不再参与合并

    返回:
    score: 本行所有合并产生的值之和（0表示没有合并）
    """
    n = len(line)
    score = 0
    i = 0
    # 遇到0即可停止, 压缩后0之后全是0
    while i < n - 1 and line[i] != 0:
        if line[i] == line[i + 1]:
            merged_value = int(line[i]) * 2
            line[i] = merged_value
            line[i + 1:n - 1] = line[i + 2:].copy()
            line[n - 1] = 0
            score += merged_value
        i += 1
    return score


def apply_move(board, direction):
    """
    在棋盘上原地执行一次移动（压缩 + 合并）, 不生成新方块

    参数:
    board: Board
    direction: Direction 或对应的整数编号

    返回:
    changed: 是否有任何格子发生变化
    score: 合并得分
    """
    direction = Direction(direction)
    changed = False
    score = 0
    for line in iter_lines(board.cells, direction):
        if compact_line(line):
            changed = True
        line_score = merge_line(line)
        if line_score:
            changed = True
            score += line_score
    return changed, score


def simulate_move(board, direction):
    """
    模拟一次移动, 不修改传入的棋盘

    返回:
    new_board: 移动后的新棋盘
    changed: 移动是否有效
    score: 合并得分
    """
    new_board = board.clone()
    changed, score = apply_move(new_board, direction)
    return new_board, changed, score


def check_valid_actions(board):
    """
    检查游戏板的有效移动方向
    通过模拟每个方向的移动来检查是否有效

    参数:
    board: Board

    返回:
    valid_actions: 长度为4的数组，每个元素表示对应动作是否有效 (0=无效, 1=有效)
    """
    valid_actions = np.zeros(len(Direction), dtype=np.int32)  # 0=UP, 1=RIGHT, 2=DOWN, 3=LEFT
    for direction in Direction:
        _, changed, _ = simulate_move(board, direction)
        valid_actions[direction] = 1 if changed else 0
    return valid_actions
