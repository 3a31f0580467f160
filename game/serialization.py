"""
游戏存档读写
存档是按顺序写入的一串 .npy 记录:
    棋盘, 历史数量N, N x (棋盘, 分数, 状态), 移动次数, 分数, 状态
棋盘尺寸由读取到的数组形状决定, 不单独保存
"""

import os

import numpy as np

from game.board import Board
from game.status import GameStatus
from game.twenty48 import Twenty48Game
from utils.history import GameState


def _write_board(stream, board):
    np.save(stream, board.cells.astype(np.int64), allow_pickle=False)


def _write_int(stream, value):
    np.save(stream, np.int64(value), allow_pickle=False)


def _write_status(stream, status):
    np.save(stream, np.str_(status.name), allow_pickle=False)


def _read(stream):
    try:
        return np.load(stream, allow_pickle=False)
    except (EOFError, OSError) as e:
        raise ValueError(f"存档数据不完整: {e}") from e


def _read_board(stream, shape=None):
    array = _read(stream)
    if array.ndim != 2 or not np.issubdtype(array.dtype, np.integer):
        raise ValueError(f"无效的棋盘数据: shape={array.shape}, dtype={array.dtype}")
    if shape is not None and array.shape != shape:
        raise ValueError(f"历史棋盘尺寸 {array.shape} 与当前棋盘 {shape} 不一致")
    return Board.from_array(array)


def _read_int(stream):
    array = _read(stream)
    if array.ndim != 0 or not np.issubdtype(array.dtype, np.integer):
        raise ValueError(f"无效的整数数据: {array!r}")
    value = int(array)
    if value < 0:
        raise ValueError(f"数值不能为负: {value}")
    return value


def _read_status(stream):
    array = _read(stream)
    if array.ndim != 0 or array.dtype.kind != "U":
        raise ValueError(f"无效的状态数据: {array!r}")
    try:
        return GameStatus[str(array)]
    except KeyError:
        raise ValueError(f"未知的游戏状态: {array}") from None


def save_game(game, stream):
    """
    将游戏写入二进制流

    参数:
    game: Twenty48Game
    stream: 可写的二进制文件对象
    """
    _write_board(stream, game.board)
    _write_int(stream, len(game.history))
    for state in game.history:
        _write_board(stream, state.board)
        _write_int(stream, state.score)
        _write_status(stream, state.status)
    _write_int(stream, game.move_count)
    _write_int(stream, game.score)
    _write_status(stream, game.current_status)


def load_game(stream, rng=None):
    """
    从二进制流读取游戏

    参数:
    stream: 可读且可 seek 的二进制文件对象
    rng: 恢复后的游戏使用的随机数发生器

    返回:
    game: Twenty48Game
    """
    board = _read_board(stream)
    total_saved = _read_int(stream)
    history = []
    for _ in range(total_saved):
        saved_board = _read_board(stream, board.shape)
        score = _read_int(stream)
        status = _read_status(stream)
        history.append(GameState.capture(saved_board, score, status))
    move_count = _read_int(stream)
    score = _read_int(stream)
    status = _read_status(stream)
    return Twenty48Game.restore(board, history, move_count, score, status, rng=rng)


def save_game_file(game, path):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "wb") as f:
        save_game(game, f)


def load_game_file(path, rng=None):
    with open(path, "rb") as f:
        return load_game(f, rng=rng)
