from enum import Enum

from config import GameConfig


class GameStatus(Enum):
    """游戏状态"""
    LOST = "LOST"                                       # 无法再移动
    WIN = "WIN"                                         # 刚刚达成胜利
    WON_BUT_STILL_PLAYABLE = "WON_BUT_STILL_PLAYABLE"   # 已胜利, 仍可移动
    WON_BUT_UNPLAYABLE = "WON_BUT_UNPLAYABLE"           # 已胜利, 无法再移动
    PLAYABLE = "PLAYABLE"                               # 未胜利, 仍可移动


TERMINAL_STATUSES = (GameStatus.LOST, GameStatus.WON_BUT_UNPLAYABLE)


def has_adjacent_pair(cells):
    """是否存在上下或左右相邻且相等的两个格子"""
    vertical = cells[:-1, :] == cells[1:, :]
    horizontal = cells[:, :-1] == cells[:, 1:]
    return bool(vertical.any() or horizontal.any())


def evaluate_status(board, current, win_tile=GameConfig.WIN_TILE):
    """
    根据棋盘内容计算新的游戏状态

    WIN 只会被报告一次: 再次调用（中间没有移动）会变为 WON_BUT_STILL_PLAYABLE

    参数:
    board: Board
    current: 当前的 GameStatus
    win_tile: 胜利所需的方块值

    返回:
    status: 新的 GameStatus
    """
    # 结束状态保持不变: 再次计算时 WON_BUT_UNPLAYABLE 不会被改成 LOST
    if current in TERMINAL_STATUSES:
        return current

    cells = board.cells
    if current == GameStatus.PLAYABLE and (cells == win_tile).any():
        return GameStatus.WIN

    if current == GameStatus.WIN:
        current = GameStatus.WON_BUT_STILL_PLAYABLE

    # 有空格或相邻相等的格子, 一定还能移动
    if (cells == 0).any() or has_adjacent_pair(cells):
        return current

    if current == GameStatus.WON_BUT_STILL_PLAYABLE:
        return GameStatus.WON_BUT_UNPLAYABLE
    return GameStatus.LOST
