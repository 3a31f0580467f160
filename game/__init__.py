"""
游戏模块
包含2048游戏规则: 棋盘, 移动合并, 生成新方块, 状态判断和存档
"""

from .board import Board
from .game_2048 import Direction, apply_move, check_valid_actions, simulate_move
from .spawner import Spawner
from .status import GameStatus, evaluate_status
from .twenty48 import Twenty48Game

__all__ = ['Board', 'Direction', 'apply_move', 'check_valid_actions', 'simulate_move',
           'Spawner', 'GameStatus', 'evaluate_status', 'Twenty48Game']
