import numpy as np
import gymnasium as gym
from gymnasium import spaces

from config import EnvConfig, GameConfig
from game.game_2048 import Direction, check_valid_actions
from game.status import TERMINAL_STATUSES, GameStatus
from game.twenty48 import Twenty48Game
from utils.console import render_board


class TwentyFortyEightEnv(gym.Env):
    """
    基于本项目规则引擎的 gymnasium 环境

    - 动作: 0=UP, 1=RIGHT, 2=DOWN, 3=LEFT
    - 观测: rows x cols 的棋盘方块值
    - 奖励: 本次移动的合并得分, 无效移动给予惩罚
    - 结束: 状态为 LOST 或 WON_BUT_UNPLAYABLE
    - 达到胜利方块的那一步 info["won"] 为 True, 胜利会被立即确认
    """

    metadata = {"render_modes": ["human", "ansi"]}

    def __init__(self, rows=GameConfig.DEFAULT_ROWS, cols=GameConfig.DEFAULT_COLS,
                 invalid_move_penalty=EnvConfig.INVALID_MOVE_PENALTY, render_mode=None):
        super().__init__()
        self.rows = rows
        self.cols = cols
        self.invalid_move_penalty = invalid_move_penalty
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(len(Direction))
        self.observation_space = spaces.Box(
            low=0, high=np.iinfo(np.int64).max, shape=(rows, cols), dtype=np.int64
        )
        self.game = None

    def _get_info(self, moved=False):
        return {
            "score": self.game.score,
            "moved": moved,
            "max_tile": self.game.board.max_tile(),
            "status": self.game.current_status.name,
            "valid_actions": check_valid_actions(self.game.board),
        }

    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)
        # 使用环境自身的 np_random, 固定 seed 即可复现整局游戏
        self.game = Twenty48Game(self.rows, self.cols, rng=self.np_random)
        if self.render_mode == "human":
            self.render()
        return self.game.board.cells.copy(), self._get_info()

    def step(self, action):
        if not self.action_space.contains(action):
            raise gym.error.InvalidAction(f"Invalid action: {action}")
        assert self.game is not None, "call reset() before step()"

        score_before = self.game.score
        moved = self.game.move(Direction(int(action)))
        if moved:
            reward = float(self.game.score - score_before)
        else:
            reward = float(self.invalid_move_penalty)

        status = self.game.game_status()
        won = status == GameStatus.WIN
        if won:
            # 立即确认胜利, 这样胜利的同时无法移动会直接结束本局
            status = self.game.game_status()
        terminated = status in TERMINAL_STATUSES

        if self.render_mode == "human":
            self.render()
        info = self._get_info(moved)
        info["won"] = won
        return self.game.board.cells.copy(), reward, terminated, False, info

    def render(self):
        if self.game is None:
            return None
        text = render_board(self.game)
        if self.render_mode == "ansi":
            return text
        print(text)
        return None
