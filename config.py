"""
2048游戏引擎配置文件
包含所有可调参数的默认值
"""


class GameConfig:
    """游戏规则配置"""

    # 棋盘尺寸
    DEFAULT_ROWS = 4
    DEFAULT_COLS = 4
    MIN_BOARD_DIMENSION = 3
    MAX_BOARD_DIMENSION = 16

    # 胜利条件
    WIN_TILE = 2048

    # 撤销历史容量（最多可撤销10步）
    HISTORY_CAPACITY = 10

    # 生成新方块: 90%为2, 10%为4
    SPAWN_FOUR_PROBABILITY = 0.1
    INITIAL_TILES = 2

    # 默认随机种子（回放需要固定种子）
    SEED = 42


class EnvConfig:
    """gymnasium环境配置"""

    ENV_NAME = "twenty48/TwentyFortyEight-v0"

    # 无效移动的惩罚
    INVALID_MOVE_PENALTY = -10

    MAX_EPISODE_STEPS = 10000


class PathConfig:
    """路径配置"""

    # 游戏记录保存路径
    LOG_DIR = "2048_logs"

    # 存档路径
    SAVE_DIR = "2048_saves"
    SAVE_FILE = "game.npy"
