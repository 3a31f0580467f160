"""
环境模块
将2048规则引擎注册为 gymnasium 环境
"""

from gymnasium.envs.registration import register

from config import EnvConfig
from .twenty48_env import TwentyFortyEightEnv

register(
    id=EnvConfig.ENV_NAME,
    entry_point="envs.twenty48_env:TwentyFortyEightEnv",
    max_episode_steps=EnvConfig.MAX_EPISODE_STEPS,
)

__all__ = ['TwentyFortyEightEnv']
