#!/usr/bin/env python3
"""
2048游戏项目主入口文件
使用方法:
    python run.py play     # 在控制台开始游戏
    python run.py replay   # 回放游戏记录
    python run.py demo     # 在gymnasium环境中随机试玩
    python run.py help     # 显示帮助信息
"""

import os
import sys
import argparse
from pathlib import Path

import numpy as np

# 添加项目根目录到Python路径
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from config import EnvConfig, GameConfig, PathConfig
from ManControl import Simple2048


def create_directories():
    """创建必要的目录"""
    dirs_to_create = [
        PathConfig.LOG_DIR,
        PathConfig.SAVE_DIR
    ]

    for dir_path in dirs_to_create:
        os.makedirs(dir_path, exist_ok=True)


def play_mode(args):
    """控制台游戏模式"""
    create_directories()
    game = Simple2048(rows=args.rows, cols=args.cols, seed=args.seed,
                      record=args.record, load_path=args.load)
    game.play()


def replay_mode(log_path):
    """回放模式"""
    if log_path is None:
        # 查找最新的记录文件
        log_files = list(Path(PathConfig.LOG_DIR).glob("*.json"))
        if not log_files:
            print("错误: 未找到任何游戏记录!")
            print(f"请检查 {PathConfig.LOG_DIR} 目录是否存在.json文件")
            return

        # 按修改时间排序，选择最新的
        log_files.sort(key=lambda x: x.stat().st_mtime, reverse=True)
        log_path = str(log_files[0])
        print(f"使用最新记录: {log_path}")

    try:
        Simple2048().replay(log_path)
    except (OSError, ValueError, KeyError) as e:
        print(f"回放出错: {e}")


def demo_mode(args, episodes=3):
    """在gymnasium环境中用随机的有效动作试玩"""
    import gymnasium as gym
    import envs  # noqa: F401  注册环境

    env = gym.make(EnvConfig.ENV_NAME, rows=args.rows, cols=args.cols)
    rng = np.random.default_rng(args.seed)

    for episode in range(episodes):
        _, info = env.reset(seed=args.seed + episode)
        done = False
        steps = 0
        while not done:
            valid_indices = np.where(info["valid_actions"] == 1)[0]
            if len(valid_indices) == 0:
                break
            action = int(rng.choice(valid_indices))
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            steps += 1

        print(f"Demo Episode {episode + 1}/{episodes}: "
              f"分数 = {info['score']}, "
              f"最大瓦片 = {info['max_tile']}, "
              f"步数 = {steps}, "
              f"状态 = {info['status']}")

    env.close()


def show_help():
    """显示帮助信息"""
    help_text = f"""
2048游戏

使用方法:
    python run.py <命令> [选项]

命令:
    play                开始控制台游戏
    replay [log_path]   回放游戏记录(默认最新的记录)
    demo                在gymnasium环境中用随机有效动作试玩
    help                显示此帮助信息

选项:
    --rows R --cols C   棋盘尺寸, 范围 [{GameConfig.MIN_BOARD_DIMENSION}, {GameConfig.MAX_BOARD_DIMENSION}]
    --seed S            随机种子
    --record            记录游戏到 {PathConfig.LOG_DIR}/
    --load FILE         读取存档继续游戏

示例:
    python run.py play --rows 5 --cols 5 --record
    python run.py play --load {PathConfig.SAVE_DIR}/{PathConfig.SAVE_FILE}
    python run.py replay 2048_logs/2048_seed42_20240101_000000.json

配置:
    所有配置参数都在 config.py 文件中定义。
    """
    print(help_text)


def main():
    """主函数"""
    parser = argparse.ArgumentParser(description="2048游戏", add_help=False)
    parser.add_argument('command', nargs='?', default='help',
                        choices=['play', 'replay', 'demo', 'help'],
                        help='要执行的命令')
    parser.add_argument('log_path', nargs='?', default=None,
                        help='游戏记录路径(用于replay命令)')
    parser.add_argument('--rows', type=int, default=GameConfig.DEFAULT_ROWS, help='棋盘行数')
    parser.add_argument('--cols', type=int, default=GameConfig.DEFAULT_COLS, help='棋盘列数')
    parser.add_argument('--seed', type=int, default=GameConfig.SEED, help='随机种子')
    parser.add_argument('--record', action='store_true', help='记录游戏')
    parser.add_argument('--load', type=str, default=None, help='存档路径')

    args = parser.parse_args()

    low, high = GameConfig.MIN_BOARD_DIMENSION, GameConfig.MAX_BOARD_DIMENSION
    if not (low <= args.rows <= high and low <= args.cols <= high):
        print(f"错误: 棋盘尺寸必须在 [{low}, {high}] 范围内")
        return

    if args.command == 'play':
        play_mode(args)
    elif args.command == 'replay':
        replay_mode(args.log_path)
    elif args.command == 'demo':
        demo_mode(args)
    else:
        show_help()


if __name__ == '__main__':
    main()
