import os
import sys
import json
from datetime import datetime
from pathlib import Path

import numpy as np

from config import GameConfig, PathConfig
from game.game_2048 import Direction
from game.serialization import load_game_file, save_game_file
from game.status import GameStatus, TERMINAL_STATUSES
from game.twenty48 import Twenty48Game
from utils.console import render_board


class Simple2048:
    def __init__(self, rows=GameConfig.DEFAULT_ROWS, cols=GameConfig.DEFAULT_COLS,
                 seed=GameConfig.SEED, record=False, log_dir=PathConfig.LOG_DIR,
                 save_path=None, load_path=None, input_func=input):
        """
        控制台版2048游戏

        参数:
            rows, cols: 棋盘尺寸
            seed: 随机种子
            record: 是否记录游戏
            log_dir: 游戏记录保存目录
            save_path: 存档路径
            load_path: 读取存档继续游戏
            input_func: 读取命令的函数
        """
        self.rows = rows
        self.cols = cols
        self.seed = seed
        self.record = record
        self.log_dir = Path(log_dir)
        self.save_path = save_path or os.path.join(PathConfig.SAVE_DIR, PathConfig.SAVE_FILE)
        self.load_path = load_path
        self.input_func = input_func
        self.game = None
        self.game_over = False
        self.game_log = []
        self.replay_mismatch = None  # 回放不一致的步号

        # 按键映射
        self.key_to_action = {
            'w': Direction.UP,
            'd': Direction.RIGHT,
            's': Direction.DOWN,
            'a': Direction.LEFT,
        }

    def reset(self):
        """重置游戏"""
        rng = np.random.default_rng(self.seed)
        if self.load_path:
            self.game = load_game_file(self.load_path, rng=rng)
            # 读档后的开局无法由种子复现
            self.seed = None
        else:
            self.game = Twenty48Game(self.rows, self.cols, rng=rng)
        self.game_over = self.game.current_status in TERMINAL_STATUSES
        self.game_log = []

        if self.record:
            self.game_log.append({
                'step': 0,
                'board': self.game.board.tolist(),
                'score': self.game.score
            })

    def step(self, command):
        """
        执行一条命令 (w/a/s/d 移动, u 撤销)

        返回:
            True 表示棋盘发生了变化
        """
        if command == 'u':
            action = 'UNDO'
            changed = self.game.undo()
            if not changed:
                print("没有可以撤销的步骤")
        else:
            direction = self.key_to_action[command]
            action = direction.name
            changed = self.game.move(direction)
            if not changed:
                print("无效移动, 请换一个方向")

        if changed and self.record:
            self.game_log.append({
                'step': len(self.game_log),
                'board': self.game.board.tolist(),
                'score': self.game.score,
                'action': action
            })
        return changed

    def check_status(self):
        """计算状态并输出提示, 返回游戏是否结束"""
        status = self.game.game_status()
        if status == GameStatus.WIN:
            print(f"\n恭喜! 达到 {self.game.win_tile}, 可以继续游戏")
            # 再次查询表示确认胜利, 允许继续移动
            status = self.game.game_status()

        if status == GameStatus.WON_BUT_UNPLAYABLE:
            print(f"\n已经胜利, 但无法继续移动。最终分数: {self.game.score}")
        elif status == GameStatus.LOST:
            print(f"\n游戏结束！最终分数: {self.game.score}")
        self.game_over = status in TERMINAL_STATUSES
        return self.game_over

    def save_game(self):
        """保存存档"""
        try:
            save_game_file(self.game, self.save_path)
        except OSError as e:
            print(f"存档失败: {e}")
            return None
        print(f"游戏已保存: {self.save_path}")
        return self.save_path

    def save_log(self):
        """保存游戏记录"""
        if not self.record or not self.game_log:
            return None

        self.log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"2048_seed{self.seed}_{timestamp}.json"

        data = {
            'seed': self.seed,
            'rows': self.game.rows,
            'cols': self.game.cols,
            'final_score': self.game.score,
            'steps': self.game.move_count,
            'max_tile': self.game.board.max_tile(),
            'log': self.game_log,
            'timestamp': timestamp
        }

        filepath = self.log_dir / filename
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

        print(f"\n游戏记录已保存: {filepath}")
        return filepath

    def play(self):
        """开始游戏"""
        print(f"2048游戏 - 种子: {self.seed} 棋盘: {self.rows}x{self.cols}")
        print("控制: WASD移动, U撤销, P存档, Q退出")
        print("=" * 40)

        try:
            self.reset()
        except (OSError, ValueError) as e:
            print(f"读取存档失败: {e}")
            return

        while True:
            print(render_board(self.game))
            if self.game_over:
                break

            try:
                command = self.input_func("\n输入命令: ").strip().lower()
            except EOFError:
                break

            if command == 'q':
                break
            elif command == 'p':
                self.save_game()
            elif command == 'u' or command in self.key_to_action:
                if self.step(command):
                    self.check_status()
            else:
                print("无效命令! 使用 w/a/s/d 移动, u 撤销, p 存档, q 退出")

        if self.record:
            self.save_log()

    def replay(self, replay_file):
        """
        回放游戏记录, 用记录中的种子重新开局并依次执行每一步

        返回:
            回放结束时的 Twenty48Game
        """
        print(f"回放: {replay_file}")

        filepath = Path(replay_file)
        if not filepath.exists():
            filepath = self.log_dir / replay_file

        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        seed = data.get('seed')
        if seed is None:
            raise ValueError("该记录来自读档的游戏, 无法由种子复现")
        log = data.get('log', [])
        if not log:
            print("记录为空")
            return None

        self.seed = seed
        self.rows = data.get('rows', GameConfig.DEFAULT_ROWS)
        self.cols = data.get('cols', GameConfig.DEFAULT_COLS)
        self.load_path = None
        self.record = False
        self.reset()
        self.replay_mismatch = None
        print(f"种子: {seed} | 分数: {data.get('final_score', 0)}")

        for i, entry in enumerate(log):
            action = entry.get('action')
            if action == 'UNDO':
                self.game.undo()
            elif action is not None:
                self.game.move(Direction[action])

            if (self.game.board.tolist() != entry['board']
                    or self.game.score != entry.get('score', self.game.score)):
                print(f"第 {i} 步回放结果与记录不一致")
                self.replay_mismatch = i
                break
            print(render_board(self.game))

        print("回放完成！")
        return self.game


# 最简使用方式
if __name__ == "__main__":
    # 如果有命令行参数
    if len(sys.argv) > 1:
        if sys.argv[1] == "--replay":
            replay_file = sys.argv[2] if len(sys.argv) > 2 else None
            if replay_file:
                Simple2048().replay(replay_file)
            else:
                print("请指定回放文件")
        else:
            try:
                seed = int(sys.argv[1])
            except ValueError:
                print(f"使用默认种子{GameConfig.SEED}")
                seed = GameConfig.SEED
            Simple2048(seed=seed, record=True).play()
    else:
        # 默认：种子42，记录游戏
        Simple2048(record=True).play()
