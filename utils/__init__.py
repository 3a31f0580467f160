"""
工具模块
包含撤销历史栈和控制台显示工具
"""

from .history import GameState, History
from .console import render_board

__all__ = ['GameState', 'History', 'render_board']
