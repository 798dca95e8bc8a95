"""
对局管理模块

包含对局引擎、历史记录和状态查询。
"""

from .game_engine import GameEngine, GameStatus, HistoryEntry, EngineState

__all__ = ['GameEngine', 'GameStatus', 'HistoryEntry', 'EngineState']
