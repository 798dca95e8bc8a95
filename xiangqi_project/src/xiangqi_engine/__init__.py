"""
中国象棋规则与对局引擎

判定走法是否合法、检测将军/将死/困毙，并管理回合推进与悔棋/重做。
包括规则引擎、对局引擎、存档、配置和日志等组件。
"""

__version__ = "0.1.0"
__author__ = "Xiangqi Engine Team"

# 导入核心组件
from .rules_engine import Board, Piece, PieceType, Side, Move, RuleEngine
from .game import GameEngine, GameStatus
from .storage import serialize_engine, apply_to_engine, save_to_file, load_from_file
from .config import ConfigManager, BoardConfig, GameConfig, SystemConfig
from .utils import setup_logger, get_logger, XiangqiError

__all__ = [
    "__version__", "__author__",
    "Board", "Piece", "PieceType", "Side", "Move", "RuleEngine",
    "GameEngine", "GameStatus",
    "serialize_engine", "apply_to_engine", "save_to_file", "load_from_file",
    "ConfigManager", "BoardConfig", "GameConfig", "SystemConfig",
    "setup_logger", "get_logger", "XiangqiError"
]
