"""
配置管理模块

包含棋盘配置、对局配置和系统配置。
"""

from .config_manager import ConfigManager
from .game_config import BoardConfig, GameConfig, SystemConfig, DEFAULT_BOARD_CONFIG

__all__ = ['ConfigManager', 'BoardConfig', 'GameConfig', 'SystemConfig', 'DEFAULT_BOARD_CONFIG']
