"""
中国象棋对弈系统 (Xiangqi Project)

一个中国象棋对弈平台，核心是走法合法性判定与对局状态管理引擎。
"""

__version__ = "0.1.0"
__author__ = "Xiangqi Project Team"
__description__ = "中国象棋对弈系统 - 规则引擎、对局管理与存档"

# 导入主要模块
from xiangqi_project.src import xiangqi_engine

__all__ = [
    "xiangqi_engine",
    "__version__",
    "__author__",
    "__description__",
]
