"""
Xiangqi Project 源代码模块

包含主要子系统：
- xiangqi_engine: 象棋规则与对局引擎
"""

from . import xiangqi_engine

__all__ = [
    "xiangqi_engine",
]
