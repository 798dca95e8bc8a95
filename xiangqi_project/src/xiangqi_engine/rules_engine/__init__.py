"""
象棋规则引擎模块

包含棋子与棋盘表示、走法几何判断、合法性验证等核心功能。
"""

from .piece import Piece, PieceType, Side
from .move import Move
from .board import Board, MoveResult
from .rules import RuleEngine

__all__ = ['Piece', 'PieceType', 'Side', 'Move', 'Board', 'MoveResult', 'RuleEngine']
