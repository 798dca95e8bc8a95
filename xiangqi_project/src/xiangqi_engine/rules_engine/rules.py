"""
象棋规则引擎

实现各棋子的走法几何判断、合法性验证和终局状态检测。

复杂算法说明：
- 走子合法性：先做棋子本身的几何判断，再在棋盘副本上模拟落子，
  检查是否出现"飞将"或导致己方被将。合法性从不只依据走子前的局面判断。
- 将军判断：定位己方帅/将，遍历对方所有棋子，检查其能否按几何规则走到该位置。
  帅/将之间的"飞将"不视为攻击，只在模拟落子后的检查中拦截。
- 将死/困毙：枚举己方所有合法走法，为空时按是否被将区分将死与困毙。
"""

from typing import List, Tuple, Union

from .board import Board
from .move import Move, Position
from .piece import Piece, PieceType, Side


SideLike = Union[Side, str]


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class RuleEngine:
    """
    象棋规则引擎

    无状态，所有方法都作用于调用方传入的棋盘。
    """

    def __init__(self):
        """初始化规则引擎"""
        # 各棋子的几何判断
        self._basic_checkers = {
            PieceType.GENERAL: self._can_general_move,
            PieceType.ADVISOR: self._can_advisor_move,
            PieceType.ELEPHANT: self._can_elephant_move,
            PieceType.HORSE: self._can_horse_move,
            PieceType.ROOK: self._can_rook_move,
            PieceType.CANNON: self._can_cannon_move,
            PieceType.SOLDIER: self._can_soldier_move,
        }

    # ==================== 几何走法 ====================

    def can_basic_move(self, board: Board, piece: Piece,
                       from_pos: Position, to_pos: Position) -> bool:
        """
        不考虑自陷被将和飞将时，棋子的几何走法是否成立

        Args:
            board: 棋盘
            piece: 要移动的棋子
            from_pos: 起点 (行, 列)
            to_pos: 终点 (行, 列)

        Returns:
            bool: 是否成立
        """
        if from_pos == to_pos:
            return False
        if not board.in_bounds(*to_pos):
            return False

        # 不能吃己方棋子
        target = board.get_piece(*to_pos)
        if target is not None and target.side is piece.side:
            return False

        checker = self._basic_checkers.get(piece.type)
        if checker is None:
            return False
        return checker(board, piece, from_pos, to_pos, target)

    def _can_general_move(self, board, piece, from_pos, to_pos, target) -> bool:
        """帅/将：九宫内横竖走一步"""
        dr, dc = to_pos[0] - from_pos[0], to_pos[1] - from_pos[1]
        if not board.in_palace(to_pos[0], to_pos[1], piece.side):
            return False
        return abs(dr) + abs(dc) == 1

    def _can_advisor_move(self, board, piece, from_pos, to_pos, target) -> bool:
        """仕/士：九宫内斜走一步"""
        dr, dc = to_pos[0] - from_pos[0], to_pos[1] - from_pos[1]
        if not board.in_palace(to_pos[0], to_pos[1], piece.side):
            return False
        return abs(dr) == 1 and abs(dc) == 1

    def _can_elephant_move(self, board, piece, from_pos, to_pos, target) -> bool:
        """相/象：走田字，象眼不得有子，不能过河"""
        dr, dc = to_pos[0] - from_pos[0], to_pos[1] - from_pos[1]
        if not (abs(dr) == 2 and abs(dc) == 2):
            return False

        # 塞象眼
        eye_row, eye_col = from_pos[0] + _sign(dr), from_pos[1] + _sign(dc)
        if not board.is_empty(eye_row, eye_col):
            return False

        return not board.has_crossed_river(to_pos[0], piece.side)

    def _can_horse_move(self, board, piece, from_pos, to_pos, target) -> bool:
        """马：走日字，马腿不得被绊"""
        dr, dc = to_pos[0] - from_pos[0], to_pos[1] - from_pos[1]
        adr, adc = abs(dr), abs(dc)
        if not ((adr == 2 and adc == 1) or (adr == 1 and adc == 2)):
            return False

        if adr == 2:
            leg = (from_pos[0] + _sign(dr), from_pos[1])  # 纵向马腿
        else:
            leg = (from_pos[0], from_pos[1] + _sign(dc))  # 横向马腿
        return board.is_empty(*leg)

    def _can_rook_move(self, board, piece, from_pos, to_pos, target) -> bool:
        """车：直线行走，路径无阻挡"""
        if from_pos[0] != to_pos[0] and from_pos[1] != to_pos[1]:
            return False
        return board.count_pieces_between(from_pos, to_pos) == 0

    def _can_cannon_move(self, board, piece, from_pos, to_pos, target) -> bool:
        """炮：直线行走；不吃子时路径无阻挡，吃子时必须隔一个炮架"""
        if from_pos[0] != to_pos[0] and from_pos[1] != to_pos[1]:
            return False
        between = board.count_pieces_between(from_pos, to_pos)
        if target is None:
            return between == 0
        return between == 1

    def _can_soldier_move(self, board, piece, from_pos, to_pos, target) -> bool:
        """兵/卒：未过河只能前进一格；过河后可前进或左右一格，不能后退"""
        dr, dc = to_pos[0] - from_pos[0], to_pos[1] - from_pos[1]
        if abs(dr) + abs(dc) != 1:
            return False

        forward = -1 if piece.side is Side.RED else 1  # 红向上，黑向下
        if dr == forward and dc == 0:
            return True

        crossed = board.has_crossed_river(from_pos[0], piece.side)
        return crossed and dr == 0 and abs(dc) == 1

    # ==================== 将军与飞将 ====================

    def is_facing_general(self, board: Board) -> bool:
        """
        两帅是否同列且中间无子（飞将）

        Args:
            board: 棋盘

        Returns:
            bool: 是否飞将
        """
        red_general = board.get_general_position(Side.RED)
        black_general = board.get_general_position(Side.BLACK)
        if red_general is None or black_general is None:
            return False
        if red_general[1] != black_general[1]:
            return False
        return board.count_pieces_between(red_general, black_general) == 0

    def can_attack(self, board: Board, attacker_pos: Position, target_pos: Position) -> bool:
        """
        攻击者能否按走法规则攻击到目标格（不考虑己方被将）

        Args:
            board: 棋盘
            attacker_pos: 攻击者位置
            target_pos: 目标位置

        Returns:
            bool: 是否能攻击到
        """
        attacker = board.get_piece(*attacker_pos)
        if attacker is None:
            return False
        return self.can_basic_move(board, attacker, attacker_pos, target_pos)

    def is_in_check(self, board: Board, side: SideLike) -> bool:
        """
        检查指定阵营是否被将军

        Args:
            board: 棋盘
            side: 阵营

        Returns:
            bool: 是否被将军
        """
        side = Side(side)
        general_pos = board.get_general_position(side)
        if general_pos is None:
            return False  # 没有帅/将，不可能被将军

        for pos, piece in board.iter_pieces(side.opponent):
            if self.can_basic_move(board, piece, pos, general_pos):
                return True

        return False

    # ==================== 合法性与枚举 ====================

    def is_legal_move(self, board: Board, from_pos: Position, to_pos: Position,
                      side: SideLike) -> bool:
        """
        走法在完整规则下是否合法

        过程：几何判断 -> 在副本上模拟走子 -> 检查飞将与己方被将。

        Args:
            board: 棋盘
            from_pos: 起点
            to_pos: 终点
            side: 走子方

        Returns:
            bool: 是否合法
        """
        side = Side(side)
        piece = board.get_piece(*from_pos)
        if piece is None or piece.side is not side:
            return False
        if not self.can_basic_move(board, piece, from_pos, to_pos):
            return False

        simulated = board.clone()
        simulated.move_piece(from_pos[0], from_pos[1], to_pos[0], to_pos[1])

        if self.is_facing_general(simulated):
            return False
        return not self.is_in_check(simulated, side)

    def get_legal_moves_for_piece(self, board: Board, row: int, col: int) -> List[Position]:
        """
        指定棋子的全部合法落点

        Args:
            board: 棋盘
            row: 行
            col: 列

        Returns:
            List[Position]: 按行优先顺序排列的落点
        """
        piece = board.get_piece(row, col)
        if piece is None:
            return []

        return [
            (r, c)
            for r in range(board.rows)
            for c in range(board.cols)
            if self.is_legal_move(board, (row, col), (r, c), piece.side)
        ]

    def generate_legal_moves(self, board: Board, side: SideLike) -> List[Move]:
        """
        生成指定阵营的所有合法走法

        Args:
            board: 棋盘
            side: 阵营

        Returns:
            List[Move]: 先按起点、再按终点的行优先顺序排列
        """
        side = Side(side)
        legal_moves = []

        for (row, col), _ in board.iter_pieces(side):
            for to_pos in self.get_legal_moves_for_piece(board, row, col):
                legal_moves.append(Move(from_pos=(row, col), to_pos=to_pos))

        return legal_moves

    # ==================== 终局检测 ====================

    def is_checkmate(self, board: Board, side: SideLike) -> bool:
        """被将军且没有任何合法走法"""
        if not self.is_in_check(board, side):
            return False
        return len(self.generate_legal_moves(board, side)) == 0

    def is_stalemate(self, board: Board, side: SideLike) -> bool:
        """未被将军但没有任何合法走法（困毙）"""
        if self.is_in_check(board, side):
            return False
        return len(self.generate_legal_moves(board, side)) == 0

    def evaluate_side(self, board: Board, side: SideLike) -> Tuple[bool, bool, bool]:
        """
        一次性计算指定阵营的状态

        结果与分别调用 is_in_check / is_checkmate / is_stalemate 一致，
        但只枚举一次合法走法。

        Returns:
            Tuple[bool, bool, bool]: (被将军, 将死, 困毙)
        """
        in_check = self.is_in_check(board, side)
        no_moves = len(self.generate_legal_moves(board, side)) == 0
        return in_check, in_check and no_moves, (not in_check) and no_moves
