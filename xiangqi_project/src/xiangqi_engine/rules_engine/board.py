"""
象棋棋盘数据结构

定义棋盘的表示、基础操作和格式转换功能。棋盘只保存数据，
不做任何走法合法性判断。
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .move import Position
from .piece import Piece, PieceType, Side
from ..config.game_config import BoardConfig, DEFAULT_BOARD_CONFIG


# 底线棋子排列（车马相仕帅仕相马车）
BACK_RANK = [
    PieceType.ROOK, PieceType.HORSE, PieceType.ELEPHANT, PieceType.ADVISOR,
    PieceType.GENERAL,
    PieceType.ADVISOR, PieceType.ELEPHANT, PieceType.HORSE, PieceType.ROOK,
]
CANNON_COLS = (1, 7)
SOLDIER_COLS = (0, 2, 4, 6, 8)


@dataclass(frozen=True)
class MoveResult:
    """落子结果"""
    captured: Optional[Piece] = None


class Board:
    """
    象棋棋盘类

    以 numpy 整数矩阵保存棋子编码（红正黑负，0为空位）。越界坐标一律
    静默处理：读取返回 None，写入不做任何事。
    """

    def __init__(self, config: Optional[BoardConfig] = None):
        """
        初始化空棋盘

        Args:
            config: 棋盘尺寸配置，None表示标准10x9棋盘
        """
        self.config = config or DEFAULT_BOARD_CONFIG
        self.rows = self.config.rows
        self.cols = self.config.cols
        self.grid = np.zeros((self.rows, self.cols), dtype=np.int8)

    @classmethod
    def initial(cls, config: Optional[BoardConfig] = None) -> 'Board':
        """创建标准开局棋盘"""
        board = cls(config)
        board.setup_initial()
        return board

    # ==================== 基础访问 ====================

    def in_bounds(self, row: int, col: int) -> bool:
        """坐标是否在棋盘范围内"""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_piece(self, row: int, col: int) -> Optional[Piece]:
        """
        获取指定位置的棋子

        Args:
            row: 行
            col: 列

        Returns:
            Optional[Piece]: 棋子，空位或越界返回None
        """
        if not self.in_bounds(row, col):
            return None
        return Piece.from_code(self.grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        """指定位置是否没有棋子（越界视为空）"""
        return self.get_piece(row, col) is None

    def set_piece(self, row: int, col: int, piece: Optional[Piece]) -> None:
        """
        放置或清除棋子，越界坐标不做任何事

        Args:
            row: 行
            col: 列
            piece: 棋子，None表示清空
        """
        if not self.in_bounds(row, col):
            return
        self.grid[row, col] = piece.code if piece else 0

    def move_piece(self, from_row: int, from_col: int, to_row: int, to_col: int) -> MoveResult:
        """
        无条件移动棋子

        目标位置原有棋子被覆盖（吃子），起点清空。不检查合法性。

        Returns:
            MoveResult: 包含被吃掉的棋子
        """
        if not self.in_bounds(from_row, from_col) or not self.in_bounds(to_row, to_col):
            return MoveResult()

        piece = self.get_piece(from_row, from_col)
        captured = self.get_piece(to_row, to_col)
        self.set_piece(to_row, to_col, piece)
        self.set_piece(from_row, from_col, None)
        return MoveResult(captured=captured)

    def clone(self) -> 'Board':
        """
        创建棋盘的深拷贝

        Returns:
            Board: 与原棋盘互不影响的副本
        """
        board = Board(self.config)
        board.grid = self.grid.copy()
        return board

    def clear(self) -> None:
        """清空棋盘"""
        self.grid.fill(0)

    def get_general_position(self, side: Side) -> Optional[Position]:
        """
        找到指定阵营帅/将的位置

        Args:
            side: 阵营

        Returns:
            Optional[Position]: 按行优先扫描找到的第一个帅/将，找不到返回None
        """
        code = Piece(PieceType.GENERAL, side).code
        found = np.argwhere(self.grid == code)
        if len(found) == 0:
            return None
        row, col = found[0]
        return (int(row), int(col))

    def iter_pieces(self, side: Optional[Side] = None) -> Iterator[Tuple[Position, Piece]]:
        """
        按行优先顺序遍历棋子

        Args:
            side: 指定阵营，None表示全部棋子
        """
        for row in range(self.rows):
            for col in range(self.cols):
                code = self.grid[row, col]
                if code == 0:
                    continue
                piece = Piece.from_code(code)
                if side is None or piece.side is side:
                    yield (row, col), piece

    def setup_initial(self) -> None:
        """设置象棋初始局面"""
        self.clear()
        offset = (self.cols - len(BACK_RANK)) // 2
        last = self.rows - 1

        for side, back, cannon, soldier in (
            (Side.BLACK, 0, 2, 3),
            (Side.RED, last, last - 2, last - 3),
        ):
            for col, piece_type in enumerate(BACK_RANK):
                self.set_piece(back, col + offset, Piece(piece_type, side))
            for col in CANNON_COLS:
                self.set_piece(cannon, col + offset, Piece(PieceType.CANNON, side))
            for col in SOLDIER_COLS:
                self.set_piece(soldier, col + offset, Piece(PieceType.SOLDIER, side))

    # ==================== 几何辅助 ====================

    def in_palace(self, row: int, col: int, side: Side) -> bool:
        """坐标是否在该方九宫内"""
        if col not in self.config.palace_cols:
            return False
        if side is Side.RED:
            return self.rows - 3 <= row <= self.rows - 1
        return 0 <= row <= 2

    def has_crossed_river(self, row: int, side: Side) -> bool:
        """该行对指定阵营而言是否已过河"""
        if side is Side.RED:
            return row < self.config.river_row
        return row >= self.config.river_row

    def count_pieces_between(self, from_pos: Position, to_pos: Position) -> int:
        """
        统计同行或同列两点之间（不含端点）的棋子数

        Returns:
            int: 棋子数量；两点不在同一直线上时返回-1
        """
        from_row, from_col = from_pos
        to_row, to_col = to_pos

        if from_row == to_row:
            low, high = sorted((from_col, to_col))
            segment = self.grid[from_row, low + 1:high]
        elif from_col == to_col:
            low, high = sorted((from_row, to_row))
            segment = self.grid[low + 1:high, from_col]
        else:
            return -1

        return int(np.count_nonzero(segment))

    # ==================== 格式转换 ====================

    def to_grid(self) -> List[List[Optional[Piece]]]:
        """转换为行优先的棋子列表"""
        return [[self.get_piece(row, col) for col in range(self.cols)]
                for row in range(self.rows)]

    @classmethod
    def from_grid(cls, grid: List[List[Optional[Piece]]],
                  config: Optional[BoardConfig] = None) -> 'Board':
        """
        从行优先的棋子列表创建棋盘

        Raises:
            ValueError: 行数或列数与棋盘配置不符
        """
        board = cls(config)
        if len(grid) != board.rows:
            raise ValueError(f"棋盘应包含{board.rows}行，实际为{len(grid)}行")

        for row, cells in enumerate(grid):
            if len(cells) != board.cols:
                raise ValueError(f"第{row + 1}行应包含{board.cols}列，实际为{len(cells)}列")
            for col, piece in enumerate(cells):
                board.set_piece(row, col, piece)

        return board

    def to_fen(self, side_to_move: Side = Side.RED) -> str:
        """
        转换为FEN格式

        Args:
            side_to_move: 轮到走子的一方

        Returns:
            str: FEN格式字符串
        """
        fen_rows = []

        for row in range(self.rows):
            fen_row = ""
            empty_count = 0

            for col in range(self.cols):
                piece = self.get_piece(row, col)
                if piece is None:
                    empty_count += 1
                    continue
                if empty_count > 0:
                    fen_row += str(empty_count)
                    empty_count = 0
                fen_row += piece.fen_symbol

            if empty_count > 0:
                fen_row += str(empty_count)

            fen_rows.append(fen_row)

        player_char = "w" if side_to_move is Side.RED else "b"
        return f"{'/'.join(fen_rows)} {player_char} - - 0 1"

    @classmethod
    def from_fen(cls, fen: str, config: Optional[BoardConfig] = None) -> Tuple['Board', Side]:
        """
        从FEN格式加载棋局

        Args:
            fen: FEN格式字符串
            config: 棋盘尺寸配置

        Returns:
            Tuple[Board, Side]: 棋盘与轮到走子的一方
        """
        parts = fen.split()
        if len(parts) < 2:
            raise ValueError("无效的FEN格式")

        board = cls(config)
        rows = parts[0].split("/")
        if len(rows) != board.rows:
            raise ValueError(f"FEN格式应包含{board.rows}行")

        for i, fen_row in enumerate(rows):
            col = 0
            digits = ""
            for char in fen_row + " ":
                if char.isdigit():
                    digits += char
                    continue
                if digits:
                    col += int(digits)
                    digits = ""
                if char == " ":
                    break
                if col >= board.cols:
                    raise ValueError(f"第{i + 1}行列数超出范围")
                board.set_piece(i, col, Piece.from_fen_symbol(char))
                col += 1
            if col != board.cols:
                raise ValueError(f"第{i + 1}行列数应为{board.cols}")

        side = Side.RED if parts[1] in ("w", "r") else Side.BLACK
        return board, side

    def to_visual_string(self) -> str:
        """
        转换为可视化字符串

        Returns:
            str: 可视化的棋盘字符串
        """
        header = "   " + " ".join(f" {chr(ord('a') + col)}" for col in range(self.cols))
        lines = [header]

        for row in range(self.rows):
            cells = []
            for col in range(self.cols):
                piece = self.get_piece(row, col)
                cells.append(piece.display_name if piece else "・")
            lines.append(f"{row:>2} " + " ".join(cells))
            if row == self.config.river_row - 1:
                lines.append("   " + "楚河        汉界".center(self.cols * 3 - 1))

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_visual_string()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return False
        return np.array_equal(self.grid, other.grid)
