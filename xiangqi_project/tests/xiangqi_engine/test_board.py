"""
测试Board类的功能

测试棋局表示、越界处理、克隆、初始布局和格式转换等功能。
"""

import pytest
import numpy as np
from xiangqi_project.src.xiangqi_engine.config import BoardConfig
from xiangqi_project.src.xiangqi_engine.rules_engine import Board, Piece, PieceType, Side


RED_ROOK = Piece(PieceType.ROOK, Side.RED)
BLACK_HORSE = Piece(PieceType.HORSE, Side.BLACK)


class TestBoard:
    """Board类的测试"""

    def setup_method(self):
        """每个测试方法前的设置"""
        self.board = Board()
        self.board.setup_initial()

    def test_empty_board(self):
        """新建棋盘为空"""
        board = Board()
        assert board.grid.shape == (10, 9)
        assert list(board.iter_pieces()) == []
        assert board.get_general_position(Side.RED) is None

    def test_initial_board_setup(self):
        """测试初始棋局设置"""
        assert len(list(self.board.iter_pieces())) == 32
        assert len(list(self.board.iter_pieces(Side.RED))) == 16

        assert self.board.get_general_position(Side.RED) == (9, 4)
        assert self.board.get_general_position(Side.BLACK) == (0, 4)

        black_back = [self.board.get_piece(0, col).type for col in range(9)]
        assert black_back == [
            PieceType.ROOK, PieceType.HORSE, PieceType.ELEPHANT, PieceType.ADVISOR,
            PieceType.GENERAL, PieceType.ADVISOR, PieceType.ELEPHANT, PieceType.HORSE,
            PieceType.ROOK,
        ]

        assert self.board.get_piece(2, 1) == Piece(PieceType.CANNON, Side.BLACK)
        assert self.board.get_piece(7, 7) == Piece(PieceType.CANNON, Side.RED)
        for col in (0, 2, 4, 6, 8):
            assert self.board.get_piece(3, col) == Piece(PieceType.SOLDIER, Side.BLACK)
            assert self.board.get_piece(6, col) == Piece(PieceType.SOLDIER, Side.RED)

        # 红方与黑方镜像
        for col in range(9):
            black = self.board.get_piece(0, col)
            red = self.board.get_piece(9, col)
            assert black.type == red.type
            assert black.side is Side.BLACK and red.side is Side.RED

    def test_setup_initial_resets(self):
        """重新布局会清掉多余棋子"""
        self.board.set_piece(4, 4, RED_ROOK)
        self.board.setup_initial()
        assert self.board.get_piece(4, 4) is None

    def test_out_of_bounds_access(self):
        """越界读取返回None，越界写入不做任何事"""
        assert self.board.get_piece(-1, 0) is None
        assert self.board.get_piece(10, 0) is None
        assert self.board.get_piece(0, 9) is None

        snapshot = self.board.clone()
        self.board.set_piece(10, 10, RED_ROOK)
        self.board.set_piece(-1, -1, RED_ROOK)
        assert self.board == snapshot

    def test_move_piece(self):
        """测试无条件移动和吃子"""
        result = self.board.move_piece(9, 0, 0, 0)
        assert result.captured == Piece(PieceType.ROOK, Side.BLACK)
        assert self.board.get_piece(0, 0) == RED_ROOK
        assert self.board.get_piece(9, 0) is None

        result = self.board.move_piece(6, 4, 5, 4)
        assert result.captured is None

    def test_move_piece_out_of_bounds(self):
        """越界移动不做任何事"""
        snapshot = self.board.clone()
        result = self.board.move_piece(9, 0, 10, 0)
        assert result.captured is None
        assert self.board == snapshot

        result = self.board.move_piece(-1, 0, 5, 0)
        assert result.captured is None
        assert self.board == snapshot

    def test_clone_independent(self):
        """克隆后互不影响"""
        clone = self.board.clone()
        assert clone == self.board

        clone.move_piece(6, 4, 5, 4)
        assert clone != self.board
        assert self.board.get_piece(6, 4) == Piece(PieceType.SOLDIER, Side.RED)

        self.board.clear()
        assert clone.get_piece(0, 4) == Piece(PieceType.GENERAL, Side.BLACK)

    def test_general_position_first_match(self):
        """多个帅时返回行优先的第一个"""
        board = Board()
        board.set_piece(8, 5, Piece(PieceType.GENERAL, Side.RED))
        board.set_piece(7, 3, Piece(PieceType.GENERAL, Side.RED))
        assert board.get_general_position(Side.RED) == (7, 3)

    def test_geometry_helpers(self):
        """测试九宫、河界和直线计数"""
        assert self.board.in_palace(9, 3, Side.RED)
        assert self.board.in_palace(7, 5, Side.RED)
        assert not self.board.in_palace(6, 4, Side.RED)
        assert not self.board.in_palace(0, 4, Side.RED)
        assert self.board.in_palace(2, 5, Side.BLACK)
        assert not self.board.in_palace(1, 6, Side.BLACK)

        assert self.board.has_crossed_river(4, Side.RED)
        assert not self.board.has_crossed_river(5, Side.RED)
        assert self.board.has_crossed_river(5, Side.BLACK)
        assert not self.board.has_crossed_river(4, Side.BLACK)

        # 红车与黑车之间隔着红兵、黑卒
        assert self.board.count_pieces_between((9, 0), (0, 0)) == 2
        assert self.board.count_pieces_between((0, 0), (0, 8)) == 7
        assert self.board.count_pieces_between((9, 0), (8, 1)) == -1

    def test_grid_conversion(self):
        """测试行优先列表转换"""
        grid = self.board.to_grid()
        assert len(grid) == 10 and len(grid[0]) == 9
        assert grid[9][4] == Piece(PieceType.GENERAL, Side.RED)

        rebuilt = Board.from_grid(grid)
        assert rebuilt == self.board

        with pytest.raises(ValueError):
            Board.from_grid(grid[:9])
        with pytest.raises(ValueError):
            Board.from_grid([row[:8] for row in grid])

    def test_fen_conversion(self):
        """测试FEN格式转换"""
        fen = self.board.to_fen()
        assert fen.startswith("rnbakabnr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RNBAKABNR w")

        board, side = Board.from_fen(fen)
        assert board == self.board
        assert side is Side.RED

        _, side = Board.from_fen(self.board.to_fen(Side.BLACK))
        assert side is Side.BLACK

    def test_invalid_fen(self):
        """测试无效的FEN"""
        with pytest.raises(ValueError):
            Board.from_fen("rnbakabnr")
        with pytest.raises(ValueError):
            Board.from_fen("rnbakabnr/9/9 w")
        with pytest.raises(ValueError):
            Board.from_fen("rnbakabnrr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RNBAKABNR w")
        with pytest.raises(ValueError):
            Board.from_fen("rnbakabnx/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RNBAKABNR w")

    def test_visual_string(self):
        """测试可视化字符串"""
        text = self.board.to_visual_string()
        assert "帅" in text and "将" in text
        assert "楚河" in text
        assert str(self.board) == text


class TestConfiguredBoard:
    """非标准尺寸棋盘"""

    def test_larger_board_layout(self):
        """布局在更宽的棋盘上居中，红方在最后一行"""
        board = Board.initial(BoardConfig(rows=12, cols=11))
        assert board.grid.shape == (12, 11)
        assert board.get_general_position(Side.BLACK) == (0, 5)
        assert board.get_general_position(Side.RED) == (11, 5)
        assert board.get_piece(8, 1) == Piece(PieceType.SOLDIER, Side.RED)
        assert board.get_piece(0, 0) is None

        assert board.in_palace(9, 4, Side.RED)
        assert not board.in_palace(9, 3, Side.RED)
        assert board.has_crossed_river(5, Side.RED)
        assert not board.has_crossed_river(6, Side.RED)

    def test_grid_dtype(self):
        """棋盘以整数矩阵保存"""
        board = Board.initial()
        assert np.issubdtype(board.grid.dtype, np.integer)
        assert board.grid[9, 4] == 1
        assert board.grid[0, 4] == -1
