"""
核心数据模型测试

测试Piece、Side和Move的基本功能。
"""

import pytest
from xiangqi_project.src.xiangqi_engine.rules_engine import Piece, PieceType, Side, Move


class TestSide:
    """测试阵营枚举"""

    def test_opponent(self):
        """测试对方阵营"""
        assert Side.RED.opponent is Side.BLACK
        assert Side.BLACK.opponent is Side.RED

    def test_from_string(self):
        """测试从存档字符串创建"""
        assert Side("red") is Side.RED
        assert Side("black") is Side.BLACK
        assert Side(Side.RED) is Side.RED

    def test_display_name(self):
        assert Side.RED.display_name == "红方"
        assert Side.BLACK.display_name == "黑方"


class TestPiece:
    """测试Piece值对象"""

    def test_value_semantics(self):
        """同类同阵营的棋子相等且可互换"""
        assert Piece(PieceType.ROOK, Side.RED) == Piece(PieceType.ROOK, Side.RED)
        assert Piece(PieceType.ROOK, Side.RED) != Piece(PieceType.ROOK, Side.BLACK)

    def test_immutable(self):
        """棋子不可修改"""
        piece = Piece(PieceType.HORSE, Side.BLACK)
        with pytest.raises(AttributeError):
            piece.side = Side.RED

    def test_code_round_trip(self):
        """测试整数编码"""
        assert Piece(PieceType.GENERAL, Side.RED).code == 1
        assert Piece(PieceType.SOLDIER, Side.BLACK).code == -7
        assert Piece.from_code(-5) == Piece(PieceType.ROOK, Side.BLACK)
        assert Piece.from_code(0) is None

        with pytest.raises(ValueError):
            Piece.from_code(9)

    def test_fen_symbol(self):
        """测试FEN符号"""
        assert Piece(PieceType.HORSE, Side.RED).fen_symbol == 'N'
        assert Piece(PieceType.ELEPHANT, Side.BLACK).fen_symbol == 'b'
        assert Piece.from_fen_symbol('c') == Piece(PieceType.CANNON, Side.BLACK)

        with pytest.raises(ValueError):
            Piece.from_fen_symbol('x')

    def test_display_name(self):
        """测试中文名称"""
        assert Piece(PieceType.GENERAL, Side.RED).display_name == "帅"
        assert Piece(PieceType.GENERAL, Side.BLACK).display_name == "将"
        assert str(Piece(PieceType.SOLDIER, Side.BLACK)) == "卒"


class TestMove:
    """测试Move类"""

    def test_coordinate_notation(self):
        """测试坐标记法转换"""
        move = Move((6, 4), (5, 4))
        assert move.to_coordinate_notation() == "e6e5"
        assert str(move) == "e6e5"

        move2 = Move.from_coordinate_notation("b9c7")
        assert move2.from_pos == (9, 1)
        assert move2.to_pos == (7, 2)

    def test_invalid_notation(self):
        """测试无效的坐标记法"""
        with pytest.raises(ValueError):
            Move.from_coordinate_notation("e6")
        with pytest.raises(ValueError):
            Move.from_coordinate_notation("66e5")

    def test_equality_and_hash(self):
        """测试相等性与哈希"""
        assert Move((0, 0), (1, 0)) == Move((0, 0), (1, 0))
        assert len({Move((0, 0), (1, 0)), Move((0, 0), (1, 0))}) == 1

    def test_to_dict(self):
        """测试字典转换"""
        assert Move((9, 1), (7, 2)).to_dict() == {
            'from': {'row': 9, 'col': 1},
            'to': {'row': 7, 'col': 2},
        }
