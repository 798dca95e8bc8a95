"""
象棋棋子数据结构

定义阵营、棋子类型和不可变的棋子值对象，以及棋子与整数编码、
FEN符号之间的转换。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Side(Enum):
    """阵营枚举"""
    RED = "red"         # 红方，下方，先行
    BLACK = "black"     # 黑方，上方

    @property
    def opponent(self) -> 'Side':
        """对方阵营"""
        return Side.BLACK if self is Side.RED else Side.RED

    @property
    def sign(self) -> int:
        """整数编码中的符号（红正黑负）"""
        return 1 if self is Side.RED else -1

    @property
    def display_name(self) -> str:
        """中文名称"""
        return "红方" if self is Side.RED else "黑方"


class PieceType(Enum):
    """棋子类型枚举，取值即存档中使用的类型符号"""
    GENERAL = "K"       # 帅/将
    ADVISOR = "A"       # 仕/士
    ELEPHANT = "E"      # 相/象
    HORSE = "H"         # 马
    ROOK = "R"          # 车
    CANNON = "C"        # 炮
    SOLDIER = "S"       # 兵/卒


# 棋子类型与整数编码（绝对值）的对应关系
PIECE_CODES = {
    PieceType.GENERAL: 1,
    PieceType.ADVISOR: 2,
    PieceType.ELEPHANT: 3,
    PieceType.HORSE: 4,
    PieceType.ROOK: 5,
    PieceType.CANNON: 6,
    PieceType.SOLDIER: 7,
}
CODE_TO_TYPE = {code: piece_type for piece_type, code in PIECE_CODES.items()}

# FEN记法中的棋子符号（红方大写，黑方小写）
FEN_SYMBOLS = {
    PieceType.GENERAL: 'K',
    PieceType.ADVISOR: 'A',
    PieceType.ELEPHANT: 'B',
    PieceType.HORSE: 'N',
    PieceType.ROOK: 'R',
    PieceType.CANNON: 'C',
    PieceType.SOLDIER: 'P',
}
FEN_TO_TYPE = {symbol: piece_type for piece_type, symbol in FEN_SYMBOLS.items()}

# 棋子中文名称
PIECE_NAMES = {
    Side.RED: {
        PieceType.GENERAL: "帅", PieceType.ADVISOR: "仕", PieceType.ELEPHANT: "相",
        PieceType.HORSE: "马", PieceType.ROOK: "车", PieceType.CANNON: "炮",
        PieceType.SOLDIER: "兵",
    },
    Side.BLACK: {
        PieceType.GENERAL: "将", PieceType.ADVISOR: "士", PieceType.ELEPHANT: "象",
        PieceType.HORSE: "马", PieceType.ROOK: "车", PieceType.CANNON: "炮",
        PieceType.SOLDIER: "卒",
    },
}


@dataclass(frozen=True)
class Piece:
    """
    棋子

    不可变值对象，除类型与阵营外没有其他身份，同类同阵营的棋子可互换。
    """
    type: PieceType
    side: Side

    @property
    def code(self) -> int:
        """整数编码：红方为正，黑方为负"""
        return PIECE_CODES[self.type] * self.side.sign

    @property
    def fen_symbol(self) -> str:
        """FEN符号"""
        symbol = FEN_SYMBOLS[self.type]
        return symbol if self.side is Side.RED else symbol.lower()

    @property
    def display_name(self) -> str:
        """中文名称"""
        return PIECE_NAMES[self.side][self.type]

    @classmethod
    def from_code(cls, code: int) -> Optional['Piece']:
        """
        从整数编码创建棋子

        Args:
            code: 整数编码，0表示空位

        Returns:
            Optional[Piece]: 棋子，空位返回None
        """
        if code == 0:
            return None
        piece_type = CODE_TO_TYPE.get(abs(int(code)))
        if piece_type is None:
            raise ValueError(f"无效的棋子编码: {code}")
        return cls(piece_type, Side.RED if code > 0 else Side.BLACK)

    @classmethod
    def from_fen_symbol(cls, symbol: str) -> 'Piece':
        """从FEN符号创建棋子"""
        piece_type = FEN_TO_TYPE.get(symbol.upper())
        if piece_type is None:
            raise ValueError(f"无效的FEN棋子符号: {symbol}")
        return cls(piece_type, Side.RED if symbol.isupper() else Side.BLACK)

    def __str__(self) -> str:
        return self.display_name
