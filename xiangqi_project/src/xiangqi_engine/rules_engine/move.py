"""
象棋走法数据结构

定义走法的表示和坐标记法转换功能。
"""

from dataclasses import dataclass
from typing import Tuple
import re


Position = Tuple[int, int]

_NOTATION_PATTERN = re.compile(r'^([a-z])(\d+)([a-z])(\d+)$')


@dataclass(frozen=True)
class Move:
    """
    象棋走法类

    只记录起点和终点 (行, 列)，不携带棋子信息；走法枚举按行优先顺序产生。
    """
    from_pos: Position  # 起始位置 (行, 列)
    to_pos: Position    # 目标位置 (行, 列)

    def to_coordinate_notation(self) -> str:
        """
        转换为坐标记法

        Returns:
            str: 坐标记法字符串，如 "e6e5"（列字母 + 行号）
        """
        from_col = chr(ord('a') + self.from_pos[1])
        to_col = chr(ord('a') + self.to_pos[1])
        return f"{from_col}{self.from_pos[0]}{to_col}{self.to_pos[0]}"

    @classmethod
    def from_coordinate_notation(cls, notation: str) -> 'Move':
        """
        从坐标记法创建Move对象

        Args:
            notation: 坐标记法字符串，如 "b9c7"

        Returns:
            Move: Move对象
        """
        match = _NOTATION_PATTERN.match(notation.strip().lower())
        if not match:
            raise ValueError(f"无效的坐标记法: {notation}")

        from_col, from_row, to_col, to_row = match.groups()
        return cls(
            from_pos=(int(from_row), ord(from_col) - ord('a')),
            to_pos=(int(to_row), ord(to_col) - ord('a'))
        )

    def __str__(self) -> str:
        return self.to_coordinate_notation()

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'from': {'row': self.from_pos[0], 'col': self.from_pos[1]},
            'to': {'row': self.to_pos[0], 'col': self.to_pos[1]},
        }
