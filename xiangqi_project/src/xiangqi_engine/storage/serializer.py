"""
对局存档

提供引擎状态的序列化与恢复，以及 JSON 文件的保存/读取。
只保存必要的对局信息（轮到哪方、棋盘格子），不保存历史。
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..game.game_engine import GameEngine
from ..rules_engine import Board, Piece, PieceType, Side
from ..utils.exceptions import InvalidSaveDataError, SaveNotFoundError, StorageError
from ..utils.logger import get_logger

logger = get_logger('xiangqi.storage')


def serialize_engine(engine: GameEngine) -> Dict[str, Any]:
    """
    序列化引擎状态

    Args:
        engine: 对局引擎

    Returns:
        Dict: ``{"side_to_move": "red"|"black", "grid": [[{"type", "side"}|None, ...], ...]}``
    """
    grid = [
        [{'type': piece.type.value, 'side': piece.side.value} if piece else None for piece in row]
        for row in engine.board.to_grid()
    ]
    return {'side_to_move': engine.side_to_move.value, 'grid': grid}


def _parse_cell(cell: Any, row: int, col: int, location: str) -> Optional[Piece]:
    if cell is None:
        return None
    if not isinstance(cell, Mapping):
        raise InvalidSaveDataError(location, f"第{row}行第{col}列不是有效的棋子数据")

    # 兼容 {"t": ..., "s": ...} 的简写格式
    type_value = cell.get('type', cell.get('t'))
    side_value = cell.get('side', cell.get('s'))
    try:
        return Piece(PieceType(type_value), Side(side_value))
    except ValueError:
        raise InvalidSaveDataError(
            location, f"第{row}行第{col}列棋子无效: type={type_value!r}, side={side_value!r}"
        ) from None


def build_board(data: Any, engine: GameEngine, location: str = '<data>') -> Board:
    """
    从存档数据构建棋盘，不修改引擎

    Raises:
        InvalidSaveDataError: 数据缺少棋盘或行列数不符
    """
    if not isinstance(data, Mapping):
        raise InvalidSaveDataError(location, "存档数据必须是对象")

    grid = data.get('grid')
    if not isinstance(grid, list):
        raise InvalidSaveDataError(location, "缺少棋盘数据或格式不是数组")

    config = engine.board_config
    if len(grid) != config.rows:
        raise InvalidSaveDataError(location, f"棋盘应包含{config.rows}行，实际为{len(grid)}行")

    pieces = []
    for row, cells in enumerate(grid):
        if not isinstance(cells, list) or len(cells) != config.cols:
            raise InvalidSaveDataError(location, f"第{row}行应包含{config.cols}列")
        pieces.append([_parse_cell(cell, row, col, location) for col, cell in enumerate(cells)])

    return Board.from_grid(pieces, config)


def apply_to_engine(data: Any, engine: GameEngine, location: str = '<data>') -> None:
    """
    将存档数据应用到引擎（重建棋盘），并清空历史与状态

    数据结构有误时抛出异常，引擎保持原状。

    Args:
        data: serialize_engine 产生的数据
        engine: 对局引擎
        location: 数据来源描述，用于错误信息

    Raises:
        InvalidSaveDataError: 数据结构无效
    """
    board = build_board(data, engine, location)

    side_value = data.get('side_to_move', data.get('sideToMove'))
    side = Side.BLACK if side_value == Side.BLACK.value else Side.RED

    engine.load_position(board, side)
    logger.info(f"读取对局成功: {location}")


def save_to_file(engine: GameEngine, filepath: Union[str, Path]) -> Path:
    """
    保存对局到 JSON 文件

    Args:
        engine: 对局引擎
        filepath: 文件路径

    Returns:
        Path: 写入的文件路径
    """
    path = Path(filepath)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(serialize_engine(engine), f, ensure_ascii=False, indent=2)
    except OSError as e:
        raise StorageError(str(path), str(e)) from e

    logger.info(f"已保存对局: {path}")
    return path


def load_from_file(filepath: Union[str, Path], engine: GameEngine) -> None:
    """
    从 JSON 文件读取对局

    Args:
        filepath: 文件路径
        engine: 对局引擎

    Raises:
        SaveNotFoundError: 文件不存在
        InvalidSaveDataError: 文件内容不是有效的存档
    """
    path = Path(filepath)
    if not path.is_file():
        raise SaveNotFoundError(str(path))

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except ValueError as e:
        raise InvalidSaveDataError(str(path), f"JSON解析失败: {e}") from e
    except OSError as e:
        raise StorageError(str(path), str(e)) from e

    apply_to_engine(data, engine, str(path))
