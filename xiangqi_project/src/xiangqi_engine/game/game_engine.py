"""
对局引擎

管理整局状态：当前棋盘、回合方、选子与走子、悔棋/重做和胜负判定。
引擎是单线程同步的，一个实例只属于一个对局会话，调用方需自行串行化访问。
"""

import logging
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, List, Dict, Any

from ..config.game_config import BoardConfig
from ..rules_engine import Board, RuleEngine, Side
from ..rules_engine.move import Position
from ..utils.exceptions import GameStateError
from ..utils.logger import LoggerMixin


class EngineState(Enum):
    """引擎状态枚举"""
    SELECTING = "selecting"             # 对局进行中，等待选子
    PIECE_SELECTED = "piece_selected"   # 对局进行中，已选中棋子
    GAME_OVER = "game_over"             # 对局结束


@dataclass(frozen=True)
class HistoryEntry:
    """
    走子历史记录

    before/after 都是独立克隆的棋盘，存入后不再修改。
    """
    before: Board
    after: Board
    side: Side      # 执行该步的一方


@dataclass(frozen=True)
class GameStatus:
    """对局状态，每次查询时重新计算"""
    in_check: bool = False
    checkmate: bool = False
    stalemate: bool = False
    game_over: bool = False
    game_over_reason: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)


STALEMATE_REASON = "双方僵局，无合法着法。"


def checkmate_reason(loser: Side) -> str:
    """将死时的结束原因，注明胜方"""
    return f"{loser.display_name}被将死，{loser.opponent.display_name}胜！"


class GameEngine(LoggerMixin):
    """
    对局引擎

    对外接口：new_game、select_square、get_legal_moves_of_selection、
    clear_selection、undo、redo、get_status。
    """

    def __init__(self, board_config: Optional[BoardConfig] = None,
                 rule_engine: Optional[RuleEngine] = None,
                 logger: Optional[logging.Logger] = None):
        """
        初始化对局引擎

        Args:
            board_config: 棋盘尺寸配置
            rule_engine: 规则引擎，None时自动创建
            logger: 注入的日志记录器，None时使用 xiangqi.GameEngine
        """
        self._logger = logger
        self.board_config = board_config or BoardConfig()
        self.board_config.validate()
        self.rules = rule_engine or RuleEngine()

        self.board = Board(self.board_config)
        self.side_to_move = Side.RED
        self.selected: Optional[Position] = None
        self.history: List[HistoryEntry] = []
        self.redo_stack: List[HistoryEntry] = []
        self.game_over = False
        self.game_over_reason = ""

        self.new_game()

    # ==================== 状态属性 ====================

    @property
    def state(self) -> EngineState:
        """当前所处的状态"""
        if self.game_over:
            return EngineState.GAME_OVER
        if self.selected is not None:
            return EngineState.PIECE_SELECTED
        return EngineState.SELECTING

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    @property
    def move_count(self) -> int:
        """已走步数"""
        return len(self.history)

    # ==================== 对局控制 ====================

    def new_game(self) -> bool:
        """
        重置棋盘与状态，开局红方先行

        Returns:
            bool: 是否成功
        """
        try:
            board = Board(self.board_config)
            board.setup_initial()

            self.board = board
            self.side_to_move = Side.RED
            self._reset_session_state()
            self.log_info("新开一局")
            return True

        except Exception:
            self.log_exception("新开一局失败")
            return False

    def load_position(self, board: Board, side_to_move: Side) -> None:
        """
        载入指定局面，清空历史、选子和结束标记

        Args:
            board: 棋盘（引擎保存其副本）
            side_to_move: 轮到走子的一方

        Raises:
            GameStateError: 棋盘尺寸与引擎配置不符
        """
        if (board.rows, board.cols) != (self.board_config.rows, self.board_config.cols):
            raise GameStateError(
                f"棋盘尺寸 {board.rows}x{board.cols}",
                f"引擎配置为 {self.board_config.rows}x{self.board_config.cols}"
            )

        self.board = board.clone()
        self.side_to_move = side_to_move
        self._reset_session_state()
        self.log_info(f"载入局面，轮到{side_to_move.display_name}")

    def _reset_session_state(self) -> None:
        self.selected = None
        self.history = []
        self.redo_stack = []
        self.game_over = False
        self.game_over_reason = ""

    def clear_selection(self) -> None:
        """取消当前选子"""
        self.selected = None

    def get_legal_moves_of_selection(self) -> List[Position]:
        """
        当前选中棋子的合法落点，用于提示

        Returns:
            List[Position]: 合法落点，未选子时为空
        """
        if self.selected is None:
            return []
        try:
            return self.rules.get_legal_moves_for_piece(self.board, *self.selected)
        except Exception:
            self.log_exception("合法落点计算失败")
            return []

    def select_square(self, row: int, col: int) -> bool:
        """
        选子或走子

        - 对局已结束：不做任何事
        - 未选子：点击己方棋子则选中
        - 已选子：点击合法落点则走子；否则保持原选择不变

        已选子时点击另一枚己方棋子同样视为非法落点，返回False且不会改选。
        要换一枚棋子，须先调用 clear_selection。

        Args:
            row: 行
            col: 列

        Returns:
            bool: 是否选中棋子或完成走子
        """
        try:
            if self.game_over:
                return False

            if self.selected is None:
                clicked = self.board.get_piece(row, col)
                if clicked is not None and clicked.side is self.side_to_move:
                    self.selected = (row, col)
                    self.log_debug(f"选中棋子 {clicked.display_name} ({row}, {col})")
                    return True
                return False

            if not self.rules.is_legal_move(self.board, self.selected, (row, col), self.side_to_move):
                self.log_info(f"非法走子: {self.selected} -> ({row}, {col})")
                return False

            self._commit_move(self.selected, (row, col))
            return True

        except Exception:
            self.log_exception("选择/走子失败")
            return False

    def _commit_move(self, from_pos: Position, to_pos: Position) -> None:
        """执行走子、记录历史并判定胜负"""
        mover = self.side_to_move

        before = self.board.clone()
        result = self.board.move_piece(from_pos[0], from_pos[1], to_pos[0], to_pos[1])
        after = self.board.clone()

        self.history.append(HistoryEntry(before=before, after=after, side=mover))
        self.redo_stack.clear()

        captured = f"，吃{result.captured.display_name}" if result.captured else ""
        self.log_info(f"{mover.display_name}走子 {from_pos} -> {to_pos}{captured}")

        self.side_to_move = mover.opponent
        self.selected = None

        self._evaluate_after_move(self.side_to_move)

    def _evaluate_after_move(self, opponent: Side) -> None:
        """
        判定对方是否被将死或困毙

        走子此时已经生效，判定出错只记录日志，对局继续。
        """
        try:
            in_check, checkmate, stalemate = self.rules.evaluate_side(self.board, opponent)
        except Exception:
            self.log_exception("走子后状态判定失败")
            return

        if checkmate:
            self.game_over = True
            self.game_over_reason = checkmate_reason(opponent)
            self.log_info(f"对局结束: {self.game_over_reason}")
        elif stalemate:
            self.game_over = True
            self.game_over_reason = STALEMATE_REASON
            self.log_info(f"对局结束: {self.game_over_reason}")
        elif in_check:
            self.log_warning(f"{opponent.display_name}被将！")

    def undo(self) -> bool:
        """
        悔棋

        恢复到最近一步走子前的局面，回合退回到走子方，并清除选子与结束标记。

        Returns:
            bool: 是否成功
        """
        try:
            if not self.history:
                return False

            entry = self.history.pop()
            self.board = entry.before.clone()
            self.side_to_move = entry.side
            self.selected = None
            self.game_over = False
            self.game_over_reason = ""
            self.redo_stack.append(entry)

            self.log_info("悔棋成功")
            return True

        except Exception:
            self.log_exception("悔棋失败")
            return False

    def redo(self) -> bool:
        """
        重做

        恢复最近一次悔掉的走子，轮到对方走子。不重新判定胜负，
        调用方可通过 get_status 获取最新状态。

        Returns:
            bool: 是否成功
        """
        try:
            if not self.redo_stack:
                return False

            entry = self.redo_stack.pop()
            self.board = entry.after.clone()
            self.side_to_move = entry.side.opponent
            self.selected = None
            self.history.append(entry)

            self.log_info("重做成功")
            return True

        except Exception:
            self.log_exception("重做失败")
            return False

    def get_status(self) -> GameStatus:
        """
        获取当前状态

        被将、将死、困毙均针对轮到走子的一方，每次调用都重新计算。

        Returns:
            GameStatus: 对局状态；计算出错时返回全部为假的安全默认值
        """
        try:
            in_check, checkmate, stalemate = self.rules.evaluate_side(self.board, self.side_to_move)
            return GameStatus(
                in_check=in_check,
                checkmate=checkmate,
                stalemate=stalemate,
                game_over=self.game_over,
                game_over_reason=self.game_over_reason
            )
        except Exception:
            self.log_exception("状态计算失败")
            return GameStatus()
