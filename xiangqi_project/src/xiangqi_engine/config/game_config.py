"""
配置数据结构

定义棋盘、对局和系统配置类及默认参数。
"""

from dataclasses import dataclass

from ..utils.exceptions import ConfigurationError


@dataclass
class BoardConfig:
    """棋盘尺寸配置"""
    rows: int = 10                      # 行数（含河界两侧）
    cols: int = 9                       # 列数

    @property
    def river_row(self) -> int:
        """红方一侧的第一行，小于该值即为黑方半场"""
        return self.rows // 2

    @property
    def palace_cols(self) -> range:
        """九宫所占的三列"""
        center = self.cols // 2
        return range(center - 1, center + 2)

    def validate(self) -> None:
        """
        校验棋盘尺寸

        Raises:
            ConfigurationError: 行数须为不小于10的偶数，列数须为不小于9的奇数
        """
        if self.rows < 10 or self.rows % 2 != 0:
            raise ConfigurationError('board.rows', f"行数须为不小于10的偶数，实际为 {self.rows}")
        if self.cols < 9 or self.cols % 2 != 1:
            raise ConfigurationError('board.cols', f"列数须为不小于9的奇数，实际为 {self.cols}")


@dataclass
class GameConfig:
    """对局配置"""
    save_file: str = 'data/xiangqi_state.json'   # 默认存档路径
    show_legal_hints: bool = True                # 选子后是否提示合法落点


@dataclass
class SystemConfig:
    """系统配置"""
    log_level: str = 'INFO'             # 日志级别
    log_file: str = ''                  # 日志文件，空字符串表示不写文件
    log_dir: str = 'logs'               # 日志目录
    log_max_size: int = 10              # 日志文件最大大小(MB)
    log_backup_count: int = 5           # 日志备份数量
    console_output: bool = False        # 日志是否同时输出到控制台


# 默认配置实例
DEFAULT_BOARD_CONFIG = BoardConfig()
DEFAULT_GAME_CONFIG = GameConfig()
DEFAULT_SYSTEM_CONFIG = SystemConfig()
