"""
工具模块

包含日志、异常处理和其他通用工具。
"""

from .logger import setup_logger, teardown_logger, get_logger, LoggerMixin
from .exceptions import (
    XiangqiError, InvalidMoveError, ConfigurationError, GameStateError,
    StorageError, SaveNotFoundError, InvalidSaveDataError
)

__all__ = [
    'setup_logger', 'teardown_logger', 'get_logger', 'LoggerMixin',
    'XiangqiError', 'InvalidMoveError', 'ConfigurationError', 'GameStateError',
    'StorageError', 'SaveNotFoundError', 'InvalidSaveDataError'
]
