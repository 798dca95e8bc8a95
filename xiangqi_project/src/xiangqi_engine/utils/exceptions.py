"""
异常定义

定义象棋引擎的各种异常类型。
"""


class XiangqiError(Exception):
    """
    象棋引擎基础异常

    所有象棋引擎相关异常的基类。
    """

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class InvalidMoveError(XiangqiError):
    """
    非法走法异常

    当命令行或外部调用方给出无法解析的走法时抛出。
    引擎内部的非法走子只返回False，不抛出此异常。
    """

    def __init__(self, move_str: str, reason: str = ""):
        message = f"非法走法: {move_str}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "INVALID_MOVE")
        self.move_str = move_str
        self.reason = reason


class ConfigurationError(XiangqiError):
    """
    配置错误异常

    当配置参数无效时抛出。
    """

    def __init__(self, config_name: str, reason: str = ""):
        message = f"配置错误 - {config_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "CONFIG_ERROR")
        self.config_name = config_name
        self.reason = reason


class GameStateError(XiangqiError):
    """
    游戏状态异常

    当棋局数据无效或不一致时抛出。
    """

    def __init__(self, state_description: str, reason: str = ""):
        message = f"游戏状态错误: {state_description}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "GAME_STATE_ERROR")
        self.state_description = state_description
        self.reason = reason


class StorageError(XiangqiError):
    """
    存储相关异常

    存档读写失败的基类。
    """

    def __init__(self, location: str, reason: str = "", error_code: str = "STORAGE_ERROR"):
        message = f"存储错误 - {location}"
        if reason:
            message += f": {reason}"
        super().__init__(message, error_code)
        self.location = location
        self.reason = reason


class SaveNotFoundError(StorageError):
    """未找到存档记录"""

    def __init__(self, location: str):
        super().__init__(location, "未找到存档记录", "SAVE_NOT_FOUND")


class InvalidSaveDataError(StorageError):
    """
    存档数据格式无效

    与"未找到存档"区分：数据存在但结构不符合要求。
    """

    def __init__(self, location: str, reason: str = ""):
        super().__init__(location, reason or "无效的存档数据", "INVALID_SAVE_DATA")
