"""
日志与异常测试
"""

import logging

from xiangqi_project.src.xiangqi_engine.utils import (
    setup_logger, teardown_logger, get_logger, LoggerMixin,
    XiangqiError, InvalidMoveError, ConfigurationError, GameStateError,
    StorageError, SaveNotFoundError, InvalidSaveDataError
)


class Recorder(LoggerMixin):
    pass


class TestLogger:
    """日志系统"""

    def teardown_method(self):
        """每个测试后清理处理器"""
        teardown_logger('xiangqi.test')

    def test_setup_file_logger(self, tmp_path):
        """写入轮转日志文件"""
        logger = setup_logger(
            'xiangqi.test', level='DEBUG', log_file='test.log',
            log_dir=str(tmp_path / "logs"), console_output=False
        )
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        logger.info("记录一条日志")
        for handler in logger.handlers:
            handler.flush()

        content = (tmp_path / "logs" / "test.log").read_text(encoding="utf-8")
        assert "记录一条日志" in content

    def test_setup_is_idempotent(self):
        """重复设置不会叠加处理器"""
        setup_logger('xiangqi.test', console_output=True)
        logger = setup_logger('xiangqi.test', console_output=True)
        assert len(logger.handlers) == 1

    def test_silent_logger_has_null_handler(self):
        logger = setup_logger('xiangqi.test', console_output=False)
        assert [type(h) for h in logger.handlers] == [logging.NullHandler]

    def test_teardown_removes_handlers(self):
        setup_logger('xiangqi.test')
        teardown_logger('xiangqi.test')
        assert get_logger('xiangqi.test').handlers == []


class TestLoggerMixin:
    """日志混入类"""

    def test_default_logger_name(self):
        assert Recorder().logger.name == 'xiangqi.Recorder'

    def test_injected_logger(self):
        """优先使用注入的记录器"""
        injected = logging.getLogger('xiangqi.injected')
        recorder = Recorder()
        recorder._logger = injected
        assert recorder.logger is injected


class TestExceptions:
    """异常层次"""

    def test_base_error(self):
        error = XiangqiError("出错了")
        assert error.error_code == "XiangqiError"
        assert str(error) == "[XiangqiError] 出错了"

    def test_invalid_move_error(self):
        error = InvalidMoveError("z9z9", "坐标越界")
        assert error.error_code == "INVALID_MOVE"
        assert error.move_str == "z9z9"
        assert str(error) == "[INVALID_MOVE] 非法走法: z9z9 - 坐标越界"

    def test_configuration_error(self):
        error = ConfigurationError("board.rows")
        assert str(error) == "[CONFIG_ERROR] 配置错误 - board.rows"

    def test_game_state_error(self):
        error = GameStateError("棋盘尺寸 12x11", "引擎配置为 10x9")
        assert error.error_code == "GAME_STATE_ERROR"
        assert "引擎配置为 10x9" in str(error)

    def test_storage_errors(self):
        """存档异常区分未找到与数据无效"""
        missing = SaveNotFoundError("a.json")
        invalid = InvalidSaveDataError("b.json")

        assert isinstance(missing, StorageError)
        assert isinstance(invalid, StorageError)
        assert isinstance(missing, XiangqiError)
        assert missing.error_code == "SAVE_NOT_FOUND"
        assert invalid.error_code == "INVALID_SAVE_DATA"
        assert str(missing) == "[SAVE_NOT_FOUND] 存储错误 - a.json: 未找到存档记录"
        assert invalid.reason == "无效的存档数据"
