"""
配置管理器

负责加载、保存和管理各种配置。
"""

import yaml
import json
from pathlib import Path
from typing import Dict, Any, Type, TypeVar
from dataclasses import asdict, fields, replace

from .game_config import (
    BoardConfig, GameConfig, SystemConfig,
    DEFAULT_BOARD_CONFIG, DEFAULT_GAME_CONFIG, DEFAULT_SYSTEM_CONFIG
)
from ..utils.exceptions import ConfigurationError
from ..utils.logger import get_logger

T = TypeVar('T')

logger = get_logger('xiangqi.config')


class ConfigManager:
    """
    配置管理器

    负责加载、保存和管理系统的各种配置。
    """

    def __init__(self, config_dir: str = "xiangqi_project/configs"):
        """
        初始化配置管理器

        Args:
            config_dir: 配置文件目录
        """
        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        # 配置文件路径
        self.config_files = {
            'board': self.config_dir / 'board_config.yaml',
            'game': self.config_dir / 'game_config.yaml',
            'system': self.config_dir / 'system_config.yaml'
        }

        # 默认配置
        self.default_configs = {
            'board': DEFAULT_BOARD_CONFIG,
            'game': DEFAULT_GAME_CONFIG,
            'system': DEFAULT_SYSTEM_CONFIG
        }

        # 配置类型映射
        self.config_types = {
            'board': BoardConfig,
            'game': GameConfig,
            'system': SystemConfig
        }

        self._initialize_default_configs()

    def _initialize_default_configs(self):
        """初始化默认配置文件"""
        for config_name, config_obj in self.default_configs.items():
            config_file = self.config_files[config_name]
            if not config_file.exists():
                self.save_config(config_name, config_obj)
                logger.info(f"创建默认配置文件: {config_file}")

    def _default(self, config_name: str):
        # 返回副本，避免调用方修改模块级默认实例
        return replace(self.default_configs[config_name])

    def load_config(self, config_name: str, config_class: Type[T]) -> T:
        """
        加载配置

        Args:
            config_name: 配置名称
            config_class: 配置类

        Returns:
            配置对象
        """
        config_file = self.config_files.get(config_name)
        if not config_file or not config_file.exists():
            logger.warning(f"配置文件不存在: {config_file}，使用默认配置")
            return self._default(config_name)

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                if config_file.suffix == '.yaml':
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)

            config = self._dict_to_dataclass(data or {}, config_class)
            logger.info(f"成功加载配置: {config_file}")
            return config

        except (OSError, ValueError, TypeError, AttributeError, yaml.YAMLError) as e:
            logger.error(f"加载配置文件失败: {config_file}, 错误: {e}")
            return self._default(config_name)

    def save_config(self, config_name: str, config_obj: Any):
        """
        保存配置

        Args:
            config_name: 配置名称
            config_obj: 配置对象
        """
        config_file = self.config_files.get(config_name)
        if not config_file:
            raise ConfigurationError(config_name, "未知的配置名称")

        data = asdict(config_obj)

        with open(config_file, 'w', encoding='utf-8') as f:
            if config_file.suffix == '.yaml':
                yaml.dump(data, f, default_flow_style=False,
                          allow_unicode=True, indent=2)
            else:
                json.dump(data, f, ensure_ascii=False, indent=2)

        logger.info(f"成功保存配置: {config_file}")

    def get_board_config(self) -> BoardConfig:
        """获取棋盘配置"""
        return self.load_config('board', BoardConfig)

    def get_game_config(self) -> GameConfig:
        """获取对局配置"""
        return self.load_config('game', GameConfig)

    def get_system_config(self) -> SystemConfig:
        """获取系统配置"""
        return self.load_config('system', SystemConfig)

    def update_config(self, config_name: str, **kwargs):
        """
        更新配置

        Args:
            config_name: 配置名称
            **kwargs: 要更新的配置项
        """
        if config_name not in self.config_types:
            raise ConfigurationError(config_name, "未知的配置名称")

        config = self.load_config(config_name, self.config_types[config_name])

        for key, value in kwargs.items():
            if hasattr(config, key):
                setattr(config, key, value)
            else:
                logger.warning(f"配置项不存在: {key}")

        self.save_config(config_name, config)

    def reset_config(self, config_name: str):
        """
        重置配置为默认值

        Args:
            config_name: 配置名称
        """
        self.save_config(config_name, self.default_configs[config_name])
        logger.info(f"配置已重置为默认值: {config_name}")

    def validate_config(self, config_name: str) -> bool:
        """
        验证配置的有效性

        Args:
            config_name: 配置名称

        Returns:
            bool: 配置是否有效
        """
        config = self.load_config(config_name, self.config_types[config_name])

        if config_name == 'board':
            try:
                config.validate()
            except ConfigurationError as e:
                logger.error(f"配置验证失败: {e}")
                return False
            return True
        elif config_name == 'system':
            return config.log_level.upper() in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

        return True

    def get_all_configs(self) -> Dict[str, Any]:
        """
        获取所有配置

        Returns:
            Dict[str, Any]: 所有配置的字典
        """
        return {
            config_name: self.load_config(config_name, config_class)
            for config_name, config_class in self.config_types.items()
        }

    def export_configs(self, export_path: str):
        """
        导出所有配置到文件

        Args:
            export_path: 导出文件路径
        """
        export_data = {
            config_name: asdict(config_obj)
            for config_name, config_obj in self.get_all_configs().items()
        }

        export_file = Path(export_path)
        with open(export_file, 'w', encoding='utf-8') as f:
            if export_file.suffix == '.yaml':
                yaml.dump(export_data, f, default_flow_style=False,
                          allow_unicode=True, indent=2)
            else:
                json.dump(export_data, f, ensure_ascii=False, indent=2)

        logger.info(f"配置已导出到: {export_path}")

    def _dict_to_dataclass(self, data: Dict[str, Any], dataclass_type: Type[T]) -> T:
        """
        将字典转换为数据类对象

        Args:
            data: 字典数据
            dataclass_type: 数据类类型

        Returns:
            数据类对象
        """
        field_names = {f.name for f in fields(dataclass_type)}

        # 过滤有效字段
        filtered_data = {k: v for k, v in data.items() if k in field_names}
        return dataclass_type(**filtered_data)
