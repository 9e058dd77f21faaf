#!/usr/bin/env python3
"""
ConfigService - 配置管理服务

负责集中化管理牌局配置，包括：
- 游戏规则配置（具名配置文件）
- 日志配置

核心层的引擎只接收GameRulesConfig实例，不知道配置文件的存在。
"""

import logging
from typing import Dict, List, Optional
from dataclasses import dataclass

from ..core.exceptions import GameConfigError
from ..core.rules.config import GameRulesConfig

__all__ = [
    'GameRulesConfig',
    'LoggingConfig',
    'ConfigService',
    'configure_logging',
]

PACKAGE_LOGGER_NAME = 'klondike'
_VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    enable_console_logging: bool = True
    log_file_path: Optional[str] = None

    def __post_init__(self):
        """验证日志级别"""
        self.log_level = self.log_level.upper()
        if self.log_level not in _VALID_LOG_LEVELS:
            raise GameConfigError(f"无效的日志级别: {self.log_level}")


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    按配置设置klondike包的日志器

    由应用入口调用；库本身在导入时不配置日志。重复调用会替换之前添加的处理器。

    Args:
        config: 日志配置，默认使用LoggingConfig()

    Returns:
        logging.Logger: klondike包的顶层日志器
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(getattr(logging, config.log_level))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.log_format)
    if config.enable_console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    if config.log_file_path:
        file_handler = logging.FileHandler(config.log_file_path, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._game_rules: Dict[str, GameRulesConfig] = {}
        self._logging_config = LoggingConfig()
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._game_rules = {
            'default': GameRulesConfig(),
            'strict': GameRulesConfig(strict_run_validation=True),
            'draw_one': GameRulesConfig(draw_count=1),
            'testing': GameRulesConfig(enable_invariant_checks=True),
        }
        self.logger.debug(f"默认配置加载完成: {list(self._game_rules)}")

    def get_game_rules_config(self, profile: str = "default") -> GameRulesConfig:
        """
        获取游戏规则配置

        Args:
            profile: 配置文件名 (default, strict, draw_one, testing 或已注册的名称)

        Returns:
            GameRulesConfig: 规则配置

        Raises:
            GameConfigError: 当配置文件不存在时
        """
        try:
            return self._game_rules[profile]
        except KeyError:
            raise GameConfigError(
                f"未找到游戏规则配置 '{profile}'，可用配置: {', '.join(self.list_profiles())}"
            ) from None

    def get_logging_config(self) -> LoggingConfig:
        """获取日志配置"""
        return self._logging_config

    def list_profiles(self) -> List[str]:
        """列出可用的规则配置文件"""
        return sorted(self._game_rules)

    def register_profile(self, name: str, config: GameRulesConfig) -> None:
        """
        注册或覆盖一个规则配置文件

        Args:
            name: 配置文件名
            config: 规则配置

        Raises:
            GameConfigError: 当名称为空或配置类型错误时
        """
        if not name:
            raise GameConfigError("配置文件名不能为空")
        if not isinstance(config, GameRulesConfig):
            raise GameConfigError(f"配置必须是GameRulesConfig，实际为: {type(config).__name__}")

        if name in self._game_rules:
            self.logger.info(f"覆盖游戏规则配置 '{name}'")
        self._game_rules[name] = config
