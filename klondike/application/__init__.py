"""
Application Layer - 应用服务层

应用层可以访问核心层，但不能被核心层访问。

Services:
    ConfigService: 规则配置文件和日志配置

Functions:
    configure_logging: 按LoggingConfig初始化日志
"""

from .config_service import (
    ConfigService,
    GameRulesConfig,
    LoggingConfig,
    configure_logging,
)

__all__ = [
    "ConfigService",
    "GameRulesConfig",
    "LoggingConfig",
    "configure_logging",
]
