"""
Klondike - 接龙规则引擎

分层结构：
    core: 纯领域逻辑（纸牌、牌堆、规则、引擎、不变量、事件、快照）
    application: 配置服务和日志配置

界面层通过new_game()创建引擎，然后调用引擎的翻牌、移动和访问方法。
"""

import random
from typing import Optional

from .application.config_service import ConfigService
from .core.engine import KlondikeEngine
from .core.events import EventBus

__version__ = "1.0.0"

__all__ = ['KlondikeEngine', 'new_game', '__version__']


def new_game(seed: Optional[int] = None,
             profile: str = "default",
             event_bus: Optional[EventBus] = None) -> KlondikeEngine:
    """
    按规则配置文件创建一局新游戏

    Args:
        seed: 洗牌种子，相同种子得到相同的发牌
        profile: 规则配置文件名
        event_bus: 事件总线，默认由引擎新建

    Returns:
        KlondikeEngine: 已发牌的引擎

    Raises:
        GameConfigError: 当配置文件不存在时
    """
    rules = ConfigService().get_game_rules_config(profile)
    return KlondikeEngine(rng=random.Random(seed), rules=rules, event_bus=event_bus)
