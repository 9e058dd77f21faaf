"""
Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 通用的测试fixture
- 测试标记定义

所有测试都会自动加载这些配置。
"""

import random
from typing import List

import pytest

from klondike.core.engine import KlondikeEngine
from klondike.core.events import DomainEvent, EventBus, create_function_handler
from klondike.core.invariant import GameInvariants
from klondike.core.rules import GameRulesConfig


@pytest.fixture
def testing_rules() -> GameRulesConfig:
    """开启不变量检查的规则配置"""
    return GameRulesConfig(enable_invariant_checks=True)


@pytest.fixture
def event_bus() -> EventBus:
    """每个测试独立的事件总线"""
    return EventBus()


@pytest.fixture
def recorded_events(event_bus) -> List[DomainEvent]:
    """记录event_bus上发布的所有事件"""
    events: List[DomainEvent] = []
    event_bus.subscribe_all(create_function_handler(events.append))
    return events


@pytest.fixture
def engine(testing_rules, event_bus) -> KlondikeEngine:
    """用固定种子发牌的引擎"""
    return KlondikeEngine(
        rng=random.Random(20240601),
        rules=testing_rules,
        event_bus=event_bus,
        game_id="test_game",
    )


@pytest.fixture
def invariants() -> GameInvariants:
    """不变量检查器"""
    return GameInvariants()


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
