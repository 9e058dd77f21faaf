"""
Events Module - 领域事件

该模块实现接龙引擎的领域事件系统，包括：
- 事件定义
- 事件总线（每个引擎实例一个）

Classes:
    DomainEvent: 领域事件基类
    EventBus: 事件总线
    EventHandler: 事件处理器协议

Event Types:
    EventType: 事件类型枚举
    GameDealtEvent: 开局发牌事件
    CardsDrawnEvent: 翻牌事件
    StockRecycledEvent: 牌库回收事件
    CardsMovedEvent: 移动成功事件
    CardFlippedEvent: 自动翻牌事件
    MoveRejectedEvent: 移动被拒绝事件

Functions:
    create_function_handler: 创建基于函数的事件处理器
"""

from .domain_events import (
    EventType,
    DomainEvent,
    GameDealtEvent,
    CardsDrawnEvent,
    StockRecycledEvent,
    CardsMovedEvent,
    CardFlippedEvent,
    MoveRejectedEvent,
)

from .event_bus import (
    EventHandler,
    EventBus,
    create_function_handler,
)

__all__ = [
    # 事件类型
    "EventType",

    # 事件类
    "DomainEvent",
    "GameDealtEvent",
    "CardsDrawnEvent",
    "StockRecycledEvent",
    "CardsMovedEvent",
    "CardFlippedEvent",
    "MoveRejectedEvent",

    # 事件总线
    "EventHandler",
    "EventBus",

    # 便利函数
    "create_function_handler",
]
