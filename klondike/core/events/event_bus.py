"""
Event Bus - 事件总线系统

每个引擎实例持有自己的事件总线，不存在全局实例。处理器在publish调用内
同步执行，引擎状态在发布前已经更新完毕。
"""

from __future__ import annotations
from typing import Protocol, Dict, List, Callable, Iterable, Optional
from collections import defaultdict, deque
import logging

from .domain_events import DomainEvent, EventType


class EventHandler(Protocol):
    """事件处理器协议"""

    def handle(self, event: DomainEvent) -> None:
        ...

    def can_handle(self, event_type: EventType) -> bool:
        ...


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, 'name', handler.__class__.__name__)


class EventBus:
    """
    事件总线

    单个处理器抛出的异常只记录日志，不影响其他处理器，也不会传回引擎。
    历史记录只保留最近max_history_size个事件。
    """

    def __init__(self, max_history_size: int = 1000):
        self._handlers: Dict[EventType, List[EventHandler]] = defaultdict(list)
        self._global_handlers: List[EventHandler] = []
        self._event_history: deque = deque(maxlen=max_history_size)
        self._logger = logging.getLogger(__name__)

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """
        订阅特定类型的事件

        Args:
            event_type: 事件类型
            handler: 事件处理器
        """
        self._handlers[event_type].append(handler)
        self._logger.debug(f"Handler {_handler_name(handler)} subscribed to {event_type.name}")

    def subscribe_all(self, handler: EventHandler) -> None:
        """订阅所有事件，处理器的can_handle()仍然生效"""
        self._global_handlers.append(handler)
        self._logger.debug(f"Handler {_handler_name(handler)} subscribed to all events")

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> bool:
        """
        取消订阅特定类型的事件

        Returns:
            bool: 处理器之前已订阅时返回True
        """
        return self._remove(self._handlers[event_type], handler)

    def unsubscribe_all(self, handler: EventHandler) -> bool:
        """取消通过subscribe_all()建立的订阅"""
        return self._remove(self._global_handlers, handler)

    def _remove(self, handlers: List[EventHandler], handler: EventHandler) -> bool:
        if handler not in handlers:
            return False
        handlers.remove(handler)
        self._logger.debug(f"Handler {_handler_name(handler)} unsubscribed")
        return True

    def publish(self, event: DomainEvent) -> None:
        """
        发布事件

        先写入历史记录，再按订阅顺序调用处理器：特定类型的处理器在前，
        全局处理器在后。

        Args:
            event: 要发布的事件
        """
        self._event_history.append(event)
        self._logger.debug(f"Publishing {event.event_type.name} for {event.aggregate_id}")

        for handler in self._handlers[event.event_type] + self._global_handlers:
            can_handle = getattr(handler, 'can_handle', None)
            if can_handle is not None and not can_handle(event.event_type):
                continue
            try:
                handler.handle(event)
            except Exception as e:
                self._logger.error(
                    f"Error in handler {_handler_name(handler)} "
                    f"while handling {event.event_type.name}: {e}"
                )

    def get_event_history(self,
                          event_type: Optional[EventType] = None,
                          aggregate_id: Optional[str] = None,
                          limit: Optional[int] = None) -> List[DomainEvent]:
        """
        获取事件历史，按发布顺序排列

        Args:
            event_type: 过滤的事件类型
            aggregate_id: 过滤的牌局ID
            limit: 只返回最近的limit个事件

        Returns:
            List[DomainEvent]: 事件列表
        """
        events = [
            e for e in self._event_history
            if (event_type is None or e.event_type == event_type)
            and (aggregate_id is None or e.aggregate_id == aggregate_id)
        ]
        return events[-limit:] if limit else events

    def clear_history(self) -> None:
        self._event_history.clear()

    def get_handler_count(self, event_type: Optional[EventType] = None) -> int:
        """event_type为None时返回全局处理器数量"""
        if event_type is None:
            return len(self._global_handlers)
        return len(self._handlers[event_type])


def create_function_handler(func: Callable[[DomainEvent], None],
                            event_types: Optional[Iterable[EventType]] = None) -> EventHandler:
    """
    把普通函数包装成事件处理器

    Args:
        func: 处理函数
        event_types: 支持的事件类型，None表示支持所有类型

    Returns:
        EventHandler: 事件处理器
    """
    accepted = None if event_types is None else frozenset(event_types)

    class FunctionHandler:
        name = getattr(func, '__name__', 'FunctionHandler')

        def handle(self, event: DomainEvent) -> None:
            func(event)

        def can_handle(self, event_type: EventType) -> bool:
            return accepted is None or event_type in accepted

    return FunctionHandler()
