"""
Domain Events - 领域事件定义

该模块定义了接龙引擎的领域事件类型。事件只描述已经发生的状态变化或被拒绝的移动，
展示层可以订阅这些事件来刷新界面。
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional
from enum import Enum, auto
import time
import uuid


class EventType(Enum):
    """事件类型枚举"""
    # 牌局生命周期事件
    GAME_DEALT = auto()

    # 牌库事件
    CARDS_DRAWN = auto()
    STOCK_RECYCLED = auto()

    # 移动事件
    CARDS_MOVED = auto()
    CARD_FLIPPED = auto()

    # 错误事件
    MOVE_REJECTED = auto()


@dataclass(frozen=True)
class DomainEvent:
    """
    领域事件基类

    Attributes:
        event_id: 事件唯一标识符
        event_type: 事件类型
        aggregate_id: 聚合根ID（即game_id）
        timestamp: 事件发生时间戳
        data: 事件数据
        version: 事件版本号
        correlation_id: 关联ID，用于追踪同一次操作产生的多个事件
    """
    event_id: str
    event_type: EventType
    aggregate_id: str
    timestamp: float
    data: Dict[str, Any]
    version: int = 1
    correlation_id: Optional[str] = None

    @classmethod
    def create(
        cls,
        event_type: EventType,
        aggregate_id: str,
        data: Dict[str, Any],
        correlation_id: Optional[str] = None
    ) -> DomainEvent:
        """
        创建领域事件的工厂方法

        Args:
            event_type: 事件类型
            aggregate_id: 聚合根ID
            data: 事件数据
            correlation_id: 关联ID

        Returns:
            DomainEvent: 创建的事件实例
        """
        return cls(
            event_id=str(uuid.uuid4()),
            event_type=event_type,
            aggregate_id=aggregate_id,
            timestamp=time.time(),
            data=data,
            correlation_id=correlation_id
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        将事件转换为字典格式，用于日志输出

        Returns:
            Dict[str, Any]: 事件的字典表示
        """
        return {
            'event_id': self.event_id,
            'event_type': self.event_type.name,
            'aggregate_id': self.aggregate_id,
            'timestamp': self.timestamp,
            'data': self.data,
            'version': self.version,
            'correlation_id': self.correlation_id
        }

    @classmethod
    def _from_data(cls, game_id: str, data: Dict[str, Any],
                   correlation_id: Optional[str] = None):
        """按子类声明的EVENT_TYPE创建具体事件"""
        base_event = DomainEvent.create(cls.EVENT_TYPE, game_id, data, correlation_id)
        return cls(**base_event.__dict__)


# 具体事件类型定义

@dataclass(frozen=True)
class GameDealtEvent(DomainEvent):
    """开局发牌完成事件"""
    EVENT_TYPE: ClassVar[EventType] = EventType.GAME_DEALT

    @classmethod
    def create(cls, game_id: str, tableau_sizes: List[int], stock_count: int,
               correlation_id: Optional[str] = None) -> GameDealtEvent:
        return cls._from_data(game_id, {
            'tableau_sizes': tableau_sizes,
            'stock_count': stock_count,
        }, correlation_id)


@dataclass(frozen=True)
class CardsDrawnEvent(DomainEvent):
    """从牌库翻牌事件，cards按翻出顺序排列"""
    EVENT_TYPE: ClassVar[EventType] = EventType.CARDS_DRAWN

    @classmethod
    def create(cls, game_id: str, cards: List[str], stock_count: int,
               correlation_id: Optional[str] = None) -> CardsDrawnEvent:
        return cls._from_data(game_id, {
            'cards': cards,
            'stock_count': stock_count,
        }, correlation_id)


@dataclass(frozen=True)
class StockRecycledEvent(DomainEvent):
    """回收区牌重新放回牌库事件"""
    EVENT_TYPE: ClassVar[EventType] = EventType.STOCK_RECYCLED

    @classmethod
    def create(cls, game_id: str, recycled_count: int,
               correlation_id: Optional[str] = None) -> StockRecycledEvent:
        return cls._from_data(game_id, {'recycled_count': recycled_count}, correlation_id)


@dataclass(frozen=True)
class CardsMovedEvent(DomainEvent):
    """纸牌移动成功事件"""
    EVENT_TYPE: ClassVar[EventType] = EventType.CARDS_MOVED

    @classmethod
    def create(cls, game_id: str, source: str, target: str, cards: List[str],
               correlation_id: Optional[str] = None) -> CardsMovedEvent:
        return cls._from_data(game_id, {
            'source': source,
            'target': target,
            'cards': cards,
        }, correlation_id)


@dataclass(frozen=True)
class CardFlippedEvent(DomainEvent):
    """桌面牌堆新露出的牌被翻开事件"""
    EVENT_TYPE: ClassVar[EventType] = EventType.CARD_FLIPPED

    @classmethod
    def create(cls, game_id: str, pile: str, card: str,
               correlation_id: Optional[str] = None) -> CardFlippedEvent:
        return cls._from_data(game_id, {'pile': pile, 'card': card}, correlation_id)


@dataclass(frozen=True)
class MoveRejectedEvent(DomainEvent):
    """移动被拒绝事件，error_code为MoveError的取值"""
    EVENT_TYPE: ClassVar[EventType] = EventType.MOVE_REJECTED

    @classmethod
    def create(cls, game_id: str, operation: str, error_code: str, message: str,
               correlation_id: Optional[str] = None) -> MoveRejectedEvent:
        return cls._from_data(game_id, {
            'operation': operation,
            'error_code': error_code,
            'message': message,
        }, correlation_id)
