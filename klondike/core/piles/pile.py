"""
牌堆数据结构.

Pile是有序的纸牌序列，索引0为底部，末尾为顶部.
所有牌堆都支持后进先出的访问方式，桌面牌堆另外支持按位置取出一段牌.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from ..deck.card import Card
from .types import PileType

__all__ = ['Pile']


class Pile:
    """
    纸牌牌堆.

    牌堆持有纸牌实例的所有权；对外只通过cards属性提供副本，避免调用方修改内部状态.

    Attributes:
        pile_type: 牌堆类型
        index: 同类牌堆中的序号，牌库和翻牌区为0
    """

    def __init__(self, pile_type: PileType, index: int = 0,
                 cards: Optional[Iterable[Card]] = None) -> None:
        self.pile_type = pile_type
        self.index = index
        self._cards: List[Card] = list(cards) if cards is not None else []

    @property
    def name(self) -> str:
        """牌堆名称，如"tableau[3]"."""
        return f"{self.pile_type.value}[{self.index}]"

    @property
    def cards(self) -> Tuple[Card, ...]:
        """
        牌堆内容副本.

        Returns:
            Tuple[Card, ...]: 从底到顶的纸牌副本
        """
        return tuple(card.copy() for card in self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def peek(self) -> Optional[Card]:
        """
        查看顶部的牌.

        Returns:
            Optional[Card]: 顶部的牌，牌堆为空时返回None
        """
        return self._cards[-1] if self._cards else None

    def card_at(self, position: int) -> Optional[Card]:
        """
        查看指定位置的牌，不接受负数位置.

        Args:
            position: 从底部开始的位置

        Returns:
            Optional[Card]: 该位置的牌，越界时返回None
        """
        if not self.has_position(position):
            return None
        return self._cards[position]

    def has_position(self, position: int) -> bool:
        """检查位置是否在牌堆范围内"""
        return isinstance(position, int) and 0 <= position < len(self._cards)

    def push(self, card: Card) -> None:
        """把一张牌放到顶部"""
        self._cards.append(card)

    def push_many(self, cards: Iterable[Card]) -> None:
        """
        按顺序把多张牌放到顶部.

        Args:
            cards: 从底到顶排列的纸牌
        """
        self._cards.extend(cards)

    def pop(self) -> Card:
        """
        取出顶部的牌.

        Returns:
            Card: 顶部的牌

        Raises:
            IndexError: 当牌堆为空时
        """
        if not self._cards:
            raise IndexError(f"Cannot pop from empty pile {self.name}")
        return self._cards.pop()

    def take_from(self, position: int) -> List[Card]:
        """
        取出从指定位置到顶部的一段牌.

        Args:
            position: 起始位置

        Returns:
            List[Card]: 保持原顺序的一段牌

        Raises:
            IndexError: 当位置越界时
        """
        if not self.has_position(position):
            raise IndexError(f"Position {position} out of range for pile {self.name}")
        run = self._cards[position:]
        del self._cards[position:]
        return run

    def peek_from(self, position: int) -> List[Card]:
        """查看从指定位置到顶部的一段牌，不取出"""
        if not self.has_position(position):
            raise IndexError(f"Position {position} out of range for pile {self.name}")
        return self._cards[position:]

    def take_all(self) -> List[Card]:
        """取出全部牌，保持原顺序"""
        cards = self._cards
        self._cards = []
        return cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Pile({self.name}, size={len(self._cards)})"
