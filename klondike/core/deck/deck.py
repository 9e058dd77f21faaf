"""
纸牌牌组管理.

定义Deck类，提供标准52张牌的生成、洗牌和发牌功能.
"""

import random
from typing import List, Optional, Protocol

from .card import Card
from .types import get_all_suits, get_all_ranks


class ShuffleSource(Protocol):
    """洗牌随机源协议，random.Random或测试用的固定排列桩都满足该协议."""

    def shuffle(self, x: List[Card]) -> None:
        ...


class Deck:
    """
    表示一副纸牌.

    包含52张标准纸牌，新建时全部背面朝上.
    随机源通过构造参数注入，以支持确定性测试.

    Attributes:
        _cards: 当前牌组中的牌列表，列表末尾为牌顶
        _rng: 洗牌随机源

    Examples:
        >>> deck = Deck(random.Random(7))
        >>> deck.shuffle()
        >>> card = deck.deal_card()
        >>> len(deck)
        51
    """

    STANDARD_SIZE = 52

    def __init__(self, rng: Optional[ShuffleSource] = None) -> None:
        """
        初始化牌组.

        Args:
            rng: 洗牌随机源。如果为None，使用新的random.Random实例
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self._reset_deck()

    def _reset_deck(self) -> None:
        """重置牌组为完整的52张牌(花色 × 点数)."""
        self._cards = [
            Card(suit, rank)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        ]

    def shuffle(self) -> None:
        """
        洗牌.

        由随机源就地打乱牌的顺序，random.Random使用Fisher-Yates算法，每种排列概率相同.
        """
        self._rng.shuffle(self._cards)

    def deal_card(self) -> Card:
        """
        从牌顶发一张牌.

        Returns:
            Card: 发出的牌

        Raises:
            IndexError: 当牌组为空时
        """
        if not self._cards:
            raise IndexError("Cannot deal from empty deck")
        return self._cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        发多张牌.

        Args:
            count: 要发的牌数

        Returns:
            List[Card]: 按发牌顺序排列的牌

        Raises:
            ValueError: 当count为负数时
            IndexError: 当牌组中的牌不足时
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        if count > len(self._cards):
            raise IndexError(f"Cannot deal {count} cards, only {len(self._cards)} remaining")

        return [self.deal_card() for _ in range(count)]

    def deal_remaining(self) -> List[Card]:
        """
        取出牌组中剩余的全部牌.

        Returns:
            List[Card]: 保持原顺序的剩余牌，末尾仍为牌顶
        """
        remaining = self._cards
        self._cards = []
        return remaining

    @property
    def cards_remaining(self) -> int:
        """牌组中剩余的牌数."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return len(self._cards) == 0

    def reset(self) -> None:
        """重置牌组为完整的52张牌."""
        self._reset_deck()

    def peek_top(self) -> Optional[Card]:
        """
        查看顶部的牌但不发出.

        Returns:
            Optional[Card]: 顶部的牌，如果牌组为空则返回None
        """
        if not self._cards:
            return None
        return self._cards[-1]

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
