"""
状态快照类型定义

定义接龙牌局状态快照的不可变数据结构。快照中的纸牌都是副本，修改它们不会影响引擎。
"""

from dataclasses import dataclass, field
from typing import Tuple, Optional
import time

from ..deck.card import Card

__all__ = ['GameStateSnapshot']

PileCards = Tuple[Card, ...]


@dataclass(frozen=True)
class GameStateSnapshot:
    """
    牌局状态快照

    牌库和回收区的内容对调用方保密，默认只记录数量；
    只有以reveal_hidden=True创建的快照才带有hidden_stock和hidden_discard，供不变量检查和调试使用。

    Attributes:
        game_id: 牌局ID
        stock_count: 牌库剩余张数
        discard_count: 回收区张数
        visible_cards: 翻牌区，从旧到新，最后一张是可操作的牌
        tableau: 各桌面牌堆，从底到顶
        foundations: 各基础堆，从底到顶
        hidden_stock: 牌库内容，末尾为下一张要翻的牌
        hidden_discard: 回收区内容，按翻出顺序排列
        created_at: 快照创建时间
    """
    game_id: str
    stock_count: int
    discard_count: int
    visible_cards: PileCards
    tableau: Tuple[PileCards, ...]
    foundations: Tuple[PileCards, ...]
    hidden_stock: Optional[PileCards] = None
    hidden_discard: Optional[PileCards] = None
    created_at: float = field(default_factory=time.time)

    def __post_init__(self):
        """验证快照的有效性"""
        if not self.game_id:
            raise ValueError("game_id不能为空")
        if self.stock_count < 0:
            raise ValueError("stock_count不能为负数")
        if self.discard_count < 0:
            raise ValueError("discard_count不能为负数")
        if self.hidden_stock is not None and len(self.hidden_stock) != self.stock_count:
            raise ValueError("hidden_stock与stock_count不一致")
        if self.hidden_discard is not None and len(self.hidden_discard) != self.discard_count:
            raise ValueError("hidden_discard与discard_count不一致")

    @property
    def reveals_hidden(self) -> bool:
        """快照是否包含牌库和回收区的内容"""
        return self.hidden_stock is not None and self.hidden_discard is not None

    def total_cards(self) -> int:
        """统计所有牌堆中的牌数"""
        return (
            self.stock_count
            + self.discard_count
            + len(self.visible_cards)
            + sum(len(pile) for pile in self.tableau)
            + sum(len(pile) for pile in self.foundations)
        )

    def all_cards(self) -> PileCards:
        """
        按牌库、回收区、翻牌区、桌面、基础堆的顺序列出所有牌

        Returns:
            PileCards: 全部纸牌

        Raises:
            ValueError: 当快照不包含隐藏内容时
        """
        if not self.reveals_hidden:
            raise ValueError("快照不包含牌库和回收区的内容")
        cards = list(self.hidden_stock) + list(self.hidden_discard) + list(self.visible_cards)
        for pile in self.tableau:
            cards.extend(pile)
        for pile in self.foundations:
            cards.extend(pile)
        return tuple(cards)

    @property
    def front_card(self) -> Optional[Card]:
        """翻牌区最前面(可操作)的牌"""
        return self.visible_cards[-1] if self.visible_cards else None
