"""
测试辅助工具

StackedRng: 固定排列的洗牌源，让发牌结果完全可预测
arrange_engine: 按指定的桌面顶牌和牌库翻牌顺序构造引擎
"""

from typing import Dict, List, Optional, Sequence

from klondike.core.deck.card import Card
from klondike.core.deck.types import get_all_suits, get_all_ranks
from klondike.core.engine import KlondikeEngine
from klondike.core.events import EventBus
from klondike.core.rules import GameRulesConfig


def canonical_cards() -> List[Card]:
    """按花色 × 点数顺序列出52张牌，与Deck建牌顺序一致"""
    return [Card(suit, rank) for suit in get_all_suits() for rank in get_all_ranks()]


class StackedRng:
    """
    固定排列的洗牌源

    shuffle()把牌组重排成给定顺序，下标0为牌组底部，末尾为下一张发出的牌。
    """

    def __init__(self, order: Sequence[str]):
        self._positions = {Card.from_str(text): i for i, text in enumerate(order)}
        if len(self._positions) != len(order):
            raise ValueError("排列中有重复的牌")

    def shuffle(self, cards: List[Card]) -> None:
        cards.sort(key=lambda card: self._positions[card])


def build_deck_order(tableau: Dict[int, List[str]],
                     stock: Sequence[str],
                     tableau_pile_count: int = 7) -> List[str]:
    """
    计算能发出指定牌局的牌组顺序

    Args:
        tableau: 桌面牌堆序号 -> 该堆顶部的牌(从底到顶)，最后一张正面朝上
        stock: 牌库中最先翻出的几张牌，按翻出顺序
        tableau_pile_count: 桌面牌堆数量

    Returns:
        List[str]: 牌组顺序，末尾为第一张发出的牌
    """
    wanted = [text for cards in tableau.values() for text in cards] + list(stock)
    used = {Card.from_str(text) for text in wanted}
    if len(used) != len(wanted):
        raise ValueError("指定的牌有重复")

    # 未指定的牌按标准顺序补位
    fillers = [str(card) for card in canonical_cards() if card not in used]

    deal_sequence: List[str] = []
    for index in range(tableau_pile_count):
        top_cards = list(tableau.get(index, []))
        if len(top_cards) > index + 1:
            raise ValueError(f"桌面牌堆{index}最多{index + 1}张牌")
        padding = index + 1 - len(top_cards)
        deal_sequence.extend(fillers[:padding] + top_cards)
        del fillers[:padding]

    draw_sequence = list(stock) + fillers
    return list(reversed(deal_sequence + draw_sequence))


def arrange_engine(tableau: Optional[Dict[int, List[str]]] = None,
                   stock: Sequence[str] = (),
                   rules: Optional[GameRulesConfig] = None,
                   event_bus: Optional[EventBus] = None) -> KlondikeEngine:
    """
    构造一个发牌结果可预测的引擎

    未指定的牌从标准顺序中补位：先垫在各桌面牌堆指定牌的下面，剩下的排在牌库中指定牌之后。

    Args:
        tableau: 桌面牌堆序号 -> 该堆顶部的牌(从底到顶)
        stock: 牌库中最先翻出的牌，按翻出顺序
        rules: 规则配置，默认开启不变量检查
        event_bus: 事件总线

    Returns:
        KlondikeEngine: 已发牌的引擎
    """
    rules = rules or GameRulesConfig(enable_invariant_checks=True)
    order = build_deck_order(tableau or {}, stock, rules.tableau_pile_count)
    return KlondikeEngine(
        rng=StackedRng(order),
        rules=rules,
        event_bus=event_bus,
        game_id="arranged_game",
    )


def card_names(cards: Sequence[Card]) -> List[str]:
    """把纸牌序列转换为短字符串列表"""
    return [str(card) for card in cards]


def state_signature(engine: KlondikeEngine):
    """
    记录牌局的完整状态，包括每张牌的朝向

    Card的相等性不考虑朝向，比较状态时使用这个签名.
    """
    snapshot = engine.snapshot(reveal_hidden=True)

    def pile_signature(cards):
        return tuple((str(card), card.face_up) for card in cards)

    return (
        pile_signature(snapshot.hidden_stock),
        pile_signature(snapshot.hidden_discard),
        pile_signature(snapshot.visible_cards),
        tuple(pile_signature(pile) for pile in snapshot.tableau),
        tuple(pile_signature(pile) for pile in snapshot.foundations),
    )
