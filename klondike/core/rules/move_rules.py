"""
移动规则模块

实现接龙中各类移动的合法性判断。所有函数都是纯函数，不修改任何牌堆。
"""

from typing import Optional, Sequence

from ..deck.card import Card
from ..deck.types import Rank
from .result import RuleCheck
from .types import MoveError

__all__ = [
    'check_tableau_placement',
    'check_foundation_placement',
    'check_run_sequence',
    'is_descending_alternating',
]


def is_descending_alternating(upper: Card, lower: Card) -> bool:
    """
    判断upper能否叠放在lower之上：颜色交替且点数恰好小1

    Args:
        upper: 放上去的牌
        lower: 被压住的牌

    Returns:
        bool: 是否满足桌面牌堆的叠放顺序
    """
    return upper.color != lower.color and upper.rank == lower.rank - 1


def check_tableau_placement(card: Card, target_top: Optional[Card]) -> RuleCheck:
    """
    检查一张牌(或一段牌的最底张)能否放到桌面牌堆上

    Args:
        card: 要放置的牌
        target_top: 目标牌堆的顶牌，目标为空时为None

    Returns:
        RuleCheck: 检查结果
    """
    if target_top is None:
        if card.rank == Rank.KING:
            return RuleCheck.allow()
        return RuleCheck.deny(f"空桌面牌堆只能放K，实际: {card}", MoveError.KING_REQUIRED)

    if card.color == target_top.color:
        return RuleCheck.deny(
            f"{card} 与 {target_top} 颜色相同", MoveError.COLOR_MISMATCH
        )
    if card.rank != target_top.rank - 1:
        return RuleCheck.deny(
            f"{card} 的点数必须比 {target_top} 小1", MoveError.RANK_MISMATCH
        )
    return RuleCheck.allow()


def check_foundation_placement(card: Card, foundation_top: Optional[Card]) -> RuleCheck:
    """
    检查一张牌能否放到基础堆上

    Args:
        card: 要放置的牌
        foundation_top: 基础堆的顶牌，基础堆为空时为None

    Returns:
        RuleCheck: 检查结果
    """
    if foundation_top is None:
        if card.rank == Rank.ACE:
            return RuleCheck.allow()
        return RuleCheck.deny(f"空基础堆只能放A，实际: {card}", MoveError.ACE_REQUIRED)

    if card.suit != foundation_top.suit:
        return RuleCheck.deny(
            f"{card} 与基础堆顶牌 {foundation_top} 花色不同", MoveError.SUIT_MISMATCH
        )
    if card.rank != foundation_top.rank + 1:
        return RuleCheck.deny(
            f"{card} 的点数必须比 {foundation_top} 大1", MoveError.RANK_MISMATCH
        )
    return RuleCheck.allow()


def check_run_sequence(cards: Sequence[Card]) -> RuleCheck:
    """
    检查一段要整体移动的牌是否全部正面朝上且按颜色交替递减排列

    Args:
        cards: 从底到顶排列的一段牌

    Returns:
        RuleCheck: 检查结果
    """
    if not cards:
        return RuleCheck.deny("没有要移动的牌", MoveError.EMPTY_SOURCE)

    for card in cards:
        if not card.face_up:
            return RuleCheck.deny(f"{card} 背面朝上，不能移动", MoveError.FACE_DOWN_CARD)

    for lower, upper in zip(cards, cards[1:]):
        if not is_descending_alternating(upper, lower):
            return RuleCheck.deny(
                f"{upper} 不能叠放在 {lower} 上，序列不合法", MoveError.BROKEN_RUN
            )
    return RuleCheck.allow()
