"""
纸牌守恒检查器

牌库 + 回收区 + 翻牌区 + 桌面 + 基础堆 必须恰好是一副完整的52张牌。
"""

from collections import Counter
from typing import List

from ..deck.types import get_all_suits, get_all_ranks
from ..snapshot.types import GameStateSnapshot
from .base_checker import BaseInvariantChecker
from .types import InvariantType

__all__ = ['CardConservationChecker']

STANDARD_DECK_SIZE = 52


def _names(keys) -> List[str]:
    return sorted(f"{rank.name} of {suit.name}" for suit, rank in keys)


class CardConservationChecker(BaseInvariantChecker):
    """纸牌守恒检查器

    检查总数为52、没有重复的牌、标准牌组中的每张牌都在场。
    """

    requires_hidden = True

    def __init__(self):
        super().__init__(InvariantType.CARD_CONSERVATION)
        self._expected = frozenset(
            (suit, rank) for suit in get_all_suits() for rank in get_all_ranks()
        )

    def _run(self, snapshot: GameStateSnapshot) -> None:
        total = snapshot.total_cards()
        if total != STANDARD_DECK_SIZE:
            self._report(
                f"纸牌总数不守恒: 期望{STANDARD_DECK_SIZE}, 当前{total}",
                expected_total=STANDARD_DECK_SIZE,
                current_total=total,
                stock_count=snapshot.stock_count,
                discard_count=snapshot.discard_count,
                visible_count=len(snapshot.visible_cards),
            )

        counts = Counter((card.suit, card.rank) for card in snapshot.all_cards())
        duplicates = _names(key for key, n in counts.items() if n > 1)
        missing = _names(self._expected.difference(counts))

        if duplicates:
            self._report(f"发现重复的牌: {', '.join(duplicates)}", duplicates=duplicates)
        if missing:
            self._report(f"缺少的牌: {', '.join(missing)}", missing=missing)
