"""
基础堆顺序检查器

每个基础堆从底到顶都是同一花色的A, 2, 3, ...
"""

from ..deck.types import Rank
from ..snapshot.types import GameStateSnapshot
from .base_checker import BaseInvariantChecker
from .types import InvariantType

__all__ = ['FoundationOrderChecker']


class FoundationOrderChecker(BaseInvariantChecker):
    """基础堆顺序检查器"""

    def __init__(self):
        super().__init__(InvariantType.FOUNDATION_ORDER)

    def _run(self, snapshot: GameStateSnapshot) -> None:
        for index, pile in enumerate(snapshot.foundations):
            if not pile:
                continue

            suit = pile[0].suit
            # 每个基础堆只报告第一处错误
            bad = next(
                (pos for pos, card in enumerate(pile)
                 if card.suit != suit or card.rank != Rank(pos + 1)),
                None,
            )
            if bad is None:
                continue

            expected_rank = Rank(bad + 1)
            self._report(
                f"基础堆{index}第{bad}张应为{expected_rank.name} of {suit.name}，实际为{pile[bad]!r}",
                foundation_index=index,
                position=bad,
                expected_rank=expected_rank.name,
                expected_suit=suit.name,
                actual=str(pile[bad]),
            )
