"""
牌面朝向检查器

检查各牌堆中纸牌的朝向是否符合规则：
1. 牌库中的牌全部背面朝上
2. 翻牌区和回收区中的牌全部正面朝上
3. 基础堆中的牌全部正面朝上
4. 非空桌面牌堆的顶牌正面朝上
"""

from typing import Iterable

from ..deck.card import Card
from ..snapshot.types import GameStateSnapshot
from .base_checker import BaseInvariantChecker
from .types import InvariantType

__all__ = ['FaceOrientationChecker']


class FaceOrientationChecker(BaseInvariantChecker):
    """牌面朝向检查器

    快照不含隐藏内容时跳过牌库和回收区的检查。
    """

    def __init__(self):
        super().__init__(InvariantType.FACE_ORIENTATION)

    def _run(self, snapshot: GameStateSnapshot) -> None:
        self._expect_all(snapshot.visible_cards, True, "翻牌区")
        if snapshot.hidden_stock is not None:
            self._expect_all(snapshot.hidden_stock, False, "牌库")
        if snapshot.hidden_discard is not None:
            self._expect_all(snapshot.hidden_discard, True, "回收区")
        for index, pile in enumerate(snapshot.foundations):
            self._expect_all(pile, True, f"基础堆{index}")

        for index, pile in enumerate(snapshot.tableau):
            if pile and not pile[-1].face_up:
                self._report(
                    f"桌面牌堆{index}的顶牌{pile[-1]}背面朝上",
                    tableau_index=index,
                    card=str(pile[-1]),
                )

    def _expect_all(self, cards: Iterable[Card], face_up: bool, pile_label: str) -> None:
        wrong = [str(card) for card in cards if card.face_up != face_up]
        if wrong:
            expected = "正面朝上" if face_up else "背面朝上"
            self._report(
                f"{pile_label}中的牌应全部{expected}: {', '.join(wrong)}",
                pile=pile_label,
                cards=wrong,
                expected_face_up=face_up,
            )
