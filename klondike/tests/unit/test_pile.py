"""
牌堆模块的单元测试.
"""

import pytest

from klondike.core.deck import Card
from klondike.core.piles import Pile, PileType


def make_pile(*texts, face_up=True):
    return Pile(PileType.TABLEAU, 2, [Card.from_str(t, face_up=face_up) for t in texts])


class TestPile:
    """Pile类的单元测试."""

    def test_empty_pile(self):
        pile = Pile(PileType.STOCK)

        assert pile.is_empty
        assert len(pile) == 0
        assert pile.peek() is None
        assert pile.name == "stock[0]"
        with pytest.raises(IndexError):
            pile.pop()

    def test_push_pop_is_lifo(self):
        """测试后进先出."""
        pile = Pile(PileType.WASTE)
        pile.push(Card.from_str("AH"))
        pile.push(Card.from_str("2C"))

        assert str(pile.peek()) == "2C"
        assert str(pile.pop()) == "2C"
        assert str(pile.pop()) == "AH"
        assert pile.is_empty

    def test_cards_returns_copies(self):
        """测试cards属性返回副本，修改副本不影响牌堆."""
        pile = make_pile("KS", "QH")
        copies = pile.cards

        assert isinstance(copies, tuple)
        assert [str(c) for c in copies] == ["KS", "QH"]

        copies[0].flip()
        assert pile.card_at(0).face_up is True

    def test_take_from_removes_run(self):
        """测试take_from取出一段牌并保持顺序."""
        pile = make_pile("KS", "QH", "JC", "10D")
        run = pile.take_from(1)

        assert [str(c) for c in run] == ["QH", "JC", "10D"]
        assert [str(c) for c in pile] == ["KS"]

    def test_peek_from_does_not_remove(self):
        pile = make_pile("KS", "QH")

        assert [str(c) for c in pile.peek_from(0)] == ["KS", "QH"]
        assert len(pile) == 2

    @pytest.mark.parametrize("position", [-1, 2, 10])
    def test_position_out_of_range(self, position):
        """测试越界位置，负数位置同样视为越界."""
        pile = make_pile("KS", "QH")

        assert not pile.has_position(position)
        assert pile.card_at(position) is None
        with pytest.raises(IndexError):
            pile.take_from(position)
        with pytest.raises(IndexError):
            pile.peek_from(position)

    def test_take_all_empties_pile(self):
        pile = make_pile("AH", "2H", "3H")
        cards = pile.take_all()

        assert [str(c) for c in cards] == ["AH", "2H", "3H"]
        assert pile.is_empty

    def test_push_many_keeps_order(self):
        pile = Pile(PileType.FOUNDATION, 1)
        pile.push_many([Card.from_str("AS"), Card.from_str("2S")])

        assert str(pile.peek()) == "2S"
        assert pile.name == "foundation[1]"

    def test_pile_type_labels(self):
        assert PileType.TABLEAU.label == "桌面牌堆"
        assert PileType.FOUNDATION.label == "基础堆"
