"""
移动规则单元测试

测试桌面牌堆叠放、基础堆叠放和整段序列检查。
"""

import pytest

from klondike.core.deck import Card
from klondike.core.rules import (
    MoveError,
    RuleCheck,
    check_tableau_placement,
    check_foundation_placement,
    check_run_sequence,
    is_descending_alternating,
)


def up(text: str) -> Card:
    return Card.from_str(text, face_up=True)


class TestRuleCheck:
    """测试RuleCheck结果对象"""

    def test_allow(self):
        result = RuleCheck.allow()
        assert result.allowed
        assert bool(result) is True
        assert result.error_code is None

    def test_deny(self):
        result = RuleCheck.deny("不行", MoveError.SAME_PILE)
        assert not result
        assert result.message == "不行"
        assert result.error_code == MoveError.SAME_PILE


class TestTableauPlacement:
    """测试桌面牌堆叠放规则"""

    def test_red_nine_on_black_ten(self):
        """测试红9放到黑10上合法"""
        assert check_tableau_placement(up("9H"), up("10S"))
        assert check_tableau_placement(up("9D"), up("10C"))

    def test_red_nine_on_red_ten(self):
        """测试红9放到红10上不合法"""
        result = check_tableau_placement(up("9H"), up("10D"))
        assert not result
        assert result.error_code == MoveError.COLOR_MISMATCH

    @pytest.mark.parametrize("card,target", [("8H", "10S"), ("JH", "10S"), ("10H", "10S")])
    def test_rank_must_be_one_lower(self, card, target):
        result = check_tableau_placement(up(card), up(target))
        assert not result
        assert result.error_code == MoveError.RANK_MISMATCH

    def test_king_on_empty(self):
        """测试K可以放到空桌面牌堆"""
        assert check_tableau_placement(up("KH"), None)

    @pytest.mark.parametrize("text", ["QS", "AH", "2C", "10D"])
    def test_non_king_on_empty(self, text):
        """测试非K不能放到空桌面牌堆"""
        result = check_tableau_placement(up(text), None)
        assert not result
        assert result.error_code == MoveError.KING_REQUIRED


class TestFoundationPlacement:
    """测试基础堆叠放规则"""

    def test_ace_on_empty(self):
        assert check_foundation_placement(up("AS"), None)

    def test_three_on_empty(self):
        """测试3不能放到空基础堆"""
        result = check_foundation_placement(up("3S"), None)
        assert not result
        assert result.error_code == MoveError.ACE_REQUIRED

    def test_next_rank_same_suit(self):
        assert check_foundation_placement(up("2S"), up("AS"))

    def test_wrong_suit(self):
        """测试花色不同的牌不能放到非空基础堆"""
        result = check_foundation_placement(up("2H"), up("AS"))
        assert not result
        assert result.error_code == MoveError.SUIT_MISMATCH

    @pytest.mark.parametrize("card", ["3S", "AS", "KS"])
    def test_rank_must_be_one_higher(self, card):
        result = check_foundation_placement(up(card), up("AS"))
        assert not result
        assert result.error_code == MoveError.RANK_MISMATCH


class TestRunSequence:
    """测试整段序列检查"""

    def test_valid_run(self):
        run = [up("KS"), up("QH"), up("JC"), up("10D")]
        assert check_run_sequence(run)

    def test_single_card_run(self):
        assert check_run_sequence([up("5C")])

    def test_empty_run(self):
        result = check_run_sequence([])
        assert result.error_code == MoveError.EMPTY_SOURCE

    def test_face_down_card(self):
        run = [Card.from_str("KS"), up("QH")]
        result = check_run_sequence(run)
        assert result.error_code == MoveError.FACE_DOWN_CARD

    def test_broken_run(self):
        run = [up("KS"), up("QH"), up("10C")]
        result = check_run_sequence(run)
        assert result.error_code == MoveError.BROKEN_RUN

    def test_is_descending_alternating(self):
        assert is_descending_alternating(up("QH"), up("KS"))
        assert not is_descending_alternating(up("QS"), up("KS"))
        assert not is_descending_alternating(up("KS"), up("QH"))
