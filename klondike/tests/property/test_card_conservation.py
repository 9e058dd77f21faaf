"""
Property-based Tests for Card Conservation - 纸牌守恒属性测试

该模块使用hypothesis生成任意的操作序列，确保在任何情况下：
- 52张牌守恒，无重复无遗漏
- 基础堆始终是同花色从A开始递增
- 失败的操作不改变牌局状态
- 牌库回收后的翻牌顺序与上一轮相同

Tests:
    test_conservation_under_random_operations: 随机操作下的守恒属性
    test_recycle_reproduces_draw_order: 回收顺序属性
    test_deal_shape_for_any_seed: 开局牌型属性
"""

import random

import pytest
from hypothesis import given, settings, strategies as st

from klondike.core.engine import KlondikeEngine
from klondike.core.invariant import GameInvariants
from klondike.core.rules import GameRulesConfig
from klondike.tests.common import card_names, state_signature


# Hypothesis策略定义
seed_strategy = st.integers(min_value=0, max_value=2 ** 32 - 1)
draw_count_strategy = st.integers(min_value=1, max_value=5)
pile_index_strategy = st.integers(min_value=-1, max_value=8)
card_index_strategy = st.integers(min_value=-1, max_value=19)

operation_strategy = st.one_of(
    st.tuples(st.just("draw")),
    st.tuples(st.just("visible_to_pile"), pile_index_strategy),
    st.tuples(st.just("move_cards"), pile_index_strategy, card_index_strategy, pile_index_strategy),
    st.tuples(st.just("to_foundation"), pile_index_strategy, st.integers(min_value=-1, max_value=4)),
    st.tuples(st.just("visible_to_foundation"), st.integers(min_value=-1, max_value=4)),
)


def apply_operation(engine: KlondikeEngine, operation) -> bool:
    name, args = operation[0], operation[1:]
    if name == "draw":
        return engine.draw_from_deck()
    if name == "visible_to_pile":
        return engine.move_card_from_visible_cards_to_pile(*args)
    if name == "move_cards":
        return engine.move_cards(*args)
    if name == "to_foundation":
        return engine.move_to_foundation(*args)
    return engine.move_to_foundation_from_visible_cards(*args)


@pytest.mark.property_test
@settings(max_examples=60, deadline=None)
@given(
    seed=seed_strategy,
    strict=st.booleans(),
    operations=st.lists(operation_strategy, min_size=1, max_size=120),
)
def test_conservation_under_random_operations(seed, strict, operations):
    """Property test: 无论执行什么操作，牌局状态始终合法

    引擎开启不变量检查，任何违反都会在操作内部抛出InvariantError。
    """
    rules = GameRulesConfig(strict_run_validation=strict, enable_invariant_checks=True)
    engine = KlondikeEngine(rng=random.Random(seed), rules=rules)
    invariants = GameInvariants()

    for operation in operations:
        before = state_signature(engine)
        succeeded = apply_operation(engine, operation)

        if not succeeded:
            assert state_signature(engine) == before, f"失败的操作修改了状态: {operation}"

        snapshot = engine.snapshot(reveal_hidden=True)
        assert snapshot.total_cards() == 52
        assert invariants.is_valid_state(snapshot)
        assert len(snapshot.visible_cards) <= rules.draw_count


@pytest.mark.property_test
@settings(max_examples=40, deadline=None)
@given(seed=seed_strategy, draw_count=draw_count_strategy)
def test_recycle_reproduces_draw_order(seed, draw_count):
    """Property test: 牌库回收后不重新洗牌，翻牌顺序与上一轮完全相同"""
    engine = KlondikeEngine(rng=random.Random(seed), rules=GameRulesConfig(draw_count=draw_count))

    def one_pass():
        drawn = []
        while engine.stock_size:
            engine.draw_from_deck()
            drawn.append(tuple(card_names(engine.get_visible_cards())))
        return drawn

    first = one_pass()
    assert engine.draw_from_deck() is True
    assert engine.stock_size == 24
    second = one_pass()

    assert first == second
    assert sum(len(batch) for batch in first) == 24


@pytest.mark.property_test
@settings(max_examples=50, deadline=None)
@given(seed=seed_strategy)
def test_deal_shape_for_any_seed(seed):
    """Property test: 任意种子的开局都是1..7张的桌面牌堆加24张牌库"""
    engine = KlondikeEngine(rng=random.Random(seed))

    for i, pile in enumerate(engine.tableau_piles):
        assert len(pile) == i + 1
        assert [card.face_up for card in pile] == [False] * i + [True]

    assert engine.stock_size == 24
    assert GameInvariants().is_valid_state(engine.snapshot(reveal_hidden=True))
