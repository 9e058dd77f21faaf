"""
测试公共工具
"""

from .helpers import (
    StackedRng,
    arrange_engine,
    build_deck_order,
    canonical_cards,
    card_names,
    state_signature,
)

__all__ = [
    'StackedRng',
    'arrange_engine',
    'build_deck_order',
    'canonical_cards',
    'card_names',
    'state_signature',
]
