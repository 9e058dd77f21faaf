"""
纸牌牌组管理模块.

提供Card和Deck类，以及花色、点数、颜色等基础类型.
"""

from .types import Suit, Rank, CardColor, color_of, get_all_suits, get_all_ranks
from .card import Card
from .deck import Deck, ShuffleSource

__all__ = [
    'Suit', 'Rank', 'CardColor', 'color_of', 'get_all_suits', 'get_all_ranks',
    'Card', 'Deck', 'ShuffleSource',
]
