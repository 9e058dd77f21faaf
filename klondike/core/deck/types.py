"""
纸牌相关类型定义.

定义纸牌的花色、点数和颜色等基础枚举类型.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    纸牌花色枚举.

    定义四种标准花色，使用Unicode符号表示.
    """

    CLUBS = "♣"       # 梅花
    DIAMONDS = "♦"    # 方块
    HEARTS = "♥"      # 红桃
    SPADES = "♠"      # 黑桃


class CardColor(Enum):
    """纸牌颜色枚举，由花色唯一决定."""

    RED = "red"
    BLACK = "black"


class Rank(IntEnum):
    """
    纸牌点数枚举.

    定义13种点数，A最小，K最大.
    接龙中只比较相邻点数，数值差为1即为相邻.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


RED_SUITS = frozenset({Suit.HEARTS, Suit.DIAMONDS})


def color_of(suit: Suit) -> CardColor:
    """
    获取花色对应的颜色.

    Args:
        suit: 花色

    Returns:
        CardColor: 红桃和方块为红色，其余为黑色
    """
    return CardColor.RED if suit in RED_SUITS else CardColor.BLACK


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 包含所有四种花色的列表
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从A到K的13种点数
    """
    return list(Rank)
