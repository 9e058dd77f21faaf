"""
纸牌数据结构.

定义Card类: 花色和点数构成不可变的身份，朝向(正面/背面)是唯一可变的属性.
"""

from dataclasses import dataclass, field
from typing import Dict

from .types import Suit, Rank, CardColor, color_of


_RANK_DISPLAY: Dict[Rank, str] = {
    Rank.ACE: "A", Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8",
    Rank.NINE: "9", Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K"
}

_SUIT_DISPLAY: Dict[Suit, str] = {
    Suit.CLUBS: "C", Suit.DIAMONDS: "D",
    Suit.HEARTS: "H", Suit.SPADES: "S"
}

_RANK_PARSE: Dict[str, Rank] = {
    "A": Rank.ACE, "1": Rank.ACE, "2": Rank.TWO, "3": Rank.THREE,
    "4": Rank.FOUR, "5": Rank.FIVE, "6": Rank.SIX, "7": Rank.SEVEN,
    "8": Rank.EIGHT, "9": Rank.NINE, "10": Rank.TEN, "T": Rank.TEN,
    "J": Rank.JACK, "Q": Rank.QUEEN, "K": Rank.KING
}

_SUIT_PARSE: Dict[str, Suit] = {
    "C": Suit.CLUBS, "D": Suit.DIAMONDS, "H": Suit.HEARTS, "S": Suit.SPADES
}


@dataclass(eq=False)
class Card:
    """
    表示一张纸牌.

    相等性和哈希只取决于花色和点数，翻面不会改变一张牌的身份.

    Attributes:
        suit: 花色
        rank: 点数
        face_up: 是否正面朝上，新建的牌默认背面朝上

    Examples:
        >>> card = Card(Suit.HEARTS, Rank.ACE)
        >>> str(card)
        'AH'
        >>> card.face_up
        False
    """

    suit: Suit
    rank: Rank
    face_up: bool = field(default=False)

    def __post_init__(self) -> None:
        """
        验证纸牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")

    @property
    def color(self) -> CardColor:
        """纸牌颜色."""
        return color_of(self.suit)

    @property
    def is_red(self) -> bool:
        return self.color is CardColor.RED

    def flip(self) -> None:
        """翻转纸牌朝向."""
        self.face_up = not self.face_up

    def copy(self) -> 'Card':
        """
        复制纸牌.

        Returns:
            Card: 身份和朝向相同的独立对象
        """
        return Card(self.suit, self.rank, self.face_up)

    def to_display_str(self) -> str:
        """
        返回用于展示的字符串.

        Returns:
            str: 正面朝上时如"A♥"，背面朝上时为"##"
        """
        if not self.face_up:
            return "##"
        return f"{_RANK_DISPLAY[self.rank]}{self.suit.value}"

    @classmethod
    def from_str(cls, card_str: str, face_up: bool = False) -> 'Card':
        """
        从字符串创建纸牌对象.

        Args:
            card_str: 纸牌字符串，格式为"点数花色"，如"AH"、"10d"
            face_up: 新纸牌的朝向

        Returns:
            Card: 对应的纸牌对象

        Raises:
            TypeError: 当输入不是字符串时
            ValueError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        text = card_str.strip().upper()
        if len(text) < 2:
            raise ValueError(f"纸牌字符串格式错误: {card_str}")

        rank_str, suit_str = text[:-1], text[-1]
        if rank_str not in _RANK_PARSE:
            raise ValueError(f"无效的点数: {rank_str}")
        if suit_str not in _SUIT_PARSE:
            raise ValueError(f"无效的花色: {suit_str}")

        return cls(_SUIT_PARSE[suit_str], _RANK_PARSE[rank_str], face_up)

    def __str__(self) -> str:
        """
        返回纸牌的字符串表示.

        Returns:
            str: 格式为"点数花色"的字符串，如"AH"表示红桃A
        """
        return f"{_RANK_DISPLAY[self.rank]}{_SUIT_DISPLAY[self.suit]}"

    def __repr__(self) -> str:
        orientation = "up" if self.face_up else "down"
        return f"Card({self.rank.name}, {self.suit.name}, {orientation})"

    def __lt__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __eq__(self, other: object) -> bool:
        """
        判断两张牌是否相等.

        Args:
            other: 另一个对象

        Returns:
            bool: 花色和点数都相同则返回True，不考虑朝向
        """
        if not isinstance(other, Card):
            return NotImplemented
        return self.suit == other.suit and self.rank == other.rank

    def __hash__(self) -> int:
        return hash((self.suit, self.rank))
