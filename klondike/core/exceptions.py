"""
接龙引擎异常定义.

移动操作通过返回布尔值报告失败，不抛异常.
这里的异常只用于配置错误和访问器的调用方契约违反.
"""


class KlondikeError(Exception):
    """接龙引擎基础异常类"""
    pass


class GameConfigError(KlondikeError):
    """游戏配置错误异常"""
    pass


class PileIndexError(KlondikeError, IndexError):
    """牌堆索引越界异常"""

    def __init__(self, pile_kind: str, index: int, pile_count: int):
        super().__init__(f"{pile_kind}索引越界: {index}，有效范围 0-{pile_count - 1}")
        self.pile_kind = pile_kind
        self.index = index
        self.pile_count = pile_count
