"""
Core Module - 纯领域逻辑层

该模块包含接龙游戏的核心业务逻辑。
核心模块只能依赖其他核心模块，不能依赖应用层或界面层。

Modules:
    deck: 纸牌、牌组和洗牌
    piles: 牌堆数据结构
    rules: 移动规则和规则配置
    engine: 游戏引擎
    invariant: 牌局不变量检查
    events: 领域事件系统
    snapshot: 状态快照
"""

from .deck import Card, Deck, Suit, Rank, CardColor
from .piles import Pile, PileType
from .rules import GameRulesConfig, MoveError, RuleCheck
from .engine import KlondikeEngine
from .snapshot import GameStateSnapshot, format_snapshot
from .exceptions import KlondikeError, GameConfigError, PileIndexError

__all__ = [
    'Card',
    'Deck',
    'Suit',
    'Rank',
    'CardColor',
    'Pile',
    'PileType',
    'GameRulesConfig',
    'MoveError',
    'RuleCheck',
    'KlondikeEngine',
    'GameStateSnapshot',
    'format_snapshot',
    'KlondikeError',
    'GameConfigError',
    'PileIndexError',
]
