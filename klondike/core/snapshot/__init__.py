"""
Snapshot Module - 状态快照

该模块提供牌局状态的不可变快照，以及调试用的文本格式化。

Classes:
    GameStateSnapshot: 牌局状态快照

Functions:
    format_snapshot: 生成快照的调试文本
"""

from .types import GameStateSnapshot
from .formatter import format_snapshot

__all__ = [
    'GameStateSnapshot',
    'format_snapshot',
]
