"""
Engine Module - 游戏引擎

KlondikeEngine: 持有全部牌堆，负责发牌、翻牌和执行移动
"""

from .game_engine import KlondikeEngine

__all__ = ['KlondikeEngine']
