"""
牌堆模块.

提供牌库、翻牌区、桌面牌堆和基础堆共用的Pile数据结构.
"""

from .types import PileType
from .pile import Pile

__all__ = ['PileType', 'Pile']
