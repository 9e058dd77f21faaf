"""
Rules Module - 移动规则

该模块实现接龙的移动合法性判断，包括：
- 桌面牌堆的叠放规则（颜色交替、点数递减，空列只接受K）
- 基础堆的叠放规则（同花色、点数递增，空堆只接受A）
- 整段移动时的序列检查
- 规则配置（翻牌张数、牌堆数量、严格序列检查）
"""

from .types import MoveError
from .result import RuleCheck
from .config import GameRulesConfig, MAX_TABLEAU_PILES
from .move_rules import (
    check_tableau_placement,
    check_foundation_placement,
    check_run_sequence,
    is_descending_alternating,
)

__all__ = [
    'MoveError',
    'RuleCheck',
    'GameRulesConfig',
    'MAX_TABLEAU_PILES',
    'check_tableau_placement',
    'check_foundation_placement',
    'check_run_sequence',
    'is_descending_alternating',
]
