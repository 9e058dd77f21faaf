"""
Invariant Module - 牌局不变量

该模块实现接龙牌局的不变量检查，包括：
- 52张牌守恒验证
- 基础堆顺序验证
- 牌面朝向验证

Classes:
    GameInvariants: 牌局不变量检查器
    CardConservationChecker: 纸牌守恒检查器
    FoundationOrderChecker: 基础堆顺序检查器
    FaceOrientationChecker: 牌面朝向检查器
    BaseInvariantChecker: 不变量检查器基类

Types:
    InvariantType: 不变量类型枚举
    ViolationSeverity: 违反严重程度
    InvariantViolation: 不变量违反记录
    InvariantCheckResult: 不变量检查结果
    InvariantError: 不变量错误异常
"""

from .types import (
    InvariantType,
    ViolationSeverity,
    InvariantViolation,
    InvariantCheckResult,
    InvariantError
)
from .base_checker import BaseInvariantChecker
from .card_conservation_checker import CardConservationChecker
from .foundation_order_checker import FoundationOrderChecker
from .face_orientation_checker import FaceOrientationChecker
from .game_invariants import GameInvariants

__all__ = [
    # 主要接口
    'GameInvariants',

    # 具体检查器
    'CardConservationChecker',
    'FoundationOrderChecker',
    'FaceOrientationChecker',
    'BaseInvariantChecker',

    # 类型定义
    'InvariantType',
    'ViolationSeverity',
    'InvariantViolation',
    'InvariantCheckResult',
    'InvariantError'
]
