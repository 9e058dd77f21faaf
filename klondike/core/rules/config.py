"""
牌局规则配置

定义引擎使用的规则参数。应用层的ConfigService以具名配置的形式管理这些实例。
"""

from dataclasses import dataclass

from ..exceptions import GameConfigError

__all__ = ['GameRulesConfig', 'MAX_TABLEAU_PILES']

# 发牌需要 n(n+1)/2 张牌，并且至少留一张在牌库
MAX_TABLEAU_PILES = 8


@dataclass(frozen=True)
class GameRulesConfig:
    """
    游戏规则配置

    Attributes:
        draw_count: 每次从牌库翻开的张数
        tableau_pile_count: 桌面牌堆数量
        foundation_pile_count: 基础堆数量
        strict_run_validation: 整段移动时是否检查整段序列，关闭时只检查最底张
        enable_invariant_checks: 每次状态变更后是否运行不变量检查
    """
    draw_count: int = 3
    tableau_pile_count: int = 7
    foundation_pile_count: int = 4
    strict_run_validation: bool = False
    enable_invariant_checks: bool = False

    def __post_init__(self):
        """验证配置值"""
        if not isinstance(self.draw_count, int) or self.draw_count < 1:
            raise GameConfigError(f"draw_count必须为正整数，当前为: {self.draw_count}")
        if not isinstance(self.tableau_pile_count, int) or not 1 <= self.tableau_pile_count <= MAX_TABLEAU_PILES:
            raise GameConfigError(
                f"tableau_pile_count必须在1-{MAX_TABLEAU_PILES}之间，当前为: {self.tableau_pile_count}"
            )
        if not isinstance(self.foundation_pile_count, int) or self.foundation_pile_count < 1:
            raise GameConfigError(
                f"foundation_pile_count必须为正整数，当前为: {self.foundation_pile_count}"
            )
