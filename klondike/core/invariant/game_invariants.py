"""
牌局不变量检查器

整合纸牌守恒、基础堆顺序和牌面朝向三个检查器。引擎在开启
enable_invariant_checks时于每次状态变更后调用validate_and_raise()。
"""

from typing import Dict, List

from ..snapshot.types import GameStateSnapshot
from .base_checker import BaseInvariantChecker
from .types import InvariantType, InvariantCheckResult, InvariantError, InvariantViolation
from .card_conservation_checker import CardConservationChecker
from .foundation_order_checker import FoundationOrderChecker
from .face_orientation_checker import FaceOrientationChecker

__all__ = ['GameInvariants']


class GameInvariants:
    """牌局不变量检查器"""

    def __init__(self):
        self.conservation_checker = CardConservationChecker()
        self.foundation_checker = FoundationOrderChecker()
        self.orientation_checker = FaceOrientationChecker()

        self._checkers: Dict[InvariantType, BaseInvariantChecker] = {
            checker.invariant_type: checker
            for checker in (self.conservation_checker,
                            self.foundation_checker,
                            self.orientation_checker)
        }

    def check_all(self, snapshot: GameStateSnapshot,
                  raise_on_violation: bool = False) -> Dict[InvariantType, InvariantCheckResult]:
        """检查所有不变量

        Args:
            snapshot: 牌局状态快照
            raise_on_violation: 有严重违反时是否抛出异常

        Returns:
            Dict[InvariantType, InvariantCheckResult]: 按不变量类型索引的结果

        Raises:
            InvariantError: 当raise_on_violation=True且有严重违反时
        """
        results = {
            invariant_type: checker.check(snapshot)
            for invariant_type, checker in self._checkers.items()
        }

        if raise_on_violation:
            critical = [v for r in results.values() for v in r.critical_violations]
            if critical:
                raise InvariantError(f"发现{len(critical)}个严重不变量违反", critical)

        return results

    def check_card_conservation(self, snapshot: GameStateSnapshot) -> InvariantCheckResult:
        return self.conservation_checker.check(snapshot)

    def check_foundation_order(self, snapshot: GameStateSnapshot) -> InvariantCheckResult:
        return self.foundation_checker.check(snapshot)

    def check_face_orientation(self, snapshot: GameStateSnapshot) -> InvariantCheckResult:
        return self.orientation_checker.check(snapshot)

    def is_valid_state(self, snapshot: GameStateSnapshot) -> bool:
        """所有检查器都通过时返回True"""
        return all(result.is_valid for result in self.check_all(snapshot).values())

    def get_violations(self, snapshot: GameStateSnapshot) -> List[InvariantViolation]:
        """获取所有违反记录"""
        return [v for result in self.check_all(snapshot).values() for v in result.violations]

    def get_critical_violations(self, snapshot: GameStateSnapshot) -> List[InvariantViolation]:
        """获取严重违反记录"""
        return [v for v in self.get_violations(snapshot) if v.is_critical]

    def validate_and_raise(self, snapshot: GameStateSnapshot,
                           context: str = "牌局操作") -> None:
        """
        验证状态，有严重违反时抛出异常

        Args:
            snapshot: 牌局状态快照，应包含隐藏内容
            context: 触发检查的操作，写入异常信息

        Raises:
            InvariantError: 当有严重违反时
        """
        violations = self.get_critical_violations(snapshot)
        if violations:
            raise InvariantError(f"{context}后发现{len(violations)}个严重不变量违反", violations)
