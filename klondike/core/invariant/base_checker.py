"""
不变量检查器基类

子类实现_run()，在其中用_report()登记发现的问题；check()负责计时、
收集记录并生成InvariantCheckResult。
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional
import time
import uuid

from ..snapshot.types import GameStateSnapshot
from .types import InvariantType, InvariantViolation, InvariantCheckResult, ViolationSeverity

__all__ = ['BaseInvariantChecker']


class BaseInvariantChecker(ABC):
    """不变量检查器基础抽象类"""

    #: 检查需要牌库和回收区的内容时为True
    requires_hidden = False

    def __init__(self, invariant_type: InvariantType):
        self.invariant_type = invariant_type
        self._found: List[InvariantViolation] = []

    @abstractmethod
    def _run(self, snapshot: GameStateSnapshot) -> None:
        """检查快照，发现的问题通过_report()登记"""

    def check(self, snapshot: Optional[GameStateSnapshot]) -> InvariantCheckResult:
        """
        对快照执行检查

        快照缺失或不满足requires_hidden时直接记为严重违反；检查逻辑自身
        抛出的异常同样转换为严重违反，不向外传播。

        Args:
            snapshot: 牌局状态快照

        Returns:
            InvariantCheckResult: 检查结果
        """
        self._found = []
        started = time.perf_counter()

        if snapshot is None:
            self._report("快照为空")
        elif self.requires_hidden and not snapshot.reveals_hidden:
            self._report("快照不包含牌库和回收区的内容，无法检查", game_id=snapshot.game_id)
        else:
            try:
                self._run(snapshot)
            except Exception as e:
                self._report(
                    f"检查过程中发生异常: {e}",
                    exception_type=type(e).__name__,
                )

        return InvariantCheckResult.from_violations(
            self.invariant_type,
            self._found,
            check_duration=time.perf_counter() - started,
        )

    def _report(self, description: str,
                severity: ViolationSeverity = ViolationSeverity.CRITICAL,
                **context: Any) -> InvariantViolation:
        violation = InvariantViolation(
            invariant_type=self.invariant_type,
            violation_id=f"{self.invariant_type.name.lower()}_{uuid.uuid4().hex[:8]}",
            description=description,
            severity=severity,
            timestamp=time.time(),
            context=context,
        )
        self._found.append(violation)
        return violation
