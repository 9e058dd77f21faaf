"""
不变量检查器类型定义

违反记录、检查结果以及引擎在状态被破坏时抛出的InvariantError。
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List
import time

from ..exceptions import KlondikeError

__all__ = [
    'InvariantType',
    'ViolationSeverity',
    'InvariantViolation',
    'InvariantCheckResult',
    'InvariantError'
]


class InvariantType(Enum):
    """不变量类型枚举"""
    CARD_CONSERVATION = "纸牌守恒"      # 52张牌无重复无遗漏
    FOUNDATION_ORDER = "基础堆顺序"     # 同花色、从A开始递增
    FACE_ORIENTATION = "牌面朝向"       # 各牌堆的牌面朝向

    @property
    def label(self) -> str:
        return self.value


class ViolationSeverity(str, Enum):
    """违反严重程度，可直接与字符串比较"""
    CRITICAL = 'CRITICAL'
    WARNING = 'WARNING'
    INFO = 'INFO'


@dataclass(frozen=True)
class InvariantViolation:
    """
    单条不变量违反记录

    Attributes:
        invariant_type: 被违反的不变量
        violation_id: 记录编号，形如 card_conservation_1a2b3c4d
        description: 中文描述，直接用于日志和异常信息
        severity: 严重程度，传入字符串时转换为ViolationSeverity
        timestamp: 发现时间
        context: 定位问题用的附加信息（牌堆、位置、牌面等）
    """
    invariant_type: InvariantType
    violation_id: str
    description: str
    severity: ViolationSeverity
    timestamp: float
    context: Dict[str, Any]

    def __post_init__(self):
        if not self.violation_id:
            raise ValueError("violation_id不能为空")
        if not self.description:
            raise ValueError("description不能为空")
        try:
            severity = ViolationSeverity(self.severity)
        except ValueError:
            raise ValueError(f"无效的严重程度: {self.severity}") from None
        object.__setattr__(self, 'severity', severity)
        if self.timestamp <= 0:
            raise ValueError("timestamp必须为正数")

    @property
    def is_critical(self) -> bool:
        return self.severity is ViolationSeverity.CRITICAL

    def __str__(self) -> str:
        return f"[{self.invariant_type.label}] {self.description}"


@dataclass(frozen=True)
class InvariantCheckResult:
    """单个检查器的检查结果"""
    invariant_type: InvariantType
    is_valid: bool
    violations: List[InvariantViolation]
    check_duration: float
    timestamp: float = field(default_factory=time.time)

    def __post_init__(self):
        if self.check_duration < 0:
            raise ValueError("check_duration不能为负数")
        if self.is_valid == bool(self.violations):
            raise ValueError("检查结果与违反记录不一致")

    @classmethod
    def from_violations(cls, invariant_type: InvariantType,
                        violations: List[InvariantViolation],
                        check_duration: float) -> 'InvariantCheckResult':
        """根据违反记录生成结果，没有记录即为通过"""
        return cls(
            invariant_type=invariant_type,
            is_valid=not violations,
            violations=list(violations),
            check_duration=check_duration,
        )

    @property
    def critical_violations(self) -> List[InvariantViolation]:
        return [v for v in self.violations if v.is_critical]


class InvariantError(KlondikeError):
    """牌局状态违反不变量

    只有引擎自身存在缺陷或内部状态被外部破坏时才会出现。
    """

    def __init__(self, message: str, violations: List[InvariantViolation]):
        details = "; ".join(str(v) for v in violations[:3])
        super().__init__(f"{message}: {details}" if details else message)
        self.violations = violations

    def get_critical_violations(self) -> List[InvariantViolation]:
        """获取严重违反记录"""
        return [v for v in self.violations if v.is_critical]
