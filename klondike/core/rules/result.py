"""
定义规则检查的结果对象
"""
from dataclasses import dataclass
from typing import Optional

from .types import MoveError


@dataclass(frozen=True)
class RuleCheck:
    """
    规则检查结果，用于封装一次合法性判断的结论。

    Attributes:
        allowed (bool): 移动是否合法。
        message (Optional[str]): 不合法时提供的可读原因。
        error_code (Optional[MoveError]): 机器可读的错误代码。
    """
    allowed: bool
    message: Optional[str] = None
    error_code: Optional[MoveError] = None

    @staticmethod
    def allow() -> 'RuleCheck':
        """创建一个表示合法的实例"""
        return RuleCheck(allowed=True)

    @staticmethod
    def deny(message: str, error_code: MoveError) -> 'RuleCheck':
        """创建一个表示不合法的实例"""
        return RuleCheck(allowed=False, message=message, error_code=error_code)

    def __bool__(self) -> bool:
        return self.allowed
