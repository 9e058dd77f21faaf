"""
核心规则类型定义

定义移动被拒绝时使用的错误代码。
"""

from enum import Enum

__all__ = ['MoveError']


class MoveError(Enum):
    """移动错误代码枚举"""
    EMPTY_SOURCE = "empty_source"                # 来源牌堆为空
    INVALID_PILE_INDEX = "invalid_pile_index"    # 牌堆序号越界
    INVALID_CARD_INDEX = "invalid_card_index"    # 牌的位置越界
    SAME_PILE = "same_pile"                      # 来源和目标是同一牌堆
    KING_REQUIRED = "king_required"              # 空桌面牌堆只接受K
    ACE_REQUIRED = "ace_required"                # 空基础堆只接受A
    COLOR_MISMATCH = "color_mismatch"            # 颜色未交替
    RANK_MISMATCH = "rank_mismatch"              # 点数不相邻
    SUIT_MISMATCH = "suit_mismatch"              # 花色不一致
    FACE_DOWN_CARD = "face_down_card"            # 移动的牌中有背面朝上的牌
    BROKEN_RUN = "broken_run"                    # 移动的牌不是合法序列
