"""
牌堆类型定义.
"""

from enum import Enum


class PileType(Enum):
    """牌堆类型枚举"""
    STOCK = "stock"              # 牌库，背面朝上
    WASTE = "waste"              # 翻开的牌，最多draw_count张
    DISCARD = "discard"          # 等待回收的翻开牌
    TABLEAU = "tableau"          # 七列桌面牌
    FOUNDATION = "foundation"    # 四个基础堆

    @property
    def label(self) -> str:
        """中文名称，用于日志和错误信息"""
        return {
            PileType.STOCK: "牌库",
            PileType.WASTE: "翻牌区",
            PileType.DISCARD: "回收区",
            PileType.TABLEAU: "桌面牌堆",
            PileType.FOUNDATION: "基础堆",
        }[self]
