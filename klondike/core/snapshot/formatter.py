"""
快照文本格式化

把快照转成多行文本，用于调试输出。输出中的背面朝上的牌显示为"##"。
"""

from typing import List

from .types import GameStateSnapshot

__all__ = ['format_snapshot']


def format_snapshot(snapshot: GameStateSnapshot) -> str:
    """
    生成快照的调试文本

    Args:
        snapshot: 牌局状态快照

    Returns:
        str: 包含牌库数量、翻牌区、回收区数量、各桌面牌堆和基础堆的多行文本
    """
    lines: List[str] = [f"Deck size: {snapshot.stock_count}"]

    if snapshot.visible_cards:
        lines.append("Visible cards: " + " ".join(c.to_display_str() for c in snapshot.visible_cards))
    else:
        lines.append("Visible cards: None")

    lines.append(f"Discarded cards: {snapshot.discard_count}")

    lines.append("Game piles:")
    for i, pile in enumerate(snapshot.tableau):
        content = " ".join(c.to_display_str() for c in pile) if pile else "Empty"
        lines.append(f"Pile {i + 1}: {content}")

    lines.append("Foundations:")
    for i, pile in enumerate(snapshot.foundations):
        # 基础堆只显示顶牌和张数
        content = f"{pile[-1].to_display_str()} ({len(pile)})" if pile else "Empty"
        lines.append(f"Foundation {i + 1}: {content}")

    return "\n".join(lines)
