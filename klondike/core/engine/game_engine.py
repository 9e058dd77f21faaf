"""
接龙游戏引擎

KlondikeEngine持有一局接龙的全部牌堆，负责发牌、翻牌、执行移动和提供只读访问。

所有移动操作都是"失败即不变"的：非法移动返回False，并且不修改任何牌堆。
访问器只返回纸牌副本，调用方无法通过返回值修改引擎状态。
"""

import logging
import uuid
from typing import List, Optional, Sequence, Tuple

from ..deck.card import Card
from ..deck.deck import Deck, ShuffleSource
from ..events.domain_events import (
    GameDealtEvent,
    CardsDrawnEvent,
    StockRecycledEvent,
    CardsMovedEvent,
    CardFlippedEvent,
    MoveRejectedEvent,
)
from ..events.event_bus import EventBus
from ..exceptions import PileIndexError
from ..invariant.game_invariants import GameInvariants
from ..piles.pile import Pile
from ..piles.types import PileType
from ..rules.config import GameRulesConfig
from ..rules.move_rules import (
    check_tableau_placement,
    check_foundation_placement,
    check_run_sequence,
)
from ..rules.types import MoveError
from ..snapshot.types import GameStateSnapshot

__all__ = ['KlondikeEngine']

PileCards = Tuple[Card, ...]


class KlondikeEngine:
    """
    接龙游戏引擎

    构造时完成建牌、洗牌和发牌。翻牌区分为两段：
    可见段(最多draw_count张，最后一张可操作)和回收段(等待牌库用完后重新放回牌库)。

    Attributes:
        game_id: 牌局ID
        rules: 规则配置
        event_bus: 本局使用的事件总线
    """

    def __init__(self,
                 rng: Optional[ShuffleSource] = None,
                 rules: Optional[GameRulesConfig] = None,
                 event_bus: Optional[EventBus] = None,
                 game_id: Optional[str] = None):
        """
        初始化引擎并发牌

        Args:
            rng: 洗牌随机源，任何带shuffle(list)方法的对象
            rules: 规则配置，默认使用GameRulesConfig()
            event_bus: 事件总线，默认为本局新建一个
            game_id: 牌局ID，默认自动生成
        """
        self._rules = rules if rules is not None else GameRulesConfig()
        self._event_bus = event_bus if event_bus is not None else EventBus()
        self._game_id = game_id or f"game_{uuid.uuid4().hex[:8]}"
        self._logger = logging.getLogger(__name__)
        self._invariants = GameInvariants() if self._rules.enable_invariant_checks else None

        self._stock = Pile(PileType.STOCK)
        self._waste = Pile(PileType.WASTE)
        self._discard = Pile(PileType.DISCARD)
        self._tableau: List[Pile] = [
            Pile(PileType.TABLEAU, i) for i in range(self._rules.tableau_pile_count)
        ]
        self._foundations: List[Pile] = [
            Pile(PileType.FOUNDATION, i) for i in range(self._rules.foundation_pile_count)
        ]

        self._deal(Deck(rng))

    def _deal(self, deck: Deck) -> None:
        """洗牌后把牌发到桌面牌堆，剩余的牌组成牌库"""
        deck.shuffle()

        for pile in self._tableau:
            pile.push_many(deck.deal_cards(pile.index + 1))
            pile.peek().face_up = True

        self._stock.push_many(deck.deal_remaining())

        tableau_sizes = [len(pile) for pile in self._tableau]
        self._logger.info(
            f"[发牌] 牌局 {self._game_id} 发牌完成，桌面 {tableau_sizes}，牌库 {len(self._stock)} 张"
        )
        self._event_bus.publish(GameDealtEvent.create(
            game_id=self._game_id,
            tableau_sizes=tableau_sizes,
            stock_count=len(self._stock),
        ))
        self._check_invariants("发牌")

    # ------------------------------------------------------------------
    # 翻牌
    # ------------------------------------------------------------------

    def draw_from_deck(self) -> bool:
        """
        从牌库翻牌

        可见段的牌先全部移入回收段。牌库为空时把回收段按原翻出顺序放回牌库，
        本次不翻牌；否则翻开最多draw_count张放入可见段。

        Returns:
            bool: 牌库、可见段、回收段都为空时返回False，否则返回True
        """
        if self._stock.is_empty and self._waste.is_empty and self._discard.is_empty:
            return self._reject("draw_from_deck", MoveError.EMPTY_SOURCE, "牌库和翻牌区都已为空")

        self._discard.push_many(self._waste.take_all())

        if self._stock.is_empty:
            self._recycle_discard()
        else:
            self._draw_cards()

        self._check_invariants("翻牌")
        return True

    def _recycle_discard(self) -> None:
        recycled = self._discard.take_all()
        for card in recycled:
            card.face_up = False
        # 倒序放回，最早翻出的牌位于牌库顶部
        self._stock.push_many(reversed(recycled))

        self._logger.info(f"[翻牌] 牌库已空，回收 {len(recycled)} 张牌放回牌库")
        self._event_bus.publish(StockRecycledEvent.create(
            game_id=self._game_id,
            recycled_count=len(recycled),
        ))

    def _draw_cards(self) -> None:
        count = min(self._rules.draw_count, len(self._stock))
        drawn = []
        for _ in range(count):
            card = self._stock.pop()
            card.face_up = True
            self._waste.push(card)
            drawn.append(str(card))

        self._logger.debug(f"[翻牌] 翻开 {drawn}，牌库剩余 {len(self._stock)} 张")
        self._event_bus.publish(CardsDrawnEvent.create(
            game_id=self._game_id,
            cards=drawn,
            stock_count=len(self._stock),
        ))

    # ------------------------------------------------------------------
    # 移动
    # ------------------------------------------------------------------

    def move_card_from_visible_cards_to_pile(self, to_pile: int) -> bool:
        """
        把翻牌区最前面的牌移到桌面牌堆

        Args:
            to_pile: 目标桌面牌堆序号

        Returns:
            bool: 移动是否成功
        """
        operation = "move_card_from_visible_cards_to_pile"
        if not self._is_valid_index(to_pile, len(self._tableau)):
            return self._reject(operation, MoveError.INVALID_PILE_INDEX, f"桌面牌堆序号越界: {to_pile}")

        card = self._waste.peek()
        if card is None:
            return self._reject(operation, MoveError.EMPTY_SOURCE, "翻牌区没有可移动的牌")

        target = self._tableau[to_pile]
        check = check_tableau_placement(card, target.peek())
        if not check:
            return self._reject(operation, check.error_code, check.message)

        target.push(self._waste.pop())
        self._record_move(self._waste, target, [card])
        self._check_invariants(operation)
        return True

    def move_cards(self, from_pile: int, card_index: int, to_pile: int) -> bool:
        """
        把桌面牌堆中从card_index到顶部的一段牌移到另一个桌面牌堆

        只用这段牌的最底张判断能否放到目标上；开启strict_run_validation时
        还要求整段牌正面朝上、颜色交替且点数连续递减。

        Args:
            from_pile: 来源桌面牌堆序号
            card_index: 这段牌最底张在来源牌堆中的位置
            to_pile: 目标桌面牌堆序号

        Returns:
            bool: 移动是否成功
        """
        operation = "move_cards"
        tableau_count = len(self._tableau)
        if not self._is_valid_index(from_pile, tableau_count):
            return self._reject(operation, MoveError.INVALID_PILE_INDEX, f"来源桌面牌堆序号越界: {from_pile}")
        if not self._is_valid_index(to_pile, tableau_count):
            return self._reject(operation, MoveError.INVALID_PILE_INDEX, f"目标桌面牌堆序号越界: {to_pile}")
        if from_pile == to_pile:
            return self._reject(operation, MoveError.SAME_PILE, f"来源和目标是同一个桌面牌堆: {from_pile}")

        source = self._tableau[from_pile]
        if source.is_empty:
            return self._reject(operation, MoveError.EMPTY_SOURCE, f"桌面牌堆{from_pile}为空")
        if not source.has_position(card_index):
            return self._reject(
                operation, MoveError.INVALID_CARD_INDEX,
                f"桌面牌堆{from_pile}中没有位置{card_index}，共{len(source)}张"
            )

        run = source.peek_from(card_index)
        if self._rules.strict_run_validation:
            run_check = check_run_sequence(run)
            if not run_check:
                return self._reject(operation, run_check.error_code, run_check.message)

        target = self._tableau[to_pile]
        check = check_tableau_placement(run[0], target.peek())
        if not check:
            return self._reject(operation, check.error_code, check.message)

        moved = source.take_from(card_index)
        target.push_many(moved)
        self._record_move(source, target, moved)
        self._expose_top(source)
        self._check_invariants(operation)
        return True

    def move_to_foundation(self, from_pile: int, foundation_index: int) -> bool:
        """
        把桌面牌堆的顶牌移到基础堆

        Args:
            from_pile: 来源桌面牌堆序号
            foundation_index: 目标基础堆序号

        Returns:
            bool: 移动是否成功
        """
        operation = "move_to_foundation"
        if not self._is_valid_index(from_pile, len(self._tableau)):
            return self._reject(operation, MoveError.INVALID_PILE_INDEX, f"桌面牌堆序号越界: {from_pile}")
        if not self._is_valid_index(foundation_index, len(self._foundations)):
            return self._reject(operation, MoveError.INVALID_PILE_INDEX, f"基础堆序号越界: {foundation_index}")

        source = self._tableau[from_pile]
        card = source.peek()
        if card is None:
            return self._reject(operation, MoveError.EMPTY_SOURCE, f"桌面牌堆{from_pile}为空")

        target = self._foundations[foundation_index]
        check = check_foundation_placement(card, target.peek())
        if not check:
            return self._reject(operation, check.error_code, check.message)

        target.push(source.pop())
        self._record_move(source, target, [card])
        self._expose_top(source)
        self._check_invariants(operation)
        return True

    def move_to_foundation_from_visible_cards(self, foundation_index: int) -> bool:
        """
        把翻牌区最前面的牌移到基础堆

        Args:
            foundation_index: 目标基础堆序号

        Returns:
            bool: 移动是否成功
        """
        operation = "move_to_foundation_from_visible_cards"
        if not self._is_valid_index(foundation_index, len(self._foundations)):
            return self._reject(operation, MoveError.INVALID_PILE_INDEX, f"基础堆序号越界: {foundation_index}")

        card = self._waste.peek()
        if card is None:
            return self._reject(operation, MoveError.EMPTY_SOURCE, "翻牌区没有可移动的牌")

        target = self._foundations[foundation_index]
        check = check_foundation_placement(card, target.peek())
        if not check:
            return self._reject(operation, check.error_code, check.message)

        target.push(self._waste.pop())
        self._record_move(self._waste, target, [card])
        self._check_invariants(operation)
        return True

    # ------------------------------------------------------------------
    # 访问器
    # ------------------------------------------------------------------

    @property
    def game_id(self) -> str:
        return self._game_id

    @property
    def rules(self) -> GameRulesConfig:
        return self._rules

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def stock_size(self) -> int:
        """牌库剩余张数"""
        return len(self._stock)

    @property
    def discard_size(self) -> int:
        """回收段张数"""
        return len(self._discard)

    @property
    def tableau_piles(self) -> Tuple[PileCards, ...]:
        """全部桌面牌堆的副本，每堆从底到顶"""
        return tuple(pile.cards for pile in self._tableau)

    @property
    def foundation_piles(self) -> Tuple[PileCards, ...]:
        """全部基础堆的副本，每堆从底到顶"""
        return tuple(pile.cards for pile in self._foundations)

    def get_tableau_pile(self, index: int) -> PileCards:
        """
        获取桌面牌堆内容

        Args:
            index: 桌面牌堆序号

        Returns:
            PileCards: 从底到顶的纸牌副本

        Raises:
            PileIndexError: 当序号越界时
        """
        return self._pile_at(self._tableau, index, PileType.TABLEAU).cards

    def get_foundation_pile(self, index: int) -> PileCards:
        """
        获取基础堆内容

        Raises:
            PileIndexError: 当序号越界时
        """
        return self._pile_at(self._foundations, index, PileType.FOUNDATION).cards

    def get_visible_cards(self) -> PileCards:
        """翻牌区可见段，从旧到新，最后一张可操作"""
        return self._waste.cards

    def snapshot(self, reveal_hidden: bool = False) -> GameStateSnapshot:
        """
        创建当前牌局的状态快照

        Args:
            reveal_hidden: 是否包含牌库和回收段的内容

        Returns:
            GameStateSnapshot: 不可变的状态快照
        """
        return GameStateSnapshot(
            game_id=self._game_id,
            stock_count=len(self._stock),
            discard_count=len(self._discard),
            visible_cards=self._waste.cards,
            tableau=self.tableau_piles,
            foundations=self.foundation_piles,
            hidden_stock=self._stock.cards if reveal_hidden else None,
            hidden_discard=self._discard.cards if reveal_hidden else None,
        )

    # ------------------------------------------------------------------
    # 内部辅助
    # ------------------------------------------------------------------

    @staticmethod
    def _is_valid_index(index: int, count: int) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < count

    def _pile_at(self, piles: Sequence[Pile], index: int, pile_type: PileType) -> Pile:
        if not self._is_valid_index(index, len(piles)):
            raise PileIndexError(pile_type.label, index, len(piles))
        return piles[index]

    def _expose_top(self, pile: Pile) -> None:
        """翻开桌面牌堆新露出的顶牌"""
        top = pile.peek()
        if top is None or top.face_up:
            return

        top.face_up = True
        self._logger.debug(f"[翻开] {pile.name} 露出 {top}")
        self._event_bus.publish(CardFlippedEvent.create(
            game_id=self._game_id,
            pile=pile.name,
            card=str(top),
        ))

    def _record_move(self, source: Pile, target: Pile, cards: Sequence[Card]) -> None:
        moved = [str(card) for card in cards]
        self._logger.debug(f"[移动] {source.name} -> {target.name}: {moved}")
        self._event_bus.publish(CardsMovedEvent.create(
            game_id=self._game_id,
            source=source.name,
            target=target.name,
            cards=moved,
        ))

    def _reject(self, operation: str, error_code: MoveError, message: str) -> bool:
        self._logger.debug(f"[拒绝] {operation}: {message} ({error_code.value})")
        self._event_bus.publish(MoveRejectedEvent.create(
            game_id=self._game_id,
            operation=operation,
            error_code=error_code.value,
            message=message,
        ))
        return False

    def _check_invariants(self, context: str) -> None:
        if self._invariants is None:
            return
        self._invariants.validate_and_raise(self.snapshot(reveal_hidden=True), context=context)

    def __repr__(self) -> str:
        return (
            f"KlondikeEngine(game_id={self._game_id!r}, stock={len(self._stock)}, "
            f"visible={len(self._waste)}, discard={len(self._discard)})"
        )
