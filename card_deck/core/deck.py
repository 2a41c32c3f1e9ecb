"""
通用牌组.

定义Deck类，管理一个有序的卡牌序列，提供抽牌、查看、插入、查找、
移除、洗牌和分牌等操作. 索引0表示牌组顶部.
"""

import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .card import Card
from .exceptions import (
    EmptyDeckError,
    InvalidBreakpointError,
    InvalidDrawCountError,
    InvalidInsertPositionError,
)
from .shuffle import ShuffleStrategy, fisher_yates_shuffle

CardT = TypeVar('CardT', bound=Card)
DeckT = TypeVar('DeckT', bound='Deck')

logger = logging.getLogger(__name__)


class Deck(Generic[CardT]):
    """
    表示一副可变的有序牌组.

    牌组持有自己的卡牌列表，列表是牌组内容和顺序的唯一来源，允许重复卡牌.
    洗牌行为由可替换的洗牌策略决定，未设置时使用Fisher-Yates洗牌.

    该类不是线程安全的，跨线程共享时需要调用方自行加锁.

    Attributes:
        _cards: 当前牌组中的牌列表，索引0为顶部
        _shuffle_strategy: 自定义洗牌策略，None表示使用默认策略

    Examples:
        >>> deck = Deck([card_a, card_b, card_c])
        >>> deck.draw() == card_a
        True
        >>> deck.size()
        2
    """

    def __init__(
        self,
        cards: Optional[Iterable[CardT]] = None,
        shuffle: bool = False,
        shuffle_strategy: Optional[ShuffleStrategy] = None,
    ) -> None:
        """
        初始化牌组.

        Args:
            cards: 牌组初始包含的卡牌，会被复制，为None时牌组为空
            shuffle: 是否在创建后立即洗牌
            shuffle_strategy: 洗牌策略，为None时使用默认的Fisher-Yates洗牌
        """
        self._cards: List[CardT] = list(cards) if cards is not None else []
        self._shuffle_strategy = shuffle_strategy
        if shuffle:
            self.shuffle()

    @property
    def shuffle_strategy(self) -> ShuffleStrategy:
        """当前生效的洗牌策略."""
        return self._shuffle_strategy or fisher_yates_shuffle

    @shuffle_strategy.setter
    def shuffle_strategy(self, strategy: Optional[ShuffleStrategy]) -> None:
        self._shuffle_strategy = strategy

    def set_shuffle_strategy(self, strategy: Optional[ShuffleStrategy]) -> 'Deck[CardT]':
        """
        指定牌组的洗牌方式.

        Args:
            strategy: 原地打乱卡牌列表的函数，传入None恢复默认洗牌

        Returns:
            Deck: 当前牌组，便于链式调用
        """
        self._shuffle_strategy = strategy
        return self

    def shuffle(self) -> None:
        """使用当前洗牌策略原地洗牌."""
        self.shuffle_strategy(self._cards)
        logger.debug(f"[洗牌] 牌组已洗牌，共 {len(self._cards)} 张")

    def peek(self, index: int = 0) -> Optional[CardT]:
        """
        查看指定位置的牌但不移除.

        Args:
            index: 位置索引，越小越靠近顶部

        Returns:
            Optional[CardT]: 该位置的牌，位置不存在时返回None
        """
        if 0 <= index < len(self._cards):
            return self._cards[index]
        return None

    def draw(self) -> CardT:
        """
        抽取顶部的牌.

        Returns:
            CardT: 原先位于顶部的牌

        Raises:
            EmptyDeckError: 当牌组为空时
        """
        if not self._cards:
            raise EmptyDeckError("The deck has no card to offer")
        return self._cards.pop(0)

    def draw_cards(self, count: int, permissive: bool = True) -> List[CardT]:
        """
        从顶部抽取多张牌.

        Args:
            count: 希望抽取的牌数，必须为正整数
            permissive: 为True时牌数不足则抽取全部剩余的牌；
                为False时牌数不足直接报错

        Returns:
            List[CardT]: 抽出的牌，保持原有顺序，数量不超过count

        Raises:
            InvalidDrawCountError: 当count小于1，或permissive为False且牌组中的牌不足时
        """
        if count < 1:
            raise InvalidDrawCountError(
                f"Positive integer expected for the number of cards to draw. Received: {count}"
            )
        if not permissive and count > len(self._cards):
            raise InvalidDrawCountError(
                f"Not enough cards in the deck to draw {count}, only {len(self._cards)} remaining"
            )

        number_to_draw = min(count, len(self._cards))
        drawn_cards = self._cards[:number_to_draw]
        del self._cards[:number_to_draw]
        logger.debug(f"[抽牌] 请求 {count} 张，实际抽出 {number_to_draw} 张")
        return drawn_cards

    def remove_card(self, index: int) -> Optional[CardT]:
        """
        移除指定位置的牌.

        Args:
            index: 位置索引

        Returns:
            Optional[CardT]: 被移除的牌，位置不存在时返回None且牌组不变
        """
        if 0 <= index < len(self._cards):
            return self._cards.pop(index)
        return None

    def remove_all(self, predicate: Callable[[CardT], bool]) -> List[CardT]:
        """
        移除所有满足条件的牌.

        剩余牌的相对顺序保持不变.

        Args:
            predicate: 判断一张牌是否应被移除的函数

        Returns:
            List[CardT]: 被移除的牌，按原有顺序排列，可能为空但不会是None
        """
        removed_cards: List[CardT] = []
        remaining_cards: List[CardT] = []
        for card in self._cards:
            if predicate(card):
                removed_cards.append(card)
            else:
                remaining_cards.append(card)
        self._cards = remaining_cards
        return removed_cards

    def find_card(self, predicate: Callable[[CardT], bool], start: int = 0) -> int:
        """
        从指定位置开始向后查找第一张满足条件的牌.

        Args:
            predicate: 查找条件
            start: 开始查找的位置，负数按0处理

        Returns:
            int: 第一张匹配牌的索引，未找到时返回-1
        """
        for index in range(max(start, 0), len(self._cards)):
            if predicate(self._cards[index]):
                return index
        return -1

    def insert_cards(self, start: int, cards: Iterable[CardT]) -> bool:
        """
        将多张牌插入牌组.

        原先位于start及之后的牌会顺延到新插入的牌之后，插入的牌保持原有顺序.

        Args:
            start: 插入位置，必须在 [0, size] 范围内
            cards: 要插入的牌

        Returns:
            bool: 牌组内容是否发生变化

        Raises:
            InvalidInsertPositionError: 当插入位置超出范围时
        """
        if not 0 <= start <= len(self._cards):
            raise InvalidInsertPositionError(
                f"Insert position {start} out of range [0, {len(self._cards)}]"
            )
        new_cards = list(cards)
        self._cards[start:start] = new_cards
        return bool(new_cards)

    def size(self) -> int:
        """牌组中当前的牌数."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """牌组是否已经没有牌."""
        return not self._cards

    def is_not_empty(self) -> bool:
        """牌组中是否还有牌."""
        return bool(self._cards)

    def split_deck(self, *breakpoints: int) -> List['Deck[CardT]']:
        """
        切牌.

        不传断点时从中间 (size // 2) 切成两副牌. 切牌只按位置划分，不会改变牌的顺序.
        子牌组持有各自的副本，修改子牌组不会影响原牌组或其他子牌组.

        Args:
            *breakpoints: 严格递增的切分位置(不包含)，范围 [0, size]

        Returns:
            List[Deck]: 切分后的子牌组，按原有顺序排列

        Raises:
            InvalidBreakpointError: 当断点不是严格递增或超出范围时
        """
        if not breakpoints:
            middle = len(self._cards) // 2
            return [self._spawn(self._cards[:middle]), self._spawn(self._cards[middle:])]
        return Deck.split(self._spawn, self, *breakpoints)

    @staticmethod
    def split(
        factory: Callable[[List[CardT]], DeckT],
        source: 'Deck[CardT]',
        *breakpoints: int,
    ) -> List[DeckT]:
        """
        按断点切分牌组，子牌组由调用方提供的工厂函数创建.

        最后剩余的部分只有在非空时才会生成子牌组.

        Args:
            factory: 由卡牌列表创建牌组的函数
            source: 被切分的牌组
            *breakpoints: 严格递增的切分位置(不包含)，范围 [0, size]

        Returns:
            List[DeckT]: 切分后的子牌组

        Raises:
            InvalidBreakpointError: 当断点不是严格递增或超出范围时
        """
        cards = source._cards
        size = len(cards)

        previous = -1
        for point in breakpoints:
            if point <= previous or point > size:
                raise InvalidBreakpointError(
                    f"Breakpoints must be strictly increasing within [0, {size}]: {list(breakpoints)}"
                )
            previous = point

        new_decks: List[DeckT] = []
        start_point = 0
        for point in breakpoints:
            new_decks.append(factory(cards[start_point:point]))
            start_point = point

        if start_point < size:
            new_decks.append(factory(cards[start_point:]))

        logger.debug(f"[切牌] {size} 张牌按断点 {list(breakpoints)} 切分为 {len(new_decks)} 副")
        return new_decks

    def _spawn(self, cards: List[CardT]) -> 'Deck[CardT]':
        """由卡牌列表创建子牌组，子类重写以改变子牌组的具体类型."""
        return Deck(cards, shuffle_strategy=self._shuffle_strategy)

    @property
    def cards(self) -> List[CardT]:
        """牌组内容的副本，索引0为顶部."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[CardT]:
        return iter(list(self._cards))

    def __str__(self) -> str:
        return f"{type(self).__name__}({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._cards)})"
