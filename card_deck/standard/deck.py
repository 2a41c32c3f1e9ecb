"""
标准52张牌组.

StandardDeck在通用牌组基础上增加整副牌的生成. 生成顺序为花色优先:
红桃A..K，然后方块、梅花、黑桃.
"""

import logging
from typing import List, Optional

from ..core.deck import Deck
from ..core.shuffle import ShuffleStrategy
from .card import StandardCard
from .types import get_all_suits, get_all_ranks

logger = logging.getLogger(__name__)


def build_standard_cards() -> List[StandardCard]:
    """
    按固定顺序生成完整的52张牌.

    Returns:
        List[StandardCard]: 每种花色和点数组合各一张
    """
    return [
        StandardCard(suit, rank)
        for suit in get_all_suits()
        for rank in get_all_ranks()
    ]


class StandardDeck(Deck[StandardCard]):
    """
    标准52张扑克牌组.

    支持三种创建方式:
    - ``StandardDeck()``: 空牌组
    - ``StandardDeck(cards)``: 由给定的牌组成的部分牌组
    - ``StandardDeck.full()``: 完整的52张牌，默认洗牌

    Examples:
        >>> deck = StandardDeck.full(shuffle=False)
        >>> deck.peek()
        StandardCard(HEART, ACE)
        >>> len(deck)
        52
    """

    @classmethod
    def full(
        cls,
        shuffle: bool = True,
        shuffle_strategy: Optional[ShuffleStrategy] = None,
    ) -> 'StandardDeck':
        """
        创建完整的52张牌组.

        Args:
            shuffle: 生成后是否立即洗牌
            shuffle_strategy: 洗牌策略，为None时使用默认洗牌

        Returns:
            StandardDeck: 包含全部52张牌的牌组
        """
        deck = cls(shuffle_strategy=shuffle_strategy)
        deck.reset(shuffle=shuffle)
        return deck

    def reset(self, shuffle: bool = False) -> None:
        """
        重置为完整的52张牌.

        Args:
            shuffle: 重置后是否洗牌
        """
        self._cards = build_standard_cards()
        logger.debug(f"[牌组] 已生成完整牌组，共 {len(self._cards)} 张")
        if shuffle:
            self.shuffle()

    def is_complete(self) -> bool:
        """牌组是否恰好包含52张牌中的每一张各一次."""
        return len(self._cards) == 52 and len(set(self._cards)) == 52

    def split_deck(self, *breakpoints: int) -> List['StandardDeck']:
        """切牌，子牌组均为StandardDeck. 参见 ``Deck.split_deck``."""
        return super().split_deck(*breakpoints)

    def _spawn(self, cards: List[StandardCard]) -> 'StandardDeck':
        return StandardDeck(cards, shuffle_strategy=self._shuffle_strategy)
