"""
标准扑克牌类型定义.

定义标准52张牌的花色和点数枚举.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    扑克牌花色枚举.

    枚举定义顺序即整副牌的生成顺序.
    """

    HEART = "♥"      # 红桃
    DIAMOND = "♦"    # 方块
    CLUB = "♣"       # 梅花
    SPADE = "♠"      # 黑桃

    @property
    def symbol(self) -> str:
        """花色符号"""
        return self.value


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    枚举值为牌面顺序(A=1 ... K=13)，计分使用 ``points``.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def points(self) -> int:
        """
        点数对应的分值.

        Returns:
            int: A为1，2-10为牌面数字，J/Q/K为10
        """
        return min(self.value, 10)

    @property
    def label(self) -> str:
        """牌面简写，如 A、10、K"""
        return _RANK_LABELS.get(self, str(self.value))


_RANK_LABELS = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 包含所有四种花色的列表
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 包含所有13种点数的列表，从A到K
    """
    return list(Rank)
