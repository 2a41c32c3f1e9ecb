"""
标准扑克牌.

定义不可变的StandardCard类，相等性由花色和点数组成的标识字符串决定.
"""

from dataclasses import dataclass

from .types import Suit, Rank

CODE_SEPARATOR = " _ "


@dataclass(frozen=True, eq=False)
class StandardCard:
    """
    表示标准52张牌中的一张.

    不可变数据类，创建后花色和点数不能修改. 两张花色和点数都相同的牌
    相等且可以互换.

    Attributes:
        suit: 花色
        rank: 点数

    Examples:
        >>> card = StandardCard(Suit.HEART, Rank.ACE)
        >>> card.code()
        'HEART _ ACE'
        >>> str(card)
        'A♥'
        >>> card.rank.points
        1
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        """
        验证卡牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")

    def code(self) -> str:
        """
        返回卡牌的标识字符串.

        Returns:
            str: 由花色名和点数名组成，如"HEART _ ACE"
        """
        return f"{self.suit.name}{CODE_SEPARATOR}{self.rank.name}"

    def identity(self) -> str:
        """同 ``code()``."""
        return self.code()

    @property
    def points(self) -> int:
        """这张牌的分值"""
        return self.rank.points

    @classmethod
    def from_code(cls, code: str) -> 'StandardCard':
        """
        从标识字符串创建卡牌.

        Args:
            code: ``code()`` 返回格式的字符串，如"SPADE _ KING"

        Returns:
            StandardCard: 对应的卡牌

        Raises:
            ValueError: 当字符串格式无效时
        """
        if not isinstance(code, str):
            raise TypeError(f"输入必须是字符串，实际: {type(code)}")

        parts = code.split(CODE_SEPARATOR)
        if len(parts) != 2:
            raise ValueError(f"卡牌标识格式错误: {code!r}")

        suit_name, rank_name = (part.strip() for part in parts)
        try:
            return cls(Suit[suit_name], Rank[rank_name])
        except KeyError as e:
            raise ValueError(f"无法解析卡牌标识 {code!r}: {e}") from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StandardCard):
            return NotImplemented
        return self.code() == other.code()

    def __hash__(self) -> int:
        return hash(self.code())

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"StandardCard({self.suit.name}, {self.rank.name})"
