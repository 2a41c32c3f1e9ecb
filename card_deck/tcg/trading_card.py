"""
集换式卡牌扩展点.

定义比普通卡牌更丰富的卡牌能力. 牌组本身从不调用这些方法，
它们只供外部的游戏控制器在打出特殊卡牌时使用.
"""

from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Stats(Protocol):
    """描述卡牌常规战斗能力的对象."""


@runtime_checkable
class GameController(Protocol):
    """应用卡牌特殊效果的游戏实例."""


StatsT = TypeVar('StatsT', bound=Stats, covariant=True)


@runtime_checkable
class TradingCard(Protocol[StatsT]):
    """
    集换式卡牌能力协议.

    在Card的 ``code()`` 之外增加名称、描述、数值以及特殊效果入口.
    显式继承该协议的类可以直接使用 ``is_special`` 和 ``special_effect``
    的默认实现.
    """

    def code(self) -> str:
        """返回卡牌的标识字符串."""
        ...

    @property
    def name(self) -> str:
        """卡牌的正式名称."""
        ...

    @property
    def description(self) -> str:
        """卡牌描述，即风味文字."""
        ...

    @property
    def stats(self) -> StatsT:
        """卡牌的常规战斗数值."""
        ...

    def is_special(self) -> bool:
        """
        卡牌是否带有特殊效果.

        Returns:
            bool: 默认为False
        """
        return False

    def special_effect(self, controller: GameController) -> None:
        """
        执行卡牌的特殊效果，默认不做任何事.

        Args:
            controller: 负责应用效果的游戏实例
        """
        return None
