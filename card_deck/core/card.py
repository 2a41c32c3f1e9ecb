"""
卡牌能力定义.

牌组中的卡牌只需要提供一个稳定的标识字符串，不要求继承任何基类.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Card(Protocol):
    """
    卡牌能力协议.

    任何实现了 ``code()`` 的对象都可以放入牌组.
    ``code()`` 返回的字符串用于相等性判断和去重.
    """

    def code(self) -> str:
        """返回卡牌的标识字符串."""
        ...
