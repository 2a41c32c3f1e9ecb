"""
牌组核心模块.

包含卡牌能力协议、通用牌组、洗牌策略和异常定义.
"""

from .card import Card
from .deck import Deck
from .shuffle import ShuffleStrategy, fisher_yates_shuffle, seeded_shuffle
from .exceptions import (
    DeckError,
    EmptyDeckError,
    InvalidDrawCountError,
    InvalidBreakpointError,
    InvalidInsertPositionError,
)

__all__ = [
    'Card', 'Deck',
    'ShuffleStrategy', 'fisher_yates_shuffle', 'seeded_shuffle',
    'DeckError', 'EmptyDeckError', 'InvalidDrawCountError',
    'InvalidBreakpointError', 'InvalidInsertPositionError',
]
