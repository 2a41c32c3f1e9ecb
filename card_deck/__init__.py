"""
通用牌组库.

提供通用的有序牌组容器、标准52张扑克牌实现以及集换式卡牌扩展点.

Modules:
    core: 卡牌能力协议、通用牌组、洗牌策略和异常
    standard: 标准52张牌的花色、点数、卡牌和牌组
    tcg: 集换式卡牌能力协议
    config: 牌组和日志配置
    cli: 演示命令行
"""

from .core import (
    Card, Deck,
    ShuffleStrategy, fisher_yates_shuffle, seeded_shuffle,
    DeckError, EmptyDeckError, InvalidDrawCountError,
    InvalidBreakpointError, InvalidInsertPositionError,
)
from .standard import Suit, Rank, StandardCard, StandardDeck
from .tcg import TradingCard, Stats, GameController
from .config import DeckConfig, LoggingConfig, setup_logging

__version__ = "1.0.0"

__all__ = [
    # 核心
    'Card', 'Deck',
    'ShuffleStrategy', 'fisher_yates_shuffle', 'seeded_shuffle',

    # 标准牌
    'Suit', 'Rank', 'StandardCard', 'StandardDeck',

    # 集换式卡牌
    'TradingCard', 'Stats', 'GameController',

    # 配置
    'DeckConfig', 'LoggingConfig', 'setup_logging',

    # 异常类型
    'DeckError', 'EmptyDeckError', 'InvalidDrawCountError',
    'InvalidBreakpointError', 'InvalidInsertPositionError',
]
