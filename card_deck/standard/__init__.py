"""
标准52张扑克牌.

提供StandardCard、StandardDeck以及花色和点数枚举.
"""

from .types import Suit, Rank, get_all_suits, get_all_ranks
from .card import StandardCard
from .deck import StandardDeck, build_standard_cards

__all__ = [
    'Suit', 'Rank', 'get_all_suits', 'get_all_ranks',
    'StandardCard', 'StandardDeck', 'build_standard_cards',
]
