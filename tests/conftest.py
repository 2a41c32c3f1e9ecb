"""
pytest配置文件

提供牌组测试通用的fixture和测试标记.
"""

from typing import List

import pytest

from card_deck import Rank, StandardCard, StandardDeck, Suit


@pytest.fixture
def four_aces() -> List[StandardCard]:
    """四张A，顺序为红桃、黑桃、梅花、方块"""
    return [
        StandardCard(Suit.HEART, Rank.ACE),
        StandardCard(Suit.SPADE, Rank.ACE),
        StandardCard(Suit.CLUB, Rank.ACE),
        StandardCard(Suit.DIAMOND, Rank.ACE),
    ]


@pytest.fixture
def ordered_deck() -> StandardDeck:
    """未洗牌的完整牌组"""
    return StandardDeck.full(shuffle=False)


def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
