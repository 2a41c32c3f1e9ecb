"""集换式卡牌扩展点."""

from .trading_card import TradingCard, Stats, GameController

__all__ = ['TradingCard', 'Stats', 'GameController']
