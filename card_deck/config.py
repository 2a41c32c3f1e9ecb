"""
牌组配置相关类的实现
包含日志配置和标准牌组的创建设置
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .core.shuffle import ShuffleStrategy, seeded_shuffle
from .standard.deck import StandardDeck

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        """验证日志级别"""
        if not isinstance(self.log_level, str):
            raise ValueError(f"日志级别必须是字符串: {self.log_level!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {self.log_level}")

    @property
    def level(self) -> int:
        """logging模块的级别常量"""
        return getattr(logging, self.log_level)


@dataclass
class DeckConfig:
    """
    标准牌组配置类
    决定新牌组是否洗牌以及洗牌是否可重现
    """
    shuffle_on_create: bool = True             # 创建后是否洗牌
    random_seed: Optional[int] = None          # 随机种子，用于可重现的洗牌
    logging_config: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """验证配置的有效性"""
        if self.random_seed is not None and (
            isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)
        ):
            raise ValueError(f"随机种子必须是整数: {self.random_seed!r}")

    def shuffle_strategy(self) -> Optional[ShuffleStrategy]:
        """
        根据配置返回洗牌策略

        Returns:
            设置了随机种子时返回可重现的洗牌策略，否则返回None(使用默认洗牌)
        """
        if self.random_seed is None:
            return None
        return seeded_shuffle(self.random_seed)

    def build_standard_deck(self) -> StandardDeck:
        """按配置创建一副完整的标准牌组"""
        return StandardDeck.full(
            shuffle=self.shuffle_on_create,
            shuffle_strategy=self.shuffle_strategy(),
        )


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """在程序入口调用一次，配置根日志记录器"""
    config = config or LoggingConfig()
    logging.basicConfig(level=config.level, format=config.log_format)
