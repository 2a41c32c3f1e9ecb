"""
洗牌策略.

洗牌策略是一个原地打乱序列的函数，牌组持有它并在 ``shuffle()`` 时调用.
默认策略为无偏的 Fisher-Yates 算法.
"""

import random
from typing import Callable, MutableSequence, Optional, Union

ShuffleStrategy = Callable[[MutableSequence], None]


def fisher_yates_shuffle(cards: MutableSequence, rng: Optional[random.Random] = None) -> None:
    """
    使用 Fisher-Yates 算法原地洗牌.

    从末尾向前遍历，每个位置 i 与 [0, i] 中均匀选出的位置交换，
    所有排列出现的概率相同.

    Args:
        cards: 要打乱的序列
        rng: 随机数生成器，为None时使用random模块的全局生成器
    """
    randrange = rng.randrange if rng is not None else random.randrange
    for i in range(len(cards) - 1, 0, -1):
        j = randrange(i + 1)
        cards[i], cards[j] = cards[j], cards[i]


def seeded_shuffle(seed: Union[int, random.Random, None] = None) -> ShuffleStrategy:
    """
    创建使用独立随机数生成器的洗牌策略.

    同一个种子创建的策略在相同输入上产生相同的洗牌序列，用于可重现的测试.

    Args:
        seed: 随机种子，或已有的随机数生成器

    Returns:
        ShuffleStrategy: 可交给牌组使用的洗牌函数
    """
    rng = seed if isinstance(seed, random.Random) else random.Random(seed)

    def _shuffle(cards: MutableSequence) -> None:
        fisher_yates_shuffle(cards, rng)

    return _shuffle
