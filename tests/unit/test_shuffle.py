"""
洗牌策略的单元测试.
"""

import random
from collections import Counter

from card_deck import fisher_yates_shuffle, seeded_shuffle


class TestFisherYates:
    """Fisher-Yates洗牌测试."""

    def test_shuffle_is_permutation(self):
        """测试洗牌结果是原序列的一个排列."""
        cards = list(range(52))

        fisher_yates_shuffle(cards)

        assert sorted(cards) == list(range(52))

    def test_shuffle_short_sequences(self):
        """测试空序列和单元素序列."""
        empty = []
        single = [1]

        fisher_yates_shuffle(empty)
        fisher_yates_shuffle(single)

        assert empty == []
        assert single == [1]

    def test_shuffle_with_rng_is_reproducible(self):
        """测试使用相同种子的随机数生成器结果相同."""
        first = list(range(20))
        second = list(range(20))

        fisher_yates_shuffle(first, random.Random(7))
        fisher_yates_shuffle(second, random.Random(7))

        assert first == second

    def test_shuffle_is_roughly_uniform(self):
        """测试三张牌的6种排列出现频率大致均匀."""
        rng = random.Random(2024)
        counts = Counter()
        trials = 6000

        for _ in range(trials):
            cards = ["a", "b", "c"]
            fisher_yates_shuffle(cards, rng)
            counts[tuple(cards)] += 1

        assert len(counts) == 6
        for count in counts.values():
            assert abs(count - trials / 6) < trials / 6 * 0.15


class TestSeededShuffle:
    """可重现洗牌策略测试."""

    def test_same_seed_same_order(self):
        """测试相同种子的策略产生相同结果."""
        first = list(range(30))
        second = list(range(30))

        seeded_shuffle(42)(first)
        seeded_shuffle(42)(second)

        assert first == second
        assert first != list(range(30))

    def test_strategy_keeps_its_own_state(self):
        """测试同一个策略连续洗牌会继续推进随机序列."""
        strategy = seeded_shuffle(5)
        first = list(range(30))
        second = list(range(30))

        strategy(first)
        strategy(second)

        assert first != second

    def test_accepts_random_instance(self):
        """测试可以传入已有的随机数生成器."""
        first = list(range(30))
        second = list(range(30))

        seeded_shuffle(random.Random(9))(first)
        fisher_yates_shuffle(second, random.Random(9))

        assert first == second
