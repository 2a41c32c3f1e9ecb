"""
演示命令行的单元测试.
"""

import logging
from unittest.mock import patch

from click.testing import CliRunner

from card_deck.cli import main
from card_deck.config import VALID_LOG_LEVELS


class TestCLI:
    """命令行测试."""

    def test_prints_full_unshuffled_deck(self):
        """测试不洗牌时按生成顺序打印52张牌."""
        result = CliRunner().invoke(main, ['--no-shuffle'])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "牌组剩余 52 张:"
        assert len(lines) == 53
        assert "HEART _ ACE" in lines[1]
        assert "SPADE _ KING" in lines[-1]

    def test_seed_is_reproducible(self):
        """测试相同种子输出相同."""
        runner = CliRunner()

        first = runner.invoke(main, ['--seed', '7'])
        second = runner.invoke(main, ['--seed', '7'])

        assert first.exit_code == 0
        assert first.output == second.output

    def test_draw(self):
        """测试先抽牌再打印剩余的牌."""
        result = CliRunner().invoke(main, ['--no-shuffle', '--draw', '2'])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "抽出 2 张: A♥ 2♥"
        assert lines[1] == "牌组剩余 50 张:"

    def test_invalid_draw_count(self):
        """测试无效的抽牌数量."""
        result = CliRunner().invoke(main, ['--draw', '0'])

        assert result.exit_code == 2
        assert "--draw" in result.output

    def test_draw_more_than_deck(self):
        """测试抽牌数量超过牌组大小."""
        result = CliRunner().invoke(main, ['--draw', '53'])

        assert result.exit_code == 2

    def test_log_level_reaches_setup_logging(self):
        """测试--log-level通过牌组配置传给setup_logging."""
        with patch('card_deck.cli.setup_logging') as setup:
            result = CliRunner().invoke(main, ['--no-shuffle', '--log-level', 'debug'])

        assert result.exit_code == 0
        setup.assert_called_once()
        logging_config = setup.call_args[0][0]
        assert logging_config.log_level == 'DEBUG'
        assert logging_config.level == logging.DEBUG

    def test_all_valid_log_levels_accepted(self):
        """测试所有有效日志级别都可以在命令行使用."""
        for level in VALID_LOG_LEVELS:
            with patch('card_deck.cli.setup_logging') as setup:
                result = CliRunner().invoke(main, ['--log-level', level])

            assert result.exit_code == 0, level
            assert setup.call_args[0][0].log_level == level
