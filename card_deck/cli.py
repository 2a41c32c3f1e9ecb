"""牌组演示命令行.

创建一副标准52张牌并打印其内容，可选先从顶部抽出若干张.
"""

import logging

import click

from .config import VALID_LOG_LEVELS, DeckConfig, LoggingConfig, setup_logging
from .core.exceptions import InvalidDrawCountError

logger = logging.getLogger(__name__)


@click.command()
@click.option('--shuffle/--no-shuffle', default=True, help='创建后是否洗牌.')
@click.option('--seed', type=int, default=None, help='随机种子，用于可重现的洗牌.')
@click.option('--draw', 'draw_count', type=int, default=None, help='先从顶部抽出的牌数.')
@click.option(
    '--log-level',
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    default='WARNING',
    show_default=True,
    help='日志级别.',
)
def main(shuffle: bool, seed, draw_count, log_level: str) -> None:
    """创建一副标准牌组并逐张打印."""
    config = DeckConfig(
        shuffle_on_create=shuffle,
        random_seed=seed,
        logging_config=LoggingConfig(log_level=log_level),
    )
    setup_logging(config.logging_config)
    deck = config.build_standard_deck()
    logger.info(f"已创建牌组: {deck!r}, 洗牌={shuffle}, 种子={seed}")

    if draw_count is not None:
        try:
            hand = deck.draw_cards(draw_count, permissive=False)
        except InvalidDrawCountError as e:
            raise click.BadParameter(str(e), param_hint='--draw') from e
        click.echo(f"抽出 {len(hand)} 张: " + " ".join(str(card) for card in hand))

    click.echo(f"牌组剩余 {deck.size()} 张:")
    for position, card in enumerate(deck, start=1):
        click.echo(f"{position:>2}. {str(card):<4} {card.code()}")


if __name__ == "__main__":
    main()
