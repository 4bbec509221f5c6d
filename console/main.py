"""Command-line entry point: play one round against the dealer."""

import argparse
import logging
import sys
from dataclasses import replace
from random import Random
from typing import Callable, Sequence

from config import AppConfig, config as default_config
from core.cards import EmptyDeckError
from core.game.actions import ConsoleActionSource
from core.game.engine import BlackjackRound
from core.hand import AceScoring
from core.strategy.rules import RuleSet
from console.renderer import TranscriptRenderer

logger = logging.getLogger("blackjack")

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play one round of blackjack against the dealer")
    parser.add_argument("--seed", type=int, default=None, help="Seed the shuffle for a repeatable deal")
    parser.add_argument(
        "--legacy-aces",
        action="store_true",
        help="Score Aces with the one-shot soft flag instead of the best total",
    )
    parser.add_argument(
        "--naturals",
        action="store_true",
        help="A two-card 21 ends the player's turn and beats any other 21",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default WARNING)")
    return parser


def configure_logging(level: str, app_config: AppConfig) -> None:
    """Send diagnostics to stderr so the transcript on stdout stays clean."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=app_config.log.format,
        datefmt=app_config.log.datefmt,
        stream=sys.stderr,
    )


def rules_from_args(args: argparse.Namespace, app_config: AppConfig) -> RuleSet:
    """Command-line flags switch rules on over the environment configuration."""
    rules = app_config.game.to_rules()
    if args.legacy_aces:
        rules = replace(rules, ace_scoring=AceScoring.LEGACY)
    if args.naturals:
        rules = replace(rules, naturals=True)
    return rules


def main(
    argv: Sequence[str] | None = None,
    reader: Callable[[], str] = input,
    write: Callable[[str], None] = print,
    app_config: AppConfig | None = None,
) -> int:
    app_config = app_config or default_config
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or app_config.log.level, app_config)

    seed = args.seed if args.seed is not None else app_config.game.seed
    rules = rules_from_args(args, app_config)
    logger.debug("Starting round with seed=%s rules=%s", seed, rules)

    round_ = BlackjackRound(rules=rules, rng=Random(seed))
    round_.subscribe(TranscriptRenderer(write).handle)

    try:
        round_.play(ConsoleActionSource(reader))
    except EmptyDeckError:
        logger.exception("Round aborted")
        return EXIT_ABORTED
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed before the round finished")
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
