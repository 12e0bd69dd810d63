"""
cli.py

Read hands from stdin, one per line, and print the category plus the
per-card improvement percentages.

$ echo "2D 2C 5H 2H 2S" | poker-discard --trials 100000
2D 2C 5H 2H 2S >>>Four of a Kind 0.0% 0.0% 0.0% 0.0% 0.0%
"""
import argparse
import dataclasses
import sys
from typing import List, Optional, TextIO

from poker_discard.config import ConfigError, EstimatorSettings, load_config
from poker_discard.hand_classifier import FLUSH_TIEBREAKS, HandClassifier
from poker_discard.hand_io import format_error, format_result, parse_hand
from poker_discard.logging_config import get_logger, setup_logging
from poker_discard.probability_estimator import estimate_improvement_probabilities

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poker-discard",
        description="Estimate the chance that discarding each card of a five-card hand improves it.",
    )
    parser.add_argument("--config", type=str, default=None,
                        help="Path to a YAML config file (default: $POKER_DISCARD_CONFIG or config.yaml)")
    parser.add_argument("--trials", type=int, default=None, help="Replacement draws per card")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible estimates")
    parser.add_argument("--workers", type=int, default=None, help="Processes used per hand")
    parser.add_argument("--flush-tiebreak", choices=FLUSH_TIEBREAKS, default=None,
                        help="How two flushes are ordered")
    parser.add_argument("--log-level", type=str, default=None, help="Override logging.level")
    return parser


def process_line(line: str, settings: EstimatorSettings, classifier: HandClassifier) -> str:
    """Turn one input line into one output line"""
    try:
        hand = parse_hand(line)
    except ValueError as e:
        logger.warning(f"Rejected input '{line}': {e}")
        return format_error(line)

    key = classifier.classify(hand)
    probabilities = estimate_improvement_probabilities(
        hand,
        settings.trials,
        seed=settings.seed,
        workers=settings.workers,
        classifier=classifier,
    )
    return format_result(line, key, probabilities)


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        settings = load_config(args.config)
        overrides = {
            name: value
            for name, value in (
                ('trials', args.trials),
                ('seed', args.seed),
                ('workers', args.workers),
                ('flush_tiebreak', args.flush_tiebreak),
            )
            if value is not None
        }
        estimator = dataclasses.replace(settings.estimator, **overrides)
        logging_settings = settings.logging
        if args.log_level is not None:
            logging_settings = dataclasses.replace(logging_settings, level=args.log_level)
    except ConfigError as e:
        parser.error(str(e))

    setup_logging(logging_settings.level, logging_settings.log_dir, logging_settings.log_to_file)
    logger.info(f"Settings: {estimator}")
    classifier = HandClassifier(estimator.flush_tiebreak)

    for raw_line in stdin:
        line = raw_line.rstrip("\r\n")
        print(process_line(line, estimator, classifier), file=stdout, flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
