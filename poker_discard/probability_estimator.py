"""
probability_estimator.py

Monte Carlo estimate of how often a single discard improves a hand.

hand = parse_hand('2D 2C 5H 2H 2S')
estimate_improvement_probabilities(hand, trials=10_000, seed=7)
-> [0.0, 0.0, 0.0, 0.0, 0.0]
"""
import time
from multiprocessing import Pool
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

from poker_discard.core_poker_mechanics import HAND_SIZE, Card, Hand
from poker_discard.deck_sampler import DeckSampler
from poker_discard.hand_classifier import HandClassifier
from poker_discard.hand_comparator import is_improvement
from poker_discard.logging_config import get_logger

logger = get_logger(__name__)

SeedLike = Union[None, int, np.random.SeedSequence]


def position_seeds(seed: SeedLike) -> List[np.random.SeedSequence]:
    """
    One independent SeedSequence per hand position.

    Children are derived from the parent's entropy and spawn key rather than
    by calling ``spawn``, so passing the same SeedSequence twice yields the
    same streams.
    """
    parent = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    return [
        np.random.SeedSequence(
            parent.entropy,
            spawn_key=tuple(parent.spawn_key) + (position,),
            pool_size=parent.pool_size,
        )
        for position in range(HAND_SIZE)
    ]


def count_improvements(hand: Hand, position: int, trials: int,
                       sampler: DeckSampler, classifier: HandClassifier) -> int:
    """
    Replace ``hand.dealt[position]`` ``trials`` times and count the better hands.

    Whether a replacement card improves the hand depends only on that card,
    so each distinct replacement is classified once and its verdict reused
    for later draws of the same card.
    """
    baseline = classifier.classify(hand)
    excluded = frozenset(hand.dealt)
    kept = hand.without(position)
    verdicts: Dict[Card, bool] = {}
    improvements = 0
    for _ in range(trials):
        replacement = sampler.draw_replacement(excluded)
        improved = verdicts.get(replacement)
        if improved is None:
            candidate = Hand.from_trusted(kept[:position] + (replacement,) + kept[position:])
            improved = verdicts[replacement] = is_improvement(baseline, candidate, classifier)
        if improved:
            improvements += 1
    return improvements


def _estimate_position(args: Tuple[Hand, int, int, np.random.SeedSequence, str]) -> Tuple[int, int]:
    """
    Estimate one position. This function is called by multiprocessing.
    """
    hand, position, trials, seed_seq, flush_tiebreak = args
    sampler = DeckSampler(np.random.default_rng(seed_seq))
    classifier = HandClassifier(flush_tiebreak)
    started = time.perf_counter()
    improvements = count_improvements(hand, position, trials, sampler, classifier)
    logger.debug(
        f"Position {position} ({hand.dealt[position]}): {improvements}/{trials} improvements "
        f"in {time.perf_counter() - started:.2f}s"
    )
    return position, improvements


def estimate_improvement_probabilities(
    hand: Hand,
    trials: int,
    seed: SeedLike = None,
    workers: int = 1,
    classifier: Optional[HandClassifier] = None
) -> List[float]:
    """
    Percent chance, per dealt position, that discarding that card improves the hand.

    Parameters
    ----------
    hand : Hand
        The five cards; results follow ``hand.dealt`` order.
    trials : int
        Replacement draws per position. Controls precision only.
    seed : int, numpy.random.SeedSequence or None
        Root of the per-position random streams. None draws OS entropy.
        The same seed gives identical results for any ``workers`` value.
    workers : int
        Processes used to run positions in parallel. 1 runs inline.
    classifier : HandClassifier, optional
        Supplies the flush tie-break policy. Defaults to rank-sum.

    Returns
    -------
    List[float]
        Five percentages in [0, 100].
    """
    if isinstance(trials, bool) or not isinstance(trials, int) or trials <= 0:
        raise ValueError(f"trials must be a positive integer, got {trials!r}")
    if isinstance(workers, bool) or not isinstance(workers, int) or workers <= 0:
        raise ValueError(f"workers must be a positive integer, got {workers!r}")
    if classifier is None:
        classifier = HandClassifier()

    baseline = classifier.classify(hand)
    logger.info(f"Estimating {hand} ({baseline.name}) with {trials} trials per card")
    started = time.perf_counter()

    tasks = [
        (hand, position, trials, seed_seq, classifier.flush_tiebreak)
        for position, seed_seq in enumerate(position_seeds(seed))
    ]
    if workers > 1:
        with Pool(processes=min(workers, HAND_SIZE)) as pool:
            results = pool.map(_estimate_position, tasks)
    else:
        results = [_estimate_position(task) for task in tasks]

    probabilities = [0.0] * HAND_SIZE
    for position, improvements in results:
        probabilities[position] = 100 * improvements / trials

    logger.info(f"Finished {hand} in {time.perf_counter() - started:.2f}s")
    return probabilities
