"""
Unit tests for poker_discard/probability_estimator.py
"""
import unittest
from unittest.mock import MagicMock

import numpy as np

from poker_discard.core_poker_mechanics import Card, Suit
from poker_discard.deck_sampler import DeckSampler
from poker_discard.hand_classifier import HandClassifier
from poker_discard.hand_io import parse_hand
from poker_discard.probability_estimator import (
    count_improvements, estimate_improvement_probabilities, position_seeds,
)


class TestEstimateImprovementProbabilities(unittest.TestCase):
    def test_five_values_in_range(self):
        hand = parse_hand('7S 9H 2D 9C JS')
        probabilities = estimate_improvement_probabilities(hand, trials=500, seed=1)
        self.assertEqual(len(probabilities), 5)
        for p in probabilities:
            self.assertGreaterEqual(p, 0.0)
            self.assertLessEqual(p, 100.0)

    def test_royal_flush_cannot_improve(self):
        hand = parse_hand('0H JH QH KH AH')
        for trials in (1, 37, 1000):
            self.assertEqual(estimate_improvement_probabilities(hand, trials, seed=trials), [0.0] * 5)

    def test_four_deuces_cannot_improve(self):
        """The kicker is not part of the key"""
        hand = parse_hand('2D 2C 5H 2H 2S')
        self.assertEqual(estimate_improvement_probabilities(hand, 2000, seed=5), [0.0] * 5)

    def test_same_seed_is_bit_identical(self):
        hand = parse_hand('3S 9H 3D 9C 2S')
        first = estimate_improvement_probabilities(hand, 800, seed=42)
        second = estimate_improvement_probabilities(hand, 800, seed=42)
        self.assertEqual(first, second)

    def test_seed_sequence_reusable(self):
        hand = parse_hand('3S 9H 3D 9C 2S')
        seed = np.random.SeedSequence(99)
        self.assertEqual(
            estimate_improvement_probabilities(hand, 300, seed=seed),
            estimate_improvement_probabilities(hand, 300, seed=seed),
        )

    def test_workers_do_not_change_results(self):
        hand = parse_hand('4D 7S 8H 9C KD')
        inline = estimate_improvement_probabilities(hand, 400, seed=7, workers=1)
        pooled = estimate_improvement_probabilities(hand, 400, seed=7, workers=2)
        np.testing.assert_array_equal(inline, pooled)

    def test_results_follow_dealt_order(self):
        """
        2C 3C 4C 5C 9H, high card 9.

        Discarding 9H improves with any of 9 clubs, 6 non-club sixes or aces,
        12 pairing cards and 12 non-club tens to kings: 39 of 47 (83.0%).
        Discarding 2C improves with 12 pairing cards and 20 tens to aces:
        32 of 47 (68.1%).
        """
        dealt = parse_hand('9H 2C 3C 4C 5C')
        probabilities = estimate_improvement_probabilities(dealt, 20_000, seed=2017)
        self.assertAlmostEqual(probabilities[0], 100 * 39 / 47, delta=2.0)
        self.assertAlmostEqual(probabilities[1], 100 * 32 / 47, delta=2.0)

        reordered = parse_hand('2C 3C 4C 5C 9H')
        probabilities = estimate_improvement_probabilities(reordered, 20_000, seed=2017)
        self.assertAlmostEqual(probabilities[4], 100 * 39 / 47, delta=2.0)
        self.assertAlmostEqual(probabilities[0], 100 * 32 / 47, delta=2.0)

    def test_flush_policies_agree_on_single_swaps(self):
        """Swapping one card of a flush moves its rank sum and its card order the same way"""
        hand = parse_hand('AD 7D 5D 4D 2D')
        rank_sum = estimate_improvement_probabilities(hand, 3000, seed=3)
        rank_order = estimate_improvement_probabilities(
            hand, 3000, seed=3, classifier=HandClassifier('rank_order'))
        self.assertEqual(rank_sum, rank_order)
        # only the eight higher diamonds improve on the 2D
        self.assertAlmostEqual(rank_sum[4], 100 * 8 / 47, delta=3.0)

    def test_invalid_trials(self):
        hand = parse_hand('0H JH QH KH AH')
        for trials in (0, -5, 2.5, True):
            with self.assertRaises(ValueError):
                estimate_improvement_probabilities(hand, trials)

    def test_invalid_workers(self):
        with self.assertRaises(ValueError):
            estimate_improvement_probabilities(parse_hand('0H JH QH KH AH'), 10, workers=0)


class TestCountImprovements(unittest.TestCase):
    def setUp(self):
        self.hand = parse_hand('2C 3C 4C 5C 9H')
        self.classifier = HandClassifier()

    def test_every_trial_counted(self):
        sampler = MagicMock()
        sampler.draw_replacement.return_value = Card(6, Suit.CLUBS)
        self.assertEqual(count_improvements(self.hand, 4, 25, sampler, self.classifier), 25)
        self.assertEqual(sampler.draw_replacement.call_count, 25)

    def test_exclusion_covers_discarded_card(self):
        sampler = MagicMock()
        sampler.draw_replacement.return_value = Card(6, Suit.CLUBS)
        count_improvements(self.hand, 4, 1, sampler, self.classifier)
        excluded = sampler.draw_replacement.call_args[0][0]
        self.assertEqual(set(excluded), set(self.hand.dealt))

    def test_tie_not_counted(self):
        """3C 4C 5C 6C 9H is still nine high"""
        sampler = MagicMock()
        sampler.draw_replacement.return_value = Card(6, Suit.CLUBS)
        self.assertEqual(count_improvements(self.hand, 0, 10, sampler, self.classifier), 0)


    def test_each_replacement_classified_once(self):
        sampler = MagicMock()
        sampler.draw_replacement.side_effect = [Card(6, Suit.CLUBS), Card(9, Suit.CLUBS)] * 50
        classifier = MagicMock(wraps=self.classifier)
        # both replacements make a club flush
        self.assertEqual(count_improvements(self.hand, 4, 100, sampler, classifier), 100)
        # baseline plus one per distinct replacement
        self.assertEqual(classifier.classify.call_count, 3)

    def test_matches_validated_replacement(self):
        sampler = DeckSampler(np.random.default_rng(21))
        baseline = self.classifier.classify(self.hand)
        expected = 0
        for _ in range(500):
            card = sampler.draw_replacement(frozenset(self.hand.dealt))
            expected += self.classifier.classify(self.hand.replace(0, card)) > baseline
        self.assertEqual(
            count_improvements(self.hand, 0, 500, DeckSampler(np.random.default_rng(21)), self.classifier),
            expected
        )


class TestPositionSeeds(unittest.TestCase):
    def test_five_distinct_streams(self):
        seeds = position_seeds(123)
        self.assertEqual(len(seeds), 5)
        firsts = {int(np.random.default_rng(s).integers(2**32)) for s in seeds}
        self.assertEqual(len(firsts), 5)

    def test_repeatable(self):
        a = [s.generate_state(4).tolist() for s in position_seeds(5)]
        b = [s.generate_state(4).tolist() for s in position_seeds(5)]
        self.assertEqual(a, b)


if __name__ == '__main__':
    unittest.main()
