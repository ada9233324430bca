import unittest
import random
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from probability.dice import (
    DICE_TYPES, probability_of_sum, sum_distribution, clamp_target_sum,
    simulate_rolls, simulated_frequencies, rate_dice_probability
)


class TestDiceProbability(unittest.TestCase):

    def test_single_die_uniform(self):
        """Each face of one D6 is 1/6"""
        for target in range(1, 7):
            self.assertAlmostEqual(probability_of_sum(1, 6, target), 100 / 6)
        self.assertEqual(probability_of_sum(1, 6, 0), 0.0)
        self.assertEqual(probability_of_sum(1, 6, 7), 0.0)

    def test_two_dice_seven(self):
        """6 ways out of 36"""
        self.assertAlmostEqual(probability_of_sum(2, 6, 7), 100 / 6)

    def test_three_dice_ten(self):
        """27 ways out of 216"""
        self.assertAlmostEqual(probability_of_sum(3, 6, 10), 12.5)

    def test_three_dice_eighteen(self):
        self.assertAlmostEqual(probability_of_sum(3, 6, 18), 100 / 216)

    def test_out_of_range_is_zero(self):
        self.assertEqual(probability_of_sum(3, 6, 2), 0.0)
        self.assertEqual(probability_of_sum(3, 6, 19), 0.0)
        self.assertEqual(probability_of_sum(2, 20, -5), 0.0)

    def test_distribution_sums_to_hundred(self):
        """Probabilities over every achievable sum form a complete distribution"""
        for dice in range(1, 6):
            for faces in DICE_TYPES:
                total = sum(
                    probability_of_sum(dice, faces, s)
                    for s in range(dice, dice * faces + 1)
                )
                self.assertAlmostEqual(total, 100.0, places=9)

    def test_large_dice_counts(self):
        """Counts stay exact beyond the UI limits"""
        self.assertAlmostEqual(sum(sum_distribution(30, 20).values()), 100.0, places=9)
        self.assertAlmostEqual(probability_of_sum(30, 20, 30), 100 / 20 ** 30)

    def test_one_faced_die(self):
        self.assertEqual(probability_of_sum(4, 1, 4), 100.0)

    def test_invalid_inputs(self):
        with self.assertRaises(ValueError):
            probability_of_sum(0, 6, 3)
        with self.assertRaises(ValueError):
            probability_of_sum(2, 0, 3)

    def test_sum_distribution_matches(self):
        distribution = sum_distribution(2, 6)
        self.assertEqual(list(distribution), list(range(2, 13)))
        self.assertAlmostEqual(distribution[7], probability_of_sum(2, 6, 7))
        self.assertAlmostEqual(distribution[2], 100 / 36)


class TestDiceHelpers(unittest.TestCase):

    def test_clamp_target_sum(self):
        self.assertEqual(clamp_target_sum(10, 1, 6), 6)
        self.assertEqual(clamp_target_sum(1, 3, 6), 3)
        self.assertEqual(clamp_target_sum(10, 3, 6), 10)

    def test_simulate_rolls(self):
        results = simulate_rolls(3, 6, rolls=100, rng=random.Random(7))
        self.assertEqual(len(results), 100)
        self.assertTrue(all(3 <= r <= 18 for r in results))

    def test_simulate_rolls_reproducible(self):
        a = simulate_rolls(2, 20, rng=random.Random(42))
        b = simulate_rolls(2, 20, rng=random.Random(42))
        self.assertEqual(a, b)

    def test_simulated_frequencies(self):
        self.assertEqual(simulated_frequencies([7, 3, 7, 12, 3, 7]),
                         [(3, 2), (7, 3), (12, 1)])
        self.assertEqual(simulated_frequencies([]), [])

    def test_rating(self):
        self.assertEqual(rate_dice_probability(60), "Excellent!")
        self.assertEqual(rate_dice_probability(50), "Good")
        self.assertEqual(rate_dice_probability(20), "Tough")


if __name__ == "__main__":
    unittest.main()
