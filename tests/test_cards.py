import unittest
import random
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from probability.hands import (
    DeckType, HandCategory, HAND_CHOICES, probability_of_hand, rate_hand_probability
)
from game.card import Card, Suit, Rank, deal_random_hand


class TestHandOdds(unittest.TestCase):

    def test_standard_deck_constants(self):
        self.assertEqual(probability_of_hand(52, HandCategory.PAIR), 42.256)
        self.assertEqual(probability_of_hand(52, HandCategory.FLUSH), 0.197)
        self.assertEqual(probability_of_hand(52, HandCategory.STRAIGHT), 0.392)

    def test_standard_deck_fallback(self):
        """Categories without a constant fall back to one specific card"""
        self.assertAlmostEqual(probability_of_hand(52, HandCategory.FULL_HOUSE), 100 / 52)
        self.assertAlmostEqual(probability_of_hand(52, HandCategory.TWO_PAIR), 100 / 52)
        self.assertAlmostEqual(probability_of_hand(52, HandCategory.OTHER), 100 / 52)

    def test_other_decks_always_fall_back(self):
        self.assertAlmostEqual(probability_of_hand(36, HandCategory.PAIR), 100 / 36)
        self.assertAlmostEqual(probability_of_hand(78, HandCategory.FLUSH), 100 / 78)

    def test_string_categories(self):
        self.assertEqual(probability_of_hand(52, "Pair"), 42.256)
        self.assertEqual(probability_of_hand(52, "flush"), 0.197)
        self.assertAlmostEqual(probability_of_hand(52, "Royal Flush"), 100 / 52)

    def test_unsupported_deck(self):
        with self.assertRaises(ValueError):
            probability_of_hand(40, HandCategory.PAIR)

    def test_from_name(self):
        self.assertIs(HandCategory.from_name("Two Pair"), HandCategory.TWO_PAIR)
        self.assertIs(HandCategory.from_name("full_house"), HandCategory.FULL_HOUSE)
        self.assertIs(HandCategory.from_name("nonsense"), HandCategory.OTHER)
        self.assertNotIn(HandCategory.OTHER, HAND_CHOICES)

    def test_deck_from_size(self):
        self.assertIs(DeckType.from_size(36), DeckType.RUSSIAN)
        self.assertEqual(str(DeckType.TAROT), "Tarot (78)")

    def test_rating(self):
        self.assertEqual(rate_hand_probability(42.256), "Great odds!")
        self.assertEqual(rate_hand_probability(10), "Decent")
        self.assertEqual(rate_hand_probability(100 / 52), "Rare")
        self.assertEqual(rate_hand_probability(0.197), "Long shot")


class TestDealHand(unittest.TestCase):

    def test_deal_size(self):
        for size in range(2, 8):
            hand = deal_random_hand(size, rng=random.Random(size))
            self.assertEqual(len(hand), size)
            self.assertTrue(all(isinstance(c, Card) for c in hand))

    def test_deal_size_out_of_range(self):
        with self.assertRaises(ValueError):
            deal_random_hand(1)
        with self.assertRaises(ValueError):
            deal_random_hand(8)

    def test_card_to_dict(self):
        self.assertEqual(Card(Suit.HEARTS, Rank.QUEEN).to_dict(), {"rank": "Q", "suit": "♥"})

    def test_suit_symbols(self):
        self.assertEqual([s.symbol for s in Suit], ["♠", "♥", "♦", "♣"])
        self.assertEqual([s for s in Suit if s.is_red], [Suit.HEARTS, Suit.DIAMONDS])


if __name__ == "__main__":
    unittest.main()
