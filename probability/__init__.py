# Probability module initialization
"""
Probability Calc - Probability Module
骰子與牌型機率計算模組
"""

from .dice import (
    DICE_TYPES, probability_of_sum, sum_distribution, clamp_target_sum,
    simulate_rolls, simulated_frequencies, rate_dice_probability
)
from .hands import (
    DeckType, HandCategory, HAND_CHOICES, probability_of_hand, rate_hand_probability
)

__all__ = [
    'DICE_TYPES', 'probability_of_sum', 'sum_distribution', 'clamp_target_sum',
    'simulate_rolls', 'simulated_frequencies', 'rate_dice_probability',
    'DeckType', 'HandCategory', 'HAND_CHOICES', 'probability_of_hand',
    'rate_hand_probability'
]
