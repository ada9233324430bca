# Game module initialization
"""
Probability Calc - Game Module
撲克牌與發牌模組
"""

from .card import Card, Suit, Rank, deal_random_hand

__all__ = [
    'Card', 'Suit', 'Rank',
    'deal_random_hand'
]
