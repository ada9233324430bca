"""
Card classes for Probability Calc
撲克牌類別與隨機發牌
"""

from enum import Enum
from dataclasses import dataclass
from typing import List, Optional
import random

from probability.hands import HAND_SIZE_RANGE


class Suit(Enum):
    """花色枚舉"""
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.symbol

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(Enum):
    """點數枚舉"""
    TWO = (2, "2")
    THREE = (3, "3")
    FOUR = (4, "4")
    FIVE = (5, "5")
    SIX = (6, "6")
    SEVEN = (7, "7")
    EIGHT = (8, "8")
    NINE = (9, "9")
    TEN = (10, "10")
    JACK = (11, "J")
    QUEEN = (12, "Q")
    KING = (13, "K")
    ACE = (14, "A")

    def __init__(self, points: int, symbol: str):
        self.points = points
        self.symbol = symbol

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Card:
    """
    撲克牌類別

    Attributes:
        suit: 花色
        rank: 點數
    """
    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return self.display

    @property
    def display(self) -> str:
        """顯示格式，例如 A♠"""
        return f"{self.rank.symbol}{self.suit.symbol}"

    def to_dict(self) -> dict:
        return {"rank": self.rank.symbol, "suit": self.suit.symbol}


def deal_random_hand(hand_size: int, rng: Optional[random.Random] = None) -> List[Card]:
    """
    隨機發一手牌

    每張牌獨立抽出（可重複），只用於展示，不代表真實牌組。

    Args:
        hand_size: 手牌張數 (2-7)
        rng: 亂數產生器

    Raises:
        ValueError: 張數超出範圍
    """
    low, high = HAND_SIZE_RANGE
    if not low <= hand_size <= high:
        raise ValueError(f"手牌張數必須介於 {low} 與 {high} 之間，收到 {hand_size}")

    rng = rng or random.Random()
    suits = list(Suit)
    ranks = list(Rank)
    return [Card(rng.choice(suits), rng.choice(ranks)) for _ in range(hand_size)]


if __name__ == "__main__":
    hand = deal_random_hand(5)
    print(f"發5張牌: {' '.join(c.display for c in hand)}")
