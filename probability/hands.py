"""
Hand Odds Table for Probability Calc
牌型機率表 - 依牌組與目標牌型查表
"""

from enum import Enum
from typing import Union


class DeckType(Enum):
    """牌組種類"""
    POKER = (52, "Poker (52)")
    RUSSIAN = (36, "Russian (36)")
    TAROT = (78, "Tarot (78)")

    def __init__(self, size: int, label: str):
        self.size = size
        self.label = label

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_size(cls, size: int) -> 'DeckType':
        for deck in cls:
            if deck.size == size:
                return deck
        supported = ", ".join(str(d.size) for d in cls)
        raise ValueError(f"不支援的牌組張數: {size} (支援: {supported})")


class HandCategory(Enum):
    """目標牌型"""
    PAIR = "Pair"
    TWO_PAIR = "Two Pair"
    FLUSH = "Flush"
    STRAIGHT = "Straight"
    FULL_HOUSE = "Full House"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> 'HandCategory':
        """從顯示名稱或枚舉名稱解析，無法識別時視為 OTHER"""
        key = name.strip().lower()
        for category in cls:
            if key in (category.value.lower(), category.name.lower()):
                return category
        return cls.OTHER


# 可選的目標牌型（不含 OTHER）
HAND_CHOICES = [c for c in HandCategory if c is not HandCategory.OTHER]

# 標準 52 張牌組的預先計算機率 (%)
STANDARD_HAND_ODDS = {
    HandCategory.PAIR: 42.256,
    HandCategory.FLUSH: 0.197,
    HandCategory.STRAIGHT: 0.392,
}

HAND_SIZE_RANGE = (2, 7)


def probability_of_hand(deck_size: int,
                        hand_category: Union[HandCategory, str]) -> float:
    """
    查詢牌型機率

    只有標準 52 張牌組使用查表常數；其他牌型或牌組一律以
    「抽到特定一張牌」的 100 / deck_size 計算。

    Args:
        deck_size: 牌組張數 (52, 36, 78)
        hand_category: 目標牌型或其名稱

    Returns:
        機率百分比

    Raises:
        ValueError: 不支援的牌組張數
    """
    deck = DeckType.from_size(deck_size)
    if isinstance(hand_category, str):
        hand_category = HandCategory.from_name(hand_category)

    if deck is DeckType.POKER and hand_category in STANDARD_HAND_ODDS:
        return STANDARD_HAND_ODDS[hand_category]
    return 100.0 / deck.size


def rate_hand_probability(probability: float) -> str:
    """機率評語"""
    if probability >= 30:
        return "Great odds!"
    if probability >= 10:
        return "Decent"
    if probability >= 1:
        return "Rare"
    return "Long shot"
