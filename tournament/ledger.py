"""
Challenge Ledger for Probability Calc
挑戰帳本 - 產生挑戰、記錄嘗試與排行榜
"""

import logging
import random
from typing import List, Optional

from .challenge import Challenge

logger = logging.getLogger(__name__)


CHALLENGE_TEMPLATES = [
    "3D6 = 18",
    "4D8 ≥ 20",
    "2D20 max(15)",
    "Poker Flush",
    "Royal Straight",
]

PROBABILITY_RANGE = (0.1, 25.0)   # 挑戰機率範圍 (%)
ATTEMPT_BATCH = 100               # 每次嘗試的次數
MAX_BATCH_SUCCESSES = 10          # 每批最多成功次數


class ChallengeLedger:
    """
    錦標賽挑戰帳本

    持有已記錄的挑戰集合（依加入順序）與目前挑戰。
    本身不負責儲存，由 AppState 讀入與寫回集合。
    """

    def __init__(self, challenges: Optional[List[Challenge]] = None,
                 rng: Optional[random.Random] = None):
        """
        Args:
            challenges: 先前儲存的挑戰集合
            rng: 亂數產生器（測試時可固定種子）
        """
        self.challenges: List[Challenge] = list(challenges or [])
        self.current: Optional[Challenge] = None
        self.rng = rng or random.Random()

    def generate(self) -> Challenge:
        """產生新挑戰並設為目前挑戰（尚未加入集合）"""
        low, high = PROBABILITY_RANGE
        challenge = Challenge(
            name=self.rng.choice(CHALLENGE_TEMPLATES),
            probability=self.rng.uniform(low, high),
        )
        self.current = challenge
        logger.info("New challenge %s: %s (%.2f%%)",
                    challenge.id, challenge.name, challenge.probability)
        return challenge

    def record_attempt_batch(self, challenge: Challenge) -> Challenge:
        """
        記錄一批嘗試

        attempts 加 100，successes 加 0~10 之間的隨機整數。
        第一次記錄時把挑戰加入集合。

        Returns:
            更新後的挑戰
        """
        successes = self.rng.randint(0, MAX_BATCH_SUCCESSES)
        challenge.attempts += ATTEMPT_BATCH
        challenge.successes += successes

        index = self._index_of(challenge.id)
        if index is None:
            self.challenges.append(challenge)
        else:
            self.challenges[index] = challenge

        if self.current is not None and self.current.id == challenge.id:
            self.current = challenge

        logger.debug("Challenge %s: +%d attempts, +%d successes",
                     challenge.id, ATTEMPT_BATCH, successes)
        return challenge

    def clear(self) -> None:
        """清空所有挑戰"""
        self.challenges = []
        self.current = None
        logger.info("Challenge ledger cleared")

    def leaderboard(self) -> List[Challenge]:
        """依成功次數遞減排序（同分維持加入順序）"""
        return sorted(self.challenges, key=lambda c: c.successes, reverse=True)

    def _index_of(self, challenge_id: str) -> Optional[int]:
        for i, existing in enumerate(self.challenges):
            if existing.id == challenge_id:
                return i
        return None

    def __len__(self) -> int:
        return len(self.challenges)
