"""
Dice Sum Probability for Probability Calc
骰子點數和機率 - 以動態規劃計算 N 顆 S 面骰的點數和分佈
"""

import random
from typing import Dict, List, Optional, Tuple
from collections import Counter


# 介面上可選的骰子種類 (D4 ~ D20)
DICE_TYPES = [4, 6, 8, 10, 12, 20]

MIN_DICE = 1
MAX_DICE = 10


def _validate(dice_count: int, face_count: int) -> None:
    if dice_count < 1:
        raise ValueError(f"骰子數量至少為 1，收到 {dice_count}")
    if face_count < 1:
        raise ValueError(f"骰子面數至少為 1，收到 {face_count}")


def _count_ways(dice_count: int, face_count: int) -> List[int]:
    """
    建立部分和表

    ways[s] = 用目前已處理的骰子湊出點數和 s 的組合數
    """
    max_sum = dice_count * face_count

    # 0 顆骰子只有一種方式得到 0
    ways = [0] * (max_sum + 1)
    ways[0] = 1

    for _ in range(dice_count):
        new_ways = [0] * (max_sum + 1)
        for partial, count in enumerate(ways):
            if count == 0:
                continue
            for face in range(1, face_count + 1):
                new_sum = partial + face
                if new_sum <= max_sum:
                    new_ways[new_sum] += count
        ways = new_ways

    return ways


def probability_of_sum(dice_count: int, face_count: int, target_sum: int) -> float:
    """
    計算點數和恰好等於目標值的機率

    Args:
        dice_count: 骰子數量 (>= 1)
        face_count: 每顆骰子的面數 (>= 1)
        target_sum: 目標點數和

    Returns:
        機率百分比 (0 ~ 100)，目標值超出可能範圍時為 0.0

    Raises:
        ValueError: dice_count 或 face_count 小於 1
    """
    _validate(dice_count, face_count)

    min_sum = dice_count
    max_sum = dice_count * face_count
    if target_sum < min_sum or target_sum > max_sum:
        return 0.0

    ways = _count_ways(dice_count, face_count)
    total_outcomes = face_count ** dice_count
    return ways[target_sum] / total_outcomes * 100.0


def sum_distribution(dice_count: int, face_count: int) -> Dict[int, float]:
    """
    計算所有可能點數和的機率分佈

    Returns:
        {點數和: 機率百分比}，依點數和遞增排列
    """
    _validate(dice_count, face_count)

    ways = _count_ways(dice_count, face_count)
    total_outcomes = face_count ** dice_count
    return {
        total: ways[total] / total_outcomes * 100.0
        for total in range(dice_count, dice_count * face_count + 1)
    }


def clamp_target_sum(target_sum: int, dice_count: int, face_count: int) -> int:
    """將目標點數和限制在 [dice_count, dice_count * face_count] 之間"""
    return min(max(target_sum, dice_count), dice_count * face_count)


def simulate_rolls(dice_count: int, face_count: int, rolls: int = 100,
                   rng: Optional[random.Random] = None) -> List[int]:
    """
    模擬擲骰

    Args:
        dice_count: 骰子數量
        face_count: 骰子面數
        rolls: 擲骰次數
        rng: 亂數產生器（測試時可固定種子）

    Returns:
        每次擲骰的點數和
    """
    _validate(dice_count, face_count)
    if rolls < 0:
        raise ValueError(f"擲骰次數不可為負數，收到 {rolls}")

    rng = rng or random.Random()
    return [
        sum(rng.randint(1, face_count) for _ in range(dice_count))
        for _ in range(rolls)
    ]


def simulated_frequencies(results: List[int]) -> List[Tuple[int, int]]:
    """統計模擬結果，回傳依點數和排序的 (點數和, 次數)"""
    return sorted(Counter(results).items())


def rate_dice_probability(probability: float) -> str:
    """機率評語"""
    if probability > 50:
        return "Excellent!"
    if probability > 20:
        return "Good"
    return "Tough"


if __name__ == "__main__":
    # 測試
    print(f"2D6 = 7: {probability_of_sum(2, 6, 7):.3f}%")
    print(f"3D6 = 10: {probability_of_sum(3, 6, 10):.3f}%")
    print(f"3D6 = 18: {probability_of_sum(3, 6, 18):.3f}%")

    rolls = simulate_rolls(3, 6)
    print(f"100 次擲骰: {simulated_frequencies(rolls)}")
