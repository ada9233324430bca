"""
Challenge record for Probability Calc
挑戰紀錄 - 錦標賽模式的單一挑戰
"""

from dataclasses import dataclass, field, asdict
from uuid import uuid4


@dataclass
class Challenge:
    """
    錦標賽挑戰

    Attributes:
        name: 挑戰名稱（例如 "3D6 = 18"）
        probability: 建立時決定的機率百分比
        attempts: 嘗試次數
        successes: 成功次數（不會超過 attempts）
        id: 唯一識別碼
    """
    name: str
    probability: float
    attempts: int = 0
    successes: int = 0
    id: str = field(default_factory=lambda: str(uuid4()))

    def __post_init__(self):
        if self.attempts < 0 or self.successes < 0:
            raise ValueError("嘗試與成功次數不可為負數")
        if self.successes > self.attempts:
            raise ValueError(
                f"成功次數 {self.successes} 超過嘗試次數 {self.attempts}"
            )

    @property
    def success_rate(self) -> float:
        """成功率 (%)，尚未嘗試時為 0"""
        if self.attempts == 0:
            return 0.0
        return self.successes / self.attempts * 100

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'Challenge':
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            probability=float(data["probability"]),
            attempts=int(data["attempts"]),
            successes=int(data["successes"]),
        )

    def __str__(self) -> str:
        return (f"{self.name} ({self.probability:.1f}%): "
                f"{self.successes}/{self.attempts}")
