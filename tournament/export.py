"""
CSV export for tournament history
錦標賽紀錄匯出
"""

from typing import Iterable

from .challenge import Challenge

CSV_HEADER = "Challenge,Probability,Attempts,Successes,Success Rate"


def generate_csv(challenges: Iterable[Challenge]) -> str:
    """
    產生 CSV 報表

    每列: "名稱",機率,嘗試次數,成功次數,成功率%
    """
    lines = [CSV_HEADER]
    for challenge in challenges:
        name = challenge.name.replace('"', '""')
        lines.append(
            f'"{name}",{challenge.probability},{challenge.attempts},'
            f'{challenge.successes},{challenge.success_rate:.2f}%'
        )
    return '\n'.join(lines) + '\n'
