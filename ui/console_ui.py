"""
Console UI for Probability Calc
命令行介面
"""

import os
from typing import Dict, List, Optional, Sequence, Tuple

from game.card import Card
from probability.dice import rate_dice_probability
from probability.hands import rate_hand_probability
from tournament.challenge import Challenge


# ANSI 顏色碼
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"
    BLACK = "\033[30m"


def clear_screen():
    """清除螢幕"""
    os.system('cls' if os.name == 'nt' else 'clear')


def display_banner():
    """顯示標題"""
    banner = f"""
{Colors.CYAN}╔══════════════════════════════════════════════════════╗
║                                                      ║
║   {Colors.WHITE}🎲 🃏 🏆{Colors.CYAN}     {Colors.BOLD}{Colors.WHITE}Probability Calc{Colors.RESET}{Colors.CYAN}     {Colors.WHITE}🏆 🃏 🎲{Colors.CYAN}      ║
║                                                      ║
║   {Colors.YELLOW}Dice • Cards • Tournament{Colors.CYAN}                          ║
║                                                      ║
╚══════════════════════════════════════════════════════╝{Colors.RESET}
"""
    print(banner)


def display_card(card: Card, dark_mode: bool = False) -> str:
    """格式化顯示單張牌"""
    if card.suit.is_red:
        color = Colors.RED
    else:
        color = Colors.WHITE if dark_mode else Colors.BLACK
    return f"{color}[{card.display}]{Colors.RESET}"


def display_cards(cards: List[Card], dark_mode: bool = False) -> str:
    """格式化顯示多張牌"""
    return ' '.join(display_card(c, dark_mode) for c in cards)


def probability_bar(probability: float, width: int = 30) -> str:
    """機率長條"""
    filled = int(round(min(max(probability, 0.0), 100.0) / 100 * width))
    return "█" * filled + "░" * (width - filled)


class ConsoleUI:
    """
    控制台介面

    負責畫面輸出與使用者輸入，計算交給呼叫端
    """

    def __init__(self, dark_mode: bool = False):
        self.dark_mode = dark_mode

    @property
    def accent(self) -> str:
        return Colors.CYAN if self.dark_mode else Colors.BLUE

    @property
    def text(self) -> str:
        return Colors.WHITE if self.dark_mode else Colors.RESET

    def header(self, title: str, subtitle: str = ""):
        """區塊標題"""
        print(f"\n{Colors.BOLD}{self.accent}═══ {title} ═══{Colors.RESET}")
        if subtitle:
            print(f"{Colors.GRAY}{subtitle}{Colors.RESET}")

    def menu(self, options: Sequence[Tuple[str, str]]) -> None:
        """顯示選單 (按鍵, 說明)"""
        print()
        for key, label in options:
            print(f"  [{key}] {self.text}{label}{Colors.RESET}")

    def info(self, message: str):
        print(f"  {self.text}{message}{Colors.RESET}")

    def error(self, message: str):
        print(f"  {Colors.RED}✗ {message}{Colors.RESET}")

    def success(self, message: str):
        print(f"  {Colors.GREEN}✓ {message}{Colors.RESET}")

    # ===== 輸入 =====

    def prompt(self, message: str) -> str:
        return input(f"\n{self.accent}{message}{Colors.RESET}").strip()

    def prompt_int(self, message: str, low: int, high: int,
                   default: Optional[int] = None) -> int:
        """
        讀取範圍內的整數

        Args:
            message: 提示訊息
            low: 最小值
            high: 最大值
            default: 直接按 Enter 時使用的值
        """
        while True:
            raw = self.prompt(f"{message} ({low}-{high}): ")
            if not raw and default is not None:
                return default
            try:
                value = int(raw)
            except ValueError:
                self.error("請輸入數字")
                continue
            if low <= value <= high:
                return value
            self.error(f"請輸入 {low} 到 {high} 之間的數字")

    def prompt_choice(self, message: str, choices: Sequence[str]) -> int:
        """從列表中選擇，回傳索引"""
        for i, choice in enumerate(choices, 1):
            print(f"  [{i}] {choice}")
        return self.prompt_int(message, 1, len(choices)) - 1

    def confirm(self, message: str) -> bool:
        return self.prompt(f"{message} (y/n): ").lower() == 'y'

    # ===== 骰子 =====

    def display_dice_parameters(self, dice_count: int, face_count: int, target_sum: int):
        self.header("🎲 Parameters")
        print(f"  Dice Count: {Colors.BOLD}{dice_count}{Colors.RESET}")
        print(f"  Dice Type:  {Colors.BOLD}D{face_count}{Colors.RESET}")
        print(f"  Target Sum: {Colors.BOLD}{target_sum}{Colors.RESET}")

    def display_dice_result(self, dice_count: int, face_count: int,
                            target_sum: int, probability: float):
        """顯示擲骰機率"""
        rating = rate_dice_probability(probability)
        color = Colors.GREEN if probability > 50 else Colors.YELLOW if probability > 20 else Colors.RED
        print(f"\n  P({dice_count}D{face_count} = {target_sum}) = "
              f"{color}{Colors.BOLD}{probability:.3f}%{Colors.RESET}  {color}{rating}{Colors.RESET}")
        print(f"  {color}{probability_bar(probability)}{Colors.RESET}")

    def display_distribution(self, distribution: Dict[int, float], highlight: Optional[int] = None):
        """顯示點數和分佈"""
        self.header("📊 Distribution")
        peak = max(distribution.values()) if distribution else 0.0
        for total, pct in distribution.items():
            width = int(round(pct / peak * 30)) if peak else 0
            mark = f"{Colors.YELLOW}◀{Colors.RESET}" if total == highlight else ""
            print(f"  {total:>4} {self.accent}{'█' * width}{Colors.RESET} {pct:6.3f}% {mark}")

    def display_simulation(self, frequencies: List[Tuple[int, int]], rolls: int):
        """顯示 100 次擲骰結果"""
        self.header(f"🎲 {rolls}x Roll")
        for total, count in frequencies:
            print(f"  {total:>4} {Colors.MAGENTA}{'▇' * count}{Colors.RESET} {count}")

    # ===== 撲克牌 =====

    def display_card_result(self, deck_label: str, hand_name: str, probability: float):
        rating = rate_hand_probability(probability)
        color = Colors.GREEN if probability >= 30 else Colors.YELLOW if probability >= 10 else Colors.RED
        print(f"\n  {deck_label} • {hand_name}: "
              f"{color}{Colors.BOLD}{probability:.3f}%{Colors.RESET}  {color}{rating}{Colors.RESET}")

    def display_hand(self, cards: List[Card]):
        self.header("🃏 Your Hand")
        print(f"  {display_cards(cards, self.dark_mode)}")

    # ===== 錦標賽 =====

    def display_current_challenge(self, challenge: Challenge):
        """顯示目前挑戰"""
        self.header("🎯 Current Challenge")
        print(f"  {Colors.BOLD}{challenge.name}{Colors.RESET}")
        print(f"  Chance: {challenge.probability:.1f}%")
        print(f"  Attempts: {challenge.attempts}   Successes: {challenge.successes}")
        # 與原畫面一致，分母加一避免除以零
        rate = challenge.successes / (challenge.attempts + 1) * 100
        print(f"  Success: {rate:.1f}%")

    def display_leaderboard(self, challenges: List[Challenge]):
        """顯示排行榜"""
        self.header("🏆 Leaderboard")
        if not challenges:
            print(f"  {Colors.GRAY}No challenges yet{Colors.RESET}")
            return
        medals = ["🥇", "🥈", "🥉"]
        for i, challenge in enumerate(challenges):
            medal = medals[i] if i < len(medals) else f"{i + 1:>2}."
            print(f"  {medal} {challenge.name:<16} {challenge.successes:>5} wins "
                  f"/ {challenge.attempts:<6} {Colors.GRAY}({challenge.probability:.1f}%){Colors.RESET}")

    # ===== 設定 =====

    def display_settings(self, settings: dict):
        self.header("⚙️  Settings")
        on = f"{Colors.GREEN}ON{Colors.RESET}"
        off = f"{Colors.GRAY}OFF{Colors.RESET}"
        print(f"  Dark Mode:   {on if settings['dark_mode'] else off}")
        print(f"  Animations:  {on if settings['animations_enabled'] else off}")
        print(f"  Total Challenges: {settings['total_challenges']}")

    def display_csv(self, csv_data: str):
        self.header("Tournament History")
        for line in csv_data.splitlines():
            print(f"  {Colors.GRAY}{line}{Colors.RESET}")
