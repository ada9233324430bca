"""
Probability Calc
機率計算器 - 主程式入口

功能:
1. 骰子點數和機率
2. 撲克牌型機率
3. 錦標賽挑戰與排行榜

使用方法:
    python main.py
"""

import logging
import os
import sys
import time
from pathlib import Path

from game.card import deal_random_hand
from probability.dice import (
    DICE_TYPES, MIN_DICE, MAX_DICE, probability_of_sum, sum_distribution,
    clamp_target_sum, simulate_rolls, simulated_frequencies
)
from probability.hands import DeckType, HAND_CHOICES, HAND_SIZE_RANGE, probability_of_hand
from storage.app_state import AppState, create_app_state
from ui.console_ui import ConsoleUI, Colors, clear_screen, display_banner

logger = logging.getLogger(__name__)


class ProbabilityCalcApp:
    """
    機率計算器主程式

    管理分頁切換與各分頁的輸入狀態
    """

    def __init__(self, state: AppState):
        self.state = state
        self.ui = ConsoleUI(dark_mode=state.dark_mode)
        self.running = True

        # 骰子分頁
        self.dice_count = 3
        self.dice_type = 6
        self.target_sum = 10

        # 撲克牌分頁
        self.deck = DeckType.POKER
        self.hand_size = 5
        self.target_hand = HAND_CHOICES[0]

    def run(self):
        """主選單循環"""
        tabs = {
            "1": self.dice_tab,
            "2": self.cards_tab,
            "3": self.tournament_tab,
            "4": self.settings_tab,
        }
        while self.running:
            clear_screen()
            display_banner()
            self.ui.menu([
                ("1", "🎲 Dice"),
                ("2", "🃏 Cards"),
                ("3", "🏆 Tournament"),
                ("4", "⚙️  Settings"),
                ("q", "Quit"),
            ])
            choice = self.ui.prompt("Select tab: ").lower()
            if choice == "q":
                self.running = False
            elif choice in tabs:
                tabs[choice]()

    def _pause(self):
        """擲骰動畫的短暫停頓"""
        if self.state.animations_enabled:
            print(f"  {Colors.GRAY}rolling...{Colors.RESET}")
            time.sleep(0.4)

    # ===== 骰子 =====

    def dice_tab(self):
        while True:
            self.ui.header("Dice Probability", "Calculate your chances")
            self.ui.display_dice_parameters(self.dice_count, self.dice_type, self.target_sum)
            self.ui.menu([
                ("1", "Set dice count"),
                ("2", "Set dice type"),
                ("3", "Set target sum"),
                ("c", "Calculate"),
                ("r", "100x Roll"),
                ("d", "Show distribution"),
                ("b", "Back"),
            ])
            choice = self.ui.prompt("Choose: ").lower()
            if choice == "1":
                self.dice_count = self.ui.prompt_int("Dice count", MIN_DICE, MAX_DICE)
                self.target_sum = clamp_target_sum(self.target_sum, self.dice_count, self.dice_type)
            elif choice == "2":
                labels = [f"D{faces}" for faces in DICE_TYPES]
                self.dice_type = DICE_TYPES[self.ui.prompt_choice("Dice type", labels)]
                self.target_sum = clamp_target_sum(self.target_sum, self.dice_count, self.dice_type)
            elif choice == "3":
                self.target_sum = self.ui.prompt_int(
                    "Target sum", self.dice_count, self.dice_count * self.dice_type)
            elif choice == "c":
                self._pause()
                probability = probability_of_sum(self.dice_count, self.dice_type, self.target_sum)
                self.ui.display_dice_result(self.dice_count, self.dice_type, self.target_sum, probability)
            elif choice == "r":
                self._pause()
                results = simulate_rolls(self.dice_count, self.dice_type, rolls=100)
                self.ui.display_simulation(simulated_frequencies(results), len(results))
            elif choice == "d":
                distribution = sum_distribution(self.dice_count, self.dice_type)
                self.ui.display_distribution(distribution, highlight=self.target_sum)
            elif choice == "b":
                return

    # ===== 撲克牌 =====

    def cards_tab(self):
        decks = list(DeckType)
        while True:
            self.ui.header("Cards Probability", "Poker odds calculator")
            self.ui.info(f"Deck: {self.deck}   Hand Size: {self.hand_size}   Target: {self.target_hand}")
            self.ui.menu([
                ("1", "Choose deck"),
                ("2", "Set hand size"),
                ("3", "Choose target hand"),
                ("c", "Calculate"),
                ("d", "Deal Hand"),
                ("b", "Back"),
            ])
            choice = self.ui.prompt("Choose: ").lower()
            if choice == "1":
                self.deck = decks[self.ui.prompt_choice("Deck", [str(d) for d in decks])]
            elif choice == "2":
                low, high = HAND_SIZE_RANGE
                self.hand_size = self.ui.prompt_int("Hand size", low, high)
            elif choice == "3":
                self.target_hand = HAND_CHOICES[
                    self.ui.prompt_choice("Target hand", [str(h) for h in HAND_CHOICES])]
            elif choice == "c":
                self._show_card_probability()
            elif choice == "d":
                self._pause()
                self.ui.display_hand(deal_random_hand(self.hand_size))
                self._show_card_probability()
            elif choice == "b":
                return

    def _show_card_probability(self):
        probability = probability_of_hand(self.deck.size, self.target_hand)
        self.ui.display_card_result(str(self.deck), str(self.target_hand), probability)

    # ===== 錦標賽 =====

    def tournament_tab(self):
        while True:
            self.ui.header("Tournament", "Beat the odds!")
            challenge = self.state.current_challenge
            if challenge is None:
                self.ui.info("Welcome to Tournament! Test your luck against the odds")
                options = [("s", "Start Tournament!")]
            else:
                self.ui.display_current_challenge(challenge)
                options = [("a", "Attempt 100x"), ("n", "New")]
            self.ui.display_leaderboard(self.state.leaderboard())
            self.ui.menu(options + [("b", "Back")])

            choice = self.ui.prompt("Choose: ").lower()
            if choice in ("s", "n"):
                self.state.new_challenge()
            elif choice == "a" and challenge is not None:
                self._pause()
                self.state.record_attempt(challenge)
            elif choice == "b":
                return

    # ===== 設定 =====

    def settings_tab(self):
        while True:
            self.ui.display_settings(self.state.settings())
            self.ui.menu([
                ("1", "Toggle Dark Mode"),
                ("2", "Toggle Animations"),
                ("e", "Export History (CSV)"),
                ("x", "Clear All Data"),
                ("b", "Back"),
            ])
            choice = self.ui.prompt("Choose: ").lower()
            if choice == "1":
                self.state.set_dark_mode(not self.state.dark_mode)
                self.ui.dark_mode = self.state.dark_mode
            elif choice == "2":
                self.state.set_animations_enabled(not self.state.animations_enabled)
            elif choice == "e":
                self._export_csv()
            elif choice == "x":
                if self.ui.confirm("This will delete all tournament history and settings. Clear?"):
                    self.state.clear_all_data()
                    self.ui.dark_mode = self.state.dark_mode
                    self.ui.success("All data cleared")
            elif choice == "b":
                return

    def _export_csv(self):
        csv_data = self.state.export_csv()
        self.ui.display_csv(csv_data)
        target = self.ui.prompt("Save to file (blank to skip): ")
        if not target:
            return
        try:
            Path(target).expanduser().write_text(csv_data, encoding="utf-8")
        except OSError as e:
            self.ui.error(f"Could not write {target}: {e}")
        else:
            self.ui.success(f"Saved {target}")


def configure_logging():
    """設定日誌，等級可用 PROBCALC_LOG_LEVEL 覆寫"""
    level = os.environ.get("PROBCALC_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main():
    """主程式入口"""
    configure_logging()
    state = create_app_state()
    ProbabilityCalcApp(state).run()
    print(f"\n{Colors.GRAY}Bye!{Colors.RESET}\n")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print(f"\n\n{Colors.YELLOW}已中斷。{Colors.RESET}\n")
        sys.exit(0)
