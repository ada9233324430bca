"""
Application state for Probability Calc
應用程式狀態 - 設定、挑戰帳本與儲存的組合
"""

import logging
import os
import random
from pathlib import Path
from typing import List, Optional

from tournament.challenge import Challenge
from tournament.ledger import ChallengeLedger
from tournament.export import generate_csv
from .store import KeyValueStore, DirectoryStore
from .codec import encode_challenges, decode_challenges, encode_flag, decode_flag

logger = logging.getLogger(__name__)


# 儲存鍵
CHALLENGES_KEY = "challengesData"
DARK_MODE_KEY = "darkMode"
ANIMATIONS_KEY = "animationsEnabled"

DEFAULT_DARK_MODE = False
DEFAULT_ANIMATIONS = True

DEFAULT_DATA_DIR = "~/.probability_calc"


class AppState:
    """
    應用程式狀態

    由前端（console 或 web）持有並明確傳遞，
    儲存透過建構時注入的 KeyValueStore 進行。
    """

    def __init__(self, store: KeyValueStore, rng: Optional[random.Random] = None):
        self.store = store
        self.ledger = ChallengeLedger(rng=rng)
        self.dark_mode = DEFAULT_DARK_MODE
        self.animations_enabled = DEFAULT_ANIMATIONS

    def load(self) -> 'AppState':
        """從儲存讀入設定與挑戰集合"""
        self.ledger.challenges = decode_challenges(self.store.load(CHALLENGES_KEY))
        self.dark_mode = decode_flag(self.store.load(DARK_MODE_KEY), DEFAULT_DARK_MODE)
        self.animations_enabled = decode_flag(self.store.load(ANIMATIONS_KEY), DEFAULT_ANIMATIONS)
        logger.debug("Loaded %d challenges", len(self.ledger))
        return self

    def save_challenges(self) -> None:
        self.store.save(CHALLENGES_KEY, encode_challenges(self.ledger.challenges))

    # ===== 錦標賽 =====

    @property
    def current_challenge(self) -> Optional[Challenge]:
        return self.ledger.current

    def new_challenge(self) -> Challenge:
        return self.ledger.generate()

    def record_attempt(self, challenge: Optional[Challenge] = None) -> Challenge:
        """
        對挑戰記錄一批嘗試並寫回儲存

        Args:
            challenge: 預設為目前挑戰

        Raises:
            ValueError: 沒有可嘗試的挑戰
        """
        challenge = challenge or self.ledger.current
        if challenge is None:
            raise ValueError("目前沒有進行中的挑戰")
        updated = self.ledger.record_attempt_batch(challenge)
        self.save_challenges()
        return updated

    def leaderboard(self) -> List[Challenge]:
        return self.ledger.leaderboard()

    @property
    def total_challenges(self) -> int:
        return len(self.ledger)

    # ===== 設定 =====

    def set_dark_mode(self, enabled: bool) -> None:
        self.dark_mode = bool(enabled)
        self.store.save(DARK_MODE_KEY, encode_flag(self.dark_mode))

    def set_animations_enabled(self, enabled: bool) -> None:
        self.animations_enabled = bool(enabled)
        self.store.save(ANIMATIONS_KEY, encode_flag(self.animations_enabled))

    def settings(self) -> dict:
        return {
            "dark_mode": self.dark_mode,
            "animations_enabled": self.animations_enabled,
            "total_challenges": self.total_challenges,
        }

    # ===== 資料 =====

    def export_csv(self) -> str:
        return generate_csv(self.ledger.challenges)

    def clear_all_data(self) -> None:
        """刪除所有錦標賽紀錄並重設設定"""
        self.ledger.clear()
        self.dark_mode = DEFAULT_DARK_MODE
        self.animations_enabled = DEFAULT_ANIMATIONS
        for key in (CHALLENGES_KEY, DARK_MODE_KEY, ANIMATIONS_KEY):
            self.store.delete(key)
        logger.info("All data cleared")


def default_data_dir() -> Path:
    """資料目錄，可用 PROBCALC_DATA_DIR 環境變數覆寫"""
    return Path(os.environ.get("PROBCALC_DATA_DIR", DEFAULT_DATA_DIR)).expanduser()


def create_app_state(data_dir: Optional[Path] = None) -> AppState:
    """以目錄儲存建立並載入應用程式狀態"""
    store = DirectoryStore(data_dir or default_data_dir())
    logger.info("Using data directory %s", store.root)
    return AppState(store).load()
