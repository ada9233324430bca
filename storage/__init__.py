# Storage module initialization
"""
Probability Calc - Storage Module
儲存與應用程式狀態模組
"""

from .store import KeyValueStore, MemoryStore, DirectoryStore
from .codec import encode_challenges, decode_challenges
from .app_state import AppState, create_app_state, default_data_dir

__all__ = [
    'KeyValueStore', 'MemoryStore', 'DirectoryStore',
    'encode_challenges', 'decode_challenges',
    'AppState', 'create_app_state', 'default_data_dir'
]
