"""
Record encoding for stored data
儲存格式 - 挑戰集合與設定旗標的 JSON 編碼
"""

import json
import logging
from typing import List, Optional

from tournament.challenge import Challenge

logger = logging.getLogger(__name__)


def encode_challenges(challenges: List[Challenge]) -> bytes:
    """挑戰集合 -> JSON bytes"""
    return json.dumps([c.to_dict() for c in challenges], ensure_ascii=False).encode("utf-8")


def decode_challenges(data: Optional[bytes]) -> List[Challenge]:
    """
    JSON bytes -> 挑戰集合

    資料不存在或格式錯誤時視為尚無資料，回傳空集合。
    """
    if not data:
        return []
    try:
        records = json.loads(data.decode("utf-8"))
        if not isinstance(records, list):
            raise ValueError(f"expected a list, got {type(records).__name__}")
        return [Challenge.from_dict(record) for record in records]
    except (ValueError, KeyError, TypeError, OverflowError, RecursionError) as e:
        # json.JSONDecodeError 與 UnicodeDecodeError 都是 ValueError
        logger.warning("Discarding unreadable challenge data: %s", e)
        return []


def encode_flag(value: bool) -> bytes:
    return json.dumps(bool(value)).encode("utf-8")


def decode_flag(data: Optional[bytes], default: bool) -> bool:
    """設定旗標，無法解析時使用預設值"""
    if data is None:
        return default
    try:
        value = json.loads(data.decode("utf-8"))
    except (ValueError, RecursionError):
        logger.warning("Unreadable setting value %r, using default", data[:40])
        return default
    if not isinstance(value, bool):
        return default
    return value
