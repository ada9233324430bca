"""
Durable Key-Value Store for Probability Calc
鍵值儲存 - 以位元組保存設定與挑戰紀錄
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)


class KeyValueStore:
    """
    鍵值儲存介面

    Methods:
        load: 讀取鍵值，不存在時回傳 None
        save: 寫入鍵值（覆蓋舊值）
        delete: 刪除鍵值
    """

    def load(self, key: str) -> Optional[bytes]:
        raise NotImplementedError

    def save(self, key: str, data: bytes) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """記憶體內儲存（測試或暫時使用）"""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._data: Dict[str, bytes] = dict(initial or {})

    def load(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def save(self, key: str, data: bytes) -> None:
        self._data[key] = bytes(data)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class DirectoryStore(KeyValueStore):
    """
    目錄儲存

    每個鍵對應目錄下的一個檔案，寫入時先寫暫存檔再替換，
    避免中斷時留下半份資料。
    """

    def __init__(self, root: Union[Path, str]):
        self.root = Path(root).expanduser()
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        if not key or '/' in key or '\\' in key or key.startswith('.'):
            raise ValueError(f"無效的鍵: {key!r}")
        return self.root / f"{key}.dat"

    def load(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not path.exists():
            return None
        logger.debug("Loading %s from %s", key, path)
        return path.read_bytes()

    def save(self, key: str, data: bytes) -> None:
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug("Saved %d bytes to %s", len(data), path)

    def delete(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
            logger.debug("Deleted %s", path)
