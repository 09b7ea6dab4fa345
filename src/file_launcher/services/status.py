# src/file_launcher/services/status.py
from __future__ import annotations

import threading


class StatusBoard:
    """
    ワーカースレッドが書き、表示側が読むステータス文字列。
    書き手は常に 1 つ。未設定でも "" を返す。
    """

    def __init__(self, text: str = "") -> None:
        self._lock = threading.Lock()
        self._text = text or ""

    def set(self, text: str | None) -> None:
        with self._lock:
            self._text = text or ""

    def get(self) -> str:
        with self._lock:
            return self._text
