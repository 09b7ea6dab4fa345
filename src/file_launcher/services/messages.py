# src/file_launcher/services/messages.py
from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

RESOURCE_DIR = Path(__file__).resolve().parent.parent / "resources"
BASE_NAME = "messages"


def _candidate_names(locale_name: str | None) -> list[str]:
    """
    "ja_JP" -> ["messages_ja_JP", "messages_ja", "messages"]
    "ja-JP.UTF-8" のような表記も受け付ける。
    """
    names: list[str] = []
    if locale_name:
        tag = locale_name.split(".")[0].replace("-", "_")
        parts = [p for p in tag.split("_") if p]
        if parts:
            lang = parts[0].lower()
            if len(parts) >= 2:
                names.append(f"{BASE_NAME}_{lang}_{parts[1].upper()}")
            names.append(f"{BASE_NAME}_{lang}")
    names.append(BASE_NAME)
    return names


class MessageCatalog:
    """
    ロケール別のメッセージ辞書。
    具体的なロケールに無いキーは、より一般的なカタログから引く。
    """

    def __init__(self, entries: dict[str, str], locale_name: str | None = None) -> None:
        self._entries = dict(entries)
        self.locale_name = locale_name

    @classmethod
    def load(cls, locale_name: str | None = None, resource_dir: Path = RESOURCE_DIR) -> MessageCatalog:
        merged: dict[str, str] = {}
        # 一般的なものから順に読み、具体的なもので上書きする
        for name in reversed(_candidate_names(locale_name)):
            path = resource_dir / f"{name}.json"
            if not path.exists():
                continue
            merged.update(json.loads(path.read_text(encoding="utf-8")))
            logger.debug("loaded message catalog: %s", path)
        return cls(merged, locale_name)

    def get(self, key: str, *args: object) -> str:
        text = self._entries[key]
        if not args:
            return text
        return text.format(*args)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
