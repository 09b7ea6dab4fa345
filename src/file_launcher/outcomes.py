# src/file_launcher/outcomes.py
"""
OS の「開く」操作と保存ダイアログの結果型。
例外ではなく値として返し、launch_flow 側で分岐する。
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class Opened:
    path: Path


@dataclass(frozen=True)
class OpenFailed:
    path: Path
    reason: str


OpenResult = Union[Opened, OpenFailed]


@dataclass(frozen=True)
class SaveApproved:
    path: Path


@dataclass(frozen=True)
class SaveCancelled:
    pass


@dataclass(frozen=True)
class SaveDialogError:
    reason: str = ""


SaveDialogResult = Union[SaveApproved, SaveCancelled, SaveDialogError]
