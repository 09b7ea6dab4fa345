# src/file_launcher/launch_flow.py
"""
開く／保存の判断フロー。
Qt に依存しない。確認ダイアログ・保存ダイアログ・表示更新は呼び出し側から注入する。

    INIT ─┬─ (非対応) ─────────────── SAVING_DIRECT ──┐
          └─ AWAITING_USER_CONFIRMATION               │
               ├─ no  → OPEN_CANCELLED                │
               └─ yes → OPENING ─┬─ OPENED            │
                                 └─ SAVING_FALLBACK ──┤
                                                      └─ SAVED / SAVE_CANCELLED / SAVE_ERROR
"""
from __future__ import annotations

import logging
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Protocol

from file_launcher.outcomes import (
    Opened,
    OpenFailed,
    OpenResult,
    SaveApproved,
    SaveCancelled,
    SaveDialogError,
    SaveDialogResult,
)
from file_launcher.services.file_copy import copy_file
from file_launcher.services.messages import MessageCatalog
from file_launcher.services.path_resolver import ResolvedFile

logger = logging.getLogger(__name__)


class FlowState(Enum):
    INIT = auto()
    AWAITING_USER_CONFIRMATION = auto()
    OPENING = auto()
    SAVING_DIRECT = auto()
    OPENED = auto()
    SAVING_FALLBACK = auto()
    SAVED = auto()
    SAVE_CANCELLED = auto()
    SAVE_ERROR = auto()
    OPEN_CANCELLED = auto()


class Opener(Protocol):
    def is_supported(self) -> bool: ...

    def open(self, path: Path) -> OpenResult: ...


class LaunchFlow:
    def __init__(
        self,
        file: ResolvedFile,
        catalog: MessageCatalog,
        opener: Opener,
        confirm: Callable[[], bool],
        choose_destination: Callable[[str], SaveDialogResult],
        publish: Callable[[str], None],
        copier: Callable[[Path, Path], int] = copy_file,
    ) -> None:
        self._file = file
        self._catalog = catalog
        self._opener = opener
        self._confirm = confirm
        self._choose_destination = choose_destination
        self._publish = publish
        self._copier = copier

        self.state = FlowState.INIT
        self.status = ""

    # ---- public ----

    def run(self) -> FlowState:
        if not self._opener.is_supported():
            logger.info("default open is not supported here; saving directly")
            self.state = FlowState.SAVING_DIRECT
            self._save()
            return self.state

        self.state = FlowState.AWAITING_USER_CONFIRMATION
        if self._confirm():
            self._launch()
        else:
            self._set_status(self._catalog.get("msg.cancel_open_file"))
            self.state = FlowState.OPEN_CANCELLED
        return self.state

    # ---- internal ----

    def _set_status(self, text: str) -> None:
        self.status = text or ""
        self._publish(self.status)

    def _launch(self) -> None:
        self.state = FlowState.OPENING
        result = self._opener.open(self._file.path)

        if isinstance(result, Opened):
            self.state = FlowState.OPENED
            self._set_status(self._catalog.get("msg.opened_file", self._file.absolute_path))
        elif isinstance(result, OpenFailed):
            logger.warning("open failed, falling back to save: %s", result.reason)
            self._set_status(self._catalog.get("msg.save_file", self._file.absolute_path))
            self.state = FlowState.SAVING_FALLBACK
            self._save()
        else:
            raise TypeError(f"unexpected open result: {result!r}")

    def _save(self) -> None:
        result = self._choose_destination(self._file.name)

        if isinstance(result, SaveApproved):
            dst = result.path
            try:
                size = self._copier(self._file.path, dst)
            except OSError as e:
                logger.warning("copy to %s failed: %s", dst, e)
                self.state = FlowState.SAVE_ERROR
                self._set_status(str(e))
                return
            logger.info("saved %d bytes to %s", size, dst)
            self.state = FlowState.SAVED
            self._set_status(self._catalog.get("msg.saved_file", Path(dst).absolute()))
        elif isinstance(result, SaveCancelled):
            self.state = FlowState.SAVE_CANCELLED
            self._set_status(self._catalog.get("msg.cancel_save_dialog"))
        elif isinstance(result, SaveDialogError):
            logger.warning("save dialog error: %s", result.reason)
            self.state = FlowState.SAVE_ERROR
            self._set_status(self._catalog.get("msg.error_save_file"))
        else:
            raise TypeError(f"unexpected save dialog result: {result!r}")
