# src/file_launcher/ui/dialogs.py
"""
ワーカースレッドから GUI スレッドのダイアログを呼ぶための橋渡し。
Qt のウィジェットは GUI スレッドでしか触れないため、
BlockingQueuedConnection で GUI スレッドに処理を渡し、結果を待って返す。
"""
from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QObject, QThread, Qt, pyqtSignal, pyqtSlot
from PyQt6.QtWidgets import QFileDialog, QMessageBox, QWidget

from file_launcher.outcomes import SaveApproved, SaveCancelled, SaveDialogError, SaveDialogResult
from file_launcher.services.messages import MessageCatalog

logger = logging.getLogger(__name__)


class DialogBridge(QObject):
    _sig_ask_open = pyqtSignal()
    _sig_choose_destination = pyqtSignal(str)

    def __init__(self, catalog: MessageCatalog, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._catalog = catalog
        self._dialog_parent = parent

        self._answer = False
        self._choice: SaveDialogResult = SaveCancelled()

        blocking = Qt.ConnectionType.BlockingQueuedConnection
        self._sig_ask_open.connect(self._on_ask_open, type=blocking)
        self._sig_choose_destination.connect(self._on_choose_destination, type=blocking)

    # ---- worker thread side ----

    def ask_open(self) -> bool:
        if self._on_gui_thread():
            self._on_ask_open()
        else:
            self._sig_ask_open.emit()
        return self._answer

    def choose_destination(self, suggested_name: str) -> SaveDialogResult:
        if self._on_gui_thread():
            self._on_choose_destination(suggested_name)
        else:
            self._sig_choose_destination.emit(suggested_name)
        return self._choice

    def _on_gui_thread(self) -> bool:
        # 同一スレッドで BlockingQueuedConnection を使うとデッドロックする
        return QThread.currentThread() == self.thread()

    # ---- GUI thread side ----

    @pyqtSlot()
    def _on_ask_open(self) -> None:
        ret = QMessageBox.question(
            self._dialog_parent,
            self._catalog.get("dialog.title"),
            self._catalog.get("dialog.message"),
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.Yes,
        )
        # 閉じるボタン／Esc は No 扱い
        self._answer = ret == QMessageBox.StandardButton.Yes

    @pyqtSlot(str)
    def _on_choose_destination(self, suggested_name: str) -> None:
        try:
            path, _ = QFileDialog.getSaveFileName(self._dialog_parent, "", suggested_name)
        except Exception as e:
            logger.exception("save dialog failed")
            self._choice = SaveDialogError(str(e))
            return
        if not path:
            self._choice = SaveCancelled()
            return
        self._choice = SaveApproved(Path(path))
