# src/file_launcher/ui/launcher_window.py
from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSlot
from PyQt6.QtWidgets import QLabel, QMainWindow

from file_launcher.services.messages import MessageCatalog
from file_launcher.services.status import StatusBoard


class LauncherWindow(QMainWindow):
    def __init__(self, catalog: MessageCatalog, board: StatusBoard | None = None) -> None:
        super().__init__()
        self.setWindowTitle(catalog.get("window.title") if "window.title" in catalog else "file-launcher")

        self._board = board if board is not None else StatusBoard()

        self._lbl_status = QLabel(self)
        self._lbl_status.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        self._lbl_status.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self._lbl_status.setMargin(8)
        self._lbl_status.setMinimumWidth(480)
        self.setCentralWidget(self._lbl_status)

        # 起動直後の表示（未設定なら空文字）
        self._lbl_status.setText(self._board.get())

    @pyqtSlot(str)
    def show_status(self, text: str) -> None:
        # StatusBoard への書き込みはワーカーだけが行う
        self._lbl_status.setText(text or "")

    def status_text(self) -> str:
        return self._lbl_status.text()
