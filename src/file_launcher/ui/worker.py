# src/file_launcher/ui/worker.py
"""
LaunchWorker: 開く／保存のフロー全体を 1 本のスレッドで実行する。
ダイアログやファイル I/O で GUI スレッドを止めないためのもの。
"""
from __future__ import annotations

import logging
from typing import Protocol

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from file_launcher.launch_flow import LaunchFlow, Opener
from file_launcher.outcomes import SaveDialogResult
from file_launcher.services.messages import MessageCatalog
from file_launcher.services.path_resolver import ResolvedFile
from file_launcher.services.status import StatusBoard

logger = logging.getLogger(__name__)


class Dialogs(Protocol):
    def ask_open(self) -> bool: ...

    def choose_destination(self, suggested_name: str) -> SaveDialogResult: ...


class LaunchWorker(QThread):
    # === Signals emitted to the GUI ===
    sig_status = pyqtSignal(str)    # 新しいステータス文字列
    sig_finished = pyqtSignal(str)  # 終了時の FlowState 名

    def __init__(
        self,
        file: ResolvedFile,
        catalog: MessageCatalog,
        opener: Opener,
        dialogs: Dialogs,
        board: StatusBoard | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.board = board if board is not None else StatusBoard()
        self.flow = LaunchFlow(
            file=file,
            catalog=catalog,
            opener=opener,
            confirm=dialogs.ask_open,
            choose_destination=dialogs.choose_destination,
            publish=self._publish,
        )

    def _publish(self, text: str) -> None:
        self.board.set(text)
        self.sig_status.emit(self.board.get())

    def run(self) -> None:
        try:
            state = self.flow.run()
        except Exception as e:
            # 想定外の例外はステータスとして表示する
            logger.exception("launch flow failed")
            self._publish(str(e))
            state = self.flow.state
        logger.info("launch flow finished: %s", state.name)
        self.sig_finished.emit(state.name)
