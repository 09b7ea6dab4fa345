# src/file_launcher/core.py
"""
プロジェクトの中核ロジック。
起動パラメータの uri を解決し、ウィンドウとワーカーを起動する。
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping

from PyQt6.QtCore import QLocale
from PyQt6.QtWidgets import QApplication

from file_launcher.launch_params import URI_PARAM, get_request_parameter, parse_launch_parameters
from file_launcher.logging_setup import setup_logging
from file_launcher.services.desktop_open import DesktopOpener
from file_launcher.services.messages import MessageCatalog
from file_launcher.services.path_resolver import resolve_uri
from file_launcher.services.status import StatusBoard
from file_launcher.ui.dialogs import DialogBridge
from file_launcher.ui.launcher_window import LauncherWindow
from file_launcher.ui.worker import LaunchWorker

logger = logging.getLogger(__name__)


def create_launcher(params: Mapping[str, str]) -> tuple[LauncherWindow, LaunchWorker | None]:
    """
    ウィンドウと（uri が解決できた場合のみ）未開始のワーカーを作る。
    QApplication は呼び出し側で用意しておくこと。
    """
    locale_name = get_request_parameter(params, "locale") or QLocale.system().name()
    catalog = MessageCatalog.load(locale_name)

    resolution = resolve_uri(get_request_parameter(params, URI_PARAM), catalog)
    board = StatusBoard(resolution.status)

    win = LauncherWindow(catalog, board)
    if not resolution.ok:
        logger.info("nothing to launch: %s", resolution.status)
        return win, None

    bridge = DialogBridge(catalog, parent=win)
    worker = LaunchWorker(resolution.file, catalog, DesktopOpener(), bridge, board, parent=win)
    worker.sig_status.connect(win.show_status)
    return win, worker


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv if argv is None else argv)
    # 起動引数: uri=... または最初の引数を uri とみなす
    # 例: file-launcher file:/C:/docs/report.pdf locale=ja_JP
    params = parse_launch_parameters(argv[1:])
    setup_logging(get_request_parameter(params, "log_level") or logging.INFO)

    app = QApplication.instance() or QApplication(argv)

    win, worker = create_launcher(params)
    win.show()

    if worker is not None:
        app.aboutToQuit.connect(lambda: worker.wait())
        worker.start()

    sys.exit(app.exec())
