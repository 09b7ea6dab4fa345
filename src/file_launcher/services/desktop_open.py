# src/file_launcher/services/desktop_open.py
"""
OS の関連付けアプリでファイルを開く。
QDesktopServices を使い、失敗は例外ではなく OpenFailed として返す。
"""
from __future__ import annotations

import logging
import platform
import shutil
from pathlib import Path

from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QDesktopServices, QGuiApplication

from file_launcher.outcomes import Opened, OpenFailed, OpenResult

logger = logging.getLogger(__name__)

HEADLESS_PLATFORMS = ("offscreen", "minimal")


class DesktopOpener:
    def is_supported(self) -> bool:
        if QGuiApplication.instance() is None:
            return False
        if QGuiApplication.platformName() in HEADLESS_PLATFORMS:
            return False
        # Linux/BSD は xdg-open 経由で開くため、無ければ非対応扱い
        if platform.system() not in ("Windows", "Darwin") and shutil.which("xdg-open") is None:
            return False
        return True

    def open(self, path: Path) -> OpenResult:
        target = Path(path).absolute()
        try:
            ok = QDesktopServices.openUrl(QUrl.fromLocalFile(str(target)))
        except Exception as e:
            logger.warning("open failed: %s (%s)", target, e)
            return OpenFailed(target, str(e))
        if not ok:
            logger.warning("no handler accepted %s", target)
            return OpenFailed(target, f"no handler for {target}")
        logger.info("opened %s", target)
        return Opened(target)
