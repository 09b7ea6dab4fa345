# tests/conftest.py
import os
from pathlib import Path

import pytest

# Qt はディスプレイ無しで動かす
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from file_launcher.services.messages import MessageCatalog  # noqa: E402
from file_launcher.services.path_resolver import ResolvedFile  # noqa: E402


@pytest.fixture
def catalog() -> MessageCatalog:
    return MessageCatalog.load("en_US")


@pytest.fixture
def source_file(tmp_path: Path) -> ResolvedFile:
    p = tmp_path / "report.pdf"
    p.write_bytes(b"%PDF-1.4 dummy")
    return ResolvedFile(path=p, exists=True)


@pytest.fixture(scope="session")
def qapp():
    qtwidgets = pytest.importorskip("PyQt6.QtWidgets")
    app = qtwidgets.QApplication.instance() or qtwidgets.QApplication([])
    yield app
