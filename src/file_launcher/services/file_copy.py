# src/file_launcher/services/file_copy.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

BUFFER_SIZE = 1024 * 8


def _close_quietly(stream: BinaryIO | None) -> None:
    if stream is None:
        return
    try:
        stream.close()
    except OSError as e:
        logger.debug("ignored close error: %s", e)


def copy_file(src: Path, dst: Path, buffer_size: int = BUFFER_SIZE) -> int:
    """
    src を dst へバイト単位でコピーし、書き込んだバイト数を返す。
    入出力ストリームは成功・失敗にかかわらず必ず閉じる（close 時の例外は無視）。
    """
    buf = bytearray(buffer_size)
    view = memoryview(buf)
    total = 0
    fin: BinaryIO | None = None
    fout: BinaryIO | None = None
    try:
        fin = open(src, "rb")
        fout = open(dst, "wb")
        while True:
            n = fin.readinto(buf)
            if not n:
                break
            fout.write(view[:n])
            total += n
        fout.flush()
    finally:
        _close_quietly(fin)
        _close_quietly(fout)
    return total
