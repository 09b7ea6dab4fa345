# src/file_launcher/services/path_resolver.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from file_launcher.launch_params import is_blank
from file_launcher.services.messages import MessageCatalog

logger = logging.getLogger(__name__)

_FILE_SCHEME = re.compile(r"file:/+")


class ResolveError(Enum):
    NO_URI = "msg.no_uri"
    NOT_FOUND = "msg.not_found"


@dataclass(frozen=True)
class ResolvedFile:
    path: Path
    exists: bool = True

    @property
    def absolute_path(self) -> Path:
        return self.path.absolute()

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class Resolution:
    status: str
    file: ResolvedFile | None = None
    error: ResolveError | None = None

    @property
    def ok(self) -> bool:
        return self.file is not None


def uri_to_path(uri: str) -> str:
    """
    file: URI をローカルパス文字列にする。
    - "file:/C:/docs/a.txt"    -> "C:/docs/a.txt"  (ドライブレター)
    - "file:/home/user/a.txt"  -> "/home/user/a.txt"
    - "/home/user/a.txt"       -> そのまま
    """
    path = _FILE_SCHEME.sub("", uri, count=1)
    pos_colon = path.find(":")
    pos_slash = path.find("/")
    if 0 < pos_colon < pos_slash:
        # ex. c:/...
        return path
    return uri.replace("file:", "")


def resolve_uri(uri: str | None, catalog: MessageCatalog) -> Resolution:
    if is_blank(uri):
        return Resolution(status=catalog.get("msg.no_uri"), error=ResolveError.NO_URI)

    target = Path(uri_to_path(uri))
    if not target.exists():
        logger.info("file not found: %s", target.absolute())
        return Resolution(
            status=catalog.get("msg.not_found", target.absolute()),
            error=ResolveError.NOT_FOUND,
        )

    resolved = ResolvedFile(path=target, exists=True)
    logger.info("resolved %s -> %s", uri, resolved.absolute_path)
    return Resolution(status=catalog.get("msg.open_file", resolved.absolute_path), file=resolved)
