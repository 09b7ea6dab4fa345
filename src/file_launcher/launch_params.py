# src/file_launcher/launch_params.py
"""
起動パラメータの解析。
埋め込み元（ブラウザ・スクリプト等）から渡される引数を key=value の辞書にする。
例: file-launcher uri=file:/C:/docs/report.pdf locale=ja_JP
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

URI_PARAM = "uri"

_KEY_VALUE = re.compile(r"^([A-Za-z_][A-Za-z0-9_.]*)=(.*)$", re.DOTALL)


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def parse_launch_parameters(argv: Sequence[str]) -> dict[str, str]:
    """
    argv（プログラム名を除く）を辞書にする。
    key=value 以外の最初の引数は uri として扱う（uri=... の指定が優先）。
    """
    params: dict[str, str] = {}
    bare: str | None = None

    for arg in argv:
        m = _KEY_VALUE.match(arg)
        if m:
            params[m.group(1).lower()] = m.group(2)
        elif bare is None:
            bare = arg

    if bare is not None and URI_PARAM not in params:
        params[URI_PARAM] = bare
    return params


def get_request_parameter(params: Mapping[str, str], key: str) -> str | None:
    value = params.get(key)
    if is_blank(value):
        return None
    return value
