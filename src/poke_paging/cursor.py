"""ページキー用カーソルの解決

カーソルはページ封筒の previous / next に入っている URL。
例: https://pokeapi.co/api/v2/pokemon/?offset=20&limit=20
"""

from __future__ import annotations

from .exceptions import MalformedCursorError
from .models import PageParams

_QUERY_SEPARATOR = "?"
_PARAM_SEPARATOR = "&"
_KEY_VALUE_SEPARATOR = "="


def is_terminal(cursor: str | None) -> bool:
    """カーソルの方向にページがない（None または空文字）なら True を返す。"""
    return cursor is None or cursor == ""


def parse_cursor(cursor: str) -> dict[str, str]:
    """カーソルのクエリ部分をキーと値の辞書に分解する。

    末尾の空パラメータは捨てる。重複キーは最後の値が残る。値は URL デコードしない。
    """
    idx = cursor.find(_QUERY_SEPARATOR)
    if idx < 0:
        raise MalformedCursorError(cursor, "invalid cursor: missing '?'")
    tokens = cursor[idx + 1 :].split(_PARAM_SEPARATOR)
    while tokens and tokens[-1] == "":
        tokens.pop()

    params: dict[str, str] = {}
    for token in tokens:
        key, sep, value = token.partition(_KEY_VALUE_SEPARATOR)
        if not sep:
            raise MalformedCursorError(cursor, f"invalid cursor: parameter {token!r} has no '='")
        params[key] = value
    return params


def resolve_page_params(cursor: str) -> PageParams:
    """カーソルが指すページを要求するための offset / limit を取り出す。"""
    params = parse_cursor(cursor)
    values: dict[str, str] = {}
    for key in ("offset", "limit"):
        value = params.get(key)
        if value is None:
            raise MalformedCursorError(cursor, f"invalid cursor: missing '{key}'")
        if not (value.isascii() and value.isdigit()):
            raise MalformedCursorError(
                cursor, f"invalid cursor: '{key}' is not a non-negative integer"
            )
        values[key] = value
    return PageParams(offset=values["offset"], limit=values["limit"])
