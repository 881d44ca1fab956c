"""ページングのデータモデル"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .exceptions import MalformedResponseError, PagingConfigError

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2/"


def _require_str(data: dict[str, Any], key: str, context: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise MalformedResponseError(f"{context}: field '{key}' must be a string")
    return value


def _optional_cursor(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise MalformedResponseError(f"envelope: field '{key}' must be a string or null")
    return value


@dataclass(frozen=True)
class Item:
    """一覧の 1 行。url が識別子、name が表示内容。"""

    url: str
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> Item:
        """API レスポンスの results 要素から Item を生成する。"""
        if not isinstance(data, dict):
            raise MalformedResponseError("item: expected a JSON object")
        return cls(
            url=_require_str(data, "url", "item"),
            name=_require_str(data, "name", "item"),
        )


@dataclass(frozen=True)
class PageEnvelope:
    """1 ページ分のレスポンス封筒。"""

    count: int
    previous: str | None
    next: str | None
    results: tuple[Item, ...]

    @classmethod
    def from_dict(cls, data: Any) -> PageEnvelope:
        """API レスポンス辞書から PageEnvelope を生成する。

        previous / next が欠落・null・空文字の場合は None（終端）として扱う。
        """
        if not isinstance(data, dict):
            raise MalformedResponseError("envelope: expected a JSON object")
        count = data.get("count")
        if not isinstance(count, int) or isinstance(count, bool):
            raise MalformedResponseError("envelope: field 'count' must be an integer")
        results = data.get("results")
        if not isinstance(results, list):
            raise MalformedResponseError("envelope: field 'results' must be a list")
        return cls(
            count=count,
            previous=_optional_cursor(data, "previous"),
            next=_optional_cursor(data, "next"),
            results=tuple(Item.from_dict(r) for r in results),
        )


@dataclass(frozen=True)
class PageParams:
    """1 ページ分のリクエストパラメータ（文字列エンコードされた offset / limit）。"""

    offset: str
    limit: str

    def to_query(self) -> dict[str, str]:
        return {"offset": self.offset, "limit": self.limit}


@dataclass
class SourceConfig:
    """リモートソース設定。"""

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    user_agent: str = "poke-paging/0.1.0"


@dataclass
class PagingConfig:
    """ページング定数。"""

    initial_load_size_hint: int = 20
    page_size: int = 20
    prefetch_distance: int = 10

    def __post_init__(self) -> None:
        if self.initial_load_size_hint < 1:
            raise PagingConfigError(
                f"initial_load_size_hint must be >= 1: {self.initial_load_size_hint}"
            )
        if self.page_size < 1:
            raise PagingConfigError(f"page_size must be >= 1: {self.page_size}")
        if self.prefetch_distance < 0:
            raise PagingConfigError(
                f"prefetch_distance must be >= 0: {self.prefetch_distance}"
            )
