"""InMemoryPokemonSource 実装"""

from __future__ import annotations

from collections.abc import Iterable

from .client import PokemonSource
from .models import DEFAULT_BASE_URL, Item, PageEnvelope, PageParams


class InMemoryPokemonSource(PokemonSource):
    """テスト用インメモリソース。PokeAPI と同じ形式のカーソルを返す。

    initial_offset を指定すると先頭ページをリストの途中から返す。
    """

    def __init__(
        self,
        items: Iterable[Item],
        default_limit: int = 20,
        base_url: str = DEFAULT_BASE_URL,
        initial_offset: int = 0,
    ) -> None:
        self._items: list[Item] = list(items)
        self._default_limit = default_limit
        self._initial_offset = initial_offset
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._pending_error: Exception | None = None
        self.requests: list[PageParams | None] = []

    def fail_next(self, error: Exception) -> None:
        """次の 1 回の呼び出しで error を送出させる。"""
        self._pending_error = error

    def _cursor(self, offset: int, limit: int) -> str:
        return f"{self._base_url}pokemon/?offset={offset}&limit={limit}"

    async def list_pokemons(self, params: PageParams | None = None) -> PageEnvelope:
        self.requests.append(params)
        if self._pending_error is not None:
            error, self._pending_error = self._pending_error, None
            raise error

        if params is None:
            offset, limit = self._initial_offset, self._default_limit
        else:
            offset, limit = int(params.offset), int(params.limit)

        total = len(self._items)
        previous: str | None = None
        if offset > 0:
            # 先頭をまたぐ場合は重複しないよう limit を詰める
            prev_offset = max(0, offset - limit)
            previous = self._cursor(prev_offset, min(limit, offset - prev_offset))
        next_: str | None = None
        if offset + limit < total:
            next_ = self._cursor(offset + limit, limit)

        return PageEnvelope(
            count=total,
            previous=previous,
            next=next_,
            results=tuple(self._items[offset : offset + limit]),
        )
