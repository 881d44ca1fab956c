"""PokemonSource 抽象基底クラス"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import PageEnvelope, PageParams


class PokemonSource(ABC):
    """ポケモン一覧のリモートソース抽象基底クラス。"""

    @abstractmethod
    async def list_pokemons(self, params: PageParams | None = None) -> PageEnvelope:
        """一覧の 1 ページを取得する。

        params が None の場合は先頭ページ、指定時は offset / limit のページを返す。
        失敗時は TransportError または MalformedResponseError を送出する。
        """
        ...
