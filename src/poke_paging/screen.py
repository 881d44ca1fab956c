"""一覧画面: データソースとアダプターの結線"""

from __future__ import annotations

import structlog

from .adapter import ListRenderer, PagedListAdapter
from .client import PokemonSource
from .config import AppConfig
from .data_source import LoadResult, PageKeyedDataSource
from .diff import DiffResult
from .http_client import HttpPokemonSource
from .logger import new_logger

logger = structlog.get_logger(__name__)


class PokemonListScreen:
    """ページが届くたびにデータソースのスナップショットをアダプターへ反映する画面。"""

    def __init__(self, data_source: PageKeyedDataSource, adapter: PagedListAdapter) -> None:
        self._data_source = data_source
        self._adapter = adapter

    @property
    def data_source(self) -> PageKeyedDataSource:
        return self._data_source

    @property
    def adapter(self) -> PagedListAdapter:
        return self._adapter

    def _submit(self) -> DiffResult:
        return self._adapter.submit_list(self._data_source.snapshot().items)

    async def start(self) -> LoadResult:
        """先頭ページを読み込んで表示する。"""
        result = await self._data_source.load_initial()
        if result.ok:
            self._submit()
        else:
            logger.warning("initial load did not complete", status=result.status.value)
        return result

    async def on_scrolled(self, position: int) -> list[LoadResult]:
        """表示位置の周辺を先読みし、読み込めた分を表示に反映する。"""
        results = await self._data_source.load_around(position)
        if any(r.ok for r in results):
            self._submit()
        return results

    async def refresh(self) -> LoadResult:
        """読み込み済みデータを破棄して先頭から読み直す。"""
        self._data_source.invalidate()
        return await self.start()


def create_screen(
    config: AppConfig | None = None,
    source: PokemonSource | None = None,
    renderer: ListRenderer | None = None,
) -> PokemonListScreen:
    """設定から画面を組み立てる。

    ログ設定 (config.log) をここで適用する。source を渡すと HTTP ソースの代わりに使う。
    """
    config = config or AppConfig()
    app_logger = new_logger(level=config.log.level, format=config.log.format)
    if source is None:
        source = HttpPokemonSource(config.source_config())
    data_source = PageKeyedDataSource(source, config.paging_config())
    app_logger.info(
        "screen created",
        source=type(source).__name__,
        prefetch_distance=data_source.config.prefetch_distance,
    )
    return PokemonListScreen(data_source, PagedListAdapter(renderer=renderer))
