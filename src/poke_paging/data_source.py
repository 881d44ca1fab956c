"""PageKeyedDataSource: カーソルをキーにしたページ読み込みの状態機械"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum

import structlog

from .client import PokemonSource
from .cursor import is_terminal, resolve_page_params
from .exceptions import PagingError, PagingStateError
from .models import Item, PageEnvelope, PageParams, PagingConfig

logger = structlog.get_logger(__name__)


class PagingState(Enum):
    """データソースの状態。"""

    INITIAL = "initial"
    LOADING_INITIAL = "loading_initial"
    LOADED = "loaded"
    LOADING_BEFORE = "loading_before"
    LOADING_AFTER = "loading_after"


class LoadDirection(Enum):
    """読み込み方向。"""

    INITIAL = "initial"
    BEFORE = "before"
    AFTER = "after"


class LoadStatus(Enum):
    """1 回の読み込みの結果種別。"""

    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED_TERMINAL = "skipped_terminal"
    SKIPPED_IN_FLIGHT = "skipped_in_flight"
    INVALIDATED = "invalidated"


@dataclass(frozen=True)
class PagedList:
    """読み込み済みアイテムと前後カーソルのスナップショット。"""

    items: tuple[Item, ...] = ()
    previous: str | None = None
    next: str | None = None
    count: int = 0

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class LoadResult:
    """1 回の読み込みの結果。"""

    direction: LoadDirection
    status: LoadStatus
    items: tuple[Item, ...] = ()
    error: PagingError | None = None

    @property
    def ok(self) -> bool:
        return self.status == LoadStatus.SUCCESS


class PageKeyedDataSource:
    """前後カーソルでページを読み込み、読み込み済みリストを保持するデータソース。

    失敗時は直前の LOADED スナップショットを保持したまま、エラーを LoadResult で返す。
    同一方向の読み込みは同時に 1 件まで。
    """

    def __init__(self, source: PokemonSource, config: PagingConfig | None = None) -> None:
        self._source = source
        self._config = config or PagingConfig()
        self._snapshot: PagedList | None = None
        self._in_flight: set[LoadDirection] = set()
        self._generation = 0

    @property
    def source(self) -> PokemonSource:
        return self._source

    @property
    def config(self) -> PagingConfig:
        return self._config

    @property
    def state(self) -> PagingState:
        if LoadDirection.INITIAL in self._in_flight:
            return PagingState.LOADING_INITIAL
        if self._snapshot is None:
            return PagingState.INITIAL
        if LoadDirection.BEFORE in self._in_flight:
            return PagingState.LOADING_BEFORE
        if LoadDirection.AFTER in self._in_flight:
            return PagingState.LOADING_AFTER
        return PagingState.LOADED

    def snapshot(self) -> PagedList:
        """現在のスナップショットを返す。未読み込みなら空のリスト。"""
        return self._snapshot if self._snapshot is not None else PagedList()

    def invalidate(self) -> None:
        """読み込み済みデータを破棄して INITIAL に戻す。実行中の読み込み結果は捨てられる。"""
        self._generation += 1
        self._snapshot = None
        self._in_flight.clear()
        logger.info("data source invalidated", generation=self._generation)

    async def load_initial(self) -> LoadResult:
        """先頭ページを読み込む。"""
        direction = LoadDirection.INITIAL
        if direction in self._in_flight:
            return LoadResult(direction, LoadStatus.SKIPPED_IN_FLIGHT)
        result = await self._fetch(direction, None, self._config.initial_load_size_hint)
        if isinstance(result, LoadResult):
            return result
        self._snapshot = PagedList(
            items=result.results,
            previous=result.previous,
            next=result.next,
            count=result.count,
        )
        return LoadResult(direction, LoadStatus.SUCCESS, items=result.results)

    async def load_before(self, cursor: str | None = None) -> LoadResult:
        """前のページを読み込んで先頭に追加する。cursor 省略時は保持中の previous を使う。"""
        return await self._load_adjacent(LoadDirection.BEFORE, cursor)

    async def load_after(self, cursor: str | None = None) -> LoadResult:
        """次のページを読み込んで末尾に追加する。cursor 省略時は保持中の next を使う。"""
        return await self._load_adjacent(LoadDirection.AFTER, cursor)

    async def load_around(self, position: int) -> list[LoadResult]:
        """position が端から prefetch_distance 以内なら隣接ページを先読みする。

        Returns:
            実際に発行した読み込みの結果（終端でスキップしたものは含まない）
        """
        snap = self._require_loaded()
        distance = self._config.prefetch_distance
        loads = []
        if position < distance and not is_terminal(snap.previous):
            loads.append(self.load_before())
        if position >= len(snap.items) - distance and not is_terminal(snap.next):
            loads.append(self.load_after())
        if not loads:
            return []
        return list(await asyncio.gather(*loads))

    def _require_loaded(self) -> PagedList:
        if self._snapshot is None:
            raise PagingStateError("load_initial must succeed before loading adjacent pages")
        return self._snapshot

    async def _load_adjacent(self, direction: LoadDirection, cursor: str | None) -> LoadResult:
        snap = self._require_loaded()
        if cursor is None:
            cursor = snap.previous if direction == LoadDirection.BEFORE else snap.next
        if is_terminal(cursor):
            return LoadResult(direction, LoadStatus.SKIPPED_TERMINAL)
        if direction in self._in_flight:
            return LoadResult(direction, LoadStatus.SKIPPED_IN_FLIGHT)

        try:
            params = resolve_page_params(cursor)
        except PagingError as e:
            logger.warning("cursor rejected", direction=direction.value, error=str(e))
            return LoadResult(direction, LoadStatus.FAILED, error=e)

        result = await self._fetch(direction, params, self._config.page_size)
        if isinstance(result, LoadResult):
            return result

        # 反対方向の読み込みが先に反映されている場合があるので最新のスナップショットに連結する
        current = self._require_loaded()
        if direction == LoadDirection.BEFORE:
            self._snapshot = PagedList(
                items=result.results + current.items,
                previous=result.previous,
                next=current.next,
                count=result.count,
            )
        else:
            self._snapshot = PagedList(
                items=current.items + result.results,
                previous=current.previous,
                next=result.next,
                count=result.count,
            )
        return LoadResult(direction, LoadStatus.SUCCESS, items=result.results)

    async def _fetch(
        self,
        direction: LoadDirection,
        params: PageParams | None,
        requested_load_size: int,
    ) -> PageEnvelope | LoadResult:
        """ソースから 1 ページ取得する。失敗・無効化時は LoadResult を返す。"""
        generation = self._generation
        log = logger.bind(
            direction=direction.value,
            requested_load_size=requested_load_size,
            **(params.to_query() if params is not None else {}),
        )
        self._in_flight.add(direction)
        try:
            envelope = await self._source.list_pokemons(params)
        except PagingError as e:
            log.warning("page load failed", error=str(e))
            return LoadResult(direction, LoadStatus.FAILED, error=e)
        finally:
            if generation == self._generation:
                self._in_flight.discard(direction)

        if generation != self._generation:
            log.info("discarding page loaded before invalidation")
            return LoadResult(direction, LoadStatus.INVALIDATED)
        log.info("page loaded", size=len(envelope.results), count=envelope.count)
        return envelope
