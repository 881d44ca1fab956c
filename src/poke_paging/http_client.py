"""PokeAPI HTTP クライアント実装"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from .client import PokemonSource
from .exceptions import MalformedResponseError, PagingError, TransportError
from .models import PageEnvelope, PageParams, SourceConfig

logger = structlog.get_logger(__name__)

_LIST_PATH = "pokemon/"


class HttpPokemonSource(PokemonSource):
    """httpx を使った PokeAPI クライアント。"""

    def __init__(self, config: SourceConfig | None = None) -> None:
        self._config = config or SourceConfig()
        self._headers: dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": self._config.user_agent,
        }

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.base_url,
            headers=self._headers,
            timeout=self._config.timeout_seconds,
        )

    def _handle_error(self, resp: httpx.Response, context: str) -> None:
        if not resp.is_success:
            raise TransportError(
                f"{context}: HTTP {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
            )

    def _parse_body(self, resp: httpx.Response, context: str) -> PageEnvelope:
        if not resp.content:
            raise MalformedResponseError(f"{context}: empty response body")
        try:
            data: Any = resp.json()
        except ValueError as e:
            raise MalformedResponseError(f"{context}: body is not JSON", cause=e) from e
        return PageEnvelope.from_dict(data)

    async def list_pokemons(self, params: PageParams | None = None) -> PageEnvelope:
        query = params.to_query() if params is not None else None
        context = (
            "list_pokemons"
            if params is None
            else f"list_pokemons(offset={params.offset}, limit={params.limit})"
        )
        log = logger.bind(path=_LIST_PATH, **(query or {}))
        try:
            async with self._make_client() as client:
                resp = await client.get(_LIST_PATH, params=query)
            self._handle_error(resp, context)
            envelope = self._parse_body(resp, context)
        except PagingError as e:
            log.warning("page request failed", error=str(e))
            raise
        except Exception as e:
            log.warning("page request failed", error=str(e))
            raise TransportError(f"Failed to list pokemons: {e}", cause=e) from e
        log.debug("page received", count=envelope.count, size=len(envelope.results))
        return envelope
