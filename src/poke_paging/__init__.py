"""poke_paging library."""

from .adapter import ListRenderer, PagedListAdapter
from .client import PokemonSource
from .config import AppConfig, load
from .cursor import is_terminal, parse_cursor, resolve_page_params
from .data_source import (
    LoadDirection,
    LoadResult,
    LoadStatus,
    PagedList,
    PageKeyedDataSource,
    PagingState,
)
from .diff import DiffResult, ItemDiffCallback, calculate_diff
from .exceptions import (
    ConfigError,
    ConfigErrorCodes,
    MalformedCursorError,
    MalformedResponseError,
    PagingConfigError,
    PagingError,
    PagingErrorCodes,
    PagingStateError,
    TransportError,
)
from .http_client import HttpPokemonSource
from .logger import new_logger
from .memory import InMemoryPokemonSource
from .models import Item, PageEnvelope, PageParams, PagingConfig, SourceConfig
from .screen import PokemonListScreen, create_screen

__all__ = [
    "AppConfig",
    "ConfigError",
    "ConfigErrorCodes",
    "DiffResult",
    "HttpPokemonSource",
    "InMemoryPokemonSource",
    "Item",
    "ItemDiffCallback",
    "ListRenderer",
    "LoadDirection",
    "LoadResult",
    "LoadStatus",
    "MalformedCursorError",
    "MalformedResponseError",
    "PageEnvelope",
    "PageKeyedDataSource",
    "PageParams",
    "PagedList",
    "PagedListAdapter",
    "PagingConfig",
    "PagingConfigError",
    "PagingError",
    "PagingErrorCodes",
    "PagingState",
    "PagingStateError",
    "PokemonListScreen",
    "PokemonSource",
    "SourceConfig",
    "TransportError",
    "calculate_diff",
    "create_screen",
    "is_terminal",
    "load",
    "new_logger",
    "parse_cursor",
    "resolve_page_params",
]
