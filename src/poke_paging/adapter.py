"""PagedListAdapter: 差分計算付きのリスト表示アダプター"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .diff import DiffResult, ItemDiffCallback, calculate_diff
from .models import Item


class ListRenderer(Protocol):
    """差分を受け取って表示を更新するプロトコル。"""

    def on_changed(self, diff: DiffResult, items: Sequence[Item]) -> None: ...


class PagedListAdapter:
    """全置換リストを受け取り、差分だけをレンダラーへ通知するアダプター。"""

    def __init__(
        self,
        renderer: ListRenderer | None = None,
        callback: ItemDiffCallback | None = None,
    ) -> None:
        self._renderer = renderer
        self._callback = callback or ItemDiffCallback()
        self._items: tuple[Item, ...] = ()

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    @property
    def item_count(self) -> int:
        return len(self._items)

    def get_item(self, position: int) -> Item:
        return self._items[position]

    def bind(self, position: int) -> str:
        """position の行タイトルを返す。"""
        return self.get_item(position).name

    def submit_list(self, items: Sequence[Item]) -> DiffResult:
        """新しいリスト全体を反映し、計算した差分を返す。

        差分が空の場合はレンダラーを呼ばない。
        """
        new_items = tuple(items)
        diff = calculate_diff(self._items, new_items, self._callback)
        self._items = new_items
        if self._renderer is not None and not diff.is_empty:
            self._renderer.on_changed(diff, new_items)
        return diff
