"""表示層向けのリスト差分計算"""

from __future__ import annotations

import bisect
from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from .models import Item


class ItemDiffCallback:
    """アイテムの同一性と内容の比較。

    同一性は identity() の戻り値だけで決まる。比較規則を変える場合は
    identity() と are_contents_the_same() をオーバーライドする。
    """

    def identity(self, item: Item) -> Hashable:
        return item.url

    def are_items_the_same(self, old: Item, new: Item) -> bool:
        return self.identity(old) == self.identity(new)

    def are_contents_the_same(self, old: Item, new: Item) -> bool:
        return self.are_items_the_same(old, new) and old.name == new.name


@dataclass(frozen=True)
class DiffResult:
    """旧リストを新リストにするための変更。

    removed: 旧リスト上の位置
    inserted: 新リスト上の位置
    changed: 同一性は保ったまま内容が変わったアイテムの新リスト上の位置
    moved: 相対順序が変わったアイテムの (旧位置, 新位置)
    """

    removed: tuple[int, ...] = ()
    inserted: tuple[int, ...] = ()
    changed: tuple[int, ...] = ()
    moved: tuple[tuple[int, int], ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.removed or self.inserted or self.changed or self.moved)


def _first_positions(items: Sequence[Item], callback: ItemDiffCallback) -> dict[Hashable, int]:
    positions: dict[Hashable, int] = {}
    for idx, item in enumerate(items):
        positions.setdefault(callback.identity(item), idx)
    return positions


def _longest_increasing(values: list[int]) -> set[int]:
    """values の最長狭義増加部分列を 1 つ選び、その添字集合を返す。"""
    tails: list[int] = []
    tail_idx: list[int] = []
    parent: list[int] = [-1] * len(values)
    for i, v in enumerate(values):
        pos = bisect.bisect_left(tails, v)
        if pos == len(tails):
            tails.append(v)
            tail_idx.append(i)
        else:
            tails[pos] = v
            tail_idx[pos] = i
        parent[i] = tail_idx[pos - 1] if pos > 0 else -1

    keep: set[int] = set()
    i = tail_idx[-1] if tail_idx else -1
    while i >= 0:
        keep.add(i)
        i = parent[i]
    return keep


def calculate_diff(
    old: Sequence[Item],
    new: Sequence[Item],
    callback: ItemDiffCallback | None = None,
) -> DiffResult:
    """2 つの全体リストを同一性と内容で比較する。

    同一性ごとに最初の出現だけを対応付け、後続の重複は削除 / 挿入として扱う。
    """
    callback = callback or ItemDiffCallback()
    old_pos = _first_positions(old, callback)
    new_pos = _first_positions(new, callback)

    removed = tuple(
        i
        for i, item in enumerate(old)
        if old_pos[callback.identity(item)] != i or callback.identity(item) not in new_pos
    )
    inserted = tuple(
        j
        for j, item in enumerate(new)
        if new_pos[callback.identity(item)] != j or callback.identity(item) not in old_pos
    )

    # 新リスト順の対応ペア
    pairs = [
        (old_pos[key], j)
        for j, item in enumerate(new)
        if (key := callback.identity(item)) in old_pos and new_pos[key] == j
    ]
    changed = tuple(
        j for i, j in pairs if not callback.are_contents_the_same(old[i], new[j])
    )
    stable = _longest_increasing([i for i, _ in pairs])
    moved = tuple(pair for k, pair in enumerate(pairs) if k not in stable)

    return DiffResult(removed=removed, inserted=inserted, changed=changed, moved=moved)
