"""
排序：name 升序；time / size 降序（最新 / 最大在前）；主键相同按 name 升序。

reverse 对整个比较结果统一取反，因此反序结果恰好是正序结果的镜像。
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable

from dirlist.models import DirectoryEntry, SortKey


def _cmp(a: Any, b: Any) -> int:
    # 只用关系运算，不做减法
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_entries(a: DirectoryEntry, b: DirectoryEntry, sort_key: SortKey) -> int:
    """返回 -1/0/1，不含 reverse。"""
    if sort_key is SortKey.TIME:
        result = _cmp(b.mtime, a.mtime)
    elif sort_key is SortKey.SIZE:
        result = _cmp(b.size, a.size)
    else:
        result = 0
    if result == 0:
        result = _cmp(a.name, b.name)
    return result


def sort_entries(
    entries: Iterable[DirectoryEntry],
    sort_key: SortKey = SortKey.NAME,
    reverse: bool = False,
) -> list[DirectoryEntry]:
    """返回排好序的新列表。"""
    sign = -1 if reverse else 1

    def _compare(a: DirectoryEntry, b: DirectoryEntry) -> int:
        return sign * compare_entries(a, b, sort_key)

    return sorted(entries, key=cmp_to_key(_compare))
