"""
输出格式：长格式（每条目一行）与按终端宽度自适应的多列格式（列优先填充）。
"""

from __future__ import annotations

import time
from typing import Sequence

from dirlist.fs import group_name, owner_name
from dirlist.models import DirectoryEntry, EntryKind, ListingOptions

# 属主/属组无法解析时的占位
UNKNOWN_IDENTITY = "unknown"

# 列间距
COLUMN_GUTTER = 2

_TYPE_GLYPHS = {
    EntryKind.DIRECTORY: "d",
    EntryKind.SYMLINK: "l",
    EntryKind.CHAR_DEVICE: "c",
    EntryKind.BLOCK_DEVICE: "b",
    EntryKind.FIFO: "p",
    EntryKind.SOCKET: "s",
}


def format_permissions(kind: EntryKind, permissions: int) -> str:
    """10 位权限串，如 -rw-r--r--、drwxr-xr-x。"""
    chars = [_TYPE_GLYPHS.get(kind, "-")]
    for shift in (6, 3, 0):
        triad = (permissions >> shift) & 0o7
        chars.append("r" if triad & 0o4 else "-")
        chars.append("w" if triad & 0o2 else "-")
        chars.append("x" if triad & 0o1 else "-")
    return "".join(chars)


def format_mtime(mtime: float) -> str:
    """本地时区 "月 日 时:分"，如 Jan 05 13:07。"""
    return time.strftime("%b %d %H:%M", time.localtime(mtime))


def format_long_line(entry: DirectoryEntry) -> str:
    """长格式一行；只使用条目上已有的元数据，不再访问文件系统。"""
    owner = owner_name(entry.owner_id) or UNKNOWN_IDENTITY
    group = group_name(entry.group_id) or UNKNOWN_IDENTITY
    return (
        f"{format_permissions(entry.kind, entry.permissions)} "
        f"{entry.link_count:>2} "
        f"{owner:<8} "
        f"{group:<8} "
        f"{entry.size:>8} "
        f"{format_mtime(entry.mtime)} "
        f"{entry.name}"
    )


def column_geometry(names: Sequence[str], width: int) -> tuple[int, int, int]:
    """
    计算多列布局：(col_width, cols, rows)。

    col_width = 最长名字 + 2，cols = max(1, width // col_width)，rows = ceil(n / cols)。
    """
    max_len = max((len(n) for n in names), default=0)
    col_width = max_len + COLUMN_GUTTER
    cols = max(1, width // col_width)
    rows = (len(names) + cols - 1) // cols
    return col_width, cols, rows


def layout_columns(names: Sequence[str], width: int) -> list[str]:
    """
    列优先填充：第 c 列第 r 行为 names[c * rows + r]。

    每格左对齐补齐到 col_width；最后一行越界的格子直接跳过。无条目时不输出任何行。
    """
    if not names:
        return []
    col_width, cols, rows = column_geometry(names, width)
    lines: list[str] = []
    for r in range(rows):
        cells = []
        for c in range(cols):
            i = c * rows + r
            if i < len(names):
                cells.append(names[i].ljust(col_width))
        lines.append("".join(cells))
    return lines


def render_listing(entries: Sequence[DirectoryEntry], options: ListingOptions, width: int) -> list[str]:
    """按 options.long_form 选择长格式或多列格式，返回输出行。"""
    if options.long_form:
        return [format_long_line(e) for e in entries]
    return layout_columns([e.name for e in entries], width)
