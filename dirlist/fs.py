"""
文件系统侧：目录枚举、元数据获取（Fetcher）、条目收集（Collector）及身份/终端宽度查询。

元数据一律用 lstat 获取，符号链接报告为链接本身而非其目标。
"""

from __future__ import annotations

import grp
import os
import pwd
import shutil
import stat
from functools import lru_cache
from typing import Callable

from dirlist.models import (
    DirectoryEntry,
    DirectoryUnavailable,
    EntryKind,
    MetadataUnavailable,
)

# 终端宽度不可得时的默认列数
DEFAULT_CONSOLE_WIDTH = 80


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def list_entries(path: str) -> list[str]:
    """
    枚举目录下的名字，与 readdir 一致包含 "." 和 ".."。

    :raises DirectoryUnavailable: 目录无法打开或读取
    """
    try:
        names = os.listdir(path)
    except OSError as e:
        raise DirectoryUnavailable(path, _reason(e)) from e
    return [".", ".."] + names


def stat_entry(path: str, name: str | None = None) -> DirectoryEntry:
    """
    获取单个路径的元数据（不跟随符号链接）。

    :param path: 完整路径
    :param name: 展示用名字，默认取 path 的基本名
    :raises MetadataUnavailable: lstat 失败
    """
    try:
        st = os.lstat(path)
    except OSError as e:
        raise MetadataUnavailable(path, _reason(e)) from e
    return DirectoryEntry(
        name=name or os.path.basename(path.rstrip("/")) or path,
        path=path,
        kind=EntryKind.from_mode(st.st_mode),
        permissions=stat.S_IMODE(st.st_mode) & 0o777,
        link_count=st.st_nlink,
        owner_id=st.st_uid,
        group_id=st.st_gid,
        size=st.st_size,
        mtime=st.st_mtime,
    )


def collect_entries(
    path: str,
    show_hidden: bool,
    *,
    on_error: Callable[[MetadataUnavailable], None] | None = None,
    lister: Callable[[str], list[str]] = list_entries,
    fetcher: Callable[..., DirectoryEntry] = stat_entry,
) -> list[DirectoryEntry]:
    """
    收集目录下各条目的元数据，返回未排序列表。

    show_hidden 为 False 时以 "." 开头的名字直接跳过（不做 stat）。
    单个条目 stat 失败时立即回调 on_error(err) 并跳过该条目，继续处理其余条目。

    :raises DirectoryUnavailable: 目录本身无法枚举
    """
    entries: list[DirectoryEntry] = []
    for name in lister(path):
        if not name:
            continue
        if not show_hidden and name.startswith("."):
            continue
        try:
            entries.append(fetcher(os.path.join(path, name), name))
        except MetadataUnavailable as err:
            if on_error is not None:
                on_error(err)
    return entries


@lru_cache(maxsize=None)
def owner_name(uid: int) -> str | None:
    """uid -> 用户名；无映射时返回 None。"""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return None


@lru_cache(maxsize=None)
def group_name(gid: int) -> str | None:
    """gid -> 组名；无映射时返回 None。"""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return None


def console_width() -> int:
    """终端列数；不可得时为 80（与 shutil.get_terminal_size 一样优先读取 COLUMNS）。"""
    columns = shutil.get_terminal_size((DEFAULT_CONSOLE_WIDTH, 24)).columns
    return columns if columns > 0 else DEFAULT_CONSOLE_WIDTH
