"""
dirlist 数据模型：条目、排序键、列表选项与错误类型。

- DirectoryEntry：一次列表操作中的单个条目，元数据在收集阶段一次性取得，渲染时直接复用。
- ListingOptions：显式传递的不可变选项（不使用进程级全局标志）。
- 错误按最小工作单元划分：目录打不开只影响该参数，单个条目取不到元数据只影响该条目。
"""

from __future__ import annotations

import stat
from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    CHAR_DEVICE = "char-device"
    BLOCK_DEVICE = "block-device"
    FIFO = "fifo"
    SOCKET = "socket"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: int) -> EntryKind:
        """由 st_mode 推断条目类型。"""
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISCHR(mode):
            return cls.CHAR_DEVICE
        if stat.S_ISBLK(mode):
            return cls.BLOCK_DEVICE
        if stat.S_ISFIFO(mode):
            return cls.FIFO
        if stat.S_ISSOCK(mode):
            return cls.SOCKET
        if stat.S_ISREG(mode):
            return cls.REGULAR
        return cls.UNKNOWN


class SortKey(Enum):
    NAME = "name"
    TIME = "time"
    SIZE = "size"


@dataclass(frozen=True)
class DirectoryEntry:
    """
    单个条目及其已取得的元数据。

    name=基本名（不含路径），path=查询元数据用的完整路径，
    permissions=9 位权限（0o777 以内），size=字节数（int 无上限，>=2^31 也不会截断），
    mtime=修改时间（epoch 秒）。
    """

    name: str
    path: str
    kind: EntryKind
    permissions: int
    link_count: int
    owner_id: int
    group_id: int
    size: int
    mtime: float


@dataclass(frozen=True)
class ListingOptions:
    """一次调用的全局选项；width 为 None 时使用终端宽度。"""

    show_hidden: bool = False
    long_form: bool = False
    sort_key: SortKey = SortKey.NAME
    reverse: bool = False
    width: int | None = None


class ListingError(Exception):
    """列表过程中的错误，携带出错路径与原因。"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DirectoryUnavailable(ListingError):
    """目录无法打开或枚举；只中止该参数的列表。"""


class MetadataUnavailable(ListingError):
    """无法获取某路径的元数据（权限不足、悬空、枚举后被删除等）；只跳过该条目。"""
