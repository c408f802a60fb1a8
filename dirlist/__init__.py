"""dirlist - 目录列表工具（ls 风格：长格式、多列、按名称/时间/大小排序）"""

from dirlist.fs import collect_entries, list_entries, stat_entry
from dirlist.models import (
    DirectoryEntry,
    DirectoryUnavailable,
    EntryKind,
    ListingError,
    ListingOptions,
    MetadataUnavailable,
    SortKey,
)
from dirlist.render import format_long_line, format_permissions, layout_columns
from dirlist.sorting import sort_entries

__all__ = [
    "DirectoryEntry",
    "DirectoryUnavailable",
    "EntryKind",
    "ListingError",
    "ListingOptions",
    "MetadataUnavailable",
    "SortKey",
    "collect_entries",
    "format_long_line",
    "format_permissions",
    "layout_columns",
    "list_entries",
    "sort_entries",
    "stat_entry",
]
