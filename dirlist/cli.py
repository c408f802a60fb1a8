"""
dirlist CLI：列出目录内容或单个文件信息，支持长格式、隐藏条目、按时间/大小排序及反序。

每个参数独立处理；单个参数或单个条目出错只报告到 stderr，其余照常输出。
"""

from __future__ import annotations

import os
from typing import Annotated, Optional

import typer

from dirlist.cli_config import config_defaults, load_config
from dirlist.fs import collect_entries, console_width, stat_entry
from dirlist.models import (
    DirectoryEntry,
    DirectoryUnavailable,
    EntryKind,
    ListingError,
    ListingOptions,
    SortKey,
)
from dirlist.render import format_long_line, render_listing
from dirlist.sorting import sort_entries

app = typer.Typer(
    name="dirlist",
    help="List directory contents. Defaults may be saved in ~/.config/dirlist/config.json.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _header(path: str) -> str:
    return f"Directory listing of {path} : "


def _echo(line: str, err: bool = False) -> None:
    """按文件系统编码输出原始字节；非 UTF-8 文件名（surrogateescape）原样写出而不是报错。"""
    typer.echo(os.fsencode(line), err=err)


def _build_options(
    show_all: bool,
    long_form: bool,
    sort_time: bool,
    sort_size: bool,
    reverse: bool,
    width: int | None,
) -> ListingOptions:
    """命令行开关叠加在配置默认值之上；-t 与 -S 同时给出时以 -S 为准。"""
    cfg = config_defaults(load_config())
    if sort_size:
        sort_key = SortKey.SIZE
    elif sort_time:
        sort_key = SortKey.TIME
    else:
        sort_key = cfg.get("sort", SortKey.NAME)
    return ListingOptions(
        show_hidden=show_all or cfg.get("all", False),
        long_form=long_form or cfg.get("long", False),
        sort_key=sort_key,
        reverse=reverse or cfg.get("reverse", False),
        width=width or cfg.get("width"),
    )


def _list_directory(
    path: str,
    options: ListingOptions,
    width: int,
    on_error,
) -> list[str]:
    """收集 -> 排序 -> 渲染；目录无法打开时抛出 DirectoryUnavailable。"""
    entries = collect_entries(path, options.show_hidden, on_error=on_error)
    ordered = sort_entries(entries, options.sort_key, options.reverse)
    return render_listing(ordered, options, width)


def _describe_file(entry: DirectoryEntry, options: ListingOptions) -> list[str]:
    if options.long_form:
        return [format_long_line(entry)]
    return [entry.name]


def run_listing(paths: list[str], options: ListingOptions) -> int:
    """
    依次处理每个参数并输出；返回出错次数（目录打不开、元数据获取失败均计入）。

    终端宽度每次调用只查询一次，所有参数共用。
    """
    failures: list[int] = [0]
    width = options.width or console_width()

    def report(err: ListingError) -> None:
        failures[0] += 1
        if isinstance(err, DirectoryUnavailable):
            _echo(f"error: cannot open directory {err.path}: {err.reason}", err=True)
        else:
            _echo(f"error: {err.path}: {err.reason}", err=True)

    if not paths:
        try:
            lines = _list_directory(".", options, width, report)
        except DirectoryUnavailable as e:
            report(e)
            lines = []
        for line in lines:
            _echo(line)
        return failures[0]

    for path in paths:
        try:
            target = stat_entry(path, name=path)
        except ListingError as e:
            report(e)
            continue
        # 多个参数时总是输出标题；单个参数只有目录才输出
        show_headers = len(paths) > 1 or target.kind is EntryKind.DIRECTORY
        if show_headers:
            _echo(_header(target.name))
        if target.kind is EntryKind.DIRECTORY:
            try:
                lines = _list_directory(target.path, options, width, report)
            except DirectoryUnavailable as e:
                report(e)
                lines = []
        else:
            lines = _describe_file(target, options)
        for line in lines:
            _echo(line)
        if show_headers:
            _echo("")
    return failures[0]


@app.command(help="List information about the given paths (the current directory by default)")
def list_cmd(
    paths: Annotated[Optional[list[str]], typer.Argument(help="Files or directories to list", show_default=False)] = None,
    long_form: Annotated[bool, typer.Option("-l", "--long", help="Use the long listing format")] = False,
    show_all: Annotated[bool, typer.Option("-a", "--all", help="Do not ignore entries starting with .")] = False,
    sort_time: Annotated[bool, typer.Option("-t", help="Sort by modification time, newest first")] = False,
    sort_size: Annotated[bool, typer.Option("-S", help="Sort by file size, largest first")] = False,
    reverse: Annotated[bool, typer.Option("-r", "--reverse", help="Reverse the sort order")] = False,
    width: Annotated[Optional[int], typer.Option("-w", "--width", min=1, help="Assume this terminal width")] = None,
) -> None:
    options = _build_options(show_all, long_form, sort_time, sort_size, reverse, width)
    if run_listing(list(paths or []), options):
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
