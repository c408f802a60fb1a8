"""
pytest 配置与共享 fixture。

样例目录内容见 tests.config；所有测试都把配置目录指向临时目录，避免读取用户 ~/.config/dirlist。
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from dirlist.models import DirectoryEntry, EntryKind

from tests.config import (
    SAMPLE_FILES,
    SAMPLE_HIDDEN,
    SAMPLE_SUBDIR,
    SAMPLE_SUBDIR_MTIME,
)


@pytest.fixture(autouse=True)
def _patch_config_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """将配置路径指向临时目录。"""
    config_dir = tmp_path / "dirlist-config"
    config_dir.mkdir(parents=True, exist_ok=True)

    def _config_dir():
        return config_dir

    monkeypatch.setattr("dirlist.cli_config._config_dir", _config_dir)
    return config_dir


@pytest.fixture
def config_dir(_patch_config_path: Path) -> Path:
    return _patch_config_path


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """含三个普通文件、一个隐藏文件和一个子目录的样例目录。"""
    d = tmp_path / "sample"
    d.mkdir()
    for name, (size, mtime) in SAMPLE_FILES.items():
        f = d / name
        f.write_bytes(b"x" * size)
        os.utime(f, (mtime, mtime))
    hidden = d / SAMPLE_HIDDEN
    hidden.write_text("secret")
    sub = d / SAMPLE_SUBDIR
    sub.mkdir()
    os.utime(sub, (SAMPLE_SUBDIR_MTIME, SAMPLE_SUBDIR_MTIME))
    return d


def make_entry(
    name: str,
    *,
    size: int = 0,
    mtime: float = 0.0,
    kind: EntryKind = EntryKind.REGULAR,
    permissions: int = 0o644,
    link_count: int = 1,
    owner_id: int = 0,
    group_id: int = 0,
) -> DirectoryEntry:
    """构造内存中的条目，用于排序与渲染的单元测试。"""
    return DirectoryEntry(
        name=name,
        path=f"/virtual/{name}",
        kind=kind,
        permissions=permissions,
        link_count=link_count,
        owner_id=owner_id,
        group_id=group_id,
        size=size,
        mtime=mtime,
    )
