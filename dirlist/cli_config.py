"""
CLI 默认选项配置：从本地 ~/.config/dirlist/config.json 读取。

支持的键（均可省略）：all、long、reverse（bool），sort（name/time/size），width（正整数）。
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from dirlist.models import SortKey

_BOOL_KEYS = ("all", "long", "reverse")


def _config_dir() -> Path:
    """配置目录：~/.config/dirlist（所有平台统一）。"""
    return Path.home() / ".config" / "dirlist"


def _config_path() -> Path:
    return _config_dir() / "config.json"


def load_config() -> dict[str, Any] | None:
    """读取本地配置；不存在或无效则返回 None。"""
    p = _config_path()
    if not p.exists():
        return None
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def config_defaults(cfg: dict[str, Any] | None) -> dict[str, Any]:
    """将原始配置转换为校验过的默认值；未知键与类型不符的值被丢弃。"""
    defaults: dict[str, Any] = {}
    if not cfg:
        return defaults
    for key in _BOOL_KEYS:
        if isinstance(cfg.get(key), bool):
            defaults[key] = cfg[key]
    sort = cfg.get("sort")
    if isinstance(sort, str):
        try:
            defaults["sort"] = SortKey(sort.lower())
        except ValueError:
            pass
    width = cfg.get("width")
    if isinstance(width, int) and not isinstance(width, bool) and width > 0:
        defaults["width"] = width
    return defaults
