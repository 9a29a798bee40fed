"""Locating the `option` and `data` directories of a game installation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


class InvalidGameRoot(ValueError):
    """The chosen directory is not the root of a game installation."""


@dataclass(frozen=True)
class GamePaths:
    """The directories the tool works on."""

    root: Path
    option: Path
    data: Path


def validate_root(root: str | os.PathLike[str]) -> Path:
    """Check that `root` holds `data`, `bin` and `bin/segatools.ini`."""
    root = Path(root)
    if not (root / "data").exists():
        raise InvalidGameRoot(
            "当前目录不包含 `data` 目录，请重新选择游戏所在根目录。"
        )
    if not (root / "bin").exists():
        raise InvalidGameRoot(
            "当前目录不包含 `bin` 目录，请重新选择游戏所在根目录。"
        )
    if not (root / "bin" / "segatools.ini").exists():
        raise InvalidGameRoot(
            "`bin` 目录不包含 `segatools.ini` 文件，请重新选择游戏所在根目录。"
        )
    return root


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def read_option_path(root: str | os.PathLike[str]) -> str:
    """The `option` value of the `[vfs]` section of `bin/segatools.ini`, or ''."""
    ini = Path(root) / "bin" / "segatools.ini"
    section = ""
    found = ""
    with ini.open(encoding="utf-8", errors="replace") as lines:
        for raw in lines:
            line = raw.strip()
            if not line or line[0] in ";#":
                continue
            if line.startswith("[") and line.endswith("]"):
                section = line[1:-1].strip().lower()
                continue
            key, sep, value = line.partition("=")
            if sep and section == "vfs" and key.strip().lower() == "option":
                found = _unquote(value.strip())
    return found


def detect_paths(root: str | os.PathLike[str]) -> GamePaths:
    """Validate `root` and work out its `option` and `data` directories.

    A relative or missing `option` entry is taken relative to `bin`.
    """
    root = validate_root(root)
    data = Path(os.path.normpath(root / "data"))
    option = read_option_path(root)
    if not option or not Path(option).exists():
        option = os.path.normpath(os.path.join(root, "bin", option))
    return GamePaths(root=root, option=Path(option), data=data)