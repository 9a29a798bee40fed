"""Moving background animations and note effects in and out of `DISABLED`."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable

from .notes import Note

DISABLED = "DISABLED"
STAGE = "stage"

_UVC_MARK_NUMBER = re.compile(r"^chu_mark_number.+$", re.IGNORECASE)


def _move(source: Path, target: Path) -> bool:
    """Rename `source` to `target` unless it is gone or `target` is taken."""
    if not source.exists() or target.exists():
        return False
    try:
        source.rename(target)
    except OSError:
        return False
    return True


def _option_subdirs(option_path: Path) -> list[Path]:
    if not option_path.is_dir():
        return []
    return sorted(
        entry for entry in option_path.iterdir()
        if entry.is_dir() and not entry.is_symlink()
    )


def _ensure_disabled(directory: Path) -> Path:
    disabled = directory / DISABLED
    if directory.is_dir():
        disabled.mkdir(exist_ok=True)
    return disabled


def disable_backgrounds(
    data_path: str | os.PathLike[str], option_path: str | os.PathLike[str]
) -> list[Path]:
    """Move every `stage` directory into a `DISABLED` sibling; return new paths."""
    moved = []
    a000 = Path(data_path) / "A000"
    disabled = _ensure_disabled(a000)
    if _move(a000 / STAGE, disabled / STAGE):
        moved.append(disabled / STAGE)
    for subdir in _option_subdirs(Path(option_path)):
        if (subdir / STAGE).exists():
            sub_disabled = _ensure_disabled(subdir)
            if _move(subdir / STAGE, sub_disabled / STAGE):
                moved.append(sub_disabled / STAGE)
    return moved


def restore_backgrounds(
    data_path: str | os.PathLike[str], option_path: str | os.PathLike[str]
) -> list[Path]:
    """Move disabled `stage` directories back; return the restored paths."""
    moved = []
    a000 = Path(data_path) / "A000"
    if _move(a000 / DISABLED / STAGE, a000 / STAGE):
        moved.append(a000 / STAGE)
    for subdir in _option_subdirs(Path(option_path)):
        if _move(subdir / DISABLED / STAGE, subdir / STAGE):
            moved.append(subdir / STAGE)
    return moved


def _entries(directory: Path) -> list[str]:
    if not directory.is_dir():
        return []
    return sorted(entry.name for entry in directory.iterdir())


def disable_effects(
    data_path: str | os.PathLike[str], notes: Iterable[Note]
) -> list[Path]:
    """Hide the effect files of the given note kinds, plus the combo numbers.

    Returns the new paths of the moved files.
    """
    chosen = {Note(note) for note in notes}
    ordered = [note for note in Note if note in chosen]
    moved = []

    acroarts = Path(data_path) / "acroarts"
    disabled = _ensure_disabled(acroarts)
    names = _entries(acroarts)
    for note in ordered:
        for name in names:
            if note.matches_acroarts(name) and _move(acroarts / name, disabled / name):
                moved.append(disabled / name)

    uvc = Path(data_path) / "uvc"
    disabled = _ensure_disabled(uvc)
    names = _entries(uvc)
    for note in ordered:
        for name in names:
            if note.matches_uvc(name) and _move(uvc / name, disabled / name):
                moved.append(disabled / name)
    for name in names:
        if _UVC_MARK_NUMBER.match(name) and _move(uvc / name, disabled / name):
            moved.append(disabled / name)
    return moved


def restore_effects(data_path: str | os.PathLike[str]) -> list[Path]:
    """Move everything under the `DISABLED` effect folders back; return new paths."""
    moved = []
    for folder in ("acroarts", "uvc"):
        directory = Path(data_path) / folder
        disabled = directory / DISABLED
        for name in _entries(disabled):
            if _move(disabled / name, directory / name):
                moved.append(directory / name)
    return moved