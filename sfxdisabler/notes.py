"""Note kinds, the file names of their effects, and the note selection."""

from __future__ import annotations

import re
from enum import Enum, IntEnum
from typing import Iterable


class Note(IntEnum):
    """A kind of note whose hit effects can be disabled."""

    EXTAP = 0
    AIR = 1
    AIRHOLD = 2
    TAP = 3
    HOLD = 4
    SLIDE = 5
    FLICK = 6
    DAMAGE = 7

    @property
    def label(self) -> str:
        """The name shown for this note kind."""
        return self.name

    def matches_acroarts(self, name: str) -> bool:
        """Whether a file in `data/acroarts` belongs to this note kind."""
        return _ACROARTS_PATTERNS[self].match(name) is not None

    def matches_uvc(self, name: str) -> bool:
        """Whether a file in `data/uvc` belongs to this note kind."""
        return _UVC_PATTERNS[self].match(name) is not None


_ACROARTS_PATTERNS = {
    Note.EXTAP: re.compile(r"^chu_ef_ex.+$", re.IGNORECASE),
    Note.AIR: re.compile(r"^(?!chu_ef_airhold)(?=chu_ef_air).+$", re.IGNORECASE),
    Note.AIRHOLD: re.compile(r"^chu_ef_airhold.+$", re.IGNORECASE),
    Note.TAP: re.compile(r"^chu_ef_tap_(bomb|reaction).+$", re.IGNORECASE),
    Note.HOLD: re.compile(r"^chu_ef_hold.+$", re.IGNORECASE),
    Note.SLIDE: re.compile(r"^chu_ef_slide.+$", re.IGNORECASE),
    Note.FLICK: re.compile(r"^chu_ef_flick.+$", re.IGNORECASE),
    Note.DAMAGE: re.compile(r"^chu_ef_dmg.+$", re.IGNORECASE),
}

_UVC_PATTERNS = {
    Note.EXTAP: re.compile(r"^ntt_extap.+$", re.IGNORECASE),
    Note.AIR: re.compile(r"^ntt_air.+$", re.IGNORECASE),
    Note.AIRHOLD: re.compile(r"^ntt_ah.+$", re.IGNORECASE),
    Note.TAP: re.compile(r"^ntt_tap.+$", re.IGNORECASE),
    Note.HOLD: re.compile(r"^ntt_hold.+$", re.IGNORECASE),
    Note.SLIDE: re.compile(r"^ntt_slide.+$", re.IGNORECASE),
    Note.FLICK: re.compile(r"^ntt_flick.+$", re.IGNORECASE),
    Note.DAMAGE: re.compile(r"^ntt_dmg.+$", re.IGNORECASE),
}


class CheckState(Enum):
    """State of the "select all" box."""

    UNCHECKED = "unchecked"
    PARTIALLY_CHECKED = "partially_checked"
    CHECKED = "checked"


class NoteSelection:
    """Which note kinds are chosen for disabling; none at first."""

    def __init__(self) -> None:
        self._checked: dict[Note, bool] = {note: False for note in Note}

    def is_checked(self, note: Note) -> bool:
        return self._checked[Note(note)]

    def set(self, note: Note, checked: bool) -> CheckState:
        """Check or uncheck one note kind and return the overall state."""
        self._checked[Note(note)] = bool(checked)
        return self.state()

    def set_all(self, checked: bool) -> CheckState:
        """Check or uncheck every note kind and return the overall state."""
        for note in Note:
            self._checked[note] = bool(checked)
        return self.state()

    def selected(self) -> list[Note]:
        """The checked note kinds, in note order."""
        return [note for note in Note if self._checked[note]]

    def state(self) -> CheckState:
        checked = self.selected()
        if not checked:
            return CheckState.UNCHECKED
        if len(checked) == len(Note):
            return CheckState.CHECKED
        return CheckState.PARTIALLY_CHECKED

    def toggle_all(self) -> CheckState:
        """Act as a click on "select all": clear a full selection, else fill it."""
        return self.set_all(self.state() is not CheckState.CHECKED)

    def update(self, notes: Iterable[Note]) -> CheckState:
        """Make exactly the given note kinds checked."""
        wanted = {Note(note) for note in notes}
        for note in Note:
            self._checked[note] = note in wanted
        return self.state()