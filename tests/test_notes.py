import pytest

from sfxdisabler.notes import CheckState, Note, NoteSelection


def test_note_order_follows_labels():
    selection = NoteSelection()
    assert selection.set_all(True) is CheckState.CHECKED
    assert [note.label for note in selection.selected()] == [
        "EXTAP", "AIR", "AIRHOLD", "TAP", "HOLD", "SLIDE", "FLICK", "DAMAGE",
    ]


def test_air_excludes_airhold_in_acroarts():
    assert Note.AIR.matches_acroarts("chu_ef_air_up")
    assert not Note.AIR.matches_acroarts("chu_ef_airhold_loop")
    assert Note.AIRHOLD.matches_acroarts("chu_ef_airhold_loop")


@pytest.mark.parametrize(
    "note, name",
    [
        (Note.EXTAP, "chu_ef_ex_tap"),
        (Note.TAP, "chu_ef_tap_bomb01"),
        (Note.TAP, "CHU_EF_TAP_REACTION_a"),
        (Note.HOLD, "chu_ef_hold_a"),
        (Note.SLIDE, "chu_ef_slide_a"),
        (Note.FLICK, "chu_ef_flick_a"),
        (Note.DAMAGE, "chu_ef_dmg_a"),
    ],
)
def test_acroarts_names_match_their_note(note, name):
    assert note.matches_acroarts(name)
    others = [other for other in Note if other is not note and other.matches_acroarts(name)]
    assert others == []


def test_tap_requires_bomb_or_reaction():
    assert not Note.TAP.matches_acroarts("chu_ef_tap_other")


def test_pattern_needs_a_suffix():
    assert not Note.HOLD.matches_acroarts("chu_ef_hold")
    assert not Note.HOLD.matches_uvc("ntt_hold")


@pytest.mark.parametrize(
    "note, name",
    [
        (Note.EXTAP, "ntt_extap_1"),
        (Note.AIR, "ntt_air_1"),
        (Note.AIRHOLD, "NTT_AH_1"),
        (Note.TAP, "ntt_tap_1"),
        (Note.HOLD, "ntt_hold_1"),
        (Note.SLIDE, "ntt_slide_1"),
        (Note.FLICK, "ntt_flick_1"),
        (Note.DAMAGE, "ntt_dmg_1"),
    ],
)
def test_uvc_names_match_their_note(note, name):
    assert note.matches_uvc(name)
    others = [other for other in Note if other is not note and other.matches_uvc(name)]
    assert others == []


def test_new_selection_is_empty():
    selection = NoteSelection()
    assert selection.selected() == []
    assert selection.state() is CheckState.UNCHECKED


def test_partial_and_full_states():
    selection = NoteSelection()
    assert selection.set(Note.TAP, True) is CheckState.PARTIALLY_CHECKED
    assert selection.is_checked(Note.TAP)
    assert selection.set_all(True) is CheckState.CHECKED
    assert selection.selected() == list(Note)
    assert selection.set(Note.DAMAGE, False) is CheckState.PARTIALLY_CHECKED
    assert not selection.is_checked(Note.DAMAGE)


def test_toggle_all_cycle():
    selection = NoteSelection()
    assert selection.toggle_all() is CheckState.CHECKED
    assert selection.toggle_all() is CheckState.UNCHECKED
    selection.set(Note.AIR, True)
    assert selection.toggle_all() is CheckState.CHECKED
    assert selection.selected() == list(Note)


def test_update_sets_exactly():
    selection = NoteSelection()
    selection.set_all(True)
    selection.update([Note.FLICK, Note.EXTAP])
    assert selection.selected() == [Note.EXTAP, Note.FLICK]