# sfxdisabler

A small desktop tool for switching off, and later restoring, the note hit
effects and the stage background animations of a game installation.

Nothing is deleted. Files that are switched off are moved into a `DISABLED`
folder next to where they were. The restore actions move them back. A move
is skipped when its target already exists.

## Installing

```
pip install .
```

The window uses Tkinter, which ships with most Python installations. The
package needs no other libraries.

## Using the window

```
sfxdisabler
```

1. Press the browse button (浏览) next to the main path (主路径) and choose
   the game's root directory. It must contain a `data` directory and a `bin`
   directory that holds `segatools.ini`. If it does not, you can retry or
   cancel.
2. The `option` directory comes from the `option` key in the `[vfs]` section
   of `segatools.ini`. A relative or missing value is taken relative to
   `bin`. The `data` directory is `<root>/data`. Confirm the detected paths.
   If they are wrong, choose both directories yourself with the two other
   browse buttons.
3. Once both paths are known, every note type is ticked and the controls
   become available:
   - **背景动画** (background animation): the ✕ button moves the `stage`
     folder of `data/A000`, and the `stage` folder of every directory in
     `option`, into a `DISABLED` folder beside it. The ↺ button moves them
     back.
   - **音符特效** (note effects): tick the note types whose effects should go:
     EXTAP, AIR, AIRHOLD, TAP, HOLD, SLIDE, FLICK, DAMAGE. **全选** (select
     all) clears a full selection and otherwise ticks every type. The ✕
     button moves the matching files in `data/acroarts` and `data/uvc` into
     `DISABLED`, together with the `chu_mark_number*` files in `uvc`. The ↺
     button moves everything in those two `DISABLED` folders back.

## Using it from Python

The file operations work without the window:

```python
from sfxdisabler.paths import detect_paths
from sfxdisabler.notes import Note
from sfxdisabler.effects import (
    disable_backgrounds,
    restore_backgrounds,
    disable_effects,
    restore_effects,
)

paths = detect_paths("D:/Game/App")  # raises InvalidGameRoot if the layout is wrong
disable_effects(paths.data, [Note.TAP, Note.HOLD])
disable_backgrounds(paths.data, paths.option)

# later
restore_effects(paths.data)
restore_backgrounds(paths.data, paths.option)
```

Each of the four effect functions returns a list of the paths the moved
entries now have.

- `sfxdisabler.paths`: `validate_root`, `read_option_path`, `detect_paths`,
  which returns a `GamePaths` with `root`, `option` and `data`. It raises
  `InvalidGameRoot`, a `ValueError`, when the layout is wrong.
- `sfxdisabler.notes`: the `Note` enum, with `matches_acroarts(name)` and
  `matches_uvc(name)`. Also `NoteSelection`, which records which note types
  are ticked (`set`, `set_all`, `update`, `toggle_all`, `selected`). Its
  `state()` gives the combined `CheckState`: `CHECKED`, `UNCHECKED` or
  `PARTIALLY_CHECKED`.
- `sfxdisabler.app`: `OptimizerWindow`, which can be built with
  `master=None` to drive its state and actions without a display, and
  `main()`.

## Running the tests

```
pip install ".[test]"
pytest
```