"""The main window: choose the game directories, then hide or restore effects."""

from __future__ import annotations

import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox

from . import effects
from .notes import CheckState, Note, NoteSelection
from .paths import InvalidGameRoot, detect_paths

TITLE = "音符特效/背景动画 禁用工具"
FONT = ("黑体", 10)
ROOT_HINT = "单击“浏览”按钮选择游戏根目录"
OPTION_HINT = "`option` 与 `data` 会自动识别"
DATA_HINT = "若识别有误则请手动选择"
WRONG_PATH = "路径有误"
MANUAL_HINT = "请手动选择 `option` 目录与 `data` 目录。"
CONFIRM_TITLE = "识别是否正确？"
CURSOR = "hand2"


class OptimizerWindow:
    """The tool's window and its state.

    With `master` set to None no widgets are built; the state and the
    actions still work, which lets the window be driven without a display.
    """

    def __init__(self, master: tk.Misc | None) -> None:
        self.master = master
        self.selection = NoteSelection()
        self.root_text = ROOT_HINT
        self.option_text = OPTION_HINT
        self.data_text = DATA_HINT
        self.root_path: Path | None = None
        self.option_path: Path | None = None
        self.data_path: Path | None = None
        self.manual_browse_enabled = False
        self.paths_confirmed = False
        self._widgets: dict[str, object] | None = None
        if master is not None:
            self._build(master)
        self._refresh()

    # -- widgets ---------------------------------------------------------

    def _build(self, master: tk.Misc) -> None:
        top = master.winfo_toplevel()
        top.title(TITLE)
        top.geometry("360x440")
        top.resizable(False, False)
        top.option_add("*Font", FONT)

        widgets: dict[str, object] = {}
        rows = (
            ("root", "主路径", self.browse_root),
            ("option", "option", self.browse_option),
            ("data", "data", self.browse_data),
        )
        for row, (key, caption, command) in enumerate(rows):
            y = 15 + 40 * row
            tk.Label(master, text=caption, anchor="e").place(
                x=10, y=y + 5, width=40, height=20
            )
            var = tk.StringVar(master)
            tk.Entry(master, textvariable=var, state="readonly").place(
                x=60, y=y, width=240, height=30
            )
            button = tk.Button(master, text="浏览", command=command, cursor=CURSOR)
            button.place(x=300, y=y, width=50, height=30)
            widgets[f"{key}_var"] = var
            widgets[f"{key}_button"] = button

        bga = tk.LabelFrame(master, text="背景动画")
        bga.place(x=220, y=140, width=120, height=45)
        sfx = tk.LabelFrame(master, text="音符特效")
        sfx.place(x=220, y=190, width=120, height=240)

        tools = (
            ("bga_del", bga, "✕", self.disable_backgrounds, 70),
            ("bga_res", bga, "↺", self.restore_backgrounds, 90),
            ("sfx_del", sfx, "✕", self.disable_effects, 70),
            ("sfx_res", sfx, "↺", self.restore_effects, 90),
        )
        for key, frame, text, command, x in tools:
            button = tk.Button(frame, text=text, command=command, cursor=CURSOR)
            button.place(x=x, y=0, width=20, height=20)
            widgets[key] = button

        checkall_var = tk.StringVar(master, value=CheckState.UNCHECKED.value)
        checkall = tk.Checkbutton(
            sfx,
            text="全选",
            variable=checkall_var,
            onvalue=CheckState.CHECKED.value,
            offvalue=CheckState.UNCHECKED.value,
            tristatevalue=CheckState.PARTIALLY_CHECKED.value,
            command=self._on_checkall_clicked,
            cursor=CURSOR,
            anchor="w",
        )
        checkall.place(x=10, y=0, width=60, height=18)
        widgets["checkall_var"] = checkall_var
        widgets["checkall"] = checkall

        note_vars = {}
        note_boxes = {}
        for note in Note:
            var = tk.IntVar(master, value=0)
            box = tk.Checkbutton(
                sfx,
                text=note.label,
                variable=var,
                command=lambda n=note: self._on_note_clicked(n),
                cursor=CURSOR,
                anchor="w",
            )
            box.place(x=10, y=25 + 25 * int(note), width=100, height=18)
            note_vars[note] = var
            note_boxes[note] = box
        widgets["note_vars"] = note_vars
        widgets["note_boxes"] = note_boxes
        self._widgets = widgets

    def _refresh(self) -> None:
        w = self._widgets
        if w is None:
            return
        w["root_var"].set(self.root_text)
        w["option_var"].set(self.option_text)
        w["data_var"].set(self.data_text)
        manual = tk.NORMAL if self.manual_browse_enabled else tk.DISABLED
        w["option_button"].configure(state=manual)
        w["data_button"].configure(state=manual)
        active = tk.NORMAL if self.paths_confirmed else tk.DISABLED
        for key in ("bga_del", "bga_res", "sfx_del", "sfx_res", "checkall"):
            w[key].configure(state=active)
        w["checkall_var"].set(self.selection.state().value)
        for note in Note:
            w["note_vars"][note].set(int(self.selection.is_checked(note)))
            w["note_boxes"][note].configure(state=active)

    def _on_note_clicked(self, note: Note) -> None:
        if self._widgets is not None:
            self.selection.set(note, bool(self._widgets["note_vars"][note].get()))
        self._refresh()

    def _on_checkall_clicked(self) -> None:
        self.selection.toggle_all()
        self._refresh()

    def _dialog_options(self) -> dict[str, object]:
        return {} if self.master is None else {"parent": self.master}

    # -- choosing directories --------------------------------------------

    def browse_root(self) -> None:
        """Ask for the game root and detect `option` and `data` from it."""
        while True:
            chosen = filedialog.askdirectory(
                title="选择游戏根目录", initialdir=".", mustexist=True,
                **self._dialog_options(),
            )
            if not chosen:
                return
            try:
                paths = detect_paths(chosen)
            except InvalidGameRoot as error:
                if messagebox.askretrycancel(
                    title=WRONG_PATH, message=str(error), **self._dialog_options()
                ):
                    continue
                return
            self.root_path = paths.root
            self.root_text = str(chosen)
            self.data_path = paths.data
            self.option_path = paths.option
            self._refresh()
            if messagebox.askyesno(
                title=CONFIRM_TITLE,
                message=f"option-> {paths.option}\ndata-> {paths.data}",
                **self._dialog_options(),
            ):
                self.option_text = str(paths.option)
                self.data_text = str(paths.data)
                self.manual_browse_enabled = False
                break
            messagebox.showinfo(
                title=WRONG_PATH, message=MANUAL_HINT, **self._dialog_options()
            )
            self.manual_browse_enabled = True
            self._refresh()
            return
        self.confirm_paths()

    def _ask_manual(self, title: str) -> str:
        start = str(self.root_path) if self.root_path is not None else "."
        return filedialog.askdirectory(
            title=title, initialdir=start, mustexist=True, **self._dialog_options()
        )

    def browse_option(self) -> None:
        """Ask for the `option` directory by hand."""
        chosen = self._ask_manual("选择 `option` 目录")
        if not chosen:
            return
        self.option_path = Path(chosen)
        self.option_text = str(chosen)
        self._refresh()
        if self.data_path is not None:
            self.confirm_paths()

    def browse_data(self) -> None:
        """Ask for the `data` directory by hand."""
        chosen = self._ask_manual("选择 `data` 目录")
        if not chosen:
            return
        self.data_path = Path(chosen)
        self.data_text = str(chosen)
        self._refresh()
        if self.option_path is not None:
            self.confirm_paths()

    def confirm_paths(self) -> None:
        """Enable the actions and select every note kind."""
        self.selection.set_all(True)
        self.paths_confirmed = True
        self._refresh()

    # -- actions -----------------------------------------------------------

    def _require_paths(self) -> tuple[Path, Path]:
        if not self.paths_confirmed or self.data_path is None or self.option_path is None:
            raise RuntimeError("the `option` and `data` directories are not chosen yet")
        return self.data_path, self.option_path

    def disable_backgrounds(self) -> list[Path]:
        data, option = self._require_paths()
        return effects.disable_backgrounds(data, option)

    def restore_backgrounds(self) -> list[Path]:
        data, option = self._require_paths()
        return effects.restore_backgrounds(data, option)

    def disable_effects(self) -> list[Path]:
        data, _ = self._require_paths()
        return effects.disable_effects(data, self.selection.selected())

    def restore_effects(self) -> list[Path]:
        data, _ = self._require_paths()
        return effects.restore_effects(data)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run until it is closed."""
    root = tk.Tk()
    OptimizerWindow(root)
    root.mainloop()
    return 0