"""
Confirmation dialog: a question with two buttons.
"""
from typing import List, Optional

from quarktui.core.keyboard import (KeypressEvent, is_back_key, is_confirm_key,
                                    is_left_key, is_right_key)
from quarktui.core.style import style
from quarktui.core.terminal import TerminalSize
from quarktui.dialogs.shared import DialogFrame
from quarktui.screen import Screen, run_screen

CONFIRM_HINTS = ["←→ Switch", "⏎ Confirm", "y Yes", "n No", "⌫ Cancel"]


class ConfirmDialog(Screen):
    """Yes/no question. The result is True for confirm, False otherwise."""

    def __init__(
        self,
        title: str,
        message: Optional[str] = None,
        confirm_label: str = "Yes",
        cancel_label: str = "No",
        default_confirm: bool = False,
    ):
        super().__init__()
        self.title = title
        self.message = message
        self.confirm_label = confirm_label
        self.cancel_label = cancel_label
        self.selected_confirm = default_confirm

    def buttons(self) -> str:
        if self.selected_confirm:
            confirm = style(f"[ {self.confirm_label} ]", "success", "bold")
            cancel = style(f"  {self.cancel_label}  ", "dim")
        else:
            confirm = style(f"  {self.confirm_label}  ", "dim")
            cancel = style(f"[ {self.cancel_label} ]", "error", "bold")
        return f"{confirm}    {cancel}"

    def compose(self, size: TerminalSize) -> List[str]:
        frame = DialogFrame(size)
        height = frame.body_height

        frame.top()
        frame.header(f"{style('?', 'warning')} {style(self.title, 'bold')}")
        frame.divider()
        if self.message:
            frame.empty()
            frame.centered(style(self.message, "dim"))
            height -= 2
        frame.body([self.buttons()], height=max(1, height), centered=True)
        frame.divider()
        frame.footer(CONFIRM_HINTS)
        frame.bottom()
        return frame.finish()

    def on_key(self, key: KeypressEvent) -> None:
        if is_left_key(key) or is_right_key(key) or key.name == "tab":
            self.selected_confirm = not self.selected_confirm
            self.invalidate()
        elif is_confirm_key(key):
            self.close(self.selected_confirm)
        elif key.char in ("y", "Y"):
            self.close(True)
        elif key.char in ("n", "N") or is_back_key(key):
            self.close(False)


def confirm(
    title: str,
    message: Optional[str] = None,
    confirm_label: str = "Yes",
    cancel_label: str = "No",
    default_confirm: bool = False,
) -> bool:
    """Ask a yes/no question and wait for the answer."""
    return bool(run_screen(ConfirmDialog(title, message, confirm_label, cancel_label, default_confirm)))


def confirm_yes_no(title: str) -> bool:
    return confirm(title)
