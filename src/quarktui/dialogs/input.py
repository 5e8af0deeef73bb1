"""
Text input dialog.

A single-line editor with placeholder, optional masking (for passwords),
length limit and validation.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from quarktui.core.keyboard import KeypressEvent, is_cancel_key, is_printable
from quarktui.core.style import style
from quarktui.core.terminal import TerminalSize
from quarktui.dialogs.shared import PAD, DialogFrame, fit_body
from quarktui.screen import Screen, run_screen
from quarktui.utils.logging_config import get_logger

logger = get_logger(__name__)

INPUT_HINTS = ["⏎ Submit", "⌫ Delete/Back", "Ctrl+C Cancel"]

Validator = Callable[[str], Optional[str]]


@dataclass
class TextInputResult:
    """``type`` is "submitted" (with ``value``) or "cancelled"."""
    type: str
    value: Optional[str] = None

    @property
    def submitted(self) -> bool:
        return self.type == "submitted"


class TextInputDialog(Screen):
    """Single-line text entry.

    Args:
        title: Title shown in the header
        placeholder: Muted text shown while the value is empty
        initial_value: Starting value
        validate: Returns an error message for invalid values, None otherwise
        max_length: Maximum number of characters (None for unlimited)
        info_lines: Dim lines shown above the input
        mask_input: Show ``mask_char`` instead of the typed characters
        mask_char: Character used for masking
    """

    def __init__(
        self,
        title: str,
        placeholder: str = "",
        initial_value: str = "",
        validate: Optional[Validator] = None,
        max_length: Optional[int] = None,
        info_lines: Optional[Sequence[str]] = None,
        mask_input: bool = False,
        mask_char: str = "•",
    ):
        super().__init__()
        self.title = title
        self.placeholder = placeholder
        self.value = initial_value
        self.validate = validate
        self.max_length = max_length
        self.info_lines = list(info_lines or [])
        self.mask_input = mask_input
        self.mask_char = mask_char
        self.error: Optional[str] = None

    def input_line(self) -> str:
        prefix = style("›", "highlight") + " "
        cursor = style("▋", "cursor")
        if not self.value:
            placeholder = style(self.placeholder, "muted") if self.placeholder else ""
            return f"{PAD}{prefix}{cursor}{placeholder}"
        shown = self.mask_char * len(self.value) if self.mask_input else self.value
        return f"{PAD}{prefix}{shown}{cursor}"

    def compose(self, size: TerminalSize) -> List[str]:
        frame = DialogFrame(size)
        height = frame.body_height

        frame.top()
        frame.header(style(self.title, "bold", "accent"))
        frame.divider()
        if self.info_lines:
            for line in self.info_lines:
                frame.line(PAD + style(line, "dim"))
            frame.empty()
            height -= len(self.info_lines) + 1
        if self.error:
            height -= 2
        frame.body(fit_body([self.input_line()], max(1, height)))
        if self.error:
            frame.empty()
            frame.line(PAD + style(f"! {self.error}", "error"))
        frame.divider()
        frame.footer(INPUT_HINTS)
        frame.bottom()
        return frame.finish()

    def _edited(self) -> None:
        self.error = None
        self.invalidate()

    def on_key(self, key: KeypressEvent) -> None:
        if key.name == "return":
            error = self.validate(self.value) if self.validate else None
            if error:
                logger.debug(f"Input for '{self.title}' rejected: {error}")
                self.error = error
                self.invalidate()
                return
            self.close(TextInputResult("submitted", self.value))
        elif is_cancel_key(key) or key.name == "escape":
            self.close(TextInputResult("cancelled"))
        elif key.name == "backspace":
            if not self.value:
                self.close(TextInputResult("cancelled"))
                return
            self.value = self.value[:-1]
            self._edited()
        elif key.name == "delete":
            return
        elif is_printable(key):
            if self.max_length and len(self.value) >= self.max_length:
                return
            self.value += key.char
            self._edited()


def text_input(
    title: str,
    placeholder: str = "",
    initial_value: str = "",
    validate: Optional[Validator] = None,
    max_length: Optional[int] = None,
    info_lines: Optional[Sequence[str]] = None,
    mask_input: bool = False,
    mask_char: str = "•",
) -> TextInputResult:
    """Ask for a line of text and wait until it is submitted or cancelled."""
    dialog = TextInputDialog(
        title, placeholder, initial_value, validate, max_length, info_lines, mask_input, mask_char
    )
    result = run_screen(dialog)
    return result if isinstance(result, TextInputResult) else TextInputResult("cancelled")


def password_input(title: str, **options) -> TextInputResult:
    """Like text_input, with the typed characters masked."""
    options["mask_input"] = True
    return text_input(title, **options)
