"""
Select menu dialog.

A compact, centred list of options navigated with the arrow keys (or
j/k). Disabled options are skipped, number keys pick an option directly
when the list is short.
"""
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Sequence, TypeVar

from quarktui.config import NUMBER_KEY_OPTION_LIMIT, SELECT_MAX_VISIBLE_OPTIONS
from quarktui.core.drawing import calculate_frame_width
from quarktui.core.exceptions import DialogError
from quarktui.core.keyboard import (KeypressEvent, get_number_key, is_back_key,
                                    is_confirm_key, is_down_key, is_up_key)
from quarktui.core.style import style
from quarktui.core.terminal import TerminalSize
from quarktui.dialogs.shared import PAD, DialogFrame
from quarktui.screen import Screen, run_screen

T = TypeVar("T")

SELECT_HINTS = ["↑↓ Navigate", "⏎ Select", "q/⌫ Back"]


@dataclass
class MenuOption(Generic[T]):
    label: str
    value: T
    hint: Optional[str] = None
    disabled: bool = False


@dataclass
class SelectResult(Generic[T]):
    """Outcome of a select menu: ``type`` is "selected" or "cancelled"."""
    type: str
    value: Optional[T] = None

    @property
    def selected(self) -> bool:
        return self.type == "selected"


class SelectMenu(Screen):
    """Single-choice menu.

    Args:
        title: Title shown in the header
        options: Options to choose from (at least one)
        selected_index: Initially highlighted option
        info_lines: Dim lines shown above the options
        allow_number_keys: Enable 1-9 shortcuts (default: only with up to 9 options)
        hints: Footer hints

    Raises:
        DialogError: If there are no options
    """

    def __init__(
        self,
        title: str,
        options: Sequence[MenuOption],
        selected_index: int = 0,
        info_lines: Optional[Sequence[str]] = None,
        allow_number_keys: Optional[bool] = None,
        hints: Optional[Sequence[str]] = None,
    ):
        super().__init__()
        if not options:
            raise DialogError("A select menu needs at least one option", dialog="select")
        self.title = title
        self.options = list(options)
        self.info_lines = list(info_lines or [])
        if allow_number_keys is None:
            allow_number_keys = len(self.options) <= NUMBER_KEY_OPTION_LIMIT
        self.allow_number_keys = allow_number_keys
        self.hints = list(hints or SELECT_HINTS)

        index = max(0, min(selected_index, len(self.options) - 1))
        while index < len(self.options) and self.options[index].disabled:
            index += 1
        self.selected_index = index if index < len(self.options) else 0

    @property
    def max_visible(self) -> int:
        return min(len(self.options), SELECT_MAX_VISIBLE_OPTIONS)

    def visible_range(self) -> range:
        """Options currently in view; always contains the selection."""
        end = min(len(self.options), self.max_visible)
        start = 0
        if self.selected_index >= end:
            end = self.selected_index + 1
            start = max(0, end - self.max_visible)
        return range(start, end)

    def _next_enabled(self, step: int) -> int:
        count = len(self.options)
        index = self.selected_index
        for _ in range(count):
            index = (index + step) % count
            if not self.options[index].disabled:
                return index
        return self.selected_index

    def _option_line(self, index: int, show_numbers: bool) -> str:
        option = self.options[index]
        if index == self.selected_index:
            prefix = PAD[:-1] + style("❯", "highlight") + " "
            label = style(option.label, "bold", "text")
        else:
            prefix = PAD + " "
            label = style(option.label, "dim")
        number = style(str(index + 1), "dim") + " " if show_numbers and index < 9 else ""
        hint = " " + style(f"({option.hint})", "muted") if option.hint else ""
        return f"{prefix}{number}{label}{hint}"

    def compose(self, size: TerminalSize) -> List[str]:
        frame = DialogFrame(size, frame_width=calculate_frame_width(size=size))
        visible = self.visible_range()
        scrolling = len(self.options) > self.max_visible

        frame.top()
        frame.header(style(self.title, "bold", "accent"))
        frame.divider()
        if self.info_lines:
            for line in self.info_lines:
                frame.line(PAD + style(line, "dim"))
            frame.empty()

        rows = []
        if visible.start > 0:
            rows.append(PAD + style("↑ more...", "dim"))
        rows.extend(self._option_line(i, self.allow_number_keys) for i in visible)
        if visible.stop < len(self.options):
            rows.append(PAD + style("↓ more...", "dim"))
        rows.extend([""] * (self.max_visible + (2 if scrolling else 0) - len(rows)))
        frame.body(rows)

        frame.divider()
        frame.footer(self.hints)
        frame.bottom()
        return frame.finish()

    def on_key(self, key: KeypressEvent) -> None:
        if is_up_key(key):
            self.selected_index = self._next_enabled(-1)
            self.invalidate()
        elif is_down_key(key):
            self.selected_index = self._next_enabled(1)
            self.invalidate()
        elif is_confirm_key(key):
            option = self.options[self.selected_index]
            if not option.disabled:
                self.close(SelectResult("selected", option.value))
        elif is_back_key(key):
            self.close(SelectResult("cancelled"))
        elif self.allow_number_keys:
            number = get_number_key(key)
            if number is not None and 1 <= number <= len(self.options):
                option = self.options[number - 1]
                if not option.disabled:
                    self.close(SelectResult("selected", option.value))


def select_menu(
    title: str,
    options: Sequence[MenuOption],
    selected_index: int = 0,
    info_lines: Optional[Sequence[str]] = None,
    allow_number_keys: Optional[bool] = None,
) -> SelectResult:
    """Show a select menu and wait for a choice.

    Returns:
        SelectResult with the chosen value, or of type "cancelled"
    """
    menu = SelectMenu(title, options, selected_index, info_lines, allow_number_keys)
    result: Any = run_screen(menu)
    return result if isinstance(result, SelectResult) else SelectResult("cancelled")
