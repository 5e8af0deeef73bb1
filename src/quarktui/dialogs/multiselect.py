"""
Multi-select dialog.

A full-height checklist: space toggles the focused option, "a" and "n"
check all or none, Enter confirms once enough options are checked.
"""
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Sequence, Set, TypeVar

from quarktui.config import NUMBER_KEY_OPTION_LIMIT
from quarktui.core.exceptions import DialogError
from quarktui.core.keyboard import (KeypressEvent, get_number_key, is_back_key,
                                    is_confirm_key, is_down_key, is_up_key)
from quarktui.core.style import style
from quarktui.core.terminal import TerminalSize
from quarktui.dialogs.shared import PAD, DialogFrame
from quarktui.screen import Screen, run_screen

T = TypeVar("T")

CHECKBOX_CHECKED = "☑"
CHECKBOX_UNCHECKED = "☐"
CHECKBOX_DISABLED = "☒"

MULTISELECT_HINTS = ["↑↓ Navigate", "Space Toggle", "⏎ Confirm", "a All", "n None", "q Back"]


@dataclass
class MultiSelectOption(Generic[T]):
    label: str
    value: T
    hint: Optional[str] = None
    disabled: bool = False
    checked: bool = False


@dataclass
class MultiSelectResult(Generic[T]):
    """``type`` is "selected" (with ``values``) or "cancelled"."""
    type: str
    values: List[T] = field(default_factory=list)

    @property
    def selected(self) -> bool:
        return self.type == "selected"


class MultiSelectDialog(Screen):
    """Checklist dialog.

    Args:
        title: Title shown in the header
        options: Options to choose from (at least one)
        focused_index: Initially focused option
        info_lines: Dim lines shown above the options
        min_selections: Checked options needed before Enter confirms
        max_selections: Upper bound on checked options (None for unlimited)
        allow_number_keys: Enable 1-9 toggles (default: only with up to 9 options)
        subtitle: Dim text next to the title
        description: Muted line below the title

    Raises:
        DialogError: If there are no options or min_selections > max_selections
    """

    def __init__(
        self,
        title: str,
        options: Sequence[MultiSelectOption],
        focused_index: int = 0,
        info_lines: Optional[Sequence[str]] = None,
        min_selections: int = 0,
        max_selections: Optional[int] = None,
        allow_number_keys: Optional[bool] = None,
        subtitle: Optional[str] = None,
        description: Optional[str] = None,
    ):
        super().__init__()
        if not options:
            raise DialogError("A multi-select needs at least one option", dialog="multiselect")
        if max_selections is not None and min_selections > max_selections:
            raise DialogError(
                f"min_selections ({min_selections}) exceeds max_selections ({max_selections})",
                dialog="multiselect",
            )
        self.title = title
        self.options = list(options)
        self.info_lines = list(info_lines or [])
        self.min_selections = max(0, min_selections)
        self.max_selections = max_selections
        if allow_number_keys is None:
            allow_number_keys = len(self.options) <= NUMBER_KEY_OPTION_LIMIT
        self.allow_number_keys = allow_number_keys
        self.subtitle = subtitle
        self.description = description

        self.checked: Set[int] = {
            i for i, option in enumerate(self.options) if option.checked and not option.disabled
        }
        index = max(0, min(focused_index, len(self.options) - 1))
        while index < len(self.options) and self.options[index].disabled:
            index += 1
        self.focused_index = index if index < len(self.options) else 0

    @property
    def can_confirm(self) -> bool:
        return len(self.checked) >= self.min_selections

    def _at_limit(self) -> bool:
        return self.max_selections is not None and len(self.checked) >= self.max_selections

    def toggle(self, index: int) -> bool:
        """Flip one option; returns False when it is disabled or the limit is hit."""
        if not 0 <= index < len(self.options) or self.options[index].disabled:
            return False
        if index in self.checked:
            self.checked.discard(index)
            return True
        if self._at_limit():
            return False
        self.checked.add(index)
        return True

    def select_all(self) -> None:
        for i, option in enumerate(self.options):
            if option.disabled or i in self.checked:
                continue
            if self._at_limit():
                break
            self.checked.add(i)

    def select_none(self) -> None:
        self.checked.clear()

    def values(self) -> List[Any]:
        return [self.options[i].value for i in sorted(self.checked)]

    def _next_enabled(self, step: int) -> int:
        count = len(self.options)
        index = self.focused_index
        for _ in range(count):
            index = (index + step) % count
            if not self.options[index].disabled:
                return index
        return self.focused_index

    def selection_hint(self) -> str:
        hint = f"{len(self.checked)} selected"
        if self.min_selections > 0:
            hint += f" (min: {self.min_selections})"
        if self.max_selections is not None:
            hint += f" (max: {self.max_selections})"
        return hint

    def _checkbox(self, index: int) -> str:
        if self.options[index].disabled:
            return style(CHECKBOX_DISABLED, "muted")
        if index in self.checked:
            return style(CHECKBOX_CHECKED, "success")
        return style(CHECKBOX_UNCHECKED, "muted")

    def _option_line(self, index: int) -> str:
        option = self.options[index]
        if index == self.focused_index:
            prefix = PAD[:-1] + style("❯", "highlight") + " "
            label = style(option.label, "bold", "text")
        else:
            prefix = PAD + " "
            label = style(option.label, "dim")
        number = style(str(index + 1), "dim") + " " if self.allow_number_keys and index < 9 else ""
        hint = " " + style(f"({option.hint})", "muted") if option.hint else ""
        return f"{prefix}{self._checkbox(index)} {number}{label}{hint}"

    def visible_range(self, available: int) -> range:
        """Options in view for ``available`` body rows; always contains the focus."""
        count = len(self.options)
        slots = available if count <= available else max(1, available - 2)
        end = min(count, slots)
        start = 0
        if self.focused_index >= end:
            end = self.focused_index + 1
            start = max(0, end - slots)
        return range(start, end)

    def compose(self, size: TerminalSize) -> List[str]:
        frame = DialogFrame(size)
        available = frame.body_height - 1
        if self.description:
            available -= 1
        if self.info_lines:
            available -= len(self.info_lines) + 1
        available = max(1, available)

        title = style(self.title, "bold", "accent")
        if self.subtitle:
            title += "  " + style(self.subtitle, "dim")

        frame.top()
        frame.header(title, self.description)
        frame.divider()
        if self.info_lines:
            for line in self.info_lines:
                frame.line(PAD + style(line, "dim"))
            frame.empty()
        frame.line(PAD + style(self.selection_hint(), "muted"))

        visible = self.visible_range(available)
        rows = []
        if visible.start > 0:
            rows.append(PAD + style("↑ more...", "dim"))
        rows.extend(self._option_line(i) for i in visible)
        if visible.stop < len(self.options):
            rows.append(PAD + style("↓ more...", "dim"))
        rows.extend([""] * (available - len(rows)))
        frame.body(rows)

        frame.divider()
        frame.footer(MULTISELECT_HINTS)
        frame.bottom()
        return frame.finish()

    def on_key(self, key: KeypressEvent) -> None:
        if is_up_key(key):
            self.focused_index = self._next_enabled(-1)
        elif is_down_key(key):
            self.focused_index = self._next_enabled(1)
        elif key.name == "space":
            self.toggle(self.focused_index)
        elif is_confirm_key(key):
            if self.can_confirm:
                self.close(MultiSelectResult("selected", self.values()))
                return
        elif is_back_key(key):
            self.close(MultiSelectResult("cancelled"))
            return
        elif key.char == "a":
            self.select_all()
        elif key.char == "n":
            self.select_none()
        elif self.allow_number_keys:
            number = get_number_key(key)
            if number is None or not 1 <= number <= len(self.options):
                return
            self.toggle(number - 1)
        else:
            return
        self.invalidate()


def multi_select(
    title: str,
    options: Sequence[MultiSelectOption],
    focused_index: int = 0,
    info_lines: Optional[Sequence[str]] = None,
    min_selections: int = 0,
    max_selections: Optional[int] = None,
    allow_number_keys: Optional[bool] = None,
    subtitle: Optional[str] = None,
    description: Optional[str] = None,
) -> MultiSelectResult:
    """Show a checklist and wait until it is confirmed or cancelled."""
    dialog = MultiSelectDialog(
        title, options, focused_index, info_lines, min_selections, max_selections,
        allow_number_keys, subtitle, description,
    )
    result = run_screen(dialog)
    return result if isinstance(result, MultiSelectResult) else MultiSelectResult("cancelled")


def quick_multi_select(title: str, items: Sequence[str], initially_checked: Sequence[int] = ()) -> List[str]:
    """Checklist over plain strings.

    Returns:
        The checked strings, or an empty list when cancelled
    """
    checked = set(initially_checked)
    options = [MultiSelectOption(item, item, checked=i in checked) for i, item in enumerate(items)]
    result = multi_select(title, options)
    return result.values if result.selected else []
