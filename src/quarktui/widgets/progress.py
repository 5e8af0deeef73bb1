"""
Progress bar widget.
"""
import math
from typing import Dict, List, Optional

from quarktui.core.style import visible_length
from quarktui.core.theme import BOLD, RESET, get_current_theme
from quarktui.widgets.base import RenderContext, Widget
from quarktui.widgets.layout import align_text, fit_line


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


CHAR_SETS: Dict[str, Dict[str, str]] = {
    "block": {"filled": "█", "empty": "░", "left": "", "right": ""},
    "line": {"filled": "━", "empty": "─", "left": "╸", "right": "╺"},
    "ascii": {"filled": "=", "empty": "-", "left": "[", "right": "]"},
    "dots": {"filled": "●", "empty": "○", "left": "", "right": ""},
    "gradient": {"filled": "█", "empty": "▒", "left": "▐", "right": "▌"},
}

LABEL_POSITIONS = ("left", "right", "inside", "none")


class ProgressBar(Widget):
    """Horizontal progress bar with a percentage, value or custom label.

    Args:
        value: Current value, clamped to ``[0, max]``
        max: Value that counts as complete
        width: Total bar width including end caps (defaults to the space left
            next to the label)
        style: block, line, ascii, dots or gradient
        show_percentage: Show "N%" when no other label applies
        show_value: Show "value/max" instead of the percentage
        label: Explicit label, takes precedence over both
        label_position: left, right, inside or none
        filled_color: ANSI prefix for the filled part (theme highlight by default)
        empty_color: ANSI prefix for the empty part (theme muted text by default)
        chars: Overrides for individual characters of the style
    """

    kind = "progress"

    def __init__(
        self,
        value: float,
        max: float = 1,
        width: Optional[int] = None,
        style: str = "block",
        show_percentage: bool = True,
        show_value: bool = False,
        label: Optional[str] = None,
        label_position: str = "right",
        align: str = "left",
        filled_color: Optional[str] = None,
        empty_color: Optional[str] = None,
        chars: Optional[Dict[str, str]] = None,
    ):
        self.value = value
        self.max = max
        self.width = width
        self.chars = {**CHAR_SETS.get(style, CHAR_SETS["block"]), **(chars or {})}
        self.show_percentage = show_percentage
        self.show_value = show_value
        self.label = label
        self.label_position = label_position if label_position in LABEL_POSITIONS else "right"
        self.align = align
        self.filled_color = filled_color
        self.empty_color = empty_color

    @property
    def percentage(self) -> float:
        if self.max <= 0:
            return 0.0
        return min(max(self.value, 0), self.max) / self.max * 100

    def format_label(self) -> str:
        if self.label is not None:
            return self.label
        if self.show_value:
            value = min(max(self.value, 0), self.max)
            return f"{round_half_up(value)}/{round_half_up(self.max)}"
        if self.show_percentage:
            return f"{round_half_up(self.percentage)}%"
        return ""

    def _bar(self, ctx: RenderContext, bar_width: int, overlay: str = "") -> str:
        colors = (ctx.theme or get_current_theme()).colors
        filled_color = self.filled_color if self.filled_color is not None else colors.highlight
        empty_color = self.empty_color if self.empty_color is not None else colors.text_muted
        fill = min(bar_width, round_half_up(self.percentage / 100 * bar_width))

        cells = [self.chars["filled"]] * fill + [self.chars["empty"]] * (bar_width - fill)
        label_start = (bar_width - len(overlay)) // 2
        parts = []
        for i, char in enumerate(cells):
            color = filled_color if i < fill else empty_color
            if overlay and label_start <= i < label_start + len(overlay):
                parts.append(f"{color}{BOLD}{overlay[i - label_start]}{RESET}")
            else:
                parts.append(f"{color}{char}{RESET}")
        return self.chars["left"] + "".join(parts) + self.chars["right"]

    def render(self, ctx: RenderContext) -> List[str]:
        label = self.format_label()
        caps = visible_length(self.chars["left"]) + visible_length(self.chars["right"])

        if self.width:
            bar_width = self.width - caps
        else:
            label_space = len(label) + 1 if label and self.label_position in ("left", "right") else 0
            bar_width = ctx.inner_width - caps - label_space
        bar_width = max(1, bar_width)

        if self.label_position == "inside" and label and len(label) <= bar_width:
            output = self._bar(ctx, bar_width, overlay=label)
        elif self.label_position == "left" and label:
            output = f"{label} {self._bar(ctx, bar_width)}"
        elif self.label_position == "right" and label:
            output = f"{self._bar(ctx, bar_width)} {label}"
        else:
            output = self._bar(ctx, bar_width)

        return [fit_line(align_text(output, ctx.inner_width, self.align), ctx.inner_width)]


def Progress(value: float, style: str = "block") -> ProgressBar:
    return ProgressBar(value, style=style)
