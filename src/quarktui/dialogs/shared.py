"""
Shared dialog layout.

Every dialog draws the same kind of frame: a bordered box with a header,
a divider, a body, another divider and a footer of key hints. Full-height
dialogs span the padded terminal; compact dialogs (select menus, spinners)
use a narrower frame centred on the screen.
"""
from typing import List, Optional, Sequence

from quarktui.config import DEFAULT_INTERNAL_PADDING
from quarktui.core.drawing import (FrameBuilder, calculate_centering_padding,
                                   get_frame_dimensions, get_padding)
from quarktui.core.style import style
from quarktui.core.terminal import TerminalSize
from quarktui.core.theme import Theme

# Lines around the body of a full-height dialog:
# header (empty, title, empty) + divider + divider + footer (empty, hints, empty) + borders
DIALOG_CHROME_LINES = 3 + 1 + 1 + 3 + 2

PAD = " " * DEFAULT_INTERNAL_PADDING


def format_hints(hints: Sequence[str]) -> str:
    """Dim the key part (first word) of each hint and join them."""
    formatted = []
    for hint in hints:
        key, sep, action = hint.partition(" ")
        formatted.append(style(key, "dim") + sep + action)
    return "  ".join(formatted)


def fit_body(lines: List[str], height: int) -> List[str]:
    """Centre body lines vertically in ``height`` lines, cutting overflow."""
    if len(lines) >= height:
        return lines[:height]
    extra = height - len(lines)
    top = extra // 2
    return [""] * top + lines + [""] * (extra - top)


class DialogFrame:
    """Collects the lines of one dialog frame.

    Args:
        size: Terminal size to lay out for
        frame_width: Width of a compact, centred frame. Without it the frame
            spans the terminal minus the layout padding.
        theme: Theme for border colours (defaults to the current theme)
    """

    def __init__(self, size: TerminalSize, frame_width: Optional[int] = None, theme: Optional[Theme] = None):
        self.size = size
        self.compact = frame_width is not None
        dims = get_frame_dimensions(size)
        padding = get_padding()
        if self.compact:
            self.width = frame_width
            margin = max(0, (size.width - frame_width) // 2)
        else:
            self.width = dims.width
            margin = padding.x
        self.height = dims.height
        self.inner_width = max(0, self.width - 2)
        self.builder = FrameBuilder(self.inner_width, theme=theme, margin=margin)
        self.lines: List[str] = []

    @property
    def body_height(self) -> int:
        """Lines available between the dividers of a full-height dialog."""
        return max(1, self.height - DIALOG_CHROME_LINES)

    def top(self) -> "DialogFrame":
        self.lines.append(self.builder.top_border())
        return self

    def bottom(self) -> "DialogFrame":
        self.lines.append(self.builder.bottom_border())
        return self

    def divider(self) -> "DialogFrame":
        self.lines.append(self.builder.divider())
        return self

    def empty(self, count: int = 1) -> "DialogFrame":
        self.lines.extend(self.builder.empty() for _ in range(count))
        return self

    def line(self, content: str) -> "DialogFrame":
        self.lines.append(self.builder.line(content))
        return self

    def centered(self, content: str) -> "DialogFrame":
        self.lines.append(self.builder.centered(content))
        return self

    def body(self, lines: List[str], height: Optional[int] = None, centered: bool = False) -> "DialogFrame":
        """Add body lines, optionally fitted to a fixed height."""
        if height is not None:
            lines = fit_body(lines, height)
        for content in lines:
            if centered and content:
                self.centered(content)
            else:
                self.line(content)
        return self

    def header(self, title_line: str, description: Optional[str] = None, tall: bool = False) -> "DialogFrame":
        """Header block: a centred title line between empty lines.

        With ``tall`` a fourth line holds the (muted) description, or stays
        empty when there is none.
        """
        self.empty()
        self.centered(title_line)
        if tall or description:
            if description:
                self.centered(style(description, "muted"))
            else:
                self.empty()
        self.empty()
        return self

    def footer(self, hints: Sequence[str], centered: bool = False) -> "DialogFrame":
        self.empty()
        if centered:
            self.centered(format_hints(hints))
        else:
            self.line(PAD + format_hints(hints))
        self.empty()
        return self

    def finish(self, center: Optional[bool] = None) -> List[str]:
        """The frame with its vertical offset applied.

        Compact frames are centred vertically by default, full-height frames
        start below the layout padding.
        """
        if center is None:
            center = self.compact
        if center:
            top = calculate_centering_padding(len(self.lines), self.size)
        else:
            top = get_padding().y
        return [""] * top + self.lines
