"""
Box drawing and frame geometry.

Character sets for bordered frames, the outer padding applied around every
full-screen frame, and the arithmetic that turns a terminal size into frame
and content dimensions. ``FrameBuilder`` assembles bordered lines.
"""
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional

from quarktui.config import (DEFAULT_FRAME_WIDTH_PERCENT,
                             DEFAULT_MAX_FRAME_WIDTH, DEFAULT_PADDING_X,
                             DEFAULT_PADDING_Y, MIN_FRAME_WIDTH,
                             WINDOW_BORDER_LINES)
from quarktui.core.style import pad_center, pad_left, pad_right, repeat, slice_visible, visible_length
from quarktui.core.terminal import TerminalSize, get_terminal_size
from quarktui.core.theme import RESET, Theme, get_current_theme

BOX: Dict[str, str] = {
    "top_left": "╭",
    "top_right": "╮",
    "bottom_left": "╰",
    "bottom_right": "╯",
    "horizontal": "─",
    "vertical": "│",
    "tee_left": "├",
    "tee_right": "┤",
    "tee_top": "┬",
    "tee_bottom": "┴",
    "cross": "┼",
}

BOX_SHARP: Dict[str, str] = {
    **BOX,
    "top_left": "┌",
    "top_right": "┐",
    "bottom_left": "└",
    "bottom_right": "┘",
}

BOX_DOUBLE: Dict[str, str] = {
    "top_left": "╔",
    "top_right": "╗",
    "bottom_left": "╚",
    "bottom_right": "╝",
    "horizontal": "═",
    "vertical": "║",
    "tee_left": "╠",
    "tee_right": "╣",
    "tee_top": "╦",
    "tee_bottom": "╩",
    "cross": "╬",
}


@dataclass
class LayoutConfig:
    """Outer padding between the terminal edge and a full-screen frame."""
    padding_x: int = DEFAULT_PADDING_X
    padding_y: int = DEFAULT_PADDING_Y


class FrameDimensions(NamedTuple):
    width: int
    height: int
    inner_width: int
    inner_height: int


class Padding(NamedTuple):
    x: int
    y: int


_layout = LayoutConfig()


def set_layout(padding_x: Optional[int] = None, padding_y: Optional[int] = None) -> None:
    """Change the outer frame padding; negative values are clamped to 0."""
    if padding_x is not None:
        _layout.padding_x = max(0, padding_x)
    if padding_y is not None:
        _layout.padding_y = max(0, padding_y)


def get_layout() -> LayoutConfig:
    """A copy of the current layout configuration."""
    return LayoutConfig(_layout.padding_x, _layout.padding_y)


def get_padding() -> Padding:
    return Padding(_layout.padding_x, _layout.padding_y)


def get_frame_dimensions(size: Optional[TerminalSize] = None) -> FrameDimensions:
    """Size of the full-screen frame for a terminal size.

    Args:
        size: Terminal size (defaults to the current terminal)

    Returns:
        Outer frame width/height and the space inside its borders, all >= 0
    """
    size = size or get_terminal_size()
    width = max(0, size.width - _layout.padding_x * 2)
    height = max(0, size.height - _layout.padding_y * 2)
    return FrameDimensions(width, height, max(0, width - 2), max(0, height - 2))


def calculate_frame_width(
    max_width: int = DEFAULT_MAX_FRAME_WIDTH,
    percent: float = DEFAULT_FRAME_WIDTH_PERCENT,
    size: Optional[TerminalSize] = None,
) -> int:
    """Width of a narrower, horizontally centred frame.

    The width is a percentage of the terminal, capped at ``max_width``, never
    below MIN_FRAME_WIDTH and never wider than the padded terminal.
    """
    size = size or get_terminal_size()
    available = max(0, size.width - _layout.padding_x * 2)
    width = min(max_width, int(size.width * percent))
    return max(0, min(max(width, MIN_FRAME_WIDTH), available))


def calculate_centering_padding(content_height: int, size: Optional[TerminalSize] = None) -> int:
    """Blank lines needed above a block to centre it vertically."""
    size = size or get_terminal_size()
    return max(0, (size.height - content_height) // 2)


def calculate_content_height(
    header_lines: int,
    footer_lines: int,
    divider_lines: int = 2,
    size: Optional[TerminalSize] = None,
) -> int:
    """Lines left for content inside a full-screen frame."""
    dims = get_frame_dimensions(size)
    return max(1, dims.height - WINDOW_BORDER_LINES - header_lines - footer_lines - divider_lines)


def horizontal_rule(width: int, char: str = BOX["horizontal"]) -> str:
    return repeat(char, width)


class FrameBuilder:
    """Builds the lines of a bordered frame.

    Content lines are padded (or cut) to ``inner_width`` so the right border
    always lines up.

    Example:
        frame = FrameBuilder(inner_width=40)
        lines = [frame.top_border(), frame.line("hello"), frame.bottom_border()]
    """

    def __init__(
        self,
        inner_width: int,
        theme: Optional[Theme] = None,
        box: Optional[Dict[str, str]] = None,
        margin: int = 0,
    ):
        self.inner_width = max(0, inner_width)
        self.theme = theme
        self.box = box or BOX
        self.margin = " " * max(0, margin)

    def _border(self, text: str) -> str:
        colors = (self.theme or get_current_theme()).colors
        return f"{colors.border}{text}{RESET}"

    def _fit(self, content: str) -> str:
        if visible_length(content) > self.inner_width:
            return slice_visible(content, self.inner_width)
        return content

    def top_border(self) -> str:
        box = self.box
        return self.margin + self._border(
            box["top_left"] + repeat(box["horizontal"], self.inner_width) + box["top_right"]
        )

    def bottom_border(self) -> str:
        box = self.box
        return self.margin + self._border(
            box["bottom_left"] + repeat(box["horizontal"], self.inner_width) + box["bottom_right"]
        )

    def divider(self) -> str:
        box = self.box
        return self.margin + self._border(
            box["tee_left"] + repeat(box["horizontal"], self.inner_width) + box["tee_right"]
        )

    def _wrap(self, body: str) -> str:
        vertical = self._border(self.box["vertical"])
        return f"{self.margin}{vertical}{body}{vertical}"

    def empty(self) -> str:
        return self._wrap(repeat(" ", self.inner_width))

    def line(self, content: str) -> str:
        """Left-aligned content line."""
        return self._wrap(pad_right(self._fit(content), self.inner_width))

    def centered(self, content: str) -> str:
        return self._wrap(pad_center(self._fit(content), self.inner_width))

    def right(self, content: str) -> str:
        return self._wrap(pad_left(self._fit(content), self.inner_width))

    def build(self, lines: List[str]) -> List[str]:
        """Wrap already-formatted content lines in a complete frame."""
        return [self.top_border(), *(self.line(line) for line in lines), self.bottom_border()]
