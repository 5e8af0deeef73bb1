"""
List widget.

Bulleted, numbered and checkbox lists with an optional selected item and a
scroll window for lists longer than the space they are given.
"""
import typing
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from quarktui.core.style import StyleSpec, visible_length
from quarktui.widgets.base import RenderContext, Widget
from quarktui.widgets.layout import align_text, compute_scroll_window, fit_line

MARKERS = {
    "bullet": "•",
    "numbered": "",
    "dash": "-",
    "arrow": "›",
    "check": "✓",
    "checkbox": "☐",
    "none": "",
}

CHECKBOX_CHECKED = "☑"
CHECKBOX_UNCHECKED = "☐"


@dataclass
class ListItem:
    """A list entry with its own style, checkbox state or marker."""
    text: str
    style: StyleSpec = None
    checked: bool = False
    marker: Optional[str] = None


ItemInput = Union[str, ListItem]


def _as_item(item: ItemInput) -> ListItem:
    return item if isinstance(item, ListItem) else ListItem(str(item))


class List(Widget):
    """A vertical list of items.

    Args:
        items: Strings or ListItem values
        style: bullet, numbered, dash, arrow, check, checkbox or none
        align: Alignment of each line inside the available width
        indent: Spaces before the marker
        gap: Spaces between marker and text
        selected_index: Absolute index of the highlighted item
        selected_marker: Marker drawn in front of the highlighted item
        selected_style: Text style of the highlighted item
        max_visible: Line budget, including indicator lines
        scroll_offset: First item to show when the list is scrolled
        show_scroll_indicators: Reserve lines for "more" indicators
        start_number: First number of a numbered list
    """

    kind = "list"

    def __init__(
        self,
        items: Sequence[ItemInput],
        style: str = "bullet",
        align: str = "left",
        indent: int = 0,
        gap: int = 1,
        selected_index: Optional[int] = None,
        selected_marker: str = "❯",
        selected_style: StyleSpec = ("bold",),
        max_visible: Optional[int] = None,
        scroll_offset: int = 0,
        show_scroll_indicators: bool = True,
        scroll_up_indicator: str = "↑ more...",
        scroll_down_indicator: str = "↓ more...",
        start_number: int = 1,
    ):
        self.items = [_as_item(item) for item in items]
        self.style = style
        self.align = align
        self.indent = max(0, indent)
        self.gap = max(0, gap)
        self.selected_index = selected_index
        self.selected_marker = selected_marker
        self.selected_style = selected_style
        self.max_visible = max_visible
        self.scroll_offset = scroll_offset
        self.show_scroll_indicators = show_scroll_indicators
        self.scroll_up_indicator = scroll_up_indicator
        self.scroll_down_indicator = scroll_down_indicator
        self.start_number = start_number

    def marker_for(self, index: int) -> str:
        """Marker of the item at an absolute index (ignores selection)."""
        item = self.items[index]
        if item.marker is not None:
            return item.marker
        if self.style == "checkbox":
            return CHECKBOX_CHECKED if item.checked else CHECKBOX_UNCHECKED
        if self.style == "numbered":
            return f"{self.start_number + index}."
        return MARKERS.get(self.style, "")

    def marker_width(self) -> int:
        if self.style == "none":
            return 0
        if self.style == "numbered":
            return len(f"{self.start_number + len(self.items) - 1}.")
        widths = [visible_length(MARKERS.get(self.style, ""))]
        widths.extend(visible_length(item.marker) for item in self.items if item.marker is not None)
        return max(widths)

    def _place(self, ctx: RenderContext, line: str) -> str:
        return fit_line(align_text(line, ctx.inner_width, self.align), ctx.inner_width)

    def render(self, ctx: RenderContext) -> typing.List[str]:
        if not self.items:
            return []

        marker_width = self.marker_width()
        padded_width = max(marker_width, visible_length(self.selected_marker))
        indent = " " * self.indent
        gap = " " * self.gap
        window = compute_scroll_window(
            len(self.items), self.max_visible, self.scroll_offset, self.show_scroll_indicators
        )

        def indicator(text: str) -> str:
            return self._place(ctx, indent + " " * padded_width + gap + ctx.styled(text, "muted"))

        lines = []
        if self.show_scroll_indicators and window.has_more_above:
            lines.append(indicator(self.scroll_up_indicator))

        for index in range(window.start, window.end):
            item = self.items[index]
            selected = index == self.selected_index
            text = ctx.styled(item.text, self.selected_style if selected else item.style)
            if self.style == "none" and not selected:
                lines.append(self._place(ctx, indent + text))
                continue
            marker = self.selected_marker if selected and self.selected_marker else self.marker_for(index)
            marker = align_text(marker, padded_width, "right")
            marker = ctx.styled(marker, "highlight" if selected else "muted")
            lines.append(self._place(ctx, indent + marker + gap + text))

        if self.show_scroll_indicators and window.has_more_below:
            lines.append(indicator(self.scroll_down_indicator))
        return lines


def BulletList(items: Sequence[ItemInput]) -> List:
    return List(items, style="bullet")


def NumberedList(items: Sequence[ItemInput], start_number: int = 1) -> List:
    return List(items, style="numbered", start_number=start_number)


def CheckboxList(items: Sequence[ItemInput]) -> List:
    return List(items, style="checkbox")
