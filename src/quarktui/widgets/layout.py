"""
Layout algorithms shared by the widgets.

Alignment, word wrapping, cell fitting, column width resolution and list
scroll windows. Everything here is pure string arithmetic on visible
lengths; none of it raises for out-of-range sizes.
"""
from typing import List, NamedTuple, Optional, Sequence, Union

from quarktui.config import CELL_ELLIPSIS
from quarktui.core.exceptions import WidgetDefinitionError
from quarktui.core.style import repeat, slice_visible, strip_ansi, visible_length

ALIGNMENTS = ("left", "center", "right")

ColumnWidth = Union[int, str]


def align_text(text: str, width: int, align: str = "left") -> str:
    """Position one line inside ``width`` columns.

    Every alignment pads to the full width (left alignment pads on the
    right). Text that already fills the width is returned unchanged.

    Args:
        text: The line to align, may contain escape codes
        width: Target visible width
        align: "left", "center" or "right"

    Returns:
        A line whose visible length is ``max(width, visible_length(text))``
    """
    extra = width - visible_length(text)
    if extra <= 0:
        return text
    if align == "center":
        left = extra // 2
        return repeat(" ", left) + text + repeat(" ", extra - left)
    if align == "right":
        return repeat(" ", extra) + text
    return text + repeat(" ", extra)


def left_offset(content_width: int, width: int, align: str = "left") -> int:
    """Columns to indent a block of ``content_width`` inside ``width``."""
    extra = width - content_width
    if extra <= 0:
        return 0
    if align == "center":
        return extra // 2
    if align == "right":
        return extra
    return 0


def _hard_split(word: str, max_width: int) -> List[str]:
    # Styling cannot survive a cut through the middle of a word
    plain = strip_ansi(word)
    return [plain[i:i + max_width] for i in range(0, len(plain), max_width)]


def wrap_text(text: str, max_width: int) -> List[str]:
    """Greedy word wrap.

    Words are joined with single spaces while the line fits; a word longer
    than the width is split into width-sized chunks.

    Args:
        text: A single line of text
        max_width: Maximum visible width of each output line

    Returns:
        At least one line. With ``max_width <= 0`` the text comes back as is.
    """
    if max_width <= 0:
        return [text]

    lines: List[str] = []
    current = ""
    for word in text.split(" "):
        if current and visible_length(current) + 1 + visible_length(word) <= max_width:
            current = f"{current} {word}"
            continue
        if current:
            lines.append(current)
            current = ""
        if visible_length(word) > max_width:
            chunks = _hard_split(word, max_width)
            lines.extend(chunks[:-1])
            current = chunks[-1]
        else:
            current = word
    if current:
        lines.append(current)
    return lines or [""]


def wrap_lines(text: str, max_width: int) -> List[str]:
    """Wrap text that may contain newlines, paragraph by paragraph."""
    lines: List[str] = []
    for paragraph in text.split("\n"):
        if max_width > 0 and visible_length(paragraph) > max_width:
            lines.extend(wrap_text(paragraph, max_width))
        else:
            lines.append(paragraph)
    return lines


def fit_text(text: str, width: int, align: str = "left") -> str:
    """Make a cell exactly ``width`` columns wide.

    Long cells are cut to ``width - 1`` characters plus an ellipsis (a
    single-column cell is simply cut); short cells are padded per alignment.
    """
    if width <= 0:
        return ""
    length = visible_length(text)
    if length > width:
        if width > 1:
            return slice_visible(text, width - 1) + CELL_ELLIPSIS
        return slice_visible(text, width)
    return align_text(text, width, align)


def fit_line(line: str, width: int) -> str:
    """Cut a line to ``width`` visible columns; a zero width leaves it alone."""
    if width > 0 and visible_length(line) > width:
        return slice_visible(line, width)
    return line


def parse_column_width(width: ColumnWidth, index: int = None) -> ColumnWidth:
    """Validate a column width definition.

    Args:
        width: A non-negative int, "auto", "flex" or a percentage like "25%"
        index: Column position, reported in errors

    Returns:
        The width, with percentages normalised to "N%"

    Raises:
        WidgetDefinitionError: If the width is not one of the accepted forms
    """
    if isinstance(width, bool):
        raise WidgetDefinitionError(f"Invalid column width: {width!r}", widget="columns", index=index)
    if isinstance(width, int):
        if width < 0:
            raise WidgetDefinitionError(f"Negative column width: {width}", widget="columns", index=index)
        return width
    if isinstance(width, str):
        value = width.strip()
        if value in ("auto", "flex"):
            return value
        if value.endswith("%"):
            try:
                percent = float(value[:-1])
            except ValueError:
                percent = -1.0
            if percent >= 0:
                return f"{value[:-1].strip()}%"
    raise WidgetDefinitionError(f"Invalid column width: {width!r}", widget="columns", index=index)


def _percent(width: str) -> float:
    return float(width[:-1]) / 100


def resolve_column_widths(
    widths: Sequence[ColumnWidth],
    contents: Sequence[Sequence[str]],
    available_width: int,
    gap: int = 2,
    min_width: int = 1,
) -> List[int]:
    """Turn column width definitions into concrete widths.

    Fixed and auto columns are sized first, then percentage columns (of the
    full available width), then flex columns share what is left. The last
    flex column takes the rounding remainder so flex columns consume exactly
    the remaining space. Every width is finally raised to ``min_width``,
    which may overflow the available width.

    Args:
        widths: One validated width definition per column
        contents: Rendered lines per column, used for "auto" columns
        available_width: Width of the whole row
        gap: Spaces between adjacent columns
        min_width: Smallest width any column gets

    Returns:
        One width per column
    """
    count = len(widths)
    if count == 0:
        return []

    available_width = max(0, available_width)
    remaining = available_width - gap * (count - 1)
    resolved: List[Optional[int]] = [None] * count
    flex_count = 0

    for i, width in enumerate(widths):
        if isinstance(width, int):
            resolved[i] = max(min_width, width)
            remaining -= resolved[i]
        elif width == "auto":
            lines = contents[i] if i < len(contents) else []
            resolved[i] = max([visible_length(line) for line in lines] + [min_width])
            remaining -= resolved[i]
        elif width == "flex":
            flex_count += 1

    for i, width in enumerate(widths):
        if isinstance(width, str) and width.endswith("%"):
            resolved[i] = max(min_width, int(available_width * _percent(width)))
            remaining -= resolved[i]

    if flex_count:
        flex_width = max(min_width, remaining // flex_count)
        assigned = 0
        for i, width in enumerate(widths):
            if width != "flex":
                continue
            assigned += 1
            if assigned == flex_count:
                resolved[i] = max(min_width, remaining - flex_width * (flex_count - 1))
            else:
                resolved[i] = flex_width

    return [max(min_width, width if width is not None else min_width) for width in resolved]


class ScrollWindow(NamedTuple):
    """Visible slice ``[start, end)`` of a longer list."""
    start: int
    end: int
    has_more_above: bool
    has_more_below: bool

    @property
    def visible_count(self) -> int:
        return self.end - self.start


def compute_scroll_window(
    item_count: int,
    max_visible: Optional[int] = None,
    scroll_offset: int = 0,
    show_indicators: bool = True,
) -> ScrollWindow:
    """Work out which items of a list are shown.

    When indicators are shown, each active "more above/below" indicator takes
    one line of the ``max_visible`` budget away from the items.

    Args:
        item_count: Total number of items
        max_visible: Line budget, None for unlimited
        scroll_offset: Requested first visible item
        show_indicators: Whether indicator lines are reserved

    Returns:
        The visible window
    """
    item_count = max(0, item_count)
    start, end = 0, item_count
    if max_visible is not None and max_visible < item_count:
        max_visible = max(0, max_visible)
        start = max(0, min(scroll_offset, item_count - max_visible))
        end = min(item_count, start + max_visible)

    has_more_above = start > 0
    has_more_below = end < item_count
    if show_indicators and max_visible is not None:
        visible = end - start
        if has_more_above:
            visible = max(0, min(visible, max_visible - 1))
        if has_more_below:
            visible = max(0, min(visible, max_visible - (1 if has_more_above else 0) - 1))
        end = start + visible

    return ScrollWindow(start, end, has_more_above, end < item_count)
