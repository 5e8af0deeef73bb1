"""
Widget renderer.

Flattens a sequence of widgets into display lines, optionally fitted to an
exact height. Rendering never writes to the terminal; callers decide what
happens to the lines.
"""
from typing import List, Sequence

from quarktui.core.style import repeat
from quarktui.widgets.base import RenderContext, Widget

VERTICAL_ALIGNMENTS = ("top", "center", "bottom")


def render(widgets: Sequence[Widget], ctx: RenderContext) -> List[str]:
    """Render widgets in order and concatenate their lines."""
    lines: List[str] = []
    for widget in widgets:
        lines.extend(widget.render(ctx))
    return lines


def render_fitted(
    widgets: Sequence[Widget],
    ctx: RenderContext,
    vertical_align: str = "center",
    pad_char: str = "",
) -> List[str]:
    """Render widgets into exactly ``ctx.content_height`` lines.

    Output that is too long is cut from the end. Short output is padded with
    blank lines (or lines of ``pad_char``); when centred, the odd extra line
    goes below the content.

    Args:
        widgets: Widgets to render
        ctx: Render context providing width and height
        vertical_align: "top", "center" or "bottom"
        pad_char: Character used to fill padding lines

    Returns:
        Exactly ``ctx.content_height`` lines
    """
    lines = render(widgets, ctx)
    height = ctx.content_height

    if len(lines) >= height:
        return lines[:height]

    extra = height - len(lines)
    pad_line = repeat(pad_char, ctx.inner_width) if pad_char else ""

    if vertical_align == "top":
        return lines + [pad_line] * extra
    if vertical_align == "bottom":
        return [pad_line] * extra + lines
    top = extra // 2
    return [pad_line] * top + lines + [pad_line] * (extra - top)
