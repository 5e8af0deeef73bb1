"""
Divider widget: a horizontal rule, optionally with a label.
"""
from typing import List, Optional

from quarktui.core.style import StyleSpec, repeat, visible_length
from quarktui.widgets.base import RenderContext, Widget
from quarktui.widgets.layout import align_text, fit_line

DIVIDER_CHARS = {
    "line": "─",
    "double": "═",
    "thick": "━",
    "dashed": "╌",
    "dotted": "┄",
    "space": " ",
}


class Divider(Widget):
    """Horizontal rule.

    The rule spans the available width minus ``margin`` on both sides unless
    an explicit ``width`` is given. A label is embedded in the rule; with
    left/right alignment at most two rule characters sit on the near side.
    """

    kind = "divider"

    def __init__(
        self,
        label: Optional[str] = None,
        style: str = "line",
        label_align: str = "center",
        label_style: StyleSpec = None,
        line_style: StyleSpec = "dim",
        label_padding: int = 1,
        char: Optional[str] = None,
        width: Optional[int] = None,
        align: str = "left",
        margin: int = 0,
    ):
        self.label = label
        self.char = char or DIVIDER_CHARS.get(style, DIVIDER_CHARS["line"])
        self.label_align = label_align
        self.label_style = label_style
        self.line_style = line_style
        self.label_padding = max(0, label_padding)
        self.width = width
        self.align = align
        self.margin = max(0, margin)

    def render(self, ctx: RenderContext) -> List[str]:
        available = self.width if self.width is not None else ctx.inner_width - self.margin * 2
        width = max(1, available)

        if self.label:
            padding = " " * self.label_padding
            label = f"{padding}{self.label}{padding}"
            remaining = max(0, width - visible_length(label))
            if self.label_align == "left":
                left = min(2, remaining)
            elif self.label_align == "right":
                left = remaining - min(2, remaining)
            else:
                left = remaining // 2
            line = (
                ctx.styled(repeat(self.char, left), self.line_style)
                + ctx.styled(label, self.label_style)
                + ctx.styled(repeat(self.char, remaining - left), self.line_style)
            )
        else:
            line = ctx.styled(repeat(self.char, width), self.line_style)

        line = " " * self.margin + line
        return [fit_line(align_text(line, ctx.inner_width, self.align), ctx.inner_width)]


def HR(style: str = "line") -> Divider:
    return Divider(style=style)
